"""URL routing for the cantina."""

from __future__ import annotations

from django.urls import include, path  # type: ignore
from rest_framework.routers import SimpleRouter  # type: ignore

from .views import CantinaSubscriptionViewSet

router = SimpleRouter()
router.register(r"subscriptions", CantinaSubscriptionViewSet, basename="cantina-subscription")

urlpatterns = [
    path("", include(router.urls)),
]
