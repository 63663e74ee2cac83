"""URL routing for memberships."""

from __future__ import annotations

from django.urls import include, path  # type: ignore
from rest_framework.routers import SimpleRouter  # type: ignore

from .views import MembershipViewSet

router = SimpleRouter()
router.register(r"", MembershipViewSet, basename="membership")

urlpatterns = [
    path("", include(router.urls)),
]
