"""URL routing for workspaces."""

from __future__ import annotations

from django.urls import include, path  # type: ignore
from rest_framework.routers import SimpleRouter  # type: ignore

from .views import WorkshopEquipmentViewSet, WorkspaceViewSet

router = SimpleRouter()
# equipment first so its prefix is not read as a workspace pk
router.register(r"equipment", WorkshopEquipmentViewSet, basename="equipment")
router.register(r"", WorkspaceViewSet, basename="workspace")

urlpatterns = [
    path("", include(router.urls)),
]
