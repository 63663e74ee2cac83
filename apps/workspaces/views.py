"""API views for workspaces and workshop equipment."""

from __future__ import annotations

from rest_framework import permissions, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.users.permissions import IsAdminOrReadOnly

from .filters import WorkshopEquipmentFilterSet, WorkspaceFilterSet
from .models import WorkshopEquipment, Workspace
from .serializers import (
    AvailabilityQuerySerializer,
    WorkshopEquipmentSerializer,
    WorkspaceSerializer,
)


class WorkspaceViewSet(viewsets.ModelViewSet):
    """Workspaces: readable by any authenticated user, managed by admins."""

    queryset = Workspace.objects.prefetch_related("equipment").all()
    serializer_class = WorkspaceSerializer
    permission_classes = [permissions.IsAuthenticated, IsAdminOrReadOnly]
    filterset_class = WorkspaceFilterSet

    @action(detail=True, methods=["get"])
    def availability(self, request, pk=None):  # type: ignore
        workspace: Workspace = self.get_object()  # type: ignore
        query = AvailabilityQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        day = query.validated_data["date"]
        start_time = query.validated_data["start_time"]
        end_time = query.validated_data["end_time"]

        equipment = [
            {
                "id": item.pk,
                "name": item.name,
                "available_quantity": item.available_quantity_at(day, start_time, end_time),
            }
            for item in workspace.equipment.all()
        ]
        price = workspace.calculate_price(day, start_time, end_time)
        return Response(
            {
                "workspace": workspace.pk,
                "date": day,
                "start_time": start_time,
                "end_time": end_time,
                "available": workspace.available_at(day, start_time, end_time),
                "price": str(price.amount),
                "currency": price.currency,
                "equipment": equipment,
            }
        )


class WorkshopEquipmentViewSet(viewsets.ModelViewSet):
    queryset = WorkshopEquipment.objects.select_related("workspace").all()
    serializer_class = WorkshopEquipmentSerializer
    permission_classes = [permissions.IsAuthenticated, IsAdminOrReadOnly]
    filterset_class = WorkshopEquipmentFilterSet
