"""Serializers for workspaces and workshop equipment."""

from __future__ import annotations

from django.core.exceptions import ValidationError as DjangoValidationError  # type: ignore
from rest_framework import serializers  # type: ignore

from .models import WorkshopEquipment, Workspace


class WorkshopEquipmentSerializer(serializers.ModelSerializer):
    is_available = serializers.ReadOnlyField()

    class Meta:
        model = WorkshopEquipment
        fields = [
            "id",
            "workspace",
            "name",
            "description",
            "quantity_available",
            "is_available",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]

    def validate(self, attrs):  # type: ignore
        workspace = attrs.get("workspace") or getattr(self.instance, "workspace", None)
        if workspace is not None and not workspace.is_workshop:
            raise serializers.ValidationError(
                {"workspace": "Equipment can only belong to a workshop."}
            )
        return attrs

    def save(self, **kwargs):  # type: ignore
        try:
            return super().save(**kwargs)
        except DjangoValidationError as exc:
            raise serializers.ValidationError(exc.messages)


class WorkspaceSerializer(serializers.ModelSerializer):
    equipment = WorkshopEquipmentSerializer(many=True, read_only=True)

    class Meta:
        model = Workspace
        fields = [
            "id",
            "name",
            "description",
            "workspace_type",
            "capacity",
            "hourly_rate",
            "amenity_tier",
            "equipment",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]


class AvailabilityQuerySerializer(serializers.Serializer):
    """Query parameters of the availability check."""

    date = serializers.DateField()
    start_time = serializers.TimeField()
    end_time = serializers.TimeField()

    def validate(self, attrs):  # type: ignore
        if attrs["start_time"] >= attrs["end_time"]:
            raise serializers.ValidationError({"end_time": "End time must be after start time."})
        return attrs
