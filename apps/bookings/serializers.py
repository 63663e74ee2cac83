"""Serializers for the booking domain."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import Booking


class BookingCreateSerializer(serializers.Serializer):
    """Input of the createBooking command."""

    workspace = serializers.IntegerField(min_value=1)
    date = serializers.DateField()
    start_time = serializers.TimeField()
    end_time = serializers.TimeField()
    equipment_ids = serializers.ListField(
        child=serializers.IntegerField(min_value=1),
        required=False,
        default=list,
    )


class BookingSerializer(serializers.ModelSerializer):
    """Detailed booking representation."""

    workspace_id = serializers.ReadOnlyField(source="workspace.id")
    workspace_name = serializers.ReadOnlyField(source="workspace.name")
    user_id = serializers.ReadOnlyField(source="user.id")
    duration_minutes = serializers.ReadOnlyField()
    is_cancellable = serializers.SerializerMethodField()

    class Meta:
        model = Booking
        fields = [
            "id",
            "workspace_id",
            "workspace_name",
            "user_id",
            "date",
            "start_time",
            "end_time",
            "duration_minutes",
            "status",
            "equipment_used",
            "calculated_price",
            "is_cancellable",
            "confirmed_at",
            "cancelled_at",
            "completed_at",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields

    def get_is_cancellable(self, obj: Booking) -> bool:
        return obj.is_cancellable()
