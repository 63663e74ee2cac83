"""Serializers for memberships."""

from __future__ import annotations

from django.utils import timezone  # type: ignore
from rest_framework import serializers  # type: ignore

from apps.workspaces.models import AmenityTier

from .models import Membership


class MembershipCreateSerializer(serializers.Serializer):
    membership_type = serializers.ChoiceField(choices=Membership.MembershipType.choices)
    amenity_tier = serializers.ChoiceField(choices=AmenityTier.choices, default=AmenityTier.BASIC)
    starts_at = serializers.DateTimeField(required=False, allow_null=True)
    # Administrators may open a membership for another user
    user = serializers.IntegerField(required=False, min_value=1)


class MembershipSerializer(serializers.ModelSerializer):
    user_id = serializers.ReadOnlyField(source="user.id")
    status = serializers.SerializerMethodField()
    duration_days = serializers.ReadOnlyField()
    remaining_days = serializers.SerializerMethodField()
    is_expiring_soon = serializers.SerializerMethodField()
    price = serializers.SerializerMethodField()

    class Meta:
        model = Membership
        fields = [
            "id",
            "user_id",
            "membership_type",
            "amenity_tier",
            "starts_at",
            "ends_at",
            "status",
            "duration_days",
            "remaining_days",
            "is_expiring_soon",
            "price",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields

    def _now(self):
        return self.context.get("now") or timezone.now()

    def get_status(self, obj: Membership) -> str:
        now = self._now()
        if obj.is_future(now):
            return "future"
        if obj.is_active(now):
            return "active"
        return "expired"

    def get_remaining_days(self, obj: Membership) -> int:
        return obj.remaining_days(self._now())

    def get_is_expiring_soon(self, obj: Membership) -> bool:
        return obj.is_expiring_soon(now=self._now())

    def get_price(self, obj: Membership) -> str:
        return str(obj.price.amount)
