"""Serializers for cantina subscriptions."""

from __future__ import annotations

from django.utils import timezone  # type: ignore
from rest_framework import serializers  # type: ignore

from .models import CantinaSubscription


class SubscriptionCreateSerializer(serializers.Serializer):
    plan_type = serializers.ChoiceField(choices=CantinaSubscription.PlanType.choices)


class SubscriptionUpgradeSerializer(serializers.Serializer):
    plan_type = serializers.ChoiceField(choices=CantinaSubscription.PlanType.choices)


class CantinaSubscriptionSerializer(serializers.ModelSerializer):
    user_id = serializers.ReadOnlyField(source="user.id")
    meal_limit = serializers.ReadOnlyField()
    meals_used = serializers.ReadOnlyField()
    meals_remaining_percentage = serializers.SerializerMethodField()
    days_until_renewal = serializers.SerializerMethodField()
    is_active = serializers.SerializerMethodField()
    is_due_for_renewal = serializers.SerializerMethodField()
    price = serializers.SerializerMethodField()

    class Meta:
        model = CantinaSubscription
        fields = [
            "id",
            "user_id",
            "plan_type",
            "meal_limit",
            "meals_remaining",
            "meals_used",
            "meals_remaining_percentage",
            "renews_at",
            "days_until_renewal",
            "is_active",
            "is_due_for_renewal",
            "price",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields

    def get_meals_remaining_percentage(self, obj: CantinaSubscription) -> int:
        return obj.meals_remaining_percentage()

    def get_days_until_renewal(self, obj: CantinaSubscription) -> int:
        return obj.days_until_renewal(timezone.now())

    def get_is_active(self, obj: CantinaSubscription) -> bool:
        return obj.is_active()

    def get_is_due_for_renewal(self, obj: CantinaSubscription) -> bool:
        return obj.is_due_for_renewal()

    def get_price(self, obj: CantinaSubscription) -> str:
        return str(obj.price.amount)
