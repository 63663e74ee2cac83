"""Serializers for user-related API endpoints."""

from __future__ import annotations

from django.contrib.auth import get_user_model  # type: ignore
from rest_framework import serializers  # type: ignore

User = get_user_model()


class UserSerializer(serializers.ModelSerializer):
    """User profile with membership and meal-credit flags."""

    has_active_membership = serializers.SerializerMethodField()
    has_meal_credits = serializers.SerializerMethodField()
    has_premium_access = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = [
            "id",
            "email",
            "username",
            "first_name",
            "last_name",
            "role",
            "has_active_membership",
            "has_meal_credits",
            "has_premium_access",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields

    def get_has_active_membership(self, obj) -> bool:  # type: ignore
        return obj.has_active_membership()

    def get_has_meal_credits(self, obj) -> bool:  # type: ignore
        return obj.has_meal_credits()

    def get_has_premium_access(self, obj) -> bool:  # type: ignore
        return obj.has_premium_access()
