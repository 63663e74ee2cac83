"""FilterSet definitions for cantina subscriptions."""

from __future__ import annotations

import django_filters  # type: ignore

from .models import CantinaSubscription

STATUS_CHOICES = (
    ("active", "Active"),
    ("depleted", "Depleted"),
    ("due_for_renewal", "Due for renewal"),
    ("renewing_soon", "Renewing soon"),
)


class CantinaSubscriptionFilterSet(django_filters.FilterSet):
    user = django_filters.NumberFilter(field_name="user_id")
    plan_type = django_filters.ChoiceFilter(choices=CantinaSubscription.PlanType.choices)
    status = django_filters.ChoiceFilter(choices=STATUS_CHOICES, method="filter_status")

    class Meta:
        model = CantinaSubscription
        fields = ["user", "plan_type"]

    def filter_status(self, queryset, name, value):  # type: ignore
        return getattr(queryset, value)()
