"""FilterSet definitions for membership listings."""

from __future__ import annotations

import django_filters  # type: ignore

from .models import Membership

STATUS_CHOICES = (
    ("active", "Active"),
    ("future", "Future"),
    ("expired", "Expired"),
    ("expiring_soon", "Expiring soon"),
)


class MembershipFilterSet(django_filters.FilterSet):
    user = django_filters.NumberFilter(field_name="user_id")
    membership_type = django_filters.ChoiceFilter(choices=Membership.MembershipType.choices)
    amenity_tier = django_filters.ChoiceFilter(choices=Membership.AmenityTier.choices)
    status = django_filters.ChoiceFilter(choices=STATUS_CHOICES, method="filter_status")

    class Meta:
        model = Membership
        fields = ["user", "membership_type", "amenity_tier"]

    def filter_status(self, queryset, name, value):  # type: ignore
        return getattr(queryset, value)()
