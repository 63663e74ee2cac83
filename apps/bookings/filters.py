"""FilterSet definitions for booking listings."""

from __future__ import annotations

import django_filters  # type: ignore

from .models import Booking


class BookingFilterSet(django_filters.FilterSet):
    workspace = django_filters.NumberFilter(field_name="workspace_id")
    user = django_filters.NumberFilter(field_name="user_id")
    date = django_filters.DateFilter(field_name="date")
    date_from = django_filters.DateFilter(field_name="date", lookup_expr="gte")
    date_to = django_filters.DateFilter(field_name="date", lookup_expr="lte")
    status = django_filters.ChoiceFilter(choices=Booking.Status.choices)
    upcoming = django_filters.BooleanFilter(method="filter_upcoming")

    class Meta:
        model = Booking
        fields = ["workspace", "user", "date", "status"]

    def filter_upcoming(self, queryset, name, value):  # type: ignore
        if value:
            return queryset.upcoming()
        return queryset
