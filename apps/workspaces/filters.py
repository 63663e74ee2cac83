"""FilterSet definitions for workspace listings."""

from __future__ import annotations

import django_filters  # type: ignore
from rest_framework.exceptions import ValidationError  # type: ignore

from .models import AmenityTier, WorkshopEquipment, Workspace


class WorkspaceFilterSet(django_filters.FilterSet):
    """Filter by type, tier, size, price, and free slot.

    ``available_on`` only applies together with ``start_time`` and
    ``end_time``; the three describe one slot.
    """

    workspace_type = django_filters.ChoiceFilter(choices=Workspace.WorkspaceType.choices)
    amenity_tier = django_filters.ChoiceFilter(choices=AmenityTier.choices)
    min_capacity = django_filters.NumberFilter(field_name="capacity", lookup_expr="gte")
    max_hourly_rate = django_filters.NumberFilter(field_name="hourly_rate", lookup_expr="lte")
    available_on = django_filters.DateFilter(method="filter_available_on")
    start_time = django_filters.TimeFilter(method="filter_noop")
    end_time = django_filters.TimeFilter(method="filter_noop")

    class Meta:
        model = Workspace
        fields = ["workspace_type", "amenity_tier"]

    def filter_noop(self, queryset, name, value):  # type: ignore
        return queryset

    def filter_available_on(self, queryset, name, value):  # type: ignore
        start_time = self.form.cleaned_data.get("start_time")
        end_time = self.form.cleaned_data.get("end_time")
        if start_time is None or end_time is None:
            raise ValidationError({"available_on": "start_time and end_time are required."})
        if start_time >= end_time:
            raise ValidationError({"end_time": "End time must be after start time."})
        return queryset.available_on(value, start_time, end_time)


class WorkshopEquipmentFilterSet(django_filters.FilterSet):
    workspace = django_filters.NumberFilter(field_name="workspace_id")
    name = django_filters.CharFilter(field_name="name", lookup_expr="icontains")
    available = django_filters.BooleanFilter(method="filter_available")

    class Meta:
        model = WorkshopEquipment
        fields = ["workspace"]

    def filter_available(self, queryset, name, value):  # type: ignore
        if value:
            return queryset.available()
        return queryset
