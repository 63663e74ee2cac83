"""Workspace domain models for CoworkHub.

Workspaces are the bookable units (desks, offices, meeting rooms and
workshops). Workshops additionally own equipment that bookings may
reserve.
"""

from __future__ import annotations

from datetime import timedelta

from django.core.exceptions import ValidationError  # type: ignore
from django.core.validators import MaxValueValidator, MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils import timezone  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from shared.domain import pricing
from shared.domain.value_objects import TimeSlot


class AmenityTier(models.TextChoices):
    BASIC = "basic", _("Basic")
    PREMIUM = "premium", _("Premium")


class WorkspaceQuerySet(models.QuerySet):
    def available_on(self, day, start_time, end_time):
        """Workspaces without a pending/confirmed booking overlapping the slot."""
        from apps.bookings.models import Booking  # local import to avoid circular

        busy = Booking.objects.active().overlapping(day, start_time, end_time).values("workspace_id")
        return self.exclude(id__in=busy)

    def with_capacity_for(self, people: int):
        return self.filter(capacity__gte=people)

    def by_price(self, descending: bool = False):
        return self.order_by("-hourly_rate" if descending else "hourly_rate")


class Workspace(models.Model):
    """Bookable space."""

    class WorkspaceType(models.TextChoices):
        DESK = "desk", _("Hot desk")
        PRIVATE_OFFICE = "private_office", _("Private office")
        MEETING_ROOM = "meeting_room", _("Meeting room")
        WORKSHOP = "workshop", _("Workshop")

    AmenityTier = AmenityTier

    name = models.CharField(max_length=100)
    description = models.TextField(max_length=1000, blank=True)
    workspace_type = models.CharField(
        max_length=20,
        choices=WorkspaceType.choices,
        default=WorkspaceType.DESK,
    )
    capacity = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(1), MaxValueValidator(99)],
    )
    hourly_rate = models.DecimalField(
        max_digits=8,
        decimal_places=2,
        validators=[MinValueValidator(0), MaxValueValidator(9999.99)],
    )
    amenity_tier = models.CharField(
        max_length=10,
        choices=AmenityTier.choices,
        default=AmenityTier.BASIC,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = WorkspaceQuerySet.as_manager()

    class Meta:
        verbose_name = _("Workspace")
        verbose_name_plural = _("Workspaces")
        ordering = ["name"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(capacity__gte=1) & models.Q(capacity__lt=100),
                name="workspace_capacity_range",
            ),
            models.CheckConstraint(
                condition=models.Q(hourly_rate__gte=0) & models.Q(hourly_rate__lt=10000),
                name="workspace_hourly_rate_range",
            ),
        ]
        indexes = [
            models.Index(fields=["workspace_type", "amenity_tier"], name="workspace_type_tier_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.name} ({self.get_workspace_type_display()})"

    @property
    def is_workshop(self) -> bool:
        return self.workspace_type == self.WorkspaceType.WORKSHOP

    def available_equipment(self):
        if not self.is_workshop:
            return WorkshopEquipment.objects.none()
        return self.equipment.available()

    def available_at(self, day, start_time, end_time) -> bool:
        from apps.bookings.services import has_conflict  # local import to avoid circular

        return not has_conflict(self, day, start_time, end_time)

    def calculate_price(self, day, start_time, end_time):
        slot = TimeSlot(day, start_time, end_time)
        return pricing.booking_price(self.hourly_rate, slot.duration_minutes)

    def recent_bookings_count(self, days: int = 30) -> int:
        since = timezone.localdate() - timedelta(days=days)
        return self.bookings.filter(date__gte=since).count()


class WorkshopEquipmentQuerySet(models.QuerySet):
    def available(self):
        return self.filter(quantity_available__gt=0)

    def search_by_name(self, query: str):
        return self.filter(name__icontains=query)


class WorkshopEquipment(models.Model):
    """Tool or machine that bookings of a workshop can reserve."""

    workspace = models.ForeignKey(
        Workspace,
        on_delete=models.CASCADE,
        related_name="equipment",
    )
    name = models.CharField(max_length=100)
    description = models.TextField(max_length=1000, blank=True)
    quantity_available = models.PositiveSmallIntegerField(
        default=1,
        validators=[MaxValueValidator(99)],
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = WorkshopEquipmentQuerySet.as_manager()

    class Meta:
        verbose_name = _("Workshop equipment")
        verbose_name_plural = _("Workshop equipment")
        ordering = ["name"]

    def __str__(self) -> str:
        return f"{self.name} x{self.quantity_available} @ {self.workspace.name}"

    def clean(self) -> None:
        if self.workspace_id and not self.workspace.is_workshop:
            raise ValidationError(_("Equipment can only belong to a workshop."))

    def save(self, *args, **kwargs):  # type: ignore
        self.clean()
        super().save(*args, **kwargs)

    @property
    def is_available(self) -> bool:
        return self.quantity_available > 0

    def reserved_count_at(self, day, start_time, end_time, *, exclude_booking_id=None) -> int:
        from apps.bookings.services import reserved_equipment_count

        return reserved_equipment_count(
            self, day, start_time, end_time, exclude_booking_id=exclude_booking_id
        )

    def available_at(self, day, start_time, end_time) -> bool:
        return self.reserved_count_at(day, start_time, end_time) < self.quantity_available

    def available_quantity_at(self, day, start_time, end_time) -> int:
        return max(self.quantity_available - self.reserved_count_at(day, start_time, end_time), 0)
