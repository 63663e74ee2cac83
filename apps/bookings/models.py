"""Booking domain models for CoworkHub."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from django.conf import settings  # type: ignore
from django.db import models  # type: ignore
from django.utils import timezone  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from shared.domain.value_objects import TimeSlot


class BookingQuerySet(models.QuerySet):
    def active(self):
        """Bookings that hold their slot (pending or confirmed)."""
        return self.filter(status__in=Booking.BLOCKING_STATUSES)

    def confirmed_only(self):
        return self.filter(status=Booking.Status.CONFIRMED)

    def on_date(self, day):
        return self.filter(date=day)

    def overlapping(self, day, start_time, end_time):
        """Half-open overlap: start < other_end and other_start < end."""
        return self.filter(date=day, start_time__lt=end_time, end_time__gt=start_time)

    def upcoming(self, today=None):
        today = today or timezone.localdate()
        return (
            self.filter(date__gte=today)
            .exclude(status=Booking.Status.CANCELLED)
            .order_by("date", "start_time")
        )

    def past(self, today=None):
        return self.filter(date__lt=today or timezone.localdate())

    def for_user(self, user):
        return self.filter(user=user)

    def for_workspace(self, workspace):
        return self.filter(workspace=workspace)

    def ended_before(self, moment: datetime):
        """Bookings whose end (date + end_time, local time) is at or before moment."""
        local = timezone.localtime(moment)
        return self.filter(
            models.Q(date__lt=local.date())
            | models.Q(date=local.date(), end_time__lte=local.time())
        )


class Booking(models.Model):
    """Reservation of a workspace by a user for a time slot on one day."""

    class Status(models.TextChoices):
        PENDING = "pending", _("Pending")
        CONFIRMED = "confirmed", _("Confirmed")
        CANCELLED = "cancelled", _("Cancelled")
        COMPLETED = "completed", _("Completed")

    # Source states allowed for each transition
    BLOCKING_STATUSES = (Status.PENDING, Status.CONFIRMED)
    CONFIRMABLE_STATUSES = (Status.PENDING,)
    CANCELLABLE_STATUSES = (Status.PENDING, Status.CONFIRMED)
    COMPLETABLE_STATUSES = (Status.CONFIRMED,)

    workspace = models.ForeignKey(
        "workspaces.Workspace",
        on_delete=models.CASCADE,
        related_name="bookings",
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="bookings",
    )
    date = models.DateField()
    start_time = models.TimeField()
    end_time = models.TimeField()
    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.PENDING,
    )
    equipment_used = models.JSONField(
        default=list,
        blank=True,
        help_text=_("Ids of reserved workshop equipment."),
    )
    calculated_price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal("0.00"),
        help_text=_("Price fixed at booking time."),
    )
    confirmed_at = models.DateTimeField(null=True, blank=True)
    cancelled_at = models.DateTimeField(null=True, blank=True)
    completed_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = BookingQuerySet.as_manager()

    class Meta:
        verbose_name = _("Booking")
        verbose_name_plural = _("Bookings")
        ordering = ["-date", "-start_time"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(end_time__gt=models.F("start_time")),
                name="booking_valid_time_range",
            ),
        ]
        indexes = [
            models.Index(fields=["workspace", "date"], name="booking_workspace_date_idx"),
            models.Index(fields=["user", "date"], name="booking_user_date_idx"),
            models.Index(fields=["status"], name="booking_status_idx"),
        ]

    def __str__(self) -> str:
        return f"Booking #{self.pk} {self.workspace_id} {self.slot}"

    # --- Time ----------------------------------------------------------------
    @property
    def slot(self) -> TimeSlot:
        return TimeSlot(self.date, self.start_time, self.end_time)

    @property
    def duration_minutes(self) -> int:
        return self.slot.duration_minutes

    @property
    def duration_hours(self) -> Decimal:
        return self.slot.duration_hours

    @property
    def starts_at(self) -> datetime:
        return timezone.make_aware(self.slot.starts_at)

    @property
    def ends_at(self) -> datetime:
        return timezone.make_aware(self.slot.ends_at)

    # --- Lifecycle predicates ------------------------------------------------
    def is_cancellable(self, now=None) -> bool:
        now = now or timezone.now()
        return self.status in self.CANCELLABLE_STATUSES and self.starts_at > now

    def is_past(self, now=None) -> bool:
        return self.ends_at <= (now or timezone.now())

    def complete_if_past(self, now=None) -> bool:
        """Move a confirmed booking whose end has passed to completed.

        Conditional on the stored status, so a concurrent cancellation
        that committed first is never overwritten. Returns True only when
        this call performed the transition.
        """
        now = now or timezone.now()
        if self.status not in self.COMPLETABLE_STATUSES or not self.is_past(now):
            return False
        updated = Booking.objects.filter(
            pk=self.pk, status__in=self.COMPLETABLE_STATUSES
        ).update(status=self.Status.COMPLETED, completed_at=now, updated_at=now)
        self.refresh_from_db(fields=["status", "completed_at", "updated_at"])
        return bool(updated)
