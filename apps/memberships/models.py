"""Membership domain models for CoworkHub.

A membership grants access for a window ``[starts_at, ends_at)``. Its
state is derived from the clock: future before the window, active inside
it, expired from ``ends_at`` on.
"""

from __future__ import annotations

import math
from datetime import datetime, timedelta

from django.conf import settings  # type: ignore
from django.db import models  # type: ignore
from django.utils import timezone  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from apps.workspaces.models import AmenityTier
from shared.domain import pricing
from shared.domain.exceptions import StateError
from shared.domain.value_objects import Money


def _expiring_soon_days() -> int:
    return getattr(settings, "COWORK_EXPIRING_SOON_DAYS", 7)


class MembershipQuerySet(models.QuerySet):
    def active(self, now=None):
        now = now or timezone.now()
        return self.filter(starts_at__lte=now, ends_at__gt=now)

    def future(self, now=None):
        return self.filter(starts_at__gt=now or timezone.now())

    def expired(self, now=None):
        return self.filter(ends_at__lte=now or timezone.now())

    def expiring_soon(self, within_days=None, now=None):
        """Active memberships ending within the given number of days."""
        now = now or timezone.now()
        days = _expiring_soon_days() if within_days is None else within_days
        return self.active(now).filter(ends_at__lte=now + timedelta(days=days))

    def overlapping(self, starts_at, ends_at):
        return self.filter(starts_at__lt=ends_at, ends_at__gt=starts_at)

    def for_user(self, user):
        return self.filter(user=user)


class Membership(models.Model):
    """Access window of a user with an amenity tier."""

    class MembershipType(models.TextChoices):
        DAY_PASS = "day_pass", _("Day pass")
        WEEKLY = "weekly", _("Weekly")
        MONTHLY = "monthly", _("Monthly")

    AmenityTier = AmenityTier

    # Length of a new membership and of each extension
    DURATIONS = {
        MembershipType.DAY_PASS: timedelta(days=1),
        MembershipType.WEEKLY: timedelta(days=7),
        MembershipType.MONTHLY: timedelta(days=30),
    }

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="memberships",
    )
    membership_type = models.CharField(
        max_length=20,
        choices=MembershipType.choices,
        default=MembershipType.DAY_PASS,
    )
    amenity_tier = models.CharField(
        max_length=10,
        choices=AmenityTier.choices,
        default=AmenityTier.BASIC,
    )
    starts_at = models.DateTimeField()
    ends_at = models.DateTimeField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = MembershipQuerySet.as_manager()

    class Meta:
        verbose_name = _("Membership")
        verbose_name_plural = _("Memberships")
        ordering = ["-starts_at"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(ends_at__gt=models.F("starts_at")),
                name="membership_valid_window",
            ),
        ]
        indexes = [
            models.Index(fields=["user", "ends_at"], name="membership_user_ends_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.get_membership_type_display()} ({self.get_amenity_tier_display()}) for {self.user_id}"

    @classmethod
    def duration_for(cls, membership_type: str) -> timedelta:
        return cls.DURATIONS[cls.MembershipType(membership_type)]

    # --- State ---------------------------------------------------------------
    def is_active(self, now=None) -> bool:
        now = now or timezone.now()
        return self.starts_at <= now < self.ends_at

    def is_future(self, now=None) -> bool:
        return (now or timezone.now()) < self.starts_at

    def is_expired(self, now=None) -> bool:
        return self.ends_at <= (now or timezone.now())

    def is_expiring_soon(self, within_days=None, now=None) -> bool:
        now = now or timezone.now()
        days = _expiring_soon_days() if within_days is None else within_days
        return self.is_active(now) and self.ends_at - now <= timedelta(days=days)

    @property
    def duration_days(self) -> int:
        return (self.ends_at - self.starts_at).days

    def remaining_days(self, now=None) -> int:
        now = now or timezone.now()
        if self.is_expired(now):
            return 0
        if self.is_future(now):
            return self.duration_days
        return math.ceil((self.ends_at - now) / timedelta(days=1))

    @property
    def price(self) -> Money:
        return pricing.membership_price(self.membership_type, self.amenity_tier)

    def can_book_workspace(self, workspace) -> bool:
        """Premium covers every workspace, basic only basic ones."""
        if self.amenity_tier == AmenityTier.PREMIUM:
            return True
        return workspace.amenity_tier == AmenityTier.BASIC

    # --- Transitions ---------------------------------------------------------
    def extend(self, now: datetime | None = None) -> datetime:
        """Push ``ends_at`` forward by one increment of the membership type.

        Only an active membership can be extended. The update is conditional
        on the row still being active, so concurrent extensions each add
        exactly one increment. Returns the new ``ends_at``.
        """
        now = now or timezone.now()
        if not self.is_active(now):
            raise StateError("Only active memberships can be extended.")

        increment = self.duration_for(self.membership_type)
        updated = Membership.objects.filter(
            pk=self.pk, starts_at__lte=now, ends_at__gt=now
        ).update(ends_at=models.F("ends_at") + increment, updated_at=now)
        self.refresh_from_db(fields=["ends_at", "updated_at"])
        if not updated:
            raise StateError("Membership is no longer active.")
        return self.ends_at
