"""Cantina subscription models for CoworkHub.

A subscription holds a meal-credit balance that resets every renewal
period. ``renews_at`` is the next renewal moment, not an expiry: once it
has passed the subscription is due and no meal can be used until it is
renewed.
"""

from __future__ import annotations

import math
from datetime import datetime, timedelta
from decimal import ROUND_HALF_UP, Decimal

from django.conf import settings  # type: ignore
from django.db import models  # type: ignore
from django.utils import timezone  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from shared.domain import pricing
from shared.domain.exceptions import InsufficientCreditsError, StateError, ValidationError
from shared.domain.value_objects import Money

RENEWAL_PERIOD = timedelta(days=30)


class CantinaSubscriptionQuerySet(models.QuerySet):
    def active(self, now=None):
        """Not due for renewal and with credits left."""
        return self.filter(renews_at__gt=now or timezone.now(), meals_remaining__gt=0)

    def depleted(self):
        return self.filter(meals_remaining=0)

    def due_for_renewal(self, now=None):
        return self.filter(renews_at__lte=now or timezone.now())

    def renewing_soon(self, within_days: int = 7, now=None):
        now = now or timezone.now()
        return self.filter(renews_at__gt=now, renews_at__lte=now + timedelta(days=within_days))

    def for_user(self, user):
        return self.filter(user=user)


class CantinaSubscription(models.Model):
    """Monthly meal plan of a user."""

    class PlanType(models.TextChoices):
        FIVE_MEALS = "five_meals", _("5 meals")
        TEN_MEALS = "ten_meals", _("10 meals")
        TWENTY_MEALS = "twenty_meals", _("20 meals")

    MEAL_LIMITS = {
        PlanType.FIVE_MEALS: 5,
        PlanType.TEN_MEALS: 10,
        PlanType.TWENTY_MEALS: 20,
    }

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="cantina_subscriptions",
    )
    plan_type = models.CharField(
        max_length=20,
        choices=PlanType.choices,
        default=PlanType.FIVE_MEALS,
    )
    meals_remaining = models.PositiveSmallIntegerField()
    renews_at = models.DateTimeField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = CantinaSubscriptionQuerySet.as_manager()

    class Meta:
        verbose_name = _("Cantina subscription")
        verbose_name_plural = _("Cantina subscriptions")
        ordering = ["renews_at"]
        constraints = [
            models.CheckConstraint(
                condition=(
                    models.Q(plan_type="five_meals", meals_remaining__lte=5)
                    | models.Q(plan_type="ten_meals", meals_remaining__lte=10)
                    | models.Q(plan_type="twenty_meals", meals_remaining__lte=20)
                )
                & models.Q(meals_remaining__gte=0),
                name="cantina_meals_within_plan_limit",
            ),
        ]
        indexes = [
            models.Index(fields=["user", "renews_at"], name="cantina_user_renews_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.get_plan_type_display()} for {self.user_id} ({self.meals_remaining} left)"

    @classmethod
    def meal_limit_for(cls, plan_type: str) -> int:
        try:
            return cls.MEAL_LIMITS[cls.PlanType(plan_type)]
        except ValueError as exc:
            raise ValidationError(f"Unknown cantina plan: {plan_type}.") from exc

    # --- Derived values ------------------------------------------------------
    @property
    def meal_limit(self) -> int:
        return self.meal_limit_for(self.plan_type)

    @property
    def price(self) -> Money:
        return pricing.cantina_plan_price(self.plan_type)

    @property
    def meals_used(self) -> int:
        return self.meal_limit - self.meals_remaining

    def meals_remaining_percentage(self) -> int:
        if not self.meal_limit:
            return 0
        ratio = Decimal(self.meals_remaining) * 100 / Decimal(self.meal_limit)
        return int(ratio.quantize(Decimal("1"), rounding=ROUND_HALF_UP))

    def days_until_renewal(self, now=None) -> int:
        now = now or timezone.now()
        if self.is_due_for_renewal(now):
            return 0
        return math.ceil((self.renews_at - now) / timedelta(days=1))

    # --- State ---------------------------------------------------------------
    @property
    def is_depleted(self) -> bool:
        return self.meals_remaining == 0

    def is_due_for_renewal(self, now=None) -> bool:
        return self.renews_at <= (now or timezone.now())

    def is_active(self, now=None) -> bool:
        return not self.is_due_for_renewal(now) and self.meals_remaining > 0

    # --- Transitions ---------------------------------------------------------
    def use_meal(self, now: datetime | None = None) -> int:
        """Spend one meal credit and return the new balance.

        Decrements with a single conditional UPDATE, so two concurrent calls
        against a balance of one cannot both succeed. The in-memory value is
        never trusted: on failure the row is re-read to pick the error.
        """
        now = now or timezone.now()
        updated = CantinaSubscription.objects.filter(
            pk=self.pk, meals_remaining__gt=0, renews_at__gt=now
        ).update(meals_remaining=models.F("meals_remaining") - 1, updated_at=now)
        self.refresh_from_db(fields=["meals_remaining", "renews_at", "updated_at"])

        if not updated:
            if self.meals_remaining == 0:
                raise InsufficientCreditsError("No meals remaining in this subscription.")
            raise StateError("Subscription is due for renewal.")
        return self.meals_remaining

    def renew(self, now: datetime | None = None) -> datetime:
        """Reset the balance and move ``renews_at`` one period forward.

        Allowed once ``renews_at`` has been reached. Returns the new
        renewal moment.
        """
        now = now or timezone.now()
        if not self.is_due_for_renewal(now):
            raise StateError(f"Subscription renews on {self.renews_at:%Y-%m-%d}; it is not due yet.")

        updated = CantinaSubscription.objects.filter(
            pk=self.pk, plan_type=self.plan_type, renews_at__lte=now
        ).update(
            meals_remaining=self.meal_limit,
            renews_at=models.F("renews_at") + RENEWAL_PERIOD,
            updated_at=now,
        )
        self.refresh_from_db(fields=["plan_type", "meals_remaining", "renews_at", "updated_at"])
        if not updated:
            raise StateError("Subscription changed before it could be renewed.")
        return self.renews_at

    def upgrade_to(self, plan_type: str, now: datetime | None = None) -> None:
        """Move to a larger plan, crediting the difference in meals."""
        now = now or timezone.now()
        new_limit = self.meal_limit_for(plan_type)
        if new_limit <= self.meal_limit:
            raise ValidationError("A subscription can only be upgraded to a larger plan.")

        updated = CantinaSubscription.objects.filter(
            pk=self.pk, plan_type=self.plan_type
        ).update(
            plan_type=plan_type,
            meals_remaining=models.F("meals_remaining") + (new_limit - self.meal_limit),
            updated_at=now,
        )
        self.refresh_from_db(fields=["plan_type", "meals_remaining", "updated_at"])
        if not updated:
            raise StateError("Subscription plan changed before it could be upgraded.")
