"""
Cantina Command Handlers

Commands:
- CreateSubscriptionCommand: Start a meal plan for a user
- UseMealCommand: Spend one meal credit
- RenewSubscriptionCommand: Reset credits once the renewal date is reached
- UpgradeSubscriptionCommand: Switch to a larger plan
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
import logging

from django.contrib.auth import get_user_model
from django.utils import timezone

from apps.cantina.domain.events import (
    CantinaMealUsed,
    CantinaSubscriptionCreated,
    CantinaSubscriptionRenewed,
    CantinaSubscriptionUpgraded,
)
from apps.cantina.models import RENEWAL_PERIOD, CantinaSubscription
from shared.application.uow import DjangoUnitOfWork
from shared.domain.exceptions import ValidationError

logger = logging.getLogger(__name__)


# ===== Commands =====

@dataclass
class CreateSubscriptionCommand:
    user_id: int
    plan_type: str


@dataclass
class UseMealCommand:
    subscription_id: int


@dataclass
class RenewSubscriptionCommand:
    subscription_id: int


@dataclass
class UpgradeSubscriptionCommand:
    subscription_id: int
    plan_type: str


def _get_subscription(subscription_id: int) -> CantinaSubscription:
    try:
        return CantinaSubscription.objects.get(pk=subscription_id)
    except CantinaSubscription.DoesNotExist:
        raise ValidationError(f"Cantina subscription {subscription_id} not found.")


# ===== Command Handlers =====

class CreateSubscriptionHandler:
    """
    Handler for CreateSubscription command

    Starts with the full allowance and renews one period from now.
    A user holds at most one active subscription.
    """

    def handle(self, command: CreateSubscriptionCommand, now: Optional[datetime] = None) -> CantinaSubscription:
        now = now or timezone.now()
        meal_limit = CantinaSubscription.meal_limit_for(command.plan_type)

        with DjangoUnitOfWork() as uow:
            User = get_user_model()
            try:
                user = User.objects.select_for_update().get(pk=command.user_id)
            except User.DoesNotExist:
                raise ValidationError(f"User {command.user_id} not found.")

            if CantinaSubscription.objects.for_user(user).active(now).exists():
                raise ValidationError("You already have an active cantina subscription.")

            subscription = CantinaSubscription.objects.create(
                user=user,
                plan_type=command.plan_type,
                meals_remaining=meal_limit,
                renews_at=now + RENEWAL_PERIOD,
            )
            uow.record(CantinaSubscriptionCreated(
                subscription_id=subscription.pk,
                user_id=user.pk,
                plan_type=subscription.plan_type,
            ))

        logger.info(f"Cantina subscription {subscription.pk} ({command.plan_type}) created for user {user.pk}")
        return subscription


class UseMealHandler:
    """Handler for spending a meal credit"""

    def handle(self, command: UseMealCommand, now: Optional[datetime] = None) -> CantinaSubscription:
        now = now or timezone.now()

        with DjangoUnitOfWork() as uow:
            subscription = _get_subscription(command.subscription_id)
            remaining = subscription.use_meal(now)
            uow.record(CantinaMealUsed(
                subscription_id=subscription.pk,
                user_id=subscription.user_id,
                meals_remaining=remaining,
            ))

        logger.info(f"Meal used on subscription {subscription.pk}, {remaining} left")
        return subscription


class RenewSubscriptionHandler:
    """Handler for renewing a subscription that is due"""

    def handle(self, command: RenewSubscriptionCommand, now: Optional[datetime] = None) -> CantinaSubscription:
        now = now or timezone.now()

        with DjangoUnitOfWork() as uow:
            subscription = _get_subscription(command.subscription_id)
            renews_at = subscription.renew(now)
            uow.record(CantinaSubscriptionRenewed(
                subscription_id=subscription.pk,
                user_id=subscription.user_id,
                renews_at=renews_at,
            ))

        logger.info(f"Subscription {subscription.pk} renewed until {renews_at:%Y-%m-%d}")
        return subscription


class UpgradeSubscriptionHandler:
    """Handler for moving a subscription to a larger plan"""

    def handle(self, command: UpgradeSubscriptionCommand, now: Optional[datetime] = None) -> CantinaSubscription:
        now = now or timezone.now()

        with DjangoUnitOfWork() as uow:
            subscription = _get_subscription(command.subscription_id)
            old_plan_type = subscription.plan_type
            subscription.upgrade_to(command.plan_type, now)
            uow.record(CantinaSubscriptionUpgraded(
                subscription_id=subscription.pk,
                user_id=subscription.user_id,
                old_plan_type=old_plan_type,
                new_plan_type=subscription.plan_type,
            ))

        logger.info(f"Subscription {subscription.pk} upgraded {old_plan_type} -> {subscription.plan_type}")
        return subscription
