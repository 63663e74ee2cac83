"""
Membership Command Handlers

Commands:
- CreateMembershipCommand: Open a membership window for a user
- ExtendMembershipCommand: Push an active membership's end forward
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional
import logging

from django.contrib.auth import get_user_model
from django.utils import timezone

from apps.memberships.domain.events import MembershipCreated, MembershipExtended
from apps.memberships.models import Membership
from shared.application.uow import DjangoUnitOfWork
from shared.domain.exceptions import ValidationError

logger = logging.getLogger(__name__)

# Clock skew tolerated for a membership that starts "now"
START_GRACE = timedelta(minutes=1)


# ===== Commands =====

@dataclass
class CreateMembershipCommand:
    user_id: int
    membership_type: str
    amenity_tier: str
    starts_at: Optional[datetime] = None
    ends_at: Optional[datetime] = None


@dataclass
class ExtendMembershipCommand:
    membership_id: int


# ===== Command Handlers =====

class CreateMembershipHandler:
    """
    Handler for CreateMembership command

    starts_at defaults to now, ends_at to starts_at plus the type's
    duration. A user never holds two memberships with overlapping windows;
    the user row is locked while checking.
    """

    def handle(self, command: CreateMembershipCommand, now: Optional[datetime] = None) -> Membership:
        now = now or timezone.now()
        if command.membership_type not in Membership.MembershipType.values:
            raise ValidationError(f"Unknown membership type: {command.membership_type}.")
        if command.amenity_tier not in Membership.AmenityTier.values:
            raise ValidationError(f"Unknown amenity tier: {command.amenity_tier}.")

        starts_at = command.starts_at or now
        if starts_at < now - START_GRACE:
            raise ValidationError("Membership cannot start in the past.")
        ends_at = command.ends_at or starts_at + Membership.duration_for(command.membership_type)
        if ends_at <= starts_at:
            raise ValidationError("Membership must end after it starts.")

        with DjangoUnitOfWork() as uow:
            User = get_user_model()
            try:
                user = User.objects.select_for_update().get(pk=command.user_id)
            except User.DoesNotExist:
                raise ValidationError(f"User {command.user_id} not found.")

            if Membership.objects.for_user(user).overlapping(starts_at, ends_at).exists():
                raise ValidationError("User already has a membership during this period.")

            membership = Membership.objects.create(
                user=user,
                membership_type=command.membership_type,
                amenity_tier=command.amenity_tier,
                starts_at=starts_at,
                ends_at=ends_at,
            )
            uow.record(MembershipCreated(
                membership_id=membership.pk,
                user_id=user.pk,
                membership_type=membership.membership_type,
                amenity_tier=membership.amenity_tier,
                starts_at=starts_at,
                ends_at=ends_at,
            ))

        logger.info(f"Membership {membership.pk} created for user {user.pk} until {ends_at:%Y-%m-%d %H:%M}")
        return membership


class ExtendMembershipHandler:
    """Handler for extending an active membership"""

    def handle(self, command: ExtendMembershipCommand, now: Optional[datetime] = None) -> Membership:
        now = now or timezone.now()

        with DjangoUnitOfWork() as uow:
            try:
                membership = Membership.objects.get(pk=command.membership_id)
            except Membership.DoesNotExist:
                raise ValidationError(f"Membership {command.membership_id} not found.")

            old_ends_at = membership.ends_at
            new_ends_at = membership.extend(now)
            uow.record(MembershipExtended(
                membership_id=membership.pk,
                user_id=membership.user_id,
                old_ends_at=old_ends_at,
                new_ends_at=new_ends_at,
            ))

        logger.info(f"Membership {membership.pk} extended to {new_ends_at:%Y-%m-%d %H:%M}")
        return membership
