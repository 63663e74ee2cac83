"""
Booking Command Handlers

These are the use cases for the booking domain.
They orchestrate domain operations within transactions.

Commands:
- CreateBookingCommand: Create a new pending booking
- ConfirmBookingCommand: Confirm a pending booking
- CancelBookingCommand: Cancel a booking that has not started yet
- CompleteBookingCommand: Complete a confirmed booking whose end has passed
"""

from dataclasses import dataclass, field
from datetime import date, datetime, time
from typing import List, Optional
import logging

from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction
from django.utils import timezone

from apps.bookings.domain.events import (
    BookingCancelled,
    BookingCompleted,
    BookingConfirmed,
    BookingCreated,
)
from apps.bookings.models import Booking
from apps.bookings.services import (
    CONFLICT_MESSAGE,
    ensure_equipment_is_available,
    ensure_workspace_is_available,
)
from apps.workspaces.models import Workspace
from shared.application.uow import DjangoUnitOfWork
from shared.domain import pricing
from shared.domain.exceptions import ConflictError, StateError, ValidationError
from shared.domain.value_objects import TimeSlot

logger = logging.getLogger(__name__)


# ===== Commands =====

@dataclass
class CreateBookingCommand:
    workspace_id: int
    user_id: int
    date: date
    start_time: time
    end_time: time
    equipment_ids: List[int] = field(default_factory=list)


@dataclass
class ConfirmBookingCommand:
    booking_id: int


@dataclass
class CancelBookingCommand:
    booking_id: int


@dataclass
class CompleteBookingCommand:
    booking_id: int


# ===== Helpers =====

def _lock_workspace(workspace_id: int) -> Workspace:
    """Per-workspace lock serialising check-then-write on its bookings."""
    try:
        return Workspace.objects.select_for_update().get(pk=workspace_id)
    except Workspace.DoesNotExist:
        raise ValidationError(f"Workspace {workspace_id} not found.")


def _get_booking(booking_id: int) -> Booking:
    try:
        return Booking.objects.get(pk=booking_id)
    except Booking.DoesNotExist:
        raise ValidationError(f"Booking {booking_id} not found.")


# ===== Command Handlers =====

class CreateBookingHandler:
    """
    Handler for CreateBooking command

    Strategy:
    1. Validate the slot (start < end, not in the past)
    2. Start transaction and lock the workspace row (SELECT FOR UPDATE)
    3. Check overlapping bookings (ConflictError)
    4. Check equipment ownership and free units (ValidationError)
    5. Insert the pending booking; on PostgreSQL the exclusion
       constraint rejects a racing insert, remapped to ConflictError
    6. Publish BookingCreated after commit
    """

    def handle(self, command: CreateBookingCommand, now: Optional[datetime] = None) -> Booking:
        now = now or timezone.now()
        logger.info(
            f"Creating booking for workspace {command.workspace_id}, "
            f"user {command.user_id}, {command.date} {command.start_time}-{command.end_time}"
        )

        if command.date is None or command.start_time is None or command.end_time is None:
            raise ValidationError("Date, start time and end time are required.")
        try:
            slot = TimeSlot(command.date, command.start_time, command.end_time)
        except ValueError:
            raise ValidationError("End time must be after start time.")

        if timezone.make_aware(slot.starts_at) <= now:
            raise ValidationError("Bookings cannot start in the past.")

        if not get_user_model().objects.filter(pk=command.user_id).exists():
            raise ValidationError(f"User {command.user_id} not found.")

        with DjangoUnitOfWork() as uow:
            workspace = _lock_workspace(command.workspace_id)

            ensure_workspace_is_available(workspace, slot.day, slot.start_time, slot.end_time)
            equipment = ensure_equipment_is_available(
                workspace, command.equipment_ids, slot.day, slot.start_time, slot.end_time
            )

            price = pricing.booking_price(workspace.hourly_rate, slot.duration_minutes)

            try:
                with transaction.atomic():
                    booking = Booking.objects.create(
                        workspace=workspace,
                        user_id=command.user_id,
                        date=slot.day,
                        start_time=slot.start_time,
                        end_time=slot.end_time,
                        equipment_used=equipment,
                        calculated_price=price.amount,
                        status=Booking.Status.PENDING,
                    )
            except IntegrityError as exc:
                logger.warning(f"Booking insert rejected by storage constraint: {exc}")
                raise ConflictError(CONFLICT_MESSAGE) from exc

            uow.record(BookingCreated(
                booking_id=booking.pk,
                workspace_id=workspace.pk,
                user_id=command.user_id,
                date=slot.day,
                start_time=slot.start_time,
                end_time=slot.end_time,
                calculated_price=price.amount,
            ))

        logger.info(f"Booking {booking.pk} created ({price})")
        return booking


class ConfirmBookingHandler:
    """Handler for confirming a pending booking"""

    def handle(self, command: ConfirmBookingCommand, now: Optional[datetime] = None) -> Booking:
        now = now or timezone.now()
        logger.info(f"Confirming booking {command.booking_id}")

        with DjangoUnitOfWork() as uow:
            booking = _get_booking(command.booking_id)
            if booking.status not in Booking.CONFIRMABLE_STATUSES:
                raise StateError(
                    f"Only pending bookings can be confirmed (status: {booking.status})."
                )

            # Re-check under the workspace lock: a conflict may have appeared since creation
            _lock_workspace(booking.workspace_id)
            ensure_workspace_is_available(
                booking.workspace_id,
                booking.date,
                booking.start_time,
                booking.end_time,
                exclude_booking_id=booking.pk,
            )

            try:
                with transaction.atomic():
                    updated = Booking.objects.filter(
                        pk=booking.pk,
                        status__in=Booking.CONFIRMABLE_STATUSES,
                    ).update(status=Booking.Status.CONFIRMED, confirmed_at=now, updated_at=now)
            except IntegrityError as exc:
                raise ConflictError(CONFLICT_MESSAGE) from exc
            if not updated:
                raise StateError("Booking changed state before it could be confirmed.")

            booking.refresh_from_db()
            uow.record(BookingConfirmed(
                booking_id=booking.pk,
                workspace_id=booking.workspace_id,
                user_id=booking.user_id,
            ))

        logger.info(f"Booking {booking.pk} confirmed")
        return booking


class CancelBookingHandler:
    """Handler for cancelling a booking before it starts"""

    def handle(self, command: CancelBookingCommand, now: Optional[datetime] = None) -> Booking:
        now = now or timezone.now()
        logger.info(f"Cancelling booking {command.booking_id}")

        with DjangoUnitOfWork() as uow:
            booking = _get_booking(command.booking_id)
            old_status = booking.status

            if old_status not in Booking.CANCELLABLE_STATUSES:
                raise StateError(f"This booking cannot be cancelled (status: {old_status}).")
            if booking.starts_at <= now:
                raise StateError("Bookings that have already started cannot be cancelled.")

            updated = Booking.objects.filter(
                pk=booking.pk,
                status__in=Booking.CANCELLABLE_STATUSES,
            ).update(status=Booking.Status.CANCELLED, cancelled_at=now, updated_at=now)
            if not updated:
                raise StateError("Booking changed state before it could be cancelled.")

            booking.refresh_from_db()
            uow.record(BookingCancelled(
                booking_id=booking.pk,
                workspace_id=booking.workspace_id,
                user_id=booking.user_id,
                old_status=old_status,
            ))

        logger.info(f"Booking {booking.pk} cancelled (was {old_status})")
        return booking


class CompleteBookingHandler:
    """Handler for completing a confirmed booking whose end has passed"""

    def handle(self, command: CompleteBookingCommand, now: Optional[datetime] = None) -> bool:
        now = now or timezone.now()

        with DjangoUnitOfWork() as uow:
            booking = _get_booking(command.booking_id)
            completed = booking.complete_if_past(now)
            if completed:
                uow.record(BookingCompleted(
                    booking_id=booking.pk,
                    workspace_id=booking.workspace_id,
                    user_id=booking.user_id,
                ))

        if completed:
            logger.info(f"Booking {booking.pk} completed")
        return completed
