"""Celery tasks for the booking domain."""

from __future__ import annotations

import logging

from celery import shared_task  # type: ignore
from django.utils import timezone  # type: ignore

from .application.command_handlers import CompleteBookingCommand, CompleteBookingHandler
from .models import Booking

logger = logging.getLogger(__name__)


# ============================================================================
# PERIODIC TASKS (triggered by Celery Beat, see config/celery.py)
# ============================================================================

@shared_task(name="bookings.complete_past_bookings")
def complete_past_bookings() -> dict[str, int]:
    """
    Mark confirmed bookings whose end time has passed as completed.

    Each row is moved by a conditional update keyed on status=confirmed,
    so a cancellation that lands first wins. A row that fails is logged
    and skipped; the sweep carries on with the rest.

    Returns:
        dict: {"completed": n, "skipped": n, "failed": n}
    """
    now = timezone.now()
    handler = CompleteBookingHandler()
    completed_count = 0
    skipped_count = 0
    failed_count = 0

    candidate_ids = list(
        Booking.objects.confirmed_only().ended_before(now).values_list("pk", flat=True)
    )

    for booking_id in candidate_ids:
        try:
            if handler.handle(CompleteBookingCommand(booking_id=booking_id), now=now):
                completed_count += 1
            else:
                skipped_count += 1
        except Exception as e:
            failed_count += 1
            logger.error(f"Error completing booking {booking_id}: {e}", exc_info=True)

    if completed_count > 0:
        logger.info(f"Marked {completed_count} booking(s) as completed")
    else:
        logger.debug("No bookings to complete")

    return {"completed": completed_count, "skipped": skipped_count, "failed": failed_count}
