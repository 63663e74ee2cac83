"""Event handlers for booking domain events."""

from __future__ import annotations

from shared.application.audit import log_domain_event
from shared.application.message_bus import message_bus

from .domain.events import BookingCancelled, BookingCompleted, BookingConfirmed, BookingCreated


def register_handlers() -> None:
    for event_type in (BookingCreated, BookingConfirmed, BookingCancelled, BookingCompleted):
        message_bus.register_event_handler(event_type, log_domain_event)
