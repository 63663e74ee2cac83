"""Event handlers for membership domain events."""

from __future__ import annotations

from shared.application.audit import log_domain_event
from shared.application.message_bus import message_bus

from .domain.events import MembershipCreated, MembershipExtended


def register_handlers() -> None:
    for event_type in (MembershipCreated, MembershipExtended):
        message_bus.register_event_handler(event_type, log_domain_event)
