"""Audit trail for published domain events."""

from __future__ import annotations

import structlog

from shared.domain.base import DomainEvent

audit_logger = structlog.get_logger("apps.audit")


def log_domain_event(event: DomainEvent) -> None:
    """Write one structured audit line per event."""
    audit_logger.info(
        event.event_type,
        event_id=str(event.event_id),
        occurred_at=event.occurred_at.isoformat(),
        **event.payload(),
    )
