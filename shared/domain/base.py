"""
Base Domain Classes

Building blocks shared by the domain apps:
- ValueObject: Immutable objects compared by value
- DomainEvent: Record of a state change, published after commit
"""

from abc import ABC
from dataclasses import dataclass, field, fields
from datetime import date, datetime, time
from decimal import Decimal
from uuid import UUID, uuid4

from django.utils import timezone


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for value objects

    Value objects are immutable and have no identity.
    Two value objects are equal if all their attributes are equal.
    """
    pass


def _plain(value):
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, (Decimal, UUID)):
        return str(value)
    return value


@dataclass
class DomainEvent:
    """
    Base class for domain events

    Subclasses declare their payload as dataclass fields. The id and
    timestamp are filled in automatically and stay out of __init__.
    """
    event_id: UUID = field(default_factory=uuid4, init=False)
    occurred_at: datetime = field(default_factory=timezone.now, init=False)

    @property
    def event_type(self) -> str:
        return self.__class__.__name__

    def payload(self) -> dict:
        return {f.name: _plain(getattr(self, f.name)) for f in fields(self) if f.init}

    def to_dict(self) -> dict:
        """Flat, JSON-friendly representation including the payload"""
        return {
            'event_id': str(self.event_id),
            'event_type': self.event_type,
            'occurred_at': self.occurred_at.isoformat(),
            **self.payload(),
        }
