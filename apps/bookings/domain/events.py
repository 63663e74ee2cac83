"""
Booking Domain Events

Events that represent things that have happened in the booking domain.
These are published after successful transaction commits.
"""

from dataclasses import dataclass
from datetime import date, time
from decimal import Decimal

from shared.domain.base import DomainEvent


@dataclass
class BookingCreated(DomainEvent):
    """A pending booking was created."""
    booking_id: int
    workspace_id: int
    user_id: int
    date: date
    start_time: time
    end_time: time
    calculated_price: Decimal


@dataclass
class BookingConfirmed(DomainEvent):
    """PENDING -> CONFIRMED"""
    booking_id: int
    workspace_id: int
    user_id: int


@dataclass
class BookingCancelled(DomainEvent):
    """PENDING/CONFIRMED -> CANCELLED"""
    booking_id: int
    workspace_id: int
    user_id: int
    old_status: str


@dataclass
class BookingCompleted(DomainEvent):
    """CONFIRMED -> COMPLETED, emitted by the completion sweep."""
    booking_id: int
    workspace_id: int
    user_id: int
