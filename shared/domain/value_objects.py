"""
Common Value Objects

Value objects used across multiple domains:
- Money: Represents monetary amounts with currency
- TimeSlot: Represents a same-day time interval (booking date, start, end)
"""

from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import ROUND_HALF_UP, Decimal

from shared.domain.base import ValueObject

CENT = Decimal('0.01')


@dataclass(frozen=True)
class Money(ValueObject):
    """
    Money value object

    Represents a monetary amount with currency.
    Immutable and supports arithmetic operations.
    """
    amount: Decimal
    currency: str = 'USD'

    def __post_init__(self):
        # Validation
        if self.amount < 0:
            raise ValueError("Amount cannot be negative")
        if not self.currency:
            raise ValueError("Currency is required")
        if self.currency not in ['USD', 'EUR', 'GBP']:
            raise ValueError(f"Unsupported currency: {self.currency}")

    def __mul__(self, factor) -> 'Money':
        """Multiply money by a factor"""
        if not isinstance(factor, (int, float, Decimal)):
            raise TypeError("Can only multiply Money by number")
        return Money(self.amount * Decimal(str(factor)), self.currency)

    def rounded(self) -> 'Money':
        """Round to currency precision (2 decimal places, half up)"""
        return Money(self.amount.quantize(CENT, rounding=ROUND_HALF_UP), self.currency)

    def __str__(self):
        return f"{self.amount:,.2f} {self.currency}"

    def __repr__(self):
        return f"Money({self.amount}, '{self.currency}')"


@dataclass(frozen=True)
class TimeSlot(ValueObject):
    """
    Time slot value object

    Represents a range on a single day from start_time (inclusive)
    to end_time (exclusive). Used for booking periods and availability checks.
    """
    day: date
    start_time: time
    end_time: time

    def __post_init__(self):
        if self.start_time >= self.end_time:
            raise ValueError(
                f"Start time ({self.start_time:%H:%M}) must be before end time ({self.end_time:%H:%M})"
            )

    def overlaps_with(self, other: 'TimeSlot') -> bool:
        """
        Check if this slot overlaps with another

        Slots on different days never overlap. The end is exclusive,
        so a slot ending at 10:00 and one starting at 10:00 do not overlap.
        """
        if not isinstance(other, TimeSlot):
            raise TypeError("Can only check overlap with another TimeSlot")
        if self.day != other.day:
            return False
        return self.start_time < other.end_time and other.start_time < self.end_time

    @property
    def duration_minutes(self) -> int:
        delta = datetime.combine(self.day, self.end_time) - datetime.combine(self.day, self.start_time)
        return int(delta.total_seconds() // 60)

    @property
    def duration_hours(self) -> Decimal:
        return Decimal(self.duration_minutes) / Decimal(60)

    @property
    def starts_at(self) -> datetime:
        """Naive start datetime; callers attach the timezone"""
        return datetime.combine(self.day, self.start_time)

    @property
    def ends_at(self) -> datetime:
        return datetime.combine(self.day, self.end_time)

    def __str__(self):
        return f"{self.day:%d.%m.%Y} {self.start_time:%H:%M}-{self.end_time:%H:%M}"

    def __repr__(self):
        return f"TimeSlot({self.day}, {self.start_time}, {self.end_time})"
