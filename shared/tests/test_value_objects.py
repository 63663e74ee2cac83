"""Tests for Money and TimeSlot."""

from datetime import date, time
from decimal import Decimal

import pytest

from shared.domain.value_objects import Money, TimeSlot

DAY = date(2030, 1, 10)


def test_touching_slots_do_not_overlap():
    morning = TimeSlot(DAY, time(9), time(10))
    late_morning = TimeSlot(DAY, time(10), time(11))

    assert not morning.overlaps_with(late_morning)
    assert not late_morning.overlaps_with(morning)


@pytest.mark.parametrize(
    "start, end",
    [
        (time(9, 30), time(10, 30)),
        (time(8), time(12)),
        (time(9, 15), time(9, 45)),
        (time(8), time(9, 1)),
    ],
)
def test_overlapping_slots(start, end):
    booked = TimeSlot(DAY, time(9), time(10))
    candidate = TimeSlot(DAY, start, end)

    assert booked.overlaps_with(candidate)
    assert candidate.overlaps_with(booked)


def test_slots_on_different_days_never_overlap():
    assert not TimeSlot(DAY, time(9), time(10)).overlaps_with(
        TimeSlot(date(2030, 1, 11), time(9), time(10))
    )


@pytest.mark.parametrize("start, end", [(time(10), time(9)), (time(10), time(10))])
def test_inverted_or_empty_slot_is_rejected(start, end):
    with pytest.raises(ValueError):
        TimeSlot(DAY, start, end)


def test_duration():
    slot = TimeSlot(DAY, time(9), time(10, 45))

    assert slot.duration_minutes == 105
    assert slot.duration_hours == Decimal(105) / Decimal(60)


def test_money_arithmetic_and_rounding():
    assert Money(Decimal("10.005")).rounded() == Money(Decimal("10.01"))
    assert (Money(Decimal("12.50")) * 2).amount == Decimal("25.00")


def test_money_rejects_invalid_values():
    with pytest.raises(ValueError):
        Money(Decimal("-1"))
    with pytest.raises(ValueError):
        Money(Decimal("1"), "JPY")
    with pytest.raises(ValueError):
        Money(Decimal("1"), "")
