"""Tests for the pricing tables and booking price calculation."""

from decimal import Decimal

import pytest

from shared.domain import pricing


def test_booking_price_for_two_hours():
    assert pricing.booking_price(Decimal("10.00"), 120).amount == Decimal("20.00")


@pytest.mark.parametrize(
    "rate, minutes, expected",
    [
        (Decimal("10.01"), 30, Decimal("5.01")),
        (Decimal("10.00"), 20, Decimal("3.33")),
        (Decimal("10.00"), 40, Decimal("6.67")),
        (Decimal("0.00"), 60, Decimal("0.00")),
    ],
)
def test_booking_price_rounds_half_up(rate, minutes, expected):
    assert pricing.booking_price(rate, minutes).amount == expected


def test_booking_price_uses_configured_currency(settings):
    settings.COWORK_CURRENCY = "EUR"

    assert pricing.booking_price(Decimal("10"), 60).currency == "EUR"


def test_negative_duration_is_rejected():
    with pytest.raises(ValueError):
        pricing.booking_price(Decimal("10"), -1)


@pytest.mark.parametrize(
    "membership_type, tier, expected",
    [
        ("day_pass", "basic", Decimal("25.00")),
        ("weekly", "basic", Decimal("150.00")),
        ("monthly", "premium", Decimal("600.00")),
    ],
)
def test_membership_price(membership_type, tier, expected):
    assert pricing.membership_price(membership_type, tier).amount == expected


def test_cantina_plan_price():
    assert pricing.cantina_plan_price("twenty_meals").amount == Decimal("160.00")
    with pytest.raises(ValueError):
        pricing.cantina_plan_price("unknown")
