"""
Pricing Calculator

Booking prices are derived from the workspace hourly rate and the booked
duration. Membership and cantina prices are static lookups.
"""

from decimal import Decimal

from django.conf import settings

from shared.domain.value_objects import Money

MEMBERSHIP_BASE_PRICES = {
    'day_pass': Decimal('25'),
    'weekly': Decimal('150'),
    'monthly': Decimal('400'),
}

AMENITY_TIER_MULTIPLIERS = {
    'basic': Decimal('1.0'),
    'premium': Decimal('1.5'),
}

CANTINA_PLAN_PRICES = {
    'five_meals': Decimal('50'),
    'ten_meals': Decimal('90'),
    'twenty_meals': Decimal('160'),
}


def _currency() -> str:
    return getattr(settings, 'COWORK_CURRENCY', 'USD')


def booking_price(hourly_rate, duration_minutes: int) -> Money:
    """
    Price of a booking: hourly rate times duration in hours

    Rounded to currency precision, half up.
    """
    if duration_minutes < 0:
        raise ValueError("Duration cannot be negative")
    rate = Money(Decimal(str(hourly_rate)), _currency())
    return (rate * (Decimal(duration_minutes) / Decimal(60))).rounded()


def membership_price(membership_type: str, amenity_tier: str) -> Money:
    try:
        base = MEMBERSHIP_BASE_PRICES[membership_type]
        multiplier = AMENITY_TIER_MULTIPLIERS[amenity_tier]
    except KeyError as exc:
        raise ValueError(f"No membership price for {membership_type}/{amenity_tier}") from exc
    return (Money(base, _currency()) * multiplier).rounded()


def cantina_plan_price(plan_type: str) -> Money:
    try:
        return Money(CANTINA_PLAN_PRICES[plan_type], _currency()).rounded()
    except KeyError as exc:
        raise ValueError(f"No cantina price for plan {plan_type}") from exc
