"""Tests for membership commands."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone as dt_timezone

import pytest

from apps.memberships.application.command_handlers import (
    CreateMembershipCommand,
    CreateMembershipHandler,
    ExtendMembershipCommand,
    ExtendMembershipHandler,
)
from apps.memberships.models import Membership
from apps.users.models import User
from shared.domain.exceptions import StateError, ValidationError

NOW = datetime(2030, 5, 1, 9, 0, tzinfo=dt_timezone.utc)


@pytest.fixture
def member(db):
    return User.objects.create_user(email="member@example.com", password="MemberPass123")


def _create(user, membership_type="weekly", amenity_tier="basic", starts_at=None, now=NOW):
    return CreateMembershipHandler().handle(
        CreateMembershipCommand(
            user_id=user.pk,
            membership_type=membership_type,
            amenity_tier=amenity_tier,
            starts_at=starts_at,
        ),
        now=now,
    )


@pytest.mark.django_db
def test_create_defaults_window_from_type(member):
    membership = _create(member, "monthly", "premium")

    assert membership.starts_at == NOW
    assert membership.ends_at == NOW + timedelta(days=30)
    assert membership.is_active(NOW)


@pytest.mark.django_db
def test_create_rejects_past_start(member):
    with pytest.raises(ValidationError):
        _create(member, starts_at=NOW - timedelta(hours=1))


@pytest.mark.django_db
def test_create_tolerates_small_clock_skew(member):
    membership = _create(member, starts_at=NOW - timedelta(seconds=30))

    assert membership.pk is not None


@pytest.mark.django_db
def test_create_rejects_overlapping_window(member):
    _create(member, "weekly")

    with pytest.raises(ValidationError):
        _create(member, "day_pass", starts_at=NOW + timedelta(days=3))

    follow_up = _create(member, "day_pass", starts_at=NOW + timedelta(days=7))
    assert follow_up.starts_at == NOW + timedelta(days=7)


@pytest.mark.django_db
def test_create_rejects_unknown_type(member):
    with pytest.raises(ValidationError):
        _create(member, "yearly")


@pytest.mark.django_db
def test_extend_active_membership(member):
    membership = _create(member, "weekly")

    extended = ExtendMembershipHandler().handle(
        ExtendMembershipCommand(membership_id=membership.pk), now=NOW + timedelta(days=1)
    )

    assert extended.ends_at == NOW + timedelta(days=14)


@pytest.mark.django_db
def test_extend_future_membership_fails(member):
    membership = _create(member, "weekly", starts_at=NOW + timedelta(days=2))

    with pytest.raises(StateError):
        ExtendMembershipHandler().handle(ExtendMembershipCommand(membership_id=membership.pk), now=NOW)


@pytest.mark.django_db
def test_extend_expired_membership_fails(member):
    membership = _create(member, "day_pass")

    with pytest.raises(StateError):
        ExtendMembershipHandler().handle(
            ExtendMembershipCommand(membership_id=membership.pk), now=NOW + timedelta(days=2)
        )
    assert Membership.objects.get(pk=membership.pk).ends_at == NOW + timedelta(days=1)


@pytest.mark.django_db
def test_extend_unknown_membership(member):
    with pytest.raises(ValidationError):
        ExtendMembershipHandler().handle(ExtendMembershipCommand(membership_id=9999), now=NOW)
