"""Tests for availability and equipment checks."""

from __future__ import annotations

from datetime import date, time
from decimal import Decimal

from django.test import TestCase

from apps.bookings import services
from apps.bookings.models import Booking
from apps.users.models import User
from apps.workspaces.models import WorkshopEquipment, Workspace
from shared.domain.exceptions import ConflictError, ValidationError

DAY = date(2030, 1, 10)


class AvailabilityTests(TestCase):
    def setUp(self) -> None:
        self.user = User.objects.create_user(email="member@example.com", password="MemberPass123")
        self.workspace = Workspace.objects.create(
            name="Desk A",
            workspace_type=Workspace.WorkspaceType.DESK,
            capacity=1,
            hourly_rate=Decimal("10.00"),
        )

    def _book(self, start: time, end: time, status: str = Booking.Status.PENDING, day: date = DAY) -> Booking:
        return Booking.objects.create(
            workspace=self.workspace,
            user=self.user,
            date=day,
            start_time=start,
            end_time=end,
            status=status,
        )

    def test_overlapping_slot_conflicts(self) -> None:
        self._book(time(10), time(12))

        self.assertTrue(services.has_conflict(self.workspace, DAY, time(11), time(13)))
        self.assertTrue(services.has_conflict(self.workspace, DAY, time(9), time(10, 30)))
        self.assertTrue(services.has_conflict(self.workspace, DAY, time(10, 30), time(11)))

    def test_touching_endpoints_do_not_conflict(self) -> None:
        self._book(time(10), time(12))

        self.assertFalse(services.has_conflict(self.workspace, DAY, time(12), time(14)))
        self.assertFalse(services.has_conflict(self.workspace, DAY, time(8), time(10)))

    def test_other_day_does_not_conflict(self) -> None:
        self._book(time(10), time(12), day=date(2030, 1, 11))

        self.assertFalse(services.has_conflict(self.workspace, DAY, time(10), time(12)))

    def test_only_pending_and_confirmed_block(self) -> None:
        self._book(time(10), time(12), status=Booking.Status.CANCELLED)
        self._book(time(10), time(12), status=Booking.Status.COMPLETED)

        self.assertFalse(services.has_conflict(self.workspace, DAY, time(10), time(12)))

        self._book(time(10), time(12), status=Booking.Status.CONFIRMED)
        self.assertTrue(services.has_conflict(self.workspace, DAY, time(10), time(12)))

    def test_excluded_booking_is_ignored(self) -> None:
        booking = self._book(time(10), time(12))

        self.assertFalse(
            services.has_conflict(self.workspace, DAY, time(10), time(12), exclude_booking_id=booking.pk)
        )

    def test_ensure_available_raises_conflict(self) -> None:
        self._book(time(10), time(12))

        with self.assertRaises(ConflictError):
            services.ensure_workspace_is_available(self.workspace, DAY, time(11), time(12))

    def test_inverted_range_is_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            services.has_conflict(self.workspace, DAY, time(12), time(10))
        with self.assertRaises(ValidationError):
            services.has_conflict(self.workspace, DAY, time(10), time(10))

    def test_workspace_queryset_available_on(self) -> None:
        other = Workspace.objects.create(
            name="Desk B", capacity=1, hourly_rate=Decimal("10.00")
        )
        self._book(time(10), time(12))

        available = Workspace.objects.available_on(DAY, time(11), time(12))

        self.assertEqual(list(available), [other])
        self.assertFalse(self.workspace.available_at(DAY, time(11), time(12)))
        self.assertTrue(self.workspace.available_at(DAY, time(12), time(13)))


class EquipmentAvailabilityTests(TestCase):
    def setUp(self) -> None:
        self.user = User.objects.create_user(email="maker@example.com", password="MakerPass123")
        self.workshop = Workspace.objects.create(
            name="Wood shop",
            workspace_type=Workspace.WorkspaceType.WORKSHOP,
            capacity=6,
            hourly_rate=Decimal("30.00"),
        )
        self.saw = WorkshopEquipment.objects.create(
            workspace=self.workshop, name="Table saw", quantity_available=2
        )
        self.lathe = WorkshopEquipment.objects.create(
            workspace=self.workshop, name="Lathe", quantity_available=1
        )

    def _book(self, start: time, end: time, equipment: list[int]) -> Booking:
        return Booking.objects.create(
            workspace=self.workshop,
            user=self.user,
            date=DAY,
            start_time=start,
            end_time=end,
            equipment_used=equipment,
        )

    def test_reserved_count_sums_overlapping_bookings(self) -> None:
        self._book(time(9), time(11), [self.saw.pk])
        self._book(time(10), time(12), [self.saw.pk, self.lathe.pk])
        self._book(time(12), time(13), [self.saw.pk])

        self.assertEqual(self.saw.reserved_count_at(DAY, time(10), time(11)), 2)
        self.assertEqual(self.saw.available_quantity_at(DAY, time(10), time(11)), 0)
        self.assertEqual(self.lathe.available_quantity_at(DAY, time(12), time(13)), 1)

    def test_available_ids_are_normalised(self) -> None:
        ids = services.ensure_equipment_is_available(
            self.workshop, [self.lathe.pk, self.saw.pk, self.lathe.pk], DAY, time(9), time(10)
        )

        self.assertEqual(ids, sorted([self.saw.pk, self.lathe.pk]))

    def test_exhausted_equipment_is_rejected(self) -> None:
        self._book(time(9), time(11), [self.lathe.pk])

        with self.assertRaises(ValidationError):
            services.ensure_equipment_is_available(
                self.workshop, [self.lathe.pk], DAY, time(10), time(12)
            )

    def test_equipment_of_another_workspace_is_rejected(self) -> None:
        other = Workspace.objects.create(
            name="Metal shop",
            workspace_type=Workspace.WorkspaceType.WORKSHOP,
            capacity=4,
            hourly_rate=Decimal("40.00"),
        )
        welder = WorkshopEquipment.objects.create(workspace=other, name="Welder")

        with self.assertRaises(ValidationError):
            services.ensure_equipment_is_available(
                self.workshop, [welder.pk], DAY, time(10), time(12)
            )

    def test_equipment_requires_a_workshop(self) -> None:
        desk = Workspace.objects.create(name="Desk", capacity=1, hourly_rate=Decimal("5.00"))

        with self.assertRaises(ValidationError):
            services.ensure_equipment_is_available(desk, [self.saw.pk], DAY, time(10), time(12))

    def test_no_equipment_requested(self) -> None:
        desk = Workspace.objects.create(name="Desk", capacity=1, hourly_rate=Decimal("5.00"))

        self.assertEqual(services.ensure_equipment_is_available(desk, [], DAY, time(10), time(12)), [])
