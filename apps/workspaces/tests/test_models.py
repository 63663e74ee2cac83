"""Tests for workspace and equipment models."""

from __future__ import annotations

from datetime import date, time, timedelta
from decimal import Decimal

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import IntegrityError, transaction
from django.test import TestCase
from django.utils import timezone

from apps.bookings.models import Booking
from apps.users.models import User
from apps.workspaces.models import WorkshopEquipment, Workspace


class WorkspaceModelTests(TestCase):
    def setUp(self) -> None:
        self.desk = Workspace.objects.create(name="Desk", capacity=1, hourly_rate=Decimal("10.00"))
        self.room = Workspace.objects.create(
            name="Board room",
            workspace_type=Workspace.WorkspaceType.MEETING_ROOM,
            capacity=12,
            hourly_rate=Decimal("45.00"),
        )

    def test_calculate_price(self) -> None:
        price = self.desk.calculate_price(date(2030, 1, 1), time(9), time(11))

        self.assertEqual(price.amount, Decimal("20.00"))
        self.assertEqual(price.currency, "USD")

    def test_with_capacity_for_and_price_ordering(self) -> None:
        self.assertEqual(list(Workspace.objects.with_capacity_for(4)), [self.room])
        self.assertEqual(list(Workspace.objects.by_price(descending=True)), [self.room, self.desk])

    def test_capacity_is_bounded(self) -> None:
        with self.assertRaises(IntegrityError), transaction.atomic():
            Workspace.objects.create(name="Hall", capacity=100, hourly_rate=Decimal("1.00"))

    def test_recent_bookings_count(self) -> None:
        user = User.objects.create_user(email="member@example.com", password="MemberPass123")
        today = timezone.localdate()
        for offset in (1, 5, 45):
            Booking.objects.create(
                workspace=self.desk,
                user=user,
                date=today - timedelta(days=offset),
                start_time=time(9),
                end_time=time(10),
            )

        self.assertEqual(self.desk.recent_bookings_count(), 2)
        self.assertEqual(self.desk.recent_bookings_count(days=60), 3)


class WorkshopEquipmentModelTests(TestCase):
    def setUp(self) -> None:
        self.workshop = Workspace.objects.create(
            name="Maker space",
            workspace_type=Workspace.WorkspaceType.WORKSHOP,
            capacity=5,
            hourly_rate=Decimal("25.00"),
        )

    def test_equipment_requires_a_workshop(self) -> None:
        desk = Workspace.objects.create(name="Desk", capacity=1, hourly_rate=Decimal("10.00"))

        with self.assertRaises(DjangoValidationError):
            WorkshopEquipment.objects.create(workspace=desk, name="3D printer")

    def test_available_equipment(self) -> None:
        printer = WorkshopEquipment.objects.create(workspace=self.workshop, name="3D printer", quantity_available=2)
        WorkshopEquipment.objects.create(workspace=self.workshop, name="Laser cutter", quantity_available=0)

        self.assertEqual(list(self.workshop.available_equipment()), [printer])
        self.assertEqual(list(WorkshopEquipment.objects.search_by_name("print")), [printer])
        self.assertTrue(printer.is_available)

    def test_available_at_counts_overlapping_reservations(self) -> None:
        user = User.objects.create_user(email="maker@example.com", password="MakerPass123")
        printer = WorkshopEquipment.objects.create(workspace=self.workshop, name="3D printer", quantity_available=1)
        day = date(2030, 2, 1)
        Booking.objects.create(
            workspace=self.workshop,
            user=user,
            date=day,
            start_time=time(10),
            end_time=time(12),
            equipment_used=[printer.pk],
            status=Booking.Status.CONFIRMED,
        )

        self.assertFalse(printer.available_at(day, time(11), time(13)))
        self.assertTrue(printer.available_at(day, time(12), time(13)))
        self.assertEqual(printer.available_quantity_at(day, time(9), time(10)), 1)
