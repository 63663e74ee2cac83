"""Tests for the booking admin."""

from __future__ import annotations

from datetime import date, datetime, time, timezone as dt_timezone
from decimal import Decimal

from django.test import TestCase
from django.urls import reverse

from apps.bookings.application.command_handlers import CreateBookingCommand, CreateBookingHandler
from apps.bookings.models import Booking
from apps.users.models import User
from apps.workspaces.models import Workspace

DAY = date(2030, 1, 10)
NOW = datetime(2030, 1, 9, 8, 0, tzinfo=dt_timezone.utc)


class BookingAdminTests(TestCase):
    def setUp(self) -> None:
        self.admin_user = User.objects.create_superuser(email="admin@example.com", password="AdminPass123")
        self.member = User.objects.create_user(email="member@example.com", password="MemberPass123")
        self.workspace = Workspace.objects.create(
            name="Meeting room 1",
            workspace_type=Workspace.WorkspaceType.MEETING_ROOM,
            capacity=8,
            hourly_rate=Decimal("20.00"),
        )
        self.booking = CreateBookingHandler().handle(
            CreateBookingCommand(
                workspace_id=self.workspace.pk,
                user_id=self.member.pk,
                date=DAY,
                start_time=time(9),
                end_time=time(10),
            ),
            now=NOW,
        )
        self.client.force_login(self.admin_user)

    def test_admin_cannot_add_overlapping_booking(self) -> None:
        response = self.client.post(
            reverse("admin:bookings_booking_add"),
            {
                "workspace": self.workspace.pk,
                "user": self.member.pk,
                "date": DAY.isoformat(),
                "start_time": "09:30",
                "end_time": "10:30",
                "equipment_used": "[]",
            },
        )

        self.assertEqual(response.status_code, 403)
        self.assertEqual(
            Booking.objects.active().filter(workspace=self.workspace, date=DAY).count(), 1
        )

    def test_change_form_does_not_move_the_slot(self) -> None:
        response = self.client.post(
            reverse("admin:bookings_booking_change", args=[self.booking.pk]),
            {
                "workspace": self.workspace.pk,
                "user": self.member.pk,
                "date": DAY.isoformat(),
                "start_time": "11:00",
                "end_time": "13:00",
                "_save": "Save",
            },
        )

        self.assertEqual(response.status_code, 302)
        self.booking.refresh_from_db()
        self.assertEqual(self.booking.start_time, time(9))
        self.assertEqual(self.booking.end_time, time(10))
        self.assertEqual(self.booking.calculated_price, Decimal("20.00"))

    def test_confirm_action_goes_through_handler(self) -> None:
        response = self.client.post(
            reverse("admin:bookings_booking_changelist"),
            {"action": "confirm_bookings", "_selected_action": [self.booking.pk]},
        )

        self.assertEqual(response.status_code, 302)
        self.booking.refresh_from_db()
        self.assertEqual(self.booking.status, Booking.Status.CONFIRMED)
