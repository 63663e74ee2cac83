"""Integration tests for membership API endpoints."""

from __future__ import annotations

from datetime import timedelta

from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from apps.memberships.models import Membership
from apps.users.models import User


class MembershipAPITests(APITestCase):
    def setUp(self) -> None:
        self.member = User.objects.create_user(email="member@example.com", password="MemberPass123")
        self.other = User.objects.create_user(email="other@example.com", password="OtherPass123")
        self.client.force_authenticate(self.member)
        self.list_url = reverse("membership-list")

    def test_member_creates_membership_for_themselves(self) -> None:
        response = self.client.post(
            self.list_url,
            {"membership_type": "weekly", "amenity_tier": "premium"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["user_id"], self.member.id)
        self.assertEqual(response.data["status"], "active")
        self.assertEqual(response.data["price"], "225.00")

    def test_overlapping_membership_is_rejected(self) -> None:
        self.client.post(self.list_url, {"membership_type": "weekly"}, format="json")

        response = self.client.post(self.list_url, {"membership_type": "day_pass"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)

    def test_status_filter(self) -> None:
        now = timezone.now()
        Membership.objects.create(
            user=self.member,
            membership_type=Membership.MembershipType.DAY_PASS,
            starts_at=now - timedelta(days=10),
            ends_at=now - timedelta(days=9),
        )
        Membership.objects.create(
            user=self.member,
            membership_type=Membership.MembershipType.WEEKLY,
            starts_at=now - timedelta(days=1),
            ends_at=now + timedelta(days=6),
        )

        response = self.client.get(self.list_url, {"status": "expired"})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        results = response.data["results"] if isinstance(response.data, dict) else response.data
        self.assertEqual([item["membership_type"] for item in results], ["day_pass"])

    def test_extend_active_membership(self) -> None:
        created = self.client.post(self.list_url, {"membership_type": "day_pass"}, format="json")
        extend_url = reverse("membership-extend", args=[created.data["id"]])

        response = self.client.post(extend_url)

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["duration_days"], 2)

    def test_extend_expired_membership_conflicts(self) -> None:
        now = timezone.now()
        expired = Membership.objects.create(
            user=self.member,
            membership_type=Membership.MembershipType.DAY_PASS,
            starts_at=now - timedelta(days=3),
            ends_at=now - timedelta(days=2),
        )

        response = self.client.post(reverse("membership-extend", args=[expired.id]))

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(response.data["code"], "invalid_state")

    def test_member_cannot_see_other_memberships(self) -> None:
        now = timezone.now()
        theirs = Membership.objects.create(
            user=self.other,
            membership_type=Membership.MembershipType.DAY_PASS,
            starts_at=now,
            ends_at=now + timedelta(days=1),
        )

        response = self.client.post(reverse("membership-extend", args=[theirs.id]))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
