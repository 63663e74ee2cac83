"""Tests for the cantina subscription admin."""

from __future__ import annotations

from datetime import timedelta

from django.test import TestCase
from django.urls import reverse
from django.utils import timezone

from apps.cantina.models import CantinaSubscription
from apps.users.models import User


class CantinaSubscriptionAdminTests(TestCase):
    def setUp(self) -> None:
        self.admin_user = User.objects.create_superuser(email="admin@example.com", password="AdminPass123")
        self.member = User.objects.create_user(email="member@example.com", password="MemberPass123")
        self.renews_at = timezone.now() + timedelta(days=10)
        self.subscription = CantinaSubscription.objects.create(
            user=self.member,
            plan_type=CantinaSubscription.PlanType.FIVE_MEALS,
            meals_remaining=2,
            renews_at=self.renews_at,
        )
        self.client.force_login(self.admin_user)

    def test_admin_cannot_add_subscription(self) -> None:
        response = self.client.post(
            reverse("admin:cantina_cantinasubscription_add"),
            {"user": self.member.pk, "plan_type": "ten_meals", "meals_remaining": 10},
        )

        self.assertEqual(response.status_code, 403)
        self.assertEqual(CantinaSubscription.objects.count(), 1)

    def test_change_form_does_not_refill_credits(self) -> None:
        response = self.client.post(
            reverse("admin:cantina_cantinasubscription_change", args=[self.subscription.pk]),
            {"meals_remaining": 5, "plan_type": "twenty_meals", "_save": "Save"},
        )

        self.assertEqual(response.status_code, 302)
        self.subscription.refresh_from_db()
        self.assertEqual(self.subscription.meals_remaining, 2)
        self.assertEqual(self.subscription.plan_type, CantinaSubscription.PlanType.FIVE_MEALS)
        self.assertEqual(self.subscription.renews_at, self.renews_at)
