"""Integration tests for cantina API endpoints."""

from __future__ import annotations

from datetime import timedelta

from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from apps.cantina.models import CantinaSubscription
from apps.users.models import User


class CantinaAPITests(APITestCase):
    def setUp(self) -> None:
        self.member = User.objects.create_user(email="member@example.com", password="MemberPass123")
        self.other = User.objects.create_user(email="other@example.com", password="OtherPass123")
        self.client.force_authenticate(self.member)
        self.list_url = reverse("cantina-subscription-list")

    def _subscribe(self, plan_type: str = "five_meals"):
        return self.client.post(self.list_url, {"plan_type": plan_type}, format="json")

    def test_subscribe(self) -> None:
        response = self._subscribe("ten_meals")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["meals_remaining"], 10)
        self.assertEqual(response.data["meals_remaining_percentage"], 100)
        self.assertEqual(response.data["price"], "90.00")

    def test_second_active_subscription_is_rejected(self) -> None:
        self._subscribe()

        response = self._subscribe("twenty_meals")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_use_meal(self) -> None:
        created = self._subscribe()
        url = reverse("cantina-subscription-use-meal", args=[created.data["id"]])

        response = self.client.post(url)

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["meals_remaining"], 4)
        self.assertEqual(response.data["meals_used"], 1)

    def test_use_meal_without_credits_returns_payment_required(self) -> None:
        subscription = CantinaSubscription.objects.create(
            user=self.member,
            plan_type=CantinaSubscription.PlanType.FIVE_MEALS,
            meals_remaining=0,
            renews_at=timezone.now() + timedelta(days=5),
        )

        response = self.client.post(reverse("cantina-subscription-use-meal", args=[subscription.id]))

        self.assertEqual(response.status_code, status.HTTP_402_PAYMENT_REQUIRED)
        self.assertEqual(response.data["code"], "insufficient_credits")

    def test_renew_not_due_conflicts(self) -> None:
        created = self._subscribe()

        response = self.client.post(reverse("cantina-subscription-renew", args=[created.data["id"]]))

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(response.data["code"], "invalid_state")

    def test_renew_due_subscription(self) -> None:
        subscription = CantinaSubscription.objects.create(
            user=self.member,
            plan_type=CantinaSubscription.PlanType.FIVE_MEALS,
            meals_remaining=1,
            renews_at=timezone.now() - timedelta(hours=1),
        )

        response = self.client.post(reverse("cantina-subscription-renew", args=[subscription.id]))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["meals_remaining"], 5)

    def test_upgrade(self) -> None:
        created = self._subscribe()

        response = self.client.post(
            reverse("cantina-subscription-upgrade", args=[created.data["id"]]),
            {"plan_type": "twenty_meals"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["meals_remaining"], 20)

    def test_other_members_subscription_is_hidden(self) -> None:
        theirs = CantinaSubscription.objects.create(
            user=self.other,
            plan_type=CantinaSubscription.PlanType.FIVE_MEALS,
            meals_remaining=5,
            renews_at=timezone.now() + timedelta(days=5),
        )

        response = self.client.post(reverse("cantina-subscription-use-meal", args=[theirs.id]))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_status_filter(self) -> None:
        self._subscribe()
        CantinaSubscription.objects.create(
            user=self.member,
            plan_type=CantinaSubscription.PlanType.TEN_MEALS,
            meals_remaining=0,
            renews_at=timezone.now() + timedelta(days=5),
        )

        response = self.client.get(self.list_url, {"status": "depleted"})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        results = response.data["results"] if isinstance(response.data, dict) else response.data
        self.assertEqual([item["plan_type"] for item in results], ["ten_meals"])
