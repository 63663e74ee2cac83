"""API views for cantina subscriptions."""

from __future__ import annotations

from rest_framework import mixins, permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.users.permissions import IsOwnerOrAdmin, is_admin

from .application.command_handlers import (
    CreateSubscriptionCommand,
    CreateSubscriptionHandler,
    RenewSubscriptionCommand,
    RenewSubscriptionHandler,
    UpgradeSubscriptionCommand,
    UpgradeSubscriptionHandler,
    UseMealCommand,
    UseMealHandler,
)
from .filters import CantinaSubscriptionFilterSet
from .models import CantinaSubscription
from .serializers import (
    CantinaSubscriptionSerializer,
    SubscriptionCreateSerializer,
    SubscriptionUpgradeSerializer,
)


class CantinaSubscriptionViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.CreateModelMixin,
    viewsets.GenericViewSet,
):
    """Meal plans of the current user (administrators see all)."""

    queryset = CantinaSubscription.objects.select_related("user").all()
    permission_classes = [permissions.IsAuthenticated, IsOwnerOrAdmin]
    filterset_class = CantinaSubscriptionFilterSet

    def get_serializer_class(self):  # type: ignore
        if self.action == "create":
            return SubscriptionCreateSerializer
        if self.action == "upgrade":
            return SubscriptionUpgradeSerializer
        return CantinaSubscriptionSerializer

    def get_queryset(self):  # type: ignore
        qs = super().get_queryset()
        if is_admin(self.request.user):
            return qs
        return qs.filter(user=self.request.user)

    def create(self, request, *args, **kwargs):  # type: ignore
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        subscription = CreateSubscriptionHandler().handle(
            CreateSubscriptionCommand(
                user_id=request.user.id,
                plan_type=serializer.validated_data["plan_type"],
            )
        )
        return Response(
            CantinaSubscriptionSerializer(subscription).data,
            status=status.HTTP_201_CREATED,
        )

    @action(detail=True, methods=["post"], url_path="use-meal")
    def use_meal(self, request, pk=None):  # type: ignore
        subscription: CantinaSubscription = self.get_object()  # type: ignore
        subscription = UseMealHandler().handle(UseMealCommand(subscription_id=subscription.pk))
        return Response(CantinaSubscriptionSerializer(subscription).data)

    @action(detail=True, methods=["post"])
    def renew(self, request, pk=None):  # type: ignore
        subscription: CantinaSubscription = self.get_object()  # type: ignore
        subscription = RenewSubscriptionHandler().handle(
            RenewSubscriptionCommand(subscription_id=subscription.pk)
        )
        return Response(CantinaSubscriptionSerializer(subscription).data)

    @action(detail=True, methods=["post"])
    def upgrade(self, request, pk=None):  # type: ignore
        subscription: CantinaSubscription = self.get_object()  # type: ignore
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        subscription = UpgradeSubscriptionHandler().handle(
            UpgradeSubscriptionCommand(
                subscription_id=subscription.pk,
                plan_type=serializer.validated_data["plan_type"],
            )
        )
        return Response(CantinaSubscriptionSerializer(subscription).data)
