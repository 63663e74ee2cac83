"""API views for memberships."""

from __future__ import annotations

from rest_framework import mixins, permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.users.permissions import IsOwnerOrAdmin, is_admin

from .application.command_handlers import (
    CreateMembershipCommand,
    CreateMembershipHandler,
    ExtendMembershipCommand,
    ExtendMembershipHandler,
)
from .filters import MembershipFilterSet
from .models import Membership
from .serializers import MembershipCreateSerializer, MembershipSerializer


class MembershipViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.CreateModelMixin,
    viewsets.GenericViewSet,
):
    """Memberships of the current user (administrators see all)."""

    queryset = Membership.objects.select_related("user").all()
    permission_classes = [permissions.IsAuthenticated, IsOwnerOrAdmin]
    filterset_class = MembershipFilterSet

    def get_serializer_class(self):  # type: ignore
        if self.action == "create":
            return MembershipCreateSerializer
        return MembershipSerializer

    def get_queryset(self):  # type: ignore
        qs = super().get_queryset()
        if is_admin(self.request.user):
            return qs
        return qs.filter(user=self.request.user)

    def create(self, request, *args, **kwargs):  # type: ignore
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        user_id = request.user.id
        if data.get("user") and is_admin(request.user):
            user_id = data["user"]

        membership = CreateMembershipHandler().handle(
            CreateMembershipCommand(
                user_id=user_id,
                membership_type=data["membership_type"],
                amenity_tier=data["amenity_tier"],
                starts_at=data.get("starts_at"),
            )
        )
        return Response(MembershipSerializer(membership).data, status=status.HTTP_201_CREATED)

    @action(detail=True, methods=["post"])
    def extend(self, request, pk=None):  # type: ignore
        membership: Membership = self.get_object()  # type: ignore
        membership = ExtendMembershipHandler().handle(
            ExtendMembershipCommand(membership_id=membership.pk)
        )
        return Response(MembershipSerializer(membership).data)
