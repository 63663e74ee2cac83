"""Admin registration for bookings."""

from __future__ import annotations

from django.contrib import admin, messages
from django.utils.translation import gettext_lazy as _

from shared.domain.exceptions import DomainError

from .application.command_handlers import (
    CancelBookingCommand,
    CancelBookingHandler,
    ConfirmBookingCommand,
    ConfirmBookingHandler,
)
from .models import Booking


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "workspace",
        "user",
        "date",
        "start_time",
        "end_time",
        "status",
        "calculated_price",
        "created_at",
    )
    list_filter = ("status", "date", "workspace__workspace_type")
    search_fields = ("workspace__name", "user__email")
    readonly_fields = (
        "status",
        "calculated_price",
        "confirmed_at",
        "cancelled_at",
        "completed_at",
        "created_at",
        "updated_at",
    )
    actions = ["confirm_bookings", "cancel_bookings"]

    def has_add_permission(self, request):
        # Bookings are created through the API so the slot is checked and priced
        return False

    def get_readonly_fields(self, request, obj=None):
        if obj is None:
            return self.readonly_fields
        return ("workspace", "user", "date", "start_time", "end_time", "equipment_used") + self.readonly_fields

    def _run(self, request, queryset, handler, command_class, verb: str) -> None:
        done = 0
        for booking in queryset:
            try:
                handler.handle(command_class(booking_id=booking.pk))
                done += 1
            except DomainError as exc:
                self.message_user(request, f"#{booking.pk}: {exc.reason}", level=messages.WARNING)
        if done:
            self.message_user(request, f"{done} booking(s) {verb}.", level=messages.SUCCESS)

    @admin.action(description=_("Confirm selected bookings"))
    def confirm_bookings(self, request, queryset):  # type: ignore
        self._run(request, queryset, ConfirmBookingHandler(), ConfirmBookingCommand, "confirmed")

    @admin.action(description=_("Cancel selected bookings"))
    def cancel_bookings(self, request, queryset):  # type: ignore
        self._run(request, queryset, CancelBookingHandler(), CancelBookingCommand, "cancelled")
