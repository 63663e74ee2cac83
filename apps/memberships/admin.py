from django.contrib import admin
from django.utils.translation import gettext_lazy as _

from .models import Membership


@admin.register(Membership)
class MembershipAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "user",
        "membership_type",
        "amenity_tier",
        "starts_at",
        "ends_at",
        "is_active_now",
    )
    list_filter = ("membership_type", "amenity_tier")
    search_fields = ("user__email",)
    date_hierarchy = "starts_at"
    readonly_fields = ("user", "membership_type", "starts_at", "ends_at", "created_at", "updated_at")

    def has_add_permission(self, request):
        # Windows are opened and extended through the API, never edited by hand
        return False

    @admin.display(boolean=True, description=_("Active"))
    def is_active_now(self, obj: Membership) -> bool:
        return obj.is_active()
