from django.contrib import admin

from .models import CantinaSubscription


@admin.register(CantinaSubscription)
class CantinaSubscriptionAdmin(admin.ModelAdmin):
    list_display = ("id", "user", "plan_type", "meals_remaining", "renews_at", "created_at")
    list_filter = ("plan_type",)
    search_fields = ("user__email",)
    date_hierarchy = "renews_at"
    readonly_fields = ("user", "plan_type", "meals_remaining", "renews_at", "created_at", "updated_at")

    def has_add_permission(self, request):
        # Credits only move through use_meal, renew and upgrade
        return False
