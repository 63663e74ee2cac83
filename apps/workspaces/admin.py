from django.contrib import admin

from .models import WorkshopEquipment, Workspace


class WorkshopEquipmentInline(admin.TabularInline):
    model = WorkshopEquipment
    extra = 0
    fields = ("name", "description", "quantity_available")


@admin.register(Workspace)
class WorkspaceAdmin(admin.ModelAdmin):
    list_display = ("name", "workspace_type", "capacity", "hourly_rate", "amenity_tier", "created_at")
    list_filter = ("workspace_type", "amenity_tier")
    search_fields = ("name", "description")
    inlines = [WorkshopEquipmentInline]


@admin.register(WorkshopEquipment)
class WorkshopEquipmentAdmin(admin.ModelAdmin):
    list_display = ("name", "workspace", "quantity_available")
    list_filter = ("workspace",)
    search_fields = ("name", "workspace__name")
