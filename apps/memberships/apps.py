from django.apps import AppConfig


class MembershipsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.memberships"
    label = "memberships"

    def ready(self) -> None:
        from .handlers import register_handlers

        register_handlers()
