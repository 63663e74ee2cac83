from django.apps import AppConfig


class CantinaConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.cantina"
    label = "cantina"

    def ready(self) -> None:
        from .handlers import register_handlers

        register_handlers()
