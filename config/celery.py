import os

from celery import Celery

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings.dev")

app = Celery("coworkhub")

app.config_from_object("django.conf:settings", namespace="CELERY")
app.autodiscover_tasks()


# ============================================================================
# CELERY BEAT SCHEDULE (Periodic Tasks)
# ============================================================================

SWEEP_MINUTES = int(os.environ.get("COWORK_COMPLETION_SWEEP_MINUTES", 15))

app.conf.beat_schedule = {
    # Confirmed bookings whose end time has passed -> completed
    "complete-past-bookings": {
        "task": "bookings.complete_past_bookings",
        "schedule": SWEEP_MINUTES * 60.0,
        "options": {"expires": 300},
    },
}
