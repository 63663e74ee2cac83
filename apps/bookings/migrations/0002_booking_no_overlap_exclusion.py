"""Storage-level guard against overlapping active bookings.

PostgreSQL only: other backends rely on the per-workspace row lock taken
by the booking command handlers.
"""

from django.db import migrations

CONSTRAINT_NAME = "booking_no_overlap_active"

FORWARD_SQL = [
    "CREATE EXTENSION IF NOT EXISTS btree_gist",
    f"""
    ALTER TABLE bookings_booking
    ADD CONSTRAINT {CONSTRAINT_NAME}
    EXCLUDE USING gist (
        workspace_id WITH =,
        tsrange(date + start_time, date + end_time, '[)') WITH &&
    )
    WHERE (status IN ('pending', 'confirmed'))
    """,
]

REVERSE_SQL = [
    f"ALTER TABLE bookings_booking DROP CONSTRAINT IF EXISTS {CONSTRAINT_NAME}",
]


def _run(statements):
    def apply(apps, schema_editor):
        if schema_editor.connection.vendor != "postgresql":
            return
        for statement in statements:
            schema_editor.execute(statement)

    return apply


class Migration(migrations.Migration):

    dependencies = [
        ("bookings", "0001_initial"),
    ]

    operations = [
        migrations.RunPython(_run(FORWARD_SQL), _run(REVERSE_SQL)),
    ]
