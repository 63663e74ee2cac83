import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Workspace",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=100)),
                ("description", models.TextField(blank=True, max_length=1000)),
                (
                    "workspace_type",
                    models.CharField(
                        choices=[
                            ("desk", "Hot desk"),
                            ("private_office", "Private office"),
                            ("meeting_room", "Meeting room"),
                            ("workshop", "Workshop"),
                        ],
                        default="desk",
                        max_length=20,
                    ),
                ),
                (
                    "capacity",
                    models.PositiveSmallIntegerField(
                        validators=[
                            django.core.validators.MinValueValidator(1),
                            django.core.validators.MaxValueValidator(99),
                        ]
                    ),
                ),
                (
                    "hourly_rate",
                    models.DecimalField(
                        decimal_places=2,
                        max_digits=8,
                        validators=[
                            django.core.validators.MinValueValidator(0),
                            django.core.validators.MaxValueValidator(9999.99),
                        ],
                    ),
                ),
                (
                    "amenity_tier",
                    models.CharField(
                        choices=[("basic", "Basic"), ("premium", "Premium")],
                        default="basic",
                        max_length=10,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "Workspace",
                "verbose_name_plural": "Workspaces",
                "ordering": ["name"],
                "indexes": [
                    models.Index(fields=["workspace_type", "amenity_tier"], name="workspace_type_tier_idx"),
                ],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(("capacity__gte", 1), ("capacity__lt", 100)),
                        name="workspace_capacity_range",
                    ),
                    models.CheckConstraint(
                        condition=models.Q(("hourly_rate__gte", 0), ("hourly_rate__lt", 10000)),
                        name="workspace_hourly_rate_range",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="WorkshopEquipment",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=100)),
                ("description", models.TextField(blank=True, max_length=1000)),
                (
                    "quantity_available",
                    models.PositiveSmallIntegerField(
                        default=1,
                        validators=[django.core.validators.MaxValueValidator(99)],
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "workspace",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="equipment",
                        to="workspaces.workspace",
                    ),
                ),
            ],
            options={
                "verbose_name": "Workshop equipment",
                "verbose_name_plural": "Workshop equipment",
                "ordering": ["name"],
            },
        ),
    ]
