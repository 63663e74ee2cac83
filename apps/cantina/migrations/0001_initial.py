import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="CantinaSubscription",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "plan_type",
                    models.CharField(
                        choices=[
                            ("five_meals", "5 meals"),
                            ("ten_meals", "10 meals"),
                            ("twenty_meals", "20 meals"),
                        ],
                        default="five_meals",
                        max_length=20,
                    ),
                ),
                ("meals_remaining", models.PositiveSmallIntegerField()),
                ("renews_at", models.DateTimeField()),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "user",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="cantina_subscriptions",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "Cantina subscription",
                "verbose_name_plural": "Cantina subscriptions",
                "ordering": ["renews_at"],
                "indexes": [
                    models.Index(fields=["user", "renews_at"], name="cantina_user_renews_idx"),
                ],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(
                            models.Q(
                                ("meals_remaining__lte", 5),
                                ("plan_type", "five_meals"),
                            )
                            | models.Q(
                                ("meals_remaining__lte", 10),
                                ("plan_type", "ten_meals"),
                            )
                            | models.Q(
                                ("meals_remaining__lte", 20),
                                ("plan_type", "twenty_meals"),
                            ),
                            ("meals_remaining__gte", 0),
                        ),
                        name="cantina_meals_within_plan_limit",
                    ),
                ],
            },
        ),
    ]
