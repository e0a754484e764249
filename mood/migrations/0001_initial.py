import django.core.validators
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
            name="MoodLog",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "mood_level",
                    models.PositiveSmallIntegerField(
                        choices=[(1, "Very Low"), (2, "Low"), (3, "Okay"), (4, "Good"), (5, "Great")],
                        validators=[
                            django.core.validators.MinValueValidator(1),
                            django.core.validators.MaxValueValidator(5),
                        ],
                    ),
                ),
                ("note", models.TextField(blank=True, null=True)),
                ("sentiment", models.TextField(blank=True, null=True)),
                (
                    "stress_level",
                    models.PositiveSmallIntegerField(
                        blank=True,
                        null=True,
                        validators=[
                            django.core.validators.MinValueValidator(1),
                            django.core.validators.MaxValueValidator(5),
                        ],
                    ),
                ),
                ("analyzed_at", models.DateTimeField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                (
                    "user",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="mood_logs",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "db_table": "mood_logs",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["user", "-created_at"], name="mood_logs_user_recent_idx"),
                    models.Index(fields=["stress_level"], name="mood_logs_stress_idx"),
                ],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(("mood_level__gte", 1), ("mood_level__lte", 5)),
                        name="mood_logs_mood_level_range",
                    ),
                    models.CheckConstraint(
                        condition=models.Q(
                            ("stress_level__isnull", True),
                            models.Q(("stress_level__gte", 1), ("stress_level__lte", 5)),
                            _connector="OR",
                        ),
                        name="mood_logs_stress_level_range",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="Recommendation",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=200)),
                ("description", models.TextField(blank=True, null=True)),
                ("content_url", models.CharField(blank=True, max_length=500, null=True)),
                (
                    "category",
                    models.CharField(
                        choices=[
                            ("breathing", "Breathing"),
                            ("mindfulness", "Mindfulness"),
                            ("activity", "Activity"),
                            ("video", "Video"),
                            ("article", "Article"),
                        ],
                        max_length=20,
                    ),
                ),
                ("position", models.PositiveSmallIntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "mood_log",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="recommendations",
                        to="mood.moodlog",
                    ),
                ),
            ],
            options={
                "db_table": "recommendations",
                "ordering": ["mood_log", "position"],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("mood_log", "position"),
                        name="recommendations_unique_position",
                    ),
                ],
            },
        ),
    ]
