# mood/models.py
from django.db import models
from django.conf import settings
from django.core.validators import MinValueValidator, MaxValueValidator


class MoodLog(models.Model):
    """A user's self-reported mood entry plus the result of its analysis pass"""

    MOOD_LEVEL_CHOICES = [
        (1, "Very Low"),
        (2, "Low"),
        (3, "Okay"),
        (4, "Good"),
        (5, "Great"),
    ]

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="mood_logs",
    )
    mood_level = models.PositiveSmallIntegerField(
        choices=MOOD_LEVEL_CHOICES,
        validators=[MinValueValidator(1), MaxValueValidator(5)],
    )
    note = models.TextField(blank=True, null=True)
    sentiment = models.TextField(blank=True, null=True)
    stress_level = models.PositiveSmallIntegerField(
        blank=True,
        null=True,
        validators=[MinValueValidator(1), MaxValueValidator(5)],
    )
    analyzed_at = models.DateTimeField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        db_table = "mood_logs"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["user", "-created_at"], name="mood_logs_user_recent_idx"),
            models.Index(fields=["stress_level"], name="mood_logs_stress_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(mood_level__gte=1) & models.Q(mood_level__lte=5),
                name="mood_logs_mood_level_range",
            ),
            models.CheckConstraint(
                condition=models.Q(stress_level__isnull=True)
                | (models.Q(stress_level__gte=1) & models.Q(stress_level__lte=5)),
                name="mood_logs_stress_level_range",
            ),
        ]

    def __str__(self):
        return f"Mood {self.mood_level} by {self.user_id} at {self.created_at}"

    @property
    def is_analyzed(self):
        return self.analyzed_at is not None


class Recommendation(models.Model):
    """Canned recommendation attached to an analyzed mood log"""

    CATEGORY_CHOICES = [
        ("breathing", "Breathing"),
        ("mindfulness", "Mindfulness"),
        ("activity", "Activity"),
        ("video", "Video"),
        ("article", "Article"),
    ]

    mood_log = models.ForeignKey(
        MoodLog,
        on_delete=models.CASCADE,
        related_name="recommendations",
    )
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True, null=True)
    content_url = models.CharField(max_length=500, blank=True, null=True)
    category = models.CharField(max_length=20, choices=CATEGORY_CHOICES)
    position = models.PositiveSmallIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "recommendations"
        ordering = ["mood_log", "position"]
        constraints = [
            models.UniqueConstraint(
                fields=["mood_log", "position"],
                name="recommendations_unique_position",
            ),
        ]

    def __str__(self):
        return f"{self.title} ({self.category})"
