# messaging/models/queue.py
from django.db import models
from django.conf import settings
from .base import TimestampedModel


class QueueEntry(TimestampedModel):
    """A user waiting to be paired for an anonymous peer chat"""

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="queue_entries",
    )
    is_active = models.BooleanField(default=True)
    preferences = models.JSONField(default=dict, blank=True)

    class Meta:
        db_table = "matchmaking_queue"
        ordering = ["created_at"]
        verbose_name = "Queue Entry"
        verbose_name_plural = "Queue Entries"
        indexes = [
            models.Index(fields=["is_active", "created_at"], name="queue_active_created_idx"),
        ]

    def __str__(self):
        return f"Queue entry for {self.user_id} ({'active' if self.is_active else 'inactive'})"
