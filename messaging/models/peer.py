# messaging/models/peer.py
from django.db import models
from django.conf import settings


class PeerMessage(models.Model):
    """Message posted to a peer support room"""

    sender = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="peer_messages",
    )
    room_id = models.CharField(max_length=64, db_index=True)
    content = models.TextField()
    is_anonymous = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "messages"
        ordering = ["created_at"]
        indexes = [
            models.Index(fields=["room_id", "created_at"], name="messages_room_created_idx"),
        ]

    def __str__(self):
        return f"Message in {self.room_id} by {self.sender_id}"
