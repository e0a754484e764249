# messaging/models/session.py
from django.db import models
from django.conf import settings
from .base import TimestampedModel


class ChatSession(TimestampedModel):
    """A paired anonymous chat between two users"""

    STATUS_WAITING = "waiting"
    STATUS_MATCHED = "matched"
    STATUS_ACTIVE = "active"
    STATUS_ENDED = "ended"
    STATUS_REPORTED = "reported"
    STATUS_CHOICES = [
        (STATUS_WAITING, "Waiting"),
        (STATUS_MATCHED, "Matched"),
        (STATUS_ACTIVE, "Active"),
        (STATUS_ENDED, "Ended"),
        (STATUS_REPORTED, "Reported"),
    ]
    OPEN_STATUSES = (STATUS_MATCHED, STATUS_ACTIVE)
    CLOSED_STATUSES = (STATUS_ENDED, STATUS_REPORTED)

    session_id = models.CharField(max_length=64, unique=True)
    participant_1 = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="chat_sessions_started",
    )
    participant_2 = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="chat_sessions_joined",
        null=True,
        blank=True,
    )
    status = models.CharField(
        max_length=10, choices=STATUS_CHOICES, default=STATUS_WAITING
    )
    started_at = models.DateTimeField(null=True, blank=True)
    ended_at = models.DateTimeField(null=True, blank=True)
    duration_seconds = models.PositiveIntegerField(default=0)

    class Meta:
        db_table = "video_chat_sessions"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["status", "-created_at"], name="sessions_status_recent_idx"),
        ]

    def __str__(self):
        return f"{self.session_id} ({self.status})"

    def has_participant(self, user):
        return user.id in (self.participant_1_id, self.participant_2_id)

    def other_participant(self, user):
        if user.id == self.participant_1_id:
            return self.participant_2
        return self.participant_1


class SignalingMessage(models.Model):
    MESSAGE_TYPE_CHOICES = [
        ("offer", "Offer"),
        ("answer", "Answer"),
        ("ice-candidate", "ICE Candidate"),
    ]

    session = models.ForeignKey(
        ChatSession, on_delete=models.CASCADE, related_name="signaling_messages"
    )
    sender = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE)
    message_type = models.CharField(max_length=20, choices=MESSAGE_TYPE_CHOICES)
    message_data = models.JSONField()
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        db_table = "signaling_messages"
        ordering = ["created_at"]


class SessionReport(models.Model):
    session = models.ForeignKey(
        ChatSession, on_delete=models.CASCADE, related_name="reports"
    )
    reporter = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="session_reports_filed",
    )
    reported_user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="session_reports_received",
    )
    reason = models.CharField(max_length=200)
    description = models.TextField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "session_reports"
        ordering = ["-created_at"]

    def __str__(self):
        return f"Report on {self.session.session_id}: {self.reason}"


class ConnectionLog(models.Model):
    """Client-reported connection state for a session, kept for debugging"""

    STATUS_CHOICES = [
        ("connecting", "Connecting"),
        ("connected", "Connected"),
        ("disconnected", "Disconnected"),
        ("failed", "Failed"),
    ]

    session = models.ForeignKey(
        ChatSession, on_delete=models.CASCADE, related_name="connection_logs"
    )
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES)
    error_message = models.TextField(blank=True, null=True)
    metadata = models.JSONField(default=dict, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "connection_logs"
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.session.session_id}: {self.status}"
