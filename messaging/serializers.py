# messaging/serializers.py
from rest_framework import serializers
from drf_spectacular.utils import extend_schema_field
from .models import (
    ChatSession,
    ConnectionLog,
    PeerMessage,
    QueueEntry,
    SessionReport,
    SignalingMessage,
)


class QueueEntrySerializer(serializers.ModelSerializer):
    class Meta:
        model = QueueEntry
        fields = ["id", "is_active", "preferences", "created_at", "updated_at"]
        read_only_fields = fields


class JoinQueueSerializer(serializers.Serializer):
    preferences = serializers.DictField(required=False, default=dict)


class ChatSessionSerializer(serializers.ModelSerializer):
    """Session as seen by one participant; the partner is shown only by anonymous id"""

    partner_anonymous_id = serializers.SerializerMethodField()

    class Meta:
        model = ChatSession
        fields = [
            "session_id",
            "status",
            "partner_anonymous_id",
            "started_at",
            "ended_at",
            "duration_seconds",
            "created_at",
        ]
        read_only_fields = fields

    @extend_schema_field(serializers.CharField(allow_null=True))
    def get_partner_anonymous_id(self, obj):
        request = self.context.get("request")
        if request is None:
            return None
        partner = obj.other_participant(request.user)
        return partner.anonymous_id if partner else None


class SessionStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(
        choices=[ChatSession.STATUS_ACTIVE, ChatSession.STATUS_ENDED]
    )


class SignalingMessageSerializer(serializers.ModelSerializer):
    class Meta:
        model = SignalingMessage
        fields = ["id", "message_type", "message_data", "created_at"]
        read_only_fields = ["id", "created_at"]


class SignalingPollSerializer(serializers.Serializer):
    after = serializers.IntegerField(required=False, min_value=0)


class ConnectionLogSerializer(serializers.ModelSerializer):
    class Meta:
        model = ConnectionLog
        fields = ["id", "status", "error_message", "metadata", "created_at"]
        read_only_fields = ["id", "created_at"]


class SessionReportSerializer(serializers.ModelSerializer):
    class Meta:
        model = SessionReport
        fields = ["id", "reason", "description", "created_at"]
        read_only_fields = ["id", "created_at"]


class PeerMessageSerializer(serializers.ModelSerializer):
    """Room message; the sender is only ever exposed through their anonymous id"""

    sender_anonymous_id = serializers.CharField(
        source="sender.anonymous_id", read_only=True
    )
    is_own = serializers.SerializerMethodField()

    class Meta:
        model = PeerMessage
        fields = [
            "id",
            "room_id",
            "content",
            "sender_anonymous_id",
            "is_own",
            "is_anonymous",
            "created_at",
        ]
        read_only_fields = ["id", "room_id", "is_anonymous", "created_at"]

    def get_is_own(self, obj) -> bool:
        request = self.context.get("request")
        return bool(request and obj.sender_id == request.user.id)

    def validate_content(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Message cannot be empty.")
        return value
