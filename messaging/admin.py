from django.contrib import admin
from .models import QueueEntry, ChatSession, SessionReport, ConnectionLog, PeerMessage


@admin.register(QueueEntry)
class QueueEntryAdmin(admin.ModelAdmin):
    list_display = ["user", "is_active", "created_at"]
    list_filter = ["is_active"]


@admin.register(ChatSession)
class ChatSessionAdmin(admin.ModelAdmin):
    list_display = ["session_id", "participant_1", "participant_2", "status", "created_at"]
    list_filter = ["status", "created_at"]
    search_fields = ["session_id"]
    readonly_fields = ["created_at", "updated_at", "started_at", "ended_at", "duration_seconds"]


@admin.register(SessionReport)
class SessionReportAdmin(admin.ModelAdmin):
    list_display = ["session", "reporter", "reported_user", "reason", "created_at"]
    search_fields = ["reason", "description"]


@admin.register(ConnectionLog)
class ConnectionLogAdmin(admin.ModelAdmin):
    list_display = ["session", "user", "status", "created_at"]
    list_filter = ["status"]


@admin.register(PeerMessage)
class PeerMessageAdmin(admin.ModelAdmin):
    list_display = ["room_id", "sender", "is_anonymous", "created_at"]
    list_filter = ["room_id"]
    search_fields = ["content"]
