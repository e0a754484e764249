# messaging/urls.py
from django.urls import path
from .views import (
    ConnectionLogView,
    CurrentSessionView,
    JoinQueueView,
    LeaveQueueView,
    QueuePositionView,
    RoomMessageListCreateView,
    SessionReportView,
    SessionStatusView,
    SignalingMessageView,
)

urlpatterns = [
    # Matchmaking queue
    path("queue/join/", JoinQueueView.as_view(), name="queue-join"),
    path("queue/leave/", LeaveQueueView.as_view(), name="queue-leave"),
    path("queue/position/", QueuePositionView.as_view(), name="queue-position"),
    # Chat sessions
    path("sessions/current/", CurrentSessionView.as_view(), name="session-current"),
    path(
        "sessions/<str:session_id>/status/",
        SessionStatusView.as_view(),
        name="session-status",
    ),
    path(
        "sessions/<str:session_id>/signal/",
        SignalingMessageView.as_view(),
        name="session-signal",
    ),
    path(
        "sessions/<str:session_id>/connection-log/",
        ConnectionLogView.as_view(),
        name="session-connection-log",
    ),
    path(
        "sessions/<str:session_id>/report/",
        SessionReportView.as_view(),
        name="session-report",
    ),
    # Anonymous peer rooms
    path(
        "rooms/<str:room_id>/messages/",
        RoomMessageListCreateView.as_view(),
        name="room-messages",
    ),
]
