# messaging/views.py
import logging

from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import generics, status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from .exceptions import (
    InvalidSessionTransition,
    MatchmakingError,
    SessionAccessError,
    SessionNotFound,
)
from .models import PeerMessage
from .serializers import (
    ChatSessionSerializer,
    ConnectionLogSerializer,
    JoinQueueSerializer,
    PeerMessageSerializer,
    QueueEntrySerializer,
    SessionReportSerializer,
    SessionStatusSerializer,
    SignalingMessageSerializer,
    SignalingPollSerializer,
)
from .services.matchmaking import matchmaking_service

logger = logging.getLogger(__name__)


def matchmaking_error_response(error):
    if isinstance(error, SessionNotFound):
        code = status.HTTP_404_NOT_FOUND
    elif isinstance(error, SessionAccessError):
        code = status.HTTP_403_FORBIDDEN
    elif isinstance(error, InvalidSessionTransition):
        code = status.HTTP_400_BAD_REQUEST
    else:
        code = status.HTTP_400_BAD_REQUEST
    return Response({"error": str(error)}, status=code)


class JoinQueueView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(
        request=JoinQueueSerializer,
        description="Join the peer chat queue; pairs immediately when someone is waiting",
        summary="Join Queue",
        tags=["Peer Chat"],
    )
    def post(self, request):
        serializer = JoinQueueSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        entry, session = matchmaking_service.join_queue(
            request.user, serializer.validated_data.get("preferences")
        )
        if session is not None:
            return Response(
                {
                    "matched": True,
                    "session": ChatSessionSerializer(session, context={"request": request}).data,
                },
                status=status.HTTP_201_CREATED,
            )
        return Response(
            {
                "matched": False,
                "queue_entry": QueueEntrySerializer(entry).data,
                "position": matchmaking_service.get_queue_position(request.user),
            },
            status=status.HTTP_201_CREATED,
        )


class LeaveQueueView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(
        request=None,
        description="Leave the peer chat queue",
        summary="Leave Queue",
        tags=["Peer Chat"],
    )
    def post(self, request):
        removed = matchmaking_service.leave_queue(request.user)
        return Response({"removed": removed})


class QueuePositionView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(
        description="1-based position in the queue, null when not queued",
        summary="Queue Position",
        tags=["Peer Chat"],
    )
    def get(self, request):
        return Response({"position": matchmaking_service.get_queue_position(request.user)})


class CurrentSessionView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(
        responses={200: ChatSessionSerializer},
        description="The user's newest matched or active session",
        summary="Current Session",
        tags=["Peer Chat"],
    )
    def get(self, request):
        session = matchmaking_service.get_current_session(request.user)
        if session is None:
            return Response({"session": None})
        return Response(
            {"session": ChatSessionSerializer(session, context={"request": request}).data}
        )


class SessionStatusView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(
        request=SessionStatusSerializer,
        responses={200: ChatSessionSerializer},
        description="Start or end a chat session",
        summary="Update Session Status",
        tags=["Peer Chat"],
    )
    def post(self, request, session_id):
        serializer = SessionStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            session = matchmaking_service.update_session_status(
                session_id, serializer.validated_data["status"], request.user
            )
        except MatchmakingError as e:
            return matchmaking_error_response(e)
        return Response(ChatSessionSerializer(session, context={"request": request}).data)


class SignalingMessageView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(
        parameters=[
            OpenApiParameter(
                name="after",
                type=int,
                description="Only return messages with a greater id",
            ),
        ],
        responses={200: SignalingMessageSerializer(many=True)},
        description="Signaling messages sent by the session partner, oldest first",
        summary="Receive Signals",
        tags=["Peer Chat"],
    )
    def get(self, request, session_id):
        params = SignalingPollSerializer(data=request.query_params)
        params.is_valid(raise_exception=True)
        try:
            messages = matchmaking_service.get_signaling_messages(
                session_id, request.user, after_id=params.validated_data.get("after")
            )
        except MatchmakingError as e:
            return matchmaking_error_response(e)
        return Response(SignalingMessageSerializer(messages, many=True).data)

    @extend_schema(
        request=SignalingMessageSerializer,
        responses={201: SignalingMessageSerializer},
        description="Relay a connection signaling message to the session partner",
        summary="Send Signal",
        tags=["Peer Chat"],
    )
    def post(self, request, session_id):
        serializer = SignalingMessageSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            message = matchmaking_service.send_signaling_message(
                session_id,
                request.user,
                serializer.validated_data["message_type"],
                serializer.validated_data["message_data"],
            )
        except MatchmakingError as e:
            return matchmaking_error_response(e)
        return Response(
            SignalingMessageSerializer(message).data, status=status.HTTP_201_CREATED
        )


class ConnectionLogView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(
        request=ConnectionLogSerializer,
        responses={201: ConnectionLogSerializer},
        description="Record the client's connection state for a session",
        summary="Log Connection",
        tags=["Peer Chat"],
    )
    def post(self, request, session_id):
        serializer = ConnectionLogSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            log = matchmaking_service.log_connection(
                session_id,
                request.user,
                serializer.validated_data["status"],
                serializer.validated_data.get("error_message"),
                serializer.validated_data.get("metadata"),
            )
        except MatchmakingError as e:
            return matchmaking_error_response(e)
        return Response(ConnectionLogSerializer(log).data, status=status.HTTP_201_CREATED)


class SessionReportView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(
        request=SessionReportSerializer,
        responses={201: SessionReportSerializer},
        description="Report the other participant of a session; the session is closed",
        summary="Report User",
        tags=["Peer Chat"],
    )
    def post(self, request, session_id):
        serializer = SessionReportSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            report = matchmaking_service.report_user(
                session_id,
                request.user,
                serializer.validated_data["reason"],
                serializer.validated_data.get("description"),
            )
        except MatchmakingError as e:
            return matchmaking_error_response(e)
        return Response(SessionReportSerializer(report).data, status=status.HTTP_201_CREATED)


class RoomMessageListCreateView(generics.ListCreateAPIView):
    """Anonymous peer support room chat"""

    serializer_class = PeerMessageSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        return (
            PeerMessage.objects.filter(room_id=self.kwargs["room_id"])
            .select_related("sender")
            .order_by("created_at")
        )

    @extend_schema(
        description="List messages posted to a peer support room",
        summary="List Room Messages",
        tags=["Peer Chat"],
    )
    def get(self, request, *args, **kwargs):
        return super().get(request, *args, **kwargs)

    @extend_schema(
        description="Post an anonymous message to a peer support room",
        summary="Send Room Message",
        tags=["Peer Chat"],
    )
    def post(self, request, *args, **kwargs):
        return super().post(request, *args, **kwargs)

    def perform_create(self, serializer):
        serializer.save(sender=self.request.user, room_id=self.kwargs["room_id"])
        logger.debug(f"User {self.request.user.id} posted to room {self.kwargs['room_id']}")
