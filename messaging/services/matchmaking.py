# messaging/services/matchmaking.py
from datetime import timedelta
from typing import Any, Dict, Optional, Tuple
import logging
import string
import time

from django.db import transaction
from django.db.models import Q
from django.utils import timezone
from django.utils.crypto import get_random_string

from messaging.exceptions import (
    InvalidSessionTransition,
    SessionAccessError,
    SessionNotFound,
)
from messaging.models import (
    ChatSession,
    ConnectionLog,
    QueueEntry,
    SessionReport,
    SignalingMessage,
)
from messaging.settings import get_matchmaking_settings

logger = logging.getLogger(__name__)

ALLOWED_TRANSITIONS = {
    ChatSession.STATUS_WAITING: {ChatSession.STATUS_MATCHED, ChatSession.STATUS_ENDED},
    ChatSession.STATUS_MATCHED: {ChatSession.STATUS_ACTIVE, ChatSession.STATUS_ENDED},
    ChatSession.STATUS_ACTIVE: {ChatSession.STATUS_ENDED},
    ChatSession.STATUS_ENDED: set(),
    ChatSession.STATUS_REPORTED: set(),
}


def generate_session_id():
    suffix = get_random_string(9, allowed_chars=string.ascii_lowercase + string.digits)
    return f"session-{int(time.time() * 1000)}-{suffix}"


class MatchmakingService:
    """Queue-based pairing of users for anonymous peer chat"""

    def join_queue(self, user, preferences=None) -> Tuple[QueueEntry, Optional[ChatSession]]:
        """Put the user at the back of the queue, then try to pair them right away"""
        with transaction.atomic():
            self.leave_queue(user)
            entry = QueueEntry.objects.create(
                user=user, is_active=True, preferences=preferences or {}
            )
        logger.info(f"User {user.id} joined the matchmaking queue")

        session = self.try_create_match(user)
        if session is None:
            entry.refresh_from_db()
        return entry, session

    def leave_queue(self, user) -> int:
        deleted, _ = QueueEntry.objects.filter(user=user).delete()
        if deleted:
            logger.info(f"Removed {deleted} queue entries for user {user.id}")
        return deleted

    def find_match(self, user) -> Optional[QueueEntry]:
        """Oldest active entry belonging to someone else"""
        return (
            QueueEntry.objects.select_for_update()
            .filter(is_active=True)
            .exclude(user=user)
            .select_related("user")
            .order_by("created_at", "id")
            .first()
        )

    def try_create_match(self, user) -> Optional[ChatSession]:
        with transaction.atomic():
            if not QueueEntry.objects.filter(user=user, is_active=True).exists():
                return None

            match = self.find_match(user)
            if match is None:
                logger.debug(f"No waiting users found to match with {user.id}")
                return None

            session = self.create_session(user, match.user)

        logger.info(f"Matched user {user.id} with {match.user_id}: {session.session_id}")
        return session

    def create_session(self, participant_1, participant_2) -> ChatSession:
        with transaction.atomic():
            self.leave_queue(participant_1)
            self.leave_queue(participant_2)
            session = ChatSession.objects.create(
                session_id=generate_session_id(),
                participant_1=participant_1,
                participant_2=participant_2,
                status=ChatSession.STATUS_MATCHED,
            )
        return session

    def get_session(self, session_id, user) -> ChatSession:
        try:
            session = ChatSession.objects.select_related(
                "participant_1", "participant_2"
            ).get(session_id=session_id)
        except ChatSession.DoesNotExist:
            raise SessionNotFound(f"Session {session_id} not found")

        if not session.has_participant(user):
            raise SessionAccessError("You are not a participant in this session")
        return session

    def update_session_status(self, session_id, status, user) -> ChatSession:
        session = self.get_session(session_id, user)

        if status == session.status:
            return session
        if status not in ALLOWED_TRANSITIONS.get(session.status, set()):
            raise InvalidSessionTransition(
                f"Cannot change session status from {session.status} to {status}"
            )

        now = timezone.now()
        session.status = status
        if status == ChatSession.STATUS_ACTIVE:
            session.started_at = now
        elif status == ChatSession.STATUS_ENDED:
            session.ended_at = now
            if session.started_at:
                session.duration_seconds = int((now - session.started_at).total_seconds())
        session.save()

        logger.info(f"Session {session.session_id} status updated to {status}")
        return session

    def get_current_session(self, user) -> Optional[ChatSession]:
        return (
            ChatSession.objects.filter(
                Q(participant_1=user) | Q(participant_2=user),
                status__in=ChatSession.OPEN_STATUSES,
            )
            .select_related("participant_1", "participant_2")
            .order_by("-created_at")
            .first()
        )

    def get_queue_position(self, user) -> Optional[int]:
        user_ids = list(
            QueueEntry.objects.filter(is_active=True)
            .order_by("created_at", "id")
            .values_list("user_id", flat=True)
        )
        if user.id not in user_ids:
            return None
        return user_ids.index(user.id) + 1

    def send_signaling_message(self, session_id, user, message_type, message_data) -> SignalingMessage:
        session = self.get_session(session_id, user)
        if session.status in ChatSession.CLOSED_STATUSES:
            raise InvalidSessionTransition("Session has already ended")
        return SignalingMessage.objects.create(
            session=session,
            sender=user,
            message_type=message_type,
            message_data=message_data,
        )

    def get_signaling_messages(self, session_id, user, after_id=None):
        """Messages the partner has sent, oldest first; pass after_id to poll for new ones"""
        session = self.get_session(session_id, user)
        messages = session.signaling_messages.exclude(sender=user)
        if after_id is not None:
            messages = messages.filter(id__gt=after_id)
        return list(messages.order_by("created_at", "id"))

    def log_connection(self, session_id, user, status, error_message=None, metadata=None) -> ConnectionLog:
        session = self.get_session(session_id, user)
        log = ConnectionLog.objects.create(
            session=session,
            user=user,
            status=status,
            error_message=error_message or None,
            metadata=metadata or {},
        )
        if status == "failed":
            logger.warning(
                f"Connection failed for user {user.id} in session {session.session_id}: {error_message}"
            )
        return log

    def report_user(self, session_id, reporter, reason, description=None) -> SessionReport:
        """File a report against the other participant and close the session"""
        with transaction.atomic():
            session = self.get_session(session_id, reporter)
            reported_user = session.other_participant(reporter)
            if reported_user is None:
                raise InvalidSessionTransition("There is no one to report in this session")

            report = SessionReport.objects.create(
                session=session,
                reporter=reporter,
                reported_user=reported_user,
                reason=reason,
                description=description or None,
            )
            session.status = ChatSession.STATUS_REPORTED
            session.ended_at = session.ended_at or timezone.now()
            session.save(update_fields=["status", "ended_at", "updated_at"])

        logger.warning(
            f"User {reporter.id} reported user {reported_user.id} in session {session.session_id}"
        )
        return report

    def cleanup(self) -> Dict[str, Any]:
        """Remove stale queue entries, old ended sessions and old signaling messages"""
        config = get_matchmaking_settings()
        now = timezone.now()

        queue_deleted, _ = QueueEntry.objects.filter(
            created_at__lt=now - timedelta(minutes=config["QUEUE_ENTRY_TTL_MINUTES"])
        ).delete()
        _, sessions_by_model = ChatSession.objects.filter(
            status=ChatSession.STATUS_ENDED,
            ended_at__lt=now - timedelta(hours=config["ENDED_SESSION_TTL_HOURS"]),
        ).delete()
        sessions_deleted = sessions_by_model.get(ChatSession._meta.label, 0)
        messages_deleted, _ = SignalingMessage.objects.filter(
            created_at__lt=now - timedelta(minutes=config["MESSAGE_TTL_MINUTES"])
        ).delete()

        result = {
            "queue_entries": queue_deleted,
            "sessions": sessions_deleted,
            "signaling_messages": messages_deleted,
        }
        logger.info(f"Matchmaking cleanup removed {result}")
        return result


matchmaking_service = MatchmakingService()
