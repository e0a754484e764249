from .base import TimestampedModel
from .queue import QueueEntry
from .session import ChatSession, SignalingMessage, SessionReport, ConnectionLog
from .peer import PeerMessage

__all__ = [
    "TimestampedModel",
    "QueueEntry",
    "ChatSession",
    "SignalingMessage",
    "SessionReport",
    "ConnectionLog",
    "PeerMessage",
]
