# messaging/services/__init__.py
from .matchmaking import MatchmakingService, matchmaking_service

__all__ = [
    "MatchmakingService",
    "matchmaking_service",
]
