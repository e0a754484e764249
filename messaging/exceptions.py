# messaging/exceptions.py


class MatchmakingError(Exception):
    """Base exception for peer chat matchmaking failures."""
    pass


class SessionNotFound(MatchmakingError):
    """Raised when a chat session does not exist."""
    pass


class SessionAccessError(MatchmakingError):
    """Raised when a user tries to act on a session they aren't part of."""
    pass


class InvalidSessionTransition(MatchmakingError):
    """Raised when a status change is not allowed from the current status."""
    pass
