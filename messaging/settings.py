"""
Matchmaking settings and configuration
"""

DEFAULT_MATCHMAKING_SETTINGS = {
    "QUEUE_ENTRY_TTL_MINUTES": 60,
    "ENDED_SESSION_TTL_HOURS": 24,
    "MESSAGE_TTL_MINUTES": 60,
}


def get_matchmaking_settings():
    """Get matchmaking settings with fallbacks"""
    from django.conf import settings

    matchmaking_settings = getattr(settings, "MATCHMAKING_SETTINGS", {})

    final_settings = DEFAULT_MATCHMAKING_SETTINGS.copy()
    final_settings.update(matchmaking_settings)

    return final_settings
