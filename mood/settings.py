"""
Mood app settings and configuration
"""

DEFAULT_MOOD_ANALYSIS_SETTINGS = {
    "ANALYZE_ON_CREATE": True,
    "MAX_RECOMMENDATIONS": 3,
}


def get_mood_settings():
    """Get mood analysis settings with fallbacks"""
    from django.conf import settings

    mood_settings = getattr(settings, "MOOD_ANALYSIS_SETTINGS", {})

    final_settings = DEFAULT_MOOD_ANALYSIS_SETTINGS.copy()
    final_settings.update(mood_settings)

    return final_settings
