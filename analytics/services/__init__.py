from .queries import (
    dashboard,
    daily_activity,
    overview,
    sentiment_distribution,
    stress_level_distribution,
    weekly_stress_trends,
)

__all__ = [
    "dashboard",
    "daily_activity",
    "overview",
    "sentiment_distribution",
    "stress_level_distribution",
    "weekly_stress_trends",
]
