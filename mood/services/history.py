# mood/services/history.py
from collections import Counter
from datetime import timedelta
from typing import Dict, Any, List

from django.utils import timezone

from mood.models import MoodLog

def _rounded_mean(values, digits=1):
    values = list(values)
    if not values:
        return 0
    return round(sum(values) / len(values), digits)


def calculate_statistics(mood_logs: List[MoodLog]) -> Dict[str, Any]:
    """Summary statistics for a user's mood history"""
    if not mood_logs:
        return {
            "total_entries": 0,
            "average_mood": 0,
            "average_stress": 0,
            "most_common_mood": "3",
            "mood_distribution": {},
            "weekly_trend": [],
        }

    distribution = {str(level): 0 for level in range(1, 6)}
    distribution.update(
        {str(level): count for level, count in Counter(log.mood_level for log in mood_logs).items()}
    )
    # Ties resolve to the highest mood level
    most_common_mood = max(distribution.items(), key=lambda item: (item[1], int(item[0])))[0]

    stress_values = [log.stress_level for log in mood_logs if log.stress_level is not None]

    today = timezone.localdate()
    weekly_trend = []
    for offset in range(6, -1, -1):
        day = today - timedelta(days=offset)
        day_logs = [
            log for log in mood_logs if timezone.localtime(log.created_at).date() == day
        ]
        if not day_logs:
            continue
        day_stress = [log.stress_level for log in day_logs if log.stress_level is not None]
        weekly_trend.append(
            {
                "date": day.isoformat(),
                "mood": _rounded_mean(log.mood_level for log in day_logs),
                "stress": _rounded_mean(day_stress) if day_stress else None,
            }
        )

    return {
        "total_entries": len(mood_logs),
        "average_mood": _rounded_mean(log.mood_level for log in mood_logs),
        "average_stress": _rounded_mean(stress_values),
        "most_common_mood": most_common_mood,
        "mood_distribution": distribution,
        "weekly_trend": weekly_trend,
    }
