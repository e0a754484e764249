# analytics/services/queries.py
"""
Read-only aggregates over mood logs for the admin dashboard.

Grouping is done in Python on local dates so the results are the same on
SQLite and PostgreSQL.
"""
from collections import Counter, OrderedDict
from datetime import timedelta
from typing import Any, Dict, List
import logging

from django.contrib.auth import get_user_model
from django.db.models import Avg
from django.utils import timezone

from mood.models import MoodLog

logger = logging.getLogger(__name__)

STRESS_LEVELS = range(1, 6)


def _percentage(count, total):
    if not total:
        return 0
    return round(count / total * 100, 1)


def week_start(day):
    """Sunday that opens the week containing ``day``"""
    return day - timedelta(days=(day.weekday() + 1) % 7)


def weekly_stress_trends(weeks: int = 12) -> List[Dict[str, Any]]:
    since = timezone.now() - timedelta(weeks=weeks)
    rows = (
        MoodLog.objects.filter(created_at__gte=since, stress_level__isnull=False)
        .order_by("created_at")
        .values_list("created_at", "stress_level")
    )

    buckets = OrderedDict()
    for created_at, stress_level in rows:
        key = week_start(timezone.localtime(created_at).date())
        bucket = buckets.setdefault(key, [0, 0])
        bucket[0] += stress_level
        bucket[1] += 1

    return [
        {
            "week": week.isoformat(),
            "avg_stress": round(total / count, 2),
            "total_logs": count,
        }
        for week, (total, count) in buckets.items()
    ]


def sentiment_distribution() -> List[Dict[str, Any]]:
    counts = Counter(
        MoodLog.objects.filter(sentiment__isnull=False).values_list("sentiment", flat=True)
    )
    total = sum(counts.values())
    return [
        {
            "sentiment": sentiment,
            "count": count,
            "percentage": _percentage(count, total),
        }
        for sentiment, count in counts.most_common()
    ]


def daily_activity(days: int = 30) -> List[Dict[str, Any]]:
    since = timezone.now() - timedelta(days=days)
    rows = (
        MoodLog.objects.filter(created_at__gte=since)
        .order_by("created_at")
        .values_list("created_at", "mood_level")
    )

    buckets = OrderedDict()
    for created_at, mood_level in rows:
        key = timezone.localtime(created_at).date()
        bucket = buckets.setdefault(key, [0, 0])
        bucket[0] += mood_level
        bucket[1] += 1

    return [
        {
            "day": day.isoformat(),
            "count": count,
            "avg_mood_level": round(total / count, 1),
        }
        for day, (total, count) in buckets.items()
    ]


def stress_level_distribution() -> List[Dict[str, Any]]:
    counts = Counter(
        MoodLog.objects.filter(stress_level__isnull=False).values_list(
            "stress_level", flat=True
        )
    )
    total = sum(counts.values())
    return [
        {
            "stress_level": level,
            "count": counts.get(level, 0),
            "percentage": _percentage(counts.get(level, 0), total),
        }
        for level in STRESS_LEVELS
    ]


def overview() -> Dict[str, Any]:
    User = get_user_model()
    since = timezone.now() - timedelta(days=7)

    avg_stress = MoodLog.objects.filter(stress_level__isnull=False).aggregate(
        avg=Avg("stress_level")
    )["avg"]

    return {
        "total_users": User.objects.filter(role=User.ROLE_MEMBER).count(),
        "active_users_7_days": MoodLog.objects.filter(created_at__gte=since)
        .values("user_id")
        .distinct()
        .count(),
        "total_mood_logs": MoodLog.objects.count(),
        "avg_stress_level": round(avg_stress, 2) if avg_stress is not None else 0,
    }


def dashboard() -> Dict[str, Any]:
    return {
        "overview": overview(),
        "weekly_stress_trends": weekly_stress_trends(),
        "sentiment_distribution": sentiment_distribution(),
        "daily_activity": daily_activity(),
        "stress_level_distribution": stress_level_distribution(),
    }
