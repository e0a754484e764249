from datetime import date, timedelta

import pytest
from django.utils import timezone

from analytics.services import queries
from mood.models import MoodLog


def test_week_start_is_sunday():
    # 2024-05-15 is a Wednesday
    assert queries.week_start(date(2024, 5, 15)) == date(2024, 5, 12)
    assert queries.week_start(date(2024, 5, 12)) == date(2024, 5, 12)
    assert queries.week_start(date(2024, 5, 18)) == date(2024, 5, 12)


@pytest.fixture
def analyzed_logs(member, other_member):
    rows = [
        (member, 1, 4, "low"),
        (member, 4, 2, "good"),
        (other_member, 4, 3, "good"),
        (other_member, 3, None, None),
    ]
    return [
        MoodLog.objects.create(user=user, mood_level=level, stress_level=stress, sentiment=sentiment)
        for user, level, stress, sentiment in rows
    ]


@pytest.mark.django_db
class TestQueries:
    def test_weekly_stress_trends(self, analyzed_logs):
        trends = queries.weekly_stress_trends()
        assert len(trends) == 1
        assert trends[0]["avg_stress"] == 3.0
        assert trends[0]["total_logs"] == 3
        assert trends[0]["week"] == queries.week_start(timezone.localdate()).isoformat()

    def test_old_logs_fall_outside_the_window(self, analyzed_logs):
        MoodLog.objects.update(created_at=timezone.now() - timedelta(weeks=20))
        assert queries.weekly_stress_trends() == []
        assert queries.daily_activity() == []

    def test_sentiment_distribution(self, analyzed_logs):
        assert queries.sentiment_distribution() == [
            {"sentiment": "good", "count": 2, "percentage": 66.7},
            {"sentiment": "low", "count": 1, "percentage": 33.3},
        ]

    def test_daily_activity(self, analyzed_logs):
        activity = queries.daily_activity()
        assert activity == [
            {"day": timezone.localdate().isoformat(), "count": 4, "avg_mood_level": 3.0}
        ]

    def test_stress_distribution_has_every_level(self, analyzed_logs):
        distribution = queries.stress_level_distribution()
        assert [row["stress_level"] for row in distribution] == [1, 2, 3, 4, 5]
        assert distribution[0] == {"stress_level": 1, "count": 0, "percentage": 0}
        assert distribution[3]["percentage"] == 33.3

    def test_stress_distribution_without_data(self):
        assert all(row["count"] == 0 and row["percentage"] == 0 for row in queries.stress_level_distribution())

    def test_overview(self, analyzed_logs, admin_user):
        assert queries.overview() == {
            "total_users": 2,
            "active_users_7_days": 2,
            "total_mood_logs": 4,
            "avg_stress_level": 3.0,
        }

    def test_overview_without_data(self):
        assert queries.overview()["avg_stress_level"] == 0
