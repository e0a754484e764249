# mood/filters.py
from datetime import timedelta

from django.utils import timezone
from django_filters import rest_framework as django_filters

from mood.models import MoodLog

DATE_RANGE_DAYS = {
    "week": 7,
    "month": 30,
    "3months": 90,
}

SORT_ORDERING = {
    "newest": ["-created_at"],
    "oldest": ["created_at"],
    "mood_asc": ["mood_level", "-created_at"],
    "mood_desc": ["-mood_level", "-created_at"],
}


class MoodLogFilter(django_filters.FilterSet):
    """History screen filters: recent window, single mood level and sort order"""

    date_range = django_filters.ChoiceFilter(
        choices=[("all", "All time"), ("week", "Past week"), ("month", "Past month"), ("3months", "Past 3 months")],
        method="filter_date_range",
    )
    mood_level = django_filters.ChoiceFilter(
        choices=[("all", "All")] + [(str(level), str(level)) for level in range(1, 6)],
        method="filter_mood_level",
    )
    sort_by = django_filters.ChoiceFilter(
        choices=[(key, key) for key in SORT_ORDERING],
        method="filter_sort_by",
    )

    class Meta:
        model = MoodLog
        fields = ["date_range", "mood_level", "sort_by"]

    def filter_date_range(self, queryset, name, value):
        days = DATE_RANGE_DAYS.get(value)
        if not days:
            return queryset
        return queryset.filter(created_at__gte=timezone.now() - timedelta(days=days))

    def filter_mood_level(self, queryset, name, value):
        if value == "all":
            return queryset
        return queryset.filter(mood_level=int(value))

    def filter_sort_by(self, queryset, name, value):
        return queryset.order_by(*SORT_ORDERING[value])
