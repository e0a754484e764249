# analytics/urls.py
from django.urls import path
from .views import (
    DailyActivityView,
    DashboardView,
    OverviewView,
    SentimentDistributionView,
    StressLevelDistributionView,
    WeeklyStressView,
)

urlpatterns = [
    path("dashboard/", DashboardView.as_view(), name="analytics-dashboard"),
    path("overview/", OverviewView.as_view(), name="analytics-overview"),
    path("weekly-stress/", WeeklyStressView.as_view(), name="analytics-weekly-stress"),
    path("sentiments/", SentimentDistributionView.as_view(), name="analytics-sentiments"),
    path("daily-activity/", DailyActivityView.as_view(), name="analytics-daily-activity"),
    path("stress-levels/", StressLevelDistributionView.as_view(), name="analytics-stress-levels"),
]
