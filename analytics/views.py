# analytics/views.py
import logging

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from analytics.services import queries
from users.permissions import IsAdminRole

logger = logging.getLogger(__name__)


class AnalyticsView(APIView):
    """Base for admin-only aggregate endpoints"""

    permission_classes = [IsAuthenticated, IsAdminRole]
    query = None

    def get_result(self, request):
        return self.query()

    def get(self, request):
        try:
            return Response(self.get_result(request))
        except Exception as e:
            logger.error(f"Error computing {self.__class__.__name__}: {str(e)}", exc_info=True)
            return Response(
                {"error": "Failed to compute analytics"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )


def _positive_int(request, name, default):
    try:
        value = int(request.query_params.get(name, default))
    except (TypeError, ValueError):
        return default
    return value if value > 0 else default


@extend_schema(
    description="All dashboard aggregates in one response",
    summary="Analytics Dashboard",
    tags=["Analytics"],
    responses={200: OpenApiTypes.OBJECT},
)
class DashboardView(AnalyticsView):
    query = staticmethod(queries.dashboard)


@extend_schema(
    description="User and mood log totals",
    summary="Analytics Overview",
    tags=["Analytics"],
    responses={200: OpenApiTypes.OBJECT},
)
class OverviewView(AnalyticsView):
    query = staticmethod(queries.overview)


@extend_schema(
    description="Average stress level per week (weeks start on Sunday)",
    summary="Weekly Stress Trends",
    tags=["Analytics"],
    parameters=[OpenApiParameter(name="weeks", type=OpenApiTypes.INT, description="Defaults to 12")],
    responses={200: OpenApiTypes.OBJECT},
)
class WeeklyStressView(AnalyticsView):
    def get_result(self, request):
        return queries.weekly_stress_trends(weeks=_positive_int(request, "weeks", 12))


@extend_schema(
    description="Count and share of each sentiment",
    summary="Sentiment Distribution",
    tags=["Analytics"],
    responses={200: OpenApiTypes.OBJECT},
)
class SentimentDistributionView(AnalyticsView):
    query = staticmethod(queries.sentiment_distribution)


@extend_schema(
    description="Mood logs per day with the average mood level",
    summary="Daily Activity",
    tags=["Analytics"],
    parameters=[OpenApiParameter(name="days", type=OpenApiTypes.INT, description="Defaults to 30")],
    responses={200: OpenApiTypes.OBJECT},
)
class DailyActivityView(AnalyticsView):
    def get_result(self, request):
        return queries.daily_activity(days=_positive_int(request, "days", 30))


@extend_schema(
    description="Count and share of each stress level from 1 to 5",
    summary="Stress Level Distribution",
    tags=["Analytics"],
    responses={200: OpenApiTypes.OBJECT},
)
class StressLevelDistributionView(AnalyticsView):
    query = staticmethod(queries.stress_level_distribution)
