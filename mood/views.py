# mood/views.py
import logging

from django.http import HttpResponse
from django_filters import rest_framework as django_filters
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import (
    extend_schema,
    extend_schema_view,
    OpenApiResponse,
)
from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from mood.exceptions import MoodAnalysisError
from mood.filters import MoodLogFilter
from mood.models import MoodLog
from mood.serializers import MoodAnalysisRequestSerializer, MoodLogSerializer
from mood.services.analysis_service import mood_analysis_service
from mood.services.history import calculate_statistics
from users.permissions import IsOwnerOrAdmin

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}


@extend_schema_view(
    list=extend_schema(
        description="List mood log entries for the authenticated user with their recommendations",
        summary="List Mood Logs",
        tags=["Mood Log"],
    ),
    retrieve=extend_schema(
        description="Retrieve a specific mood log entry.",
        summary="Retrieve Mood Log",
        tags=["Mood Log"],
    ),
    create=extend_schema(
        description="Create a new mood log entry. Analysis runs once the entry is stored.",
        summary="Create Mood Log",
        tags=["Mood Log"],
    ),
)
class MoodLogViewSet(
    mixins.CreateModelMixin,
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    viewsets.GenericViewSet,
):
    """Mood logs are append-only: no update or delete routes"""

    serializer_class = MoodLogSerializer
    permission_classes = [IsAuthenticated, IsOwnerOrAdmin]
    filter_backends = [django_filters.DjangoFilterBackend]
    filterset_class = MoodLogFilter

    def get_queryset(self):
        queryset = MoodLog.objects.prefetch_related("recommendations")
        if self.action == "retrieve" and self.request.user.is_admin_role:
            return queryset
        return queryset.filter(user=self.request.user)

    def perform_create(self, serializer):
        mood_log = serializer.save(user=self.request.user)
        # Analysis may already have committed through on_commit
        mood_log.refresh_from_db()
        logger.info(
            f"User {self.request.user.id} logged mood {mood_log.mood_level} (log {mood_log.id})"
        )

    @extend_schema(
        description="Latest analyzed mood log with its recommendations",
        summary="Latest Insights",
        tags=["Mood Log"],
        responses={200: MoodLogSerializer, 404: OpenApiResponse(description="No analyzed logs yet")},
    )
    @action(detail=False, methods=["get"])
    def latest(self, request):
        mood_log = (
            self.get_queryset()
            .filter(analyzed_at__isnull=False)
            .order_by("-created_at")
            .first()
        )
        if mood_log is None:
            return Response(
                {"error": "No analyzed mood logs yet."},
                status=status.HTTP_404_NOT_FOUND,
            )
        return Response(self.get_serializer(mood_log).data)

    @extend_schema(
        description="Summary statistics over the authenticated user's mood history",
        summary="Mood Statistics",
        tags=["Mood Log"],
        responses={200: OpenApiTypes.OBJECT},
    )
    @action(detail=False, methods=["get"])
    def statistics(self, request):
        mood_logs = list(self.filter_queryset(self.get_queryset()))
        return Response(calculate_statistics(mood_logs))


class AnalyzeMoodView(APIView):
    """
    Analyze a stored mood log: derive sentiment and stress level from the
    mood level and note, write them back, and insert recommendations.

    Every failure is reported as a 400 with an ``error`` message. Responses
    carry permissive CORS headers so any origin may call it.
    """

    def get_permissions(self):
        if self.request.method == "OPTIONS":
            return [AllowAny()]
        return [IsAuthenticated()]

    def finalize_response(self, request, response, *args, **kwargs):
        response = super().finalize_response(request, response, *args, **kwargs)
        for header, value in CORS_HEADERS.items():
            response[header] = value
        return response

    def handle_exception(self, exc):
        # Authentication and throttling failures use the same error body
        super().handle_exception(exc)
        detail = getattr(exc, "detail", str(exc))
        logger.warning(f"Rejected analyze-mood request: {detail}")
        return Response({"error": str(detail)}, status=status.HTTP_400_BAD_REQUEST)

    def options(self, request, *args, **kwargs):
        return HttpResponse("ok")

    @extend_schema(
        request=MoodAnalysisRequestSerializer,
        responses={
            200: OpenApiResponse(description="Analysis stored"),
            400: OpenApiResponse(description="Analysis failed"),
        },
        description="Run the one-time analysis pass for a mood log",
        summary="Analyze Mood",
        tags=["Mood Analysis"],
    )
    def post(self, request):
        try:
            payload = MoodAnalysisRequestSerializer(data=request.data)
            if not payload.is_valid():
                raise MoodAnalysisError(_first_error(payload.errors))

            result = mood_analysis_service.analyze_log(
                payload.validated_data["mood_log_id"],
                mood_level=payload.validated_data["mood_level"],
                note=payload.validated_data.get("note"),
                user=request.user,
            )

            return Response(
                {
                    "success": True,
                    "analysis": result["analysis"].to_response(),
                    "recommendations": len(result["recommendations"]),
                }
            )
        except Exception as e:
            logger.error(f"Error in analyze-mood endpoint: {str(e)}", exc_info=True)
            return Response({"error": str(e)}, status=status.HTTP_400_BAD_REQUEST)


def _first_error(errors):
    field, messages = next(iter(errors.items()))
    return f"{field}: {messages[0]}"
