# mood/services/analysis_service.py
from typing import Dict, Any, Optional
import logging

from django.db import transaction
from django.utils import timezone

from mood.exceptions import MoodLogNotFound, MoodLogAlreadyAnalyzed
from mood.models import MoodLog, Recommendation
from mood.services.analyzer import analyze_mood, parse_mood_level
from mood.services.recommendations import generate_recommendations

logger = logging.getLogger(__name__)


class MoodAnalysisService:
    """Runs the single analysis pass of a mood log and stores its results"""

    def analyze_log(
        self,
        mood_log_id,
        mood_level=None,
        note: Optional[str] = None,
        user=None,
    ) -> Dict[str, Any]:
        """
        Analyze a mood log, write sentiment and stress level back, and insert
        its recommendations.

        Request values take precedence over stored ones when supplied. When
        `user` is given the log must belong to them unless they are an admin.
        """
        with transaction.atomic():
            queryset = MoodLog.objects.select_for_update()
            if user is not None and not user.is_admin_role:
                queryset = queryset.filter(user=user)

            try:
                mood_log = queryset.get(pk=mood_log_id)
            except (MoodLog.DoesNotExist, ValueError, TypeError):
                raise MoodLogNotFound(f"Mood log {mood_log_id} not found")

            if mood_log.is_analyzed:
                raise MoodLogAlreadyAnalyzed(
                    f"Mood log {mood_log_id} has already been analyzed"
                )

            level = parse_mood_level(
                mood_level if mood_level is not None else mood_log.mood_level
            )
            text = note if note is not None else mood_log.note

            analysis = analyze_mood(level, text)

            mood_log.sentiment = analysis.sentiment
            mood_log.stress_level = analysis.stress_level
            mood_log.analyzed_at = timezone.now()
            mood_log.save(update_fields=["sentiment", "stress_level", "analyzed_at"])

            templates = generate_recommendations(level, analysis.stress_level)
            recommendations = Recommendation.objects.bulk_create(
                [
                    Recommendation(
                        mood_log=mood_log,
                        title=template.title,
                        description=template.description,
                        content_url=template.content_url,
                        category=template.category,
                        position=position,
                    )
                    for position, template in enumerate(templates)
                ]
            )

        logger.info(
            f"Analyzed mood log {mood_log.id}: stress={analysis.stress_level}, "
            f"recommendations={len(recommendations)}"
        )
        return {
            "mood_log": mood_log,
            "analysis": analysis,
            "recommendations": recommendations,
        }

    def analyze_after_create(self, mood_log_id):
        """Analysis pass scheduled after a mood log is written; never raises"""
        try:
            self.analyze_log(mood_log_id)
        except MoodLogAlreadyAnalyzed:
            logger.debug(f"Mood log {mood_log_id} already analyzed, skipping")
        except Exception as e:
            logger.error(
                f"Error analyzing mood log {mood_log_id}: {str(e)}", exc_info=True
            )


mood_analysis_service = MoodAnalysisService()
