# mood/signals.py
from django.db import transaction
from django.db.models.signals import post_save
from django.dispatch import receiver
from mood.models import MoodLog
from mood.settings import get_mood_settings
from mood.services.analysis_service import mood_analysis_service
import logging

logger = logging.getLogger(__name__)


@receiver(post_save, sender=MoodLog)
def trigger_mood_analysis(sender, instance, created, **kwargs):
    """Schedule the analysis pass once the new mood log is committed"""
    if not created or instance.is_analyzed:
        return

    if not get_mood_settings()["ANALYZE_ON_CREATE"]:
        logger.debug(f"Automatic analysis disabled, mood log {instance.id} left pending")
        return

    transaction.on_commit(
        lambda: mood_analysis_service.analyze_after_create(instance.id)
    )
