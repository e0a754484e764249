import pytest

from mood.exceptions import MoodLogAlreadyAnalyzed, MoodLogNotFound
from mood.models import MoodLog, Recommendation
from mood.services.analysis_service import mood_analysis_service


@pytest.mark.django_db
class TestAnalyzeLog:
    def test_writes_analysis_and_recommendations(self, pending_log):
        result = mood_analysis_service.analyze_log(pending_log.id)

        pending_log.refresh_from_db()
        assert pending_log.is_analyzed
        assert pending_log.stress_level == 5
        assert pending_log.sentiment == result["analysis"].sentiment
        positions = list(
            Recommendation.objects.filter(mood_log=pending_log).values_list("position", flat=True)
        )
        assert positions == [0, 1, 2]

    def test_request_values_take_precedence(self, pending_log):
        result = mood_analysis_service.analyze_log(pending_log.id, mood_level=5, note="")
        assert result["analysis"].stress_level == 1

    def test_second_pass_is_rejected(self, pending_log):
        mood_analysis_service.analyze_log(pending_log.id)
        with pytest.raises(MoodLogAlreadyAnalyzed):
            mood_analysis_service.analyze_log(pending_log.id)
        assert Recommendation.objects.filter(mood_log=pending_log).count() == 3

    def test_missing_log(self):
        with pytest.raises(MoodLogNotFound):
            mood_analysis_service.analyze_log(999999)

    def test_other_users_log_is_not_found(self, pending_log, other_member):
        with pytest.raises(MoodLogNotFound):
            mood_analysis_service.analyze_log(pending_log.id, user=other_member)

    def test_admin_may_analyze_any_log(self, pending_log, admin_user):
        mood_analysis_service.analyze_log(pending_log.id, user=admin_user)
        pending_log.refresh_from_db()
        assert pending_log.is_analyzed

    def test_failed_insert_rolls_back_analysis(self, pending_log, monkeypatch):
        def fail(*args, **kwargs):
            raise RuntimeError("insert failed")

        monkeypatch.setattr(Recommendation.objects, "bulk_create", fail)
        with pytest.raises(RuntimeError):
            mood_analysis_service.analyze_log(pending_log.id)

        pending_log.refresh_from_db()
        assert not pending_log.is_analyzed
        assert pending_log.sentiment is None


@pytest.mark.django_db
def test_analysis_runs_when_log_is_committed(member, django_capture_on_commit_callbacks):
    with django_capture_on_commit_callbacks(execute=True):
        mood_log = MoodLog.objects.create(user=member, mood_level=4, note="good day")

    mood_log.refresh_from_db()
    assert mood_log.is_analyzed
    assert mood_log.recommendations.count() == 1


@pytest.mark.django_db
def test_automatic_analysis_can_be_disabled(member, settings, django_capture_on_commit_callbacks):
    settings.MOOD_ANALYSIS_SETTINGS = {"ANALYZE_ON_CREATE": False}
    with django_capture_on_commit_callbacks(execute=True) as callbacks:
        mood_log = MoodLog.objects.create(user=member, mood_level=4)

    assert callbacks == []
    mood_log.refresh_from_db()
    assert not mood_log.is_analyzed


@pytest.mark.django_db
def test_background_analysis_never_raises(pending_log):
    mood_analysis_service.analyze_after_create(pending_log.id)
    mood_analysis_service.analyze_after_create(pending_log.id)
    mood_analysis_service.analyze_after_create(123456)
