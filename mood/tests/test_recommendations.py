from mood.services.recommendations import (
    HIGH_MOOD_ITEMS,
    LOW_MOOD_ITEMS,
    MINDFULNESS_BREAK,
    NEUTRAL_MOOD_ITEMS,
    STRESS_RELIEF,
    generate_recommendations,
)


def test_high_stress_low_mood_is_capped_at_three():
    items = generate_recommendations(1, 5)
    assert items == [STRESS_RELIEF, MINDFULNESS_BREAK, LOW_MOOD_ITEMS[0]]


def test_medium_stress_neutral_mood():
    assert generate_recommendations(3, 3) == [MINDFULNESS_BREAK, *NEUTRAL_MOOD_ITEMS]


def test_low_stress_high_mood():
    assert generate_recommendations(5, 1) == list(HIGH_MOOD_ITEMS)
    assert generate_recommendations(4, 2) == list(HIGH_MOOD_ITEMS)


def test_low_mood_without_stress_items():
    assert generate_recommendations(2, 2) == list(LOW_MOOD_ITEMS)


def test_limit_setting_is_respected(settings):
    settings.MOOD_ANALYSIS_SETTINGS = {"MAX_RECOMMENDATIONS": 1}
    assert generate_recommendations(1, 5) == [STRESS_RELIEF]


def test_explicit_limit_lowers_the_cap():
    assert generate_recommendations(1, 5, limit=2) == [STRESS_RELIEF, MINDFULNESS_BREAK]


def test_explicit_limit_cannot_exceed_three():
    assert len(generate_recommendations(1, 5, limit=4)) == 3
    assert generate_recommendations(1, 5, limit=-1) == []


def test_setting_above_three_is_capped(settings):
    settings.MOOD_ANALYSIS_SETTINGS = {"MAX_RECOMMENDATIONS": 10}
    assert generate_recommendations(1, 5) == [STRESS_RELIEF, MINDFULNESS_BREAK, LOW_MOOD_ITEMS[0]]
