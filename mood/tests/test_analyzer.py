import pytest

from mood.exceptions import InvalidMoodLevel
from mood.services.analyzer import (
    BASE_ANALYSIS,
    POSITIVE_ADDENDUM,
    SAD_ADDENDUM,
    STRESS_ADDENDUM,
    analyze_mood,
    parse_mood_level,
)


@pytest.mark.parametrize(
    "level,stress",
    [(1, 5), (2, 4), (3, 3), (4, 2), (5, 1)],
)
def test_base_stress_by_mood_level(level, stress):
    analysis = analyze_mood(level)
    assert analysis.stress_level == stress
    assert analysis.sentiment == BASE_ANALYSIS[level][0]


def test_low_levels_share_the_difficult_sentence():
    assert analyze_mood(1).sentiment == analyze_mood(2).sentiment
    assert analyze_mood(1).sentiment.startswith("You seem to be experiencing")


def test_stress_keyword_raises_stress_and_appends_addendum():
    analysis = analyze_mood(3, "Big exam deadline coming up")
    assert analysis.stress_level == 4
    assert analysis.sentiment.endswith(STRESS_ADDENDUM)


def test_stress_is_capped_at_five():
    assert analyze_mood(1, "so much pressure").stress_level == 5


def test_keyword_matching_is_case_insensitive():
    assert analyze_mood(4, "I am OVERWHELMED").stress_level == 3


def test_keywords_match_inside_words():
    # "stressed" contains "stress"
    assert analyze_mood(5, "a bit stressed").stress_level == 2


def test_positive_addendum_only_from_level_three():
    assert POSITIVE_ADDENDUM in analyze_mood(3, "grateful for friends").sentiment
    assert POSITIVE_ADDENDUM not in analyze_mood(2, "grateful for friends").sentiment


def test_addenda_are_appended_in_order():
    analysis = analyze_mood(3, "stress and tired but happy")
    expected = " ".join([BASE_ANALYSIS[3][0], STRESS_ADDENDUM, SAD_ADDENDUM, POSITIVE_ADDENDUM])
    assert analysis.sentiment == expected
    assert analysis.stress_level == 4


def test_blank_note_is_ignored():
    assert analyze_mood(4, "   ") == analyze_mood(4)
    assert analyze_mood(4, None) == analyze_mood(4)


def test_analysis_is_deterministic():
    assert analyze_mood(2, "lonely and worried") == analyze_mood(2, "lonely and worried")


def test_response_shape():
    assert analyze_mood(5).to_response() == {
        "sentiment": BASE_ANALYSIS[5][0],
        "stressLevel": 1,
    }


def test_numeric_string_level_is_accepted():
    assert parse_mood_level("4") == 4
    assert analyze_mood("1").stress_level == 5


@pytest.mark.parametrize("value", [0, 6, "abc", "", None, True, 2.5])
def test_invalid_levels_are_rejected(value):
    with pytest.raises(InvalidMoodLevel):
        parse_mood_level(value)


def test_overwhelmed_exam_stress_at_lowest_level():
    analysis = analyze_mood(1, "I feel overwhelmed and exam stress")
    assert analysis.stress_level == 5
    assert BASE_ANALYSIS[1][0] in analysis.sentiment
    assert STRESS_ADDENDUM in analysis.sentiment


def test_grateful_and_happy_at_level_four():
    analysis = analyze_mood(4, "grateful and happy today")
    assert analysis.sentiment == f"{BASE_ANALYSIS[4][0]} {POSITIVE_ADDENDUM}"
    assert analysis.stress_level == 2
