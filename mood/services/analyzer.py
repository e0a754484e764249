# mood/services/analyzer.py
"""
Keyword-driven mood analysis.

Fixed-rule scoring: a base sentiment and stress level chosen from the mood
level, adjusted by keyword matches in the free-text note. Same inputs always
give the same output.
"""
from dataclasses import dataclass, asdict
from typing import Optional, Union

from mood.exceptions import InvalidMoodLevel

MIN_STRESS = 1
MAX_STRESS = 5

DIFFICULT_SENTENCE = (
    "You seem to be experiencing some difficult emotions today. Remember that "
    "it's normal to have ups and downs, and reaching out for support is a sign "
    "of strength."
)

BASE_ANALYSIS = {
    1: (DIFFICULT_SENTENCE, 5),
    2: (DIFFICULT_SENTENCE, 4),
    3: (
        "You're feeling okay today, which is perfectly normal. Consider some "
        "self-care activities to boost your mood a bit more.",
        3,
    ),
    4: (
        "You're feeling good today! This is a great foundation to build on. "
        "Keep up the positive momentum.",
        2,
    ),
    5: (
        "You're feeling fantastic today! Your positive energy can be contagious "
        "- consider sharing some encouragement with peers.",
        1,
    ),
}

STRESS_KEYWORDS = (
    "stress",
    "anxious",
    "worried",
    "overwhelmed",
    "pressure",
    "exam",
    "deadline",
)
POSITIVE_KEYWORDS = ("happy", "good", "great", "excited", "grateful", "accomplished")
SAD_KEYWORDS = ("sad", "depressed", "lonely", "tired", "exhausted", "hopeless")

STRESS_ADDENDUM = (
    "I noticed you mentioned feeling stressed. Try some breathing exercises "
    "or take a short break."
)
SAD_ADDENDUM = (
    "It sounds like you're going through a tough time. Consider reaching out "
    "to a friend or counselor."
)
POSITIVE_ADDENDUM = (
    "I can see you're focusing on positive aspects, which is wonderful for "
    "your mental health!"
)


@dataclass(frozen=True)
class MoodAnalysis:
    sentiment: str
    stress_level: int

    def to_response(self):
        """Shape returned by the analysis endpoint"""
        return {"sentiment": self.sentiment, "stressLevel": self.stress_level}

    def to_dict(self):
        return asdict(self)


def parse_mood_level(value: Union[int, str]) -> int:
    """Accept 1..5 as an int or a numeric string"""
    if isinstance(value, bool):
        raise InvalidMoodLevel(f"Invalid mood level: {value!r}")
    try:
        level = int(str(value).strip())
    except (TypeError, ValueError):
        raise InvalidMoodLevel(f"Invalid mood level: {value!r}")
    if level not in BASE_ANALYSIS:
        raise InvalidMoodLevel(f"Mood level must be between 1 and 5, got {level}")
    return level


def clamp_stress(value: int) -> int:
    return max(MIN_STRESS, min(MAX_STRESS, value))


def _contains_any(text: str, keywords) -> bool:
    return any(keyword in text for keyword in keywords)


def analyze_mood(mood_level: Union[int, str], note: Optional[str] = None) -> MoodAnalysis:
    level = parse_mood_level(mood_level)
    sentiment, stress_level = BASE_ANALYSIS[level]

    if note and note.strip():
        text = note.lower()

        # Order of addenda: stress, sad, positive
        if _contains_any(text, STRESS_KEYWORDS):
            stress_level = min(MAX_STRESS, stress_level + 1)
            sentiment = f"{sentiment} {STRESS_ADDENDUM}"

        if _contains_any(text, SAD_KEYWORDS):
            sentiment = f"{sentiment} {SAD_ADDENDUM}"

        if _contains_any(text, POSITIVE_KEYWORDS) and level >= 3:
            sentiment = f"{sentiment} {POSITIVE_ADDENDUM}"

    return MoodAnalysis(sentiment=sentiment, stress_level=clamp_stress(stress_level))
