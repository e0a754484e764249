# mood/services/recommendations.py
from dataclasses import dataclass, asdict
from typing import List, Optional, Union

from mood.services.analyzer import parse_mood_level
from mood.settings import get_mood_settings

MAX_RECOMMENDATIONS = 3


@dataclass(frozen=True)
class RecommendationTemplate:
    title: str
    description: str
    content_url: str
    category: str

    def to_dict(self):
        return asdict(self)


STRESS_RELIEF = RecommendationTemplate(
    title="Immediate Stress Relief",
    description="Quick breathing exercise to calm your nervous system",
    content_url="https://www.youtube.com/watch?v=YRPh_GaiL8s",
    category="breathing",
)

MINDFULNESS_BREAK = RecommendationTemplate(
    title="5-Minute Mindfulness Break",
    description="Short meditation to center yourself",
    content_url="https://www.headspace.com/meditation/5-minute-meditation",
    category="mindfulness",
)

LOW_MOOD_ITEMS = (
    RecommendationTemplate(
        title="Gentle Movement",
        description="Light physical activity to boost endorphins",
        content_url="/activities/gentle-movement",
        category="activity",
    ),
    RecommendationTemplate(
        title="Crisis Support Resources",
        description="24/7 support when you need it most",
        content_url="/resources/crisis-support",
        category="article",
    ),
)

NEUTRAL_MOOD_ITEMS = (
    RecommendationTemplate(
        title="Mood Boosting Activities",
        description="Simple ways to lift your spirits",
        content_url="/activities/mood-boost",
        category="activity",
    ),
)

HIGH_MOOD_ITEMS = (
    RecommendationTemplate(
        title="Maintain Your Positive Energy",
        description="Tips to keep feeling great",
        content_url="/articles/positive-habits",
        category="article",
    ),
)


def _mood_tier_items(level: int):
    if level <= 2:
        return LOW_MOOD_ITEMS
    if level == 3:
        return NEUTRAL_MOOD_ITEMS
    return HIGH_MOOD_ITEMS


def generate_recommendations(
    mood_level: Union[int, str],
    stress_level: int,
    limit: Optional[int] = None,
) -> List[RecommendationTemplate]:
    """Stress-tier items first, then mood-tier items, capped at MAX_RECOMMENDATIONS"""
    level = parse_mood_level(mood_level)
    if limit is None:
        limit = get_mood_settings()["MAX_RECOMMENDATIONS"]
    limit = max(0, min(limit, MAX_RECOMMENDATIONS))

    recommendations = []
    if stress_level >= 4:
        recommendations.append(STRESS_RELIEF)
    if stress_level >= 3:
        recommendations.append(MINDFULNESS_BREAK)
    recommendations.extend(_mood_tier_items(level))

    return recommendations[:limit]
