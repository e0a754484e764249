from .analyzer import analyze_mood, MoodAnalysis
from .recommendations import generate_recommendations, RecommendationTemplate
from .analysis_service import mood_analysis_service, MoodAnalysisService

__all__ = [
    "analyze_mood",
    "MoodAnalysis",
    "generate_recommendations",
    "RecommendationTemplate",
    "mood_analysis_service",
    "MoodAnalysisService",
]
