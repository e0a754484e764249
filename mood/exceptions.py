# mood/exceptions.py


class MoodAnalysisError(Exception):
    """Base exception for mood analysis failures."""
    pass


class InvalidMoodLevel(MoodAnalysisError):
    """Raised when a mood level is not an integer between 1 and 5."""
    pass


class MoodLogNotFound(MoodAnalysisError):
    """Raised when the mood log to analyze does not exist or is not accessible."""
    pass


class MoodLogAlreadyAnalyzed(MoodAnalysisError):
    """Raised when a second analysis pass is attempted on a mood log."""
    pass
