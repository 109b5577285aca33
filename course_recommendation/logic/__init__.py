"""
Recommendation Logic Module

Provides the primary course scorer, the fallback scorer and the runner that
chooses between them.
"""

from .contracts import (
    StudentResponses,
    RecommendationResult,
    ScoredCourses,
)
from .engine import RecommendationEngine, get_recommendation
from .fallback import FallbackScorer
from .runner import run_recommendation, build_response
from .constants import Course, Difficulty, LearningStyle, COURSE_ORDER
from .exceptions import ScoringError

__all__ = [
    # Scorers
    "RecommendationEngine",
    "FallbackScorer",
    "get_recommendation",

    # Runner
    "run_recommendation",
    "build_response",

    # Contracts
    "StudentResponses",
    "RecommendationResult",
    "ScoredCourses",

    # Enums & tables
    "Course",
    "Difficulty",
    "LearningStyle",
    "COURSE_ORDER",

    # Errors
    "ScoringError",
]
