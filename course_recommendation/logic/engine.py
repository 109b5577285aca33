"""
Recommendation Engine

Primary course scorer. Deterministic: the same responses always give the
same scores.

Pipeline flow:
1. Subject contribution - weighted subject strengths
2. Interest contribution - one interest per course
3. CGPA multiplier - capped at 1.25
4. Rule classification - flat bonus for the rule's course
5. Preference multipliers - difficulty, then learning style
6. Floor - every course keeps at least 0.1
7. Output Assembly - rank and build RecommendationResult
"""

import math
from datetime import datetime
from typing import Dict, Optional

from .contracts import RecommendationResult, ScoredCourses, StudentResponses
from .constants import (
    CGPA_FACTOR_CAP,
    CGPA_SCALE,
    INTEREST_COURSE_MAP,
    MIN_COURSE_SCORE,
    RATING_SCALE,
    RULE_BONUS,
    SUBJECT_COURSE_WEIGHTS,
)
from .exceptions import ScoringError
from .modifiers import apply_preferences
from .output_assembler import assemble_primary_result
from .rule_classifier import class_to_course, classify


def add_subject_contributions(scores: Dict[str, float], responses: StudentResponses) -> None:
    """Add each positive subject strength, normalised to 0-1, times its course weights."""
    for subject, weights in SUBJECT_COURSE_WEIGHTS.items():
        strength = getattr(responses, subject)
        if strength <= 0:
            continue
        normalized = strength / RATING_SCALE
        for course, weight in weights.items():
            scores[course] += normalized * weight


def add_interest_contributions(scores: Dict[str, float], responses: StudentResponses) -> None:
    for interest, course in INTEREST_COURSE_MAP.items():
        scores[course] += getattr(responses, interest) / RATING_SCALE


def cgpa_factor(cgpa: float) -> float:
    return min(cgpa / CGPA_SCALE, CGPA_FACTOR_CAP)


class RecommendationEngine:
    """
    Primary scorer: weighted sums, a rule-classification bonus and
    preference multipliers over the five courses.
    """

    def __init__(self):
        self.version = "1.0.0"

    def score(self, responses: StudentResponses) -> ScoredCourses:
        """
        Compute raw (unrounded) course scores.

        Raises:
            ScoringError: if any score ends up non-finite
        """
        scored = ScoredCourses()
        scores = scored.scores

        add_subject_contributions(scores, responses)
        add_interest_contributions(scores, responses)

        factor = cgpa_factor(responses.cgpa)
        for course in scores:
            scores[course] *= factor

        scored.rule_class = classify(responses)
        scored.rule_course = class_to_course(scored.rule_class)
        scores[scored.rule_course] += RULE_BONUS

        apply_preferences(scores, responses.difficulty, responses.learning_style)

        for course, value in scores.items():
            if not math.isfinite(value):
                raise ScoringError(f"non-finite score for {course}: {value}")
            scores[course] = max(value, MIN_COURSE_SCORE)

        return scored

    def recommend(
        self,
        responses: StudentResponses,
        now: Optional[datetime] = None,
    ) -> RecommendationResult:
        """
        Score and rank the courses for one student.

        Args:
            responses: Questionnaire answers
            now: Timestamp override

        Returns:
            RecommendationResult with 3-decimal scores
        """
        return assemble_primary_result(self.score(responses), now=now)

    def recommend_from_dict(self, responses_data: dict, **kwargs) -> RecommendationResult:
        """Convenience method for raw request bodies."""
        return self.recommend(StudentResponses.model_validate(responses_data), **kwargs)


def get_recommendation(responses: StudentResponses) -> RecommendationResult:
    """Convenience function for one-off scoring."""
    return RecommendationEngine().recommend(responses)
