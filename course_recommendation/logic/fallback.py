"""
Fallback Scorer

Backup scorer used when the primary engine fails. It has no dependency that
can fail at request time: plain arithmetic plus a small random jitter that
keeps near-equal courses from tying deterministically.
"""

import math
import random
from datetime import datetime
from typing import Optional

from .contracts import RecommendationResult, ScoredCourses, StudentResponses
from .constants import (
    FALLBACK_CGPA_SCALE,
    FALLBACK_CGPA_WEIGHT,
    FALLBACK_INTEREST_WEIGHT,
    FALLBACK_JITTER,
    FALLBACK_PROGRAMMING_WEIGHT,
    FALLBACK_SCORE_LIMIT,
    INTEREST_COURSE_MAP,
    RATING_SCALE,
)
from .modifiers import apply_preferences
from .output_assembler import assemble_fallback_result


def base_score(responses: StudentResponses) -> float:
    """Score every course starts from: CGPA plus programming strength."""
    return (
        (responses.cgpa / FALLBACK_CGPA_SCALE) * FALLBACK_CGPA_WEIGHT
        + (responses.programming / RATING_SCALE) * FALLBACK_PROGRAMMING_WEIGHT
    )


def bound_score(value: float) -> float:
    """Clamp to +/- FALLBACK_SCORE_LIMIT; NaN ranks last."""
    if math.isnan(value):
        return -FALLBACK_SCORE_LIMIT
    return min(max(value, -FALLBACK_SCORE_LIMIT), FALLBACK_SCORE_LIMIT)


class FallbackScorer:
    """
    Args:
        rng: Source of jitter. Pass a seeded `random.Random` (or anything with
            a `random()` method) to make results reproducible.
        jitter: Exclusive upper bound of the per-course jitter.
    """

    def __init__(self, rng: Optional[random.Random] = None, jitter: float = FALLBACK_JITTER):
        self.rng = rng if rng is not None else random.Random()
        self.jitter = jitter

    def score(self, responses: StudentResponses) -> ScoredCourses:
        scored = ScoredCourses()
        scores = scored.scores

        base = base_score(responses)
        for interest, course in INTEREST_COURSE_MAP.items():
            interest_value = getattr(responses, interest)
            scores[course] = base + (interest_value / RATING_SCALE) * FALLBACK_INTEREST_WEIGHT

        apply_preferences(scores, responses.difficulty, responses.learning_style)

        for course in scores:
            scores[course] = bound_score(scores[course] + self.rng.random() * self.jitter)

        return scored

    def recommend(
        self,
        responses: StudentResponses,
        now: Optional[datetime] = None,
    ) -> RecommendationResult:
        return assemble_fallback_result(self.score(responses), now=now)
