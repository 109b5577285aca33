"""
Output Assembler

Transforms raw course scores into the final RecommendationResult contract.
The primary and fallback scorers share the record shape but fill the
rule-classification fields and rounding differently.
"""

from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple

from .contracts import RecommendationResult, ScoredCourses
from .constants import (
    FALLBACK_METHOD,
    FALLBACK_NOTE,
    FALLBACK_SCORE_DIGITS,
    PRIMARY_METHOD,
    PRIMARY_SCORE_DIGITS,
    PROBABILITY_FIELDS,
    TIMESTAMP_FORMAT,
)
from .ranker import rank_courses, top_two


def format_timestamp(now: Optional[datetime] = None) -> str:
    return (now or datetime.now()).strftime(TIMESTAMP_FORMAT)


def _probabilities(scores: Dict[str, float], digits: int) -> Dict[str, float]:
    return {PROBABILITY_FIELDS[course]: round(score, digits) for course, score in scores.items()}


def _assemble(
    ranked: List[Tuple[str, float]],
    scores: Dict[str, float],
    tree_course: str,
    tree_confidence: float,
    fis_output: float,
    digits: int,
    method: str,
    note: Optional[str],
    now: Optional[datetime],
) -> RecommendationResult:
    (first_course, first_score), (second_course, second_score) = top_two(ranked)

    return RecommendationResult(
        first_recommended_course=first_course,
        alternative_recommended_course=second_course,
        first_confidence=round(first_score, digits),
        second_confidence=round(second_score, digits),
        confidence_expert=round(first_score, digits),
        confidence_tree=round(tree_confidence, digits),
        expert_recommendation=first_course,
        tree_recommendation=tree_course,
        final_recommendation=first_course,
        fis_output=round(fis_output, digits),
        method=method,
        note=note,
        timestamp=format_timestamp(now),
        **_probabilities(scores, digits),
    )


def assemble_primary_result(
    scored: ScoredCourses,
    now: Optional[datetime] = None,
) -> RecommendationResult:
    """
    Build the primary scorer's output.

    The tree fields carry the rule classifier's course and that course's
    final score; `fisOutput` is the raw rule class.
    """
    ranked = rank_courses(scored.scores)
    return _assemble(
        ranked,
        scored.scores,
        tree_course=scored.rule_course,
        tree_confidence=scored.scores[scored.rule_course],
        fis_output=scored.rule_class,
        digits=PRIMARY_SCORE_DIGITS,
        method=PRIMARY_METHOD,
        note=None,
        now=now,
    )


def assemble_fallback_result(
    scored: ScoredCourses,
    now: Optional[datetime] = None,
) -> RecommendationResult:
    """
    Build the fallback scorer's output.

    There is no rule pass on this path, so the tree fields repeat the top
    course and `fisOutput` is the mean of the top two scores. The timestamp
    is UTC.
    """
    ranked = rank_courses(scored.scores)
    (first_course, first_score), (_, second_score) = top_two(ranked)
    return _assemble(
        ranked,
        scored.scores,
        tree_course=first_course,
        tree_confidence=first_score,
        fis_output=(first_score + second_score) / 2,
        digits=FALLBACK_SCORE_DIGITS,
        method=FALLBACK_METHOD,
        note=FALLBACK_NOTE,
        now=now or datetime.now(timezone.utc),
    )
