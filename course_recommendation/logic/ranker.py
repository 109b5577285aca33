"""
Ranker

Orders courses by score. Ties keep course-table order.
"""

from typing import Dict, List, Tuple

from .constants import COURSE_ORDER


def rank_courses(scores: Dict[str, float]) -> List[Tuple[str, float]]:
    """
    Rank courses by score (descending).

    Args:
        scores: Course -> score

    Returns:
        (course, score) pairs, best first
    """
    in_table_order = [(course, scores[course]) for course in COURSE_ORDER if course in scores]
    # sorted() is stable under reverse=True, so equal scores stay in table order
    return sorted(in_table_order, key=lambda item: item[1], reverse=True)


def top_two(ranked: List[Tuple[str, float]]) -> Tuple[Tuple[str, float], Tuple[str, float]]:
    """Primary and alternative recommendation."""
    if len(ranked) < 2:
        raise ValueError(f"need at least two ranked courses, got {len(ranked)}")
    return ranked[0], ranked[1]
