"""
Preference Modifiers

Difficulty and learning-style multipliers. Both scorers apply them, in this
order, after their own base scoring.
"""

from typing import Dict

from .constants import DIFFICULTY_MULTIPLIERS, LEARNING_STYLE_MULTIPLIERS


def _apply_multipliers(scores: Dict[str, float], multipliers: Dict[str, float]) -> None:
    for course, multiplier in multipliers.items():
        scores[course] *= multiplier


def apply_difficulty(scores: Dict[str, float], difficulty: int) -> None:
    """Scale scores in place for the preferred difficulty. Unknown codes are a no-op."""
    _apply_multipliers(scores, DIFFICULTY_MULTIPLIERS.get(difficulty, {}))


def apply_learning_style(scores: Dict[str, float], learning_style: int) -> None:
    """Scale scores in place for the learning style. Unknown codes are a no-op."""
    _apply_multipliers(scores, LEARNING_STYLE_MULTIPLIERS.get(learning_style, {}))


def apply_preferences(scores: Dict[str, float], difficulty: int, learning_style: int) -> None:
    apply_difficulty(scores, difficulty)
    apply_learning_style(scores, learning_style)
