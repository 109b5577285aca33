"""
Rule Classifier

Coarse expert-rule pass layered on top of the weighted course scores.
Rules are evaluated top to bottom; the first matching rule decides the class.

Class values 1-5 point at the courses in table order:
- 1: Gaming
- 2: Web Development
- 3: Fuzzy Logic
- 4: Database Design
- 5: Software Validation & Verification
"""

from typing import Callable, List, NamedTuple, Optional

from .contracts import StudentResponses
from .constants import (
    COURSE_ORDER,
    HIGH_CGPA,
    HIGH_PROGRAMMING,
    INTEREST_THRESHOLD,
    MAX_RULE_CLASS,
    MID_CGPA,
    MIN_RULE_CLASS,
    Difficulty,
)


class ClassificationRule(NamedTuple):
    name: str
    condition: Callable[[StudentResponses], bool]
    rule_class: float


def _high_performer(r: StudentResponses) -> bool:
    return r.cgpa >= HIGH_CGPA and r.programming >= HIGH_PROGRAMMING


def _mid_performer(r: StudentResponses) -> bool:
    return r.cgpa >= MID_CGPA


CLASSIFICATION_RULES: List[ClassificationRule] = [
    # High performance students
    ClassificationRule(
        "high_performer_gaming",
        lambda r: _high_performer(r) and r.game_development >= INTEREST_THRESHOLD,
        1.0,
    ),
    ClassificationRule(
        "high_performer_web",
        lambda r: _high_performer(r) and r.web_development >= INTEREST_THRESHOLD,
        2.0,
    ),
    ClassificationRule(
        "high_performer_ai",
        lambda r: _high_performer(r) and r.artificial_intelligence >= INTEREST_THRESHOLD,
        3.0,
    ),
    ClassificationRule(
        "high_performer_database",
        lambda r: _high_performer(r) and r.database_system >= INTEREST_THRESHOLD,
        4.0,
    ),
    ClassificationRule("high_performer_validation", _high_performer, 5.0),
    # Mid performance students
    ClassificationRule(
        "mid_performer_ai_difficult",
        lambda r: (
            _mid_performer(r)
            and r.artificial_intelligence >= INTEREST_THRESHOLD
            and r.difficulty == Difficulty.DIFFICULT
        ),
        3.0,
    ),
    ClassificationRule(
        "mid_performer_database",
        lambda r: _mid_performer(r) and r.database_system >= INTEREST_THRESHOLD,
        4.0,
    ),
    ClassificationRule(
        "mid_performer_web",
        lambda r: _mid_performer(r) and r.web_development >= INTEREST_THRESHOLD,
        2.0,
    ),
    ClassificationRule("mid_performer_undecided", _mid_performer, 2.5),
    # Lower performance students
    ClassificationRule(
        "low_performer_web",
        lambda r: r.web_development >= INTEREST_THRESHOLD,
        2.0,
    ),
    ClassificationRule("low_performer_database", lambda r: True, 4.0),
]


def match_rule(
    responses: StudentResponses,
    rules: Optional[List[ClassificationRule]] = None,
) -> ClassificationRule:
    """Return the first rule whose condition holds."""
    for rule in rules if rules is not None else CLASSIFICATION_RULES:
        if rule.condition(responses):
            return rule
    raise LookupError("no classification rule matched")


def classify(responses: StudentResponses) -> float:
    """Rule class value (1.0-5.0, may be fractional) for a student."""
    return match_rule(responses).rule_class


def class_to_course(rule_class: float) -> str:
    """
    Map a class value to its course.

    Uses Python's round (half to even, so 2.5 lands on Web Development) and
    clamps to the valid class range.
    """
    index = min(max(round(rule_class), MIN_RULE_CLASS), MAX_RULE_CLASS)
    return COURSE_ORDER[index - 1]
