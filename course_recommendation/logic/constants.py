"""
Scoring Engine Constants

Defines the course table, weight tables, multipliers and thresholds used by
the course scorers. All values are fixed; nothing here is learned or tuned
at runtime.
"""

from enum import Enum, IntEnum
from typing import Dict, List


# =============================================================================
# COURSES
# =============================================================================

class Course(str, Enum):
    """The five recommendable courses, in table order."""
    GAMING = "Gaming"
    WEB_DEVELOPMENT = "Web Development"
    FUZZY_LOGIC = "Fuzzy Logic"
    DATABASE_DESIGN = "Database Design"
    SOFTWARE_VALIDATION = "Software Validation & Verification"


# Table order doubles as the tie-break order when ranking
COURSE_ORDER: List[str] = [course.value for course in Course]

# Course -> output field carrying its score
PROBABILITY_FIELDS: Dict[str, str] = {
    Course.GAMING.value: "probability_gaming",
    Course.WEB_DEVELOPMENT.value: "probability_web_development",
    Course.FUZZY_LOGIC.value: "probability_fuzzy_logic",
    Course.DATABASE_DESIGN.value: "probability_database_design",
    Course.SOFTWARE_VALIDATION.value: "probability_software_validation_verification",
}


# =============================================================================
# INPUT ENUMS & DEFAULTS
# =============================================================================

class Difficulty(IntEnum):
    EASY = 1
    MODERATE = 2
    DIFFICULT = 3


class LearningStyle(IntEnum):
    VISUAL = 1
    KINESTHETIC = 2
    READING_WRITING = 3
    AUDITORY = 4


DEFAULT_CGPA = 3.0
DEFAULT_SUBJECT_STRENGTH = 0
DEFAULT_INTEREST = 1
DEFAULT_DIFFICULTY = Difficulty.MODERATE.value
DEFAULT_LEARNING_STYLE = LearningStyle.VISUAL.value

# Subject strengths and interests are rated on a 0-5 scale
RATING_SCALE = 5.0

# CGPA is on a 0-4 scale
CGPA_SCALE = 4.0


# =============================================================================
# PRIMARY SCORER WEIGHTS
# =============================================================================

# Subject strength -> {course: weight}; keys are StudentResponses attributes
SUBJECT_COURSE_WEIGHTS: Dict[str, Dict[str, float]] = {
    "programming": {
        Course.GAMING.value: 0.7,
        Course.WEB_DEVELOPMENT.value: 1.0,
        Course.FUZZY_LOGIC.value: 0.6,
        Course.DATABASE_DESIGN.value: 0.8,
        Course.SOFTWARE_VALIDATION.value: 0.9,
    },
    "multimedia": {
        Course.GAMING.value: 1.0,
        Course.WEB_DEVELOPMENT.value: 0.8,
    },
    "machine_learning": {
        Course.FUZZY_LOGIC.value: 1.0,
    },
    "database": {
        Course.DATABASE_DESIGN.value: 1.0,
    },
    "software_engineering": {
        Course.WEB_DEVELOPMENT.value: 0.8,
        Course.SOFTWARE_VALIDATION.value: 1.0,
    },
}

# Interest -> the single course it feeds
INTEREST_COURSE_MAP: Dict[str, str] = {
    "game_development": Course.GAMING.value,
    "web_development": Course.WEB_DEVELOPMENT.value,
    "artificial_intelligence": Course.FUZZY_LOGIC.value,
    "database_system": Course.DATABASE_DESIGN.value,
    "software_validation": Course.SOFTWARE_VALIDATION.value,
}

# Upper bound of cgpa / CGPA_SCALE
CGPA_FACTOR_CAP = 1.25

# Flat bonus for the course picked by the rule classifier
RULE_BONUS = 0.3

# Every primary score is floored here
MIN_COURSE_SCORE = 0.1

PRIMARY_SCORE_DIGITS = 3


# =============================================================================
# RULE CLASSIFIER THRESHOLDS
# =============================================================================

HIGH_CGPA = 4.0
MID_CGPA = 3.0
HIGH_PROGRAMMING = 4
INTEREST_THRESHOLD = 3

# Lowest and highest rule class; class n points at COURSE_ORDER[n - 1]
MIN_RULE_CLASS = 1
MAX_RULE_CLASS = 5


# =============================================================================
# PREFERENCE MULTIPLIERS (shared by both scorers)
# =============================================================================

DIFFICULTY_MULTIPLIERS: Dict[int, Dict[str, float]] = {
    Difficulty.EASY: {
        Course.WEB_DEVELOPMENT.value: 1.2,
        Course.DATABASE_DESIGN.value: 1.2,
    },
    Difficulty.MODERATE: {
        Course.GAMING.value: 1.1,
        Course.SOFTWARE_VALIDATION.value: 1.1,
    },
    Difficulty.DIFFICULT: {
        Course.FUZZY_LOGIC.value: 1.2,
    },
}

LEARNING_STYLE_MULTIPLIERS: Dict[int, Dict[str, float]] = {
    LearningStyle.VISUAL: {
        Course.GAMING.value: 1.1,
        Course.FUZZY_LOGIC.value: 1.1,
        Course.DATABASE_DESIGN.value: 1.1,
    },
    LearningStyle.KINESTHETIC: {
        Course.GAMING.value: 1.15,
        Course.WEB_DEVELOPMENT.value: 1.15,
        Course.DATABASE_DESIGN.value: 1.15,
    },
    LearningStyle.READING_WRITING: {
        Course.WEB_DEVELOPMENT.value: 1.1,
        Course.SOFTWARE_VALIDATION.value: 1.1,
    },
    LearningStyle.AUDITORY: {
        Course.FUZZY_LOGIC.value: 1.05,
        Course.SOFTWARE_VALIDATION.value: 1.05,
    },
}


# =============================================================================
# FALLBACK SCORER
# =============================================================================

# The fallback divides CGPA by 5, not 4
FALLBACK_CGPA_SCALE = 5.0
FALLBACK_CGPA_WEIGHT = 2.0
FALLBACK_PROGRAMMING_WEIGHT = 1.5
FALLBACK_INTEREST_WEIGHT = 2.0

# Upper bound (exclusive) of the uniform jitter added to each fallback score
FALLBACK_JITTER = 0.1

# Fallback scores are clamped to +/- this so results stay JSON-encodable
FALLBACK_SCORE_LIMIT = 1e300

FALLBACK_SCORE_DIGITS = 2


# =============================================================================
# OUTPUT
# =============================================================================

PRIMARY_METHOD = "Fuzzy Rule-Based Scoring"
FALLBACK_METHOD = "Intelligent Fallback Algorithm"
FALLBACK_NOTE = "Generated using backup system for reliability"

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
