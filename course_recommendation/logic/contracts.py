"""
Data Contracts for the Course Scoring Engine

Defines Pydantic models for StudentResponses (input) and RecommendationResult
(output). Wire names are camelCase; attributes are snake_case.
"""

import math
from typing import Any, Callable, Dict, Optional

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from .constants import (
    COURSE_ORDER,
    DEFAULT_CGPA,
    DEFAULT_DIFFICULTY,
    DEFAULT_INTEREST,
    DEFAULT_LEARNING_STYLE,
    DEFAULT_SUBJECT_STRENGTH,
    PROBABILITY_FIELDS,
)


def coerce_number(value: Any, default, cast: Callable):
    """
    Coerce a loosely typed questionnaire value.

    Returns `default` for anything that is not a finite number or a numeric
    string. Integer fields truncate (`"4.7"` -> 4).
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return default
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return default
    if not math.isfinite(number):
        return default
    return cast(number)


# =============================================================================
# INPUT CONTRACTS
# =============================================================================

class StudentResponses(BaseModel):
    """
    Input contract for the scorers.
    Every field is optional and falls back to its default when malformed.
    """
    cgpa: float = DEFAULT_CGPA

    # Subject strengths (0-5)
    programming: int = DEFAULT_SUBJECT_STRENGTH
    multimedia: int = DEFAULT_SUBJECT_STRENGTH
    machine_learning: int = Field(default=DEFAULT_SUBJECT_STRENGTH, alias="machineLearning")
    database: int = DEFAULT_SUBJECT_STRENGTH
    software_engineering: int = Field(default=DEFAULT_SUBJECT_STRENGTH, alias="softwareEngineering")

    # Interests (0-5)
    game_development: int = Field(default=DEFAULT_INTEREST, alias="gameDevelopment")
    web_development: int = Field(default=DEFAULT_INTEREST, alias="webDevelopment")
    artificial_intelligence: int = Field(default=DEFAULT_INTEREST, alias="artificialIntelligence")
    database_system: int = Field(default=DEFAULT_INTEREST, alias="databaseSystem")
    software_validation: int = Field(default=DEFAULT_INTEREST, alias="softwareValidation")

    # Preferences
    difficulty: int = DEFAULT_DIFFICULTY  # 1=easy, 2=moderate, 3=difficult
    learning_style: int = Field(default=DEFAULT_LEARNING_STYLE, alias="learningStyle")  # 1-4

    class Config:
        populate_by_name = True
        extra = "ignore"

    @field_validator("cgpa", mode="before")
    @classmethod
    def _coerce_cgpa(cls, value):
        return coerce_number(value, DEFAULT_CGPA, float)

    @field_validator(
        "programming",
        "multimedia",
        "machine_learning",
        "database",
        "software_engineering",
        "game_development",
        "web_development",
        "artificial_intelligence",
        "database_system",
        "software_validation",
        "difficulty",
        "learning_style",
        mode="before",
    )
    @classmethod
    def _coerce_rating(cls, value, info: ValidationInfo):
        default = cls.model_fields[info.field_name].default
        return coerce_number(value, default, int)


# =============================================================================
# INTERMEDIATE DATA STRUCTURES
# =============================================================================

class ScoredCourses(BaseModel):
    """
    Raw (unrounded) course scores produced by a scorer.
    Used between scoring and output assembly.
    """
    scores: Dict[str, float] = Field(default_factory=lambda: dict.fromkeys(COURSE_ORDER, 0.0))

    # Set by the primary scorer only
    rule_class: Optional[float] = None
    rule_course: Optional[str] = None


# =============================================================================
# OUTPUT CONTRACTS
# =============================================================================

class RecommendationResult(BaseModel):
    """
    Output contract shared by the primary and fallback scorers.
    `method` tells the two apart.
    """
    first_recommended_course: str = Field(alias="firstRecommendedCourse")
    alternative_recommended_course: str = Field(alias="alternativeRecommendedCourse")
    first_confidence: float = Field(alias="firstConfidence")
    second_confidence: float = Field(alias="secondConfidence")
    confidence_expert: float = Field(alias="Confidence_Expert")
    confidence_tree: float = Field(alias="Confidence_Tree")

    # Per-course scores
    probability_gaming: float = Field(alias="probability_Gaming")
    probability_web_development: float = Field(alias="probability_WebDevelopment")
    probability_fuzzy_logic: float = Field(alias="probability_FuzzyLogic")
    probability_database_design: float = Field(alias="probability_DatabaseDesign")
    probability_software_validation_verification: float = Field(
        alias="probability_SoftwareValidation_Verification"
    )

    expert_recommendation: str = Field(alias="expertRecommendation")
    tree_recommendation: str = Field(alias="treeRecommendation")
    final_recommendation: str = Field(alias="finalRecommendation")
    fis_output: float = Field(alias="fisOutput")

    # Provenance
    method: str
    note: Optional[str] = None

    timestamp: str

    class Config:
        populate_by_name = True

    @property
    def course_scores(self) -> Dict[str, float]:
        """Per-course scores in table order."""
        return {course: getattr(self, PROBABILITY_FIELDS[course]) for course in COURSE_ORDER}

    def to_response(self) -> Dict[str, Any]:
        """Wire representation (camelCase keys, no empty note)."""
        return self.model_dump(by_alias=True, exclude_none=True)
