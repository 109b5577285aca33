"""
Tests for the fallback scorer.

A FixedRandom jitter source makes the arithmetic checkable by hand; seeded
`random.Random` instances cover the jitter bounds.
"""

import math
import random
from datetime import datetime, timezone

import pytest

from course_recommendation.logic import FallbackScorer, StudentResponses
from course_recommendation.logic.constants import (
    FALLBACK_METHOD,
    FALLBACK_NOTE,
    FALLBACK_SCORE_LIMIT,
    TIMESTAMP_FORMAT,
)
from course_recommendation.logic.fallback import base_score, bound_score


def test_base_score():
    assert base_score(StudentResponses()) == pytest.approx(1.2)
    assert base_score(StudentResponses(cgpa=4.0, programming=5)) == pytest.approx(3.1)


def test_defaults_without_jitter(zero_jitter_fallback, fixed_now):
    result = zero_jitter_fallback.recommend(StudentResponses(), now=fixed_now)

    # base 1.2 + interest 0.4 = 1.6, then moderate and visual multipliers
    assert result.course_scores == {
        "Gaming": 1.94,
        "Web Development": 1.6,
        "Fuzzy Logic": 1.76,
        "Database Design": 1.76,
        "Software Validation & Verification": 1.76,
    }
    assert result.first_recommended_course == "Gaming"
    # Three-way tie at 1.76 resolves in table order
    assert result.alternative_recommended_course == "Fuzzy Logic"

    assert result.tree_recommendation == "Gaming"
    assert result.confidence_tree == result.first_confidence == 1.94
    assert result.fis_output == pytest.approx(1.85)
    assert result.method == FALLBACK_METHOD
    assert result.note == FALLBACK_NOTE
    assert result.timestamp == "2025-03-14 09:26:53"


def test_jitter_stays_below_bound(fixed_random):
    responses = StudentResponses(cgpa=3.4, programming=2, databaseSystem=4, difficulty=1, learningStyle=3)
    base = FallbackScorer(rng=fixed_random(0.0)).score(responses).scores

    for seed in range(25):
        jittered = FallbackScorer(rng=random.Random(seed)).score(responses).scores
        for course, value in jittered.items():
            assert base[course] <= value < base[course] + 0.1


def test_near_max_jitter(fixed_random):
    responses = StudentResponses()
    base = FallbackScorer(rng=fixed_random(0.0)).score(responses).scores
    jittered = FallbackScorer(rng=fixed_random(0.999999)).score(responses).scores
    for course in base:
        assert jittered[course] - base[course] == pytest.approx(0.0999999)


def test_clear_winner_survives_jitter():
    """Gaps wider than the jitter bound keep their order."""
    responses = StudentResponses(cgpa=3.5, programming=3, gameDevelopment=5, softwareValidation=3)
    base = FallbackScorer(rng=random.Random(0), jitter=0.0).score(responses).scores
    ordered = sorted(base, key=base.get, reverse=True)

    for seed in range(50):
        result = FallbackScorer(rng=random.Random(seed)).recommend(responses)
        scores = result.course_scores
        for better in ordered:
            for worse in ordered:
                if base[better] - base[worse] > 0.1:
                    assert scores[better] >= scores[worse]
        assert result.first_recommended_course == "Gaming"


def test_seeded_rng_is_reproducible(fixed_now):
    responses = StudentResponses(cgpa=2.8, multimedia=3, webDevelopment=4)
    first = FallbackScorer(rng=random.Random(42)).recommend(responses, now=fixed_now)
    second = FallbackScorer(rng=random.Random(42)).recommend(responses, now=fixed_now)
    assert first == second


def test_top_two_are_distinct_and_ordered():
    for seed in range(20):
        result = FallbackScorer(rng=random.Random(seed)).recommend(StudentResponses(learningStyle=4))
        assert result.first_recommended_course != result.alternative_recommended_course
        assert result.first_confidence >= result.second_confidence


@pytest.mark.parametrize(
    "value, expected",
    [
        (1.5, 1.5),
        (math.inf, FALLBACK_SCORE_LIMIT),
        (-math.inf, -FALLBACK_SCORE_LIMIT),
        (math.nan, -FALLBACK_SCORE_LIMIT),
        (1.7e308, FALLBACK_SCORE_LIMIT),
    ],
)
def test_bound_score(value, expected):
    assert bound_score(value) == expected


def test_overflowing_inputs_stay_finite(zero_jitter_fallback):
    responses = StudentResponses(
        cgpa=1.7e308,
        programming=1.7e308,
        multimedia=1.7e308,
        softwareEngineering=1.7e308,
        webDevelopment=1.7e308,
        difficulty=1,
        learningStyle=2,
    )
    result = zero_jitter_fallback.recommend(responses)

    assert all(math.isfinite(score) for score in result.course_scores.values())
    assert math.isfinite(result.fis_output)
    assert result.first_recommended_course != result.alternative_recommended_course


def test_timestamp_is_utc(zero_jitter_fallback):
    before = datetime.now(timezone.utc).replace(tzinfo=None, microsecond=0)
    result = zero_jitter_fallback.recommend(StudentResponses())
    after = datetime.now(timezone.utc).replace(tzinfo=None)

    stamped = datetime.strptime(result.timestamp, TIMESTAMP_FORMAT)
    assert before <= stamped <= after
