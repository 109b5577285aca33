"""
Shared pytest fixtures for the course recommendation tests.
"""

from datetime import datetime

import pytest

from course_recommendation.logic import FallbackScorer, RecommendationEngine


class FixedRandom:
    """Stand-in RNG that always returns the same value."""

    def __init__(self, value: float = 0.0):
        self.value = value

    def random(self) -> float:
        return self.value


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 3, 14, 9, 26, 53)


@pytest.fixture
def engine() -> RecommendationEngine:
    return RecommendationEngine()


@pytest.fixture
def zero_jitter_fallback() -> FallbackScorer:
    return FallbackScorer(rng=FixedRandom(0.0))


@pytest.fixture
def fixed_random():
    """Factory for FixedRandom instances."""
    return FixedRandom
