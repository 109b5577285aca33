"""
Engine Runner

Orchestrates one recommendation request:
1. Coerces the raw request body into StudentResponses
2. Runs the primary engine
3. On any primary failure, logs it and runs the fallback scorer
4. Returns a result; never raises to the caller

This is a pure orchestration layer - NO scoring logic.
"""

import logging
from collections.abc import Mapping
from typing import Any, Dict, Optional

from pydantic import ValidationError

import config
from .contracts import RecommendationResult, StudentResponses
from .engine import RecommendationEngine
from .fallback import FallbackScorer

logger = logging.getLogger(__name__)


def coerce_responses(payload: Any) -> StudentResponses:
    """
    Turn a request body into StudentResponses.

    Non-mapping bodies are treated as empty; field-level problems are
    absorbed by the contract's validators.
    """
    if isinstance(payload, StudentResponses):
        return payload
    if not isinstance(payload, Mapping):
        payload = {}
    try:
        return StudentResponses.model_validate(dict(payload))
    except ValidationError as e:
        logger.warning(f"Unusable request body, using defaults: {e}")
        return StudentResponses()


def run_recommendation(
    payload: Any,
    engine: Optional[RecommendationEngine] = None,
    fallback: Optional[FallbackScorer] = None,
    primary_enabled: Optional[bool] = None,
) -> RecommendationResult:
    """
    Main entry point: score one questionnaire.

    Args:
        payload: Raw request body or StudentResponses
        engine: Primary scorer (default RecommendationEngine)
        fallback: Backup scorer (default FallbackScorer)
        primary_enabled: Override for config.PRIMARY_SCORER_ENABLED

    Returns:
        RecommendationResult from the primary engine, or from the fallback
        when the primary path is disabled or fails
    """
    responses = coerce_responses(payload)
    logger.info(f"📊 Received recommendation request: {responses.model_dump(by_alias=True)}")

    if primary_enabled is None:
        primary_enabled = config.PRIMARY_SCORER_ENABLED

    if primary_enabled:
        try:
            result = (engine or RecommendationEngine()).recommend(responses)
            logger.info(f"✅ Generated recommendation: {result.first_recommended_course}")
            return result
        except Exception:
            logger.exception("❌ Primary scorer failed, switching to fallback")
    else:
        logger.info("Primary scorer disabled by configuration")

    result = (fallback or FallbackScorer()).recommend(responses)
    logger.info(f"🔄 Using fallback recommendation: {result.first_recommended_course}")
    return result


def build_response(result: RecommendationResult) -> Dict[str, Any]:
    """Success envelope returned to API callers."""
    return {"success": True, "data": result.to_response()}
