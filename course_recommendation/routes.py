"""
Recommendation API Routes

Exposes the course scorers via REST API.
Endpoints: POST /api/recommend, GET /api/health
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

import config
from .logic.contracts import StudentResponses
from .logic.fallback import FallbackScorer
from .logic.runner import build_response, run_recommendation

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["recommendations"])


# =============================================================================
# ENDPOINTS
# =============================================================================

@router.post("/recommend", summary="Get a course recommendation")
async def recommend(request: Request):
    """
    Recommend a course from questionnaire answers.

    **Request Body:** any JSON object; known fields are `cgpa`, the five
    subject strengths, the five interests, `difficulty` and `learningStyle`.
    Missing or malformed values fall back to defaults.

    **Response:** `{"success": true, "data": {...}}` - always successful.
    """
    try:
        payload = await request.json()
    except ValueError:
        logger.warning("Request body is not valid JSON, using defaults")
        payload = {}

    # Scoring is sync; keep it off the event loop
    try:
        result = await run_in_threadpool(run_recommendation, payload)
        # Render here so encoding errors are caught below
        return JSONResponse(build_response(result))
    except Exception:
        logger.exception("Recommendation pipeline failed, returning default fallback")
        return JSONResponse(build_response(FallbackScorer().recommend(StudentResponses())))


# =============================================================================
# HEALTH CHECK
# =============================================================================

@router.get("/health", summary="Recommendation service health check")
def health_check():
    """Static liveness indicator."""
    return {
        "status": "OK",
        "message": "Course Recommendation API is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": config.APP_ENV,
    }
