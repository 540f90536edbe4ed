"""
FastAPI route for travel recommendations.

Endpoints:
- POST /api/recommend: Turn the user's answers into a Recommendation

Flow:
1. Parse/Validate: RecommendationRequest (bad body -> 400, see main.py)
2. Call pipeline: prompt -> Groq completion -> decode
3. Map errors: any RecommendationError -> 500 with a generic message
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from travel_backend.dependencies import get_completion_provider
from travel_backend.schemas.recommendations import Recommendation, RecommendationRequest
from travel_backend.services.completion_client import CompletionProvider
from travel_backend.services.errors import RecommendationError
from travel_backend.services.recommendation_service import generate_recommendation
from travel_backend.utils.logging import preview

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["recommendations"])

GENERIC_ERROR_MESSAGE = "Error generating recommendation"


@router.post(
    "/recommend",
    response_model=Recommendation,
    status_code=status.HTTP_200_OK,
    summary="Generate a travel recommendation",
    description="""
    Generates a destination recommendation from answered preference questions.

    **Request:** `{"answers": [{"question": "...", "answer": "..."}]}`

    **Responses:**
    - 200: Recommendation record (destination, itinerary, alternatives, ...)
    - 400: Body is not valid JSON or does not match the request shape
    - 500: The completion call or the decoding of its output failed.
      Details are logged server-side only.
    """
)
async def recommend(
    request: RecommendationRequest,
    provider: CompletionProvider = Depends(get_completion_provider),
) -> Recommendation:
    """
    Recommendation endpoint.

    - Parse/Validate: Handled by Pydantic RecommendationRequest
    - Call LLM: Single completion via the injected provider
    - Map output: Decoded Recommendation, serialized with camelCase aliases
    """
    logger.info(f"POST /api/recommend called with {len(request.answers)} answers")

    try:
        recommendation = await generate_recommendation(request.answers, provider)
    except RecommendationError as e:
        logger.exception(f"Error generating recommendation: {type(e).__name__}: {preview(str(e))}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=GENERIC_ERROR_MESSAGE,
        ) from e

    logger.info(f"Returning recommendation for destination='{recommendation.destination}'")
    return recommendation
