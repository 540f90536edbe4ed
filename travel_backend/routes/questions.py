"""
FastAPI route serving the travel-preference question catalog.

Endpoints:
- GET /api/questions: The six preference questions, in id order
"""

import logging
from typing import List

from fastapi import APIRouter, status

from travel_backend.schemas.questions import Question
from travel_backend.services.question_catalog import get_questions

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["questions"])


@router.get(
    "/questions",
    response_model=List[Question],
    status_code=status.HTTP_200_OK,
    summary="List travel-preference questions",
    description="""
    Returns the questions the frontend walks the user through.

    Each question carries an input `type` ("text" or "multiple") and a list
    of suggested `options`. The list is static and always in id order.
    """
)
async def list_questions() -> List[Question]:
    questions = get_questions()
    logger.debug(f"Returning {len(questions)} questions")
    return questions
