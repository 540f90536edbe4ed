"""
Pydantic schemas for API request and response validation.

All FastAPI endpoints use explicit Pydantic models; the Recommendation
record doubles as the decode target for the model's JSON reply.
"""

from .health import HealthResponse
from .questions import Question, QuestionType
from .recommendations import (
    AlternativeDestination,
    Answer,
    DayItinerary,
    LocalPhrase,
    Recommendation,
    RecommendationRequest,
    Weather,
)

__all__ = [
    "HealthResponse",
    "Question",
    "QuestionType",
    "Answer",
    "RecommendationRequest",
    "AlternativeDestination",
    "Weather",
    "LocalPhrase",
    "DayItinerary",
    "Recommendation",
]
