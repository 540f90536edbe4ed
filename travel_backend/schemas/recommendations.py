"""
Pydantic schemas for the recommendation endpoint.

These models define the request contract (question/answer pairs) and the
Recommendation record decoded from the model's JSON reply. Field names on
the wire are camelCase (the shape the model is asked to produce and the
frontend reads); Python attributes are snake_case.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Base for records exchanged with the model and the frontend."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        extra="ignore",
    )


# ============================================================================
# REQUEST MODELS
# ============================================================================

class Answer(BaseModel):
    """A single answered preference question."""
    question: str = Field(
        ...,
        description="Question text as shown to the user",
        examples=["What's your preferred climate?"]
    )
    answer: str = Field(
        ...,
        description="Free-form answer or the selected option(s)",
        examples=["Mild/Temperate"]
    )


class RecommendationRequest(BaseModel):
    """
    Request body for POST /api/recommend.

    Order of answers is preserved into the prompt for readability only.
    """
    answers: List[Answer] = Field(
        default_factory=list,
        description="Answered preference questions, in the order they were asked",
        examples=[[{"question": "Mood?", "answer": "Relaxed"}]]
    )


# ============================================================================
# RECOMMENDATION RECORD
# ============================================================================

class AlternativeDestination(WireModel):
    """Runner-up destination suggested alongside the main one."""
    name: str
    # Prompt asks for 70-90; not enforced
    score: int
    reason: str


class Weather(WireModel):
    """Typical weather at the destination."""
    temp: str = Field(..., examples=["20-28°C"])
    condition: str = Field(..., examples=["Sunny"])


class LocalPhrase(WireModel):
    """English phrase with its translation in the destination's language."""
    english: str
    local: str


class DayItinerary(WireModel):
    """Activities planned for one day of the trip."""
    day: int
    activities: List[str]


class Recommendation(WireModel):
    """
    Structured travel recommendation produced by the model.

    Only the structure is validated. Content constraints stated in the
    prompt (score range, itinerary length vs. duration, phrase language)
    are advisory and not checked here.
    """
    destination: str = Field(..., examples=["Lisbon, Portugal"])
    reason: str
    activities: List[str]
    best_time: str = Field(..., examples=["April to October"])
    budget: str = Field(..., examples=["Mid-range: $100-200 per day"])
    duration: str = Field(..., examples=["5-7 days"])
    highlights: List[str]
    travel_tips: List[str]
    alternative_destinations: List[AlternativeDestination]
    weather: Weather
    flight_estimate: str = Field(..., examples=["$600-$1,200"])
    local_currency: str = Field(..., examples=["EUR"])
    safety_rating: str = Field(..., examples=["Very Safe"])
    packing_list: List[str]
    local_phrases: List[LocalPhrase]
    itinerary: List[DayItinerary]
