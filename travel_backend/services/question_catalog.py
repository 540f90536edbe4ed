"""
Static catalog of travel-preference questions served by GET /api/questions.
"""

from typing import List

from travel_backend.schemas.questions import Question, QuestionType

QUESTIONS: List[Question] = [
    Question(
        id=1,
        question="What's your current mood or how do you want to feel during this trip?",
        type=QuestionType.TEXT,
        options=["Adventurous", "Relaxed", "Romantic", "Cultural", "Energetic"],
    ),
    Question(
        id=2,
        question="What type of activities do you enjoy most?",
        type=QuestionType.MULTIPLE,
        options=[
            "Outdoor adventures",
            "Beach & water sports",
            "Historical sites",
            "Food & culinary",
            "Shopping",
            "Nightlife",
            "Wildlife & nature",
            "Art & museums",
        ],
    ),
    Question(
        id=3,
        question="What's your preferred climate?",
        type=QuestionType.TEXT,
        options=["Tropical/Hot", "Mild/Temperate", "Cold/Snowy", "Desert/Dry"],
    ),
    Question(
        id=4,
        question="What's your budget range for this trip?",
        type=QuestionType.TEXT,
        options=["Budget ($-$$)", "Mid-range ($$$)", "Luxury ($$$$)", "Ultra-luxury ($$$$$)"],
    ),
    Question(
        id=5,
        question="How long do you plan to travel?",
        type=QuestionType.TEXT,
        options=[
            "Weekend (2-3 days)",
            "Short trip (4-7 days)",
            "Week+ (8-14 days)",
            "Extended (15+ days)",
        ],
    ),
    Question(
        id=6,
        question="Do you prefer urban cities or natural landscapes?",
        type=QuestionType.TEXT,
        options=["Big cities", "Small towns", "Nature/countryside", "Mix of both"],
    ),
]


def get_questions() -> List[Question]:
    """Return the preference questions in id order."""
    return [question.model_copy(deep=True) for question in QUESTIONS]
