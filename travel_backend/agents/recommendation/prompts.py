"""
Travel Recommendation Prompt Templates

Contains the prompt builder for the travel recommendation pipeline.

Architecture:
- Pattern: Single-shot LLM (one chat completion per recommendation)
- Provider: Groq OpenAI-compatible chat completions
- Model: llama-3.3-70b-versatile
- Temperature: 0.7 (variety across destinations)
- Output: Bare JSON object, parsed by services/response_decoder.py

Prompt Engineering Pattern:
- Preamble fixes the assistant's role and the JSON-only output contract
- User preferences rendered as "- <question>: <answer>" bullets, in order
- A filled-in JSON template shows every field of the Recommendation record
- Closing constraints are advisory; nothing downstream enforces them
"""

from typing import Sequence

from travel_backend.schemas.recommendations import Answer

# =============================================================================
# PROMPT SECTIONS
# =============================================================================

TRAVEL_PROMPT_PREAMBLE = (
    "You are an expert travel advisor. Based on the following user preferences, "
    "recommend the perfect travel destination. Provide a detailed recommendation "
    "in JSON format.\n\nUser Preferences:\n"
)

TRAVEL_RESPONSE_TEMPLATE = """{
  "destination": "City/Country name",
  "reason": "A compelling 2-3 sentence explanation of why this destination perfectly matches their preferences",
  "activities": ["activity1", "activity2", "activity3", "activity4"],
  "bestTime": "Best time to visit (e.g., 'April to October' or 'Year-round')",
  "budget": "Budget category and daily estimate (e.g., 'Mid-range: $100-200 per day' or 'Luxury: $300+ per day')",
  "duration": "Recommended trip duration (e.g., '5-7 days' or '10-14 days')",
  "highlights": ["highlight1", "highlight2", "highlight3"],
  "travelTips": ["tip1", "tip2", "tip3"],
  "alternativeDestinations": [
    {
      "name": "Alternative City/Country 1",
      "score": 85,
      "reason": "Why this is also a good match"
    },
    {
      "name": "Alternative City/Country 2",
      "score": 80,
      "reason": "Why this is also a good match"
    }
  ],
  "weather": {
    "temp": "Temperature range (e.g., '75-85°F' or '20-28°C')",
    "condition": "General weather (e.g., 'Sunny', 'Mild', 'Tropical')"
  },
  "flightEstimate": "Flight cost estimate from major hubs (e.g., '$600-$1,200' or '$300-$600')",
  "localCurrency": "Local currency code (e.g., 'EUR', 'USD', 'JPY')",
  "safetyRating": "Safety level (e.g., 'Very Safe', 'Safe', 'Exercise Caution')",
  "packingList": ["Essential item 1", "Essential item 2", "Essential item 3", "Essential item 4", "Essential item 5"],
  "localPhrases": [
    {"english": "Hello", "local": "Translation"},
    {"english": "Thank you", "local": "Translation"},
    {"english": "Where is...?", "local": "Translation"},
    {"english": "How much?", "local": "Translation"}
  ],
  "itinerary": [
    {"day": 1, "activities": ["Activity 1", "Activity 2", "Activity 3"]},
    {"day": 2, "activities": ["Activity 1", "Activity 2", "Activity 3"]},
    {"day": 3, "activities": ["Activity 1", "Activity 2", "Activity 3"]},
    {"day": 4, "activities": ["Activity 1", "Activity 2", "Activity 3"]},
    {"day": 5, "activities": ["Activity 1", "Activity 2", "Activity 3"]}
  ]
}"""

TRAVEL_RESPONSE_CONSTRAINTS = [
    "The alternativeDestinations should be 2-3 other destinations that also match their preferences well",
    "Scores should be between 70-90 (since the main destination is the best match at ~95-100)",
    "Make sure alternatives are diverse and genuinely different from the main recommendation",
    "Consider different continents or travel styles for the alternatives",
    "Provide realistic flight estimates based on typical costs from major international hubs",
    "Itinerary should match the recommended duration (adjust number of days as needed)",
    "Local phrases should be accurate translations in the destination's primary language",
    "Packing list should be specific to the destination's climate and activities",
]


def format_answer_line(answer: Answer) -> str:
    """Render one answer as a prompt bullet line (without newline)."""
    return f"- {answer.question}: {answer.answer}"


# =============================================================================
# PROMPT BUILDER
# =============================================================================

def build_travel_prompt(answers: Sequence[Answer]) -> str:
    """
    Build the completion prompt for a travel recommendation.

    Pure function: the same answers always yield the same prompt, and an
    empty sequence still yields the full preamble, template and constraints.

    Args:
        answers: Answered preference questions, rendered in the given order

    Returns:
        Complete prompt string sent as the single user message
    """
    preferences = "".join(f"{format_answer_line(answer)}\n" for answer in answers)
    constraints = "\n".join(f"- {constraint}" for constraint in TRAVEL_RESPONSE_CONSTRAINTS)

    return (
        f"{TRAVEL_PROMPT_PREAMBLE}"
        f"{preferences}"
        "\n\nPlease analyze these preferences and provide a travel recommendation "
        "in the following JSON format (respond ONLY with valid JSON, no markdown "
        "or additional text):\n\n"
        f"{TRAVEL_RESPONSE_TEMPLATE}\n\n"
        "Important: \n"
        f"{constraints}"
    )
