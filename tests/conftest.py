"""
Pytest configuration for travel backend tests.

Sets up test environment and global fixtures.
"""
import copy
import os
from typing import Any, Dict, List, Optional

import pytest

# Set test environment variables before the app module is imported
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("GROQ_API_KEY", "test-groq-api-key")


SAMPLE_RECOMMENDATION: Dict[str, Any] = {
    "destination": "Lisbon, Portugal",
    "reason": "Lisbon pairs a relaxed pace with mild weather and great food.",
    "activities": ["Tram 28 ride", "Belém pastries", "Sintra day trip", "Fado night"],
    "bestTime": "March to October",
    "budget": "Mid-range: $100-200 per day",
    "duration": "5-7 days",
    "highlights": ["Alfama", "Belém Tower", "Miradouros"],
    "travelTips": ["Wear good shoes", "Buy a Viva Viagem card", "Book fado ahead"],
    "alternativeDestinations": [
        {"name": "Kyoto, Japan", "score": 85, "reason": "Calm temples and gardens"},
        {"name": "Cape Town, South Africa", "score": 78, "reason": "Coast and mountains"},
    ],
    "weather": {"temp": "18-27°C", "condition": "Sunny"},
    "flightEstimate": "$600-$1,200",
    "localCurrency": "EUR",
    "safetyRating": "Very Safe",
    "packingList": ["Walking shoes", "Light jacket", "Sunscreen", "Adapter", "Day bag"],
    "localPhrases": [
        {"english": "Hello", "local": "Olá"},
        {"english": "Thank you", "local": "Obrigado"},
    ],
    "itinerary": [
        {"day": 1, "activities": ["Alfama walk", "Castelo de São Jorge"]},
        {"day": 2, "activities": ["Belém", "LX Factory"]},
    ],
}


class StubCompletionProvider:
    """Deterministic CompletionProvider that records the prompts it receives."""

    def __init__(self, content: str = "", error: Optional[Exception] = None):
        self.content = content
        self.error = error
        self.prompts: List[str] = []

    async def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.content


@pytest.fixture
def recommendation_payload() -> Dict[str, Any]:
    """Valid Recommendation JSON object as the model would return it."""
    return copy.deepcopy(SAMPLE_RECOMMENDATION)


@pytest.fixture
def stub_provider():
    """Factory for StubCompletionProvider instances."""
    return StubCompletionProvider
