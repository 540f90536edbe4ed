"""
Recommendation Service - answers in, Recommendation out

Runs the three pipeline stages in order:
1. Prompt Builder  (agents/recommendation/prompts.py)
2. Completion call (any CompletionProvider, Groq in production)
3. Response Decoder (services/response_decoder.py)

The pipeline is stateless. Every failure surfaces as a RecommendationError
subclass and is left for the route to map to an HTTP status; nothing is
retried and no partial record is ever returned.
"""

import logging
from typing import Sequence

from travel_backend.agents.recommendation.prompts import build_travel_prompt
from travel_backend.schemas.recommendations import Answer, Recommendation
from travel_backend.services.completion_client import CompletionProvider
from travel_backend.services.response_decoder import decode_recommendation

logger = logging.getLogger(__name__)


async def generate_recommendation(
    answers: Sequence[Answer],
    provider: CompletionProvider,
) -> Recommendation:
    """
    Generate a travel recommendation from the user's answers.

    Args:
        answers: Answered preference questions, in display order
        provider: Completion backend used for the single model call

    Returns:
        Decoded Recommendation record

    Raises:
        RecommendationError: any configuration, transport, remote or decode failure
    """
    prompt = build_travel_prompt(answers)
    logger.info(f"Prompt built from {len(answers)} answers ({len(prompt)} chars)")

    content = await provider.complete(prompt)

    return decode_recommendation(content)
