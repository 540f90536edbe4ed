"""
Tests for the Recommendation Service pipeline.

These tests use a stub CompletionProvider to avoid actual API calls and
ensure deterministic behavior.
"""

import json

import pytest

from travel_backend.schemas.recommendations import Answer, Recommendation
from travel_backend.services.errors import (
    ConfigurationError,
    DecodeError,
    EmptyResponseError,
    RemoteError,
    TransportError,
)
from travel_backend.services.recommendation_service import generate_recommendation


class TestGenerateRecommendation:
    """Tests for generate_recommendation."""

    @pytest.mark.asyncio
    async def test_fenced_reply_decoded(self, stub_provider, recommendation_payload):
        provider = stub_provider("```json\n" + json.dumps(recommendation_payload) + "\n```")

        result = await generate_recommendation([Answer(question="Mood?", answer="Relaxed")], provider)

        assert result == Recommendation.model_validate(recommendation_payload)

    @pytest.mark.asyncio
    async def test_single_completion_call_with_rendered_prompt(self, stub_provider, recommendation_payload):
        provider = stub_provider(json.dumps(recommendation_payload))
        answers = [
            Answer(question="Mood?", answer="Adventurous"),
            Answer(question="Climate?", answer="Desert/Dry"),
        ]

        await generate_recommendation(answers, provider)

        assert len(provider.prompts) == 1
        prompt = provider.prompts[0]
        assert prompt.index("- Mood?: Adventurous") < prompt.index("- Climate?: Desert/Dry")

    @pytest.mark.asyncio
    async def test_empty_answers_still_call_provider(self, stub_provider, recommendation_payload):
        provider = stub_provider(json.dumps(recommendation_payload))

        result = await generate_recommendation([], provider)

        assert result.destination == "Lisbon, Portugal"
        assert len(provider.prompts) == 1

    @pytest.mark.asyncio
    async def test_undecodable_reply_raises_decode_error(self, stub_provider):
        provider = stub_provider("I think you would love Lisbon!")

        with pytest.raises(DecodeError) as exc_info:
            await generate_recommendation([], provider)

        assert exc_info.value.content == "I think you would love Lisbon!"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("error", [
        ConfigurationError("GROQ_API_KEY environment variable not set"),
        TransportError("connection refused"),
        RemoteError(429, "rate limited"),
        EmptyResponseError("empty response from Groq API"),
    ])
    async def test_provider_errors_propagate_unchanged(self, stub_provider, error):
        provider = stub_provider(error=error)

        with pytest.raises(type(error)) as exc_info:
            await generate_recommendation([Answer(question="Mood?", answer="Relaxed")], provider)

        assert exc_info.value is error
        assert len(provider.prompts) == 1
