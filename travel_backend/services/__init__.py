"""
Service layer for the travel recommender backend.

Contains the recommendation pipeline:
- completion_client: Groq chat completions behind the CompletionProvider interface
- response_decoder: fence stripping and strict decode of the model's JSON
- recommendation_service: prompt -> completion -> decode orchestration
- question_catalog: the static preference questions
- errors: RecommendationError taxonomy

Services act as the glue between routes (HTTP layer) and the LLM provider.
"""

from .completion_client import CompletionProvider, GroqCompletionClient
from .errors import (
    ConfigurationError,
    DecodeError,
    EmptyResponseError,
    RecommendationError,
    RemoteError,
    TransportError,
)
from .question_catalog import get_questions
from .recommendation_service import generate_recommendation
from .response_decoder import decode_recommendation, strip_code_fence

__all__ = [
    "CompletionProvider",
    "GroqCompletionClient",
    "RecommendationError",
    "ConfigurationError",
    "TransportError",
    "RemoteError",
    "EmptyResponseError",
    "DecodeError",
    "get_questions",
    "generate_recommendation",
    "decode_recommendation",
    "strip_code_fence",
]
