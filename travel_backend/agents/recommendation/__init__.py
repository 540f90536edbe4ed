"""
Travel Recommendation - Single-Shot LLM Architecture

This module contains the prompt templates for the Groq-based travel
recommendation pipeline.

The service layer is in:
- travel_backend/services/recommendation_service.py

Prompt templates are in:
- travel_backend/agents/recommendation/prompts.py
"""

from travel_backend.agents.recommendation.prompts import (
    TRAVEL_RESPONSE_TEMPLATE,
    build_travel_prompt,
)

__all__ = [
    "TRAVEL_RESPONSE_TEMPLATE",
    "build_travel_prompt",
]
