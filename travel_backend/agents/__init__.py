"""
AI components for the travel recommender backend.

1. Travel Recommendation (Single-Shot LLM)
   - One Groq chat completion per request, JSON-only output contract
   - Prompt templates: travel_backend/agents/recommendation/prompts.py
   - Orchestration: travel_backend/services/recommendation_service.py
"""
