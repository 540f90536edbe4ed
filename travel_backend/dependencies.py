"""
FastAPI dependencies shared by the routers.

The completion provider is built once by the app factory and stored on
app.state; tests replace it through app.dependency_overrides.
"""

from fastapi import Request

from travel_backend.services.completion_client import CompletionProvider


def get_completion_provider(request: Request) -> CompletionProvider:
    """Return the CompletionProvider configured for this application."""
    return request.app.state.completion_provider
