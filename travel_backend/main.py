"""
FastAPI application entry point for the travel recommender backend.

This module builds the FastAPI app, wires the completion provider and
registers all routers.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from travel_backend.config import Settings, settings as default_settings
from travel_backend.routes.health import router as health_router
from travel_backend.routes.questions import router as questions_router
from travel_backend.routes.recommendations import router as recommendations_router
from travel_backend.services.completion_client import CompletionProvider, GroqCompletionClient
from travel_backend.utils.logging import preview

# Configure logging
logging.basicConfig(
    level=default_settings.LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = logging.getLogger(__name__)

CORS_ALLOW_METHODS = "GET, POST, OPTIONS"
CORS_ALLOW_HEADERS = "Content-Type, Authorization"


def _cors_headers(allow_origin: str) -> dict[str, str]:
    """Permissive cross-origin headers attached to every response."""
    return {
        "Access-Control-Allow-Origin": allow_origin,
        "Access-Control-Allow-Methods": CORS_ALLOW_METHODS,
        "Access-Control-Allow-Headers": CORS_ALLOW_HEADERS,
        "Access-Control-Allow-Credentials": "true",
    }


def create_app(
    app_settings: Optional[Settings] = None,
    completion_provider: Optional[CompletionProvider] = None,
) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        app_settings: Settings to use (defaults to the environment-loaded instance)
        completion_provider: Provider for model calls (defaults to Groq from settings)

    Returns:
        Configured FastAPI app
    """
    app_settings = app_settings or default_settings

    missing = app_settings.missing_required()
    if missing:
        # The completion client re-checks at call time; startup only warns
        logger.warning(
            f"Missing environment variables: {', '.join(missing)}. "
            "Recommendations will fail until they are configured."
        )

    app = FastAPI(
        title="Travel Recommender API",
        description="Preference questions and LLM-generated travel recommendations",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc"
    )
    app.state.settings = app_settings
    app.state.completion_provider = (
        completion_provider or GroqCompletionClient.from_settings(app_settings)
    )

    cors_headers = _cors_headers(app_settings.CORS_ALLOW_ORIGIN)

    @app.middleware("http")
    async def cors_middleware(request: Request, call_next):
        """Answer OPTIONS on any path with 200 and stamp CORS headers on all responses."""
        if request.method == "OPTIONS":
            return Response(status_code=status.HTTP_200_OK, headers=cors_headers)

        response = await call_next(request)
        response.headers.update(cors_headers)
        return response

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """
        Map malformed request bodies to 400.

        Validation details go to the log only.
        """
        logger.error(
            f"Validation error on {request.method} {request.url.path}: {exc.errors()}"
        )
        logger.error(f"Request body preview: {preview(str(exc.body))}")

        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": "Invalid request body"},
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        """
        Map anything a route did not handle to a bare 500.

        Runs outside cors_middleware, so the CORS headers are set here.
        """
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal Server Error"},
            headers=cors_headers,
        )

    # Register routers
    app.include_router(health_router)
    app.include_router(questions_router)
    app.include_router(recommendations_router)

    logger.info("FastAPI app initialized successfully")
    return app


app = create_app()
