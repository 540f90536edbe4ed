"""
Server bootstrap for the travel recommender backend.

Usage:
    python -m travel_backend
    travel-backend            (console script)

Listens on HOST:PORT from the environment (default 0.0.0.0:8080).
"""

import logging

import uvicorn

from travel_backend.config import settings

logger = logging.getLogger(__name__)


def main() -> None:
    """Start the API server with uvicorn."""
    from travel_backend.main import app

    logger.info(f"Server starting on port {settings.PORT}")
    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
