"""
Configuration module for the travel recommender backend.

Loads environment variables (optionally from a .env file) into an explicit
Settings object that is handed to the app factory and the completion client.
"""
import logging
import os
from typing import List

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Load .env file (optional, environment variables win when both are set)
if not load_dotenv():
    logger.info("No .env file found, using environment variables")


DEFAULT_GROQ_API_URL = "https://api.groq.com/openai/v1/chat/completions"
DEFAULT_GROQ_MODEL = "llama-3.3-70b-versatile"


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self) -> None:
        # Groq completion API
        # The key is NOT validated here; the completion client checks it
        # when a recommendation is actually requested.
        self.GROQ_API_KEY: str = os.getenv("GROQ_API_KEY", "")
        self.GROQ_API_URL: str = os.getenv("GROQ_API_URL", DEFAULT_GROQ_API_URL)
        self.GROQ_MODEL: str = os.getenv("GROQ_MODEL", DEFAULT_GROQ_MODEL)
        self.GROQ_TEMPERATURE: float = float(os.getenv("GROQ_TEMPERATURE", "0.7"))
        self.GROQ_MAX_TOKENS: int = int(os.getenv("GROQ_MAX_TOKENS", "2048"))
        self.COMPLETION_TIMEOUT_SECONDS: float = float(
            os.getenv("COMPLETION_TIMEOUT_SECONDS", "60")
        )

        # Server
        self.HOST: str = os.getenv("HOST", "0.0.0.0")
        self.PORT: int = int(os.getenv("PORT", "8080"))

        # Application Settings
        self.ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

        # CORS Settings
        self.CORS_ALLOW_ORIGIN: str = os.getenv("CORS_ALLOW_ORIGIN", "*")

    def missing_required(self) -> List[str]:
        """
        List required settings that are not configured.

        Returns:
            Names of the missing environment variables (empty when complete).
        """
        required_settings = {
            "GROQ_API_KEY": self.GROQ_API_KEY,
        }
        return [key for key, value in required_settings.items() if not value]

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.ENVIRONMENT.lower() == "production"

    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.ENVIRONMENT.lower() == "development"


# Shared instance for the server bootstrap and the module-level app
settings = Settings()
