"""
Logging helpers for the travel recommender backend.

Modules log through logging.getLogger(__name__); handlers and format are
configured once in main.py.

LOGGING RULES:
- NEVER log the Groq API key or the Authorization header
- NEVER return provider error bodies or raw model text to the HTTP caller;
  they belong in server logs only, and only as a bounded preview

Acceptable logging:
- High-level events (e.g., "Prompt built from 6 answers", "Completion received")
- Non-sensitive metadata (e.g., "destination='Lisbon, Portugal'")
- Provider status codes and truncated error bodies
"""

# Maximum number of characters of provider/model text written to a log line
LOG_PREVIEW_CHARS = 500


def preview(text: str, limit: int = LOG_PREVIEW_CHARS) -> str:
    """Truncate text for a log line."""
    if len(text) <= limit:
        return text
    return text[:limit] + "..."
