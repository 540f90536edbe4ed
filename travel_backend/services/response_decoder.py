"""
Response Decoder - model text to Recommendation

The model is told to answer with bare JSON but often wraps it in a Markdown
code fence. Decoding is all-or-nothing: either a fully valid Recommendation
comes back or DecodeError is raised with the cleaned text attached.
"""

import logging

from pydantic import ValidationError

from travel_backend.schemas.recommendations import Recommendation
from travel_backend.services.errors import DecodeError
from travel_backend.utils.logging import preview

logger = logging.getLogger(__name__)

JSON_FENCE = "```json"
FENCE = "```"


def _strip_fence_once(content: str) -> str:
    text = content.strip()
    changed = False

    if len(text) > len(JSON_FENCE) and text[:len(JSON_FENCE)].lower() == JSON_FENCE:
        text = text[len(JSON_FENCE):]
        changed = True
    if len(text) > len(FENCE) and text.startswith(FENCE):
        text = text[len(FENCE):]
        changed = True
    if len(text) > len(FENCE) and text.endswith(FENCE):
        text = text[:-len(FENCE)]
        changed = True

    # Text without fence markers is returned exactly as given
    return text.strip() if changed else content


def strip_code_fence(content: str) -> str:
    """
    Remove Markdown code fences wrapped around a JSON payload.

    Strips, each only when present: a leading ```json tag, a leading bare
    fence, and a trailing fence. Repeats until nothing changes, so
    strip_code_fence(strip_code_fence(x)) == strip_code_fence(x).

    Args:
        content: Raw model output

    Returns:
        The payload without fences (unchanged if no fence was found)
    """
    while True:
        stripped = _strip_fence_once(content)
        if stripped == content:
            return content
        content = stripped


def decode_recommendation(content: str) -> Recommendation:
    """
    Decode raw model output into a Recommendation.

    Unknown fields are ignored; missing or mistyped fields are errors.
    Strict mode: no coercion ("85", 85.0 and true are not ints), and only
    the camelCase wire names are accepted.

    Raises:
        DecodeError: text is not JSON or does not match the record shape
    """
    cleaned = strip_code_fence(content)

    try:
        recommendation = Recommendation.model_validate_json(cleaned, strict=True)
    except ValidationError as e:
        logger.error(f"Failed to parse recommendation: {e.error_count()} error(s)")
        logger.error(f"Cleaned content: {preview(cleaned)}")
        raise DecodeError(e, cleaned) from e

    logger.info(f"Decoded recommendation destination='{recommendation.destination}'")
    return recommendation
