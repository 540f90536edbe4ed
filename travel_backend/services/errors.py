"""
Error taxonomy for the recommendation pipeline.

Every failure between "prompt built" and "record decoded" is a
RecommendationError. Routes map all of them to a generic HTTP 500; the
attributes carried here are for server logs only. Messages hold bounded
previews; the full provider body or model text stays on the attributes.
"""

from travel_backend.utils.logging import preview


class RecommendationError(Exception):
    """Base class for failures while generating a recommendation."""


class ConfigurationError(RecommendationError):
    """Raised when the completion API credential is not configured."""


class TransportError(RecommendationError):
    """Raised when the request to the completion endpoint cannot be completed."""


class RemoteError(RecommendationError):
    """
    Raised when the completion endpoint answers with an unusable response.

    Attributes:
        status_code: HTTP status returned by the endpoint
        body: Raw response body, kept for diagnosis
    """

    def __init__(self, status_code: int, body: str, message: str = "API request failed"):
        self.status_code = status_code
        self.body = body
        super().__init__(f"{message} with status {status_code}: {preview(body)}")


class EmptyResponseError(RecommendationError):
    """Raised when the completion endpoint returns zero choices."""


class DecodeError(RecommendationError):
    """
    Raised when the model output cannot be decoded into a Recommendation.

    Attributes:
        cause: The underlying parse/validation error
        content: The cleaned text that failed to parse
    """

    def __init__(self, cause: Exception, content: str):
        self.cause = cause
        self.content = content
        super().__init__(
            f"error parsing recommendation: {preview(str(cause))}. Content: {preview(content)}"
        )
