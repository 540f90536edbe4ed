"""
Completion Client - Groq chat completions over HTTP

Sends a rendered prompt to the Groq OpenAI-compatible chat completions
endpoint and returns the text of the first choice.

Architecture:
- Capability interface: CompletionProvider (tests substitute a stub)
- Transport: httpx.AsyncClient, one client per call
- Exactly one request per recommendation: no retry, no backoff, no streaming
- Deadline: COMPLETION_TIMEOUT_SECONDS from Settings

Failure modes (all RecommendationError subclasses):
- ConfigurationError: no API key at call time (request is never sent)
- TransportError: connection failed, timed out, or the body could not be read
- RemoteError: non-2xx status, or a 2xx body that is not a completion payload
- EmptyResponseError: the endpoint returned zero choices
"""

import logging
from typing import List, Optional, Protocol

import httpx
from pydantic import BaseModel, Field, ValidationError

from travel_backend.config import Settings
from travel_backend.services.errors import (
    ConfigurationError,
    EmptyResponseError,
    RemoteError,
    TransportError,
)
from travel_backend.utils.logging import preview

logger = logging.getLogger(__name__)


# =============================================================================
# WIRE MODELS (owned by the provider's API contract)
# =============================================================================

class CompletionMessage(BaseModel):
    """Chat message sent to the provider."""
    role: str
    content: str


class CompletionRequest(BaseModel):
    """Request body for POST /chat/completions."""
    model: str
    messages: List[CompletionMessage]
    temperature: float
    max_tokens: int


class CompletionChoiceMessage(BaseModel):
    content: Optional[str] = None


class CompletionChoice(BaseModel):
    message: CompletionChoiceMessage


class CompletionResponse(BaseModel):
    """Subset of the provider response that the pipeline reads."""
    choices: List[CompletionChoice] = Field(default_factory=list)


# =============================================================================
# CAPABILITY INTERFACE
# =============================================================================

class CompletionProvider(Protocol):
    """Anything that can turn a prompt into generated text."""

    async def complete(self, prompt: str) -> str:
        ...


# =============================================================================
# GROQ IMPLEMENTATION
# =============================================================================

class GroqCompletionClient:
    """CompletionProvider backed by the Groq chat completions API."""

    def __init__(
        self,
        api_key: str,
        api_url: str,
        model: str,
        temperature: float,
        max_tokens: int,
        timeout: float,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.api_url = api_url
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "GroqCompletionClient":
        """Build a client from application settings."""
        return cls(
            api_key=settings.GROQ_API_KEY,
            api_url=settings.GROQ_API_URL,
            model=settings.GROQ_MODEL,
            temperature=settings.GROQ_TEMPERATURE,
            max_tokens=settings.GROQ_MAX_TOKENS,
            timeout=settings.COMPLETION_TIMEOUT_SECONDS,
            transport=transport,
        )

    def build_request(self, prompt: str) -> CompletionRequest:
        """Wrap the prompt in the provider's request shape."""
        return CompletionRequest(
            model=self.model,
            messages=[CompletionMessage(role="user", content=prompt)],
            temperature=self.temperature,
            max_tokens=self.max_tokens,
        )

    async def complete(self, prompt: str) -> str:
        """
        Send one chat completion request and return the first choice's text.

        Args:
            prompt: Rendered prompt, sent as a single user message

        Returns:
            Raw text content of the first choice ("" if the provider sent null)

        Raises:
            ConfigurationError: API key missing
            TransportError: network failure, timeout or unreadable body
            RemoteError: non-success status or malformed payload
            EmptyResponseError: zero choices returned
        """
        if not self.api_key:
            raise ConfigurationError("GROQ_API_KEY environment variable not set")

        payload = self.build_request(prompt).model_dump()
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }

        logger.info(f"Requesting completion from model={self.model}")

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            try:
                response = await client.post(self.api_url, json=payload, headers=headers)
            except httpx.TimeoutException as e:
                logger.error(f"Completion request timeout to {self.api_url}")
                raise TransportError(f"completion request timed out: {e}") from e
            except (httpx.RequestError, httpx.InvalidURL) as e:
                # Network failures, undecodable bodies, redirect loops, bad GROQ_API_URL
                logger.error(f"Completion request error: {e}")
                raise TransportError(f"completion request failed: {e}") from e

        body = response.text
        if not response.is_success:
            logger.error(f"Completion HTTP error: {response.status_code} - {preview(body)}")
            raise RemoteError(response.status_code, body)

        try:
            completion = CompletionResponse.model_validate_json(body)
        except ValidationError as e:
            logger.error(f"Malformed completion payload: {preview(body)}")
            raise RemoteError(
                response.status_code, body, message="Malformed completion payload"
            ) from e

        if not completion.choices:
            logger.error("Empty response from completion API")
            raise EmptyResponseError("empty response from Groq API")

        content = completion.choices[0].message.content or ""
        logger.info(f"Completion received ({len(content)} chars)")
        return content
