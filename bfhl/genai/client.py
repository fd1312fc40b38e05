"""Async client for the Gemini text generation API."""

import httpx
import structlog

from .schemas import GenerateContentRequest, extract_text
from .exceptions import GenerationError, GenerationTimeoutError, GenerationUnavailableError


logger = structlog.get_logger("genai")

# Default timeout for provider requests
DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL = "gemini-2.5-flash"


class TextGenerator:
    """Sends one-shot prompts to Gemini over a shared HTTP client.

    Attributes:
        client: Shared HTTP client (owned by the application lifespan).
        api_key: Provider API key, sent as the ``key`` query parameter.
        model: Model name used in the request path.
        base_url: Provider API root.
        timeout: Per-request timeout in seconds.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        api_key: str,
        model: str = DEFAULT_MODEL,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self.client = client
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @property
    def endpoint(self) -> str:
        """Full generateContent URL for the configured model."""
        return f"{self.base_url}/models/{self.model}:generateContent"

    async def generate(self, prompt: str) -> str:
        """Generate text for a prompt.

        Args:
            prompt: Question or instruction for the model.

        Returns:
            Text of the first candidate's first part, or "" if absent.

        Raises:
            GenerationTimeoutError: If the provider doesn't respond in time.
            GenerationUnavailableError: If the provider can't be reached.
            GenerationError: If no API key is configured, the provider returns
                an HTTP error status, or the body isn't JSON.
        """
        if not self.api_key:
            raise GenerationError(model=self.model, detail="API key not configured")

        payload = GenerateContentRequest.from_prompt(prompt)

        try:
            response = await self.client.post(
                self.endpoint,
                params={"key": self.api_key},
                json=payload.model_dump(),
                timeout=self.timeout,
            )
        except httpx.TimeoutException:
            raise GenerationTimeoutError(model=self.model, timeout_seconds=self.timeout)
        except httpx.ConnectError as e:
            raise GenerationUnavailableError(model=self.model, reason=str(e))
        except httpx.RequestError as e:
            raise GenerationUnavailableError(model=self.model, reason=f"Request failed: {e}")

        if response.status_code >= 400:
            raise GenerationError(
                model=self.model,
                status_code=response.status_code,
                detail=response.text[:200]  # Truncate for safety
            )

        try:
            body = response.json()
        except ValueError:
            raise GenerationError(
                model=self.model,
                status_code=response.status_code,
                detail="Response body is not JSON"
            )

        text = extract_text(body)
        logger.debug("generation_complete", model=self.model, chars=len(text))
        return text
