"""Simple LLM client using httpx for direct API calls.

Talks to any OpenAI-compatible ``/chat/completions`` endpoint. The default
configuration points at Gemini's OpenAI-compatible surface.
"""

from dataclasses import dataclass, field
from typing import Any

import httpx

from xml_studio.config.settings import LLMSettings
from xml_studio.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class LLMConfig:
    """Configuration for LLM client.

    Attributes:
        base_url: API base URL
        api_key: API key; None means no credential is configured
        model: Model name
        temperature: Sampling temperature
        max_tokens: Maximum tokens to generate
        timeout: Request timeout in seconds
    """

    base_url: str = "https://generativelanguage.googleapis.com/v1beta/openai"
    api_key: str | None = None
    model: str = "gemini-2.5-flash"
    temperature: float = 0.2
    max_tokens: int = 8192
    timeout: int = 120

    @classmethod
    def from_settings(cls, settings: LLMSettings) -> "LLMConfig":
        return cls(
            base_url=settings.base_url,
            api_key=settings.api_key,
            model=settings.model,
            temperature=settings.temperature,
            max_tokens=settings.max_tokens,
            timeout=settings.timeout,
        )


@dataclass
class ChatMessage:
    """A chat message.

    Attributes:
        role: Message role (system, user, assistant)
        content: Message content
    """

    role: str
    content: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to API dict format."""
        return {"role": self.role, "content": self.content}


@dataclass
class LLMResponse:
    """Response from LLM.

    Attributes:
        content: Text content of the response
        finish_reason: Why the model stopped (stop, length, error, etc.)
        raw_response: Raw API response
    """

    content: str = ""
    finish_reason: str = "stop"
    raw_response: dict[str, Any] = field(default_factory=dict)

    @property
    def is_error(self) -> bool:
        return self.finish_reason == "error"


class SimpleLLMClient:
    """Simple LLM client using httpx.

    Usage:
        config = LLMConfig(api_key="...")
        async with SimpleLLMClient(config) as client:
            response = await client.chat([ChatMessage(role="user", content="Hello!")])
            print(response.content)
    """

    def __init__(
        self,
        config: LLMConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize client.

        Args:
            config: LLM configuration
            transport: Optional httpx transport (used by tests)
        """
        self.config = config
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "SimpleLLMClient":
        """Enter async context."""
        self._client = httpx.AsyncClient(
            timeout=httpx.Timeout(self.config.timeout),
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *args) -> None:
        """Exit async context."""
        if self._client:
            await self._client.aclose()
            self._client = None

    def _build_headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.config.api_key}",
        }

    def _build_request_body(self, messages: list[ChatMessage]) -> dict[str, Any]:
        return {
            "model": self.config.model,
            "messages": [m.to_dict() for m in messages],
            "temperature": self.config.temperature,
            "max_tokens": self.config.max_tokens,
        }

    def _parse_response(self, data: Any) -> LLMResponse:
        """Parse API response.

        Bodies that are not a chat completion (wrong JSON shape) come back as
        an error response rather than raising.

        Args:
            data: Decoded JSON body

        Returns:
            Parsed LLMResponse
        """
        if not isinstance(data, dict):
            logger.error(f"Unexpected LLM response body: {type(data).__name__}")
            return LLMResponse(
                content="Unexpected response body",
                finish_reason="error",
                raw_response={"body": data},
            )

        if "error" in data:
            logger.error(f"LLM API error: {data['error']}")
            return LLMResponse(
                content=f"Error: {data['error']}",
                finish_reason="error",
                raw_response=data,
            )

        choices = data.get("choices")
        if not isinstance(choices, list) or not choices:
            return LLMResponse(
                content="",
                finish_reason="error",
                raw_response=data,
            )

        choice = choices[0]
        message = choice.get("message") if isinstance(choice, dict) else None
        if not isinstance(message, dict):
            logger.error("LLM response choice carries no message object")
            return LLMResponse(
                content="Malformed choice",
                finish_reason="error",
                raw_response=data,
            )

        content = message.get("content") or ""
        if not isinstance(content, str):
            return LLMResponse(
                content="Non-text message content",
                finish_reason="error",
                raw_response=data,
            )

        return LLMResponse(
            content=content,
            finish_reason=choice.get("finish_reason") or "stop",
            raw_response=data,
        )

    async def chat(self, messages: list[ChatMessage]) -> LLMResponse:
        """Send chat completion request.

        Args:
            messages: Chat messages

        Returns:
            LLM response

        Raises:
            RuntimeError: If used outside ``async with``
            httpx.HTTPError: If the request fails
        """
        if not self._client:
            raise RuntimeError("Client not initialized. Use 'async with' context.")

        url = f"{self.config.base_url.rstrip('/')}/chat/completions"
        body = self._build_request_body(messages)

        logger.debug(f"LLM request to {url} ({len(messages)} messages)")

        try:
            response = await self._client.post(url, headers=self._build_headers(), json=body)
            response.raise_for_status()
            result = self._parse_response(response.json())
            logger.debug(
                f"LLM response: finish_reason={result.finish_reason}, "
                f"content_len={len(result.content)}"
            )
            return result

        except httpx.HTTPStatusError as e:
            logger.error(f"HTTP error: {e.response.status_code} - {e.response.text}")
            raise
        except httpx.HTTPError as e:
            logger.error(f"LLM request failed: {e}")
            raise
