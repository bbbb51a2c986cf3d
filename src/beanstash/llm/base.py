from abc import ABC, abstractmethod
from typing import Any

from .models import ChatMessage, LLMResponse


class LLMProvider(ABC):
    """A remote chat-completion endpoint.

    One request in, one reply out. Providers raise ChatRequestError for
    replies they cannot use; transport errors may escape as whatever the
    underlying client raises, and the session treats both alike.

    Usable as an async context manager that closes the client on exit:
        async with create_llm_provider("hackclub") as llm:
            reply = await llm.chat_completion(messages)
    """

    @property
    @abstractmethod
    def model(self) -> str:
        """Model used when a request does not name one."""

    @abstractmethod
    async def chat_completion(
        self,
        messages: list[ChatMessage],
        model: str | None = None,
        temperature: float = 0.7,
        max_tokens: int | None = None,
        **kwargs: Any
    ) -> LLMResponse:
        """Request the next assistant message.

        Args:
            messages: System preamble followed by the conversation so far
            model: Overrides the provider's default model
            temperature: Sampling temperature
            max_tokens: Reply length cap, omitted from the request when None

        Raises:
            ChatRequestError: If the reply has no usable content
        """

    @abstractmethod
    async def close(self) -> None:
        """Release the HTTP client."""

    async def __aenter__(self) -> "LLMProvider":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        try:
            await self.close()
        except RuntimeError as e:
            # httpx can complain when the loop is torn down first
            if "Event loop is closed" not in str(e):
                raise
