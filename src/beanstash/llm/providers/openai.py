from typing import Any

from openai import AsyncOpenAI

from ..base import LLMProvider
from ..exceptions import ChatRequestError
from ..models import ChatMessage, LLMResponse


class OpenAIProvider(LLMProvider):
    """Provider for any endpoint speaking the OpenAI Chat Completions API.

    The reply is ``choices[0].message.content``; a response without it is
    rejected rather than shown as an empty message.
    """

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o-mini",
        base_url: str | None = None,
        organization: str | None = None,
        **client_kwargs: Any
    ):
        """Create the provider.

        Args:
            api_key: Bearer token sent with each request
            model: Default model
            base_url: Endpoint root; None means api.openai.com
            organization: Optional OpenAI organization id
            **client_kwargs: Passed through to AsyncOpenAI. Requests are sent
                once with no timeout unless ``max_retries`` or ``timeout``
                is given here.
        """
        self._model = model
        client_kwargs.setdefault("max_retries", 0)
        client_kwargs.setdefault("timeout", None)
        self._client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            organization=organization,
            **client_kwargs
        )

    @property
    def model(self) -> str:
        return self._model

    async def chat_completion(
        self,
        messages: list[ChatMessage],
        model: str | None = None,
        temperature: float = 0.7,
        max_tokens: int | None = None,
        **kwargs: Any
    ) -> LLMResponse:
        requested_model = model or self._model
        params: dict[str, Any] = {
            "model": requested_model,
            "messages": [message.model_dump() for message in messages],
            "temperature": temperature,
            **kwargs
        }
        if max_tokens is not None:
            params["max_tokens"] = max_tokens

        completion = await self._client.chat.completions.create(**params)

        if not completion.choices:
            raise ChatRequestError("Chat completion returned no choices")
        reply = completion.choices[0].message.content
        if reply is None:
            raise ChatRequestError("Chat completion returned no message content")

        usage = None
        if completion.usage:
            usage = {
                "prompt_tokens": completion.usage.prompt_tokens,
                "completion_tokens": completion.usage.completion_tokens,
                "total_tokens": completion.usage.total_tokens,
            }

        return LLMResponse(
            content=reply,
            model=completion.model or requested_model,
            usage=usage,
        )

    async def close(self) -> None:
        await self._client.close()
