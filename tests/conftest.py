"""Pytest configuration and shared fixtures."""
import asyncio
from typing import Any

import pytest

from beanstash.conversation import ConversationStore
from beanstash.llm import ChatMessage, ChatRequestError, LLMProvider, LLMResponse
from beanstash.session import ChatSession
from beanstash.storage import InMemoryKeyValueStore


class FakeLLMProvider(LLMProvider):
    """In-test chat provider.

    Records every request. Replies with ``reply``, raises ``error`` if set,
    and waits on ``gate`` (when given) before answering.
    """

    def __init__(
        self,
        reply: str = "Hello from Bean Stash!",
        error: Exception | None = None,
        gate: asyncio.Event | None = None,
    ):
        self.reply = reply
        self.error = error
        self.gate = gate
        self.calls: list[list[ChatMessage]] = []
        self.kwargs: list[dict[str, Any]] = []
        self.started = asyncio.Event()
        self.closed = False

    @property
    def model(self) -> str:
        return "fake-model"

    async def chat_completion(
        self,
        messages: list[ChatMessage],
        model: str | None = None,
        temperature: float = 0.7,
        max_tokens: int | None = None,
        **kwargs: Any
    ) -> LLMResponse:
        self.calls.append(list(messages))
        self.kwargs.append({"model": model, "temperature": temperature, "max_tokens": max_tokens})
        self.started.set()
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return LLMResponse(content=self.reply, model=self.model)

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def kv_store():
    """Empty in-memory key-value store."""
    return InMemoryKeyValueStore()


@pytest.fixture
def conversation_store(kv_store):
    """Conversation store over the in-memory key-value store."""
    return ConversationStore(kv_store)


@pytest.fixture
def fake_llm():
    """Chat provider that always answers."""
    return FakeLLMProvider()


@pytest.fixture
def failing_llm():
    """Chat provider whose payload is malformed."""
    return FakeLLMProvider(error=ChatRequestError("Chat completion returned no choices"))


@pytest.fixture
def session(conversation_store, fake_llm):
    """Chat session wired to the fake provider."""
    return ChatSession(conversation_store, fake_llm)


@pytest.fixture
def make_llm():
    """Factory for fake providers with custom behavior."""
    return FakeLLMProvider
