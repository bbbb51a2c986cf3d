"""Chat session controller.

Owns the per-session state: the conversation store, the single in-flight
chat request, the session clock and the sidebar summaries. UI event
handlers hold one ChatSession and call into it.
"""

import asyncio
import inspect
from collections.abc import Awaitable, Callable
from datetime import datetime

import structlog

from ..config import (
    DEFAULT_MAX_TOKENS,
    DEFAULT_TEMPERATURE,
    FALLBACK_MESSAGE,
    SYSTEM_PROMPT,
)
from ..conversation import ConversationStore, ConversationSummary, Message, Role
from ..llm import ChatMessage, ChatRequestError, LLMProvider
from .clock import SessionClock
from .models import TurnResult

logger = structlog.get_logger("beanstash.session")

ConfirmCallback = Callable[[], bool | Awaitable[bool]]


class ChatSession:
    """One user's chat session.

    At most one chat request is outstanding at a time. A send made while
    one is in flight is dropped, not queued. No timeout is applied, so a
    request that never resolves keeps the session busy.
    """

    def __init__(
        self,
        store: ConversationStore,
        llm: LLMProvider,
        system_prompt: str = SYSTEM_PROMPT,
        fallback_message: str = FALLBACK_MESSAGE,
        model: str | None = None,
        temperature: float = DEFAULT_TEMPERATURE,
        max_tokens: int | None = DEFAULT_MAX_TOKENS,
        clock: SessionClock | None = None,
    ):
        self._store = store
        self._llm = llm
        self._system_prompt = system_prompt
        self._fallback_message = fallback_message
        self._model = model
        self._temperature = temperature
        self._max_tokens = max_tokens
        self._clock = clock or SessionClock()
        self._busy = False
        self._in_flight: asyncio.Task[str] | None = None
        self._conversations: list[ConversationSummary] = []

    @property
    def store(self) -> ConversationStore:
        return self._store

    @property
    def clock(self) -> SessionClock:
        return self._clock

    @property
    def is_busy(self) -> bool:
        """True while a send is being processed."""
        return self._busy

    @property
    def conversations(self) -> list[ConversationSummary]:
        """Sidebar entries, oldest first."""
        return list(self._conversations)

    @property
    def active_conversation_id(self) -> str | None:
        return self._store.conversation_id

    async def send(self, text: str) -> TurnResult | None:
        """Send a user message and append the reply.

        Args:
            text: Raw user input (surrounding whitespace is trimmed)

        Returns:
            The completed turn, or None if the input was empty or a
            request was already in flight
        """
        message = text.strip()
        if not message:
            return None
        if self._busy:
            logger.warning("send_dropped", reason="busy")
            return None

        self._busy = True
        try:
            prior = self._store.messages
            conversation_id = self._start_conversation_if_needed(message)
            user_message = await self._store.append(Role.USER, message)

            request = self._build_request(prior, message)
            self._in_flight = asyncio.ensure_future(self._request_reply(request))
            try:
                reply = await self._in_flight
            except ChatRequestError as e:
                logger.error(
                    "chat_request_failed",
                    conversation_id=conversation_id,
                    error=str(e),
                )
                assistant_message = await self._store.append(Role.ASSISTANT, self._fallback_message)
                return TurnResult(
                    conversation_id=conversation_id,
                    user_message=user_message,
                    assistant_message=assistant_message,
                    failed=True,
                )

            assistant_message = await self._store.append(Role.ASSISTANT, reply)
            return TurnResult(
                conversation_id=conversation_id,
                user_message=user_message,
                assistant_message=assistant_message,
            )
        finally:
            self._in_flight = None
            self._busy = False

    def _start_conversation_if_needed(self, first_message: str) -> str:
        if self._store.conversation_id is not None:
            return self._store.conversation_id
        conversation_id = self._store.begin(first_message)
        self._conversations.append(ConversationSummary(
            id=conversation_id,
            title=self._store.title or conversation_id,
        ))
        return conversation_id

    def _build_request(self, prior: list[Message], message: str) -> list[ChatMessage]:
        """System preamble, then prior turns, then the new user message."""
        request = [ChatMessage(role="system", content=self._system_prompt)]
        request.extend(ChatMessage(role=m.role.value, content=m.content) for m in prior)
        request.append(ChatMessage(role=Role.USER.value, content=message))
        return request

    async def _request_reply(self, request: list[ChatMessage]) -> str:
        try:
            response = await self._llm.chat_completion(
                request,
                model=self._model,
                temperature=self._temperature,
                max_tokens=self._max_tokens,
            )
        except ChatRequestError:
            raise
        except Exception as e:
            raise ChatRequestError(f"Chat request failed: {e}", cause=e) from e
        return response.content

    def new_chat(self) -> None:
        """Start a fresh conversation. Stored conversations are kept."""
        self._store.start_new()

    async def open(self, conversation_id: str) -> list[Message]:
        """Make a stored conversation active and return it for replay."""
        return await self._store.load(conversation_id)

    async def refresh_conversations(self) -> list[ConversationSummary]:
        """Reload sidebar entries from storage."""
        self._conversations = await self._store.list_conversations()
        return self.conversations

    async def clear_history(self, confirm: ConfirmCallback) -> bool:
        """Delete every stored conversation after the user confirms.

        Args:
            confirm: Returns (or resolves to) True to proceed

        Returns:
            True if history was cleared
        """
        answer = confirm()
        if inspect.isawaitable(answer):
            answer = await answer
        if not answer:
            return False
        await self._store.clear_all()
        self._conversations = []
        return True

    def status_line(self, now: datetime | None = None) -> str:
        return self._clock.status_line(now)
