"""Conversation store.

Owns the append-only message sequence of the active conversation and
bridges it to the key-value store. Every append is written through
immediately; there is no buffering and no retry path, so storage errors
propagate to the caller.
"""

import structlog

from ..config import CHAT_KEY_PREFIX
from ..storage import KeyValueStore
from .models import (
    ConversationSummary,
    Message,
    Role,
    conversation_id_from_key,
    deserialize_messages,
    generate_conversation_id,
    make_title,
    serialize_messages,
    storage_key,
)

logger = structlog.get_logger("beanstash.conversation")


class ConversationStore:
    """Active conversation state with write-through persistence."""

    def __init__(self, kv_store: KeyValueStore):
        self._kv = kv_store
        self._conversation_id: str | None = None
        self._title: str | None = None
        self._messages: list[Message] = []

    @property
    def conversation_id(self) -> str | None:
        """Id of the active conversation, None until the first send."""
        return self._conversation_id

    @property
    def title(self) -> str | None:
        return self._title

    @property
    def messages(self) -> list[Message]:
        """Copy of the active message sequence."""
        return list(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def begin(self, first_message: str) -> str:
        """Assign an id to the active conversation if it has none.

        Args:
            first_message: The user message that starts the conversation

        Returns:
            The active conversation id
        """
        if self._conversation_id is None:
            self._conversation_id = generate_conversation_id()
            self._title = make_title(first_message)
            logger.info("conversation_started", conversation_id=self._conversation_id)
        return self._conversation_id

    async def append(self, role: Role | str, content: str) -> Message:
        """Append a message and persist the full sequence if an id is active."""
        message = Message(role=role, content=content)
        self._messages.append(message)
        await self._save()
        return message

    async def _save(self) -> None:
        if self._conversation_id is None:
            return
        await self._kv.set(
            storage_key(self._conversation_id),
            serialize_messages(self._messages),
        )

    def start_new(self) -> None:
        """Forget the active conversation. Persisted data is untouched."""
        self._conversation_id = None
        self._title = None
        self._messages = []

    async def load(self, conversation_id: str) -> list[Message]:
        """Make a stored conversation active.

        A missing key yields an empty conversation rather than an error.

        Returns:
            The stored messages in original order, for display replay
        """
        self._conversation_id = conversation_id
        self._messages = []
        self._title = None

        raw = await self._kv.get(storage_key(conversation_id))
        if raw is not None:
            self._messages = deserialize_messages(raw)
        self._title = _title_for(self._messages)

        logger.debug(
            "conversation_loaded",
            conversation_id=conversation_id,
            messages=len(self._messages),
        )
        return list(self._messages)

    async def clear_all(self) -> int:
        """Delete every stored conversation, then start a new one.

        Irreversible. Callers are expected to confirm with the user first.

        Returns:
            Number of conversations deleted
        """
        deleted = 0
        for key in await self._kv.keys(CHAT_KEY_PREFIX):
            if await self._kv.delete(key):
                deleted += 1
        self.start_new()
        logger.info("conversations_cleared", deleted=deleted)
        return deleted

    async def list_conversations(self) -> list[ConversationSummary]:
        """Summaries of every stored conversation, oldest first."""
        summaries = []
        for key in await self._kv.keys(CHAT_KEY_PREFIX):
            raw = await self._kv.get(key)
            messages = deserialize_messages(raw) if raw else []
            summaries.append(ConversationSummary(
                id=conversation_id_from_key(key),
                title=_title_for(messages) or conversation_id_from_key(key),
            ))
        return summaries


def _title_for(messages: list[Message]) -> str | None:
    for message in messages:
        if message.role == Role.USER:
            return make_title(message.content)
    return None
