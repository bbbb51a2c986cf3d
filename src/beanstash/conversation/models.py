"""Data models for conversations.

These models define messages and conversation summaries, independent of
the storage backend used.
"""

import random
import string
import time
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from ..config import CHAT_KEY_PREFIX, TITLE_ELLIPSIS, TITLE_MAX_LENGTH

_ID_ALPHABET = string.digits + string.ascii_lowercase
_ID_SUFFIX_LENGTH = 9


class Role(str, Enum):
    """Who authored a message."""

    USER = "user"
    ASSISTANT = "assistant"


class Message(BaseModel):
    """One turn in a conversation.

    Immutable once created; identity is its position in the conversation.
    """

    model_config = ConfigDict(frozen=True)

    role: Role = Field(description="Role of the message sender: 'user' or 'assistant'")
    content: str = Field(description="Content of the message")


class ConversationSummary(BaseModel):
    """Sidebar entry for a stored conversation."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Conversation identifier")
    title: str = Field(description="Title derived from the first user message")


MessageList = TypeAdapter(list[Message])


def serialize_messages(messages: list[Message]) -> str:
    """Serialize messages to the stored JSON form: [{"role", "content"}, ...]."""
    return MessageList.dump_json(messages).decode("utf-8")


def deserialize_messages(raw: str) -> list[Message]:
    """Parse the stored JSON form back into messages."""
    return MessageList.validate_json(raw)


def generate_conversation_id(now_ms: int | None = None) -> str:
    """Generate a conversation id: ``chat_<epoch millis>_<9 base-36 chars>``."""
    millis = now_ms if now_ms is not None else int(time.time() * 1000)
    suffix = "".join(random.choices(_ID_ALPHABET, k=_ID_SUFFIX_LENGTH))
    return f"chat_{millis}_{suffix}"


def make_title(first_message: str) -> str:
    """Derive a conversation title from its first user message.

    The ellipsis is appended even when nothing was cut.
    """
    return first_message[:TITLE_MAX_LENGTH] + TITLE_ELLIPSIS


def storage_key(conversation_id: str) -> str:
    """Storage key for a conversation id."""
    return CHAT_KEY_PREFIX + conversation_id


def conversation_id_from_key(key: str) -> str:
    """Inverse of storage_key."""
    return key[len(CHAT_KEY_PREFIX):]
