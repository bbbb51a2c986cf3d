"""Conversation module for beanstash.

Holds the active conversation and persists it to a key-value store.
"""

from .models import (
    ConversationSummary,
    Message,
    Role,
    deserialize_messages,
    generate_conversation_id,
    make_title,
    serialize_messages,
    storage_key,
)
from .store import ConversationStore

__all__ = [
    "ConversationStore",
    "ConversationSummary",
    "Message",
    "Role",
    "deserialize_messages",
    "generate_conversation_id",
    "make_title",
    "serialize_messages",
    "storage_key",
]
