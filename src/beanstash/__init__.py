"""
Bean Stash: a friendly chat client with formatted transcripts.

This package follows Parnas's information hiding principles,
where each module hides a specific design decision.
"""

__version__ = "0.1.0"

from .conversation import ConversationStore, ConversationSummary, Message, Role
from .formatting import MessageFormatter, format_message
from .llm import ChatRequestError, LLMProvider, create_llm_provider
from .session import ChatSession, SessionClock, StudyTimer, TurnResult
from .storage import KeyValueStore, create_key_value_store

__all__ = [
    "ChatRequestError",
    "ChatSession",
    "ConversationStore",
    "ConversationSummary",
    "KeyValueStore",
    "LLMProvider",
    "Message",
    "MessageFormatter",
    "Role",
    "SessionClock",
    "StudyTimer",
    "TurnResult",
    "create_key_value_store",
    "create_llm_provider",
    "format_message",
]
