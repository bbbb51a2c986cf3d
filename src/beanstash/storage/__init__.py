"""Key-value storage module for beanstash.

Provides the flat string store that conversations and preferences live in.
"""

from .base import KeyValueStore
from .factory import create_key_value_store
from .in_memory import InMemoryKeyValueStore

__all__ = [
    "InMemoryKeyValueStore",
    "KeyValueStore",
    "create_key_value_store",
]
