"""Abstract base class for key-value storage backends.

This module defines the interface for the flat key-value store that
conversations and preferences are persisted in. The abstraction hides:
- Storage format (dict, SQLite table, etc.)
- Persistence mechanism (process memory, database file)
- Connection management
"""

from abc import ABC, abstractmethod


class KeyValueStore(ABC):
    """Abstract string-to-string key-value store.

    Keys and values are plain strings; there is no schema versioning.
    Supports async context manager protocol:
        async with store:
            await store.set("theme", "dark")
    """

    @abstractmethod
    async def connect(self) -> None:
        """Initialize the storage backend."""

    @abstractmethod
    async def disconnect(self) -> None:
        """Close the storage backend gracefully."""

    @abstractmethod
    async def get(self, key: str) -> str | None:
        """Return the value stored under key, or None if missing."""

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""

    @abstractmethod
    async def delete(self, key: str) -> bool:
        """Delete key. Returns True if it existed."""

    @abstractmethod
    async def keys(self, prefix: str = "") -> list[str]:
        """List keys starting with prefix, in insertion order."""

    @property
    @abstractmethod
    def backend_type(self) -> str:
        """Get the backend type identifier."""

    async def __aenter__(self) -> "KeyValueStore":
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.disconnect()
