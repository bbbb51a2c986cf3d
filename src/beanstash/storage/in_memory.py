"""In-memory key-value backend.

Simple dict-based storage for session-only use.
Data is lost when the application exits.
"""

from .base import KeyValueStore


class InMemoryKeyValueStore(KeyValueStore):
    """In-memory key-value store (session-only).

    Suitable for single-session use or testing.
    """

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    async def connect(self) -> None:
        """Initialize storage (no-op for in-memory)."""
        pass

    async def disconnect(self) -> None:
        """Close storage (no-op for in-memory)."""
        pass

    async def get(self, key: str) -> str | None:
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        self._data[key] = value

    async def delete(self, key: str) -> bool:
        return self._data.pop(key, None) is not None

    async def keys(self, prefix: str = "") -> list[str]:
        return [key for key in self._data if key.startswith(prefix)]

    @property
    def backend_type(self) -> str:
        return "memory"
