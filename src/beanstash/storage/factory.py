"""Factory for creating key-value storage backends."""

from typing import Any

from .base import KeyValueStore


def create_key_value_store(
    backend: str = "memory",
    **kwargs: Any
) -> KeyValueStore:
    """Create a key-value storage backend.

    Args:
        backend: Backend type ("memory" or "sqlite")
        **kwargs: Backend-specific configuration
            For memory:
                - initial: dict[str, str] | None
            For sqlite:
                - path: str | Path (default: './beanstash.db')

    Returns:
        KeyValueStore instance

    Raises:
        ValueError: If backend type is not supported
    """
    if backend == "memory":
        from .in_memory import InMemoryKeyValueStore
        return InMemoryKeyValueStore(**kwargs)

    elif backend == "sqlite":
        from .sqlite import SQLiteKeyValueStore
        return SQLiteKeyValueStore(**kwargs)

    raise ValueError(
        f"Unsupported storage backend: {backend}. "
        f"Supported backends: memory, sqlite"
    )
