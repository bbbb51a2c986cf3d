"""SQLite key-value backend.

Provides persistent storage using a single SQLite table.
Uses aiosqlite for async access.
"""

from pathlib import Path

import aiosqlite
import structlog

from .base import KeyValueStore

logger = structlog.get_logger("beanstash.storage")


class SQLiteKeyValueStore(KeyValueStore):
    """SQLite-backed key-value store.

    Stores entries in a ``kv_entries`` table keyed by string.
    Supports persistent storage across sessions.
    """

    def __init__(self, path: str | Path = "./beanstash.db"):
        self._db_path = Path(path)
        self._connection: aiosqlite.Connection | None = None

    async def connect(self) -> None:
        """Initialize database connection and schema."""
        if self._connection is not None:
            return
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._connection = await aiosqlite.connect(self._db_path)
        await self._create_schema()
        logger.debug("sqlite_store_connected", path=str(self._db_path))

    async def _create_schema(self) -> None:
        """Create the key-value table."""
        await self._connection.execute("""
            CREATE TABLE IF NOT EXISTS kv_entries (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                key TEXT NOT NULL UNIQUE,
                value TEXT NOT NULL
            )
        """)
        await self._connection.commit()

    async def disconnect(self) -> None:
        """Close database connection."""
        if self._connection:
            await self._connection.close()
            self._connection = None

    def _require_connection(self) -> aiosqlite.Connection:
        if self._connection is None:
            raise RuntimeError("SQLiteKeyValueStore is not connected; call connect() first")
        return self._connection

    async def get(self, key: str) -> str | None:
        connection = self._require_connection()
        async with connection.execute(
            "SELECT value FROM kv_entries WHERE key = ?",
            (key,)
        ) as cursor:
            row = await cursor.fetchone()
        return row[0] if row else None

    async def set(self, key: str, value: str) -> None:
        connection = self._require_connection()
        await connection.execute("""
            INSERT INTO kv_entries (key, value)
            VALUES (?, ?)
            ON CONFLICT(key) DO UPDATE SET value = excluded.value
        """, (key, value))
        await connection.commit()

    async def delete(self, key: str) -> bool:
        connection = self._require_connection()
        cursor = await connection.execute(
            "DELETE FROM kv_entries WHERE key = ?",
            (key,)
        )
        await connection.commit()
        return cursor.rowcount > 0

    async def keys(self, prefix: str = "") -> list[str]:
        connection = self._require_connection()
        # substr comparison avoids LIKE wildcards in the prefix ('_' is common)
        async with connection.execute(
            "SELECT key FROM kv_entries WHERE substr(key, 1, ?) = ? ORDER BY id ASC",
            (len(prefix), prefix)
        ) as cursor:
            rows = await cursor.fetchall()
        return [row[0] for row in rows]

    @property
    def backend_type(self) -> str:
        return "sqlite"

    @property
    def db_path(self) -> Path:
        return self._db_path
