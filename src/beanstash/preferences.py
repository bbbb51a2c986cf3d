"""User preferences stored beside conversations."""

from .config import THEME_KEY, THEME_NAMES
from .storage import KeyValueStore


class ThemePreferences:
    """Reads and writes the selected theme name."""

    def __init__(self, kv_store: KeyValueStore):
        self._kv = kv_store

    async def load_theme(self) -> str | None:
        """Saved theme name, or None if none was saved or it is unknown."""
        theme = await self._kv.get(THEME_KEY)
        if theme in THEME_NAMES:
            return theme
        return None

    async def save_theme(self, theme: str) -> None:
        """Persist a theme name.

        Raises:
            ValueError: If theme is not one of THEME_NAMES
        """
        if theme not in THEME_NAMES:
            raise ValueError(
                f"Unknown theme: {theme}. "
                f"Supported themes: {', '.join(THEME_NAMES)}"
            )
        await self._kv.set(THEME_KEY, theme)
