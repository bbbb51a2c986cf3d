"""Tests for TUI widget helpers that need no running app."""
from datetime import datetime

from beanstash.config import THEME_NAMES
from beanstash.ui.themes import THEMES
from beanstash.ui.widgets import PromptHistory, _clock_time


class TestPromptHistory:
    """Tests for PromptHistory."""

    def test_empty_history(self):
        """Test that navigation does nothing without prompts."""
        history = PromptHistory()
        assert history.older() is None
        assert history.newer() is None

    def test_walks_back_and_forward(self):
        """Test shell-style navigation."""
        history = PromptHistory()
        for prompt in ("one", "two", "three"):
            history.record(prompt)

        assert history.older() == "three"
        assert history.older() == "two"
        assert history.older() == "one"
        assert history.older() == "one"
        assert history.newer() == "two"
        assert history.newer() == "three"
        assert history.newer() == ""
        assert history.newer() is None

    def test_repeated_prompt_recorded_once(self):
        """Test that consecutive duplicates collapse."""
        history = PromptHistory()
        history.record("same")
        history.record("same")
        assert history.older() == "same"
        assert history.older() == "same"
        assert history.newer() == ""

    def test_recording_resets_position(self):
        """Test that sending starts navigation from the newest prompt again."""
        history = PromptHistory()
        history.record("a")
        history.record("b")
        history.older()
        history.older()
        history.record("c")
        assert history.older() == "c"


def test_every_theme_name_has_a_theme():
    """Test that stored theme names map to registered themes."""
    assert set(THEMES) == set(THEME_NAMES)


def test_message_timestamp():
    """Test the short message timestamp."""
    assert _clock_time(datetime(2026, 10, 19, 15, 4, 5)) == "3:04 PM"
    assert _clock_time(datetime(2026, 10, 19, 0, 30)) == "12:30 AM"
