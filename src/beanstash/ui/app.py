"""Main Textual TUI application.

Orchestrates the UI components and routes user interaction into one
ChatSession. All chat state lives in the session; widgets only render it.
"""

import asyncio

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Footer, Header, OptionList

from ..config import THEME_NAMES
from ..conversation import ConversationStore, Role
from ..llm import LLMProvider
from ..preferences import ThemePreferences
from ..session import ChatSession, StudyTimer
from ..storage import KeyValueStore
from .screens import ConfirmationScreen, StudyTimerScreen
from .styles import APP_CSS
from .themes import THEMES
from .widgets import ChatHistoryWidget, ChatInputBar, ConversationList, StatusBar

CLEAR_PROMPT = "Are you sure you want to clear all chat history? This action cannot be undone."


class BeanStashApp(App):
    """Textual TUI for Bean Stash chat."""

    CSS = APP_CSS
    TITLE = "Bean Stash"

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit"),
        Binding("ctrl+n", "new_chat", "New Chat"),
        Binding("ctrl+k", "clear_history", "Clear History"),
        Binding("ctrl+t", "cycle_theme", "Theme"),
        Binding("ctrl+s", "study_timer", "Timer"),
        Binding("ctrl+r", "copy_last_response", "Copy Response"),
    ]

    def __init__(self, llm: LLMProvider, kv_store: KeyValueStore) -> None:
        super().__init__()
        self._llm = llm
        self._session = ChatSession(ConversationStore(kv_store), llm)
        self._preferences = ThemePreferences(kv_store)
        self._timer = StudyTimer()
        self._theme_name = "default"
        self._sending = False

    @property
    def session(self) -> ChatSession:
        return self._session

    def compose(self) -> ComposeResult:
        yield Header()
        yield ConversationList(id="conversation-list")
        yield ChatHistoryWidget(id="chat-history")
        with Vertical(id="bottom-bar"):
            yield StatusBar(id="status-bar")
            yield ChatInputBar(id="chat-input-bar")
        yield Footer()

    async def on_mount(self) -> None:
        """Called when app is mounted."""
        for theme in THEMES.values():
            self.register_theme(theme)
        saved = await self._preferences.load_theme()
        self._apply_theme(saved or "default")

        self.sub_title = self._llm.model
        await self._reload_sidebar()
        self._tick()
        self.set_interval(1, self._tick)
        self.query_one("#chat-input-bar", ChatInputBar).focus_input()

    def _apply_theme(self, name: str) -> None:
        self._theme_name = name
        self.theme = THEMES[name].name

    def _tick(self) -> None:
        """Once-per-second clock and study timer update."""
        if self._timer.tick():
            self.bell()
            self.notify(
                "Your study session is complete!",
                title="Bean Stash Timer",
                timeout=10,
            )
        timer_text = self._timer.display if self._timer.running else None
        self.query_one("#status-bar", StatusBar).show(self._session.status_line(), timer_text)

    async def _reload_sidebar(self) -> None:
        summaries = await self._session.refresh_conversations()
        self.query_one("#conversation-list", ConversationList).set_conversations(
            summaries, self._session.active_conversation_id
        )

    def on_chat_input_bar_submitted(self, event: ChatInputBar.Submitted) -> None:
        """Handle user input submission.

        Input arriving while a reply is pending is dropped.
        """
        if self._sending or self._session.is_busy:
            self.notify("Bean Stash is still typing...", severity="warning", timeout=2)
            return

        self._sending = True
        chat = self.query_one("#chat-history", ChatHistoryWidget)
        chat.add_message(Role.USER, event.value)
        chat.set_typing(True)
        self._send(event.value)

    @work(group="send")
    async def _send(self, text: str) -> None:
        """Run one chat turn as a background async worker."""
        chat = self.query_one("#chat-history", ChatHistoryWidget)
        try:
            result = await self._session.send(text)
        except Exception as e:
            # Storage failures are not recoverable here; surface them
            self.notify(f"Error: {str(e)[:50]}", severity="error", timeout=5)
            return
        finally:
            self._sending = False
            chat.set_typing(False)

        if result is None:
            return
        chat.add_message(Role.ASSISTANT, result.assistant_message.content)
        if result.failed:
            self.notify("Request failed", severity="error", timeout=3)
        await self._reload_sidebar()

    async def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        """Open a conversation from the sidebar."""
        if self._sending:
            self.notify("Wait for the current reply first", severity="warning", timeout=2)
            return
        conversation_id = event.option.id
        if conversation_id is None:
            return

        messages = await self._session.open(conversation_id)
        chat = self.query_one("#chat-history", ChatHistoryWidget)
        chat.show_welcome()
        for message in messages:
            chat.add_message(message.role, message.content)
        self.query_one("#chat-input-bar", ChatInputBar).focus_input()

    def action_new_chat(self) -> None:
        """Start a new conversation."""
        if self._sending:
            self.notify("Wait for the current reply first", severity="warning", timeout=2)
            return
        self._session.new_chat()
        self.query_one("#chat-history", ChatHistoryWidget).show_welcome()
        self.query_one("#conversation-list", ConversationList).highlighted = None
        self.query_one("#chat-input-bar", ChatInputBar).focus_input()

    def action_clear_history(self) -> None:
        """Delete all stored conversations after confirmation."""
        self._confirm_and_clear()

    @work(group="clear")
    async def _confirm_and_clear(self) -> None:
        cleared = await self._session.clear_history(
            lambda: self.push_screen_wait(ConfirmationScreen(CLEAR_PROMPT))
        )
        if not cleared:
            return
        self.query_one("#chat-history", ChatHistoryWidget).show_welcome()
        await self._reload_sidebar()
        self.notify("Chat history cleared", timeout=2)

    async def action_cycle_theme(self) -> None:
        """Switch to the next theme and remember it."""
        index = THEME_NAMES.index(self._theme_name)
        name = THEME_NAMES[(index + 1) % len(THEME_NAMES)]
        self._apply_theme(name)
        await self._preferences.save_theme(name)
        self.notify(f"Theme: {name}", timeout=2)

    def action_study_timer(self) -> None:
        """Open the study timer dialog."""
        self.push_screen(StudyTimerScreen(self._timer))

    def action_copy_last_response(self) -> None:
        """Copy last assistant response to clipboard."""
        chat = self.query_one("#chat-history", ChatHistoryWidget)
        response = chat.get_last_response()
        if response:
            self.copy_to_clipboard(response)
            self.notify("Response copied")
        else:
            self.notify("No response to copy", severity="warning")


async def run_textual_tui(llm: LLMProvider, kv_store: KeyValueStore) -> None:
    """Run the Textual TUI.

    Args:
        llm: LLM provider instance
        kv_store: Connected key-value store for conversations and preferences
    """
    app = BeanStashApp(llm=llm, kv_store=kv_store)
    try:
        await app.run_async()
    except (KeyboardInterrupt, asyncio.CancelledError):
        pass
