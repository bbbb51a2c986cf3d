"""Textual widgets for the Bean Stash TUI.

Each widget renders state it is handed; none of them talk to the
session or the store directly.
"""

from datetime import datetime

from textual import events
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.message import Message
from textual.widgets import Button, Markdown, OptionList, Static, TextArea
from textual.widgets.option_list import Option

from ..conversation import ConversationSummary, Role
from ..formatting import clean_latex

WELCOME_TEXT = (
    "Welcome to Bean Stash!\n\n"
    "Your friendly AI assistant powered by Hack Club AI. Ask me anything!"
)


class ClickableMessage(Vertical):
    """Message bubble; clicking it copies the raw text."""

    def __init__(self, content: str, **kwargs) -> None:
        super().__init__(**kwargs)
        self.raw_content = content

    def on_click(self, event: events.Click) -> None:
        event.stop()
        self.app.copy_to_clipboard(self.raw_content)
        self.app.notify("Message copied", timeout=2)


class PromptHistory:
    """Previously sent prompts, walked with up/down like a shell."""

    def __init__(self) -> None:
        self._entries: list[str] = []
        self._cursor: int | None = None

    def record(self, prompt: str) -> None:
        if not self._entries or self._entries[-1] != prompt:
            self._entries.append(prompt)
        self._cursor = None

    def older(self) -> str | None:
        if not self._entries:
            return None
        if self._cursor is None:
            self._cursor = len(self._entries) - 1
        else:
            self._cursor = max(self._cursor - 1, 0)
        return self._entries[self._cursor]

    def newer(self) -> str | None:
        """Next prompt, or "" once past the newest one."""
        if self._cursor is None:
            return None
        if self._cursor + 1 < len(self._entries):
            self._cursor += 1
            return self._entries[self._cursor]
        self._cursor = None
        return ""


class ChatInputBar(Horizontal):
    """Multi-line prompt editor plus a Send button.

    Enter inserts a newline; ctrl+j sends (terminals drop modifiers on Enter).
    Up on the first character and down on the last walk the prompt history.
    """

    class Submitted(Message):
        """Posted with the trimmed prompt text."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._prompts = PromptHistory()

    @property
    def editor(self) -> TextArea:
        return self.query_one("#prompt-editor", TextArea)

    def compose(self):
        editor = TextArea(id="prompt-editor", show_line_numbers=False)
        editor.cursor_blink = False
        editor.highlight_cursor_line = False
        yield editor
        yield Button("Send", id="send-button", variant="success").with_tooltip("ctrl+j")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "send-button":
            self._send()

    def on_key(self, event: events.Key) -> None:
        editor = self.editor
        replacement = None
        if event.key == "ctrl+j":
            self._send()
        elif event.key == "up" and editor.cursor_location == (0, 0):
            replacement = self._prompts.older()
        elif event.key == "down" and editor.cursor_location == editor.document.end:
            replacement = self._prompts.newer()
        else:
            return
        event.prevent_default()
        event.stop()
        if replacement is not None:
            editor.text = replacement

    def _send(self) -> None:
        prompt = self.editor.text.strip()
        if not prompt:
            return
        self._prompts.record(prompt)
        self.editor.text = ""
        self.post_message(self.Submitted(prompt))

    def focus_input(self) -> None:
        self.editor.focus()


class ChatHistoryWidget(VerticalScroll):
    """Scrollable transcript of the active conversation."""

    BORDER_TITLE = "Chat"
    BORDER_SUBTITLE = "New conversation"
    ALLOW_SELECT = True

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._message_count = 0
        self._last_response: str | None = None

    def on_mount(self) -> None:
        self.show_welcome()

    def show_welcome(self) -> None:
        """Replace the transcript with the welcome message."""
        self.remove_children()
        self._message_count = 0
        self._last_response = None
        self.border_subtitle = "New conversation"
        self.mount(Static(WELCOME_TEXT, classes="welcome-message"))

    def add_message(self, role: Role, content: str) -> None:
        """Append a message to the transcript."""
        for welcome in self.query(".welcome-message"):
            welcome.remove()

        if role == Role.USER:
            header = f"You  {_clock_time()}"
            css_class = "user-message"
        else:
            header = f"Bean Stash  {_clock_time()}"
            css_class = "assistant-message"
            self._last_response = content

        container = ClickableMessage(content=content, classes=f"chat-message {css_class}")
        container.compose_add_child(Static(header, classes="message-header"))
        container.compose_add_child(Markdown(clean_latex(content), classes="message-content"))
        self.mount(container)

        self._message_count += 1
        self.border_subtitle = f"{self._message_count} messages"
        self.scroll_end(animate=False)

    def set_typing(self, typing: bool) -> None:
        """Show or hide the typing indicator."""
        if typing:
            self.add_class("typing")
            self.border_subtitle = "Bean Stash is typing..."
        else:
            self.remove_class("typing")
            self.border_subtitle = f"{self._message_count} messages"

    def get_last_response(self) -> str | None:
        return self._last_response


class ConversationList(OptionList):
    """Sidebar of stored conversations."""

    BORDER_TITLE = "History"

    def set_conversations(
        self,
        summaries: list[ConversationSummary],
        active_id: str | None = None,
    ) -> None:
        """Replace the sidebar entries and highlight the active one."""
        self.clear_options()
        if not summaries:
            self.border_subtitle = "Empty"
            return
        self.add_options([Option(summary.title, id=summary.id) for summary in summaries])
        self.border_subtitle = f"{len(summaries)} chats"
        if active_id is not None:
            for index, summary in enumerate(summaries):
                if summary.id == active_id:
                    self.highlighted = index
                    break


class StatusBar(Static):
    """One-line clock, session length and study timer readout."""

    def show(self, clock_text: str, timer_text: str | None = None) -> None:
        parts = [clock_text]
        if timer_text:
            parts.append(f"Timer {timer_text}")
        self.update("  |  ".join(parts))


def _clock_time(now: datetime | None = None) -> str:
    """Message timestamp like ``3:04 PM``."""
    current = now or datetime.now()
    hour = current.hour % 12 or 12
    return f"{hour}:{current:%M} {current:%p}"
