"""Modal screens for the TUI.

This module hides the design decisions about:
- Confirmation dialog appearance (CSS, layout)
- Study timer dialog layout and controls
- Keyboard shortcuts for dialogs
"""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Static

from ..config import TIMER_PRESETS
from ..session import StudyTimer


class ConfirmationScreen(ModalScreen[bool]):
    """Modal yes/no dialog. Dismisses with True on "Yes"."""

    CSS = """
    ConfirmationScreen {
        align: center middle;
        background: $background 70%;
    }

    #confirmation-dialog {
        width: 60;
        height: auto;
        border: tall $warning;
        background: $surface;
        padding: 1 2;
    }

    #confirmation-title {
        width: 100%;
        text-align: center;
        text-style: bold;
        color: $warning;
        padding: 0 0 1 0;
    }

    #confirmation-prompt {
        width: 100%;
        text-align: center;
        padding: 1 2;
        background: $panel;
        color: $foreground;
    }

    #confirmation-buttons {
        width: 100%;
        height: 3;
        align: center middle;
        margin-top: 1;
    }

    #confirmation-buttons Button {
        margin: 0 1;
        min-width: 10;
    }
    """

    BINDINGS = [
        Binding("y", "confirm_yes", "Yes", show=False),
        Binding("n", "confirm_no", "No", show=False),
        Binding("escape", "confirm_no", "Cancel", show=False),
    ]

    def __init__(self, prompt: str, title: str = "Are you sure?") -> None:
        super().__init__()
        self._prompt = prompt
        self._title = title

    def compose(self) -> ComposeResult:
        with Vertical(id="confirmation-dialog"):
            yield Static(self._title, id="confirmation-title")
            yield Static(self._prompt, id="confirmation-prompt")
            with Horizontal(id="confirmation-buttons"):
                yield Button("Yes", id="btn-yes", variant="error")
                yield Button("No", id="btn-no", variant="primary")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.dismiss(event.button.id == "btn-yes")

    def action_confirm_yes(self) -> None:
        self.dismiss(True)

    def action_confirm_no(self) -> None:
        self.dismiss(False)


class StudyTimerScreen(ModalScreen[None]):
    """Study timer controls.

    The timer itself lives on the app and keeps ticking while this
    dialog is closed; the dialog only renders and mutates it.
    """

    CSS = """
    StudyTimerScreen {
        align: center middle;
        background: $background 70%;
    }

    #timer-dialog {
        width: 54;
        height: auto;
        border: tall $accent;
        background: $surface;
        padding: 1 2;
    }

    #timer-display {
        width: 100%;
        text-align: center;
        text-style: bold;
        color: $accent;
        padding: 1 0;
    }

    #timer-status {
        width: 100%;
        text-align: center;
        color: $text-muted;
    }

    .timer-row {
        width: 100%;
        height: 3;
        align: center middle;
        margin-top: 1;
    }

    .timer-row Button {
        margin: 0 1;
        min-width: 8;
    }

    #custom-minutes {
        width: 16;
    }
    """

    BINDINGS = [
        Binding("escape", "close", "Close", show=False),
    ]

    def __init__(self, timer: StudyTimer) -> None:
        super().__init__()
        self._timer = timer

    def compose(self) -> ComposeResult:
        with Vertical(id="timer-dialog"):
            yield Static(self._timer.display, id="timer-display")
            yield Static(self._timer.status.value, id="timer-status")
            with Horizontal(classes="timer-row"):
                yield Button("Start", id="timer-start", variant="success")
                yield Button("Pause", id="timer-pause", variant="warning")
                yield Button("Reset", id="timer-reset", variant="default")
            with Horizontal(classes="timer-row"):
                for minutes in TIMER_PRESETS:
                    yield Button(f"{minutes}m", id=f"timer-preset-{minutes}")
            with Horizontal(classes="timer-row"):
                yield Input(placeholder="minutes", id="custom-minutes", type="integer")
                yield Button("Set", id="timer-custom")
                yield Button("Close", id="timer-close", variant="primary")

    def on_mount(self) -> None:
        self.set_interval(0.5, self.refresh_timer)

    def refresh_timer(self) -> None:
        self.query_one("#timer-display", Static).update(self._timer.display)
        self.query_one("#timer-status", Static).update(self._timer.status.value)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id or ""
        if button_id == "timer-start":
            self._timer.start()
        elif button_id == "timer-pause":
            self._timer.pause()
        elif button_id == "timer-reset":
            self._timer.reset()
        elif button_id.startswith("timer-preset-"):
            self._timer.set_minutes(int(button_id.removeprefix("timer-preset-")))
        elif button_id == "timer-custom":
            self._apply_custom()
        elif button_id == "timer-close":
            self.dismiss(None)
            return
        self.refresh_timer()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self._apply_custom()
        self.refresh_timer()

    def _apply_custom(self) -> None:
        value = self.query_one("#custom-minutes", Input).value.strip()
        if not value.lstrip("-").isdigit() or not self._timer.set_custom(int(value)):
            self.app.notify("Enter between 1 and 120 minutes", severity="warning", timeout=2)

    def action_close(self) -> None:
        self.dismiss(None)
