"""Terminal UI module for beanstash.

Provides a Textual-based TUI for chatting with Bean Stash.

Module structure (each module hides a design decision):
- widgets.py: Custom widgets (input history, transcript, sidebar, status line)
- styles.py: CSS styling (layout decisions)
- themes.py: Color palettes and theme configuration
- screens.py: Modal dialogs (confirmation, study timer)
- app.py: Application orchestration (user interaction flow)
"""

from .app import BeanStashApp, run_textual_tui
from .widgets import (
    ChatHistoryWidget,
    ChatInputBar,
    ConversationList,
    PromptHistory,
    StatusBar,
)

__all__ = [
    "BeanStashApp",
    "ChatHistoryWidget",
    "ChatInputBar",
    "ConversationList",
    "PromptHistory",
    "StatusBar",
    "run_textual_tui",
]
