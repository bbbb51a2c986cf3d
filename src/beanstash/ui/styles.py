"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic.
Uses Textual CSS features: nesting, pseudo-classes, variables.
"""

APP_CSS = """
/* ============================================
   Main Screen Layout - Sidebar + Chat
   ============================================ */
Screen {
    layout: grid;
    grid-size: 2 2;
    grid-columns: 1fr 3fr;
    grid-rows: 1fr auto;
    background: $background;
}

/* ============================================
   Conversation Sidebar
   ============================================ */
#conversation-list {
    height: 100%;
    background: $panel;
    border: round $secondary 60%;
    border-title-color: $secondary;
    border-title-style: bold;
    border-title-align: left;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;

    &:focus {
        border: round $secondary;
    }

    & > .option-list--option-highlighted {
        background: $secondary 20%;
    }
}

/* ============================================
   Chat History Panel - Primary Focus Area
   ============================================ */
#chat-history {
    height: 100%;
    background: $panel;
    border: round $primary 60%;
    border-title-color: $primary;
    border-title-style: bold;
    border-title-align: left;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    scrollbar-gutter: stable;

    &:focus-within {
        border: round $primary;
    }

    &.typing {
        border: round $warning;
        border-subtitle-color: $warning;
    }
}

/* ============================================
   Bottom Bar - Status + Input
   ============================================ */
#bottom-bar {
    column-span: 2;
    height: auto;
    padding: 1;
    background: $panel;
    border-top: solid $border;
}

#status-bar {
    height: 1;
    padding: 0 2;
    margin-bottom: 1;
    background: $surface;
    color: $text-muted;
}

/* ============================================
   Chat Input Bar - Text Entry + Send
   ============================================ */
ChatInputBar {
    height: 5;
    border: round $primary 60%;
    background: $panel;

    &:focus-within {
        border: round $primary;
    }
}

#prompt-editor {
    width: 1fr;
    height: 100%;
    border: none;
    padding: 0 1;
    background: transparent;
}

#send-button {
    width: 10;
    height: 100%;
    margin: 0 0 0 1;
    min-width: 8;
    text-style: bold;
}

/* ============================================
   Chat Messages - Conversation Display
   ============================================ */
.chat-message {
    width: 100%;
    height: auto;
    margin: 0 0 1 0;
    padding: 1 2;
    background: transparent;
}

.user-message {
    border-left: tall $primary;
    background: $primary 8%;

    & .message-header {
        color: $primary;
        text-style: bold;
    }
}

.assistant-message {
    border-left: tall $secondary;
    background: $secondary 8%;

    & .message-header {
        color: $secondary;
        text-style: bold;
    }
}

.welcome-message {
    width: 100%;
    height: auto;
    padding: 2;
    text-align: center;
    color: $text-muted;
}

.message-header {
    height: auto;
}

.message-content {
    height: auto;
    margin: 0;
}

Markdown {
    margin: 0;
    padding: 0;
}
"""
