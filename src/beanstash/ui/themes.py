"""Theme definitions for the TUI.

This module hides the design decisions about:
- Color palettes and visual appearance
- Theme variables (borders, scrollbars, etc.)
- Which stored preference name maps to which Textual theme

To add a new theme, define it here and add its name to config.THEME_NAMES.
"""

from textual.theme import Theme

# Warm coffee palette, the default look
BEAN_STASH_ROAST = Theme(
    name="bean-stash-roast",
    primary="#c08552",      # Caramel - main accent
    secondary="#a3b18a",    # Sage - assistant messages
    accent="#f2cc8f",       # Crema - highlights
    foreground="#f4ede4",   # Milk foam text
    background="#2b1d14",   # Espresso
    success="#81b29a",
    warning="#e07a5f",
    error="#d62828",
    surface="#3c2a1e",
    panel="#33231a",
    dark=True,
    variables={
        "border": "#5e4432",
        "border-blurred": "#4a3426",
        "scrollbar": "#4a3426",
        "scrollbar-hover": "#5e4432",
        "scrollbar-active": "#c08552",
        "scrollbar-background": "#33231a",
        "footer-key-foreground": "#f2cc8f",
        "text-muted": "#a68a74",
    },
)

# Catppuccin Mocha, for the "dark" preference
BEAN_STASH_DARK = Theme(
    name="bean-stash-dark",
    primary="#89b4fa",
    secondary="#cba6f7",
    accent="#f9e2af",
    foreground="#cdd6f4",
    background="#11111b",
    success="#a6e3a1",
    warning="#fab387",
    error="#f38ba8",
    surface="#1e1e2e",
    panel="#181825",
    dark=True,
    variables={
        "border": "#45475a",
        "border-blurred": "#313244",
        "scrollbar": "#313244",
        "scrollbar-hover": "#45475a",
        "scrollbar-active": "#89b4fa",
        "scrollbar-background": "#181825",
        "footer-key-foreground": "#f9e2af",
        "text-muted": "#6c7086",
    },
)

# Catppuccin Latte, for the "light" preference
BEAN_STASH_LIGHT = Theme(
    name="bean-stash-light",
    primary="#1e66f5",
    secondary="#8839ef",
    accent="#df8e1d",
    foreground="#4c4f69",
    background="#eff1f5",
    success="#40a02b",
    warning="#fe640b",
    error="#d20f39",
    surface="#e6e9ef",
    panel="#dce0e8",
    dark=False,
    variables={
        "border": "#acb0be",
        "border-blurred": "#ccd0da",
        "scrollbar": "#ccd0da",
        "scrollbar-hover": "#acb0be",
        "scrollbar-active": "#1e66f5",
        "scrollbar-background": "#dce0e8",
        "footer-key-foreground": "#df8e1d",
        "text-muted": "#8c8fa1",
    },
)

# Stored preference name -> Textual theme
THEMES: dict[str, Theme] = {
    "default": BEAN_STASH_ROAST,
    "dark": BEAN_STASH_DARK,
    "light": BEAN_STASH_LIGHT,
}
