"""Configuration constants.

Centralizes magic numbers and default values shared by the chat core,
the CLI and the TUI.
"""

# Remote chat API defaults
HACKCLUB_BASE_URL = "https://ai.hackclub.com"
DEFAULT_MODEL = "gpt-3.5-turbo"
DEFAULT_MAX_TOKENS = 500
DEFAULT_TEMPERATURE = 0.7

SYSTEM_PROMPT = (
    "You are Bean Stash, a friendly and helpful AI assistant. "
    "You have a warm, conversational personality and love to help users "
    "with their questions. Keep responses concise but informative."
)

FALLBACK_MESSAGE = (
    "Sorry, I encountered an error while processing your request. "
    "Please try again later."
)

# Conversation storage
CHAT_KEY_PREFIX = "chat_"  # Storage keys are CHAT_KEY_PREFIX + conversation id
TITLE_MAX_LENGTH = 30  # Characters of the first user message kept in titles
TITLE_ELLIPSIS = "..."

# Preferences
THEME_KEY = "theme"
THEME_NAMES = ("default", "dark", "light")

# Study timer
TIMER_DEFAULT_MINUTES = 25
TIMER_MIN_MINUTES = 1
TIMER_MAX_MINUTES = 120
TIMER_PRESETS = (15, 25, 45, 60)

# Store backends
DEFAULT_STORE_BACKEND = "sqlite"
DEFAULT_STORE_PATH = "./beanstash.db"
