from .base import LLMProvider
from .exceptions import ChatRequestError
from .factory import create_llm_provider
from .models import ChatMessage, LLMResponse
from .providers import HackClubProvider, OpenAIProvider

__all__ = [
    "LLMProvider",
    "create_llm_provider",
    "ChatMessage",
    "ChatRequestError",
    "LLMResponse",
    "HackClubProvider",
    "OpenAIProvider",
]
