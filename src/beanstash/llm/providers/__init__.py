from .hackclub import HackClubProvider
from .openai import OpenAIProvider

__all__ = ["HackClubProvider", "OpenAIProvider"]
