from typing import Any

from .base import LLMProvider
from .providers import HackClubProvider, OpenAIProvider

SUPPORTED_PROVIDERS = ("hackclub", "openai")


def create_llm_provider(provider: str, **config: Any) -> LLMProvider:
    """Build a chat provider by name.

    Args:
        provider: 'hackclub' (keyless, the default endpoint) or 'openai'
        **config: Constructor arguments. 'openai' requires ``api_key``;
            both accept ``model`` and ``base_url``.

    Raises:
        ValueError: For an unknown provider name
        TypeError: If 'openai' is requested without an api_key

    Example:
        >>> llm = create_llm_provider("hackclub", model="gpt-3.5-turbo")
    """
    name = provider.lower()

    if name == "hackclub":
        return HackClubProvider(**config)

    if name == "openai":
        if "api_key" not in config:
            raise TypeError("OpenAI provider requires 'api_key' in config")
        return OpenAIProvider(**config)

    raise ValueError(
        f"Unsupported provider: {provider}. "
        f"Supported providers: {', '.join(SUPPORTED_PROVIDERS)}"
    )
