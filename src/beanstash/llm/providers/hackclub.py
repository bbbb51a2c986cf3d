from typing import Any

from ...config import DEFAULT_MODEL, HACKCLUB_BASE_URL
from .openai import OpenAIProvider

# Hack Club AI does not authenticate, but the OpenAI client insists on a key
HACKCLUB_PLACEHOLDER_KEY = "hackclub"


class HackClubProvider(OpenAIProvider):
    """Hack Club AI provider using its OpenAI-compatible API.

    Requests go to ``{base_url}/chat/completions`` with no credentials.
    """

    def __init__(
        self,
        model: str = DEFAULT_MODEL,
        base_url: str = HACKCLUB_BASE_URL,
        api_key: str | None = None,
        **client_kwargs: Any
    ):
        """Initialize Hack Club provider.

        Args:
            model: Default model to use
            base_url: Hack Club AI base URL (default: https://ai.hackclub.com)
            api_key: Optional key, only needed behind an authenticating proxy
            **client_kwargs: Additional kwargs for AsyncOpenAI client
        """
        super().__init__(
            api_key=api_key or HACKCLUB_PLACEHOLDER_KEY,
            model=model,
            base_url=base_url,
            **client_kwargs
        )
