"""Provider factory functions for CLI.

Centralizes creation of the key-value store and LLM provider from
environment variables. Hides configuration details from command
implementations.
"""

import os

import typer
from rich.console import Console

from ..config import DEFAULT_MODEL, DEFAULT_STORE_BACKEND, DEFAULT_STORE_PATH, HACKCLUB_BASE_URL
from ..llm import LLMProvider, create_llm_provider
from ..storage import KeyValueStore, create_key_value_store

# Default console for output
_console = Console()


def get_store() -> KeyValueStore:
    """Create the key-value store from environment variables.

    Returns:
        Key-value store instance (not yet connected)

    Environment variables:
        BEANSTASH_STORE: Backend type (memory, sqlite; default: sqlite)
        BEANSTASH_STORE_PATH: SQLite database path (default: ./beanstash.db)
    """
    backend = os.getenv("BEANSTASH_STORE", DEFAULT_STORE_BACKEND).lower()
    if backend == "sqlite":
        return create_key_value_store(
            "sqlite",
            path=os.getenv("BEANSTASH_STORE_PATH", DEFAULT_STORE_PATH),
        )
    return create_key_value_store(backend)


def get_llm(console: Console | None = None) -> LLMProvider | None:
    """Create LLM provider from environment variables.

    Args:
        console: Optional Rich console for output

    Returns:
        LLM provider instance, or None if not configured

    Environment variables:
        BEANSTASH_LLM_PROVIDER: Provider type (hackclub, openai; default: hackclub)
        BEANSTASH_MODEL: Model name (default: gpt-3.5-turbo)
        HACKCLUB_BASE_URL: Hack Club AI base URL (default: https://ai.hackclub.com)
        OPENAI_API_KEY: OpenAI API key (for openai provider)
    """
    con = console or _console
    llm_provider = os.getenv("BEANSTASH_LLM_PROVIDER", "hackclub").lower()
    model = os.getenv("BEANSTASH_MODEL", DEFAULT_MODEL)

    if llm_provider == "hackclub":
        base_url = os.getenv("HACKCLUB_BASE_URL", HACKCLUB_BASE_URL)
        return create_llm_provider("hackclub", model=model, base_url=base_url)

    elif llm_provider == "openai":
        api_key = os.getenv("OPENAI_API_KEY")
        if not api_key:
            con.print("[yellow]Warning: OPENAI_API_KEY not set, chat disabled[/yellow]")
            return None
        return create_llm_provider("openai", api_key=api_key, model=model)

    else:
        con.print(f"[red]Error: Unknown LLM provider: {llm_provider}[/red]")
        return None


def require_llm(console: Console | None = None) -> LLMProvider:
    """Get LLM provider, raising error if not configured.

    Args:
        console: Optional Rich console for output

    Returns:
        LLM provider instance

    Raises:
        SystemExit: If LLM provider is not configured
    """
    con = console or _console
    llm = get_llm(con)
    if not llm:
        con.print("[red]Error: LLM provider not configured[/red]")
        raise typer.Exit(code=1)
    return llm
