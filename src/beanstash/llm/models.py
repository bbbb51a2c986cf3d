from pydantic import BaseModel, ConfigDict, Field


class ChatMessage(BaseModel):
    """One entry of a chat-completion request."""

    model_config = ConfigDict(frozen=True)

    role: str = Field(description="'system', 'user' or 'assistant'")
    content: str = Field(description="Message text")


class LLMResponse(BaseModel):
    """The assistant reply extracted from a chat completion."""

    model_config = ConfigDict(frozen=True)

    content: str = Field(description="Reply text")
    model: str = Field(description="Model reported by the endpoint")
    usage: dict[str, int] | None = Field(
        default=None,
        description="Prompt, completion and total token counts, when reported"
    )
