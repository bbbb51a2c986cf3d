from pydantic import BaseModel, ConfigDict, Field

from ..conversation import Message


class TurnResult(BaseModel):
    """Outcome of one user send."""

    model_config = ConfigDict(frozen=True)

    conversation_id: str = Field(description="Conversation the turn was appended to")
    user_message: Message = Field(description="The persisted user message")
    assistant_message: Message = Field(description="Model reply, or the fallback message on failure")
    failed: bool = Field(default=False, description="True if the remote call failed")
