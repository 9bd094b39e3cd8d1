"""
Request models for chat endpoints.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ChatRequest(BaseModel):
    """Payload for detailed chat.

    - userMessage: text of the user instruction (required, checked by the controller)
    - systemMessage: optional system instruction, ignored when empty
    - temperature: optional sampling temperature override
    """
    model_config = ConfigDict(populate_by_name=True)

    user_message: Optional[str] = Field(
        default=None,
        alias="userMessage",
        description="User instruction forwarded to the model",
        examples=["Explain what Azure OpenAI is in one sentence."],
    )
    system_message: Optional[str] = Field(
        default=None,
        alias="systemMessage",
        description="Optional system instruction placed before the user message",
        examples=["You are a concise assistant."],
    )
    temperature: Optional[float] = Field(
        default=None,
        ge=0.0,
        le=2.0,
        description="Sampling temperature; the deployment default applies when omitted",
        examples=[0.7],
    )
