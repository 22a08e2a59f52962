"""
Data models for chat-completion requests and responses using Pydantic for validation.
"""
from pathlib import Path
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


Role = Literal["system", "user", "assistant"]


class Message(BaseModel):
    """A role-tagged chat message"""
    model_config = ConfigDict(frozen=True)

    role: Role
    content: str


class ChatRequest(BaseModel):
    """Chat-completion request body, built once per invocation"""
    model_config = ConfigDict(frozen=True)

    model: str
    messages: List[Message]
    temperature: float
    max_tokens: int = Field(..., ge=1)


class ReplyMessage(BaseModel):
    """Message as returned by the API; only content is consulted"""
    role: Optional[str] = None
    content: str = ""

    @field_validator("content", mode="before")
    @classmethod
    def _null_content_is_empty(cls, value: Optional[str]) -> str:
        # The API sends null content for some assistant replies
        return "" if value is None else value


class Choice(BaseModel):
    message: ReplyMessage


class ChatResponse(BaseModel):
    """Only choices[0] is consulted; extra fields such as usage are ignored"""
    choices: List[Choice]


class RunConfig(BaseModel):
    """Everything one invocation needs, resolved at start-up"""
    model_config = ConfigDict(frozen=True)

    prompt_path: Path
    api_key: str
    template_dir: Path
    model: str
    base_url: str
