"""Pydantic schemas for the chat-completion wire protocol."""
from typing import Literal
from pydantic import BaseModel, ConfigDict, Field, field_validator


class ChatMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: str = ""        # system | user | assistant
    content: str = ""     # null on assistant tool-call turns

    @field_validator("role", "content", mode="before")
    @classmethod
    def _null_as_empty(cls, v):
        return "" if v is None else v


class CopilotUser(BaseModel):
    model_config = ConfigDict(frozen=True)

    login: str = ""

    @field_validator("login", mode="before")
    @classmethod
    def _null_as_empty(cls, v):
        return "" if v is None else v


class ChatCompletionRequest(BaseModel):
    """Inbound body of POST /v1/chat/completions. Extra fields are ignored, null fields take their defaults."""
    model_config = ConfigDict(frozen=True)

    messages: list[ChatMessage] = Field(default_factory=list)
    user: CopilotUser = Field(default_factory=CopilotUser)

    @field_validator("messages", mode="before")
    @classmethod
    def _null_messages(cls, v):
        return [] if v is None else v

    @field_validator("user", mode="before")
    @classmethod
    def _null_user(cls, v):
        return CopilotUser() if v is None else v


class Delta(BaseModel):
    role: Literal["assistant"] = "assistant"
    content: str


class Choice(BaseModel):
    index: int = 0
    delta: Delta
    finish_reason: Literal["stop"] = "stop"


class ChatCompletionChunk(BaseModel):
    choices: list[Choice]


class GreetingResponse(BaseModel):
    message: str


class HealthResponse(BaseModel):
    status: str
    service: str
