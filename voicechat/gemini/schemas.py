from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict


class ChatMessage(BaseModel):
    role: Literal["user", "assistant", "system"]
    content: str = ""
    # data:<mime>;base64,<payload>
    image: str | None = None

    model_config = ConfigDict(extra="allow")


class ChatRequest(BaseModel):
    messages: list[ChatMessage]

    model_config = ConfigDict(extra="allow")


class ChatReply(BaseModel):
    reply: str
