from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class TextToSpeechRequest(BaseModel):
    text: str | None = None

    model_config = ConfigDict(extra="allow")
