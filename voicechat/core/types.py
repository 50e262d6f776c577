from __future__ import annotations

import base64
from dataclasses import dataclass, field
from typing import Any

DEFAULT_IMAGE_PROMPT = "What do you see in this image?"

GENERATION_CONFIG: dict[str, Any] = {
    "temperature": 0.1,
    "topK": 40,
    "topP": 0.95,
    "maxOutputTokens": 2048,
}

SAFETY_CATEGORIES = (
    "HARM_CATEGORY_HARASSMENT",
    "HARM_CATEGORY_HATE_SPEECH",
    "HARM_CATEGORY_SEXUALLY_EXPLICIT",
    "HARM_CATEGORY_DANGEROUS_CONTENT",
)
SAFETY_THRESHOLD = "BLOCK_MEDIUM_AND_ABOVE"

VOICE_SETTINGS: dict[str, float] = {
    "stability": 0.5,
    "similarity_boost": 0.5,
}


@dataclass(slots=True)
class TextPart:
    text: str

    def to_payload(self) -> dict[str, Any]:
        return {"text": self.text}


@dataclass(slots=True)
class InlineDataPart:
    """Decoded binary content plus its MIME type."""

    data: bytes
    mime_type: str

    def to_payload(self) -> dict[str, Any]:
        # The API expects inline bytes base64-encoded on the wire.
        return {
            "inlineData": {
                "data": base64.b64encode(self.data).decode("ascii"),
                "mimeType": self.mime_type,
            }
        }


@dataclass(slots=True)
class GenerationRequest:
    parts: list[TextPart | InlineDataPart]
    generation_config: dict[str, Any] = field(
        default_factory=lambda: dict(GENERATION_CONFIG)
    )
    safety_settings: list[dict[str, str]] = field(
        default_factory=lambda: [
            {"category": category, "threshold": SAFETY_THRESHOLD}
            for category in SAFETY_CATEGORIES
        ]
    )

    def to_payload(self) -> dict[str, Any]:
        return {
            "contents": [{"parts": [part.to_payload() for part in self.parts]}],
            "generationConfig": self.generation_config,
            "safetySettings": self.safety_settings,
        }


@dataclass(slots=True)
class SpeechRequest:
    text: str
    voice_id: str
    model_id: str
    voice_settings: dict[str, float] = field(
        default_factory=lambda: dict(VOICE_SETTINGS)
    )

    def to_payload(self) -> dict[str, Any]:
        return {
            "text": self.text,
            "model_id": self.model_id,
            "voice_settings": self.voice_settings,
        }
