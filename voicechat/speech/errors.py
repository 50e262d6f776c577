from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from voicechat.core.errors import ConfigurationError, ValidationError

SPEECH_FAILURE_MESSAGE = "Failed to convert text to speech"


@dataclass
class SpeechProxyError(Exception):
    """Text-to-speech endpoint error rendered as `{"error": ...}`."""

    status_code: int
    message: str

    def __str__(self) -> str:
        return self.message

    def to_error(self) -> dict[str, Any]:
        return {"error": self.message}


def map_speech_error(exc: Exception) -> SpeechProxyError:
    """Map a text-to-speech failure to a response error.

    Request and configuration problems keep their message; everything else
    collapses to a fixed message and the detail stays in the server log.
    """

    if isinstance(exc, SpeechProxyError):
        return exc

    if isinstance(exc, (ValidationError, ConfigurationError)):
        return SpeechProxyError(status_code=exc.status_code, message=exc.message)

    return SpeechProxyError(status_code=500, message=SPEECH_FAILURE_MESSAGE)
