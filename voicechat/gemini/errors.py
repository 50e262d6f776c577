from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from voicechat.core.errors import ProxyError
from voicechat.core.upstream import GEMINI_FALLBACK_ERROR


@dataclass
class ChatProxyError(Exception):
    """Chat endpoint error rendered as `{"error": ..., "type": ...}`."""

    status_code: int
    message: str
    error_type: str = "unknown_error"

    def __str__(self) -> str:
        return self.message

    def to_error(self) -> dict[str, Any]:
        return {
            "error": self.message,
            "type": self.error_type,
        }


def map_chat_error(exc: Exception) -> ChatProxyError:
    """Map any failure raised while serving a chat request to a response error."""

    if isinstance(exc, ChatProxyError):
        return exc

    if isinstance(exc, ProxyError):
        return ChatProxyError(
            status_code=exc.status_code or 500,
            message=exc.message or GEMINI_FALLBACK_ERROR,
            error_type=exc.error_type,
        )

    return ChatProxyError(
        status_code=500,
        message=str(exc) or GEMINI_FALLBACK_ERROR,
    )
