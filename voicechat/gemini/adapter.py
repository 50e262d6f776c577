from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass
from typing import Any

from voicechat.core.config import Settings
from voicechat.core.errors import ConfigurationError, ValidationError
from voicechat.core.types import (
    DEFAULT_IMAGE_PROMPT,
    GenerationRequest,
    InlineDataPart,
    TextPart,
)
from voicechat.core.upstream import generate_content

from .errors import map_chat_error
from .schemas import ChatMessage, ChatRequest


@dataclass(slots=True)
class DataURI:
    mime_type: str
    data: bytes


def resolve_api_key(settings: Settings) -> str:
    if not settings.GEMINI_API_KEY:
        raise ConfigurationError("Gemini API key not configured")

    return settings.GEMINI_API_KEY


async def create_chat_reply(request: ChatRequest, settings: Settings) -> dict[str, Any]:
    try:
        api_key = resolve_api_key(settings)
        generation_request = build_generation_request(request.messages)
        body = await generate_content(
            generation_request,
            api_url=settings.GEMINI_API_URL,
            api_key=api_key,
        )
    except Exception as exc:
        raise map_chat_error(exc) from exc

    reply = extract_reply_text(body)
    if reply is None:
        reply = ""

    return {"reply": reply}


def build_generation_request(messages: list[ChatMessage]) -> GenerationRequest:
    """Build a single-turn request from the last message of the conversation.

    Earlier turns are not forwarded.
    """

    if not messages:
        raise ValidationError("messages must contain at least one item.")

    last = messages[-1]
    has_text = bool(last.content.strip())
    has_image = bool(last.image)

    if not has_text and not has_image:
        raise ValidationError("The last message must contain text or an image.")

    parts: list[TextPart | InlineDataPart] = []

    if has_image and not has_text:
        parts.append(TextPart(DEFAULT_IMAGE_PROMPT))
    elif has_text:
        parts.append(TextPart(last.content.strip()))

    if has_image:
        data_uri = parse_data_uri(last.image)
        parts.append(InlineDataPart(data=data_uri.data, mime_type=data_uri.mime_type))

    return GenerationRequest(parts=parts)


def parse_data_uri(value: str) -> DataURI:
    """Split `data:<mime>;base64,<payload>` into MIME type and decoded bytes."""

    header, separator, payload = value.partition(",")
    if not separator or not header.startswith("data:"):
        raise ValidationError("image must be a data URI.")

    mime_type, *params = header[len("data:") :].split(";")
    if not mime_type:
        raise ValidationError("image data URI is missing a MIME type.")

    if "base64" not in params:
        raise ValidationError("image data URI must be base64-encoded.")

    try:
        # Wrapped (RFC 2045) payloads carry line breaks between base64 groups.
        data = base64.b64decode("".join(payload.split()), validate=True)
    except binascii.Error as exc:
        raise ValidationError("image data URI has an invalid base64 payload.") from exc

    return DataURI(mime_type=mime_type, data=data)


def extract_reply_text(body: Any) -> str | None:
    """Return `candidates[0].content.parts[0].text`, or None when any step is absent."""

    if not isinstance(body, dict):
        return None

    candidates = body.get("candidates")
    if not isinstance(candidates, list) or not candidates:
        return None

    candidate = candidates[0]
    if not isinstance(candidate, dict):
        return None

    content = candidate.get("content")
    if not isinstance(content, dict):
        return None

    parts = content.get("parts")
    if not isinstance(parts, list) or not parts:
        return None

    part = parts[0]
    if not isinstance(part, dict):
        return None

    text = part.get("text")
    if not isinstance(text, str):
        return None

    return text
