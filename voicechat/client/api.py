from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

import httpx

logger = logging.getLogger(__name__)

T = TypeVar("T")

CHAT_PATH = "/api/chat"
SPEECH_PATH = "/api/text-to-speech"


@dataclass(slots=True)
class ClientError:
    message: str
    status_code: int | None = None
    error_type: str | None = None


@dataclass(slots=True)
class Ok(Generic[T]):
    value: T


@dataclass(slots=True)
class Err:
    error: ClientError


ChatResult = Ok[str] | Err
SpeechResult = Ok[bytes] | Err


async def send_chat(http: httpx.AsyncClient, messages: list[dict[str, Any]]) -> ChatResult:
    """POST the whole conversation and return the assistant reply."""

    try:
        response = await http.post(CHAT_PATH, json={"messages": messages})
    except httpx.HTTPError as exc:
        return Err(ClientError(message=str(exc) or "Chat request failed"))

    try:
        data = response.json()
    except ValueError:
        data = {}

    if response.is_error:
        return Err(_client_error(response.status_code, data))

    reply = data.get("reply") if isinstance(data, dict) else None
    if not isinstance(reply, str):
        return Err(
            ClientError(
                message="Chat response is missing a reply",
                status_code=response.status_code,
            )
        )

    return Ok(reply)


async def fetch_speech(http: httpx.AsyncClient, text: str) -> SpeechResult:
    """POST text to the speech endpoint and return the audio bytes."""

    try:
        response = await http.post(SPEECH_PATH, json={"text": text})
    except httpx.HTTPError as exc:
        return Err(ClientError(message=str(exc) or "Speech request failed"))

    if response.is_error:
        try:
            data = response.json()
        except ValueError:
            data = {}
        return Err(_client_error(response.status_code, data))

    return Ok(response.content)


def _client_error(status_code: int, data: Any) -> ClientError:
    if not isinstance(data, dict):
        data = {}

    message = data.get("error")
    if not isinstance(message, str):
        message = f"Request failed with status {status_code}"

    error_type = data.get("type")
    return ClientError(
        message=message,
        status_code=status_code,
        error_type=error_type if isinstance(error_type, str) else None,
    )
