from __future__ import annotations

import logging
from typing import Any

import httpx

from .errors import ParsingError, TransportError, UpstreamError
from .types import GenerationRequest, SpeechRequest

logger = logging.getLogger(__name__)

GEMINI_FALLBACK_ERROR = "Failed to get response from Gemini"


def create_http_client() -> httpx.AsyncClient:
    return httpx.AsyncClient()


async def generate_content(
    request: GenerationRequest,
    *,
    api_url: str,
    api_key: str,
) -> dict[str, Any]:
    """POST a generation request and return the decoded JSON body."""

    try:
        async with create_http_client() as client:
            response = await client.post(
                api_url,
                params={"key": api_key},
                json=request.to_payload(),
            )
    except httpx.TransportError as exc:
        raise TransportError(GEMINI_FALLBACK_ERROR) from exc

    if response.is_error:
        raise UpstreamError(
            _gemini_error_message(response),
            status_code=response.status_code,
        )

    try:
        return response.json()
    except ValueError as exc:
        raise ParsingError("Gemini returned a response that is not valid JSON.") from exc


async def synthesize_speech(
    request: SpeechRequest,
    *,
    api_url: str,
    api_key: str,
) -> bytes:
    """POST a text-to-speech request and return the full audio body."""

    url = f"{api_url.rstrip('/')}/{request.voice_id}"
    headers = {
        "Accept": "audio/mpeg",
        "xi-api-key": api_key,
    }

    try:
        async with create_http_client() as client:
            response = await client.post(url, headers=headers, json=request.to_payload())
    except httpx.TransportError as exc:
        raise TransportError("Failed to reach the ElevenLabs API.") from exc

    if response.is_error:
        raise UpstreamError(
            f"ElevenLabs API error: {response.text}",
            status_code=response.status_code,
        )

    return response.content


def _gemini_error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        logger.warning(
            "Gemini error response (status=%s) is not JSON", response.status_code
        )
        return GEMINI_FALLBACK_ERROR

    error = body.get("error") if isinstance(body, dict) else None
    if isinstance(error, dict) and isinstance(error.get("message"), str):
        return error["message"] or GEMINI_FALLBACK_ERROR

    return GEMINI_FALLBACK_ERROR
