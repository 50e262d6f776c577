from __future__ import annotations

from voicechat.core.config import Settings
from voicechat.core.errors import ConfigurationError, ValidationError
from voicechat.core.types import SpeechRequest
from voicechat.core.upstream import synthesize_speech

from .errors import map_speech_error
from .schemas import TextToSpeechRequest


def prepare_speech_request(
    request: TextToSpeechRequest,
    settings: Settings,
) -> SpeechRequest:
    if not request.text:
        raise ValidationError("Text is required")

    if not settings.ELEVEN_LABS_API_KEY:
        raise ConfigurationError("ElevenLabs API key is not configured")

    return SpeechRequest(
        text=request.text,
        voice_id=settings.voice_id,
        model_id=settings.ELEVEN_LABS_MODEL_ID,
    )


async def create_speech_audio(request: TextToSpeechRequest, settings: Settings) -> bytes:
    try:
        speech_request = prepare_speech_request(request, settings)
        return await synthesize_speech(
            speech_request,
            api_url=settings.ELEVEN_LABS_API_URL,
            api_key=settings.ELEVEN_LABS_API_KEY,
        )
    except Exception as exc:
        raise map_speech_error(exc) from exc
