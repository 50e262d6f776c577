from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from voicechat.core.config import Settings, get_settings
from voicechat.speech.adapter import create_speech_audio
from voicechat.speech.schemas import TextToSpeechRequest

router = APIRouter(prefix="/api", tags=["speech"])


@router.post("/text-to-speech")
async def text_to_speech(
    payload: TextToSpeechRequest,
    settings: Settings = Depends(get_settings),
) -> Response:
    audio = await create_speech_audio(payload, settings)

    return Response(
        content=audio,
        media_type="audio/mpeg",
        headers={"Content-Length": str(len(audio))},
    )
