from __future__ import annotations

from fastapi import APIRouter, Depends

from voicechat.core.config import Settings, get_settings

router = APIRouter(prefix="/internal", tags=["internal"])


@router.get("/healthz")
async def healthz(settings: Settings = Depends(get_settings)) -> dict[str, object]:
    return {
        "status": "ok",
        "upstreams": {
            "gemini": bool(settings.GEMINI_API_KEY),
            "elevenlabs": bool(settings.ELEVEN_LABS_API_KEY),
        },
    }
