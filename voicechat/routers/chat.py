from __future__ import annotations

from fastapi import APIRouter, Depends

from voicechat.core.config import Settings
from voicechat.dependencies import require_gemini_settings
from voicechat.gemini.adapter import create_chat_reply
from voicechat.gemini.schemas import ChatReply, ChatRequest

router = APIRouter(prefix="/api", tags=["chat"])


@router.post("/chat", response_model=ChatReply)
async def chat(
    payload: ChatRequest,
    settings: Settings = Depends(require_gemini_settings),
):
    return await create_chat_reply(payload, settings)
