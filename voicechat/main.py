from __future__ import annotations

import logging

from fastapi import FastAPI

from voicechat.core.config import get_settings
from voicechat.dependencies import register_exception_handlers
from voicechat.internal import admin
from voicechat.routers import chat, speech


def create_app() -> FastAPI:
    settings = get_settings()
    logging.basicConfig(level=settings.LOG_LEVEL.upper())

    app = FastAPI(
        title=settings.APP_NAME,
        version="0.1.0",
        docs_url="/docs",
        redoc_url=None,
    )

    register_exception_handlers(app)

    app.include_router(chat.router)
    app.include_router(speech.router)
    app.include_router(admin.router)

    return app


app = create_app()
