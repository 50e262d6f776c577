from __future__ import annotations

import logging

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from voicechat.core.config import Settings, get_settings
from voicechat.gemini.adapter import resolve_api_key
from voicechat.gemini.errors import ChatProxyError, map_chat_error
from voicechat.speech.errors import SpeechProxyError

logger = logging.getLogger(__name__)

SPEECH_PATH = "/api/text-to-speech"


def require_gemini_settings(settings: Settings = Depends(get_settings)) -> Settings:
    # Runs before body validation so a missing key wins over a malformed body.
    try:
        resolve_api_key(settings)
    except Exception as exc:
        raise map_chat_error(exc) from exc

    return settings


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ChatProxyError)
    async def handle_chat_error(
        request: Request,
        exc: ChatProxyError,
    ) -> JSONResponse:
        _log_failure(request, exc.status_code, exc)
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_error(),
        )

    @app.exception_handler(SpeechProxyError)
    async def handle_speech_error(
        request: Request,
        exc: SpeechProxyError,
    ) -> JSONResponse:
        _log_failure(request, exc.status_code, exc)
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_error(),
        )

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        first_error = exc.errors()[0]["msg"] if exc.errors() else "Invalid request"
        logger.warning("Rejected %s: %s", request.url.path, first_error)

        if request.url.path.startswith(SPEECH_PATH):
            speech_error = SpeechProxyError(status_code=400, message="Text is required")
            return JSONResponse(
                status_code=speech_error.status_code,
                content=speech_error.to_error(),
            )

        chat_error = ChatProxyError(
            status_code=400,
            message="Invalid messages format",
            error_type="invalid_request_error",
        )
        return JSONResponse(
            status_code=chat_error.status_code,
            content=chat_error.to_error(),
        )


def _log_failure(request: Request, status_code: int, exc: Exception) -> None:
    if status_code >= 500:
        logger.error(
            "%s failed with %s: %s",
            request.url.path,
            status_code,
            exc,
            exc_info=exc,
        )
    else:
        logger.warning("%s rejected with %s: %s", request.url.path, status_code, exc)
