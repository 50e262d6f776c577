from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

import httpx

from .api import Err, fetch_speech

logger = logging.getLogger(__name__)


class AudioSink(Protocol):
    def play(self, audio: bytes) -> None: ...

    def pause(self) -> None: ...


@dataclass
class VoicePlayback:
    """Play/pause control for reading one assistant message aloud."""

    http: httpx.AsyncClient
    text: str
    sink: AudioSink
    is_playing: bool = False

    async def toggle(self) -> None:
        if self.is_playing:
            self.sink.pause()
            self.is_playing = False
            return

        result = await fetch_speech(self.http, self.text)
        if isinstance(result, Err):
            logger.error("Failed to play voice: %s", result.error.message)
            self.is_playing = False
            return

        try:
            self.sink.play(result.value)
        except Exception:
            logger.exception("Audio sink failed to start playback")
            self.is_playing = False
            return

        self.is_playing = True

    def on_ended(self) -> None:
        self.is_playing = False

    def on_error(self) -> None:
        self.is_playing = False
