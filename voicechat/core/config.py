from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent.parent

DEFAULT_VOICE_ID = "21m00Tcm4TlvDq8ikWAM"


class Settings(BaseSettings):
    APP_NAME: str = "voicechat"
    LOG_LEVEL: str = "INFO"

    # Gemini generateContent endpoint; the key travels as the `key` query parameter
    GEMINI_API_KEY: str | None = None
    GEMINI_API_URL: str = (
        "https://generativelanguage.googleapis.com/v1beta/models/"
        "gemini-2.0-flash:generateContent"
    )

    ELEVEN_LABS_API_KEY: str | None = None
    ELEVEN_LABS_VOICE_ID: str | None = None
    ELEVEN_LABS_API_URL: str = "https://api.elevenlabs.io/v1/text-to-speech"
    ELEVEN_LABS_MODEL_ID: str = "eleven_monolingual_v1"

    model_config = SettingsConfigDict(
        env_file=BASE_DIR / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def voice_id(self) -> str:
        return self.ELEVEN_LABS_VOICE_ID or DEFAULT_VOICE_ID


@lru_cache
def get_settings() -> Settings:
    return Settings()
