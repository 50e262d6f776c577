from __future__ import annotations

import json

import httpx
import pytest
from fastapi.testclient import TestClient

import voicechat.core.upstream as upstream
from voicechat.core.config import Settings, get_settings
from voicechat.main import create_app

AUDIO_BYTES = bytes(range(256)) * 4


def make_settings(**overrides) -> Settings:
    values = {
        "GEMINI_API_KEY": "test-gemini-key",
        "ELEVEN_LABS_API_KEY": "test-eleven-key",
        "ELEVEN_LABS_VOICE_ID": None,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def build_client(settings: Settings) -> TestClient:
    app = create_app()
    app.dependency_overrides[get_settings] = lambda: settings
    return TestClient(app)


@pytest.fixture()
def client() -> TestClient:
    return build_client(make_settings())


@pytest.fixture()
def elevenlabs(monkeypatch):
    state = {
        "requests": [],
        "status_code": 200,
        "content": AUDIO_BYTES,
    }

    def handler(request: httpx.Request) -> httpx.Response:
        state["requests"].append(request)
        return httpx.Response(
            state["status_code"],
            content=state["content"],
            headers={"Content-Type": "audio/mpeg"},
        )

    monkeypatch.setattr(
        upstream,
        "create_http_client",
        lambda: httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )

    return state


def test_text_to_speech_returns_audio_bytes(client: TestClient, elevenlabs):
    response = client.post("/api/text-to-speech", json={"text": "Hello there"})

    assert response.status_code == 200
    assert response.content == AUDIO_BYTES
    assert response.headers["content-type"] == "audio/mpeg"
    assert response.headers["content-length"] == str(len(AUDIO_BYTES))

    request = elevenlabs["requests"][0]
    assert str(request.url) == (
        "https://api.elevenlabs.io/v1/text-to-speech/21m00Tcm4TlvDq8ikWAM"
    )
    assert request.headers["xi-api-key"] == "test-eleven-key"
    assert request.headers["accept"] == "audio/mpeg"
    assert json.loads(request.content) == {
        "text": "Hello there",
        "model_id": "eleven_monolingual_v1",
        "voice_settings": {"stability": 0.5, "similarity_boost": 0.5},
    }


def test_text_to_speech_uses_configured_voice(elevenlabs):
    client = build_client(make_settings(ELEVEN_LABS_VOICE_ID="custom-voice"))

    response = client.post("/api/text-to-speech", json={"text": "Hi"})

    assert response.status_code == 200
    assert elevenlabs["requests"][0].url.path == "/v1/text-to-speech/custom-voice"


@pytest.mark.parametrize("body", [{}, {"text": ""}, {"text": None}])
def test_text_to_speech_requires_text(client: TestClient, elevenlabs, body):
    response = client.post("/api/text-to-speech", json=body)

    assert response.status_code == 400
    assert response.json() == {"error": "Text is required"}
    assert elevenlabs["requests"] == []


def test_text_to_speech_missing_api_key_returns_500(elevenlabs):
    client = build_client(make_settings(ELEVEN_LABS_API_KEY=None))

    response = client.post("/api/text-to-speech", json={"text": "Hello"})

    assert response.status_code == 500
    assert response.json() == {"error": "ElevenLabs API key is not configured"}
    assert elevenlabs["requests"] == []


def test_text_to_speech_upstream_error_is_not_exposed(
    client: TestClient,
    elevenlabs,
    caplog,
):
    elevenlabs["status_code"] = 401
    elevenlabs["content"] = b'{"detail": "invalid api key"}'

    with caplog.at_level("ERROR"):
        response = client.post("/api/text-to-speech", json={"text": "Hello"})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to convert text to speech"}
    assert "invalid api key" not in response.text
    assert "invalid api key" in caplog.text


def test_text_to_speech_transport_error_returns_generic_500(
    client: TestClient,
    monkeypatch,
):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    monkeypatch.setattr(
        upstream,
        "create_http_client",
        lambda: httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )

    response = client.post("/api/text-to-speech", json={"text": "Hello"})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to convert text to speech"}


@pytest.mark.parametrize(
    "content",
    [b'{"text": 123}', b"{not json"],
)
def test_text_to_speech_malformed_body_returns_text_required(
    client: TestClient,
    elevenlabs,
    content,
):
    response = client.post(
        "/api/text-to-speech",
        content=content,
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Text is required"}
    assert elevenlabs["requests"] == []
