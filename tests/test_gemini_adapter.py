from __future__ import annotations

import base64

import pytest

from voicechat.core.errors import ValidationError
from voicechat.core.types import InlineDataPart, TextPart
from voicechat.gemini.adapter import (
    build_generation_request,
    extract_reply_text,
    parse_data_uri,
)
from voicechat.gemini.errors import ChatProxyError, map_chat_error
from voicechat.gemini.schemas import ChatMessage


def test_parse_data_uri_accepts_any_mime_subtype():
    parsed = parse_data_uri("data:image/svg+xml;base64,PHN2Zy8+")

    assert parsed.mime_type == "image/svg+xml"
    assert parsed.data == b"<svg/>"


def test_parse_data_uri_keeps_extra_parameters_out_of_mime_type():
    parsed = parse_data_uri("data:image/jpeg;name=cat.jpg;base64,/9j/")

    assert parsed.mime_type == "image/jpeg"
    assert parsed.data == b"\xff\xd8\xff"


@pytest.mark.parametrize(
    "value",
    [
        "image/png;base64,AAAA",
        "data:image/png;base64",
        "data:;base64,AAAA",
        "data:image/png,AAAA",
        "data:image/png;base64,***",
    ],
)
def test_parse_data_uri_rejects_malformed_values(value):
    with pytest.raises(ValidationError):
        parse_data_uri(value)


def test_build_generation_request_text_only():
    request = build_generation_request([ChatMessage(role="user", content=" hi ")])

    assert request.parts == [TextPart("hi")]


def test_build_generation_request_image_only():
    request = build_generation_request(
        [ChatMessage(role="user", content="", image="data:image/gif;base64,R0lG")]
    )

    assert request.parts == [
        TextPart("What do you see in this image?"),
        InlineDataPart(data=b"GIF", mime_type="image/gif"),
    ]


def test_build_generation_request_rejects_empty_message():
    with pytest.raises(ValidationError):
        build_generation_request([ChatMessage(role="user", content="", image="")])


@pytest.mark.parametrize(
    "body",
    [
        {},
        {"candidates": []},
        {"candidates": [{}]},
        {"candidates": [{"content": {"parts": []}}]},
        {"candidates": [{"content": {"parts": [{"inlineData": {}}]}}]},
        ["unexpected"],
        None,
    ],
)
def test_extract_reply_text_returns_none_for_missing_path(body):
    assert extract_reply_text(body) is None


def test_extract_reply_text_reads_first_candidate_part():
    body = {
        "candidates": [
            {"content": {"parts": [{"text": "hello"}, {"text": "ignored"}]}},
            {"content": {"parts": [{"text": "second candidate"}]}},
        ]
    }

    assert extract_reply_text(body) == "hello"


def test_map_chat_error_wraps_unexpected_exceptions():
    mapped = map_chat_error(RuntimeError("kaboom"))

    assert isinstance(mapped, ChatProxyError)
    assert mapped.status_code == 500
    assert mapped.to_error() == {"error": "kaboom", "type": "unknown_error"}


def test_parse_data_uri_accepts_line_wrapped_payload():
    payload = base64.encodebytes(b"x" * 100).decode("ascii")
    assert "\n" in payload

    parsed = parse_data_uri("data:image/png;base64," + payload)

    assert parsed.data == b"x" * 100
