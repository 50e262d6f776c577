from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Literal

import httpx

from .api import Err, send_chat

logger = logging.getLogger(__name__)

SAMPLE_QUESTIONS = (
    "What is Gemini AI?",
    "Tell me about machine learning",
    "Write a story",
    "Explain quantum computing",
)


@dataclass(frozen=True, slots=True)
class Message:
    role: Literal["user", "assistant", "system"]
    content: str
    image: str | None = None

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"role": self.role, "content": self.content}
        if self.image:
            payload["image"] = self.image
        return payload


@dataclass
class ChatSession:
    """In-memory view state for one conversation.

    Failed turns are logged and leave `messages` untouched; nothing is
    retried and no error message is added to the conversation.
    """

    http: httpx.AsyncClient
    messages: list[Message] = field(default_factory=list)
    input_text: str = ""
    pending_image: str | None = None
    is_loading: bool = False

    @property
    def can_submit(self) -> bool:
        if self.is_loading:
            return False
        return bool(self.input_text.strip()) or bool(self.pending_image)

    @property
    def sample_questions(self) -> tuple[str, ...]:
        if self.messages:
            return ()
        return SAMPLE_QUESTIONS

    def set_input(self, text: str) -> None:
        self.input_text = text

    def clear_input(self) -> None:
        self.input_text = ""

    def attach_image(self, data_uri: str) -> None:
        self.pending_image = data_uri

    def remove_image(self) -> None:
        self.pending_image = None

    async def ask(self, question: str) -> bool:
        self.input_text = question
        return await self.submit()

    async def submit(self) -> bool:
        """Send the buffered input; returns True when a reply was appended."""

        if not self.can_submit:
            return False

        user_message = Message(
            role="user",
            content=self.input_text,
            image=self.pending_image,
        )
        conversation = [*self.messages, user_message]
        self.messages = conversation
        self.input_text = ""
        self.pending_image = None
        self.is_loading = True

        try:
            result = await send_chat(
                self.http,
                [message.to_payload() for message in conversation],
            )
        finally:
            self.is_loading = False

        if isinstance(result, Err):
            logger.error("Failed to get response: %s", result.error.message)
            return False

        self.messages = [*conversation, Message(role="assistant", content=result.value)]
        return True
