import logging
from typing import Any, Literal

import httpx
from pydantic import BaseModel

from .config import Settings

logger = logging.getLogger(__name__)


class ChatMessage(BaseModel):
    role: Literal["system", "user", "assistant"]
    content: str

    model_config = {"frozen": True}


class CompletionError(RuntimeError):
    """The completion endpoint answered with something we cannot read."""


class GroqChatClient:
    """Posts a message sequence to an OpenAI-compatible chat-completions endpoint."""

    def __init__(self, api_key: str, model: str, base_url: str, timeout_seconds: float) -> None:
        self.api_key = api_key
        self.model = model
        self.endpoint = f"{base_url.rstrip('/')}/chat/completions"
        self.timeout_seconds = timeout_seconds

    @classmethod
    def from_settings(cls, settings: Settings) -> "GroqChatClient":
        return cls(
            api_key=settings.groq_api_key,
            model=settings.model,
            base_url=settings.api_base_url,
            timeout_seconds=settings.timeout_seconds,
        )

    async def __call__(self, messages: list[ChatMessage]) -> str | None:
        body = {
            "model": self.model,
            "messages": [message.model_dump() for message in messages],
        }
        headers = {"Authorization": f"Bearer {self.api_key}"}

        async with httpx.AsyncClient(timeout=self.timeout_seconds) as client:
            response = await client.post(self.endpoint, json=body, headers=headers)
        response.raise_for_status()
        logger.debug("Completion from %s answered HTTP %s", self.model, response.status_code)

        try:
            payload: dict[str, Any] = response.json()
        except ValueError as exc:
            raise CompletionError("Completion endpoint returned a non-JSON response.") from exc

        try:
            return payload["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as exc:
            raise CompletionError("Completion response has no message content.") from exc
