"""Tests for the chat-completion adapter and settings loading."""

from __future__ import annotations

import asyncio
from typing import Any

import httpx
import pytest

from lingobridge.app.config import DEFAULT_MODEL, ConfigurationError, load_settings
from lingobridge.app.llm import ChatMessage, CompletionError, GroqChatClient

ENDPOINT = "https://llm.test/v1/chat/completions"


@pytest.fixture
def chat_client() -> GroqChatClient:
    return GroqChatClient(api_key="test-key", model="test-model", base_url="https://llm.test/v1/", timeout_seconds=5)


@pytest.fixture
def messages() -> list[ChatMessage]:
    return [
        ChatMessage(role="system", content="translate"),
        ChatMessage(role="user", content="Hola {{Español}} [[English]]"),
    ]


def fake_response(status_code: int, **kwargs: Any) -> httpx.Response:
    return httpx.Response(status_code=status_code, request=httpx.Request("POST", ENDPOINT), **kwargs)


def test_client_posts_model_messages_and_bearer_token(
    chat_client: GroqChatClient,
    messages: list[ChatMessage],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """The adapter posts the whole message sequence and returns the first choice."""
    seen: dict[str, Any] = {}

    async def fake_post(self, url: str, json: dict[str, Any], headers: dict[str, str]):  # noqa: ANN001
        seen.update(url=url, json=json, headers=headers)
        return fake_response(200, json={"choices": [{"message": {"role": "assistant", "content": "Hello"}}]})

    monkeypatch.setattr(httpx.AsyncClient, "post", fake_post)

    content = asyncio.run(chat_client(messages))

    assert content == "Hello"
    assert seen["url"] == ENDPOINT
    assert seen["headers"] == {"Authorization": "Bearer test-key"}
    assert seen["json"] == {
        "model": "test-model",
        "messages": [
            {"role": "system", "content": "translate"},
            {"role": "user", "content": "Hola {{Español}} [[English]]"},
        ],
    }


def test_client_returns_none_content(
    chat_client: GroqChatClient,
    messages: list[ChatMessage],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    async def fake_post(self, url: str, json: dict[str, Any], headers: dict[str, str]):  # noqa: ANN001
        return fake_response(200, json={"choices": [{"message": {"role": "assistant", "content": None}}]})

    monkeypatch.setattr(httpx.AsyncClient, "post", fake_post)

    assert asyncio.run(chat_client(messages)) is None


def test_client_raises_on_http_error(
    chat_client: GroqChatClient,
    messages: list[ChatMessage],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Auth and quota rejections surface as httpx errors for the service to contain."""

    async def fake_post(self, url: str, json: dict[str, Any], headers: dict[str, str]):  # noqa: ANN001
        return fake_response(429, json={"error": {"message": "rate limited"}})

    monkeypatch.setattr(httpx.AsyncClient, "post", fake_post)

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(chat_client(messages))


@pytest.mark.parametrize(
    "response_kwargs",
    [
        {"content": b"<html>bad gateway</html>"},
        {"json": {"choices": []}},
        {"json": {"unexpected": True}},
    ],
)
def test_client_raises_on_malformed_body(
    chat_client: GroqChatClient,
    messages: list[ChatMessage],
    monkeypatch: pytest.MonkeyPatch,
    response_kwargs: dict[str, Any],
) -> None:
    async def fake_post(self, url: str, json: dict[str, Any], headers: dict[str, str]):  # noqa: ANN001
        return fake_response(200, **response_kwargs)

    monkeypatch.setattr(httpx.AsyncClient, "post", fake_post)

    with pytest.raises(CompletionError):
        asyncio.run(chat_client(messages))


def test_load_settings_requires_api_key(monkeypatch: pytest.MonkeyPatch) -> None:
    """A missing credential is a configuration error, not a per-request failure."""
    monkeypatch.delenv("GROQ_API_KEY", raising=False)

    with pytest.raises(ConfigurationError, match="GROQ_API_KEY"):
        load_settings()


def test_load_settings_defaults_and_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GROQ_API_KEY", "secret")
    monkeypatch.delenv("LINGOBRIDGE_MODEL", raising=False)
    monkeypatch.delenv("LINGOBRIDGE_TIMEOUT_SECONDS", raising=False)
    monkeypatch.setenv("LINGOBRIDGE_API_BASE_URL", "http://localhost:9000/v1/")
    monkeypatch.setenv("LINGOBRIDGE_LOG_LEVEL", "debug")

    settings = load_settings()

    assert settings.groq_api_key == "secret"
    assert settings.model == DEFAULT_MODEL
    assert settings.api_base_url == "http://localhost:9000/v1"
    assert settings.log_level == "DEBUG"

    client = GroqChatClient.from_settings(settings)
    assert client.endpoint == "http://localhost:9000/v1/chat/completions"


@pytest.mark.parametrize("timeout", ["soon", "0"])
def test_load_settings_rejects_bad_timeout(monkeypatch: pytest.MonkeyPatch, timeout: str) -> None:
    monkeypatch.setenv("GROQ_API_KEY", "secret")
    monkeypatch.setenv("LINGOBRIDGE_TIMEOUT_SECONDS", timeout)

    with pytest.raises(ConfigurationError):
        load_settings()


@pytest.mark.parametrize("level", ["verbose", "trace", ""])
def test_load_settings_rejects_unknown_log_level(monkeypatch: pytest.MonkeyPatch, level: str) -> None:
    """An unusable log level is reported as configuration, not left for logging to trip over."""
    monkeypatch.setenv("GROQ_API_KEY", "secret")
    monkeypatch.delenv("LINGOBRIDGE_TIMEOUT_SECONDS", raising=False)
    monkeypatch.setenv("LINGOBRIDGE_LOG_LEVEL", level)

    with pytest.raises(ConfigurationError):
        load_settings()
