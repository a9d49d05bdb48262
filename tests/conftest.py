"""Shared test fixtures and configuration.

Provides configs, fake clients and httpx transports for testing the
generate-and-publish flow without hitting real backends. Async fixtures
return AsyncMock objects usable with the async/await syntax.
"""

from __future__ import annotations

import json
from typing import Any, Callable
from unittest.mock import AsyncMock

import httpx
import pytest

from social_post_generator.constants import GenerationKind
from social_post_generator.content.models import Artifact, Ok
from social_post_generator.providers.config import (
    GeneratorConfig,
    ImageBackendConfig,
    TextBackendConfig,
)

TEXT_BASE_URL = "https://text.test/v1"
IMAGE_BASE_URL = "https://image.test/v1"

LAUNCH_INPUT = "Launching our new product today!"
LAUNCH_POST = (
    "🚀 Big news! We're thrilled to launch our new product today — join us! #launch"
)
IMAGE_URL = "https://images.test/generated/launch.png"


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep real credentials and endpoints out of every test."""
    for name in ("OPENAI_API_KEY", "TEXT_API_KEY", "TEXT_BASE_URL", "IMAGE_BASE_URL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def generator_config() -> GeneratorConfig:
    """Create a config pointing at test endpoints with an image key set."""
    return GeneratorConfig(
        text=TextBackendConfig(
            base_url=TEXT_BASE_URL,
            base_url_env=None,
            api_key_env=None,
            timeout=5,
        ),
        image=ImageBackendConfig(
            base_url=IMAGE_BASE_URL,
            base_url_env=None,
            api_key="test-image-key",
            api_key_env=None,
            timeout=5,
        ),
    )


@pytest.fixture
def keyless_config(generator_config: GeneratorConfig) -> GeneratorConfig:
    """Config whose image backend has no credential."""
    return generator_config.model_copy(
        update={"image": generator_config.image.model_copy(update={"api_key": None})}
    )


@pytest.fixture
def text_artifact() -> Artifact:
    return Artifact(kind=GenerationKind.TEXT_REWRITE, text=LAUNCH_POST)


@pytest.fixture
def image_artifact() -> Artifact:
    return Artifact(
        kind=GenerationKind.IMAGE_SYNTHESIS,
        image_url=IMAGE_URL,
        caption=LAUNCH_INPUT,
    )


@pytest.fixture
def mock_client(text_artifact: Artifact) -> AsyncMock:
    """Create a mock GenerationClient.

    Returns:
        AsyncMock whose generate() resolves to Ok(text_artifact).
    """
    client = AsyncMock()
    client.generate.return_value = Ok(text_artifact)
    return client


@pytest.fixture
def recorded_events() -> list[dict[str, Any]]:
    return []


@pytest.fixture
def event_callback(recorded_events: list[dict[str, Any]]) -> AsyncMock:
    """Create a mock event callback that records every event."""
    callback = AsyncMock()

    async def record(event: dict[str, Any]) -> None:
        recorded_events.append(event)

    callback.side_effect = record
    return callback


@pytest.fixture
def make_transport() -> Callable[..., httpx.MockTransport]:
    """Build an httpx MockTransport that records requests.

    Usage:
        transport = make_transport(lambda request: httpx.Response(200, json={...}))
        transport.requests  # list of httpx.Request seen
    """
    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.MockTransport:
        requests: list[httpx.Request] = []

        def _handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return handler(request)

        transport = httpx.MockTransport(_handler)
        transport.requests = requests
        return transport

    return _make


def chat_completion(content: str) -> dict[str, Any]:
    """Minimal chat completion response body."""
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "choices": [
            {"index": 0, "message": {"role": "assistant", "content": content}, "finish_reason": "stop"}
        ],
    }


def image_generation(url: str) -> dict[str, Any]:
    """Minimal image generation response body."""
    return {"created": 1700000000, "data": [{"url": url}]}


def request_json(request: httpx.Request) -> dict[str, Any]:
    return json.loads(request.content)
