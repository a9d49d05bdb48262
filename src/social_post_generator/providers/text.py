"""Text rewrite backend using an OpenAI-compatible chat completions endpoint."""

from __future__ import annotations

import logging
from typing import Any

from ..constants import GenerationKind
from ..content.models import Artifact, GenerationRequest
from ..errors import BackendRejected
from .base import GenerationBackend

_logger = logging.getLogger("ai_calls")


class TextRewriteBackend(GenerationBackend):
    """Rewrites short input into an extended, engagement-oriented post.

    The request carries a fixed role instruction, the user's raw text, a
    bounded token budget and a fixed temperature. None of these are exposed
    to the user.

    Usage:
        backend = TextRewriteBackend()
        artifact = await backend.generate(request)
        artifact.text
    """

    @property
    def kind(self) -> GenerationKind:
        return GenerationKind.TEXT_REWRITE

    def build_payload(self, request: GenerationRequest) -> dict[str, Any]:
        config = request.backend_config
        messages = []
        if config.system_prompt:
            messages.append({"role": "system", "content": config.system_prompt})
        messages.append({"role": "user", "content": request.prompt})

        payload: dict[str, Any] = {"model": config.model, "messages": messages}
        if config.temperature is not None:
            payload["temperature"] = config.temperature
        if config.max_tokens is not None:
            payload["max_tokens"] = config.max_tokens
        return payload

    async def generate(self, request: GenerationRequest) -> Artifact:
        prompt = self._check_prompt(request)
        config = request.backend_config

        # Log request
        _logger.info(
            f"AI_REQUEST | kind:{self.kind.value} | model:{config.model}\n"
            f"--- SYSTEM ---\n{config.system_prompt or '(none)'}\n"
            f"--- PROMPT ---\n{prompt}\n"
            f"--- END REQUEST ---"
        )

        data = await self._post_json(request, "chat/completions", self.build_payload(request))
        content = _extract_content(data)

        _logger.info(f"--- RESPONSE ---\n{content}\n--- END RESPONSE ---")
        return Artifact(kind=self.kind, text=content)


def _extract_content(data: dict[str, Any]) -> str:
    """Pull ``choices[0].message.content`` out of a chat completion body."""
    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError) as e:
        raise BackendRejected("Chat completion response is missing content") from e

    if not isinstance(content, str) or not content.strip():
        raise BackendRejected("Chat completion returned empty content")
    return content
