"""Generation client dispatching requests to the backend for their kind."""

from __future__ import annotations

import logging
import time
from typing import Any, Awaitable, Callable

import httpx

from ..constants import GenerationKind
from ..content.models import Failed, GenerationRequest, GenerationResult, Ok
from ..errors import GenerationError, PreconditionFailed
from .base import GenerationBackend
from .image import ImageSynthesisBackend
from .text import TextRewriteBackend

_logger = logging.getLogger("ai_calls")

# Type for AI event callback
AIEventCallback = Callable[[dict[str, Any]], Awaitable[None]] | None


class GenerationClient:
    """One interface over the text rewrite and image synthesis backends.

    ``generate`` issues at most one backend request, never retries, and
    always returns a ``GenerationResult``: backend errors come back as
    ``Failed`` rather than being raised. The client keeps no session between
    calls.

    Usage:
        client = GenerationClient()
        result = await client.generate(request)
        if result.is_success():
            print(result.artifact.text)
    """

    def __init__(
        self,
        backends: dict[GenerationKind, GenerationBackend] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        event_callback: AIEventCallback = None,
    ):
        """Initialize the client.

        Args:
            backends: Backend per kind. Defaults to the HTTP backends.
            transport: Optional httpx transport shared by the default backends.
            event_callback: Optional callback for AI events (for progress tracking).
        """
        if backends is None:
            backends = {
                GenerationKind.TEXT_REWRITE: TextRewriteBackend(transport=transport),
                GenerationKind.IMAGE_SYNTHESIS: ImageSynthesisBackend(transport=transport),
            }
        self._backends = backends
        self._event_callback = event_callback

    async def _emit_event(self, event: dict[str, Any]) -> None:
        """Emit an AI event if callback is set."""
        if self._event_callback:
            await self._event_callback(event)

    def backend_for(self, kind: GenerationKind) -> GenerationBackend | None:
        return self._backends.get(kind)

    async def generate(self, request: GenerationRequest) -> GenerationResult:
        """Run one request and normalise the outcome.

        Args:
            request: The request to serve.

        Returns:
            Ok with the artifact, or Failed with the GenerationError.
        """
        backend = self.backend_for(request.kind)
        if backend is None:
            return Failed(PreconditionFailed(f"No backend configured for {request.kind.value}"))

        await self._emit_event({
            "type": "generation_call",
            "kind": request.kind.value,
            "model": request.backend_config.model,
            "prompt_preview": request.prompt[:200],
        })

        start_time = time.time()
        try:
            artifact = await backend.generate(request)
        except GenerationError as e:
            _logger.warning(f"Generation failed | kind:{request.kind.value} | {type(e).__name__}: {e}")
            await self._emit_event({
                "type": "generation_error",
                "kind": request.kind.value,
                "error_type": type(e).__name__,
                "error": str(e)[:100],
            })
            return Failed(e)

        await self._emit_event({
            "type": "generation_response",
            "kind": request.kind.value,
            "model": request.backend_config.model,
            "duration_seconds": time.time() - start_time,
        })
        return Ok(artifact)
