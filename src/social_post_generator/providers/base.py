"""Abstract base class for generation backends.

This module defines the interface every backend variant implements, plus the
shared HTTP plumbing that maps transport and response failures onto the
generation error taxonomy.
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

import httpx

from ..constants import GenerationKind
from ..errors import BackendRejected, BackendUnreachable, PreconditionFailed

if TYPE_CHECKING:
    from ..content.models import Artifact, GenerationRequest

_logger = logging.getLogger("ai_calls")


class GenerationBackend(ABC):
    """Abstract base class for generation backends.

    Backends are stateless between calls: each ``generate`` opens its own
    HTTP client and closes it before returning. They raise
    ``GenerationError`` subclasses and never retry.
    """

    def __init__(self, transport: httpx.AsyncBaseTransport | None = None):
        """Initialize the backend.

        Args:
            transport: Optional httpx transport (tests pass a MockTransport).
        """
        self._transport = transport

    @property
    @abstractmethod
    def kind(self) -> GenerationKind:
        """Return the generation kind this backend serves."""
        ...

    @abstractmethod
    async def generate(self, request: "GenerationRequest") -> "Artifact":
        """Run one generation request.

        Args:
            request: The request to serve.

        Returns:
            The generated artifact.

        Raises:
            PreconditionFailed: Request blocked before any network call.
            BackendUnreachable: Transport failure or timeout.
            BackendRejected: Non-success status or malformed payload.
        """
        ...

    def _check_prompt(self, request: "GenerationRequest") -> str:
        if not request.prompt:
            raise PreconditionFailed(
                "Prompt is empty",
                user_message="Please enter some text first",
            )
        return request.prompt

    async def _post_json(
        self,
        request: "GenerationRequest",
        path: str,
        payload: dict[str, Any],
    ) -> dict[str, Any]:
        """POST ``payload`` and return the decoded JSON body."""
        config = request.backend_config
        url = f"{config.base_url.rstrip('/')}/{path.lstrip('/')}"
        headers = {"Content-Type": "application/json"}
        if config.api_key:
            headers["Authorization"] = f"Bearer {config.api_key}"

        timeout = httpx.Timeout(config.timeout, connect=config.connect_timeout)
        start_time = time.time()

        try:
            async with httpx.AsyncClient(timeout=timeout, transport=self._transport) as client:
                response = await client.post(url, json=payload, headers=headers)
        except httpx.TimeoutException as e:
            _logger.warning(f"AI_ERROR | kind:{self.kind.value} | timeout | {e}")
            raise BackendUnreachable(f"Request to {url} timed out") from e
        except httpx.TransportError as e:
            _logger.warning(f"AI_ERROR | kind:{self.kind.value} | transport | {e}")
            raise BackendUnreachable(f"Could not reach {url}: {e}") from e
        except httpx.DecodingError as e:
            _logger.warning(f"AI_ERROR | kind:{self.kind.value} | decoding | {e}")
            raise BackendRejected(f"Could not decode response from {url}: {e}") from e
        except httpx.RequestError as e:
            _logger.warning(f"AI_ERROR | kind:{self.kind.value} | request | {e}")
            raise BackendUnreachable(f"Request to {url} failed: {e}") from e

        duration = time.time() - start_time

        if not response.is_success:
            _logger.warning(
                f"AI_ERROR | kind:{self.kind.value} | status:{response.status_code} | "
                f"duration:{duration:.2f}s\n{response.text[:500]}"
            )
            raise BackendRejected(
                f"Backend returned HTTP {response.status_code}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise BackendRejected(
                "Backend returned a non-JSON body",
                status_code=response.status_code,
            ) from e

        if not isinstance(data, dict):
            raise BackendRejected(
                "Backend returned an unexpected payload",
                status_code=response.status_code,
            )

        _logger.info(
            f"AI_RESPONSE | kind:{self.kind.value} | model:{config.model} | "
            f"status:{response.status_code} | duration:{duration:.2f}s"
        )
        return data
