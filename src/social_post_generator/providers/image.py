"""Image synthesis backend using an OpenAI-compatible image generations endpoint."""

from __future__ import annotations

import logging
from typing import Any

from ..constants import GenerationKind
from ..content.models import Artifact, GenerationRequest
from ..errors import BackendRejected, PreconditionFailed
from .base import GenerationBackend

_logger = logging.getLogger("ai_calls")


class ImageSynthesisBackend(GenerationBackend):
    """Generates one square image and returns its URL.

    The caller must supply an API key in the request's backend config. A
    missing key fails before any network call is made.

    Usage:
        backend = ImageSynthesisBackend()
        artifact = await backend.generate(request)
        artifact.image_url
    """

    @property
    def kind(self) -> GenerationKind:
        return GenerationKind.IMAGE_SYNTHESIS

    def build_payload(self, request: GenerationRequest) -> dict[str, Any]:
        config = request.backend_config
        return {
            "model": config.model,
            "prompt": request.prompt,
            "size": config.size,
            "n": 1,
        }

    async def generate(self, request: GenerationRequest) -> Artifact:
        prompt = self._check_prompt(request)
        config = request.backend_config

        if not config.api_key:
            raise PreconditionFailed(
                "Image backend API key not set",
                user_message="Please provide an API key for image generation.",
            )

        _logger.info(
            f"AI_REQUEST | kind:{self.kind.value} | model:{config.model} | size:{config.size}\n"
            f"--- PROMPT ---\n{prompt}\n"
            f"--- END REQUEST ---"
        )

        data = await self._post_json(request, "images/generations", self.build_payload(request))
        image_url = _extract_image_url(data)

        return Artifact(
            kind=self.kind,
            image_url=image_url,
            caption=prompt if config.caption_from_prompt else None,
        )


def _extract_image_url(data: dict[str, Any]) -> str:
    """Pull ``data[0].url`` out of an image generation body."""
    try:
        image_url = data["data"][0]["url"]
    except (KeyError, IndexError, TypeError) as e:
        raise BackendRejected(f"Unexpected image response format: {str(data)[:200]}") from e

    if not isinstance(image_url, str) or not image_url:
        raise BackendRejected("Image response contained no URL")
    return image_url
