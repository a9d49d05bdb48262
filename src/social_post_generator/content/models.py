"""Data models for the generate-and-publish flow."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from pydantic import BaseModel, Field

from ..constants import GenerationKind
from ..errors import GenerationError
from ..providers.config import BackendConfig


class Artifact(BaseModel):
    """Output of one successful generation cycle."""

    model_config = {"frozen": True}

    kind: GenerationKind
    text: str | None = None
    image_url: str | None = None
    caption: str | None = None

    @property
    def editable_text(self) -> str | None:
        """Text the user may edit: the rewrite, or the image caption."""
        if self.kind == GenerationKind.IMAGE_SYNTHESIS:
            return self.caption
        return self.text


class Draft(BaseModel):
    """Generated and user-edited content for one generation cycle."""

    raw_input: str = ""
    generated: Artifact | None = None
    editable: str | None = None
    artifact_ref: str | None = None
    committed: str | None = None


class GenerationRequest(BaseModel):
    """A single generation request. Created on submit, discarded on resolve."""

    model_config = {"frozen": True}

    prompt: str
    kind: GenerationKind
    backend_config: BackendConfig = Field(repr=False)


@dataclass(frozen=True)
class Ok:
    """Successful generation containing an artifact."""

    artifact: Artifact

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False


@dataclass(frozen=True)
class Failed:
    """Failed generation containing the reason."""

    reason: GenerationError

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    @property
    def error(self) -> str:
        return str(self.reason)


# Result type - either Ok or Failed
GenerationResult = Union[Ok, Failed]
