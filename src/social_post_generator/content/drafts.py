"""Draft store holding the generated artifact and its editable copy."""

from __future__ import annotations

import logging

from ..errors import DraftStateError
from .models import Artifact, Draft

_logger = logging.getLogger("publish_flow")


class DraftStore:
    """Holds at most one Draft. No history, no undo.

    ``generated`` is replaced wholesale by each generation cycle. ``editable``
    starts as a copy of the generated text and only changes through ``edit``.
    Consumers downstream (share links, display) read ``committed_text`` only,
    so half-typed edits are never shared.

    Usage:
        store = DraftStore()
        store.set_generated(artifact)
        store.edit("Tweaked text")
        store.commit()
        store.committed_text  # "Tweaked text"
    """

    def __init__(self) -> None:
        self._draft = Draft()

    @property
    def draft(self) -> Draft:
        """Snapshot of the current draft."""
        return self._draft.model_copy()

    @property
    def generated(self) -> Artifact | None:
        return self._draft.generated

    @property
    def editable(self) -> str | None:
        return self._draft.editable

    @property
    def artifact_ref(self) -> str | None:
        return self._draft.artifact_ref

    @property
    def has_artifact(self) -> bool:
        return self._draft.generated is not None

    @property
    def committed_text(self) -> str:
        """Value exposed downstream.

        The last committed value, or the generated text if nothing has been
        committed in this cycle, or an empty string before any generation.
        """
        if self._draft.committed is not None:
            return self._draft.committed
        if self._draft.generated is not None:
            return self._draft.generated.editable_text or ""
        return ""

    @property
    def has_uncommitted_edits(self) -> bool:
        return self.has_artifact and (self._draft.editable or "") != self.committed_text

    def set_generated(self, artifact: Artifact, raw_input: str = "") -> None:
        """Start a new cycle from ``artifact``, discarding the previous draft."""
        self._draft = Draft(
            raw_input=raw_input,
            generated=artifact,
            editable=artifact.editable_text,
            artifact_ref=artifact.image_url,
        )
        _logger.debug(f"Draft replaced | kind:{artifact.kind.value} | ref:{artifact.image_url}")

    def edit(self, new_text: str) -> None:
        """Change the working copy. ``generated`` is never touched."""
        if not self.has_artifact:
            raise DraftStateError("No generated artifact to edit")
        self._draft.editable = new_text

    def commit(self) -> str:
        """Expose the working copy downstream and return it.

        The working copy is kept as is, so editing can continue after a commit.
        """
        if not self.has_artifact:
            raise DraftStateError("No generated artifact to commit")
        self._draft.committed = self._draft.editable or ""
        _logger.debug(f"Draft committed | length:{len(self._draft.committed)}")
        return self._draft.committed

    def clear(self) -> None:
        self._draft = Draft()
