"""Share target models."""

from __future__ import annotations

from dataclasses import dataclass

from ..constants import SHARE_LABELS, ShareAction, SharePlatform


@dataclass(frozen=True)
class ShareTarget:
    """A platform destination: a deep link, or a manual-copy instruction."""

    platform: SharePlatform
    action: ShareAction
    text: str
    url: str | None = None
    instruction: str | None = None

    @property
    def label(self) -> str:
        return SHARE_LABELS.get(self.platform, self.platform.value.title())

    @property
    def is_link(self) -> bool:
        return self.action == ShareAction.LINK

    def __str__(self) -> str:
        if self.is_link:
            return f"[{self.platform.value}] {self.url}"
        return f"[{self.platform.value}] {self.instruction}"
