"""Immutable parameter dataclasses for compose commands."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ...constants import GenerationKind


@dataclass(frozen=True)
class ComposeParams:
    """Immutable parameters for one generate-edit-share cycle."""

    text: str
    kind: GenerationKind
    edit: Optional[str]
    interactive: bool
    page_url: Optional[str]
    config_path: Optional[Path]

    @classmethod
    def from_cli(
        cls,
        text: str,
        image: bool = False,
        edit: Optional[str] = None,
        interactive: bool = False,
        page_url: Optional[str] = None,
        config: Optional[Path] = None,
        **kwargs,
    ) -> "ComposeParams":
        """Create from CLI arguments with parsing and defaults."""
        kind = GenerationKind.IMAGE_SYNTHESIS if image else GenerationKind.TEXT_REWRITE
        return cls(
            text=text,
            kind=kind,
            edit=edit,
            interactive=interactive,
            page_url=page_url.strip() if page_url else None,
            config_path=Path(config) if config else None,
        )


@dataclass(frozen=True)
class ShareParams:
    """Immutable parameters for building share links from ready text."""

    text: str
    page_url: Optional[str]

    @classmethod
    def from_cli(cls, text: str, page_url: Optional[str] = None, **kwargs) -> "ShareParams":
        return cls(text=text, page_url=page_url.strip() if page_url else None)
