"""Compose CLI commands - thin wrappers orchestrating params, validation, display, and service."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

import typer

from ...content import InputValidator
from ...sharing import ShareLinkBuilder
from ..core.console import console
from ..core.types import Failure
from .display import (
    show_compose_config,
    show_compose_error,
    show_count,
    show_draft,
    show_share_targets,
)
from .params import ComposeParams, ShareParams
from .service import ComposeService
from .validators import validate_compose_params, validate_share_params


def generate(
    text: str = typer.Argument(..., help="Post idea (up to 280 characters)"),
    image: bool = typer.Option(False, "--image", help="Generate an image instead of rewriting the text"),
    edit: Optional[str] = typer.Option(None, "--edit", "-e", help="Replace the generated text before sharing"),
    interactive: bool = typer.Option(False, "--interactive", "-i", help="Edit the generated text in a prompt"),
    page_url: Optional[str] = typer.Option(None, "--page-url", "-u", help="Page URL to attach to share links"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to generator YAML config"),
) -> None:
    """Generate a post, optionally edit it, then print share links."""
    params = ComposeParams.from_cli(
        text=text,
        image=image,
        edit=edit,
        interactive=interactive,
        page_url=page_url,
        config=config,
    )

    validation = validate_compose_params(params)
    if isinstance(validation, Failure):
        show_compose_error(console, validation.error, validation.details)
        raise typer.Exit(1)

    show_compose_config(console, params)

    service = ComposeService(console=console)
    result = asyncio.run(service.generate(params))
    if isinstance(result, Failure):
        show_compose_error(console, result.error, result.details)
        raise typer.Exit(1)

    orchestrator = result.value
    show_draft(console, orchestrator.store)

    new_text = params.edit
    if params.interactive:
        new_text = typer.prompt("Edit post", default=orchestrator.store.editable or "")
    if new_text is not None:
        orchestrator.edit(new_text)

    committed = asyncio.run(orchestrator.commit())
    show_share_targets(console, orchestrator.share_targets(params.page_url), committed)


def share(
    text: str = typer.Argument("", help="Post text to share"),
    page_url: Optional[str] = typer.Option(None, "--page-url", "-u", help="Page URL to attach to share links"),
) -> None:
    """Print share links for ready-made text without generating."""
    params = ShareParams.from_cli(text=text, page_url=page_url)

    validation = validate_share_params(params)
    if isinstance(validation, Failure):
        show_compose_error(console, validation.error, validation.details)
        raise typer.Exit(1)

    show_share_targets(console, ShareLinkBuilder.build(params.text, params.page_url), params.text)


def count(
    text: str = typer.Argument(..., help="Text to measure"),
) -> None:
    """Show the length of TEXT against the input limit."""
    validator = InputValidator()
    show_count(console, text, validator)
    if not validator.is_acceptable(text):
        raise typer.Exit(1)
