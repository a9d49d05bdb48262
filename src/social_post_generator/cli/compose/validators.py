"""Compose-specific validators."""

from __future__ import annotations

from typing import Optional
from urllib.parse import urlparse

from ...content.validator import InputValidator
from ..core.types import Failure, Result, Success
from .params import ComposeParams, ShareParams


def validate_text(text: str, validator: InputValidator | None = None) -> Result[str]:
    """Validate post input text: non-empty and within the input limit."""
    validator = validator or InputValidator()

    if not text:
        return Failure(
            "Please enter some text first",
            {"hint": "Pass the post idea as the TEXT argument"},
        )

    if not validator.is_acceptable(text):
        return Failure(
            f"Text is too long: {len(text)} characters",
            {"hint": f"Keep the text under {validator.max_length} characters"},
        )

    return Success(text)


def validate_page_url(page_url: Optional[str]) -> Result[Optional[str]]:
    """Validate an optional page URL is an absolute http(s) URL."""
    if page_url is None:
        return Success(None)

    parsed = urlparse(page_url)
    if parsed.scheme not in ("http", "https"):
        return Failure(
            f"Invalid page URL: {page_url}",
            {"hint": "Page URL scheme must be http or https"},
        )
    if not parsed.netloc:
        return Failure(
            f"Invalid page URL: {page_url}",
            {"hint": "Page URL must include a host"},
        )

    return Success(page_url)


def validate_compose_params(params: ComposeParams) -> Result[ComposeParams]:
    """Validate all compose parameters.

    Returns Result with params if valid, or Failure with error.
    """
    text_result = validate_text(params.text)
    if isinstance(text_result, Failure):
        return text_result

    url_result = validate_page_url(params.page_url)
    if isinstance(url_result, Failure):
        return url_result

    if params.config_path is not None and not params.config_path.exists():
        return Failure(
            f"Config file not found: {params.config_path}",
            {"hint": "Omit --config to use config/generator.yaml"},
        )

    if params.edit is not None and params.interactive:
        return Failure(
            "--edit and --interactive cannot be combined",
            {"hint": "Use one way of editing the draft"},
        )

    return Success(params)


def validate_share_params(params: ShareParams) -> Result[ShareParams]:
    """Validate share parameters. Empty text is allowed."""
    url_result = validate_page_url(params.page_url)
    if isinstance(url_result, Failure):
        return url_result
    return Success(params)
