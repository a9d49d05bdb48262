"""Compose commands - generate, edit and share a post."""

from .commands import count, generate, share

__all__ = ["count", "generate", "share"]
