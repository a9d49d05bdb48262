"""Command line interface - Typer app with Rich output.

This package provides a clean separation of concerns:
- core/: Shared utilities (console, Result types)
- compose/: Generate, edit and share commands

Usage:
    social-post generate "Launching our new product today!"
    social-post share "Ready-made text" --page-url https://example.com
"""

from .app import app, main

__all__ = ["app", "main"]
