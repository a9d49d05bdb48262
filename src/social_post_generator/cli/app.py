"""Typer app configuration and logging setup."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import typer
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="social-post",
    help="AI-powered social media post generator",
    add_completion=False,
)


def register_commands() -> None:
    """Register all commands from feature modules."""
    from .compose.commands import count, generate, share

    app.command(name="generate")(generate)
    app.command(name="share")(share)
    app.command(name="count")(count)


def setup_logging(log_dir: Path | None = None) -> None:
    """Configure logging for CLI.

    - Suppresses console output from libraries
    - Sets up file logging for AI calls and the publish flow
    """
    if log_dir is None:
        log_dir = Path(os.getenv("SOCIAL_POST_LOG_DIR", "logs"))
    log_dir.mkdir(parents=True, exist_ok=True)

    # Remove any default console handlers from root logger
    root_logger = logging.getLogger()
    root_logger.handlers = []
    root_logger.setLevel(logging.CRITICAL)

    # Suppress loggers that might print to console
    for logger_name in ["httpx", "httpcore", "asyncio"]:
        logger = logging.getLogger(logger_name)
        logger.setLevel(logging.WARNING)
        logger.propagate = False

    formatter = logging.Formatter("%(asctime)s | %(levelname)s | %(message)s")

    # ai_calls gets full request/response logging
    ai_calls_logger = logging.getLogger("ai_calls")
    ai_calls_logger.setLevel(logging.DEBUG)
    ai_calls_logger.propagate = False
    ai_calls_logger.handlers = []
    ai_file_handler = logging.FileHandler(log_dir / "ai_calls.log", encoding="utf-8")
    ai_file_handler.setLevel(logging.DEBUG)
    ai_file_handler.setFormatter(formatter)
    ai_calls_logger.addHandler(ai_file_handler)

    # publish_flow records state transitions
    flow_logger = logging.getLogger("publish_flow")
    flow_logger.setLevel(logging.INFO)
    flow_logger.propagate = False
    flow_logger.handlers = []
    flow_file_handler = logging.FileHandler(log_dir / "publish_flow.log", encoding="utf-8")
    flow_file_handler.setFormatter(formatter)
    flow_logger.addHandler(flow_file_handler)


# Register all commands
register_commands()


def main() -> None:
    """CLI entry point."""
    setup_logging()
    app()
