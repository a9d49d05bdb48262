"""Compose service - runs a generation cycle and returns a Result."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from rich.console import Console

from ...content import PublishOrchestrator
from ...content.models import Failed
from ...errors import PublishError
from ...providers.config import GeneratorConfig, load_generator_config
from ..core.types import Failure, Result, Success
from .params import ComposeParams

if TYPE_CHECKING:
    from ...providers.client import GenerationClient

_logger = logging.getLogger("publish_flow")

# Notification styles by event type
_EVENT_STYLES = {
    "generation_started": "dim",
    "generation_succeeded": "green",
    "generation_failed": "red",
    "validation_error": "red",
    "draft_committed": "green",
}


class ComposeService:
    """Wraps PublishOrchestrator for the CLI.

    Notifications from the orchestrator are printed as one-line toasts.
    """

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        console: Console | None = None,
        client: "GenerationClient | None" = None,
    ):
        self.config = config
        self.console = console
        self.client = client
        self.orchestrator: PublishOrchestrator | None = None

    async def _notify(self, event: dict[str, Any]) -> None:
        if self.console is None:
            return
        if event.get("type") == "generation_started":
            self.console.print(f"[dim]Generating ({event.get('kind')})...[/dim]")
            return
        message = event.get("message")
        if message:
            style = _EVENT_STYLES.get(event.get("type", ""), "cyan")
            self.console.print(f"[{style}]{message}[/{style}]")

    def get_orchestrator(self, params: ComposeParams) -> PublishOrchestrator:
        if self.orchestrator is None:
            config = self.config or load_generator_config(params.config_path)
            self.orchestrator = PublishOrchestrator(
                client=self.client,
                config=config,
                event_callback=self._notify,
            )
        return self.orchestrator

    async def generate(self, params: ComposeParams) -> Result[PublishOrchestrator]:
        """Run one generation cycle.

        Returns Success with the orchestrator (state SUCCEEDED), or Failure.
        """
        orchestrator = self.get_orchestrator(params)

        try:
            result = await orchestrator.submit(params.text, kind=params.kind)
        except PublishError as e:
            _logger.info(f"Compose refused | {type(e).__name__}: {e}")
            return Failure.from_error(e)

        if isinstance(result, Failed):
            return Failure.from_error(result.reason)

        return Success(orchestrator)
