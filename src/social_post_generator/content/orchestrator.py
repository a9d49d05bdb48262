"""Publish orchestrator - the generate, edit and share state machine.

This is the main entry point for turning a short input into a shareable
post. It wires the input field, the generation client, the draft store and
the share link builder together, and owns the GenerationState.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Awaitable, Callable

from ..constants import GenerationKind, GenerationState
from ..errors import DraftStateError, SubmissionInFlightError, ValidationError
from ..providers.config import GeneratorConfig, load_generator_config
from ..sharing import ShareLinkBuilder, ShareTarget
from .drafts import DraftStore
from .models import Draft, Failed, GenerationRequest, GenerationResult, Ok
from .validator import InputField

if TYPE_CHECKING:
    from ..providers.client import GenerationClient

_logger = logging.getLogger("publish_flow")

# Type for user-facing notification callback
EventCallback = Callable[[dict[str, Any]], Awaitable[None]] | None


class PublishOrchestrator:
    """Drives one draft through generate, edit, commit and share.

    States:
        IDLE --submit--> IN_FLIGHT --Ok--> SUCCEEDED
                                   --Failed--> FAILED
        SUCCEEDED / FAILED --submit--> IDLE --> ...

    Only one request is ever in flight. A submit while IN_FLIGHT is refused
    outright, so a stale result can never be applied. Failures leave the
    draft untouched; nothing is retried automatically.

    Usage:
        orchestrator = PublishOrchestrator(config=config)
        orchestrator.type("Launching our new product today!")
        result = await orchestrator.submit()
        if result.is_success():
            orchestrator.edit("Launching today! Come say hi.")
            await orchestrator.commit()
            targets = orchestrator.share_targets("https://example.com")
    """

    def __init__(
        self,
        client: "GenerationClient | None" = None,
        config: GeneratorConfig | None = None,
        store: DraftStore | None = None,
        input_field: InputField | None = None,
        event_callback: EventCallback = None,
    ):
        """Initialize the orchestrator.

        Args:
            client: Generation client (created if not provided).
            config: Generator configuration. If None, loads from default config file.
            store: Draft store (created if not provided).
            input_field: Bounded input field (created if not provided).
            event_callback: Optional callback receiving user-facing notifications.
        """
        self.config = config or load_generator_config()

        if client is None:
            from ..providers.client import GenerationClient
            client = GenerationClient()
        self.client = client

        self.store = store or DraftStore()
        self.input = input_field or InputField()
        self._event_callback = event_callback
        self._state = GenerationState.IDLE
        self._last_error: BaseException | None = None

    async def _emit_event(self, event: dict[str, Any]) -> None:
        """Emit a notification if callback is set."""
        if self._event_callback:
            await self._event_callback(event)

    # =========================================================================
    # State
    # =========================================================================

    @property
    def state(self) -> GenerationState:
        return self._state

    @property
    def last_error(self) -> BaseException | None:
        """Reason of the last failed submit, cleared by the next submit."""
        return self._last_error

    @property
    def can_submit(self) -> bool:
        """Whether the submit action should be enabled."""
        return self._state != GenerationState.IN_FLIGHT and bool(self.input.value)

    @property
    def draft(self) -> Draft:
        """Snapshot of the current draft."""
        return self.store.draft

    @property
    def committed_text(self) -> str:
        return self.store.committed_text

    # =========================================================================
    # Input
    # =========================================================================

    def type(self, text: str) -> bool:
        """Route an edit of the input field. Returns False if it was refused."""
        return self.input.update(text)

    # =========================================================================
    # Generation
    # =========================================================================

    async def submit(
        self,
        text: str | None = None,
        kind: GenerationKind | str | None = None,
    ) -> GenerationResult:
        """Start a generation cycle and wait for it to resolve.

        Args:
            text: Prompt text. Defaults to the input field value.
            kind: Backend variant. Defaults to the configured default kind.

        Returns:
            Ok with the artifact (now in the draft store), or Failed.

        Raises:
            SubmissionInFlightError: Another request is still in flight.
            ValidationError: The text is empty or longer than the input limit.
        """
        if self._state == GenerationState.IN_FLIGHT:
            _logger.info("Submit refused: request already in flight")
            raise SubmissionInFlightError("A generation request is already in flight")

        prompt = self.input.value if text is None else text
        kind = GenerationKind(kind) if kind is not None else self.config.default_kind

        self._state = GenerationState.IDLE
        self._last_error = None

        if not prompt:
            error = ValidationError("Input text is empty")
            await self._emit_event({"type": "validation_error", "message": error.user_message})
            raise error

        if not self.input.validator.is_acceptable(prompt):
            limit = self.input.validator.max_length
            error = ValidationError(
                f"Input text is {len(prompt)} characters, limit is {limit}",
                user_message=f"Please keep your text under {limit} characters",
            )
            await self._emit_event({"type": "validation_error", "message": error.user_message})
            raise error

        request = GenerationRequest(
            prompt=prompt,
            kind=kind,
            backend_config=self.config.to_backend_config(kind),
        )

        self._state = GenerationState.IN_FLIGHT
        _logger.info(f"Generation started | kind:{kind.value} | length:{len(prompt)}")

        try:
            await self._emit_event({"type": "generation_started", "kind": kind.value})
            result = await self.client.generate(request)
        except BaseException as e:
            self._state = GenerationState.FAILED
            self._last_error = e
            _logger.warning(f"Generation aborted | kind:{kind.value} | {type(e).__name__}: {e}")
            raise

        if isinstance(result, Ok):
            self.store.set_generated(result.artifact, raw_input=prompt)
            self._state = GenerationState.SUCCEEDED
            _logger.info(f"Generation succeeded | kind:{kind.value}")
            await self._emit_event({
                "type": "generation_succeeded",
                "kind": kind.value,
                "message": "Content generated successfully!",
            })
        elif isinstance(result, Failed):
            self._state = GenerationState.FAILED
            self._last_error = result.reason
            _logger.warning(
                f"Generation failed | kind:{kind.value} | "
                f"{type(result.reason).__name__}: {result.reason}"
            )
            await self._emit_event({
                "type": "generation_failed",
                "kind": kind.value,
                "error_type": type(result.reason).__name__,
                "message": result.reason.user_message,
            })

        return result

    # =========================================================================
    # Draft
    # =========================================================================

    def _require_succeeded(self, action: str) -> None:
        if self._state != GenerationState.SUCCEEDED:
            raise DraftStateError(f"Cannot {action} in state {self._state.value}")

    def edit(self, text: str) -> None:
        """Change the editable draft. Only allowed after a successful generation."""
        self._require_succeeded("edit")
        self.store.edit(text)

    async def commit(self) -> str:
        """Make the edited draft the shared value and return it."""
        self._require_succeeded("commit")
        committed = self.store.commit()
        await self._emit_event({"type": "draft_committed", "message": "Content ready to share!"})
        return committed

    # =========================================================================
    # Sharing
    # =========================================================================

    def share_targets(self, page_url: str | None = None) -> list[ShareTarget]:
        """Share targets for the committed value.

        Args:
            page_url: Page to attach. Defaults to the configured page URL.
        """
        return ShareLinkBuilder.build(
            self.store.committed_text,
            page_url or self.config.sharing.page_url,
        )
