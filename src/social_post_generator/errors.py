"""Exception hierarchy for the generate-and-publish flow.

Every error here is recoverable: the user may fix the input or resubmit.
Generation errors are never raised out of GenerationClient; they travel back
inside a ``Failed`` result and surface at the orchestrator boundary.
"""

from __future__ import annotations


class PublishError(Exception):
    """Base exception for the generate-and-publish flow."""

    user_message: str = "Something went wrong. Please try again."
    retryable: bool = True

    def __init__(self, message: str, user_message: str | None = None):
        super().__init__(message)
        if user_message is not None:
            self.user_message = user_message


class ValidationError(PublishError):
    """Input rejected at submission time (empty or too long)."""

    user_message = "Please enter some text first"


class SubmissionInFlightError(PublishError):
    """A submit arrived while another request was still in flight."""

    user_message = "A post is already being generated. Please wait."


class DraftStateError(PublishError):
    """Draft operation attempted with no generated artifact."""

    user_message = "Generate a post before editing or publishing."


# =============================================================================
# Generation errors
# =============================================================================


class GenerationError(PublishError):
    """Base exception for generation backend failures."""

    user_message = "Failed to generate content. Please try again later."


class PreconditionFailed(GenerationError):
    """Request blocked before transport (missing credential, empty prompt)."""


class BackendUnreachable(GenerationError):
    """Transport-level failure, including timeouts."""


class BackendRejected(GenerationError):
    """Backend answered with a non-success status or a malformed payload."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        user_message: str | None = None,
    ):
        super().__init__(message, user_message=user_message)
        self.status_code = status_code
