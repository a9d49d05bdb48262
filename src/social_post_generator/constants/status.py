"""Status enums and state constants for the Social Post Generator.

This module contains all status enums and state definitions:
- Generation state machine states
- Generation backend kinds
- Share platforms and share actions

AI CONTEXT:
-----------
GenerationState is the state machine driven by PublishOrchestrator:
  IDLE -> IN_FLIGHT -> SUCCEEDED
                    -> FAILED
SUCCEEDED and FAILED both return to IDLE on the next submit.

MODIFICATION GUIDE:
------------------
- Add new enum values at the END to maintain ordering of share targets
- Each enum should have a human-readable description
- Use .value for string representation when needed
"""

from enum import Enum


# =============================================================================
# GENERATION STATE
# =============================================================================

class GenerationState(str, Enum):
    """State of the generate-and-publish cycle.

    Workflow:
        IDLE -> IN_FLIGHT -> SUCCEEDED -> (submit) -> IDLE -> ...
                    |
                    v
                  FAILED -> (submit) -> IDLE -> ...
    """

    IDLE = "idle"
    """No request issued, or waiting for the next submit."""

    IN_FLIGHT = "in_flight"
    """A generation request is awaiting its result."""

    SUCCEEDED = "succeeded"
    """The last request produced an artifact; the draft is editable."""

    FAILED = "failed"
    """The last request failed; the draft was left untouched."""


# =============================================================================
# GENERATION KIND
# =============================================================================

class GenerationKind(str, Enum):
    """Backend variant that serves a generation request."""

    TEXT_REWRITE = "text_rewrite"
    """Rewrite the input into an extended, engagement-oriented post."""

    IMAGE_SYNTHESIS = "image_synthesis"
    """Synthesize an image from the input and return its URL."""


# =============================================================================
# SHARING
# =============================================================================

class SharePlatform(str, Enum):
    """Supported share destinations, in display order."""

    TWITTER = "twitter"
    LINKEDIN = "linkedin"
    FACEBOOK = "facebook"
    INSTAGRAM = "instagram"


class ShareAction(str, Enum):
    """How a share target is performed."""

    LINK = "link"
    """Open the deep link in a browser."""

    MANUAL_COPY = "manual_copy"
    """No URL sharing exists; the user copies the text into the native app."""


# Display labels used by front ends
SHARE_LABELS: dict[SharePlatform, str] = {
    SharePlatform.TWITTER: "Tweet",
    SharePlatform.LINKEDIN: "Share",
    SharePlatform.FACEBOOK: "Post",
    SharePlatform.INSTAGRAM: "Copy for Instagram",
}
