"""Global constants package for the Social Post Generator.

PACKAGE STRUCTURE:
-----------------
- limits.py   : Input limits, backend sampling settings, timeouts
- status.py   : State machine states, backend kinds, share platforms

USAGE EXAMPLES:
--------------
    from social_post_generator.constants import INPUT_MAX_LENGTH
    from social_post_generator.constants import GenerationState, SharePlatform
"""

# =============================================================================
# LIMIT CONSTANTS
# =============================================================================
from .limits import (
    # Input
    INPUT_MAX_LENGTH,
    # Text backend
    TEXT_TEMPERATURE,
    TEXT_MAX_TOKENS,
    TEXT_DEFAULT_MODEL,
    TEXT_DEFAULT_BASE_URL,
    TEXT_SYSTEM_PROMPT,
    # Image backend
    IMAGE_SIZE,
    IMAGE_DEFAULT_MODEL,
    IMAGE_DEFAULT_BASE_URL,
    IMAGE_API_KEY_ENV,
    # Timeouts
    TIMEOUT_TEXT_SECONDS,
    TIMEOUT_IMAGE_SECONDS,
    TIMEOUT_HTTP_CONNECT,
)

# =============================================================================
# STATUS ENUMS
# =============================================================================
from .status import (
    GenerationState,
    GenerationKind,
    SharePlatform,
    ShareAction,
    SHARE_LABELS,
)

__all__ = [
    "INPUT_MAX_LENGTH",
    "TEXT_TEMPERATURE",
    "TEXT_MAX_TOKENS",
    "TEXT_DEFAULT_MODEL",
    "TEXT_DEFAULT_BASE_URL",
    "TEXT_SYSTEM_PROMPT",
    "IMAGE_SIZE",
    "IMAGE_DEFAULT_MODEL",
    "IMAGE_DEFAULT_BASE_URL",
    "IMAGE_API_KEY_ENV",
    "TIMEOUT_TEXT_SECONDS",
    "TIMEOUT_IMAGE_SECONDS",
    "TIMEOUT_HTTP_CONNECT",
    "GenerationState",
    "GenerationKind",
    "SharePlatform",
    "ShareAction",
    "SHARE_LABELS",
]
