"""Limit constants for the Social Post Generator.

This module contains all limits and constraints:
- Input length limits
- Text and image backend sampling settings
- Timeout settings

AI CONTEXT:
-----------
The input limit follows the Twitter/X post length, which is the tightest of
the supported share targets. Sampling settings are fixed configuration
constants and are never exposed to the end user.

MODIFICATION GUIDE:
------------------
- INPUT_* limits: The input field and the submit gate both read these
- TEXT_* settings: Changing them changes every rewrite request
- IMAGE_* settings: Check the image backend documentation before changing
"""

from typing import Final

# =============================================================================
# INPUT LIMITS
# =============================================================================

INPUT_MAX_LENGTH: Final[int] = 280
"""Maximum user input length in characters (Twitter/X post length)."""


# =============================================================================
# TEXT REWRITE BACKEND
# =============================================================================

TEXT_TEMPERATURE: Final[float] = 0.7
"""Sampling temperature for the rewrite backend (creativity level)."""

TEXT_MAX_TOKENS: Final[int] = 500
"""Output token budget for a single rewrite."""

TEXT_DEFAULT_MODEL: Final[str] = "gpt-3.5-turbo"
"""Chat completion model used for rewrites."""

TEXT_DEFAULT_BASE_URL: Final[str] = "https://free.churchless.tech/v1"
"""OpenAI-compatible endpoint serving chat completions."""

TEXT_SYSTEM_PROMPT: Final[str] = (
    "You are a social media content writer. Take the user's input and create an "
    "engaging, extended post that maintains the original message while being more "
    "engaging. Keep it concise and appropriate for social media."
)
"""Fixed role and tone instruction sent with every rewrite."""


# =============================================================================
# IMAGE SYNTHESIS BACKEND
# =============================================================================

IMAGE_SIZE: Final[str] = "1024x1024"
"""Fixed square resolution requested from the image backend."""

IMAGE_DEFAULT_MODEL: Final[str] = "dall-e-3"
"""Image model identifier."""

IMAGE_DEFAULT_BASE_URL: Final[str] = "https://api.openai.com/v1"
"""OpenAI-compatible endpoint serving image generations."""

IMAGE_API_KEY_ENV: Final[str] = "OPENAI_API_KEY"
"""Environment variable holding the image backend credential."""


# =============================================================================
# TIMEOUTS
# =============================================================================

TIMEOUT_TEXT_SECONDS: Final[float] = 60.0
"""Transport timeout for a rewrite request."""

TIMEOUT_IMAGE_SECONDS: Final[float] = 90.0
"""Transport timeout for an image request (image models are slower)."""

TIMEOUT_HTTP_CONNECT: Final[float] = 10.0
"""HTTP connection timeout in seconds."""
