"""Generation providers - configuration and backend interface.

Backends and the client live in their own modules:
    from social_post_generator.providers.client import GenerationClient
    from social_post_generator.providers.text import TextRewriteBackend
    from social_post_generator.providers.image import ImageSynthesisBackend
"""

from .base import GenerationBackend
from .config import (
    BackendConfig,
    GeneratorConfig,
    ImageBackendConfig,
    SharingConfig,
    TextBackendConfig,
    load_generator_config,
)

__all__ = [
    "GenerationBackend",
    "BackendConfig",
    "GeneratorConfig",
    "ImageBackendConfig",
    "SharingConfig",
    "TextBackendConfig",
    "load_generator_config",
]
