"""Social Post Generator - turn a short idea into a shareable social post.

Usage:
    from social_post_generator import PublishOrchestrator

    orchestrator = PublishOrchestrator()
    result = await orchestrator.submit("Launching our new product today!")
    await orchestrator.commit()
    targets = orchestrator.share_targets("https://example.com")
"""

from .constants import GenerationKind, GenerationState, ShareAction, SharePlatform
from .content import (
    Artifact,
    DraftStore,
    Failed,
    GenerationRequest,
    InputField,
    InputValidator,
    Ok,
    PublishOrchestrator,
)
from .errors import (
    BackendRejected,
    BackendUnreachable,
    DraftStateError,
    GenerationError,
    PreconditionFailed,
    PublishError,
    SubmissionInFlightError,
    ValidationError,
)
from .providers.client import GenerationClient
from .providers.config import GeneratorConfig, load_generator_config
from .sharing import ShareLinkBuilder, ShareTarget

__version__ = "0.1.0"

__all__ = [
    "Artifact",
    "BackendRejected",
    "BackendUnreachable",
    "DraftStateError",
    "DraftStore",
    "Failed",
    "GenerationClient",
    "GenerationError",
    "GenerationKind",
    "GenerationRequest",
    "GenerationState",
    "GeneratorConfig",
    "InputField",
    "InputValidator",
    "Ok",
    "PreconditionFailed",
    "PublishError",
    "PublishOrchestrator",
    "ShareAction",
    "ShareLinkBuilder",
    "SharePlatform",
    "ShareTarget",
    "SubmissionInFlightError",
    "ValidationError",
    "load_generator_config",
]
