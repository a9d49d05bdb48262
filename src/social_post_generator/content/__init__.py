"""Content flow - input validation, drafts and the publish state machine."""

from .drafts import DraftStore
from .models import Artifact, Draft, Failed, GenerationRequest, GenerationResult, Ok
from .orchestrator import PublishOrchestrator
from .validator import InputField, InputValidator

__all__ = [
    "Artifact",
    "Draft",
    "DraftStore",
    "Failed",
    "GenerationRequest",
    "GenerationResult",
    "InputField",
    "InputValidator",
    "Ok",
    "PublishOrchestrator",
]
