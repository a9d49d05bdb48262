"""Core types for CLI - Success / Failure results shown by the commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from ...errors import PublishError

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """A step that produced a value the next step can use."""

    value: T

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False


@dataclass(frozen=True)
class Failure:
    """A step that stopped the command.

    ``error`` is the line shown to the user; ``details`` are printed below it
    as ``key: value`` pairs.
    """

    error: str
    details: dict[str, Any] | None = None

    @classmethod
    def from_error(cls, error: PublishError) -> "Failure":
        """Build from a flow error: its user message plus type, reason and HTTP status."""
        details: dict[str, Any] = {"type": type(error).__name__, "reason": str(error)}
        status_code = getattr(error, "status_code", None)
        if status_code is not None:
            details["status"] = status_code
        return cls(error.user_message, details)

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True


# Result type - either Success[T] or Failure
Result = Union[Success[T], Failure]
