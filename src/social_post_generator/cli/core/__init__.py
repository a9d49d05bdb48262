"""Shared CLI utilities - console and result types."""

from .console import console
from .types import Failure, Result, Success

__all__ = [
    "console",
    "Failure",
    "Result",
    "Success",
]
