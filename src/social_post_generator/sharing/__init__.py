"""Share target construction for the supported social platforms."""

from .links import ShareLinkBuilder, encode_component
from .models import ShareTarget

__all__ = [
    "ShareLinkBuilder",
    "ShareTarget",
    "encode_component",
]
