"""Domain value objects for Coves."""

from coves.domain.value.identifiers import CommentId, PostUri
from coves.domain.value.types import CommentSort, Handle, Timeframe

__all__ = [
    # Identifiers
    "CommentId",
    "PostUri",
    # Types
    "CommentSort",
    "Handle",
    "Timeframe",
]
