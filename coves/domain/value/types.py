"""Domain value objects for Coves comment threads."""

from enum import Enum

from pydantic import field_validator

from coves.domain.value.common import RootValueObject


class CommentSort(str, Enum):
    """Server-side ordering of sibling comments.

    Applied once at fetch time; the view-model never re-sorts locally.
    """

    HOT = "hot"
    TOP = "top"
    NEW = "new"


class Timeframe(str, Enum):
    """Time window for the ``top`` sort."""

    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"
    ALL = "all"


class Handle(RootValueObject[str]):
    """atProto handle of a comment author (e.g. ``alice.bsky.social``)."""

    @field_validator("root")
    @classmethod
    def validate_handle_format(cls, v: str) -> str:
        """Validate handle is not empty and within length limits."""
        v = v.lstrip("@")
        if len(v) < 1 or len(v) > 253:
            raise ValueError("Handle must be 1-253 characters")
        return v
