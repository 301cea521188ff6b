"""Repository interfaces."""

from .comment import CommentSource

__all__ = ["CommentSource"]
