"""Coves AppView adapter."""

from .client import CovesCommentSource, MockCommentSource

__all__ = ["CovesCommentSource", "MockCommentSource"]
