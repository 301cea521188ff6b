"""Thread sessions."""

from .cache import ThreadSessionCache
from .thread_session import ThreadSession

__all__ = ["ThreadSession", "ThreadSessionCache"]
