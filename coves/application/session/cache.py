"""LRU cache of thread sessions, one per post.

Keeps recently viewed threads in memory so navigating back to a post shows
its comments and scroll context instantly.
"""

from collections import OrderedDict
from typing import Callable

import logfire

from coves.application.session.thread_session import ThreadSession
from coves.domain.value import PostUri


class ThreadSessionCache:
    """Sessions keyed by post URI with least-recently-used eviction.

    Screens that hold a session call :meth:`acquire` and later
    :meth:`release`. Acquired sessions are pinned and never evicted, so the
    cache may temporarily hold more than ``max_size`` sessions.
    """

    def __init__(
        self,
        session_factory: Callable[[PostUri], ThreadSession],
        max_size: int = 15,
    ) -> None:
        """Initialize session cache.

        Args:
            session_factory: Creates a session for a post URI
            max_size: Number of sessions kept before evicting
        """
        self.session_factory = session_factory
        self.max_size = max_size
        # Most recently used at the end
        self._sessions: OrderedDict[str, ThreadSession] = OrderedDict()
        self._ref_counts: dict[str, int] = {}
        self._was_authenticated = False

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, post_uri: object) -> bool:
        return post_uri in self._sessions

    def acquire(self, post_uri: PostUri) -> ThreadSession:
        """Get or create the session for a post and pin it."""
        session = self._get_or_create(post_uri)
        self._ref_counts[post_uri] = self._ref_counts.get(post_uri, 0) + 1
        return session

    def release(self, post_uri: PostUri) -> None:
        """Unpin a session acquired earlier, making it evictable."""
        current = self._ref_counts.get(post_uri)
        if current is None:
            return

        if current <= 1:
            del self._ref_counts[post_uri]
        else:
            self._ref_counts[post_uri] = current - 1

        self._evict()

    def peek(self, post_uri: PostUri) -> ThreadSession | None:
        """Return a cached session without creating or touching it."""
        return self._sessions.get(post_uri)

    def remove(self, post_uri: PostUri) -> None:
        """Drop a session, pinned or not (e.g. after the post was deleted)."""
        self._sessions.pop(post_uri, None)
        self._ref_counts.pop(post_uri, None)

    def clear(self) -> None:
        """Drop every session."""
        logfire.info("Thread session cache cleared", count=len(self._sessions))
        self._sessions.clear()
        self._ref_counts.clear()

    def on_auth_changed(self, is_authenticated: bool) -> None:
        """Clear all sessions when the user signs out.

        Cached threads carry per-user state (votes, collapse choices) that
        must not leak into the next account.
        """
        if self._was_authenticated and not is_authenticated:
            self.clear()
        self._was_authenticated = is_authenticated

    def _get_or_create(self, post_uri: PostUri) -> ThreadSession:
        session = self._sessions.get(post_uri)
        if session is not None:
            self._sessions.move_to_end(post_uri)
            logfire.debug("Thread session cache hit", post_uri=post_uri)
            return session

        # Make room for the new session
        self._evict(reserve=1)

        session = self.session_factory(post_uri)
        self._sessions[post_uri] = session
        logfire.debug(
            "Thread session cache miss",
            post_uri=post_uri,
            size=len(self._sessions),
            max_size=self.max_size,
        )
        return session

    def _evict(self, reserve: int = 0) -> None:
        target = self.max_size - reserve
        while len(self._sessions) > target:
            oldest = next(
                (key for key in self._sessions if not self._ref_counts.get(key)),
                None,
            )
            if oldest is None:
                # Everything left is pinned
                break
            del self._sessions[oldest]
            logfire.debug("Thread session evicted", post_uri=oldest)
