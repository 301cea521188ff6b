"""Comment source interface."""

from abc import ABC, abstractmethod

from coves.domain.model import CommentPage
from coves.domain.value import CommentSort, PostUri, Timeframe


class CommentSource(ABC):
    """Source of comment threads for a post.

    Implementations live in the adapter layer and talk to the Coves AppView.
    """

    @abstractmethod
    async def find_by_post(
        self,
        post_uri: PostUri,
        sort: CommentSort = CommentSort.HOT,
        timeframe: Timeframe | None = None,
        depth: int = 10,
        limit: int = 50,
        cursor: str | None = None,
    ) -> CommentPage:
        """Fetch one page of top-level comment threads for a post.

        Threads are returned in server sort order, with replies nested up to
        ``depth`` levels.

        Args:
            post_uri: AT-URI of the post
            sort: Sibling ordering applied by the server
            timeframe: Time window for the ``top`` sort
            depth: Maximum reply nesting included in the response
            limit: Number of top-level comments per page
            cursor: Pagination cursor from the previous page

        Returns:
            Page of comment threads with the cursor for the next page
        """
        pass
