"""Coves AppView comment source.

Fetches threaded comments from
``GET /xrpc/social.coves.community.comment.getComments``.
"""

import httpx
import logfire
from pydantic import ValidationError as PydanticValidationError

from coves.adapter.coves.mapper import CommentsResponse
from coves.adapter.error import (
    AuthenticationError,
    CommentSourceError,
    NetworkError,
    ServerError,
)
from coves.domain.error import NotFoundError
from coves.domain.model import CommentNode, CommentPage
from coves.domain.repository import CommentSource
from coves.domain.value import CommentSort, PostUri, Timeframe

GET_COMMENTS_PATH = "/xrpc/social.coves.community.comment.getComments"


class CovesCommentSource(CommentSource):
    """Comment source backed by the Coves AppView over HTTP."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        auth_token: str | None = None,
    ) -> None:
        """Initialize AppView comment source.

        Args:
            base_url: AppView base URL (e.g. https://coves.social)
            timeout: Request timeout in seconds
            auth_token: Bearer token sent with every request, if any
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.auth_token = auth_token

    async def find_by_post(
        self,
        post_uri: PostUri,
        sort: CommentSort = CommentSort.HOT,
        timeframe: Timeframe | None = None,
        depth: int = 10,
        limit: int = 50,
        cursor: str | None = None,
    ) -> CommentPage:
        """Fetch one page of comment threads.

        Raises:
            AuthenticationError: On 401
            NotFoundError: On 404 (unknown post)
            ServerError: On 5xx
            NetworkError: On timeouts and connection failures
            CommentSourceError: On any other failure or a malformed payload
        """
        params: dict[str, str | int] = {
            "post": post_uri,
            "sort": sort.value,
            "depth": depth,
            "limit": limit,
        }
        if timeframe is not None:
            params["timeframe"] = timeframe.value
        if cursor is not None:
            params["cursor"] = cursor

        headers = {"Accept": "application/json"}
        if self.auth_token:
            headers["Authorization"] = f"Bearer {self.auth_token}"

        with logfire.span(
            "coves_comment_source.find_by_post",
            post_uri=post_uri,
            sort=sort.value,
            has_cursor=cursor is not None,
        ):
            try:
                async with httpx.AsyncClient() as client:
                    response = await client.get(
                        f"{self.base_url}{GET_COMMENTS_PATH}",
                        params=params,
                        headers=headers,
                        timeout=self.timeout,
                    )
            except httpx.TimeoutException as e:
                logfire.error("getComments timed out", post_uri=post_uri, error=str(e))
                raise NetworkError("Request timeout. Please check your connection.") from e
            except httpx.HTTPError as e:
                logfire.error("getComments HTTP error", post_uri=post_uri, error=str(e))
                raise NetworkError(f"Connection failed: {e}") from e

            self._raise_for_status(response, post_uri)

            try:
                page = CommentsResponse.model_validate(response.json()).to_domain()
            except (ValueError, PydanticValidationError) as e:
                logfire.error(
                    "Malformed getComments response", post_uri=post_uri, error=str(e)
                )
                raise CommentSourceError("Failed to parse server response") from e

            logfire.info(
                "Comments fetched",
                post_uri=post_uri,
                count=len(page.comments),
                has_more=page.has_more,
            )
            return page

    @staticmethod
    def _raise_for_status(response: httpx.Response, post_uri: str) -> None:
        status = response.status_code
        if status == 200:
            return

        logfire.error(
            "getComments request failed",
            post_uri=post_uri,
            status_code=status,
            error=response.text,
        )
        message = _error_message(response)
        if status == 401:
            raise AuthenticationError(message)
        if status == 404:
            raise NotFoundError("Post", post_uri)
        if status >= 500:
            raise ServerError(message, status_code=status)
        raise CommentSourceError(message, status_code=status)


def _error_message(response: httpx.Response) -> str:
    """Pull the XRPC error message out of a failed response."""
    try:
        body = response.json()
    except ValueError:
        return f"Request failed: {response.status_code}"
    if isinstance(body, dict):
        return body.get("message") or body.get("error") or "Server error"
    return "Server error"


class MockCommentSource(CommentSource):
    """In-memory comment source for testing.

    Serves seeded threads in pages, using the offset of the next page as the
    cursor. Sort and timeframe are recorded but not applied.
    """

    def __init__(self) -> None:
        self._threads: dict[str, tuple[CommentNode, ...]] = {}
        self.calls: list[dict] = []

    def seed(self, post_uri: str, comments: tuple[CommentNode, ...] | list[CommentNode]) -> None:
        """Replace the threads served for a post."""
        self._threads[post_uri] = tuple(comments)

    async def find_by_post(
        self,
        post_uri: PostUri,
        sort: CommentSort = CommentSort.HOT,
        timeframe: Timeframe | None = None,
        depth: int = 10,
        limit: int = 50,
        cursor: str | None = None,
    ) -> CommentPage:
        """Return a page of seeded threads."""
        self.calls.append(
            {"post_uri": post_uri, "sort": sort, "timeframe": timeframe, "cursor": cursor}
        )
        if post_uri not in self._threads:
            raise NotFoundError("Post", post_uri)

        comments = self._threads[post_uri]
        offset = int(cursor) if cursor else 0
        end = offset + limit
        return CommentPage(
            comments=comments[offset:end],
            cursor=str(end) if end < len(comments) else None,
        )
