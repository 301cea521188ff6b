"""Thread session: the state behind one post's comment screen."""

import asyncio

import logfire

from coves.adapter.error import CommentSourceError
from coves.config import ThreadingSettings
from coves.domain.error import DomainError
from coves.domain.model import (
    CollapseSet,
    CommentNode,
    ContinueItem,
    FocusedThreadRequest,
    FocusedThreadView,
    RenderPlan,
)
from coves.domain.repository import CommentSource
from coves.domain.service import (
    ThreadNavigator,
    ThreadRenderService,
    insert_reply,
    merge_replies,
)
from coves.domain.value import CommentId, CommentSort, PostUri, Timeframe


class ThreadSession:
    """Comments, pagination, sort and view state for a single post.

    The comment forest is only ever replaced, never mutated, so every update
    hands the UI a new tuple and new nodes along each changed path. Collapse
    state lives in the session's ThreadNavigator and is pruned whenever the
    forest is replaced.
    """

    def __init__(
        self,
        post_uri: PostUri,
        comment_source: CommentSource,
        render_service: ThreadRenderService,
        settings: ThreadingSettings,
    ) -> None:
        """Initialize thread session.

        Args:
            post_uri: AT-URI of the post whose comments are shown
            comment_source: Source of comment pages
            render_service: Renderer configured with depth limits
            settings: Threading configuration (page size, sort, fetch depth)
        """
        self.post_uri = post_uri
        self.comment_source = comment_source
        self.render_service = render_service
        self.settings = settings

        self.sort: CommentSort = settings.default_sort
        self.timeframe: Timeframe | None = None
        self.navigator = ThreadNavigator()
        # Set whenever no load is running
        self._idle = asyncio.Event()
        self._idle.set()
        self.reset()

    def reset(self) -> None:
        """Forget all loaded comments and view state."""
        self.comments: tuple[CommentNode, ...] = ()
        self.cursor: str | None = None
        self.has_more = True
        self.is_loading = False
        self.is_loading_more = False
        self.error: str | None = None
        self._pending_refresh = False
        self.navigator.reset()

    @property
    def collapsed(self) -> CollapseSet:
        """Collapse set of the current view."""
        return self.navigator.collapsed

    async def load(self, refresh: bool = False) -> None:
        """Load the first page (``refresh``) or the next page of comments.

        A call made while another load is running is ignored; if it asked for
        a refresh, the refresh runs once the running load has succeeded. A
        failed load drops the queued refresh.

        Raises:
            CommentSourceError: If the comment source fails
            NotFoundError: If the post does not exist
        """
        if self.is_loading or self.is_loading_more:
            if refresh:
                self._pending_refresh = True
                logfire.debug("Load in progress, refresh scheduled", post_uri=self.post_uri)
            return

        if refresh:
            self.is_loading = True
            self._pending_refresh = False
        else:
            self.is_loading_more = True
        self._idle.clear()

        with logfire.span(
            "thread_session.load",
            post_uri=self.post_uri,
            refresh=refresh,
            sort=self.sort.value,
        ):
            page = None
            try:
                page = await self.comment_source.find_by_post(
                    post_uri=self.post_uri,
                    sort=self.sort,
                    timeframe=self.timeframe,
                    depth=self.settings.fetch_depth,
                    limit=self.settings.page_size,
                    cursor=None if refresh else self.cursor,
                )
            except (CommentSourceError, DomainError) as e:
                self.error = str(e)
                logfire.warn(
                    "Failed to load comments", post_uri=self.post_uri, error=str(e)
                )
                raise
            finally:
                self.is_loading = False
                self.is_loading_more = False
                if page is None:
                    self._pending_refresh = False
                self._idle.set()

            if refresh:
                comments = page.comments
            else:
                comments = (*self.comments, *page.comments)

            self._replace_comments(comments)
            self.cursor = page.cursor
            self.has_more = page.has_more
            self.error = None

            logfire.info(
                "Comments loaded",
                post_uri=self.post_uri,
                total=len(self.comments),
                has_more=self.has_more,
            )

        if self._pending_refresh:
            self._pending_refresh = False
            await self.load(refresh=True)

    async def refresh(self) -> None:
        """Reload comments from the first page."""
        await self.load(refresh=True)

    async def load_more(self) -> None:
        """Load the next page of top-level comments, if there is one."""
        if not self.has_more or self.is_loading or self.is_loading_more:
            return
        await self.load(refresh=False)

    async def set_sort(self, sort: CommentSort, timeframe: Timeframe | None = None) -> bool:
        """Switch sort order and reload.

        Waits for a running load to finish, then fetches the first page with
        the new sort.

        Returns:
            True on success; False if the reload failed, in which case the
            previous sort and timeframe are restored
        """
        if sort == self.sort and timeframe == self.timeframe:
            return True

        await self._wait_until_idle()
        previous = (self.sort, self.timeframe)
        self.sort, self.timeframe = sort, timeframe
        try:
            await self.load(refresh=True)
        except (CommentSourceError, DomainError):
            self.sort, self.timeframe = previous
            return False
        return True

    def merge_replies(
        self,
        parent_id: CommentId,
        replies: tuple[CommentNode, ...] | list[CommentNode],
        has_more: bool = False,
    ) -> None:
        """Merge a fetched page of replies under a loaded comment.

        Raises:
            NotFoundError: If ``parent_id`` is not loaded
        """
        self._replace_comments(
            merge_replies(self.comments, parent_id, tuple(replies), has_more)
        )

    def add_reply(self, parent_id: CommentId | None, reply: CommentNode) -> None:
        """Show a reply the user just posted without waiting for a refresh.

        Raises:
            NotFoundError: If ``parent_id`` is not loaded
        """
        self._replace_comments(insert_reply(self.comments, parent_id, reply))

    def toggle_collapse(self, comment_id: CommentId) -> CollapseSet:
        """Collapse or expand a comment in the current view."""
        return self.navigator.toggle(comment_id)

    def continue_thread(self, item: ContinueItem) -> FocusedThreadRequest:
        """Open a focused view for a "continue thread" affordance."""
        return self.navigator.continue_thread(item)

    def back(self) -> FocusedThreadRequest | None:
        """Leave the current focused view, discarding its collapse state."""
        return self.navigator.back()

    def render(self) -> RenderPlan | FocusedThreadView:
        """Render the current view."""
        view = self.navigator.current
        if view is None:
            return self.render_service.render_thread(
                self.comments, self.navigator.root_collapsed
            )
        request = view.request.model_copy(update={"collapsed": view.collapsed})
        return self.render_service.render_focused(request)

    async def _wait_until_idle(self) -> None:
        # A queued refresh may start right after the running load ends
        while self.is_loading or self.is_loading_more:
            await self._idle.wait()

    def _replace_comments(self, comments: tuple[CommentNode, ...]) -> None:
        self.comments = comments
        self.navigator.rebase(comments)
