"""Get thread use case."""

import logfire
from pydantic import BaseModel

from coves.application.usecase.base import BaseUseCase
from coves.application.usecase.thread.schemas import RenderRow, plan_rows
from coves.config import ThreadingSettings
from coves.domain.model import CollapseSet
from coves.domain.repository import CommentSource
from coves.domain.service import ThreadRenderService
from coves.domain.value import CommentId, CommentSort, PostUri, Timeframe


class GetThreadRequest(BaseModel):
    """Get thread request."""

    post_uri: str
    sort: CommentSort | None = None
    timeframe: Timeframe | None = None
    collapsed: list[str] = []
    cursor: str | None = None


class GetThreadResponse(BaseModel):
    """Get thread response."""

    post_uri: str
    sort: CommentSort
    rows: list[RenderRow]
    cursor: str | None
    has_more: bool


class GetThreadUseCase(BaseUseCase):
    """Use case for rendering one page of a post's comment threads."""

    def __init__(
        self,
        comment_source: CommentSource,
        render_service: ThreadRenderService,
        settings: ThreadingSettings,
    ) -> None:
        """Initialize get thread use case.

        Args:
            comment_source: Source of comment pages
            render_service: Renderer configured with depth limits
            settings: Threading configuration
        """
        self.comment_source = comment_source
        self.render_service = render_service
        self.settings = settings

    async def execute(self, request: GetThreadRequest) -> GetThreadResponse:
        """Fetch a page of comments and render it with the caller's collapse set.

        Args:
            request: Post URI, sort, collapsed comment ids and page cursor

        Returns:
            Flattened render plan with the cursor for the next page

        Raises:
            NotFoundError: If the post does not exist
            CommentSourceError: If the AppView request fails
        """
        sort = request.sort or self.settings.default_sort
        page = await self.comment_source.find_by_post(
            post_uri=PostUri(request.post_uri),
            sort=sort,
            timeframe=request.timeframe,
            depth=self.settings.fetch_depth,
            limit=self.settings.page_size,
            cursor=request.cursor,
        )

        collapsed = CollapseSet(ids=frozenset(CommentId(c) for c in request.collapsed))
        plan = self.render_service.render_thread(page.comments, collapsed)

        logfire.info(
            "Thread rendered",
            post_uri=request.post_uri,
            top_level=len(page.comments),
            collapsed=len(collapsed),
        )

        return GetThreadResponse(
            post_uri=request.post_uri,
            sort=sort,
            rows=plan_rows(plan),
            cursor=page.cursor,
            has_more=page.has_more,
        )
