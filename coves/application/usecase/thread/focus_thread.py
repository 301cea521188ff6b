"""Focus thread use case."""

import logfire
from pydantic import BaseModel

from coves.application.usecase.base import BaseUseCase
from coves.application.usecase.thread.schemas import CommentItem, RenderRow, plan_rows
from coves.config import ThreadingSettings
from coves.domain.error import NotFoundError
from coves.domain.model import CollapseSet, CommentNode
from coves.domain.repository import CommentSource
from coves.domain.service import ThreadRenderService, find_with_ancestors, focus_thread
from coves.domain.value import CommentId, CommentSort, PostUri, Timeframe

# Pages scanned for the anchor before giving up
MAX_PAGES = 10


class FocusThreadRequest(BaseModel):
    """Focus thread request."""

    post_uri: str
    anchor_id: str
    sort: CommentSort | None = None
    timeframe: Timeframe | None = None
    # Ids collapsed inside the focused view; the view always opens with none
    collapsed: list[str] = []


class FocusThreadResponse(BaseModel):
    """Focus thread response."""

    post_uri: str
    anchor_id: str
    ancestors: list[CommentItem]
    rows: list[RenderRow]


class FocusThreadUseCase(BaseUseCase):
    """Use case for re-rooting a post's thread at one comment."""

    def __init__(
        self,
        comment_source: CommentSource,
        render_service: ThreadRenderService,
        settings: ThreadingSettings,
    ) -> None:
        """Initialize focus thread use case.

        Args:
            comment_source: Source of comment pages
            render_service: Renderer configured with depth limits
            settings: Threading configuration
        """
        self.comment_source = comment_source
        self.render_service = render_service
        self.settings = settings

    async def execute(self, request: FocusThreadRequest) -> FocusThreadResponse:
        """Find the anchor comment and render the thread below it.

        Raises:
            NotFoundError: If the post or the anchor comment does not exist
            CommentSourceError: If the AppView request fails
        """
        anchor_id = CommentId(request.anchor_id)
        with logfire.span(
            "focus_thread_use_case.execute",
            post_uri=request.post_uri,
            anchor_id=anchor_id,
        ):
            anchor, ancestors = await self._find_anchor(request, anchor_id)

            focused = focus_thread(anchor, ancestors)
            if request.collapsed:
                focused = focused.model_copy(
                    update={
                        "collapsed": CollapseSet(
                            ids=frozenset(CommentId(c) for c in request.collapsed)
                        )
                    }
                )
            view = self.render_service.render_focused(focused)

            return FocusThreadResponse(
                post_uri=request.post_uri,
                anchor_id=anchor_id,
                ancestors=[CommentItem.from_domain(node) for node in view.ancestors],
                rows=plan_rows(view.plan),
            )

    async def _find_anchor(
        self, request: FocusThreadRequest, anchor_id: CommentId
    ) -> tuple[CommentNode, tuple[CommentNode, ...]]:
        cursor: str | None = None
        for _ in range(MAX_PAGES):
            page = await self.comment_source.find_by_post(
                post_uri=PostUri(request.post_uri),
                sort=request.sort or self.settings.default_sort,
                timeframe=request.timeframe,
                depth=self.settings.fetch_depth,
                limit=self.settings.page_size,
                cursor=cursor,
            )
            try:
                return find_with_ancestors(page.comments, anchor_id)
            except NotFoundError:
                if not page.has_more:
                    break
                cursor = page.cursor

        logfire.warn("Anchor comment not found", post_uri=request.post_uri, anchor_id=anchor_id)
        raise NotFoundError("Comment", anchor_id)
