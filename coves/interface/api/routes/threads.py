"""Comment thread routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, status

from coves.adapter.error import CommentSourceError
from coves.application.usecase.thread import (
    FocusThreadRequest,
    FocusThreadResponse,
    FocusThreadUseCase,
    GetThreadRequest,
    GetThreadResponse,
    GetThreadUseCase,
)
from coves.domain.error import NotFoundError
from coves.domain.value import CommentSort, Timeframe

router = APIRouter(prefix="/threads", tags=["threads"], route_class=DishkaRoute)


@router.get("", response_model=GetThreadResponse)
async def get_thread(
    get_thread_use_case: FromDishka[GetThreadUseCase],
    post: str = Query(description="AT-URI of the post"),
    sort: CommentSort | None = None,
    timeframe: Timeframe | None = None,
    collapsed: list[str] = Query(default=[]),
    cursor: str | None = None,
) -> GetThreadResponse:
    """Render one page of a post's comment threads.

    Args:
        get_thread_use_case: Get thread use case from DI
        post: Post AT-URI
        sort: Sibling ordering (hot, top, new)
        timeframe: Time window for the top sort
        collapsed: Ids of comments the client has collapsed
        cursor: Pagination cursor from the previous response

    Returns:
        Flattened render plan rows and the next cursor
    """
    request = GetThreadRequest(
        post_uri=post,
        sort=sort,
        timeframe=timeframe,
        collapsed=collapsed,
        cursor=cursor,
    )
    try:
        return await get_thread_use_case.execute(request)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except CommentSourceError as e:
        logfire.warn("Thread fetch failed", post_uri=post, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Failed to fetch comments",
        )


@router.post("/focus", response_model=FocusThreadResponse)
async def focus_thread(
    request: FocusThreadRequest,
    focus_thread_use_case: FromDishka[FocusThreadUseCase],
) -> FocusThreadResponse:
    """Re-root a post's thread at one comment.

    Ancestors are returned as flat context above the anchor. The focused
    view starts with no collapsed comments unless the client sends some.

    Args:
        request: Post URI, anchor comment id and the view's collapsed ids
        focus_thread_use_case: Focus thread use case from DI

    Returns:
        Ancestor context and the anchor's flattened render plan
    """
    try:
        return await focus_thread_use_case.execute(request)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except CommentSourceError as e:
        logfire.warn(
            "Focused thread fetch failed",
            post_uri=request.post_uri,
            anchor_id=request.anchor_id,
            error=str(e),
        )
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Failed to fetch comments",
        )
