"""Response models shared by the thread use cases.

Render plans are sent flattened: one row per display line, in order, with
the nesting expressed by ``depth``.
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel

from coves.domain.model import (
    CollapsedItem,
    CommentNode,
    ContinueItem,
    ExpandedItem,
    LoadMoreItem,
    RenderItem,
    RenderPlan,
)


class CommentItem(BaseModel):
    """Comment content shown on a row."""

    comment_id: str
    cid: str | None
    author_handle: str
    content: str
    created_at: datetime
    score: int

    @classmethod
    def from_domain(cls, node: CommentNode) -> "CommentItem":
        return cls(
            comment_id=node.id,
            cid=node.cid,
            author_handle=node.author_handle.root,
            content=node.content,
            created_at=node.created_at,
            score=node.score,
        )


class RenderRow(BaseModel):
    """One display row of a render plan."""

    kind: Literal["expanded", "collapsed", "continue", "load_more"]
    depth: int
    comment: CommentItem | None = None
    # collapsed rows
    hidden_count: int | None = None
    badge: str | None = None
    # continue rows
    anchor_id: str | None = None
    ancestor_ids: list[str] | None = None
    count: int | None = None
    # continue and load_more rows
    label: str | None = None
    # load_more rows
    parent_id: str | None = None

    @classmethod
    def from_domain(cls, item: RenderItem) -> "RenderRow":
        if isinstance(item, ExpandedItem):
            return cls(
                kind=item.kind,
                depth=item.depth,
                comment=CommentItem.from_domain(item.node),
            )
        if isinstance(item, CollapsedItem):
            return cls(
                kind=item.kind,
                depth=item.depth,
                comment=CommentItem.from_domain(item.node),
                hidden_count=item.hidden_count,
                badge=item.badge,
            )
        if isinstance(item, ContinueItem):
            return cls(
                kind=item.kind,
                depth=item.depth,
                anchor_id=item.anchor.id,
                ancestor_ids=[node.id for node in item.ancestors],
                count=item.count,
                label=item.label,
            )
        if isinstance(item, LoadMoreItem):
            return cls(
                kind=item.kind,
                depth=item.depth,
                parent_id=item.parent_id,
                label=item.label,
            )
        raise TypeError(f"Unknown render item: {type(item).__name__}")


def plan_rows(plan: RenderPlan) -> list[RenderRow]:
    """Flatten a render plan into response rows."""
    return [RenderRow.from_domain(item) for item in plan.rows()]
