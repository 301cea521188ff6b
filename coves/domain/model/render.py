"""Render plan: a platform-agnostic description of a comment thread display.

A plan is a tree of tagged items. UI layers walk it (or its flattened rows)
and map each ``kind`` to a widget.
"""

from typing import Annotated, Iterator, Literal, Union

from pydantic import Field

from coves.domain.model.comment import CommentNode
from coves.domain.model.common import DomainModel
from coves.domain.model.thread import AncestorChain
from coves.domain.value import CommentId


class ExpandedItem(DomainModel):
    """A comment shown in full, followed by its rendered children."""

    kind: Literal["expanded"] = "expanded"
    node: CommentNode
    depth: int
    children: tuple["RenderItem", ...] = ()


class CollapsedItem(DomainModel):
    """A collapsed comment: header only, with a count of hidden replies."""

    kind: Literal["collapsed"] = "collapsed"
    node: CommentNode
    depth: int
    hidden_count: int

    @property
    def badge(self) -> str:
        return f"+{self.hidden_count}"


class ContinueItem(DomainModel):
    """Affordance that opens ``anchor`` in a focused thread view.

    Emitted in place of the replies of a comment at the depth limit.
    """

    kind: Literal["continue"] = "continue"
    anchor: CommentNode
    ancestors: AncestorChain = ()
    depth: int
    count: int

    @property
    def label(self) -> str:
        noun = "reply" if self.count == 1 else "replies"
        return f"Read {self.count} more {noun}"


class LoadMoreItem(DomainModel):
    """Pagination trigger for replies the server has not sent yet."""

    kind: Literal["load_more"] = "load_more"
    parent_id: CommentId
    depth: int

    @property
    def label(self) -> str:
        return "Load more replies"


RenderItem = Annotated[
    Union[ExpandedItem, CollapsedItem, ContinueItem, LoadMoreItem],
    Field(discriminator="kind"),
]

ExpandedItem.model_rebuild()


def _walk(items: tuple[RenderItem, ...]) -> Iterator[RenderItem]:
    for item in items:
        yield item
        if isinstance(item, ExpandedItem):
            yield from _walk(item.children)


class RenderPlan(DomainModel):
    """Rendered forest of top-level comments."""

    items: tuple[RenderItem, ...] = ()

    def rows(self) -> list[RenderItem]:
        """Flatten the plan into display order (pre-order)."""
        return list(_walk(self.items))

    def comment_ids(self) -> list[CommentId]:
        """Ids of every comment that appears in the plan, in display order."""
        return [
            item.node.id
            for item in _walk(self.items)
            if isinstance(item, (ExpandedItem, CollapsedItem))
        ]


class FocusedThreadView(DomainModel):
    """A re-rooted thread: flat ancestor context above the anchor's plan."""

    ancestors: AncestorChain = ()
    plan: RenderPlan
