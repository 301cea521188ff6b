"""Domain model entities for Coves comment threads."""

from coves.domain.model.comment import CommentNode, CommentPage
from coves.domain.model.render import (
    CollapsedItem,
    ContinueItem,
    ExpandedItem,
    FocusedThreadView,
    LoadMoreItem,
    RenderItem,
    RenderPlan,
)
from coves.domain.model.thread import AncestorChain, CollapseSet, FocusedThreadRequest

__all__ = [
    "AncestorChain",
    "CollapseSet",
    "CollapsedItem",
    "CommentNode",
    "CommentPage",
    "ContinueItem",
    "ExpandedItem",
    "FocusedThreadRequest",
    "FocusedThreadView",
    "LoadMoreItem",
    "RenderItem",
    "RenderPlan",
]
