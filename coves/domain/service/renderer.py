"""Depth-limited renderer.

Turns a comment forest plus a collapse set into a RenderPlan. Rendering is a
pure function of its inputs; descendant counts are only computed for
collapsed comments and "continue thread" affordances.
"""

import logfire

from coves.domain.error import ValidationError
from coves.domain.model import (
    AncestorChain,
    CollapsedItem,
    CollapseSet,
    CommentNode,
    ContinueItem,
    ExpandedItem,
    FocusedThreadRequest,
    FocusedThreadView,
    LoadMoreItem,
    RenderItem,
    RenderPlan,
)
from coves.domain.service.base import Service
from coves.domain.service.collapse import descendant_count


def _render_node(
    node: CommentNode,
    collapsed: CollapseSet,
    max_depth: int,
    depth: int,
    ancestors: AncestorChain,
) -> RenderItem:
    if node.id in collapsed:
        return CollapsedItem(
            node=node, depth=depth, hidden_count=descendant_count(node)
        )

    children: list[RenderItem] = []
    if depth < max_depth:
        chain = (*ancestors, node)
        children.extend(
            _render_node(child, collapsed, max_depth, depth + 1, chain)
            for child in node.children
        )
    elif node.children:
        children.append(
            ContinueItem(
                anchor=node,
                ancestors=ancestors,
                depth=depth + 1,
                count=descendant_count(node),
            )
        )

    if node.has_more_children:
        children.append(LoadMoreItem(parent_id=node.id, depth=depth + 1))

    return ExpandedItem(node=node, depth=depth, children=tuple(children))


def _check_depth(max_depth: int) -> None:
    if max_depth < 0:
        raise ValidationError(f"max_depth must be >= 0, got {max_depth}")


def render_comments(
    comments: tuple[CommentNode, ...] | list[CommentNode],
    collapsed: CollapseSet,
    max_depth: int,
    ancestors: AncestorChain = (),
) -> RenderPlan:
    """Render top-level comments, each starting at depth 0.

    Args:
        comments: Top-level comments in server sort order
        collapsed: Collapse set of the view being rendered
        max_depth: Deepest depth rendered inline
        ancestors: Chain above the top-level comments (non-empty when the
            forest hangs below a focused anchor)

    Raises:
        ValidationError: If max_depth is negative
    """
    _check_depth(max_depth)
    return RenderPlan(
        items=tuple(
            _render_node(node, collapsed, max_depth, 0, ancestors)
            for node in comments
        )
    )


def render(tree: CommentNode, collapsed: CollapseSet, max_depth: int) -> RenderPlan:
    """Render a single comment tree rooted at depth 0."""
    return render_comments((tree,), collapsed, max_depth)


def render_focused(request: FocusedThreadRequest, max_depth: int) -> FocusedThreadView:
    """Render a focused thread: the anchor becomes the root at depth 0.

    Ancestors are returned as flat context. Continue affordances inside the
    view carry the request's ancestors followed by the anchor.
    """
    _check_depth(max_depth)
    item = _render_node(
        request.anchor, request.collapsed, max_depth, 0, request.ancestors
    )
    return FocusedThreadView(
        ancestors=request.ancestors, plan=RenderPlan(items=(item,))
    )


class ThreadRenderService(Service):
    """Renders thread views with the configured depth limits."""

    def __init__(self, max_depth: int, focused_max_depth: int) -> None:
        """Initialize thread render service.

        Args:
            max_depth: Depth limit for the full post thread
            focused_max_depth: Depth limit inside focused thread views
        """
        _check_depth(max_depth)
        _check_depth(focused_max_depth)
        self.max_depth = max_depth
        self.focused_max_depth = focused_max_depth

    def render_thread(
        self, comments: tuple[CommentNode, ...], collapsed: CollapseSet
    ) -> RenderPlan:
        """Render a post's comment forest."""
        with logfire.span(
            "thread_render_service.render_thread",
            top_level=len(comments),
            collapsed=len(collapsed),
            max_depth=self.max_depth,
        ):
            return render_comments(comments, collapsed, self.max_depth)

    def render_focused(self, request: FocusedThreadRequest) -> FocusedThreadView:
        """Render a focused thread view."""
        with logfire.span(
            "thread_render_service.render_focused",
            anchor_id=request.anchor.id,
            ancestors=len(request.ancestors),
            max_depth=self.focused_max_depth,
        ):
            return render_focused(request, self.focused_max_depth)
