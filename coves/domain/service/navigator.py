"""Focused thread navigator.

A thread screen starts in the normal view (the whole post thread). Tapping a
"continue thread" affordance re-roots the view at that comment; this can
repeat inside focused views. Each view owns its own collapse set, and every
focused view starts with an empty one. Leaving a focused view discards it
together with its collapse state.
"""

from dataclasses import dataclass, field

import logfire

from coves.domain.error import NotFoundError
from coves.domain.model import (
    AncestorChain,
    CollapseSet,
    CommentNode,
    ContinueItem,
    FocusedThreadRequest,
)
from coves.domain.service.collapse import prune_collapsed, toggle_collapse
from coves.domain.service.tree import find_with_ancestors
from coves.domain.value import CommentId


def focus_thread(node: CommentNode, ancestors: AncestorChain = ()) -> FocusedThreadRequest:
    """Build the handoff payload that re-roots a thread at ``node``."""
    return FocusedThreadRequest(anchor=node, ancestors=tuple(ancestors))


@dataclass
class FocusedView:
    """A focused view on the navigation stack."""

    request: FocusedThreadRequest
    collapsed: CollapseSet = field(default_factory=CollapseSet)


class ThreadNavigator:
    """Normal/Focused view state machine for one thread screen."""

    def __init__(self) -> None:
        self.root_collapsed = CollapseSet()
        self._stack: list[FocusedView] = []

    @property
    def is_focused(self) -> bool:
        return bool(self._stack)

    @property
    def current(self) -> FocusedView | None:
        """Top focused view, or None in the normal view."""
        return self._stack[-1] if self._stack else None

    @property
    def depth(self) -> int:
        """Number of focused views stacked above the normal view."""
        return len(self._stack)

    @property
    def collapsed(self) -> CollapseSet:
        """Collapse set of the current view."""
        current = self.current
        return current.collapsed if current else self.root_collapsed

    def toggle(self, comment_id: CommentId) -> CollapseSet:
        """Toggle a comment in the current view only."""
        updated = toggle_collapse(self.collapsed, comment_id)
        current = self.current
        if current:
            current.collapsed = updated
        else:
            self.root_collapsed = updated
        return updated

    def continue_thread(self, item: ContinueItem) -> FocusedThreadRequest:
        """Follow a "continue thread" affordance into a new focused view."""
        request = focus_thread(item.anchor, item.ancestors)
        self.push(request)
        return request

    def push(self, request: FocusedThreadRequest) -> None:
        self._stack.append(FocusedView(request=request, collapsed=request.collapsed))
        logfire.info(
            "Focused thread opened",
            anchor_id=request.anchor.id,
            ancestors=len(request.ancestors),
            stack_depth=len(self._stack),
        )

    def back(self) -> FocusedThreadRequest | None:
        """Discard the current focused view.

        Returns:
            The discarded request, or None when already in the normal view
        """
        if not self._stack:
            return None
        view = self._stack.pop()
        logfire.info(
            "Focused thread closed",
            anchor_id=view.request.anchor.id,
            stack_depth=len(self._stack),
        )
        return view.request

    def reset(self) -> None:
        """Return to the normal view and clear all collapse state."""
        self.root_collapsed = CollapseSet()
        self._stack.clear()

    def rebase(self, comments: tuple[CommentNode, ...]) -> None:
        """Point every view at a replaced comment forest.

        Focused views whose anchor is still present pick up the new anchor
        and ancestor nodes; views whose anchor vanished keep their last
        snapshot. Collapsed ids missing from the forest are dropped.
        """
        self.root_collapsed = prune_collapsed(self.root_collapsed, comments)
        for view in self._stack:
            try:
                anchor, ancestors = find_with_ancestors(comments, view.request.anchor.id)
            except NotFoundError:
                continue
            view.request = view.request.model_copy(
                update={"anchor": anchor, "ancestors": ancestors}
            )
            view.collapsed = prune_collapsed(view.collapsed, (anchor,))
