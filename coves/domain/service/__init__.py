"""Domain services."""

from .base import Service
from .collapse import (
    collect_ids,
    descendant_count,
    is_collapsed,
    prune_collapsed,
    toggle_collapse,
)
from .navigator import FocusedView, ThreadNavigator, focus_thread
from .renderer import ThreadRenderService, render, render_comments, render_focused
from .tree import find_with_ancestors, insert_reply, merge_replies, replace_node

__all__ = [
    "FocusedView",
    "Service",
    "ThreadNavigator",
    "ThreadRenderService",
    "collect_ids",
    "descendant_count",
    "find_with_ancestors",
    "focus_thread",
    "insert_reply",
    "is_collapsed",
    "merge_replies",
    "prune_collapsed",
    "render",
    "render_comments",
    "render_focused",
    "replace_node",
    "toggle_collapse",
]
