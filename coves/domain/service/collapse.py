"""Collapse registry.

Pure set arithmetic over CollapseSet values. None of these functions fail.
"""

from typing import Iterable

from coves.domain.model import CollapseSet, CommentNode
from coves.domain.value import CommentId


def toggle_collapse(collapsed: CollapseSet, comment_id: CommentId) -> CollapseSet:
    """Return a new set with membership of ``comment_id`` flipped."""
    if comment_id in collapsed.ids:
        return CollapseSet(ids=collapsed.ids - {comment_id})
    return CollapseSet(ids=collapsed.ids | {comment_id})


def is_collapsed(collapsed: CollapseSet, comment_id: CommentId) -> bool:
    return comment_id in collapsed.ids


def descendant_count(node: CommentNode) -> int:
    """Count every comment below ``node``, excluding ``node`` itself.

    Nested collapsed subtrees are counted too; they are hidden transitively.
    """
    return sum(1 + descendant_count(child) for child in node.children)


def collect_ids(comments: Iterable[CommentNode]) -> frozenset[CommentId]:
    """Ids of every comment in a forest."""
    return frozenset(node.id for root in comments for node in root.walk())


def prune_collapsed(
    collapsed: CollapseSet, comments: Iterable[CommentNode]
) -> CollapseSet:
    """Drop ids that no longer exist in ``comments``.

    Returns ``collapsed`` unchanged (same object) when nothing was dropped.
    """
    kept = collapsed.ids & collect_ids(comments)
    if kept == collapsed.ids:
        return collapsed
    return CollapseSet(ids=kept)
