"""Immutable edits on comment forests.

Every edit copies the nodes on the path from the root to the changed node
and reuses every other subtree as-is. Callers can therefore compare nodes by
identity to find what changed.
"""

from typing import Callable

from coves.domain.error import NotFoundError
from coves.domain.model import AncestorChain, CommentNode
from coves.domain.value import CommentId


def find_with_ancestors(
    comments: tuple[CommentNode, ...], comment_id: CommentId
) -> tuple[CommentNode, AncestorChain]:
    """Locate a comment and the chain of comments above it.

    Raises:
        NotFoundError: If no comment in the forest has ``comment_id``
    """
    # Iterative DFS keeps the chain for each pending node
    stack: list[tuple[CommentNode, AncestorChain]] = [
        (root, ()) for root in reversed(comments)
    ]
    while stack:
        node, ancestors = stack.pop()
        if node.id == comment_id:
            return node, ancestors
        chain = (*ancestors, node)
        stack.extend((child, chain) for child in reversed(node.children))
    raise NotFoundError("Comment", comment_id)


def replace_node(
    comments: tuple[CommentNode, ...],
    comment_id: CommentId,
    update: Callable[[CommentNode], CommentNode],
) -> tuple[CommentNode, ...]:
    """Return a new forest with ``update`` applied to one comment.

    Raises:
        NotFoundError: If no comment in the forest has ``comment_id``
    """
    target, ancestors = find_with_ancestors(comments, comment_id)
    replacement = update(target)

    # Rebuild the path bottom-up
    old, new = target, replacement
    for parent in reversed(ancestors):
        children = tuple(new if child is old else child for child in parent.children)
        old, new = parent, parent.model_copy(update={"children": children})

    return tuple(new if root is old else root for root in comments)


def merge_replies(
    comments: tuple[CommentNode, ...],
    parent_id: CommentId,
    replies: tuple[CommentNode, ...],
    has_more: bool,
) -> tuple[CommentNode, ...]:
    """Append a fetched page of replies under ``parent_id``.

    Replies already present (same id) are replaced in place so a page that
    overlaps the loaded ones does not duplicate them.
    """

    def _merge(parent: CommentNode) -> CommentNode:
        incoming = {reply.id: reply for reply in replies}
        children = tuple(incoming.pop(child.id, child) for child in parent.children)
        # Each remaining id is appended once, at its first position in the page
        appended = tuple(
            incoming.pop(reply.id) for reply in replies if reply.id in incoming
        )
        return parent.model_copy(
            update={"children": children + appended, "has_more_children": has_more}
        )

    return replace_node(comments, parent_id, _merge)


def insert_reply(
    comments: tuple[CommentNode, ...],
    parent_id: CommentId | None,
    reply: CommentNode,
) -> tuple[CommentNode, ...]:
    """Insert a newly created reply ahead of its siblings.

    A ``parent_id`` of None adds a new top-level comment.
    """
    if parent_id is None:
        return (reply, *comments)
    return replace_node(
        comments,
        parent_id,
        lambda parent: parent.model_copy(
            update={"children": (reply, *parent.children)}
        ),
    )
