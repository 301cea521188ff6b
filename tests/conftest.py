"""Test configuration and fixtures."""

from datetime import datetime

from coves.domain.model import CommentNode
from coves.domain.value import CommentId
from coves.domain.value.types import Handle

POST_URI = "at://did:plc:community/social.coves.community.post/abc"


def make_comment(
    comment_id: str,
    *children: CommentNode,
    has_more: bool = False,
    handle: str = "user.bsky.social",
    content: str | None = None,
    score: int = 0,
) -> CommentNode:
    """Helper function to build comment trees for tests.

    Args:
        comment_id: Comment id (used as content when none is given)
        children: Replies, in display order
        has_more: Whether the server holds more replies

    Returns:
        CommentNode
    """
    return CommentNode(
        id=CommentId(comment_id),
        cid=f"cid-{comment_id}",
        author_handle=Handle(handle),
        content=content if content is not None else f"Comment {comment_id}",
        created_at=datetime(2025, 1, 1, 12, 0, 0),
        score=score,
        children=children,
        has_more_children=has_more,
    )


def make_chain(*comment_ids: str) -> CommentNode:
    """Build a single-file thread: each comment is the only reply of the previous."""
    node = make_comment(comment_ids[-1])
    for comment_id in reversed(comment_ids[:-1]):
        node = make_comment(comment_id, node)
    return node
