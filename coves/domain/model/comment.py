"""Comment tree entities.

A post's discussion is a forest of CommentNode trees. Nodes are immutable:
a refresh or a merged page of replies produces new node objects along the
changed path, so UI layers can detect changes by identity.
"""

from datetime import datetime
from typing import Iterator

from pydantic import Field

from coves.domain.model.common import DomainModel
from coves.domain.value import CommentId
from coves.domain.value.types import Handle


class CommentNode(DomainModel):
    """A single comment plus its replies.

    Attributes:
        id: AT-URI of the comment record
        cid: Content hash of the record (needed to reference it in a reply)
        children: Replies in server sort order
        has_more_children: Whether the server holds further replies not
            included in ``children``
    """

    id: CommentId
    author_handle: Handle
    content: str
    created_at: datetime
    score: int = 0
    children: tuple["CommentNode", ...] = ()
    has_more_children: bool = False
    cid: str | None = None

    @property
    def is_leaf(self) -> bool:
        """True when there is nothing below this node, loaded or not."""
        return not self.children and not self.has_more_children

    def walk(self) -> Iterator["CommentNode"]:
        """Yield this node and every descendant in pre-order."""
        yield self
        for child in self.children:
            yield from child.walk()


CommentNode.model_rebuild()


class CommentPage(DomainModel):
    """One page of top-level comment threads for a post."""

    comments: tuple[CommentNode, ...] = ()
    cursor: str | None = Field(default=None, description="Cursor for the next page")

    @property
    def has_more(self) -> bool:
        return self.cursor is not None
