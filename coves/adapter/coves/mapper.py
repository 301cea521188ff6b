"""Wire models for the social.coves.community.comment.getComments response.

Only the fields the thread view needs are modelled; everything else in the
payload is ignored.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from coves.domain.model import CommentNode, CommentPage
from coves.domain.value import CommentId
from coves.domain.value.types import Handle


class WireModel(BaseModel):
    """Base for AppView payload models (camelCase on the wire)."""

    model_config = ConfigDict(populate_by_name=True)


class AuthorView(WireModel):
    did: str | None = None
    handle: str


class CommentStats(WireModel):
    upvotes: int = 0
    downvotes: int = 0
    score: int = 0


class CommentRecord(WireModel):
    content: str = ""


class CommentView(WireModel):
    """A single comment record as rendered by the AppView."""

    uri: str
    cid: str | None = None
    # Older AppViews inline the text, newer ones nest it in the record
    content: str | None = None
    record: CommentRecord | None = None
    created_at: datetime = Field(alias="createdAt")
    author: AuthorView
    stats: CommentStats = CommentStats()

    @property
    def text(self) -> str:
        if self.content is not None:
            return self.content
        if self.record is not None:
            return self.record.content
        return ""


class ThreadViewComment(WireModel):
    """A comment with its nested replies."""

    comment: CommentView
    replies: list["ThreadViewComment"] | None = None
    has_more: bool | None = Field(default=None, alias="hasMore")

    def to_domain(self) -> CommentNode:
        """Convert to an immutable CommentNode tree."""
        return CommentNode(
            id=CommentId(self.comment.uri),
            cid=self.comment.cid,
            author_handle=Handle(self.comment.author.handle),
            content=self.comment.text,
            created_at=self.comment.created_at,
            score=self.comment.stats.score,
            children=tuple(reply.to_domain() for reply in self.replies or ()),
            has_more_children=bool(self.has_more),
        )


class CommentsResponse(WireModel):
    """getComments response body."""

    post: Any = None
    cursor: str | None = None
    # The AppView sends null instead of an empty list for posts without comments
    comments: list[ThreadViewComment] | None = None

    def to_domain(self) -> CommentPage:
        return CommentPage(
            comments=tuple(thread.to_domain() for thread in self.comments or ()),
            cursor=self.cursor or None,
        )
