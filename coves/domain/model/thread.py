"""Thread view state: collapse sets and focused thread handoffs."""

from pydantic import Field

from coves.domain.model.comment import CommentNode
from coves.domain.model.common import DomainModel
from coves.domain.value import CommentId
from coves.domain.value.common import ValueObject

# Ordered root-most first; never mutated, extended by building a new tuple
AncestorChain = tuple[CommentNode, ...]


class CollapseSet(ValueObject):
    """Ids of the comments a user has collapsed in one thread view.

    Owned by a single view. Ids that are not in the rendered tree are
    harmless and have no effect on rendering.
    """

    ids: frozenset[CommentId] = frozenset()

    def __contains__(self, comment_id: object) -> bool:
        return comment_id in self.ids

    def __len__(self) -> int:
        return len(self.ids)


class FocusedThreadRequest(DomainModel):
    """Handoff payload for opening a comment as the root of a new view.

    The collapse set always starts empty: focused views never inherit the
    collapse state of the view they were opened from.
    """

    anchor: CommentNode
    ancestors: AncestorChain = ()
    collapsed: CollapseSet = Field(default_factory=CollapseSet)

    @property
    def context_chain(self) -> AncestorChain:
        """Ancestor chain handed to replies of the anchor."""
        return (*self.ancestors, self.anchor)
