"""Unit tests for render plan models."""

from coves.domain.model import (
    CollapsedItem,
    ContinueItem,
    ExpandedItem,
    LoadMoreItem,
    RenderPlan,
)
from coves.domain.value import CommentId
from coves.domain.value.types import Handle
from tests.conftest import make_comment


class TestRenderPlan:
    """Tests for RenderPlan flattening."""

    def test_rows_are_pre_order(self):
        # Arrange
        a1 = make_comment("A1")
        a = make_comment("A", a1)
        b = make_comment("B", make_comment("B1"))
        plan = RenderPlan(
            items=(
                ExpandedItem(
                    node=a,
                    depth=0,
                    children=(ExpandedItem(node=a1, depth=1),),
                ),
                CollapsedItem(node=b, depth=0, hidden_count=1),
                LoadMoreItem(parent_id=CommentId("root"), depth=0),
            )
        )

        # Act
        rows = plan.rows()

        # Assert
        assert [row.kind for row in rows] == [
            "expanded",
            "expanded",
            "collapsed",
            "load_more",
        ]
        assert plan.comment_ids() == ["A", "A1", "B"]

    def test_plan_validates_from_tagged_dicts(self):
        node = make_comment("A", make_comment("A1"))
        data = {
            "items": [
                {
                    "kind": "expanded",
                    "node": node.model_dump(),
                    "depth": 0,
                    "children": [
                        {
                            "kind": "continue",
                            "anchor": node.model_dump(),
                            "depth": 1,
                            "count": 1,
                        }
                    ],
                }
            ]
        }

        plan = RenderPlan.model_validate(data)

        assert isinstance(plan.items[0].children[0], ContinueItem)


class TestRenderItemLabels:
    """Tests for render item display strings."""

    def test_collapsed_badge(self):
        item = CollapsedItem(node=make_comment("A"), depth=0, hidden_count=3)

        assert item.badge == "+3"

    def test_continue_label_singular_and_plural(self):
        one = ContinueItem(anchor=make_comment("A"), depth=1, count=1)
        many = ContinueItem(anchor=make_comment("A"), depth=1, count=4)

        assert one.label == "Read 1 more reply"
        assert many.label == "Read 4 more replies"

    def test_handle_strips_at_sign(self):
        node = make_comment("A", handle="@alice.bsky.social")

        assert node.author_handle.root == "alice.bsky.social"
