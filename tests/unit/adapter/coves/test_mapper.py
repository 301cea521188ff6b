"""Unit tests for getComments wire models."""

from coves.adapter.coves.mapper import CommentsResponse, ThreadViewComment


class TestThreadViewComment:
    """Tests for ThreadViewComment.to_domain."""

    def test_inline_content_wins_over_record(self):
        thread = ThreadViewComment.model_validate(
            {
                "comment": {
                    "uri": "c/1",
                    "content": "inline",
                    "record": {"content": "nested"},
                    "createdAt": "2025-01-01T12:00:00Z",
                    "author": {"handle": "@bob.test"},
                }
            }
        )

        node = thread.to_domain()

        assert node.content == "inline"
        assert node.author_handle.root == "bob.test"
        assert node.score == 0
        assert node.is_leaf

    def test_nested_replies_keep_server_order(self):
        def comment(uri, replies=None):
            return {
                "comment": {
                    "uri": uri,
                    "record": {"content": uri},
                    "createdAt": "2025-01-01T12:00:00Z",
                    "author": {"handle": "alice.test"},
                },
                "replies": replies,
            }

        thread = ThreadViewComment.model_validate(
            comment("r", [comment("b", [comment("b1")]), comment("a")])
        )

        node = thread.to_domain()

        assert [n.id for n in node.walk()] == ["r", "b", "b1", "a"]
        assert node.has_more_children is False


class TestCommentsResponse:
    """Tests for CommentsResponse.to_domain."""

    def test_ignores_unknown_fields(self):
        response = CommentsResponse.model_validate(
            {"post": {"uri": "p"}, "comments": [], "cursor": "x", "extra": 1}
        )

        page = response.to_domain()

        assert page.comments == ()
        assert page.cursor == "x"
