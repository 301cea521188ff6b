"""Unit tests for FocusThreadUseCase."""

import pytest

from coves.adapter.coves import MockCommentSource
from coves.application.usecase.thread import FocusThreadRequest, FocusThreadUseCase
from coves.application.usecase.thread.focus_thread import MAX_PAGES
from coves.config import ThreadingSettings
from coves.domain.error import NotFoundError
from coves.domain.service import ThreadRenderService
from tests.conftest import POST_URI, make_chain, make_comment


def _use_case(source: MockCommentSource, focused_max_depth: int = 6, page_size: int = 50):
    settings = ThreadingSettings(focused_max_depth=focused_max_depth, page_size=page_size)
    return FocusThreadUseCase(
        comment_source=source,
        render_service=ThreadRenderService(
            max_depth=settings.max_depth,
            focused_max_depth=settings.focused_max_depth,
        ),
        settings=settings,
    )


def _thread():
    return [
        make_comment(
            "R",
            make_comment("A", make_comment("A1", make_comment("A1a"))),
            make_comment("B", make_comment("B1")),
        )
    ]


class TestFocusThreadUseCase:
    """Tests for FocusThreadUseCase."""

    @pytest.mark.asyncio
    async def test_reroots_at_anchor(self):
        """Focusing A1 returns [R, A] as context and A1 at depth 0."""
        # Arrange
        source = MockCommentSource()
        source.seed(POST_URI, _thread())

        # Act
        response = await _use_case(source).execute(
            FocusThreadRequest(post_uri=POST_URI, anchor_id="A1")
        )

        # Assert
        assert [a.comment_id for a in response.ancestors] == ["R", "A"]
        assert response.rows[0].comment.comment_id == "A1"
        assert response.rows[0].depth == 0
        assert [row.comment.comment_id for row in response.rows] == ["A1", "A1a"]

    @pytest.mark.asyncio
    async def test_starts_without_collapsed_comments(self):
        """A collapse elsewhere in the thread never leaks into the focused view."""
        source = MockCommentSource()
        source.seed(POST_URI, _thread())

        response = await _use_case(source).execute(
            FocusThreadRequest(post_uri=POST_URI, anchor_id="A1")
        )

        assert all(row.kind == "expanded" for row in response.rows)

    @pytest.mark.asyncio
    async def test_applies_collapsed_ids_from_focused_view(self):
        source = MockCommentSource()
        source.seed(POST_URI, _thread())

        response = await _use_case(source).execute(
            FocusThreadRequest(post_uri=POST_URI, anchor_id="A", collapsed=["A1"])
        )

        assert [row.kind for row in response.rows] == ["expanded", "collapsed"]
        assert response.rows[1].badge == "+1"

    @pytest.mark.asyncio
    async def test_continue_rows_extend_ancestor_chain(self):
        source = MockCommentSource()
        source.seed(POST_URI, [make_chain("a", "b", "c", "d")])

        response = await _use_case(source, focused_max_depth=1).execute(
            FocusThreadRequest(post_uri=POST_URI, anchor_id="b")
        )

        cont = response.rows[-1]
        assert cont.kind == "continue"
        assert cont.anchor_id == "c"
        assert cont.ancestor_ids == ["a", "b"]

    @pytest.mark.asyncio
    async def test_scans_later_pages(self):
        source = MockCommentSource()
        source.seed(POST_URI, [make_comment("x"), make_comment("y", make_comment("y1"))])

        response = await _use_case(source, page_size=1).execute(
            FocusThreadRequest(post_uri=POST_URI, anchor_id="y1")
        )

        assert [a.comment_id for a in response.ancestors] == ["y"]
        assert len(source.calls) == 2

    @pytest.mark.asyncio
    async def test_missing_anchor_raises(self):
        source = MockCommentSource()
        source.seed(POST_URI, _thread())

        with pytest.raises(NotFoundError) as exc_info:
            await _use_case(source).execute(
                FocusThreadRequest(post_uri=POST_URI, anchor_id="nope")
            )

        assert exc_info.value.resource == "Comment"

    @pytest.mark.asyncio
    async def test_gives_up_after_page_limit(self):
        source = MockCommentSource()
        source.seed(POST_URI, [make_comment(f"c{i}") for i in range(MAX_PAGES + 5)])

        with pytest.raises(NotFoundError):
            await _use_case(source, page_size=1).execute(
                FocusThreadRequest(post_uri=POST_URI, anchor_id="missing")
            )

        assert len(source.calls) == MAX_PAGES
