"""Unit tests for the focused thread navigator."""

from coves.domain.model import CollapseSet, ContinueItem
from coves.domain.service import ThreadNavigator, focus_thread, render
from coves.domain.value import CommentId
from tests.conftest import make_comment


def _thread():
    a1 = make_comment("A1", make_comment("A1a"))
    a = make_comment("A", a1)
    b = make_comment("B", make_comment("B1"))
    r = make_comment("R", a, b)
    return r, a, a1, b


class TestFocusThread:
    """Tests for the focus_thread handoff."""

    def test_focus_starts_with_empty_collapse_set(self):
        """Focusing A1 with ancestors [R, A] never inherits collapsed B."""
        # Arrange
        r, a, a1, _ = _thread()
        navigator = ThreadNavigator()
        navigator.toggle(CommentId("B"))

        # Act
        request = focus_thread(a1, (r, a))
        navigator.push(request)

        # Assert
        assert request.anchor is a1
        assert [n.id for n in request.ancestors] == ["R", "A"]
        assert len(request.collapsed) == 0
        assert len(navigator.collapsed) == 0
        assert CommentId("B") in navigator.root_collapsed

    def test_context_chain_appends_anchor(self):
        r, a, a1, _ = _thread()

        request = focus_thread(a1, (r, a))

        assert [n.id for n in request.context_chain] == ["R", "A", "A1"]


class TestThreadNavigator:
    """Tests for ThreadNavigator view state."""

    def test_starts_in_normal_view(self):
        navigator = ThreadNavigator()

        assert not navigator.is_focused
        assert navigator.current is None
        assert navigator.depth == 0

    def test_continue_thread_opens_focused_view(self):
        # Arrange
        r, *_ = _thread()
        plan = render(r, CollapseSet(), max_depth=1)
        item = next(row for row in plan.rows() if isinstance(row, ContinueItem))
        navigator = ThreadNavigator()

        # Act
        request = navigator.continue_thread(item)

        # Assert
        assert navigator.is_focused
        assert navigator.current.request is request
        assert request.anchor.id == "A"
        assert [n.id for n in request.ancestors] == ["R"]

    def test_toggle_only_affects_current_view(self):
        r, a, a1, _ = _thread()
        navigator = ThreadNavigator()
        navigator.push(focus_thread(a1, (r, a)))

        navigator.toggle(CommentId("A1a"))

        assert CommentId("A1a") in navigator.collapsed
        assert len(navigator.root_collapsed) == 0

    def test_back_discards_focused_collapse_state(self):
        """Leaving and re-entering a focused view starts from an empty set."""
        # Arrange
        r, a, a1, _ = _thread()
        navigator = ThreadNavigator()
        navigator.toggle(CommentId("B"))
        navigator.push(focus_thread(a1, (r, a)))
        navigator.toggle(CommentId("A1a"))

        # Act
        popped = navigator.back()
        navigator.push(focus_thread(a1, (r, a)))

        # Assert
        assert popped.anchor.id == "A1"
        assert len(navigator.collapsed) == 0
        assert CommentId("B") in navigator.root_collapsed

    def test_back_in_normal_view_returns_none(self):
        navigator = ThreadNavigator()

        assert navigator.back() is None

    def test_nested_focus_stacks_views(self):
        r, a, a1, _ = _thread()
        navigator = ThreadNavigator()

        navigator.push(focus_thread(a, (r,)))
        navigator.push(focus_thread(a1, (r, a)))

        assert navigator.depth == 2
        navigator.back()
        assert navigator.current.request.anchor.id == "A"

    def test_reset_returns_to_normal_view(self):
        r, a, a1, _ = _thread()
        navigator = ThreadNavigator()
        navigator.toggle(CommentId("A"))
        navigator.push(focus_thread(a1, (r, a)))

        navigator.reset()

        assert not navigator.is_focused
        assert len(navigator.root_collapsed) == 0

    def test_rebase_picks_up_new_nodes(self):
        """After a refresh focused views point at the fresh anchor."""
        # Arrange
        r, a, a1, _ = _thread()
        navigator = ThreadNavigator()
        navigator.toggle(CommentId("gone"))
        navigator.push(focus_thread(a1, (r, a)))
        fresh_a1 = make_comment("A1", make_comment("A1a"), make_comment("A1b"))
        fresh = (make_comment("R", make_comment("A", fresh_a1)),)

        # Act
        navigator.rebase(fresh)

        # Assert
        assert navigator.current.request.anchor is fresh_a1
        assert [n.id for n in navigator.current.request.ancestors] == ["R", "A"]
        assert len(navigator.root_collapsed) == 0

    def test_rebase_keeps_snapshot_when_anchor_vanishes(self):
        r, a, a1, _ = _thread()
        navigator = ThreadNavigator()
        navigator.push(focus_thread(a1, (r, a)))

        navigator.rebase((make_comment("other"),))

        assert navigator.current.request.anchor is a1
