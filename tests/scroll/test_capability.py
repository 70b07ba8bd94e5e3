"""Tests for the scrolling capability protocols and their mixin."""

from gridscroll.scroll import ScrollingState, ScrollingWidget


class TestScrollingStateMixin:
    """Test relative scrolling supplied by the mixin."""

    def test_list_pair_implements_protocols(self, make_list):
        """The list widget and its state satisfy both capabilities."""
        widget, list_state = make_list(3)
        assert isinstance(widget, ScrollingWidget)
        assert isinstance(list_state, ScrollingState)

    def test_scroll_down_reaches_overscroll(self, make_list):
        """The setter owns the limit, so overscroll stays reachable."""
        _, list_state = make_list(20)
        list_state.v.max_offset = 10
        list_state.v.overscroll_by = 5

        assert list_state.scroll_down(100)

        assert list_state.vertical_offset() == 15

    def test_scroll_right_reaches_overscroll(self, make_list):
        """Horizontal scrolling is limited by the setter as well."""
        _, list_state = make_list(20)
        list_state.h.max_offset = 4
        list_state.h.overscroll_by = 2

        list_state.scroll_right(50)

        assert list_state.horizontal_offset() == 6

    def test_scroll_up_saturates(self, make_list):
        """Scrolling up never goes below 0."""
        _, list_state = make_list(20)
        list_state.v.max_offset = 10
        list_state.set_vertical_offset(3)

        assert list_state.scroll_up(10)
        assert list_state.vertical_offset() == 0
        assert not list_state.scroll_up(1)
