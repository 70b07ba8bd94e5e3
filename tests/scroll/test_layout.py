"""Tests for scrollbar layout."""

import pytest

from gridscroll.core.errors import OrientationMismatchError, ScrollError
from gridscroll.grid import Block, Rect
from gridscroll.scroll import Scroll, ScrollbarOrientation, layout_scroll

H_BOTTOM = Scroll(orientation=ScrollbarOrientation.HORIZONTAL_BOTTOM)
H_TOP = Scroll(orientation=ScrollbarOrientation.HORIZONTAL_TOP)
V_RIGHT = Scroll(orientation=ScrollbarOrientation.VERTICAL_RIGHT)
V_LEFT = Scroll(orientation=ScrollbarOrientation.VERTICAL_LEFT)


class TestLayoutScroll:
    """Test placement of tracks and interior."""

    def test_no_scrollbars(self):
        """Without chrome the interior is the whole area."""
        area = Rect(2, 2, 10, 5)
        h_area, v_area, inner = layout_scroll(area)
        assert inner == area
        assert h_area.is_empty()
        assert v_area.is_empty()

    def test_both_scrollbars_keep_corner_free(self):
        """Tracks and interior never overlap and the corner stays free."""
        area = Rect(0, 0, 10, 5)
        h_area, v_area, inner = layout_scroll(area, None, H_BOTTOM, V_RIGHT)
        assert h_area == Rect(0, 4, 9, 1)
        assert v_area == Rect(9, 0, 1, 4)
        assert inner == Rect(0, 0, 9, 4)
        assert not h_area.intersects(v_area)
        assert not inner.intersects(h_area)
        assert not inner.intersects(v_area)
        assert not any(r.contains((9, 4)) for r in (h_area, v_area, inner))

    def test_left_and_top(self):
        """Scrollbars on the left and top push the interior right and down."""
        h_area, v_area, inner = layout_scroll(Rect(0, 0, 10, 5), None, H_TOP, V_LEFT)
        assert h_area == Rect(1, 0, 9, 1)
        assert v_area == Rect(0, 1, 1, 4)
        assert inner == Rect(1, 1, 9, 4)

    def test_with_block(self):
        """The tracks lie on the border; the interior is inside it."""
        h_area, v_area, inner = layout_scroll(Rect(0, 0, 10, 5), Block(), H_BOTTOM, V_RIGHT)
        assert h_area == Rect(1, 4, 8, 1)
        assert v_area == Rect(9, 1, 1, 3)
        assert inner == Rect(1, 1, 8, 3)

    def test_start_end_margins(self):
        """Margins shorten the track at both ends."""
        scroll = Scroll(start_margin=1, end_margin=2)
        _, v_area, _ = layout_scroll(Rect(0, 0, 10, 5), v_scroll=scroll)
        assert v_area == Rect(9, 1, 1, 2)

    def test_tiny_area_saturates(self):
        """Areas too small for the chrome give empty rectangles."""
        _, v_area, inner = layout_scroll(Rect(0, 0, 1, 1), Block(), H_BOTTOM, V_RIGHT)
        assert inner.is_empty()
        assert v_area.height == 0

    def test_orientation_mismatch(self):
        """A vertical bar in the horizontal slot is rejected."""
        with pytest.raises(OrientationMismatchError) as exc_info:
            layout_scroll(Rect(0, 0, 10, 5), h_scroll=V_RIGHT)
        assert isinstance(exc_info.value, ScrollError)
        assert "horizontal" in str(exc_info.value)
        with pytest.raises(ValueError):
            layout_scroll(Rect(0, 0, 10, 5), v_scroll=H_TOP)
