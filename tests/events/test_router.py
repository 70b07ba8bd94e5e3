"""Tests for ScrollArea routing and outcome application."""

from gridscroll.events import (
    CHANGED,
    MOUSE_ONLY,
    NOT_USED,
    UNCHANGED,
    KeyEvent,
    MouseEvent,
    MouseKind,
    Outcome,
    ScrollOutcome,
    is_consumed,
)
from gridscroll.events.event import KeyModifiers
from gridscroll.events.router import ScrollArea, apply_scroll_outcome
from gridscroll.grid import Rect
from gridscroll.scroll import ScrollbarOrientation, ScrollState


def make_area() -> ScrollArea:
    return ScrollArea(
        area=Rect(0, 0, 10, 10),
        h_scroll=ScrollState(
            area=Rect(0, 9, 9, 1),
            orientation=ScrollbarOrientation.HORIZONTAL_BOTTOM,
            max_offset=40,
            page_len=9,
        ),
        v_scroll=ScrollState(area=Rect(9, 0, 1, 9), max_offset=50, page_len=20),
    )


class TestScrollArea:
    """Test wheel and scrollbar handling for widgets with their own ScrollStates."""

    def test_wheel_inside_area(self):
        """Wheel events anywhere in the area become step requests."""
        scroll_area = make_area()
        assert scroll_area.handle(MouseEvent(MouseKind.SCROLL_DOWN, 3, 3)) == ScrollOutcome.down(2)
        assert scroll_area.handle(MouseEvent(MouseKind.SCROLL_UP, 3, 3)) == ScrollOutcome.up(2)

    def test_horizontal_wheel_checked_first(self):
        """ALT + wheel goes to the horizontal scrollbar."""
        scroll_area = make_area()
        event = MouseEvent(MouseKind.SCROLL_UP, 3, 3, modifiers=KeyModifiers.ALT)
        assert scroll_area.handle(event) == ScrollOutcome.left(1)
        assert scroll_area.handle(MouseEvent(MouseKind.SCROLL_RIGHT, 3, 3)) == ScrollOutcome.right(1)

    def test_click_on_vertical_track(self):
        """A click on the vertical track gives an absolute position."""
        scroll_area = make_area()
        outcome = scroll_area.handle(MouseEvent(MouseKind.DOWN, 9, 8))
        assert outcome == ScrollOutcome.vpos(50)
        assert scroll_area.v_scroll.drag

    def test_outside_not_used(self):
        """Events outside the area and non-mouse events are not used."""
        scroll_area = make_area()
        assert scroll_area.handle(MouseEvent(MouseKind.SCROLL_DOWN, 30, 30)) == NOT_USED
        assert scroll_area.handle(KeyEvent("KEY_DOWN")) == NOT_USED

    def test_click_then_apply(self):
        """Applying the payload moves the matching ScrollState."""
        scroll_area = make_area()
        outcome = scroll_area.handle(MouseEvent(MouseKind.DOWN, 9, 4), MOUSE_ONLY)
        result = apply_scroll_outcome(outcome, scroll_area.h_scroll, scroll_area.v_scroll)
        assert result == CHANGED
        assert scroll_area.v_scroll.offset == 21


class TestApplyScrollOutcome:
    """Test applying payload outcomes."""

    def test_relative_payloads(self):
        """UP/DOWN/LEFT/RIGHT scroll relative to the current offset."""
        h = ScrollState(max_offset=10, orientation=ScrollbarOrientation.HORIZONTAL_BOTTOM)
        v = ScrollState(max_offset=10)
        assert apply_scroll_outcome(ScrollOutcome.down(3), h, v) == CHANGED
        assert apply_scroll_outcome(ScrollOutcome.right(4), h, v) == CHANGED
        assert (h.offset, v.offset) == (4, 3)
        assert apply_scroll_outcome(ScrollOutcome.up(3), h, v) == CHANGED
        assert apply_scroll_outcome(ScrollOutcome.up(3), h, v) == UNCHANGED

    def test_absolute_payloads(self):
        """VPOS/HPOS set the offset, limited as usual."""
        v = ScrollState(max_offset=10)
        assert apply_scroll_outcome(ScrollOutcome.vpos(99), None, v) == CHANGED
        assert v.offset == 10

    def test_missing_axis_passes_through(self):
        """Payloads without a matching state are returned unchanged."""
        outcome = ScrollOutcome.hpos(3)
        assert apply_scroll_outcome(outcome, None, ScrollState()) is outcome
        assert apply_scroll_outcome(NOT_USED) is NOT_USED


class TestOutcome:
    """Test consumption of handler results."""

    def test_is_consumed(self):
        """Consumption for the supported result shapes."""
        assert not is_consumed(None)
        assert not is_consumed(False)
        assert is_consumed(True)
        assert not is_consumed(Outcome.NOT_USED)
        assert is_consumed(Outcome.UNCHANGED)
        assert is_consumed("anything else")

    def test_inner_delegates(self):
        """Wrapped content results are consumed if the inner result is."""
        assert not ScrollOutcome.wrap(Outcome.NOT_USED).is_consumed()
        assert ScrollOutcome.wrap(Outcome.CHANGED).is_consumed()
        assert ScrollOutcome.up(1).is_consumed()
        assert not NOT_USED.is_consumed()

    def test_or_else_short_circuits(self):
        """The fallback only runs when nothing was consumed."""
        calls = []

        def fallback():
            calls.append(1)
            return CHANGED

        assert UNCHANGED.or_else(fallback) is UNCHANGED
        assert calls == []
        assert NOT_USED.or_else(fallback) is CHANGED
        assert calls == [1]

    def test_changed_flag(self):
        """changed() maps a flag to CHANGED or UNCHANGED."""
        assert ScrollOutcome.changed(True) == CHANGED
        assert ScrollOutcome.changed(False) == UNCHANGED
