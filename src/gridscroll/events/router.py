"""Event routing between scrollbars and scrolled content.

Precedence for the Scrolled wrapper, first consumer wins:

1. a scrollbar drag in progress takes every drag event;
2. a left click on a scrollbar track jumps there and starts a drag;
3. the content's own handler (mouse-down and wheel only inside the content
   area, everything else unconditionally);
4. wheel scrolling anywhere over the widget.

Terminals do not reliably report button releases, so a drag ends with the
next plain pointer move instead of a mouse-up.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional

from loguru import logger

from ..grid.geometry import Rect
from ..scroll.state import ScrollState, hit_to_offset
from .event import MOUSE_ONLY, Inner, MouseEvent, MouseKind
from .outcome import NOT_USED, ScrollOutcome, ScrollOutcomeKind

if TYPE_CHECKING:
    from ..scroll.scrolled import ScrolledState


def _is_scroll_right(event: MouseEvent) -> bool:
    return event.kind is MouseKind.SCROLL_RIGHT or (
        event.kind is MouseKind.SCROLL_DOWN and event.has_alt()
    )


def _is_scroll_left(event: MouseEvent) -> bool:
    return event.kind is MouseKind.SCROLL_LEFT or (
        event.kind is MouseKind.SCROLL_UP and event.has_alt()
    )


def _is_scroll_down(event: MouseEvent) -> bool:
    return event.kind is MouseKind.SCROLL_DOWN and not event.has_alt()


def _is_scroll_up(event: MouseEvent) -> bool:
    return event.kind is MouseKind.SCROLL_UP and not event.has_alt()


def _vertical_pos(state: "ScrolledState", area: Rect, row: int) -> int:
    return hit_to_offset(row, area.y, area.height, state.widget.vertical_max_offset())


def _horizontal_pos(state: "ScrolledState", area: Rect, column: int) -> int:
    return hit_to_offset(column, area.x, area.width, state.widget.horizontal_max_offset())


def scrollbar_handling(state: "ScrolledState", event: MouseEvent) -> ScrollOutcome:
    """Drags in progress and fresh clicks on the scrollbar tracks."""
    if event.is_left_drag() and (state.v_drag or state.h_drag):
        changed = False
        if state.v_drag and state.v_scrollbar_area is not None:
            pos = _vertical_pos(state, state.v_scrollbar_area, event.row)
            changed = state.set_vertical_offset(pos)
        elif state.h_drag and state.h_scrollbar_area is not None:
            pos = _horizontal_pos(state, state.h_scrollbar_area, event.column)
            changed = state.set_horizontal_offset(pos)
        return ScrollOutcome.changed(changed)

    if event.is_left_down():
        v_area = state.v_scrollbar_area
        if v_area is not None and v_area.contains(event.position):
            state.v_drag = True
            state.h_drag = False
            logger.debug(f"vertical scrollbar drag started at row {event.row}")
            pos = _vertical_pos(state, v_area, event.row)
            return ScrollOutcome.changed(state.set_vertical_offset(pos))
        h_area = state.h_scrollbar_area
        if h_area is not None and h_area.contains(event.position):
            state.h_drag = True
            state.v_drag = False
            logger.debug(f"horizontal scrollbar drag started at column {event.column}")
            pos = _horizontal_pos(state, h_area, event.column)
            return ScrollOutcome.changed(state.set_horizontal_offset(pos))

    return NOT_USED


def forward_to_content(state: "ScrolledState", event: Any, qualifier: Any) -> ScrollOutcome:
    """Give the content a chance at the event.

    Clicks and wheel events compete with the scrolled wrapper and are only
    forwarded inside the content area.
    """
    handler = getattr(state.widget, "handle", None)
    if handler is None:
        return NOT_USED

    if isinstance(event, MouseEvent) and (event.is_left_down() or event.kind.is_wheel):
        if not state.view_area.contains(event.position):
            return NOT_USED

    return ScrollOutcome.wrap(handler(event, qualifier))


def wheel_handling(state: "ScrolledState", event: Any) -> ScrollOutcome:
    """Wheel scrolling over the whole widget area.

    ALT turns the vertical wheel into horizontal scrolling, since most
    terminals have no separate horizontal wheel event. At the scroll limits
    the event is left unused so an enclosing container can take it.
    """
    if not isinstance(event, MouseEvent) or not event.kind.is_wheel:
        return NOT_USED
    if not state.area.contains(event.position):
        return NOT_USED

    widget = state.widget
    if _is_scroll_right(event):
        changed = state.scroll_right(widget.horizontal_scroll())
    elif _is_scroll_left(event):
        changed = state.scroll_left(widget.horizontal_scroll())
    elif _is_scroll_down(event):
        changed = state.scroll_down(widget.vertical_scroll())
    elif _is_scroll_up(event):
        changed = state.scroll_up(widget.vertical_scroll())
    else:
        changed = False
    return ScrollOutcome.changed(True) if changed else NOT_USED


def handle_scrolled(state: "ScrolledState", event: Any, qualifier: Any) -> ScrollOutcome:
    """Handle an event for a Scrolled widget and its content.

    Args:
        state: State of the Scrolled widget
        event: Decoded input event
        qualifier: FOCUS_KEYS, MOUSE_ONLY or Inner(q); forwarded to the content

    Returns:
        The first consuming result: CHANGED/UNCHANGED from the scrollbars,
        INNER(result) from the content, or NOT_USED
    """
    if isinstance(qualifier, Inner):
        qualifier = qualifier.qualifier

    if isinstance(event, MouseEvent):
        if event.kind is MouseKind.MOVED and (state.v_drag or state.h_drag):
            logger.debug("scrollbar drag ended by pointer move")
            state.v_drag = False
            state.h_drag = False

        outcome = scrollbar_handling(state, event)
        if outcome.is_consumed():
            return outcome

    return forward_to_content(state, event, qualifier).or_else(
        lambda: wheel_handling(state, event)
    )


@dataclass
class ScrollArea:
    """Wheel and scrollbar handling for a widget area with up to two ScrollStates.

    Used by widgets that keep their own ScrollStates instead of being wrapped
    in Scrolled. The result carries the payload (UP(n), VPOS(n), ...) which the
    widget applies with ``apply_scroll_outcome``.
    """

    area: Rect
    h_scroll: Optional[ScrollState] = None
    v_scroll: Optional[ScrollState] = None

    def handle(self, event: Any, qualifier: Any = MOUSE_ONLY) -> ScrollOutcome:
        if not isinstance(event, MouseEvent):
            return NOT_USED
        inside = self.area.contains(event.position)

        if self.h_scroll is not None:
            if inside and _is_scroll_right(event):
                return ScrollOutcome.right(self.h_scroll.effective_step())
            if inside and _is_scroll_left(event):
                return ScrollOutcome.left(self.h_scroll.effective_step())
            outcome = self.h_scroll.handle(event, qualifier)
            if outcome.is_consumed():
                return outcome

        if self.v_scroll is not None:
            if inside and _is_scroll_down(event):
                return ScrollOutcome.down(self.v_scroll.effective_step())
            if inside and _is_scroll_up(event):
                return ScrollOutcome.up(self.v_scroll.effective_step())
            outcome = self.v_scroll.handle(event, qualifier)
            if outcome.is_consumed():
                return outcome

        return NOT_USED


def apply_scroll_outcome(
    outcome: ScrollOutcome,
    h_scroll: Optional[ScrollState] = None,
    v_scroll: Optional[ScrollState] = None,
) -> ScrollOutcome:
    """Apply a payload outcome to the matching ScrollState.

    Returns:
        CHANGED/UNCHANGED for payloads that were applied, the outcome itself
        for anything else (including payloads for an axis that is missing)
    """
    kind = outcome.kind
    if v_scroll is not None:
        if kind is ScrollOutcomeKind.UP:
            return ScrollOutcome.changed(v_scroll.scroll_up(outcome.value))
        if kind is ScrollOutcomeKind.DOWN:
            return ScrollOutcome.changed(v_scroll.scroll_down(outcome.value))
        if kind is ScrollOutcomeKind.VPOS:
            return ScrollOutcome.changed(v_scroll.set_offset(outcome.value))
    if h_scroll is not None:
        if kind is ScrollOutcomeKind.LEFT:
            return ScrollOutcome.changed(h_scroll.scroll_left(outcome.value))
        if kind is ScrollOutcomeKind.RIGHT:
            return ScrollOutcome.changed(h_scroll.scroll_right(outcome.value))
        if kind is ScrollOutcomeKind.HPOS:
            return ScrollOutcome.changed(h_scroll.set_offset(outcome.value))
    return outcome
