"""
Scrolling for widgets without builtin support.

The content is rendered into a separate buffer of its full natural size
(``view_size``), anchored at the drawing position. A window of that buffer,
offset by the state's h/v offsets, is then copied into the real buffer.
Cells outside the rendered content get the fallback style.

``View`` takes a stateless widget, ``Viewport`` a stateful one; both work the
same otherwise.
"""

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from rich.style import Style

from ..events.outcome import NOT_USED, ScrollOutcome
from ..grid.buffer import Buffer, copy_buffer
from ..grid.geometry import Rect, Size
from .capability import ScrollingStateMixin

W = TypeVar("W")


def _limit_window_offset(current: int, offset: int, extent: int) -> int:
    if current < extent:
        return min(max(0, offset), max(0, extent - 1))
    return max(0, extent - 1)


@dataclass
class ViewState(ScrollingStateMixin):
    """Window offsets into the rendered content."""

    # Drawing area.
    area: Rect = field(default_factory=Rect)
    # Area the content sees: the drawing position with the view size.
    view_area: Rect = field(default_factory=Rect)
    h_offset: int = 0
    v_offset: int = 0

    def vertical_max_offset(self) -> int:
        return max(0, self.view_area.height - self.area.height)

    def vertical_offset(self) -> int:
        return self.v_offset

    def vertical_page(self) -> int:
        return self.area.height

    def horizontal_max_offset(self) -> int:
        return max(0, self.view_area.width - self.area.width)

    def horizontal_offset(self) -> int:
        return self.h_offset

    def horizontal_page(self) -> int:
        return self.area.width

    def set_vertical_offset(self, offset: int) -> bool:
        """Set the offset, bounded by the rendered height itself."""
        old = self.v_offset
        self.v_offset = _limit_window_offset(self.v_offset, offset, self.view_area.height)
        return old != self.v_offset

    def set_horizontal_offset(self, offset: int) -> bool:
        """Set the offset, bounded by the rendered width itself."""
        old = self.h_offset
        self.h_offset = _limit_window_offset(self.h_offset, offset, self.view_area.width)
        return old != self.h_offset

    def handle(self, event: Any, qualifier: Any) -> ScrollOutcome:
        # The window itself reacts to nothing; the Scrolled around it does.
        return NOT_USED


@dataclass
class ViewportState(ViewState):
    """ViewState plus the state of the wrapped stateful widget."""

    widget: Any = None


@dataclass
class _Window(Generic[W]):
    widget: W
    # Natural size of the content; it always renders at this size.
    view_size: Size = Size(0, 0)
    # Style for cells outside the rendered content.
    style: Style = field(default_factory=Style.null)

    def need_scroll(self, area: Rect, state: Any) -> tuple[bool, bool]:
        return (
            area.width < self.view_size.width,
            area.height < self.view_size.height,
        )

    def _render_window(self, area: Rect, buf: Buffer, state: ViewState, render_inner) -> None:
        state.area = area
        state.view_area = Rect(area.x, area.y, self.view_size.width, self.view_size.height)

        tmp = Buffer.empty(state.view_area)
        render_inner(state.view_area, tmp)

        copy_buffer(
            state.view_area,
            tmp,
            state.v_offset,
            state.h_offset,
            self.style,
            area,
            buf,
        )


class View(_Window[W]):
    """Window onto a stateless widget rendered at its natural size."""

    def render(self, area: Rect, buf: Buffer, state: ViewState) -> None:
        self._render_window(area, buf, state, self.widget.render)


class Viewport(_Window[W]):
    """Window onto a stateful widget rendered at its natural size."""

    def render(self, area: Rect, buf: Buffer, state: ViewportState) -> None:
        self._render_window(
            area,
            buf,
            state,
            lambda view_area, tmp: self.widget.render(view_area, tmp, state.widget),
        )
