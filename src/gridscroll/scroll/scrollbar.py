"""Scrollbar rendering.

``Scrollbar`` draws a track with begin/end arrows and a thumb. ``Scroll`` is
the indicator configuration a scrolling widget accepts for each axis it
scrolls, much like a border: the widget lays it out with ``layout_scroll``
and draws it with ``render_scroll``.
"""

import math
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Optional

from loguru import logger
from rich.cells import cell_len
from rich.style import Style

from ..grid.buffer import Buffer
from ..grid.geometry import Rect
from .state import ScrollState
from .types import ScrollbarOrientation, ScrollbarType

if TYPE_CHECKING:
    from ..core.config import ScrollbarConfig, StyleConfig

NO_SYMBOL_VERTICAL = "┊"
NO_SYMBOL_HORIZONTAL = "┈"


@dataclass(frozen=True)
class ScrollbarSymbols:
    track: str
    thumb: str
    begin: str
    end: str


DOUBLE_VERTICAL = ScrollbarSymbols(track="║", thumb="█", begin="▲", end="▼")
DOUBLE_HORIZONTAL = ScrollbarSymbols(track="═", thumb="█", begin="◄", end="►")
VERTICAL = ScrollbarSymbols(track="│", thumb="█", begin="↑", end="↓")
HORIZONTAL = ScrollbarSymbols(track="─", thumb="█", begin="←", end="→")


@dataclass(frozen=True)
class ScrollbarPosition:
    """What the scrollbar displays: a position within a content length.

    ``viewport_length`` of 0 means "use the track's own length".
    """

    content_length: int
    position: int = 0
    viewport_length: int = 0


def _round(value: float) -> int:
    # half away from zero; all values here are non-negative
    return math.floor(value + 0.5)


@dataclass
class Scrollbar:
    """Renders begin arrow, track, thumb, track, end arrow along one edge of an area."""

    orientation: ScrollbarOrientation = ScrollbarOrientation.VERTICAL_RIGHT
    thumb_symbol: str = DOUBLE_VERTICAL.thumb
    thumb_style: Style = field(default_factory=Style.null)
    track_symbol: Optional[str] = DOUBLE_VERTICAL.track
    track_style: Style = field(default_factory=Style.null)
    begin_symbol: Optional[str] = DOUBLE_VERTICAL.begin
    begin_style: Style = field(default_factory=Style.null)
    end_symbol: Optional[str] = DOUBLE_VERTICAL.end
    end_style: Style = field(default_factory=Style.null)

    @classmethod
    def for_orientation(cls, orientation: ScrollbarOrientation) -> "Scrollbar":
        """Scrollbar with the default double-line symbols for ``orientation``."""
        symbols = DOUBLE_VERTICAL if orientation.is_vertical else DOUBLE_HORIZONTAL
        return cls(
            orientation=orientation,
            thumb_symbol=symbols.thumb,
            track_symbol=symbols.track,
            begin_symbol=symbols.begin,
            end_symbol=symbols.end,
        )

    def bar_area(self, area: Rect) -> Rect:
        if self.orientation is ScrollbarOrientation.VERTICAL_LEFT:
            return area.first_column()
        if self.orientation is ScrollbarOrientation.VERTICAL_RIGHT:
            return area.last_column()
        if self.orientation is ScrollbarOrientation.HORIZONTAL_TOP:
            return area.first_row()
        return area.last_row()

    def track_length(self, area: Rect) -> int:
        """Length of the track without the arrow heads."""
        arrows = cell_len(self.begin_symbol or "") + cell_len(self.end_symbol or "")
        length = area.height if self.orientation.is_vertical else area.width
        return max(0, length - arrows)

    def part_lengths(self, area: Rect, position: ScrollbarPosition) -> tuple[int, int, int]:
        """Lengths of (track before thumb, thumb, track after thumb)."""
        track_length = self.track_length(area)
        if position.viewport_length:
            viewport_length = position.viewport_length
        elif self.orientation.is_vertical:
            viewport_length = area.height
        else:
            viewport_length = area.width

        max_position = max(0, position.content_length - 1)
        start_position = min(max(position.position, 0), max_position)
        max_viewport_position = max_position + viewport_length
        end_position = start_position + viewport_length

        thumb_start = start_position * track_length / max_viewport_position
        thumb_end = end_position * track_length / max_viewport_position
        thumb_start = min(max(_round(thumb_start), 0), track_length - 1)
        thumb_end = min(max(_round(thumb_end), 0), track_length)

        thumb_length = max(thumb_end - thumb_start, 1)
        track_end_length = max(0, track_length - (thumb_start + thumb_length))
        return thumb_start, thumb_length, track_end_length

    def render(self, area: Rect, buf: Buffer, position: ScrollbarPosition) -> None:
        if position.content_length == 0 or self.track_length(area) == 0:
            return

        track_start, thumb_length, track_end = self.part_lengths(area, position)
        track = (self.track_symbol, self.track_style) if self.track_symbol else None

        parts: list[Optional[tuple[str, Style]]] = []
        if self.begin_symbol:
            parts.append((self.begin_symbol, self.begin_style))
        parts.extend([track] * track_start)
        parts.extend([(self.thumb_symbol, self.thumb_style)] * thumb_length)
        parts.extend([track] * track_end)
        if self.end_symbol:
            parts.append((self.end_symbol, self.end_style))

        for pos, part in zip(self.bar_area(area).positions(), parts):
            if part is not None:
                symbol, style = part
                buf.set_string(pos.x, pos.y, symbol, style)


@dataclass
class ScrollStyle:
    """Collected symbols and styles for a Scroll."""

    thumb_symbol: Optional[str] = None
    thumb_style: Optional[Style] = None
    track_symbol: Optional[str] = None
    track_style: Optional[Style] = None
    begin_symbol: Optional[str] = None
    begin_style: Optional[Style] = None
    end_symbol: Optional[str] = None
    end_style: Optional[Style] = None
    # Used instead of the scrollbar when there is nothing to scroll.
    no_symbol: Optional[str] = None
    no_style: Optional[Style] = None

    def apply_to(self, scrollbar: Scrollbar) -> Scrollbar:
        """Override the scrollbar's defaults with every value set here."""
        overrides = {
            name: getattr(self, name)
            for name in (
                "thumb_symbol",
                "thumb_style",
                "track_symbol",
                "track_style",
                "begin_symbol",
                "begin_style",
                "end_symbol",
                "end_style",
            )
            if getattr(self, name) is not None
        }
        return replace(scrollbar, **overrides)

    def with_symbols(self, symbols: ScrollbarSymbols) -> "ScrollStyle":
        return replace(
            self,
            thumb_symbol=symbols.thumb,
            track_symbol=symbols.track,
            begin_symbol=symbols.begin,
            end_symbol=symbols.end,
        )

    def with_style(self, style: Style) -> "ScrollStyle":
        """Same style for every part of the scrollbar."""
        return replace(
            self,
            thumb_style=style,
            track_style=style,
            begin_style=style,
            end_style=style,
            no_style=style,
        )


@dataclass
class Scroll:
    """Scrollbar configuration for one axis of a scrolling widget."""

    policy: ScrollbarType = ScrollbarType.MINIMAL
    orientation: ScrollbarOrientation = ScrollbarOrientation.VERTICAL_RIGHT
    # Cells left free before/after the track.
    start_margin: int = 0
    end_margin: int = 0
    overscroll_by: Optional[int] = None
    scroll_by: Optional[int] = None
    style: ScrollStyle = field(default_factory=ScrollStyle)

    @classmethod
    def from_config(
        cls,
        config: "ScrollbarConfig",
        orientation: ScrollbarOrientation = ScrollbarOrientation.VERTICAL_RIGHT,
        style: Optional["StyleConfig"] = None,
    ) -> "Scroll":
        return cls(
            policy=config.policy,
            orientation=orientation,
            start_margin=config.start_margin,
            end_margin=config.end_margin,
            overscroll_by=config.overscroll_by,
            scroll_by=config.scroll_by,
            style=style.to_scroll_style() if style else ScrollStyle(),
        )

    @property
    def is_vertical(self) -> bool:
        return self.orientation.is_vertical

    @property
    def is_horizontal(self) -> bool:
        return self.orientation.is_horizontal

    def override_vertical(self) -> "Scroll":
        """Copy with a vertical orientation; horizontal ones become VERTICAL_RIGHT."""
        if self.is_vertical:
            return replace(self)
        return replace(self, orientation=ScrollbarOrientation.VERTICAL_RIGHT)

    def override_horizontal(self) -> "Scroll":
        """Copy with a horizontal orientation; vertical ones become HORIZONTAL_BOTTOM."""
        if self.is_horizontal:
            return replace(self)
        return replace(self, orientation=ScrollbarOrientation.HORIZONTAL_BOTTOM)

    def scrollbar(self) -> Scrollbar:
        return self.style.apply_to(Scrollbar.for_orientation(self.orientation))

    def no_symbol(self) -> str:
        if self.style.no_symbol is not None:
            return self.style.no_symbol
        return NO_SYMBOL_VERTICAL if self.is_vertical else NO_SYMBOL_HORIZONTAL


def render_scroll(scroll: Scroll, area: Rect, buf: Buffer, state: ScrollState) -> None:
    """Render ``scroll`` into ``area`` and record the area and settings in ``state``."""
    state.orientation = scroll.orientation
    if scroll.overscroll_by is not None:
        state.overscroll_by = scroll.overscroll_by
    if scroll.scroll_by is not None:
        state.scroll_by = scroll.scroll_by
    state.area = area

    position = ScrollbarPosition(
        content_length=state.max_offset,
        position=state.offset,
        viewport_length=state.page_len,
    )

    if state.max_offset != 0 or scroll.policy is ScrollbarType.SHOW:
        if not area.is_empty():
            scroll.scrollbar().render(area, buf, position)
    elif scroll.policy is ScrollbarType.MINIMAL:
        symbol = scroll.no_symbol()
        for pos in buf.area.intersection(area).positions():
            cell = buf[pos]
            cell.set_style(scroll.style.no_style)
            cell.set_symbol(symbol)
    else:
        logger.debug("nothing to scroll, leaving scrollbar area to the widget")
