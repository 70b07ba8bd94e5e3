"""Per-scrollbar offset model.

The current visible page is the pair (offset, page_len). The scroll limit is
``max_offset``: the largest offset at which a full page can still be shown.
The total content length is NOT ``max_offset + page_len`` in general, since
``page_len`` may differ for every offset (e.g. rows of varying height). Only
after rendering at ``offset == max_offset`` does that equality hold.
"""

from dataclasses import dataclass, field
from typing import Optional

from loguru import logger

from ..events.event import MouseEvent, MouseKind
from ..events.outcome import NOT_USED, UNCHANGED, ScrollOutcome
from ..grid.geometry import Rect
from .types import ScrollbarOrientation, ScrollDirection


def hit_to_offset(pos: int, origin: int, length: int, max_offset: int) -> int:
    """Map a clicked row/column on a scrollbar track to a content offset.

    The first and last cell of the track hold the arrow glyphs, so the usable
    span is ``length - 2`` starting one cell after ``origin``.

    Args:
        pos: Row or column that was hit
        origin: y or x of the track
        length: Height or width of the track
        max_offset: Largest reachable offset

    Returns:
        Offset proportional to the position on the usable span; 0 if the
        usable span is empty
    """
    corrected = max(0, pos - origin - 1)
    span = max(0, length - 2)
    if span == 0:
        return 0
    return (max_offset * corrected) // span


@dataclass
class ScrollState:
    """State of one scrollbar.

    ``offset <= max_offset + overscroll_by`` is maintained by every mutator
    here but not guaranteed for values written directly; widgets must cope
    with an offset past the end.
    """

    # Screen area of the scrollbar, rewritten on every render.
    area: Rect = field(default_factory=Rect)
    orientation: ScrollbarOrientation = ScrollbarOrientation.VERTICAL_RIGHT
    offset: int = 0
    # Largest offset at which a full page is still showable.
    max_offset: int = 0
    # Content units visible at the current offset.
    page_len: int = 0
    # Step for wheel scrolling; None means a tenth of the page.
    scroll_by: Optional[int] = None
    # Extra offset allowed beyond max_offset.
    overscroll_by: Optional[int] = None
    # Pointer drag on the track in progress.
    drag: bool = False

    @property
    def is_vertical(self) -> bool:
        return self.orientation.is_vertical

    @property
    def is_horizontal(self) -> bool:
        return self.orientation.is_horizontal

    def overscroll(self) -> int:
        return self.overscroll_by or 0

    def limit_offset(self, offset: int) -> int:
        """Offset limited to max_offset + overscroll_by."""
        return min(offset, self.max_offset + self.overscroll())

    limit = limit_offset

    def clamp_offset(self, offset: int) -> int:
        """Clamp a possibly negative offset into [0, max_offset + overscroll_by]."""
        return max(0, min(offset, self.max_offset + self.overscroll()))

    def set_offset(self, offset: int) -> bool:
        """Change the offset, limited to max_offset + overscroll_by.

        Due to overscroll the result may be an offset the widget cannot fill
        completely. The widget must deal with that.

        Returns:
            True if the stored offset changed
        """
        old = self.offset
        self.offset = self.limit_offset(max(0, offset))
        return old != self.offset

    def scroll_by_delta(self, n: int, direction: ScrollDirection) -> bool:
        """Move the offset by ``n`` towards ``direction``, never below 0."""
        old = self.offset
        if direction.is_forward:
            target = self.offset + n
        else:
            target = max(0, self.offset - n)
        self.offset = self.limit_offset(target)
        return old != self.offset

    def scroll_up(self, n: int) -> bool:
        return self.scroll_by_delta(n, ScrollDirection.UP)

    def scroll_down(self, n: int) -> bool:
        return self.scroll_by_delta(n, ScrollDirection.DOWN)

    def scroll_left(self, n: int) -> bool:
        return self.scroll_by_delta(n, ScrollDirection.LEFT)

    def scroll_right(self, n: int) -> bool:
        return self.scroll_by_delta(n, ScrollDirection.RIGHT)

    def scroll_to_pos(self, pos: int) -> bool:
        """Adjust the offset just enough to make ``pos`` visible.

        Does nothing if the position is already on the current page. An empty
        page counts as one unit so repeated calls settle on ``pos``.
        """
        old = self.offset
        page_len = max(self.page_len, 1)
        if pos >= self.offset + page_len:
            self.offset = max(0, pos - page_len + 1)
        elif pos < self.offset:
            self.offset = pos
        return old != self.offset

    scroll_to_visible = scroll_to_pos

    def effective_step(self) -> int:
        """Suggested scroll per wheel event; a tenth of the page by default, at least 1."""
        if self.scroll_by is not None:
            return max(self.scroll_by, 1)
        return max(self.page_len // 10, 1)

    def items_inserted(self, pos: int, n: int) -> None:
        """Account for ``n`` items inserted at ``pos``.

        The offset moves along when the insertion happened at or above it,
        so the content on screen stays where it is.
        """
        if self.offset >= pos:
            self.offset += n
        self.max_offset += n

    def items_removed(self, pos: int, n: int) -> None:
        """Account for ``n`` items removed at ``pos``."""
        if self.offset >= pos:
            self.offset = max(0, self.offset - n)
        self.max_offset = max(0, self.max_offset - n)

    def map_position_index(self, pos: int, base: int, length: int) -> int:
        """Map a screen row/column on this scrollbar's track to an offset."""
        return hit_to_offset(pos, base, length, self.max_offset)

    def _track_hit(self, event: MouseEvent) -> ScrollOutcome:
        if self.is_vertical:
            if event.row < self.area.y:
                return UNCHANGED
            return ScrollOutcome.vpos(
                self.map_position_index(event.row, self.area.y, self.area.height)
            )
        if event.column < self.area.x:
            return UNCHANGED
        return ScrollOutcome.hpos(
            self.map_position_index(event.column, self.area.x, self.area.width)
        )

    def handle(self, event: object, qualifier: object = None) -> ScrollOutcome:
        """Mouse handling for the scrollbar area alone.

        Produces position or step payloads the owning widget applies to
        whatever it scrolls; the state itself only tracks the drag.
        """
        if not isinstance(event, MouseEvent):
            return NOT_USED

        if event.kind in (MouseKind.MOVED, MouseKind.UP):
            if self.drag:
                logger.debug(f"scrollbar drag ended ({self.orientation.value})")
            self.drag = False
            return NOT_USED

        if self.drag and event.is_left_drag():
            return self._track_hit(event)

        if not self.area.contains(event.position):
            return NOT_USED

        if event.is_left_down():
            self.drag = True
            return self._track_hit(event)

        step = self.effective_step()
        if self.is_vertical and not event.has_alt():
            if event.kind is MouseKind.SCROLL_DOWN:
                return ScrollOutcome.down(step)
            if event.kind is MouseKind.SCROLL_UP:
                return ScrollOutcome.up(step)
        if self.is_horizontal:
            if event.kind is MouseKind.SCROLL_RIGHT or (
                event.kind is MouseKind.SCROLL_DOWN and event.has_alt()
            ):
                return ScrollOutcome.right(step)
            if event.kind is MouseKind.SCROLL_LEFT or (
                event.kind is MouseKind.SCROLL_UP and event.has_alt()
            ):
                return ScrollOutcome.left(step)
        return NOT_USED
