"""Enumerations shared by the scrolling components."""

from enum import Enum


class ScrollbarOrientation(Enum):
    """Where a scrollbar track is drawn."""

    VERTICAL_RIGHT = "vertical_right"
    VERTICAL_LEFT = "vertical_left"
    HORIZONTAL_BOTTOM = "horizontal_bottom"
    HORIZONTAL_TOP = "horizontal_top"

    @property
    def is_vertical(self) -> bool:
        return self in (ScrollbarOrientation.VERTICAL_RIGHT, ScrollbarOrientation.VERTICAL_LEFT)

    @property
    def is_horizontal(self) -> bool:
        return not self.is_vertical


class ScrollbarType(Enum):
    """Scrollbar behaviour when there is nothing to scroll (max_offset == 0).

    Space for the scrollbar is reserved in every case.
    """

    # Render a regular scrollbar anyway.
    SHOW = "show"
    # Fill the reserved area with the no-scroll symbol.
    MINIMAL = "minimal"
    # Draw nothing; the widget paints the area itself.
    NO_RENDER = "no_render"


class ScrollbarPolicy(Enum):
    """Combined with the content's need_scroll() answer, decides what is shown."""

    ALWAYS = "always"
    AS_NEEDED = "as_needed"
    NEVER = "never"

    def apply(self, scroll: bool) -> bool:
        """Apply the policy to the scroll flag reported by the content."""
        if self is ScrollbarPolicy.ALWAYS:
            return True
        if self is ScrollbarPolicy.NEVER:
            return False
        return scroll


class VScrollPosition(Enum):
    """Side of the vertical scrollbar."""

    LEFT = "left"
    RIGHT = "right"

    def orientation(self) -> ScrollbarOrientation:
        if self is VScrollPosition.LEFT:
            return ScrollbarOrientation.VERTICAL_LEFT
        return ScrollbarOrientation.VERTICAL_RIGHT


class HScrollPosition(Enum):
    """Side of the horizontal scrollbar."""

    TOP = "top"
    BOTTOM = "bottom"

    def orientation(self) -> ScrollbarOrientation:
        if self is HScrollPosition.TOP:
            return ScrollbarOrientation.HORIZONTAL_TOP
        return ScrollbarOrientation.HORIZONTAL_BOTTOM


class ScrollDirection(Enum):
    """Direction of a relative offset change."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def is_forward(self) -> bool:
        return self in (ScrollDirection.DOWN, ScrollDirection.RIGHT)
