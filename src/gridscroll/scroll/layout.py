"""Scrollbar layout.

Places up to two scrollbar tracks and the content interior inside an outer
area so that the tracks, a border and the interior never overlap.
"""

from typing import Optional

from ..core.errors import OrientationMismatchError
from ..grid.block import Block
from ..grid.geometry import Rect
from .scrollbar import Scroll
from .types import ScrollbarOrientation


def layout_scroll(
    area: Rect,
    block: Optional[Block] = None,
    h_scroll: Optional[Scroll] = None,
    v_scroll: Optional[Scroll] = None,
) -> tuple[Rect, Rect, Rect]:
    """Calculate the areas for the given scrollbars and the content.

    One cell of margin is reserved on each side that has a border or a
    scrollbar, which keeps the corners free when both scrollbars are shown.

    Args:
        area: Outer area of the widget
        block: Border drawn around the widget, if any
        h_scroll: Horizontal scrollbar, if shown
        v_scroll: Vertical scrollbar, if shown

    Returns:
        (h_area, v_area, inner_area); a missing scrollbar gets an empty area

    Raises:
        OrientationMismatchError: If h_scroll is vertical or v_scroll is horizontal
    """
    if h_scroll is not None and not h_scroll.is_horizontal:
        raise OrientationMismatchError("horizontal", h_scroll.orientation)
    if v_scroll is not None and not v_scroll.is_vertical:
        raise OrientationMismatchError("vertical", v_scroll.orientation)

    margin = 1 if block is not None else 0
    margin_left = margin_right = margin_top = margin_bottom = margin

    if v_scroll is not None:
        if v_scroll.orientation is ScrollbarOrientation.VERTICAL_LEFT:
            margin_left = 1
        else:
            margin_right = 1
    if h_scroll is not None:
        if h_scroll.orientation is ScrollbarOrientation.HORIZONTAL_TOP:
            margin_top = 1
        else:
            margin_bottom = 1

    if h_scroll is not None:
        if h_scroll.orientation is ScrollbarOrientation.HORIZONTAL_TOP:
            row = area.y
        else:
            row = area.y + max(0, area.height - 1)
        h_area = Rect(
            area.x + margin_left + h_scroll.start_margin,
            row,
            max(
                0,
                area.width
                - margin_left
                - margin_right
                - h_scroll.start_margin
                - h_scroll.end_margin,
            ),
            1 if area.height > 0 else 0,
        )
    else:
        h_area = Rect(area.x, area.y, 0, 0)

    if v_scroll is not None:
        if v_scroll.orientation is ScrollbarOrientation.VERTICAL_LEFT:
            column = area.x
        else:
            column = area.x + max(0, area.width - 1)
        v_area = Rect(
            column,
            area.y + margin_top + v_scroll.start_margin,
            1 if area.width > 0 else 0,
            max(
                0,
                area.height
                - margin_top
                - margin_bottom
                - v_scroll.start_margin
                - v_scroll.end_margin,
            ),
        )
    else:
        v_area = Rect(area.x, area.y, 0, 0)

    inner = area.shrink(margin_left, margin_top, margin_right, margin_bottom)
    return h_area, v_area, inner
