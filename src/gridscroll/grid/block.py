"""Decorative border drawn around a widget."""

from dataclasses import dataclass, field
from typing import Optional

from rich.style import Style

from .buffer import Buffer
from .geometry import Rect

# (top_left, top_right, bottom_left, bottom_right, horizontal, vertical)
PLAIN_BORDER = ("┌", "┐", "└", "┘", "─", "│")
ROUNDED_BORDER = ("╭", "╮", "╰", "╯", "─", "│")
DOUBLE_BORDER = ("╔", "╗", "╚", "╝", "═", "║")


@dataclass
class Block:
    """A one-cell border on all four sides with an optional title."""

    title: Optional[str] = None
    border_set: tuple[str, str, str, str, str, str] = PLAIN_BORDER
    border_style: Style = field(default_factory=Style.null)
    title_style: Optional[Style] = None

    def inner(self, area: Rect) -> Rect:
        """Area left inside the border."""
        return area.shrink(1, 1, 1, 1)

    def render(self, area: Rect, buf: Buffer) -> None:
        area = buf.area.intersection(area)
        if area.is_empty():
            return
        tl, tr, bl, br, horizontal, vertical = self.border_set

        for x in range(area.left, area.right):
            buf.get(x, area.top).set_symbol(horizontal).set_style(self.border_style)
            buf.get(x, area.bottom - 1).set_symbol(horizontal).set_style(self.border_style)
        for y in range(area.top, area.bottom):
            buf.get(area.left, y).set_symbol(vertical).set_style(self.border_style)
            buf.get(area.right - 1, y).set_symbol(vertical).set_style(self.border_style)

        buf.get(area.left, area.top).set_symbol(tl)
        buf.get(area.right - 1, area.top).set_symbol(tr)
        buf.get(area.left, area.bottom - 1).set_symbol(bl)
        buf.get(area.right - 1, area.bottom - 1).set_symbol(br)

        if self.title and area.width > 2:
            title = self.title[: area.width - 2]
            buf.set_string(area.left + 1, area.top, title, self.title_style or self.border_style)
