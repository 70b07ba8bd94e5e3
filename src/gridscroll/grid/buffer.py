"""Off-screen cell buffer.

A ``Buffer`` is a rectangular grid of ``Cell`` objects addressed with
absolute terminal coordinates. Styles are ``rich.style.Style`` values and are
*patched* onto cells: setting a style combines it with what the cell already
carries instead of replacing it.
"""

from dataclasses import dataclass, field, replace
from typing import Optional

from rich.style import Style

from .geometry import PositionLike, Rect


@dataclass
class Cell:
    """A single grid cell: one displayed symbol plus its style."""

    symbol: str = " "
    style: Style = field(default_factory=Style.null)

    def set_symbol(self, symbol: str) -> "Cell":
        self.symbol = symbol
        return self

    def set_style(self, style: Optional[Style]) -> "Cell":
        if style is not None:
            self.style = self.style + style
        return self

    def reset(self) -> None:
        self.symbol = " "
        self.style = Style.null()


class Buffer:
    """Mutable 2-D cell surface covering ``area``."""

    def __init__(self, area: Rect, cells: list[Cell]):
        if len(cells) != area.area:
            raise ValueError(
                f"Buffer for {area} needs {area.area} cells, got {len(cells)}"
            )
        self.area = area
        self.cells = cells

    @classmethod
    def empty(cls, area: Rect) -> "Buffer":
        return cls(area, [Cell() for _ in range(area.area)])

    @classmethod
    def filled(cls, area: Rect, cell: Cell) -> "Buffer":
        return cls(area, [replace(cell) for _ in range(area.area)])

    def index_of(self, x: int, y: int) -> int:
        if not self.area.contains((x, y)):
            raise IndexError(f"Position ({x}, {y}) is outside the buffer area {self.area}")
        return (y - self.area.y) * self.area.width + (x - self.area.x)

    def get(self, x: int, y: int) -> Cell:
        return self.cells[self.index_of(x, y)]

    def __getitem__(self, pos: PositionLike) -> Cell:
        x, y = pos
        return self.get(x, y)

    def set_string(self, x: int, y: int, string: str, style: Optional[Style] = None) -> int:
        """Write ``string`` one character per cell, clipped at the right edge.

        Returns:
            The column after the last written cell
        """
        for char in string:
            if not self.area.contains((x, y)):
                break
            self.get(x, y).set_symbol(char).set_style(style)
            x += 1
        return x

    def set_style(self, area: Rect, style: Optional[Style]) -> None:
        """Patch ``style`` onto every cell of ``area`` that lies inside the buffer."""
        if style is None:
            return
        for pos in self.area.intersection(area).positions():
            self.get(*pos).set_style(style)

    def line(self, y: int) -> str:
        """Symbols of one buffer row joined into a string."""
        start = (y - self.area.y) * self.area.width
        return "".join(cell.symbol for cell in self.cells[start:start + self.area.width])

    def lines(self) -> list[str]:
        return [self.line(y) for y in range(self.area.top, self.area.bottom)]

    def rows(self) -> list[list[Cell]]:
        """Cells grouped by row, top to bottom."""
        width = self.area.width
        return [self.cells[i:i + width] for i in range(0, len(self.cells), width)] if width else []

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Buffer):
            return NotImplemented
        return self.area == other.area and self.cells == other.cells

    def __repr__(self) -> str:
        rows = "\n".join(f"    {line!r}," for line in self.lines())
        return f"Buffer({self.area},\n{rows}\n)"


def copy_buffer(
    view_area: Rect,
    source: Buffer,
    v_offset: int,
    h_offset: int,
    style: Style,
    area: Rect,
    buf: Buffer,
) -> None:
    """Copy an offset window of ``source`` into ``buf``.

    The window starts at ``(view_area.x + h_offset, view_area.y + v_offset)``
    in ``source`` and has the size of ``area``. It lands at ``area``'s position
    in ``buf``. Destination cells with no counterpart in ``source`` are reset
    and patched with ``style``.

    Args:
        view_area: Area the source buffer was rendered for
        source: Buffer holding the fully rendered content
        v_offset: Rows to skip at the top of the source
        h_offset: Columns to skip at the left of the source
        style: Fallback style for cells outside the source
        area: Destination area
        buf: Destination buffer
    """
    for row in range(area.height):
        for col in range(area.width):
            dst = (area.x + col, area.y + row)
            if not buf.area.contains(dst):
                continue
            src = (view_area.x + h_offset + col, view_area.y + v_offset + row)
            cell = buf[dst]
            if source.area.contains(src):
                src_cell = source[src]
                cell.symbol = src_cell.symbol
                cell.style = src_cell.style
            else:
                cell.reset()
                cell.set_style(style)
