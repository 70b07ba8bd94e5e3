"""Rectangle, position and size value objects for the cell grid."""

from dataclasses import dataclass
from typing import NamedTuple, Union


class Position(NamedTuple):
    """A cell coordinate (column, row)."""

    x: int
    y: int


class Size(NamedTuple):
    """Width and height in cells."""

    width: int
    height: int


PositionLike = Union[Position, tuple[int, int]]


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle of cells.

    Coordinates and extents are non-negative; ``right`` and ``bottom`` are
    exclusive.
    """

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @property
    def left(self) -> int:
        return self.x

    @property
    def top(self) -> int:
        return self.y

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def contains(self, pos: PositionLike) -> bool:
        """Check whether a cell coordinate lies inside the rectangle."""
        x, y = pos
        return self.x <= x < self.right and self.y <= y < self.bottom

    def intersection(self, other: "Rect") -> "Rect":
        """Overlap of two rectangles; empty (zero-sized) if they are disjoint."""
        x1 = max(self.x, other.x)
        y1 = max(self.y, other.y)
        x2 = min(self.right, other.right)
        y2 = min(self.bottom, other.bottom)
        return Rect(x1, y1, max(0, x2 - x1), max(0, y2 - y1))

    def intersects(self, other: "Rect") -> bool:
        return not self.intersection(other).is_empty()

    def shrink(self, left: int = 0, top: int = 0, right: int = 0, bottom: int = 0) -> "Rect":
        """Inset each side, saturating at zero extent."""
        return Rect(
            self.x + left,
            self.y + top,
            max(0, self.width - left - right),
            max(0, self.height - top - bottom),
        )

    def first_column(self) -> "Rect":
        return Rect(self.x, self.y, 1 if self.width > 0 else 0, self.height)

    def last_column(self) -> "Rect":
        return Rect(max(self.x, self.right - 1), self.y, 1 if self.width > 0 else 0, self.height)

    def first_row(self) -> "Rect":
        return Rect(self.x, self.y, self.width, 1 if self.height > 0 else 0)

    def last_row(self) -> "Rect":
        return Rect(self.x, max(self.y, self.bottom - 1), self.width, 1 if self.height > 0 else 0)

    def positions(self):
        """Iterate all cell coordinates, row by row."""
        for y in range(self.y, self.bottom):
            for x in range(self.x, self.right):
                yield Position(x, y)
