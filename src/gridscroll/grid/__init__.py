"""Cell-grid primitives the scrolling widgets render into."""

from .block import Block
from .buffer import Buffer, Cell, copy_buffer
from .geometry import Position, Rect, Size

__all__ = ["Block", "Buffer", "Cell", "copy_buffer", "Position", "Rect", "Size"]
