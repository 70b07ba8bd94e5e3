"""
Capabilities a widget needs to take part in scrolling.

The scrolled wrapper and the view/viewport windows depend only on these
protocols, never on concrete content types. A content widget implements
``ScrollingWidget`` (does this area need scrollbars?) and its state
implements ``ScrollingState`` (offsets, limits and page sizes per axis).

``ScrollingStateMixin`` supplies the derived operations (step size and
relative scrolling) from the basic accessors.
"""

from typing import Any, Protocol, TypeVar, runtime_checkable

from ..grid.buffer import Buffer
from ..grid.geometry import Rect

StateT_contra = TypeVar("StateT_contra", contravariant=True)


@runtime_checkable
class Widget(Protocol):
    """Stateless content rendered into an area."""

    def render(self, area: Rect, buf: Buffer) -> None: ...


@runtime_checkable
class StatefulWidget(Protocol[StateT_contra]):
    """Content rendered with a mutable state of its own."""

    def render(self, area: Rect, buf: Buffer, state: StateT_contra) -> None: ...


@runtime_checkable
class ScrollingWidget(Protocol[StateT_contra]):
    """Extent query for content that can scroll."""

    def need_scroll(self, area: Rect, state: StateT_contra) -> tuple[bool, bool]:
        """Report (needs_horizontal, needs_vertical) for the given content area."""
        ...


@runtime_checkable
class ScrollingState(Protocol):
    """Per-axis offset accessors of a scrollable widget's state."""

    def vertical_max_offset(self) -> int: ...

    def vertical_offset(self) -> int: ...

    def vertical_page(self) -> int: ...

    def vertical_scroll(self) -> int: ...

    def horizontal_max_offset(self) -> int: ...

    def horizontal_offset(self) -> int: ...

    def horizontal_page(self) -> int: ...

    def horizontal_scroll(self) -> int: ...

    def set_vertical_offset(self, offset: int) -> bool: ...

    def set_horizontal_offset(self, offset: int) -> bool: ...

    def scroll_up(self, n: int) -> bool: ...

    def scroll_down(self, n: int) -> bool: ...

    def scroll_left(self, n: int) -> bool: ...

    def scroll_right(self, n: int) -> bool: ...


class ScrollingStateMixin:
    """Default step sizes and relative scrolling for ScrollingState implementations.

    Subclasses provide the max_offset/offset/page accessors and the two
    setters, which own the upper limit (including any overscroll); step
    sizes default to a tenth of the page, at least 1.
    """

    def vertical_scroll(self: Any) -> int:
        return max(self.vertical_page() // 10, 1)

    def horizontal_scroll(self: Any) -> int:
        return max(self.horizontal_page() // 10, 1)

    def scroll_up(self: Any, n: int) -> bool:
        return self.set_vertical_offset(max(0, self.vertical_offset() - n))

    def scroll_down(self: Any, n: int) -> bool:
        return self.set_vertical_offset(self.vertical_offset() + n)

    def scroll_left(self: Any, n: int) -> bool:
        return self.set_horizontal_offset(max(0, self.horizontal_offset() - n))

    def scroll_right(self: Any, n: int) -> bool:
        return self.set_horizontal_offset(self.horizontal_offset() + n)
