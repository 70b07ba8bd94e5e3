"""
Scrolled wrapper.

``Scrolled`` wraps content that implements ``ScrollingWidget`` (with a state
implementing ``ScrollingState``) and adds up to two scrollbars. Every frame it
asks the content which axes need scrolling, applies the scrollbar policies,
lays out the chrome, renders the content into what is left, and draws the
border and scrollbars on top.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Generic, Optional, TypeVar, Union

from loguru import logger
from rich.style import Style

from ..core.errors import OrientationMismatchError
from ..grid.block import Block
from ..grid.buffer import Buffer
from ..grid.geometry import Rect, Size
from .layout import layout_scroll
from .scrollbar import Scroll, ScrollbarPosition, ScrollStyle
from .types import HScrollPosition, ScrollbarOrientation, ScrollbarPolicy, VScrollPosition
from .view import View, Viewport, ViewportState, ViewState

if TYPE_CHECKING:
    from ..core.config import Config
    from ..events.outcome import ScrollOutcome

W = TypeVar("W")
S = TypeVar("S")


def _h_position(value: Union[HScrollPosition, ScrollbarOrientation]) -> HScrollPosition:
    if isinstance(value, ScrollbarOrientation):
        if not value.is_horizontal:
            raise OrientationMismatchError("horizontal", value)
        if value is ScrollbarOrientation.HORIZONTAL_TOP:
            return HScrollPosition.TOP
        return HScrollPosition.BOTTOM
    return value


def _v_position(value: Union[VScrollPosition, ScrollbarOrientation]) -> VScrollPosition:
    if isinstance(value, ScrollbarOrientation):
        if not value.is_vertical:
            raise OrientationMismatchError("vertical", value)
        if value is ScrollbarOrientation.VERTICAL_LEFT:
            return VScrollPosition.LEFT
        return VScrollPosition.RIGHT
    return value


@dataclass
class ScrolledState(Generic[S]):
    """State of a Scrolled widget.

    ``area``, ``view_area`` and the scrollbar areas are rewritten on every
    render; a scrollbar area is None when that scrollbar is not shown.
    """

    # State of the scrolled content.
    widget: S
    # Total screen area.
    area: Rect = field(default_factory=Rect)
    # Area the content was rendered into.
    view_area: Rect = field(default_factory=Rect)
    h_scrollbar_area: Optional[Rect] = None
    v_scrollbar_area: Optional[Rect] = None
    # Allowed overscroll in content units.
    v_overscroll: int = 0
    h_overscroll: int = 0
    # Pointer drag on a scrollbar in progress.
    v_drag: bool = False
    h_drag: bool = False

    def vertical_offset(self) -> int:
        return self.widget.vertical_offset()

    def horizontal_offset(self) -> int:
        return self.widget.horizontal_offset()

    def set_vertical_offset(self, offset: int) -> bool:
        """Change the offset, limited to max_offset + v_overscroll.

        With overscroll the offset may be past what the content can fill;
        the content must deal with that.
        """
        offset = min(offset, self.widget.vertical_max_offset() + self.v_overscroll)
        return self.widget.set_vertical_offset(offset)

    def set_horizontal_offset(self, offset: int) -> bool:
        """Change the offset, limited to max_offset + h_overscroll."""
        offset = min(offset, self.widget.horizontal_max_offset() + self.h_overscroll)
        return self.widget.set_horizontal_offset(offset)

    def scroll_up(self, n: int) -> bool:
        return self.set_vertical_offset(max(0, self.vertical_offset() - n))

    def scroll_down(self, n: int) -> bool:
        return self.set_vertical_offset(self.vertical_offset() + n)

    def scroll_left(self, n: int) -> bool:
        return self.set_horizontal_offset(max(0, self.horizontal_offset() - n))

    def scroll_right(self, n: int) -> bool:
        return self.set_horizontal_offset(self.horizontal_offset() + n)

    def handle(self, event: Any, qualifier: Any) -> "ScrollOutcome":
        """Route an event between the scrollbars and the content."""
        from ..events.router import handle_scrolled

        return handle_scrolled(self, event, qualifier)


@dataclass
class Scrolled(Generic[W]):
    """A wrapper widget that scrolls its content."""

    widget: W
    h_overscroll: int = 0
    v_overscroll: int = 0
    h_scroll_policy: ScrollbarPolicy = ScrollbarPolicy.AS_NEEDED
    v_scroll_policy: ScrollbarPolicy = ScrollbarPolicy.AS_NEEDED
    h_scroll_position: HScrollPosition = HScrollPosition.BOTTOM
    v_scroll_position: VScrollPosition = VScrollPosition.RIGHT
    # Border around the content. The scrollbars are drawn over its right/bottom
    # (or left/top) edge, so it must have borders on those sides.
    block: Optional[Block] = None
    style: ScrollStyle = field(default_factory=ScrollStyle)

    def __post_init__(self):
        self.h_scroll_position = _h_position(self.h_scroll_position)
        self.v_scroll_position = _v_position(self.v_scroll_position)

    @classmethod
    def new_view(
        cls, inner: Any, view_size: Size, view_style: Optional[Style] = None, **kwargs
    ) -> "Scrolled[View]":
        """Scrolled for a stateless widget without builtin scrolling.

        The widget always renders at ``view_size``; see View.
        """
        view = View(inner, view_size=view_size, style=view_style or Style.null())
        return cls(view, **kwargs)

    @classmethod
    def new_viewport(
        cls, inner: Any, view_size: Size, view_style: Optional[Style] = None, **kwargs
    ) -> "Scrolled[Viewport]":
        """Scrolled for a stateful widget without builtin scrolling; see Viewport."""
        viewport = Viewport(inner, view_size=view_size, style=view_style or Style.null())
        return cls(viewport, **kwargs)

    @classmethod
    def from_config(cls, widget: W, config: "Config") -> "Scrolled[W]":
        scrolled_cfg = config.scrolled
        return cls(
            widget,
            h_overscroll=scrolled_cfg.h_overscroll,
            v_overscroll=scrolled_cfg.v_overscroll,
            h_scroll_policy=scrolled_cfg.h_policy,
            v_scroll_policy=scrolled_cfg.v_policy,
            h_scroll_position=scrolled_cfg.h_position,
            v_scroll_position=scrolled_cfg.v_position,
            block=Block() if scrolled_cfg.bordered else None,
            style=config.style.to_scroll_style(),
        )

    def create_state(self, widget_state: Any = None) -> ScrolledState:
        """Fresh state; View and Viewport content get their window state."""
        if widget_state is None and isinstance(self.widget, Viewport):
            widget_state = ViewportState()
        elif widget_state is None and isinstance(self.widget, View):
            widget_state = ViewState()
        return ScrolledState(widget=widget_state)

    def _scroll(self, orientation: ScrollbarOrientation) -> Scroll:
        return Scroll(orientation=orientation, style=self.style)

    def render(self, area: Rect, buf: Buffer, state: ScrolledState) -> None:
        h_scroll = self._scroll(self.h_scroll_position.orientation())
        v_scroll = self._scroll(self.v_scroll_position.orientation())

        # Tentative content area: reserve room for every axis that may show a scrollbar.
        if self.block is not None:
            view_area = self.block.inner(area)
        else:
            _, _, view_area = layout_scroll(
                area,
                None,
                h_scroll if self.h_scroll_policy is not ScrollbarPolicy.NEVER else None,
                v_scroll if self.v_scroll_policy is not ScrollbarPolicy.NEVER else None,
            )

        need_h, need_v = self.widget.need_scroll(view_area, state.widget)

        state.area = area
        state.v_overscroll = self.v_overscroll
        state.h_overscroll = self.h_overscroll

        has_h = self.h_scroll_policy.apply(need_h)
        has_v = self.v_scroll_policy.apply(need_v)
        logger.debug(f"scroll h={has_h} v={has_v}")
        if has_h and has_v:
            logger.debug("double scroll, corner cell left free")

        h_area, v_area, state.view_area = layout_scroll(
            area,
            self.block,
            h_scroll if has_h else None,
            v_scroll if has_v else None,
        )
        state.h_scrollbar_area = h_area if has_h else None
        state.v_scrollbar_area = v_area if has_v else None

        self.widget.render(state.view_area, buf, state.widget)

        if self.block is not None:
            self.block.render(area, buf)

        if state.v_scrollbar_area is not None:
            self._render_scrollbar(
                v_scroll,
                state.v_scrollbar_area,
                buf,
                ScrollbarPosition(
                    content_length=state.widget.vertical_max_offset(),
                    position=state.widget.vertical_offset(),
                    viewport_length=state.widget.vertical_page(),
                ),
            )
        if state.h_scrollbar_area is not None:
            self._render_scrollbar(
                h_scroll,
                state.h_scrollbar_area,
                buf,
                ScrollbarPosition(
                    content_length=state.widget.horizontal_max_offset(),
                    position=state.widget.horizontal_offset(),
                    viewport_length=state.widget.horizontal_page(),
                ),
            )

    def _render_scrollbar(
        self, scroll: Scroll, area: Rect, buf: Buffer, position: ScrollbarPosition
    ) -> None:
        if position.content_length == 0:
            # A zero-length scrollbar draws nothing; keep the track's base style.
            buf.set_style(area, self.style.track_style)
        else:
            scroll.scrollbar().render(area, buf, position)
