"""Scroll state, scrollbar layout and rendering, and the scrolling wrappers."""

from .capability import (
    ScrollingState,
    ScrollingStateMixin,
    ScrollingWidget,
    StatefulWidget,
    Widget,
)
from .layout import layout_scroll
from .scrollbar import (
    DOUBLE_HORIZONTAL,
    DOUBLE_VERTICAL,
    HORIZONTAL,
    VERTICAL,
    Scroll,
    Scrollbar,
    ScrollbarPosition,
    ScrollbarSymbols,
    ScrollStyle,
    render_scroll,
)
from .scrolled import Scrolled, ScrolledState
from .state import ScrollState, hit_to_offset
from .types import (
    HScrollPosition,
    ScrollbarOrientation,
    ScrollbarPolicy,
    ScrollbarType,
    ScrollDirection,
    VScrollPosition,
)
from .view import View, Viewport, ViewportState, ViewState

__all__ = [
    "ScrollingState",
    "ScrollingStateMixin",
    "ScrollingWidget",
    "StatefulWidget",
    "Widget",
    "layout_scroll",
    "DOUBLE_HORIZONTAL",
    "DOUBLE_VERTICAL",
    "HORIZONTAL",
    "VERTICAL",
    "Scroll",
    "Scrollbar",
    "ScrollbarPosition",
    "ScrollbarSymbols",
    "ScrollStyle",
    "render_scroll",
    "Scrolled",
    "ScrolledState",
    "ScrollState",
    "hit_to_offset",
    "HScrollPosition",
    "ScrollbarOrientation",
    "ScrollbarPolicy",
    "ScrollbarType",
    "ScrollDirection",
    "VScrollPosition",
    "View",
    "Viewport",
    "ViewportState",
    "ViewState",
]
