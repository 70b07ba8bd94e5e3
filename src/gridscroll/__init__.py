"""
gridscroll: scrolling support for character-grid terminal widgets.

Offset state, scrollbar geometry and rendering, a Scrolled wrapper that adds
scrollbars to any scrolling widget, and a View/Viewport window over content
that does not scroll on its own.
"""

from loguru import logger

from .core.config import Config, load_config
from .core.errors import ConfigError, OrientationMismatchError, ScrollError
from .events import (
    CHANGED,
    FOCUS_KEYS,
    MOUSE_ONLY,
    NOT_USED,
    UNCHANGED,
    Inner,
    KeyEvent,
    MouseEvent,
    MouseKind,
    Outcome,
    ScrollOutcome,
)
from .events.router import ScrollArea, apply_scroll_outcome, handle_scrolled
from .grid import Block, Buffer, Cell, Position, Rect, Size
from .scroll import (
    HScrollPosition,
    Scroll,
    Scrollbar,
    ScrollbarOrientation,
    ScrollbarPolicy,
    ScrollbarType,
    Scrolled,
    ScrolledState,
    ScrollState,
    ScrollStyle,
    View,
    Viewport,
    ViewportState,
    ViewState,
    VScrollPosition,
    layout_scroll,
    render_scroll,
)

__version__ = "0.1.0"

# Library logging is opt-in, see core.output.setup_loguru
logger.disable("gridscroll")

__all__ = [
    "Config",
    "load_config",
    "ConfigError",
    "OrientationMismatchError",
    "ScrollError",
    "CHANGED",
    "FOCUS_KEYS",
    "MOUSE_ONLY",
    "NOT_USED",
    "UNCHANGED",
    "Inner",
    "KeyEvent",
    "MouseEvent",
    "MouseKind",
    "Outcome",
    "ScrollOutcome",
    "ScrollArea",
    "apply_scroll_outcome",
    "handle_scrolled",
    "Block",
    "Buffer",
    "Cell",
    "Position",
    "Rect",
    "Size",
    "HScrollPosition",
    "Scroll",
    "Scrollbar",
    "ScrollbarOrientation",
    "ScrollbarPolicy",
    "ScrollbarType",
    "Scrolled",
    "ScrolledState",
    "ScrollState",
    "ScrollStyle",
    "View",
    "Viewport",
    "ViewportState",
    "ViewState",
    "VScrollPosition",
    "layout_scroll",
    "render_scroll",
]
