"""Input events and handler results.

The router lives in ``gridscroll.events.router``; it depends on the scroll
state and is not imported here.
"""

from .event import (
    FOCUS_KEYS,
    MOUSE_ONLY,
    Event,
    Inner,
    KeyEvent,
    KeyModifiers,
    MouseButton,
    MouseEvent,
    MouseKind,
    Qualifier,
)
from .outcome import (
    CHANGED,
    NOT_USED,
    UNCHANGED,
    Outcome,
    ScrollOutcome,
    ScrollOutcomeKind,
    is_consumed,
)

__all__ = [
    "FOCUS_KEYS",
    "MOUSE_ONLY",
    "Event",
    "Inner",
    "KeyEvent",
    "KeyModifiers",
    "MouseButton",
    "MouseEvent",
    "MouseKind",
    "Qualifier",
    "CHANGED",
    "NOT_USED",
    "UNCHANGED",
    "Outcome",
    "ScrollOutcome",
    "ScrollOutcomeKind",
    "is_consumed",
]
