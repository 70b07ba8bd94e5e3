"""Decoded input events and handling qualifiers.

Events arrive already decoded from the terminal's input stream; this module
only defines their shape. Coordinates are absolute cell positions.
"""

from dataclasses import dataclass
from enum import Enum, Flag, auto
from typing import Any, Union


class MouseKind(Enum):
    """What happened to the pointer."""

    DOWN = "down"
    UP = "up"
    DRAG = "drag"
    MOVED = "moved"
    SCROLL_UP = "scroll_up"
    SCROLL_DOWN = "scroll_down"
    SCROLL_LEFT = "scroll_left"
    SCROLL_RIGHT = "scroll_right"

    @property
    def is_wheel(self) -> bool:
        return self in (
            MouseKind.SCROLL_UP,
            MouseKind.SCROLL_DOWN,
            MouseKind.SCROLL_LEFT,
            MouseKind.SCROLL_RIGHT,
        )


class MouseButton(Enum):
    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"


class KeyModifiers(Flag):
    NONE = 0
    SHIFT = auto()
    CONTROL = auto()
    ALT = auto()


@dataclass(frozen=True)
class MouseEvent:
    """A pointer or wheel event at (column, row)."""

    kind: MouseKind
    column: int
    row: int
    button: MouseButton = MouseButton.LEFT
    modifiers: KeyModifiers = KeyModifiers.NONE

    @property
    def position(self) -> tuple[int, int]:
        return (self.column, self.row)

    def is_left_down(self) -> bool:
        return self.kind is MouseKind.DOWN and self.button is MouseButton.LEFT

    def is_left_drag(self) -> bool:
        return self.kind is MouseKind.DRAG and self.button is MouseButton.LEFT

    def has_alt(self) -> bool:
        return KeyModifiers.ALT in self.modifiers


@dataclass(frozen=True)
class KeyEvent:
    """A key press. ``key`` is a character or a key name such as ``"KEY_DOWN"``."""

    key: str
    modifiers: KeyModifiers = KeyModifiers.NONE


Event = Union[MouseEvent, KeyEvent, Any]


class Qualifier(Enum):
    """Selects which handling path an event handler runs."""

    # Keyboard and mouse, for the focused widget.
    FOCUS_KEYS = "focus_keys"
    # Mouse only, for widgets without focus.
    MOUSE_ONLY = "mouse_only"


FOCUS_KEYS = Qualifier.FOCUS_KEYS
MOUSE_ONLY = Qualifier.MOUSE_ONLY


@dataclass(frozen=True)
class Inner:
    """Forward an event to the wrapped content with the given qualifier.

    The scrolled wrapper still handles its own chrome afterwards:

        scrolled_state.handle(event, Inner(MOUSE_ONLY))
    """

    qualifier: Any
