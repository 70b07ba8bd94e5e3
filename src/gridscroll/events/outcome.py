"""Results of event handling.

Handlers return a value that reports whether the event was *consumed*.
Consumption composes by short-circuiting: the first consuming stage wins.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable


def is_consumed(result: Any) -> bool:
    """Whether a handler result consumed its event.

    Accepts anything exposing ``is_consumed()``, plain booleans and ``None``
    (not consumed). Other values count as consumed.
    """
    if result is None:
        return False
    if isinstance(result, bool):
        return result
    check = getattr(result, "is_consumed", None)
    if callable(check):
        return bool(check())
    return True


class Outcome(Enum):
    """Generic result for content widgets."""

    NOT_USED = "not_used"
    UNCHANGED = "unchanged"
    CHANGED = "changed"

    def is_consumed(self) -> bool:
        return self is not Outcome.NOT_USED


class ScrollOutcomeKind(Enum):
    # The event was not used.
    NOT_USED = "not_used"
    # Consumed, nothing changed.
    UNCHANGED = "unchanged"
    # Consumed, offsets changed.
    CHANGED = "changed"
    # Scroll requests carrying a step size.
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    # Absolute offset requests.
    VPOS = "vpos"
    HPOS = "hpos"
    # Result of the forwarded content handler.
    INNER = "inner"


@dataclass(frozen=True)
class ScrollOutcome:
    """Tri-state result: not used, consumed by chrome, or consumed by content.

    Chrome results either report a change (``CHANGED``/``UNCHANGED``) or carry
    a payload the caller applies (``UP(n)``, ``VPOS(n)`` ...). Content results
    wrap whatever the content handler returned in ``INNER``.
    """

    kind: ScrollOutcomeKind
    value: int = 0
    inner: Any = None

    def is_consumed(self) -> bool:
        if self.kind is ScrollOutcomeKind.NOT_USED:
            return False
        if self.kind is ScrollOutcomeKind.INNER:
            return is_consumed(self.inner)
        return True

    def or_else(self, fallback: Callable[[], "ScrollOutcome"]) -> "ScrollOutcome":
        """Return self if consumed, otherwise run the next handling stage."""
        if self.is_consumed():
            return self
        return fallback()

    @classmethod
    def changed(cls, flag: bool) -> "ScrollOutcome":
        """CHANGED or UNCHANGED depending on ``flag``."""
        return CHANGED if flag else UNCHANGED

    @classmethod
    def up(cls, n: int) -> "ScrollOutcome":
        return cls(ScrollOutcomeKind.UP, n)

    @classmethod
    def down(cls, n: int) -> "ScrollOutcome":
        return cls(ScrollOutcomeKind.DOWN, n)

    @classmethod
    def left(cls, n: int) -> "ScrollOutcome":
        return cls(ScrollOutcomeKind.LEFT, n)

    @classmethod
    def right(cls, n: int) -> "ScrollOutcome":
        return cls(ScrollOutcomeKind.RIGHT, n)

    @classmethod
    def vpos(cls, n: int) -> "ScrollOutcome":
        return cls(ScrollOutcomeKind.VPOS, n)

    @classmethod
    def hpos(cls, n: int) -> "ScrollOutcome":
        return cls(ScrollOutcomeKind.HPOS, n)

    @classmethod
    def wrap(cls, inner: Any) -> "ScrollOutcome":
        return cls(ScrollOutcomeKind.INNER, inner=inner)


NOT_USED = ScrollOutcome(ScrollOutcomeKind.NOT_USED)
UNCHANGED = ScrollOutcome(ScrollOutcomeKind.UNCHANGED)
CHANGED = ScrollOutcome(ScrollOutcomeKind.CHANGED)
