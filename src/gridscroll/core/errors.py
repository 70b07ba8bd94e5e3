"""Exceptions raised by gridscroll."""


class ScrollError(Exception):
    """Base exception for scrolling operations."""

    pass


class OrientationMismatchError(ScrollError, ValueError):
    """Raised when a scrollbar's orientation does not match its axis.

    A horizontal scrollbar must be HORIZONTAL_TOP or HORIZONTAL_BOTTOM, a
    vertical one VERTICAL_LEFT or VERTICAL_RIGHT. This is a configuration
    error in the caller and is never handled inside the package.
    """

    def __init__(self, axis: str, orientation: object):
        self.axis = axis
        self.orientation = orientation
        super().__init__(f"{orientation} not supported for {axis} scrolling.")


class ConfigError(ScrollError):
    """Raised for invalid values in a configuration file (strict mode only)."""

    pass
