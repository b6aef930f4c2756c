"""Exceptions raised by coordinate frame construction and dispatch.

All errors derive from ValueError so that callers validating user input
with ``except ValueError`` keep working.
"""


class CoordinateFrameError(ValueError):
    """Base class for coordinate frame errors."""


class InvalidFrameError(CoordinateFrameError):
    """Axes do not cover the three antipodal pairs exactly once."""


class LengthMismatchError(CoordinateFrameError):
    """Raw input does not hold exactly three components."""


class UnsupportedFrameError(CoordinateFrameError):
    """Runtime frame tag does not match any of the 48 axis-aligned frames."""
