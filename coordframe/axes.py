"""Directional axes and their antipodal pairs.

Six symbolic directions are grouped into three antipodal pairs:
- LONGITUDINAL: North / South
- LATERAL: East / West
- VERTICAL: Down / Up

North, East and Down are the canonical positive member of their pair, so a
North-East-Down frame stores every component with sign +1 while an
East-North-Up frame stores its vertical component with sign -1.
"""

from enum import Enum
from typing import Union

from .errors import InvalidFrameError


class AxisPair(Enum):
    """Enumeration of antipodal axis pairs.

    Attributes:
        LONGITUDINAL: North/South (forward/backward).
        LATERAL: East/West (right/left).
        VERTICAL: Down/Up.
    """

    LONGITUDINAL = "longitudinal"
    LATERAL = "lateral"
    VERTICAL = "vertical"

    @property
    def positive(self) -> "Axis":
        """Canonical positive direction of this pair."""
        return _PAIR_POSITIVE[self]

    @property
    def negative(self) -> "Axis":
        """Direction opposite to the canonical one."""
        return _PAIR_POSITIVE[self].opposite


class Axis(Enum):
    """Enumeration of the six symbolic directions."""

    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"
    UP = "up"
    DOWN = "down"

    @property
    def opposite(self) -> "Axis":
        """Antipodal partner of this axis."""
        return _OPPOSITE[self]

    @property
    def pair(self) -> AxisPair:
        """Antipodal pair this axis belongs to."""
        return _PAIR[self]

    @property
    def sign(self) -> int:
        """+1 for the canonical direction of the pair, -1 for its opposite."""
        return 1 if _PAIR_POSITIVE[_PAIR[self]] is self else -1

    @property
    def title(self) -> str:
        """Capitalized name as used in frame names (e.g. ``North``)."""
        return self.value.capitalize()

    @property
    def human(self) -> str:
        """Vehicle-style direction label (forward, right, down, ...)."""
        return _HUMAN[self]

    @classmethod
    def parse(cls, value: Union["Axis", str]) -> "Axis":
        """Look up an axis from a member or a case-insensitive name.

        Args:
            value: Axis member or name such as ``"north"`` or ``"Down"``.

        Returns:
            The matching Axis.

        Raises:
            InvalidFrameError: If the name is not one of the six directions.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise InvalidFrameError(f"Unknown axis: {value!r}") from None

    def __repr__(self) -> str:
        return f"Axis.{self.name}"


_OPPOSITE = {
    Axis.NORTH: Axis.SOUTH,
    Axis.SOUTH: Axis.NORTH,
    Axis.EAST: Axis.WEST,
    Axis.WEST: Axis.EAST,
    Axis.UP: Axis.DOWN,
    Axis.DOWN: Axis.UP,
}

_PAIR = {
    Axis.NORTH: AxisPair.LONGITUDINAL,
    Axis.SOUTH: AxisPair.LONGITUDINAL,
    Axis.EAST: AxisPair.LATERAL,
    Axis.WEST: AxisPair.LATERAL,
    Axis.UP: AxisPair.VERTICAL,
    Axis.DOWN: AxisPair.VERTICAL,
}

_PAIR_POSITIVE = {
    AxisPair.LONGITUDINAL: Axis.NORTH,
    AxisPair.LATERAL: Axis.EAST,
    AxisPair.VERTICAL: Axis.DOWN,
}

_HUMAN = {
    Axis.NORTH: "forward",
    Axis.SOUTH: "backward",
    Axis.EAST: "right",
    Axis.WEST: "left",
    Axis.UP: "up",
    Axis.DOWN: "down",
}

# Order used when enumerating frames; matches FrameType discriminants.
DIRECTION_ORDER = (Axis.NORTH, Axis.EAST, Axis.SOUTH, Axis.WEST, Axis.DOWN, Axis.UP)


def opposite(axis: Axis) -> Axis:
    """Return the antipodal partner of an axis.

    Example:
        >>> opposite(Axis.NORTH)
        Axis.SOUTH
        >>> opposite(opposite(Axis.UP))
        Axis.UP
    """
    return _OPPOSITE[axis]


def pair_of(axis: Axis) -> AxisPair:
    """Return the antipodal pair an axis belongs to."""
    return _PAIR[axis]
