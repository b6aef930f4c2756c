"""Frame descriptors: which axis occupies each storage position.

A descriptor is an ordered triple of axes for positions x, y and z. A valid
descriptor represents each antipodal pair (North/South, East/West, Up/Down)
exactly once, which yields 3! position assignments x 2^3 sign choices = 48
descriptors, e.g.:
- NorthEastDown: x=North, y=East, z=Down (aerospace)
- EastNorthUp: x=East, y=North, z=Up (geography)
"""

import itertools
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, List, Tuple, Union

from .axes import DIRECTION_ORDER, Axis, AxisPair
from .errors import InvalidFrameError

# Reference vectors used for the handedness test (x=East, y=North, z=Up).
_REFERENCE_VECTORS = {
    Axis.EAST: (1, 0, 0),
    Axis.WEST: (-1, 0, 0),
    Axis.NORTH: (0, 1, 0),
    Axis.SOUTH: (0, -1, 0),
    Axis.UP: (0, 0, 1),
    Axis.DOWN: (0, 0, -1),
}

_POSITION_NAMES = ("x", "y", "z")


def _cross(a: Tuple[int, int, int], b: Tuple[int, int, int]) -> Tuple[int, int, int]:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


@dataclass(frozen=True)
class FrameDescriptor:
    """
    Assignment of one axis per storage position.

    Attributes:
        axes: Axes stored at positions (x, y, z).

    Raises:
        InvalidFrameError: If the axes do not cover the three antipodal pairs
            exactly once.

    Example:
        >>> ned = FrameDescriptor((Axis.NORTH, Axis.EAST, Axis.DOWN))
        >>> ned.name
        'NorthEastDown'
        >>> ned.locate(Axis.UP)
        (2, -1)
        >>> ned.flip().name
        'SouthWestUp'
    """

    axes: Tuple[Axis, Axis, Axis]

    def __post_init__(self) -> None:
        """Validate that every antipodal pair appears exactly once."""
        axes = tuple(self.axes)
        if len(axes) != 3:
            raise InvalidFrameError(f"A frame needs exactly 3 axes, got {len(axes)}")
        for axis in axes:
            if not isinstance(axis, Axis):
                raise InvalidFrameError(f"Expected Axis members, got {axis!r}")

        pairs = [axis.pair for axis in axes]
        if len(set(pairs)) != 3:
            duplicated = sorted({p.value for p in pairs if pairs.count(p) > 1})
            raise InvalidFrameError(
                f"Axes {[a.value for a in axes]} use the {', '.join(duplicated)} "
                "pair more than once"
            )
        object.__setattr__(self, "axes", axes)

    @property
    def name(self) -> str:
        """CamelCase frame name, e.g. ``NorthEastDown``."""
        return "".join(axis.title for axis in self.axes)

    @property
    def signs(self) -> Tuple[int, int, int]:
        """Sign of each stored axis relative to its pair's canonical direction."""
        return tuple(axis.sign for axis in self.axes)

    @property
    def pairs(self) -> Tuple[AxisPair, AxisPair, AxisPair]:
        return tuple(axis.pair for axis in self.axes)

    @property
    def right_handed(self) -> bool:
        """
        Whether x cross y equals z.

        NorthEastDown and EastNorthUp are right-handed; NorthEastUp is
        left-handed.
        """
        vx, vy, vz = (_REFERENCE_VECTORS[axis] for axis in self.axes)
        return _cross(vx, vy) == vz

    @property
    def description(self) -> str:
        """Human-readable axis description."""
        handedness = "right-handed" if self.right_handed else "left-handed"
        parts = ", ".join(
            f"{pos}={axis.title} ({axis.human})"
            for pos, axis in zip(_POSITION_NAMES, self.axes)
        )
        return f"{self.name} ({handedness}): {parts}"

    def axis_at(self, position: int) -> Axis:
        """Axis stored at position 0 (x), 1 (y) or 2 (z)."""
        return self.axes[position]

    def sign_at(self, position: int) -> int:
        """Canonical sign of the axis stored at a position."""
        return self.axes[position].sign

    def position_of_pair(self, pair: AxisPair) -> int:
        """Position holding a member of the given antipodal pair."""
        return self.pairs.index(pair)

    def locate(self, axis: Axis) -> Tuple[int, int]:
        """
        Find where a direction is stored.

        Args:
            axis: Any of the six directions.

        Returns:
            Tuple (position, sign): the position holding the axis or its
            opposite, and +1 if the axis itself is stored (native) or -1 if
            its opposite is stored.
        """
        position = self.position_of_pair(axis.pair)
        return position, (1 if self.axes[position] is axis else -1)

    def is_native(self, axis: Axis) -> bool:
        """Whether the axis is stored directly rather than as its opposite."""
        return axis in self.axes

    def flip(self) -> "FrameDescriptor":
        """Descriptor with every axis replaced by its opposite."""
        return FrameDescriptor(tuple(axis.opposite for axis in self.axes))

    @classmethod
    def from_name(cls, name: str) -> "FrameDescriptor":
        """
        Parse a CamelCase frame name such as ``EastNorthUp``.

        Raises:
            InvalidFrameError: If the name does not split into three valid
                axes covering every pair once.
        """
        parts = re.findall(r"[A-Z][a-z]*", str(name).strip())
        if "".join(parts) != str(name).strip() or len(parts) != 3:
            raise InvalidFrameError(f"Cannot parse frame name: {name!r}")
        return make_descriptor(parts)

    def __str__(self) -> str:
        return self.name


def make_descriptor(position_axes: Iterable[Union[Axis, str]]) -> FrameDescriptor:
    """
    Build and validate a descriptor from three axes.

    Args:
        position_axes: Axes (or axis names) for positions x, y, z.

    Returns:
        Validated FrameDescriptor.

    Raises:
        InvalidFrameError: If an axis name is unknown, the count is not three,
            or an antipodal pair is used twice.

    Example:
        >>> make_descriptor(["east", "north", "up"]).name
        'EastNorthUp'
        >>> make_descriptor([Axis.NORTH, Axis.SOUTH, Axis.UP])  # raises
    """
    return FrameDescriptor(tuple(Axis.parse(axis) for axis in position_axes))


@lru_cache(maxsize=None)
def all_descriptors() -> Tuple[FrameDescriptor, ...]:
    """
    Enumerate the 48 valid descriptors in canonical order.

    Positions are filled in the direction order North, East, South, West,
    Down, Up, skipping any axis whose pair is already used. The resulting
    order matches the FrameType discriminants.
    """
    descriptors: List[FrameDescriptor] = []
    for axes in itertools.permutations(DIRECTION_ORDER, 3):
        if len({axis.pair for axis in axes}) == 3:
            descriptors.append(FrameDescriptor(axes))
    return tuple(descriptors)
