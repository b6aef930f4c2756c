"""Runtime frame discriminants for the 48 axis-aligned coordinate frames.

This module defines the FrameType enumeration used to select a frame when it
is not known until runtime (e.g. read from a settings file):
- NORTH_EAST_DOWN: x=North, y=East, z=Down (aerospace, the default)
- EAST_NORTH_UP: x=East, y=North, z=Up (geography)
- ... all other permutation and sign combinations of the three pairs
- OTHER: placeholder for orientations that are not axis-aligned; it has no
  descriptor and is rejected wherever a frame is required.

Discriminants are stable small integers (0-48) so they can be stored in
compact binary records.
"""

import numbers
from enum import IntEnum
from typing import Any, Dict

from .descriptor import FrameDescriptor
from .errors import UnsupportedFrameError


class FrameType(IntEnum):
    """Enumeration of supported coordinate frame types.

    Member names spell the axes at positions x, y, z. The ``frame_name``
    property gives the CamelCase form (``NorthEastDown``) used for the
    named coordinate classes.
    """

    NORTH_EAST_DOWN = 0
    NORTH_EAST_UP = 1
    NORTH_WEST_DOWN = 2
    NORTH_WEST_UP = 3
    NORTH_DOWN_EAST = 4
    NORTH_DOWN_WEST = 5
    NORTH_UP_EAST = 6
    NORTH_UP_WEST = 7
    EAST_NORTH_DOWN = 8
    EAST_NORTH_UP = 9
    EAST_SOUTH_DOWN = 10
    EAST_SOUTH_UP = 11
    EAST_DOWN_NORTH = 12
    EAST_DOWN_SOUTH = 13
    EAST_UP_NORTH = 14
    EAST_UP_SOUTH = 15
    SOUTH_EAST_DOWN = 16
    SOUTH_EAST_UP = 17
    SOUTH_WEST_DOWN = 18
    SOUTH_WEST_UP = 19
    SOUTH_DOWN_EAST = 20
    SOUTH_DOWN_WEST = 21
    SOUTH_UP_EAST = 22
    SOUTH_UP_WEST = 23
    WEST_NORTH_DOWN = 24
    WEST_NORTH_UP = 25
    WEST_SOUTH_DOWN = 26
    WEST_SOUTH_UP = 27
    WEST_DOWN_NORTH = 28
    WEST_DOWN_SOUTH = 29
    WEST_UP_NORTH = 30
    WEST_UP_SOUTH = 31
    DOWN_NORTH_EAST = 32
    DOWN_NORTH_WEST = 33
    DOWN_EAST_NORTH = 34
    DOWN_EAST_SOUTH = 35
    DOWN_SOUTH_EAST = 36
    DOWN_SOUTH_WEST = 37
    DOWN_WEST_NORTH = 38
    DOWN_WEST_SOUTH = 39
    UP_NORTH_EAST = 40
    UP_NORTH_WEST = 41
    UP_EAST_NORTH = 42
    UP_EAST_SOUTH = 43
    UP_SOUTH_EAST = 44
    UP_SOUTH_WEST = 45
    UP_WEST_NORTH = 46
    UP_WEST_SOUTH = 47
    OTHER = 48

    @property
    def frame_name(self) -> str:
        """CamelCase frame name, e.g. ``EastNorthUp``."""
        return "".join(part.capitalize() for part in self.name.split("_"))

    @property
    def descriptor(self) -> FrameDescriptor:
        """Descriptor for this frame type.

        Raises:
            UnsupportedFrameError: For OTHER, which is not axis-aligned.
        """
        return descriptor_for(self)

    @classmethod
    def default(cls) -> "FrameType":
        """Default frame (North-East-Down)."""
        return cls.NORTH_EAST_DOWN

    @classmethod
    def parse(cls, value: Any) -> "FrameType":
        """Resolve a runtime frame tag.

        Args:
            value: FrameType member, integer discriminant, CamelCase frame name
                (``"EastNorthUp"``) or member name (``"EAST_NORTH_UP"``).

        Returns:
            Matching FrameType.

        Raises:
            UnsupportedFrameError: If the tag matches no frame type.

        Example:
            >>> FrameType.parse("EastNorthUp")
            <FrameType.EAST_NORTH_UP: 9>
            >>> FrameType.parse(0)
            <FrameType.NORTH_EAST_DOWN: 0>
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise UnsupportedFrameError(f"Unsupported frame type: {value!r}")
        if isinstance(value, numbers.Integral):
            try:
                return cls(int(value))
            except ValueError:
                raise UnsupportedFrameError(
                    f"Unsupported frame discriminant: {value}"
                ) from None
        if isinstance(value, str):
            key = value.strip()
            if key.isdigit():
                return cls.parse(int(key))
            if key.upper() in cls.__members__:
                return cls.__members__[key.upper()]
            member = _BY_FRAME_NAME.get(key.lower())
            if member is not None:
                return member
        raise UnsupportedFrameError(f"Unsupported frame type: {value!r}")

    @classmethod
    def from_descriptor(cls, descriptor: FrameDescriptor) -> "FrameType":
        """FrameType whose descriptor equals the given one."""
        return _BY_FRAME_NAME[descriptor.name.lower()]


_BY_FRAME_NAME = {member.frame_name.lower(): member for member in FrameType}

FRAME_DESCRIPTORS: Dict[FrameType, FrameDescriptor] = {
    member: FrameDescriptor.from_name(member.frame_name)
    for member in FrameType
    if member is not FrameType.OTHER
}


def descriptor_for(frame_type: Any) -> FrameDescriptor:
    """
    Look up the descriptor for a runtime frame tag.

    Args:
        frame_type: Anything accepted by FrameType.parse().

    Returns:
        FrameDescriptor of the frame.

    Raises:
        UnsupportedFrameError: If the tag is unknown or OTHER.
    """
    member = FrameType.parse(frame_type)
    try:
        return FRAME_DESCRIPTORS[member]
    except KeyError:
        raise UnsupportedFrameError(
            f"{member.frame_name} has no axis-aligned descriptor"
        ) from None


def resolve_descriptor(frame: Any) -> FrameDescriptor:
    """
    Turn any frame designation into a descriptor.

    Accepts a FrameDescriptor, anything FrameType.parse() understands, or an
    object exposing a ``frame`` descriptor (coordinate classes and values).
    """
    if isinstance(frame, FrameDescriptor):
        return frame
    bound = getattr(frame, "frame", None)
    if isinstance(bound, FrameDescriptor):
        return bound
    return descriptor_for(frame)
