"""Named coordinate classes and runtime frame dispatch.

Two ways to select a frame share the same descriptors:
- Static: import a named class and construct it directly,
  ``EastNorthUp(2.0, 1.0, -3.0)``.
- Dynamic: pass a runtime tag (FrameType member, discriminant or name, e.g.
  read from a settings file) to construct_frame() or new_from().

Both paths return instances of the same cached classes.
"""

from typing import Any, Dict

from .coordinate import Coordinate, coordinate_class
from .frames import FRAME_DESCRIPTORS, FrameType, descriptor_for


def coordinate_type(frame_type: Any) -> type:
    """
    Coordinate class for a runtime frame tag.

    Raises:
        UnsupportedFrameError: If the tag is unknown or OTHER.
    """
    return coordinate_class(descriptor_for(frame_type))


FRAME_CLASSES: Dict[FrameType, type] = {
    frame_type: coordinate_class(descriptor)
    for frame_type, descriptor in FRAME_DESCRIPTORS.items()
}


def construct_frame(values: Any, frame_type: Any) -> Coordinate:
    """
    Build a coordinate value from raw components and a runtime frame tag.

    Args:
        values: Three components in storage order (x, y, z).
        frame_type: FrameType member, integer discriminant or frame name.

    Returns:
        Instance of the named class for the frame.

    Raises:
        UnsupportedFrameError: If the tag matches none of the 48 frames.
        LengthMismatchError: If values does not hold exactly 3 elements.

    Example:
        >>> construct_frame([2.0, 1.0, -3.0], "EastNorthUp")
        EastNorthUp(x=2.0, y=1.0, z=-3.0)
    """
    return coordinate_type(frame_type).from_slice(values)


def new_from(x: Any, y: Any, z: Any, frame_type: Any) -> Coordinate:
    """Build a coordinate value from three components and a runtime frame tag."""
    return coordinate_type(frame_type)(x, y, z)


NorthEastDown = FRAME_CLASSES[FrameType.NORTH_EAST_DOWN]
NorthEastUp = FRAME_CLASSES[FrameType.NORTH_EAST_UP]
NorthWestDown = FRAME_CLASSES[FrameType.NORTH_WEST_DOWN]
NorthWestUp = FRAME_CLASSES[FrameType.NORTH_WEST_UP]
NorthDownEast = FRAME_CLASSES[FrameType.NORTH_DOWN_EAST]
NorthDownWest = FRAME_CLASSES[FrameType.NORTH_DOWN_WEST]
NorthUpEast = FRAME_CLASSES[FrameType.NORTH_UP_EAST]
NorthUpWest = FRAME_CLASSES[FrameType.NORTH_UP_WEST]
EastNorthDown = FRAME_CLASSES[FrameType.EAST_NORTH_DOWN]
EastNorthUp = FRAME_CLASSES[FrameType.EAST_NORTH_UP]
EastSouthDown = FRAME_CLASSES[FrameType.EAST_SOUTH_DOWN]
EastSouthUp = FRAME_CLASSES[FrameType.EAST_SOUTH_UP]
EastDownNorth = FRAME_CLASSES[FrameType.EAST_DOWN_NORTH]
EastDownSouth = FRAME_CLASSES[FrameType.EAST_DOWN_SOUTH]
EastUpNorth = FRAME_CLASSES[FrameType.EAST_UP_NORTH]
EastUpSouth = FRAME_CLASSES[FrameType.EAST_UP_SOUTH]
SouthEastDown = FRAME_CLASSES[FrameType.SOUTH_EAST_DOWN]
SouthEastUp = FRAME_CLASSES[FrameType.SOUTH_EAST_UP]
SouthWestDown = FRAME_CLASSES[FrameType.SOUTH_WEST_DOWN]
SouthWestUp = FRAME_CLASSES[FrameType.SOUTH_WEST_UP]
SouthDownEast = FRAME_CLASSES[FrameType.SOUTH_DOWN_EAST]
SouthDownWest = FRAME_CLASSES[FrameType.SOUTH_DOWN_WEST]
SouthUpEast = FRAME_CLASSES[FrameType.SOUTH_UP_EAST]
SouthUpWest = FRAME_CLASSES[FrameType.SOUTH_UP_WEST]
WestNorthDown = FRAME_CLASSES[FrameType.WEST_NORTH_DOWN]
WestNorthUp = FRAME_CLASSES[FrameType.WEST_NORTH_UP]
WestSouthDown = FRAME_CLASSES[FrameType.WEST_SOUTH_DOWN]
WestSouthUp = FRAME_CLASSES[FrameType.WEST_SOUTH_UP]
WestDownNorth = FRAME_CLASSES[FrameType.WEST_DOWN_NORTH]
WestDownSouth = FRAME_CLASSES[FrameType.WEST_DOWN_SOUTH]
WestUpNorth = FRAME_CLASSES[FrameType.WEST_UP_NORTH]
WestUpSouth = FRAME_CLASSES[FrameType.WEST_UP_SOUTH]
DownNorthEast = FRAME_CLASSES[FrameType.DOWN_NORTH_EAST]
DownNorthWest = FRAME_CLASSES[FrameType.DOWN_NORTH_WEST]
DownEastNorth = FRAME_CLASSES[FrameType.DOWN_EAST_NORTH]
DownEastSouth = FRAME_CLASSES[FrameType.DOWN_EAST_SOUTH]
DownSouthEast = FRAME_CLASSES[FrameType.DOWN_SOUTH_EAST]
DownSouthWest = FRAME_CLASSES[FrameType.DOWN_SOUTH_WEST]
DownWestNorth = FRAME_CLASSES[FrameType.DOWN_WEST_NORTH]
DownWestSouth = FRAME_CLASSES[FrameType.DOWN_WEST_SOUTH]
UpNorthEast = FRAME_CLASSES[FrameType.UP_NORTH_EAST]
UpNorthWest = FRAME_CLASSES[FrameType.UP_NORTH_WEST]
UpEastNorth = FRAME_CLASSES[FrameType.UP_EAST_NORTH]
UpEastSouth = FRAME_CLASSES[FrameType.UP_EAST_SOUTH]
UpSouthEast = FRAME_CLASSES[FrameType.UP_SOUTH_EAST]
UpSouthWest = FRAME_CLASSES[FrameType.UP_SOUTH_WEST]
UpWestNorth = FRAME_CLASSES[FrameType.UP_WEST_NORTH]
UpWestSouth = FRAME_CLASSES[FrameType.UP_WEST_SOUTH]

__all__ = [
    "FRAME_CLASSES",
    "coordinate_type",
    "construct_frame",
    "new_from",
] + [frame_type.frame_name for frame_type in FRAME_CLASSES]
