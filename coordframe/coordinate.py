"""Three-component values bound to a coordinate frame.

Each frame descriptor gets its own Coordinate subclass, created once by
coordinate_class() and cached, so the frame is a property of the type:

    >>> from coordframe import NorthEastUp
    >>> neu = NorthEastUp(1.0, 2.0, 3.0)
    >>> neu.north, neu.east, neu.up, neu.down
    (1.0, 2.0, 3.0, -3.0)
    >>> neu.to_ned()
    NorthEastDown(x=1.0, y=2.0, z=-3.0)

Directional accessors (north, south, east, west, up, down) work for every
frame. The direction actually stored is "native"; its antipode is
synthesized by negating the stored component.
"""

import warnings
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Callable, ClassVar, Iterator, Optional, Tuple

import numpy as np

from . import conversion
from .axes import Axis
from .descriptor import FrameDescriptor
from .errors import LengthMismatchError
from .frames import FrameType, resolve_descriptor
from .numeric import saturating_neg

_REGISTRY_MODULE = __name__.rsplit(".", 1)[0] + ".registry"


def _direction(axis: Axis) -> property:
    def getter(self: "Coordinate") -> Any:
        return self.component(axis)

    getter.__doc__ = (
        f"The {axis.value} component. Native if the frame stores {axis.title}, "
        f"otherwise the negated {axis.opposite.value} component."
    )
    return property(getter)


def _with_direction(axis: Axis) -> Callable[["Coordinate", Any], "Coordinate"]:
    def with_value(self: "Coordinate", value: Any) -> "Coordinate":
        return self.with_component(axis, value)

    with_value.__name__ = f"with_{axis.value}"
    with_value.__doc__ = f"Copy of this value with the {axis.value} component set."
    return with_value


def _with_position(position: int) -> Callable[["Coordinate", Any], "Coordinate"]:
    def with_value(self: "Coordinate", value: Any) -> "Coordinate":
        values = list(self)
        values[position] = value
        return type(self)(*values)

    with_value.__name__ = f"with_{'xyz'[position]}"
    with_value.__doc__ = f"Copy of this value with position {'xyz'[position]} replaced."
    return with_value


def _direction_axis(axis: Axis) -> classmethod:
    def base_vector(cls: type, one: Any = 1.0) -> "Coordinate":
        warnings.warn(
            f"{axis.value}_axis() is deprecated and returns the {axis.value} unit "
            f"vector in the calling frame ({cls.frame.name}) only; use "
            "x_axis(), y_axis() or z_axis() instead.",
            DeprecationWarning,
            stacklevel=2,
        )
        position, sign = cls.frame.locate(axis)
        values = [one - one] * 3
        values[position] = one if sign > 0 else saturating_neg(one)
        return cls(*values)

    base_vector.__name__ = f"{axis.value}_axis"
    base_vector.__doc__ = (
        f"Deprecated: unit vector pointing {axis.value}, expressed in the "
        "calling frame's own coordinates."
    )
    return classmethod(base_vector)


@dataclass(frozen=True, eq=False)
class Coordinate:
    """
    Three numeric components interpreted through a frame descriptor.

    Use a frame-bound subclass (e.g. ``NorthEastDown``); the base class has
    no frame and cannot be instantiated.

    Attributes:
        x: Component stored at the first position.
        y: Component stored at the second position.
        z: Component stored at the third position.
    """

    x: Any
    y: Any
    z: Any

    frame: ClassVar[Optional[FrameDescriptor]] = None

    # NumPy operators on arrays defer to __eq__ instead of broadcasting.
    __array_ufunc__ = None

    def __post_init__(self) -> None:
        if self.frame is None:
            raise TypeError(
                "Coordinate has no frame; use a frame class such as NorthEastDown"
            )

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_slice(cls, values: Any) -> "Coordinate":
        """
        Build a value from a raw sequence in storage order.

        Args:
            values: List, tuple, iterable or NumPy array with 3 elements.

        Returns:
            Value of this frame.

        Raises:
            LengthMismatchError: If the input does not hold exactly 3 elements.
        """
        if isinstance(values, np.ndarray):
            if values.size != 3:
                raise LengthMismatchError(
                    f"Expected 3 components, got array of shape {values.shape}"
                )
            items = tuple(values.reshape(3))
        else:
            items = tuple(values)
            if len(items) != 3:
                raise LengthMismatchError(f"Expected 3 components, got {len(items)}")
        return cls(*items)

    @classmethod
    def for_frame(cls, frame: Any) -> type:
        """Coordinate class bound to the given frame designation."""
        return coordinate_class(resolve_descriptor(frame))

    @classmethod
    def x_axis(cls, one: Any = 1.0) -> "Coordinate":
        """Unit vector along this frame's x position ([1, 0, 0])."""
        return cls(one, one - one, one - one)

    @classmethod
    def y_axis(cls, one: Any = 1.0) -> "Coordinate":
        """Unit vector along this frame's y position ([0, 1, 0])."""
        return cls(one - one, one, one - one)

    @classmethod
    def z_axis(cls, one: Any = 1.0) -> "Coordinate":
        """Unit vector along this frame's z position ([0, 0, 1])."""
        return cls(one - one, one - one, one)

    north_axis = _direction_axis(Axis.NORTH)
    south_axis = _direction_axis(Axis.SOUTH)
    east_axis = _direction_axis(Axis.EAST)
    west_axis = _direction_axis(Axis.WEST)
    up_axis = _direction_axis(Axis.UP)
    down_axis = _direction_axis(Axis.DOWN)

    # ------------------------------------------------------------------
    # Frame information
    # ------------------------------------------------------------------

    @property
    def frame_type(self) -> FrameType:
        return FrameType.from_descriptor(self.frame)

    @property
    def right_handed(self) -> bool:
        return self.frame.right_handed

    @classmethod
    def is_native(cls, axis: Axis) -> bool:
        """Whether the direction is stored directly in this frame."""
        return cls.frame.is_native(Axis.parse(axis))

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def component(self, axis: Axis) -> Any:
        """Value of the component pointing in the given direction."""
        position, sign = self.frame.locate(Axis.parse(axis))
        value = self[position]
        return value if sign > 0 else saturating_neg(value)

    north = _direction(Axis.NORTH)
    south = _direction(Axis.SOUTH)
    east = _direction(Axis.EAST)
    west = _direction(Axis.WEST)
    up = _direction(Axis.UP)
    down = _direction(Axis.DOWN)

    def with_component(self, axis: Axis, value: Any) -> "Coordinate":
        """Copy with the component in the given direction set to value."""
        position, sign = self.frame.locate(Axis.parse(axis))
        values = list(self)
        values[position] = value if sign > 0 else saturating_neg(value)
        return type(self)(*values)

    with_north = _with_direction(Axis.NORTH)
    with_south = _with_direction(Axis.SOUTH)
    with_east = _with_direction(Axis.EAST)
    with_west = _with_direction(Axis.WEST)
    with_up = _with_direction(Axis.UP)
    with_down = _with_direction(Axis.DOWN)
    with_x = _with_position(0)
    with_y = _with_position(1)
    with_z = _with_position(2)

    def map(self, func: Callable[[Any], Any]) -> "Coordinate":
        """Apply func to every component; the frame is unchanged."""
        return type(self)(func(self.x), func(self.y), func(self.z))

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def convert_to(self, target: Any) -> "Coordinate":
        """Express this value in another frame (see conversion.convert)."""
        return conversion.convert(self, target)

    def flip(self) -> "Coordinate":
        """Express this value in the fully mirrored frame."""
        return conversion.flip_frame(self)

    def to_ned(self) -> "Coordinate":
        return conversion.convert(self, FrameType.NORTH_EAST_DOWN)

    def to_enu(self) -> "Coordinate":
        return conversion.convert(self, FrameType.EAST_NORTH_UP)

    # ------------------------------------------------------------------
    # Sequence protocol
    # ------------------------------------------------------------------

    def __iter__(self) -> Iterator[Any]:
        return iter((self.x, self.y, self.z))

    def __len__(self) -> int:
        return 3

    def __getitem__(self, index: Any) -> Any:
        return (self.x, self.y, self.z)[index]

    def __array__(self, dtype: Any = None, copy: Any = None) -> np.ndarray:
        return np.array((self.x, self.y, self.z), dtype=dtype)

    def to_tuple(self) -> Tuple[Any, Any, Any]:
        return (self.x, self.y, self.z)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Coordinate):
            return self.frame == other.frame and self.to_tuple() == other.to_tuple()
        if isinstance(other, np.ndarray):
            return other.shape == (3,) and bool(np.all(other == np.asarray(self)))
        if isinstance(other, (list, tuple)):
            return len(other) == 3 and self.to_tuple() == tuple(other)
        return NotImplemented

    def __hash__(self) -> int:
        # Matches raw tuples that compare equal.
        return hash(self.to_tuple())


def _class_doc(descriptor: FrameDescriptor) -> str:
    lines = [
        f"Coordinate in the {descriptor.description.split(': ')[0]} frame.",
        "",
        "Axis descriptions:",
    ]
    for position, axis in zip("xyz", descriptor.axes):
        lines.append(
            f"    {position}: {axis.title}, the {axis.pair.value} axis with "
            f"positive values representing \"{axis.human}\"."
        )
    return "\n".join(lines)


@lru_cache(maxsize=None)
def coordinate_class(descriptor: FrameDescriptor) -> type:
    """
    Coordinate subclass bound to a descriptor.

    Classes are cached, so every call for the same descriptor returns the
    same type (and ``coordinate_class(d)(1, 2, 3) == coordinate_class(d)(1, 2, 3)``).
    """
    namespace = {
        "frame": descriptor,
        "__doc__": _class_doc(descriptor),
        "__module__": _REGISTRY_MODULE,
        "__qualname__": descriptor.name,
    }
    return type(descriptor.name, (Coordinate,), namespace)
