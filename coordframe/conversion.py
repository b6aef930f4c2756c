"""Conversion between axis-aligned coordinate frames.

Every pair of frames is related by a signed permutation: each target
position takes the source component holding the same antipodal pair, negated
when the stored axes point in opposite directions. For example,
North-East-Down [n, e, d] becomes East-North-Up [e, n, -d].

Conversions only move and negate components, so they are exact for any
numeric type and always invertible.
"""

from functools import lru_cache
from typing import Any, NamedTuple, Sequence, Tuple

import numpy as np
from numpy.typing import NDArray

from .descriptor import FrameDescriptor
from .errors import LengthMismatchError
from .frames import resolve_descriptor
from .numeric import saturating_neg, saturating_neg_array


class ConversionPlan(NamedTuple):
    """Signed permutation taking components of one frame to another.

    Attributes:
        source: Frame the components are stored in.
        target: Frame to express them in.
        permutation: For each target position, the source position to read.
        signs: For each target position, +1 to copy or -1 to negate.
    """

    source: FrameDescriptor
    target: FrameDescriptor
    permutation: Tuple[int, int, int]
    signs: Tuple[int, int, int]

    @property
    def is_identity(self) -> bool:
        return self.permutation == (0, 1, 2) and self.signs == (1, 1, 1)

    @property
    def matrix(self) -> NDArray[np.int64]:
        """3x3 signed permutation matrix M with ``target = M @ source``."""
        m = np.zeros((3, 3), dtype=np.int64)
        for p, (q, sign) in enumerate(zip(self.permutation, self.signs)):
            m[p, q] = sign
        return m

    def apply(self, components: Sequence[Any]) -> Tuple[Any, Any, Any]:
        """Remap three source components into target order."""
        return tuple(
            components[q] if sign > 0 else saturating_neg(components[q])
            for q, sign in zip(self.permutation, self.signs)
        )

    def inverse(self) -> "ConversionPlan":
        """Plan converting back from target to source."""
        return conversion_plan(self.target, self.source)


@lru_cache(maxsize=None)
def conversion_plan(source: FrameDescriptor, target: FrameDescriptor) -> ConversionPlan:
    """
    Compute the signed permutation from one frame to another.

    For each target position p, find the source position q holding the same
    antipodal pair. The component is copied when both positions store the
    same axis and negated when they store opposite axes.

    Args:
        source: Frame of the input components.
        target: Frame of the output components.

    Returns:
        ConversionPlan for the pair.

    Example:
        >>> ned = FrameDescriptor.from_name("NorthEastDown")
        >>> enu = FrameDescriptor.from_name("EastNorthUp")
        >>> plan = conversion_plan(ned, enu)
        >>> plan.permutation, plan.signs
        ((1, 0, 2), (1, 1, -1))
    """
    permutation = []
    signs = []
    for axis in target.axes:
        q, sign = source.locate(axis)
        permutation.append(q)
        signs.append(sign)
    return ConversionPlan(source, target, tuple(permutation), tuple(signs))


def convert(value: Any, target: Any) -> Any:
    """
    Express a coordinate value in another frame.

    Args:
        value: Coordinate value bound to any frame.
        target: Target frame (FrameDescriptor, FrameType, frame name or
            coordinate class).

    Returns:
        New coordinate value of the target frame with the same physical
        meaning.

    Raises:
        UnsupportedFrameError: If the target cannot be resolved to a frame.

    Example:
        >>> ned = NorthEastDown(1.0, 2.0, 3.0)
        >>> convert(ned, "EastNorthUp")
        EastNorthUp(x=2.0, y=1.0, z=-3.0)
    """
    descriptor = resolve_descriptor(target)
    plan = conversion_plan(value.frame, descriptor)
    return value.for_frame(descriptor)(*plan.apply(tuple(value)))


def flip_frame(value: Any) -> Any:
    """
    Express a value in its fully mirrored frame.

    Flipping replaces every axis by its opposite while keeping positions, so
    the conversion reduces to negating all three components
    (NorthEastDown [n, e, d] -> SouthWestUp [-n, -e, -d]).
    """
    flipped = value.frame.flip()
    return value.for_frame(flipped)(*(saturating_neg(c) for c in value))


def remap_array(data: Any, source: Any, target: Any) -> NDArray:
    """
    Convert an array of vectors between frames.

    Vectorized counterpart of convert() for sensor time series.

    Args:
        data: Array of shape (3,) or (N, 3) stored in the source frame.
        source: Source frame designation.
        target: Target frame designation.

    Returns:
        New array of the same shape and dtype in the target frame.

    Raises:
        LengthMismatchError: If the last dimension is not 3.

    Example:
        >>> acc_ned = np.array([[0.0, 0.0, 9.81], [1.0, 2.0, 9.81]])
        >>> remap_array(acc_ned, "NorthEastDown", "EastNorthUp")
        array([[ 0.  ,  0.  , -9.81],
               [ 2.  ,  1.  , -9.81]])
    """
    arr = np.asarray(data)
    if arr.ndim not in (1, 2) or arr.shape[-1] != 3:
        raise LengthMismatchError(f"data must have shape (3,) or (N, 3), got {arr.shape}")

    plan = conversion_plan(resolve_descriptor(source), resolve_descriptor(target))
    out = arr[..., list(plan.permutation)]
    for p, sign in enumerate(plan.signs):
        if sign < 0:
            out[..., p] = saturating_neg_array(out[..., p])
    return out
