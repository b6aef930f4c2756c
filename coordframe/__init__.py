"""Axis-aligned coordinate frames for 3-component sensor vectors.

This package tags vectors with their axis convention and converts them
losslessly between any two of the 48 conventions built from the antipodal
pairs North/South, East/West and Up/Down:
- axes: Axis and AxisPair definitions
- descriptor: Frame descriptors (which axis sits at x, y, z)
- frames: FrameType runtime discriminants
- coordinate: Frame-bound coordinate values and accessors
- conversion: Signed-permutation conversion between frames
- registry: Named frame classes and runtime dispatch
- config: JSON sensor frame settings

Example:
    >>> from coordframe import NorthEastUp, NorthEastDown
    >>> neu = NorthEastUp(1.0, 2.0, 3.0)
    >>> neu.convert_to(NorthEastDown) == [1.0, 2.0, -3.0]
    True
"""

from coordframe.axes import Axis, AxisPair, opposite, pair_of
from coordframe.config import (
    FrameSettings,
    SensorFrameConfig,
    load_frame_settings,
    parse_frame_settings,
    save_frame_settings,
)
from coordframe.conversion import (
    ConversionPlan,
    conversion_plan,
    convert,
    flip_frame,
    remap_array,
)
from coordframe.coordinate import Coordinate, coordinate_class
from coordframe.descriptor import FrameDescriptor, all_descriptors, make_descriptor
from coordframe.errors import (
    CoordinateFrameError,
    InvalidFrameError,
    LengthMismatchError,
    UnsupportedFrameError,
)
from coordframe.frames import FRAME_DESCRIPTORS, FrameType, descriptor_for
from coordframe.numeric import saturating_neg, saturating_neg_array
from coordframe.registry import *  # noqa: F401,F403  (the 48 named frame classes)
from coordframe.registry import FRAME_CLASSES, construct_frame, coordinate_type, new_from

__version__ = "0.1.0"

__all__ = [
    # Axes
    "Axis",
    "AxisPair",
    "opposite",
    "pair_of",
    # Descriptors
    "FrameDescriptor",
    "make_descriptor",
    "all_descriptors",
    # Frame types
    "FrameType",
    "FRAME_DESCRIPTORS",
    "descriptor_for",
    # Values
    "Coordinate",
    "coordinate_class",
    # Conversion
    "ConversionPlan",
    "conversion_plan",
    "convert",
    "flip_frame",
    "remap_array",
    # Registry
    "FRAME_CLASSES",
    "coordinate_type",
    "construct_frame",
    "new_from",
    # Numeric
    "saturating_neg",
    "saturating_neg_array",
    # Config
    "FrameSettings",
    "SensorFrameConfig",
    "load_frame_settings",
    "parse_frame_settings",
    "save_frame_settings",
    # Errors
    "CoordinateFrameError",
    "InvalidFrameError",
    "LengthMismatchError",
    "UnsupportedFrameError",
] + [frame_type.frame_name for frame_type in FRAME_CLASSES]
