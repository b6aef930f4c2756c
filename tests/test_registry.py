"""Unit tests for coordframe.registry (named classes and runtime dispatch)."""

import unittest

import numpy as np
import pytest

import coordframe
from coordframe.errors import LengthMismatchError, UnsupportedFrameError
from coordframe.frames import FrameType
from coordframe.registry import (
    FRAME_CLASSES,
    EastNorthUp,
    NorthEastDown,
    construct_frame,
    coordinate_type,
    new_from,
)


class TestNamedClasses(unittest.TestCase):
    """Test cases for the 48 named frame classes."""

    def test_every_frame_has_named_class(self) -> None:
        self.assertEqual(len(FRAME_CLASSES), 48)
        for frame_type, cls in FRAME_CLASSES.items():
            self.assertEqual(cls.__name__, frame_type.frame_name)
            self.assertIs(getattr(coordframe, frame_type.frame_name), cls)
            self.assertEqual(cls.frame.name, frame_type.frame_name)

    def test_class_docstring_describes_axes(self) -> None:
        self.assertIn("right-handed", NorthEastDown.__doc__)
        self.assertIn('x: North, the longitudinal axis', NorthEastDown.__doc__)


class TestRuntimeDispatch(unittest.TestCase):
    """Test cases for construct_frame and new_from."""

    def test_discriminant_matches_named_class(self) -> None:
        """Test runtime and static construction give identical values."""
        dynamic = construct_frame([1.0, 2.0, 3.0], FrameType.EAST_NORTH_UP)
        static = EastNorthUp(1.0, 2.0, 3.0)

        self.assertIs(type(dynamic), EastNorthUp)
        self.assertEqual(dynamic, static)
        self.assertEqual(dynamic.to_tuple(), static.to_tuple())

    def test_every_discriminant(self) -> None:
        for frame_type, cls in FRAME_CLASSES.items():
            value = construct_frame((1, 2, 3), int(frame_type))
            self.assertIsInstance(value, cls)
            self.assertIs(value.frame_type, frame_type)

    def test_new_from(self) -> None:
        value = new_from(1.0, 2.0, 3.0, "EastNorthUp")
        self.assertEqual(value, EastNorthUp(1.0, 2.0, 3.0))
        self.assertIs(coordinate_type("EastNorthUp"), EastNorthUp)

    def test_unsupported_frames(self) -> None:
        with self.assertRaises(UnsupportedFrameError):
            construct_frame([1, 2, 3], FrameType.OTHER)
        with self.assertRaises(UnsupportedFrameError):
            construct_frame([1, 2, 3], 200)
        with self.assertRaises(UnsupportedFrameError):
            new_from(1, 2, 3, "NorthNorthUp")

    def test_length_mismatch(self) -> None:
        with self.assertRaises(LengthMismatchError):
            construct_frame([1, 2], FrameType.NORTH_EAST_DOWN)
        with self.assertRaises(LengthMismatchError):
            construct_frame(np.zeros(4), FrameType.NORTH_EAST_DOWN)


@pytest.mark.parametrize("frame_type", list(FRAME_CLASSES), ids=lambda f: f.frame_name)
def test_runtime_value_converts_like_static(frame_type):
    dynamic = construct_frame([0.5, -1.0, 2.0], frame_type)
    static = FRAME_CLASSES[frame_type](0.5, -1.0, 2.0)
    assert dynamic.to_ned() == static.to_ned()
