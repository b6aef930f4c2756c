"""Unit tests for coordframe.conversion.

Test cases include:
- Known conversions (NEU -> NED, NED -> ENU)
- Round-trip identity over all 48 x 48 frame pairs
- Flip involution and agreement with the general algorithm
- Physical meaning preserved by every conversion
- Vectorized remap_array for sensor time series
"""

import unittest

import numpy as np
import pytest

from coordframe.axes import Axis
from coordframe.conversion import conversion_plan, convert, flip_frame, remap_array
from coordframe.coordinate import coordinate_class
from coordframe.descriptor import FrameDescriptor, all_descriptors
from coordframe.errors import LengthMismatchError, UnsupportedFrameError
from coordframe.frames import FrameType
from coordframe.registry import EastNorthUp, NorthEastDown, NorthEastUp, SouthWestUp

VALUES = (1.0, -2.5, 7.25)


class TestKnownConversions(unittest.TestCase):
    """Test cases for hand-checked conversions."""

    def test_neu_to_ned(self) -> None:
        neu = NorthEastUp(0.0, 2.0, 3.0).with_north(1.0)
        ned = neu.convert_to(NorthEastDown)

        self.assertIsInstance(ned, NorthEastDown)
        self.assertEqual(ned.north, 1.0)
        self.assertEqual(ned.east, 2.0)
        self.assertEqual(ned.down, -3.0)
        self.assertEqual(ned, [1.0, 2.0, -3.0])

    def test_ned_to_enu(self) -> None:
        enu = convert(NorthEastDown(1.0, 2.0, 3.0), EastNorthUp)
        self.assertEqual(enu, [2.0, 1.0, -3.0])

    def test_to_ned_and_to_enu(self) -> None:
        enu = EastNorthUp(2.0, 1.0, -3.0)
        self.assertEqual(enu.to_ned(), [1.0, 2.0, 3.0])
        self.assertEqual(enu.to_ned().to_enu(), enu)

    def test_target_designations(self) -> None:
        ned = NorthEastDown(1.0, 2.0, 3.0)
        expected = EastNorthUp(2.0, 1.0, -3.0)
        self.assertEqual(convert(ned, FrameType.EAST_NORTH_UP), expected)
        self.assertEqual(convert(ned, "EastNorthUp"), expected)
        self.assertEqual(convert(ned, 9), expected)
        self.assertEqual(convert(ned, EastNorthUp.frame), expected)

    def test_unknown_target(self) -> None:
        with self.assertRaises(UnsupportedFrameError):
            convert(NorthEastDown(1, 2, 3), FrameType.OTHER)

    def test_identity_plan(self) -> None:
        plan = conversion_plan(NorthEastDown.frame, NorthEastDown.frame)
        self.assertTrue(plan.is_identity)
        self.assertEqual(NorthEastDown(1, 2, 3).convert_to(NorthEastDown), [1, 2, 3])

    def test_integer_components_stay_exact(self) -> None:
        enu = convert(NorthEastDown(1, 2, 3), EastNorthUp)
        self.assertEqual(enu.to_tuple(), (2, 1, -3))
        self.assertTrue(all(isinstance(c, int) for c in enu))


class TestAllPairs:
    """Test suite covering every pair of frames."""

    @pytest.mark.parametrize("source", all_descriptors(), ids=lambda d: d.name)
    def test_round_trip(self, source):
        """Test convert(convert(v, F2), F1) == v for every target F2."""
        value = coordinate_class(source)(*VALUES)
        for target in all_descriptors():
            there = convert(value, target)
            assert there.frame == target
            assert convert(there, source) == value

    @pytest.mark.parametrize("source", all_descriptors(), ids=lambda d: d.name)
    def test_physical_meaning_preserved(self, source):
        value = coordinate_class(source)(*VALUES)
        for target in all_descriptors():
            converted = convert(value, target)
            for axis in Axis:
                assert converted.component(axis) == value.component(axis)

    def test_plan_inverse_and_matrix(self):
        for source in all_descriptors():
            for target in all_descriptors():
                plan = conversion_plan(source, target)
                forward = plan.matrix
                backward = plan.inverse().matrix
                np.testing.assert_array_equal(forward @ backward, np.eye(3, dtype=np.int64))
                np.testing.assert_array_equal(forward @ np.array(VALUES), plan.apply(VALUES))


class TestFlip(unittest.TestCase):
    """Test cases for flip_frame."""

    def test_flip_ned(self) -> None:
        flipped = flip_frame(NorthEastDown(1.0, 2.0, 3.0))
        self.assertIsInstance(flipped, SouthWestUp)
        self.assertEqual(flipped, [-1.0, -2.0, -3.0])
        self.assertEqual(flipped.north, 1.0)

    def test_flip_involution(self) -> None:
        for descriptor in all_descriptors():
            value = coordinate_class(descriptor)(*VALUES)
            self.assertEqual(flip_frame(flip_frame(value)), value)

    def test_flip_agrees_with_general_conversion(self) -> None:
        """Test the negation shortcut equals convert() to the flipped frame."""
        for descriptor in all_descriptors():
            value = coordinate_class(descriptor)(*VALUES)
            self.assertEqual(flip_frame(value), convert(value, descriptor.flip()))
            self.assertEqual(flip_frame(value).to_tuple(), value.map(lambda c: -c).to_tuple())

    def test_flip_plan_never_permutes(self) -> None:
        for descriptor in all_descriptors():
            plan = conversion_plan(descriptor, descriptor.flip())
            self.assertEqual(plan.permutation, (0, 1, 2))
            self.assertEqual(plan.signs, (-1, -1, -1))


class TestRemapArray:
    """Test suite for vectorized conversion."""

    def test_single_vector(self):
        out = remap_array([1.0, 2.0, 3.0], "NorthEastDown", "EastNorthUp")
        np.testing.assert_array_equal(out, [2.0, 1.0, -3.0])

    def test_time_series_matches_scalar_conversion(self):
        rng = np.random.default_rng(0)
        data = rng.normal(size=(20, 3))
        source = FrameDescriptor.from_name("WestUpSouth")
        target = FrameDescriptor.from_name("DownEastNorth")

        out = remap_array(data, source, target)

        assert out.shape == (20, 3)
        for row_in, row_out in zip(data, out):
            expected = convert(coordinate_class(source).from_slice(row_in), target)
            np.testing.assert_array_equal(row_out, np.asarray(expected))

    def test_input_not_modified(self):
        data = np.array([[1.0, 2.0, 3.0]])
        remap_array(data, FrameType.NORTH_EAST_DOWN, FrameType.SOUTH_WEST_UP)
        np.testing.assert_array_equal(data, [[1.0, 2.0, 3.0]])

    def test_integer_saturation(self):
        data = np.array([[-128, 5, -128]], dtype=np.int8)
        out = remap_array(data, "NorthEastDown", "SouthWestUp")
        assert out.dtype == np.int8
        np.testing.assert_array_equal(out, [[127, -5, 127]])

    @pytest.mark.parametrize("shape", [(2,), (4,), (5, 2), (2, 3, 3)])
    def test_bad_shape(self, shape):
        with pytest.raises(LengthMismatchError):
            remap_array(np.zeros(shape), "NorthEastDown", "EastNorthUp")
