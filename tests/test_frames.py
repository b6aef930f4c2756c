"""Unit tests for coordframe.frames (FrameType discriminants)."""

import unittest

import pytest

from coordframe.descriptor import all_descriptors
from coordframe.errors import UnsupportedFrameError
from coordframe.frames import FRAME_DESCRIPTORS, FrameType, descriptor_for, resolve_descriptor
from coordframe.registry import EastNorthUp


class TestFrameType(unittest.TestCase):
    """Test cases for the FrameType enumeration."""

    def test_member_count(self) -> None:
        """Test 48 axis-aligned frames plus OTHER."""
        self.assertEqual(len(FrameType), 49)
        self.assertEqual(len(FRAME_DESCRIPTORS), 48)

    def test_discriminants_follow_enumeration_order(self) -> None:
        for frame_type, descriptor in zip(FrameType, all_descriptors()):
            self.assertEqual(frame_type.frame_name, descriptor.name)
            self.assertEqual(FRAME_DESCRIPTORS[frame_type], descriptor)

    def test_default_is_ned(self) -> None:
        self.assertIs(FrameType.default(), FrameType.NORTH_EAST_DOWN)
        self.assertEqual(int(FrameType.NORTH_EAST_DOWN), 0)
        self.assertEqual(int(FrameType.EAST_NORTH_UP), 9)
        self.assertEqual(int(FrameType.OTHER), 48)

    def test_frame_name(self) -> None:
        self.assertEqual(FrameType.EAST_NORTH_UP.frame_name, "EastNorthUp")
        self.assertEqual(FrameType.UP_WEST_SOUTH.frame_name, "UpWestSouth")


class TestParse:
    """Test suite for FrameType.parse."""

    @pytest.mark.parametrize(
        "tag",
        [FrameType.EAST_NORTH_UP, 9, "9", "EastNorthUp", "EAST_NORTH_UP", "east_north_up", "eastnorthup"],
    )
    def test_parse_variants(self, tag):
        assert FrameType.parse(tag) is FrameType.EAST_NORTH_UP

    @pytest.mark.parametrize("tag", [-1, 49, 255, "NorthSouthUp", "ned", 1.5, None, True])
    def test_parse_unknown(self, tag):
        with pytest.raises(UnsupportedFrameError):
            FrameType.parse(tag)

    def test_other_is_recognised_but_has_no_descriptor(self):
        assert FrameType.parse("Other") is FrameType.OTHER
        with pytest.raises(UnsupportedFrameError):
            FrameType.OTHER.descriptor
        with pytest.raises(UnsupportedFrameError):
            descriptor_for(48)

    def test_from_descriptor(self):
        for frame_type, descriptor in FRAME_DESCRIPTORS.items():
            assert FrameType.from_descriptor(descriptor) is frame_type


class TestResolveDescriptor:
    """Test suite for resolve_descriptor."""

    def test_accepts_many_forms(self):
        expected = FRAME_DESCRIPTORS[FrameType.EAST_NORTH_UP]
        assert resolve_descriptor(expected) is expected
        assert resolve_descriptor(FrameType.EAST_NORTH_UP) == expected
        assert resolve_descriptor("EastNorthUp") == expected
        assert resolve_descriptor(EastNorthUp) == expected
        assert resolve_descriptor(EastNorthUp(1, 2, 3)) == expected

    def test_rejects_unknown(self):
        with pytest.raises(UnsupportedFrameError):
            resolve_descriptor("Sideways")
