"""Unit tests for coordframe.numeric."""

import numpy as np
import pytest

from coordframe.numeric import saturating_neg, saturating_neg_array


class TestSaturatingNeg:
    """Test suite for scalar negation."""

    def test_float(self):
        assert saturating_neg(2.5) == -2.5
        assert saturating_neg(-0.0) == 0.0

    def test_python_int_is_unbounded(self):
        assert saturating_neg(-(2**70)) == 2**70

    @pytest.mark.parametrize("dtype", [np.int8, np.int16, np.int32, np.int64])
    def test_numpy_int_min_saturates(self, dtype):
        info = np.iinfo(dtype)
        result = saturating_neg(dtype(info.min))
        assert result == info.max
        assert isinstance(result, dtype)

    def test_numpy_int_regular(self):
        assert saturating_neg(np.int16(5)) == np.int16(-5)

    def test_numpy_float(self):
        assert saturating_neg(np.float32(1.5)) == np.float32(-1.5)


class TestSaturatingNegArray:
    """Test suite for vectorized negation."""

    def test_float_array(self):
        np.testing.assert_array_equal(saturating_neg_array(np.array([1.0, -2.0])), [-1.0, 2.0])

    def test_int8_array(self):
        out = saturating_neg_array(np.array([-128, -1, 0, 127], dtype=np.int8))
        assert out.dtype == np.int8
        np.testing.assert_array_equal(out, [127, 1, 0, -127])
