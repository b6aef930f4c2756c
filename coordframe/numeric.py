"""
Negation helpers for component values.

Synthesized directional accessors and sign flips negate stored components.
For fixed-width integers the negation saturates: negating the minimum value
returns the maximum instead of wrapping around (e.g. int8 -128 -> 127).
Python ints and floats are negated as-is.
"""

from typing import Any

import numpy as np


def saturating_neg(value: Any) -> Any:
    """
    Negate a scalar, saturating at the bounds of fixed-width integer types.

    Args:
        value: Python number or NumPy scalar.

    Returns:
        Negated value of the same type.

    Example:
        >>> saturating_neg(2.5)
        -2.5
        >>> saturating_neg(np.int8(-128))
        127
    """
    if isinstance(value, np.integer) and not isinstance(value, np.unsignedinteger):
        info = np.iinfo(type(value))
        if value == info.min:
            return type(value)(info.max)
    return -value


def saturating_neg_array(values: np.ndarray) -> np.ndarray:
    """
    Vectorized version of saturating_neg() for NumPy arrays.

    Args:
        values: Array of any numeric dtype.

    Returns:
        New array with every element negated.
    """
    values = np.asarray(values)
    if np.issubdtype(values.dtype, np.signedinteger):
        info = np.iinfo(values.dtype)
        # Array negation wraps silently; replace the wrapped minimum.
        negated = np.negative(values)
        return np.where(values == info.min, info.max, negated).astype(values.dtype, copy=False)
    return np.negative(values)
