"""
Coordinate Precision
====================

Shapes are double precision by default. Single-precision shapes store
their coordinates rounded to the nearest IEEE-754 float32 value so that
an index can pick tolerances matching the input data.
"""

from typing import Tuple

import numpy as np


def normalize(values: Tuple[float, ...], double_precision: bool) -> Tuple[float, ...]:
    """
    Convert raw coordinates to the storage precision.

    Args:
        values: Raw coordinates
        double_precision: False to round every value to float32

    Returns:
        Tuple of Python floats
    """
    if double_precision:
        return tuple(float(v) for v in values)
    return tuple(np.asarray(values, dtype=np.float32).astype(float).tolist())


def all_finite(*values: float) -> bool:
    """True if no value is NaN or infinite."""
    return bool(np.all(np.isfinite(values)))
