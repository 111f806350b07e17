"""Tolerance-based comparison for floating-point values.

Every structural equality in the kernel (tuples, matrices) is built on
``roughly_equal`` rather than exact ``==`` so that results which differ only
by rounding error still compare equal.

Example:
    >>> roughly_equal(0.1 + 0.2, 0.3)
    True
    >>> roughly_equal(1.0, 1.001)
    False
"""

import numpy as np
import numpy.typing as npt

# Two scalars closer than this are considered equal
EPSILON = 1e-5


def roughly_equal(a: float, b: float) -> bool:
    """Return True if ``a`` and ``b`` differ by less than EPSILON.

    NaN compares unequal to everything, including itself.
    """
    return abs(a - b) < EPSILON


def all_roughly_equal(a: npt.ArrayLike, b: npt.ArrayLike) -> bool:
    """Element-wise ``roughly_equal`` over two same-shape arrays."""
    return bool(np.all(np.abs(np.subtract(a, b)) < EPSILON))
