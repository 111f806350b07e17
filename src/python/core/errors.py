"""Exceptions raised by the geometry kernel.

Each class also derives from the built-in exception a caller would naturally
catch (``ValueError``, ``IndexError``, ``ArithmeticError``), so code written
against plain Python errors keeps working.
"""


class KernelError(Exception):
    """Base class for all kernel errors."""


class ShapeMismatchError(KernelError, ValueError):
    """A matrix or array does not have the shape the operation requires."""


class DimensionMismatchError(ShapeMismatchError):
    """Matrix product with incompatible inner dimensions."""


class OutOfRangeError(KernelError, IndexError):
    """A row or column index outside the matrix bounds."""


class SingularMatrixError(KernelError, ArithmeticError):
    """Inversion requested for a matrix whose determinant is (roughly) zero."""


class DegenerateVectorError(KernelError, ArithmeticError):
    """Normalization requested for a zero-magnitude vector."""
