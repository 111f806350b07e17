"""Dense matrices, cofactor-based inversion and affine transformations.

The Matrix class is a general rows x cols grid of 64-bit floats stored in a
NumPy array. On top of the usual product and transpose it computes
determinants by recursive cofactor expansion along the first row, and
inverses with the adjugate formula::

    inverse[col][row] = cofactor(row, col) / determinant

The recursion is exponential in the matrix size, which is fine for the 2x2 to
4x4 matrices this kernel works with.

4x4 constructors build the standard homogeneous transforms (translation,
scaling, rotation about each axis, shearing). The fluent methods
(``translate``, ``scale``, ``rotate_x`` ...) pre-multiply, so a chain reads in
the order the transforms are applied:

    >>> from math import pi
    >>> from src.python.core.tuples import point
    >>> m = Matrix.identity4().rotate_x(pi / 2).scale(5, 5, 5).translate(10, 5, 7)
    >>> m * point(1, 0, 1) == point(15, 0, 7)
    True

Each step returns a new matrix; nothing is mutated in place.
"""

from __future__ import annotations

import logging
import math
import numbers
from collections.abc import Iterable, Sequence
from typing import Any, TypeVar, overload

import numpy as np
import numpy.typing as npt

from src.python.core.errors import (
    DimensionMismatchError,
    OutOfRangeError,
    ShapeMismatchError,
    SingularMatrixError,
)
from src.python.core.roughly import all_roughly_equal, roughly_equal
from src.python.core.tuples import Point, Tuple, Vector, _Homogeneous

logger = logging.getLogger(__name__)

T = TypeVar("T", Tuple, Point, Vector)


class Matrix:
    """A rows x cols matrix of floats in row-major order.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
    """

    __slots__ = ("_data",)

    def __init__(self, rows: int, cols: int) -> None:
        """Create a zero-filled matrix."""
        if rows < 1 or cols < 1:
            raise ShapeMismatchError(f"Matrix must be at least 1x1, got {rows}x{cols}.")
        self._data = np.zeros((rows, cols), dtype=np.float64)

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def with_values(cls, rows: int, cols: int, values: Sequence[float]) -> Matrix:
        """Create a matrix from a flat row-major list of values.

        Raises:
            ShapeMismatchError: If ``len(values) != rows * cols``.
        """
        if len(values) != rows * cols:
            raise ShapeMismatchError(
                f"Expected {rows * cols} values for a {rows}x{cols} matrix, got {len(values)}."
            )
        m = cls(rows, cols)
        m._data[:, :] = np.asarray(values, dtype=np.float64).reshape(rows, cols)
        return m

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> Matrix:
        """Create a matrix from a list of equally long rows."""
        widths = {len(row) for row in rows}
        if len(widths) != 1:
            raise ShapeMismatchError(f"Rows have differing lengths: {sorted(widths)}.")
        return cls.with_values(len(rows), widths.pop(), [v for row in rows for v in row])

    @classmethod
    def from_tuple(cls, t: _Homogeneous) -> Matrix:
        """Create a 4x1 column matrix from a homogeneous tuple."""
        return cls.with_values(4, 1, list(t))

    @classmethod
    def _from_array(cls, array: npt.NDArray[np.float64]) -> Matrix:
        m = cls.__new__(cls)
        m._data = np.array(array, dtype=np.float64)
        return m

    @classmethod
    def identity(cls, size: int) -> Matrix:
        """The size x size identity matrix."""
        if size < 1:
            raise ShapeMismatchError(f"Matrix must be at least 1x1, got {size}x{size}.")
        return cls._from_array(np.eye(size))

    @classmethod
    def identity4(cls) -> Matrix:
        """The 4x4 identity, neutral element of the transformation chain."""
        return cls.identity(4)

    # -------------------------------------------------------------------------
    # Element access
    # -------------------------------------------------------------------------

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        return self._data.shape[1]

    def _check_index(self, row: int, col: int) -> None:
        if not (isinstance(row, numbers.Integral) and isinstance(col, numbers.Integral)):
            raise OutOfRangeError(f"Matrix indices must be integers, got ({row!r}, {col!r}).")
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise OutOfRangeError(
                f"Index ({row}, {col}) out of range for a {self.rows}x{self.cols} matrix."
            )

    def value_at(self, row: int, col: int) -> float:
        """Return the value at (row, col).

        Raises:
            OutOfRangeError: If the index is outside the matrix.
        """
        self._check_index(row, col)
        return float(self._data[row, col])

    def set_value(self, row: int, col: int, value: float) -> None:
        """Overwrite the value at (row, col).

        Raises:
            OutOfRangeError: If the index is outside the matrix.
        """
        self._check_index(row, col)
        self._data[row, col] = value

    def __getitem__(self, index: tuple[int, int]) -> float:
        if not isinstance(index, tuple) or len(index) != 2:
            raise TypeError("Expected a (row, col) index.")
        return self.value_at(*index)

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        if not isinstance(index, tuple) or len(index) != 2:
            raise TypeError("Expected a (row, col) index.")
        self.set_value(index[0], index[1], value)

    def to_numpy(self) -> npt.NDArray[np.float64]:
        """Return a copy of the values as a (rows, cols) array."""
        return self._data.copy()

    def tolist(self) -> list[list[float]]:
        return self._data.tolist()

    def copy(self) -> Matrix:
        return Matrix._from_array(self._data)

    # -------------------------------------------------------------------------
    # Comparison and display
    # -------------------------------------------------------------------------

    __hash__ = None  # type: ignore[assignment]

    def __eq__(self, other: object) -> bool:
        # Different shapes are simply unequal.
        if not isinstance(other, Matrix):
            return NotImplemented
        if self._data.shape != other._data.shape:
            return False
        return all_roughly_equal(self._data, other._data)

    def __repr__(self) -> str:
        return f"Matrix({self.rows}, {self.cols}, {self._data.tolist()!r})"

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def transpose(self) -> Matrix:
        return Matrix._from_array(self._data.T)

    @overload
    def __mul__(self, other: Matrix) -> Matrix: ...

    @overload
    def __mul__(self, other: T) -> T: ...

    def __mul__(self, other: Any) -> Any:
        """Matrix product, or application to a homogeneous tuple.

        Multiplying by a Point, Vector or Tuple treats it as a 4x1 column and
        returns a value of the same type.

        Raises:
            DimensionMismatchError: If the inner dimensions differ.
        """
        if isinstance(other, Matrix):
            if self.cols != other.rows:
                raise DimensionMismatchError(
                    f"Cannot multiply {self.rows}x{self.cols} by {other.rows}x{other.cols}."
                )
            return Matrix._from_array(self._data @ other._data)
        if isinstance(other, _Homogeneous):
            if self.cols != 4 or self.rows != 4:
                raise DimensionMismatchError(
                    f"Cannot apply a {self.rows}x{self.cols} matrix to a 4-component tuple."
                )
            result = Tuple(*(float(v) for v in self._data @ np.array(list(other))))
            if isinstance(other, Point):
                return Point.from_tuple(result)
            if isinstance(other, Vector):
                return Vector.from_tuple(result)
            return result
        return NotImplemented

    # -------------------------------------------------------------------------
    # Determinant and inversion
    # -------------------------------------------------------------------------

    def _require_square(self, operation: str) -> None:
        if self.rows != self.cols:
            raise ShapeMismatchError(
                f"{operation} is only defined for square matrices, got {self.rows}x{self.cols}."
            )

    def determinant(self) -> float:
        """Determinant by cofactor expansion along row 0.

        Raises:
            ShapeMismatchError: If the matrix is not square.
        """
        self._require_square("Determinant")
        if self.rows == 1:
            return float(self._data[0, 0])
        if self.rows == 2:
            a, b = self._data[0]
            c, d = self._data[1]
            return float(a * d - b * c)
        return sum(self.value_at(0, col) * self.cofactor(0, col) for col in range(self.cols))

    def submatrix(self, remove_row: int, remove_col: int) -> Matrix:
        """Copy of the matrix without the given row and column.

        Raises:
            OutOfRangeError: If the matrix has a single row or column, or the
                index is out of range.
        """
        if self.rows < 2 or self.cols < 2:
            raise OutOfRangeError(
                f"A {self.rows}x{self.cols} matrix has no submatrix."
            )
        self._check_index(remove_row, remove_col)
        reduced = np.delete(np.delete(self._data, remove_row, axis=0), remove_col, axis=1)
        return Matrix._from_array(reduced)

    def minor(self, row: int, col: int) -> float:
        return self.submatrix(row, col).determinant()

    def cofactor(self, row: int, col: int) -> float:
        minor = self.minor(row, col)
        return -minor if (row + col) % 2 else minor

    def invertible(self) -> bool:
        return not roughly_equal(self.determinant(), 0.0)

    def inverse(self) -> Matrix:
        """Inverse via the transposed cofactor matrix over the determinant.

        Raises:
            ShapeMismatchError: If the matrix is not square.
            SingularMatrixError: If the determinant is roughly zero.
        """
        self._require_square("Inverse")
        det = self.determinant()
        if roughly_equal(det, 0.0):
            logger.debug("Refusing to invert singular %dx%d matrix (det=%g)", self.rows, self.cols, det)
            raise SingularMatrixError(f"Matrix is not invertible (determinant {det}).")

        result = Matrix(self.rows, self.cols)
        if self.rows == 1:
            result._data[0, 0] = 1.0 / det
            return result
        for row in range(self.rows):
            for col in range(self.cols):
                # Transposed on purpose: cofactor(row, col) lands at [col][row].
                result._data[col, row] = self.cofactor(row, col) / det
        return result

    # -------------------------------------------------------------------------
    # Transformation constructors
    # -------------------------------------------------------------------------

    @classmethod
    def translation(cls, x: float, y: float, z: float) -> Matrix:
        m = cls.identity4()
        m._data[:3, 3] = (x, y, z)
        return m

    @classmethod
    def scaling(cls, x: float, y: float, z: float) -> Matrix:
        return cls._from_array(np.diag((x, y, z, 1.0)))

    @classmethod
    def rotation_x(cls, radians: float) -> Matrix:
        c, s = math.cos(radians), math.sin(radians)
        return cls.from_rows(
            [
                [1.0, 0.0, 0.0, 0.0],
                [0.0, c, -s, 0.0],
                [0.0, s, c, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    @classmethod
    def rotation_y(cls, radians: float) -> Matrix:
        c, s = math.cos(radians), math.sin(radians)
        return cls.from_rows(
            [
                [c, 0.0, s, 0.0],
                [0.0, 1.0, 0.0, 0.0],
                [-s, 0.0, c, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    @classmethod
    def rotation_z(cls, radians: float) -> Matrix:
        c, s = math.cos(radians), math.sin(radians)
        return cls.from_rows(
            [
                [c, -s, 0.0, 0.0],
                [s, c, 0.0, 0.0],
                [0.0, 0.0, 1.0, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    @classmethod
    def shearing(
        cls, xy: float, xz: float, yx: float, yz: float, zx: float, zy: float
    ) -> Matrix:
        """Shear: each coordinate moves in proportion to the other two.

        ``xy`` is "x moved in proportion to y", and so on.
        """
        return cls.from_rows(
            [
                [1.0, xy, xz, 0.0],
                [yx, 1.0, yz, 0.0],
                [zx, zy, 1.0, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    # -------------------------------------------------------------------------
    # Fluent composition
    # -------------------------------------------------------------------------

    def compose(self, transform: Matrix) -> Matrix:
        """Apply ``transform`` after this one: returns ``transform * self``."""
        return transform * self

    def translate(self, x: float, y: float, z: float) -> Matrix:
        return self.compose(Matrix.translation(x, y, z))

    def scale(self, x: float, y: float, z: float) -> Matrix:
        return self.compose(Matrix.scaling(x, y, z))

    def rotate_x(self, radians: float) -> Matrix:
        return self.compose(Matrix.rotation_x(radians))

    def rotate_y(self, radians: float) -> Matrix:
        return self.compose(Matrix.rotation_y(radians))

    def rotate_z(self, radians: float) -> Matrix:
        return self.compose(Matrix.rotation_z(radians))

    def shear(
        self, xy: float, xz: float, yx: float, yz: float, zx: float, zy: float
    ) -> Matrix:
        return self.compose(Matrix.shearing(xy, xz, yx, yz, zx, zy))


def chain(transforms: Iterable[Matrix]) -> Matrix:
    """Combine transforms given in application order into one matrix."""
    result = Matrix.identity4()
    for transform in transforms:
        result = result.compose(transform)
    return result
