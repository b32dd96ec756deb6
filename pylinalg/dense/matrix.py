"""
Matrix: dense row-major matrix of real numbers.

A rows x cols grid stored as one read-only float64 buffer of rows * cols
values, where element (i, j) sits at flat index i * cols + j. Rows and
columns are extracted as independent Vector copies.

Construction:
    Matrix.from_vector(v)                      # single column
    Matrix.from_shaped([1, 2, 3, 4, 5, 6], 2, 3)
    Matrix.from_shaped_vector(v, 2, 3)
    Matrix.from_array(np.eye(3))
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.exceptions import (
    ColumnOutOfBoundsError,
    IndexOutOfBoundsError,
    InsufficientSourceError,
    RowOutOfBoundsError,
    ValidationError,
)
from pylinalg.core.policies import DEFAULT_INDEX_POLICY
from pylinalg.core.tolerances import CPU_FP64, ToleranceTier
from pylinalg.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_index,
    check_non_negative_int,
    check_sized,
    warn_non_finite,
)
from pylinalg.dense._common import fill_buffer, freeze
from pylinalg.dense.vector import Vector


@dataclass(frozen=True, eq=False, repr=False)
class Matrix:
    """
    Dense row-major matrix of float64 values.

    Construct via factory classmethods, not directly. Immutable after
    construction: transpose() returns a new Matrix.
    """
    _buffer: NDArray[np.float64]
    _rows: int
    _cols: int

    __array_ufunc__ = None

    # === Construction ===

    @classmethod
    def from_vector(cls, vector: Vector) -> Matrix:
        """Single-column matrix with one row per vector element."""
        if not isinstance(vector, Vector):
            raise ValidationError(
                f"vector: expected Vector, got {type(vector).__name__}"
            )
        return cls._build(vector.to_numpy(), vector.size(), 1)

    @classmethod
    def from_shaped(cls, source: Any, rows: int, cols: int) -> Matrix:
        """
        Build a rows x cols matrix, filling rows first from a sized source.

        Parameters
        ----------
        source : SizedSource
            list, tuple, range, 1-D numpy array, Vector, or anything with
            __len__ and __iter__.
        rows, cols : int
            Requested shape. len(source) must equal rows * cols exactly.

        Raises
        ------
        UnsizedSourceError
            If source has no len(). Nothing is consumed.
        DimensionError
            If source is a numpy array that is not 1-D.
        InsufficientSourceError
            If len(source) != rows * cols. Checked before consumption.
        ValidationError
            If rows or cols is not a non-negative integer, or an element
            is not a real number.
        """
        rows = check_non_negative_int(rows, "rows")
        cols = check_non_negative_int(cols, "cols")

        if isinstance(source, np.ndarray):
            source = check_array(source, "source")
            check_1d(source, "source")
            count = int(source.size)
        elif isinstance(source, Vector):
            count = source.size()
        else:
            count = check_sized(source, "source")

        expected = rows * cols
        if count != expected:
            raise InsufficientSourceError(
                f"source: {count} elements cannot fill a {rows}x{cols} matrix "
                f"(needs exactly {expected})",
                expected=expected,
                actual=count,
            )

        if isinstance(source, Vector):
            return cls._build(source.to_numpy(), rows, cols)

        buffer = fill_buffer(source, "source")
        warn_non_finite(buffer, "source")
        return cls._build(buffer, rows, cols)

    # Alias for callers thinking in terms of the input abstraction
    from_sized_sequence = from_shaped

    @classmethod
    def from_shaped_vector(cls, vector: Vector, rows: int, cols: int) -> Matrix:
        """Reshape a Vector into a rows x cols matrix, filling rows first."""
        if not isinstance(vector, Vector):
            raise ValidationError(
                f"vector: expected Vector, got {type(vector).__name__}"
            )
        return cls.from_shaped(vector, rows, cols)

    @classmethod
    def from_array(cls, array: ArrayLike) -> Matrix:
        """
        Build from a 2-D array-like (rows x cols).

        1-D input is reshaped to a single column, matching from_vector().
        """
        data = check_array(array, "array")
        if data.ndim == 1:
            data = data.reshape(-1, 1)
        check_2d(data, "array")

        rows, cols = data.shape
        buffer = data.flatten()
        warn_non_finite(buffer, "array")
        return cls._build(buffer, rows, cols)

    @classmethod
    def _build(cls, buffer: NDArray[np.float64], rows: int, cols: int) -> Matrix:
        """Wrap an owned row-major buffer of exactly rows * cols values."""
        if buffer.shape != (rows * cols,):
            raise InsufficientSourceError(
                f"buffer of shape {buffer.shape} does not hold a {rows}x{cols} matrix",
                expected=rows * cols,
                actual=int(buffer.size),
            )
        return cls(_buffer=freeze(buffer), _rows=rows, _cols=cols)

    # === Properties ===

    def row_count(self) -> int:
        """Number of rows."""
        return self._rows

    def column_count(self) -> int:
        """Number of columns."""
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, cols)."""
        return (self._rows, self._cols)

    # === Extraction ===

    def row(self, i: int) -> Vector:
        """
        Row i as a new Vector: flat indices [i * cols, i * cols + cols).

        Raises:
            RowOutOfBoundsError: If i is negative or i >= row_count()
        """
        i = self._check_axis_index(i, self._rows, "row", RowOutOfBoundsError)
        start = i * self._cols
        return Vector._build(
            self._buffer[start:start + self._cols].copy(), DEFAULT_INDEX_POLICY
        )

    def col(self, j: int) -> Vector:
        """
        Column j as a new Vector: every value whose flat index modulo cols
        equals j.

        Raises:
            ColumnOutOfBoundsError: If j is negative or j >= column_count()
        """
        j = self._check_axis_index(j, self._cols, "column", ColumnOutOfBoundsError)
        return Vector._build(self._buffer[j::self._cols].copy(), DEFAULT_INDEX_POLICY)

    @staticmethod
    def _check_axis_index(
        index: Any,
        bound: int,
        axis: str,
        error: type[IndexOutOfBoundsError],
    ) -> int:
        try:
            index = check_index(index, axis)
        except IndexOutOfBoundsError as e:
            raise error(str(e), index=e.index, bound=bound) from e
        if index >= bound:
            raise error(
                f"{axis} {index} out of range for matrix with {bound} {axis}s",
                index=index,
                bound=bound,
            )
        return index

    # === Transformation ===

    def transpose(self) -> Matrix:
        """
        New cols x rows matrix with result[j, i] == self[i, j].

        Values are permuted, not relabelled: the result's row-major buffer
        is this matrix read column by column.
        """
        grid = self._buffer.reshape(self._rows, self._cols)
        return Matrix._build(grid.T.flatten(), self._cols, self._rows)

    @property
    def T(self) -> Matrix:
        """Transpose."""
        return self.transpose()

    # === Comparison ===

    def isclose(self, other: Matrix, tolerance: ToleranceTier = CPU_FP64) -> bool:
        """Approximate equality under a tolerance tier. Shapes must match."""
        if not isinstance(other, Matrix) or self.shape != other.shape:
            return False
        return bool(np.allclose(
            self._buffer, other._buffer,
            rtol=tolerance.rtol, atol=tolerance.atol,
        ))

    def to_numpy(self) -> NDArray[np.float64]:
        """Writeable (rows, cols) copy of the values."""
        return self._buffer.reshape(self._rows, self._cols).copy()

    # === Python protocol ===

    def __len__(self) -> int:
        return self._rows * self._cols

    def __iter__(self) -> Iterator[float]:
        return iter(self._buffer.tolist())

    def __getitem__(self, key: Any) -> float:
        """m[k] reads flat row-major index k; m[i, j] reads row i, column j."""
        if isinstance(key, tuple):
            if len(key) != 2:
                raise ValidationError(
                    f"index: expected (row, col), got {len(key)} components"
                )
            i = self._check_axis_index(key[0], self._rows, "row", RowOutOfBoundsError)
            j = self._check_axis_index(key[1], self._cols, "column", ColumnOutOfBoundsError)
            return float(self._buffer[i * self._cols + j])

        k = check_index(key, "index")
        if k >= len(self):
            raise IndexOutOfBoundsError(
                f"flat index {k} out of range for {self._rows}x{self._cols} matrix",
                index=k,
                bound=len(self),
            )
        return float(self._buffer[k])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(
            np.array_equal(self._buffer, other._buffer)
        )

    def __repr__(self) -> str:
        return f"Matrix({self._rows}x{self._cols}, {self.to_numpy().tolist()})"
