"""
Vector: dense, fixed-length vector of real numbers.

Values live in a contiguous read-only float64 buffer. Every transforming
operation (scaling, cloning) returns a new Vector; nothing mutates in
place, so a Vector can be shared freely.

Construction:
    Vector.from_sequence([3.0, 4.0])
    Vector.from_sequence(np.arange(5.0), index_policy='strict')
    Vector.zeros(3)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

import numpy as np
from numpy.typing import NDArray

from pylinalg.core.exceptions import IndexOutOfBoundsError, ValidationError
from pylinalg.core.policies import (
    DEFAULT_INDEX_POLICY,
    INDEX_POLICY_LENIENT,
    ZERO_VALUE,
)
from pylinalg.core.tolerances import CPU_FP64, ToleranceTier
from pylinalg.core.validation import (
    check_index,
    check_index_policy,
    check_non_negative_int,
    check_real,
    check_same_size,
    warn_non_finite,
)
from pylinalg.dense._common import fill_buffer, freeze


@dataclass(frozen=True, eq=False, repr=False)
class Vector:
    """
    Dense vector of float64 values.

    Construct via factory classmethods, not directly.

    Index policy is fixed at construction:
        'lenient' (default): reads at or past size() return 0.0, treating
            the vector as zero-padded to infinite dimension
        'strict': reads at or past size() raise IndexOutOfBoundsError

    Equality is exact and requires equal sizes. Use isclose() for results
    of arithmetic.
    """
    _buffer: NDArray[np.float64]
    _index_policy: str = DEFAULT_INDEX_POLICY

    # Keep NumPy scalars from treating a Vector as an array operand, so
    # np.float64(2.0) * v reaches __rmul__
    __array_ufunc__ = None

    # === Construction ===

    @classmethod
    def from_sequence(
        cls,
        source: Any,
        *,
        index_policy: str = DEFAULT_INDEX_POLICY,
    ) -> Vector:
        """
        Build a Vector from a finite sized source of real numbers.

        Parameters
        ----------
        source : SizedSource
            list, tuple, range, 1-D numpy array, Vector, or anything with
            __len__ and __iter__. The element count must be known before
            iteration starts.
        index_policy : str
            'lenient' or 'strict', see pylinalg.core.policies.

        Raises
        ------
        UnsizedSourceError
            If source has no len() (generators, iterators).
        InsufficientSourceError
            If source yields a different number of elements than it reported.
        ValidationError
            If an element is not a real number.
        """
        check_index_policy(index_policy)
        if isinstance(source, Vector):
            return cls._build(source._buffer.copy(), index_policy)

        buffer = fill_buffer(source, "source")
        warn_non_finite(buffer, "source")
        return cls._build(buffer, index_policy)

    # Alias matching the iterator-based constructor name
    from_iterable = from_sequence

    @classmethod
    def zeros(cls, size: int, *, index_policy: str = DEFAULT_INDEX_POLICY) -> Vector:
        """Zero-filled Vector of the given size."""
        size = check_non_negative_int(size, "size")
        check_index_policy(index_policy)
        return cls._build(np.zeros(size, dtype=np.float64), index_policy)

    @classmethod
    def _build(cls, buffer: NDArray[np.float64], index_policy: str) -> Vector:
        """Wrap an owned buffer. Caller guarantees it is fresh and 1-D."""
        return cls(_buffer=freeze(buffer), _index_policy=index_policy)

    # === Properties ===

    @property
    def index_policy(self) -> str:
        """Out-of-range read policy chosen at construction."""
        return self._index_policy

    def size(self) -> int:
        """Number of stored values."""
        return int(self._buffer.shape[0])

    def length(self) -> float:
        """Euclidean length: sqrt(sum(x_i ** 2)). Empty vectors have length 0."""
        return float(np.sqrt(np.dot(self._buffer, self._buffer)))

    def index(self, i: int) -> float:
        """
        Value at position i.

        Raises:
            IndexOutOfBoundsError: If i is negative, or if i >= size()
                under the strict policy
            ValidationError: If i is not an integer
        """
        i = check_index(i, "index")
        if i < self.size():
            return float(self._buffer[i])
        if self._index_policy == INDEX_POLICY_LENIENT:
            return ZERO_VALUE
        raise IndexOutOfBoundsError(
            f"index {i} out of range for vector of size {self.size()}",
            index=i,
            bound=self.size(),
        )

    # === Arithmetic ===

    def scale(self, factor: float) -> Vector:
        """New Vector with every value multiplied by factor."""
        factor = check_real(factor, "factor")
        return Vector._build(self._buffer * factor, self._index_policy)

    def dot(self, other: Vector) -> float:
        """
        Inner product sum(a_i * b_i).

        Raises:
            ValidationError: If other is not a Vector
            MismatchedSizesError: If sizes differ
        """
        if not isinstance(other, Vector):
            raise ValidationError(
                f"other: expected Vector, got {type(other).__name__}"
            )
        check_same_size(self.size(), other.size())
        return float(np.dot(self._buffer, other._buffer))

    # === Comparison ===

    def equals(self, other: Vector) -> bool:
        """Exact equality: same size and pairwise equal values."""
        if not isinstance(other, Vector):
            return False
        if self.size() != other.size():
            return False
        return bool(np.array_equal(self._buffer, other._buffer))

    def isclose(self, other: Vector, tolerance: ToleranceTier = CPU_FP64) -> bool:
        """Approximate equality under a tolerance tier. Sizes must match."""
        if not isinstance(other, Vector) or self.size() != other.size():
            return False
        return bool(np.allclose(
            self._buffer, other._buffer,
            rtol=tolerance.rtol, atol=tolerance.atol,
        ))

    # === Copies ===

    def clone(self) -> Vector:
        """Independent copy with the same values and index policy."""
        return Vector._build(self._buffer.copy(), self._index_policy)

    def to_numpy(self) -> NDArray[np.float64]:
        """Writeable 1-D copy of the values."""
        return self._buffer.copy()

    # === Python protocol ===

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[float]:
        return iter(self._buffer.tolist())

    def __getitem__(self, i: int) -> float:
        return self.index(i)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.equals(other)

    def __mul__(self, other: Any) -> Any:
        if isinstance(other, Vector):
            return self.dot(other)
        if isinstance(other, (bool, np.bool_)):
            return NotImplemented
        try:
            return self.scale(other)
        except ValidationError:
            return NotImplemented

    def __rmul__(self, other: Any) -> Any:
        return self.__mul__(other)

    def __matmul__(self, other: Any) -> float:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.dot(other)

    def __copy__(self) -> Vector:
        return self.clone()

    def __deepcopy__(self, memo: dict) -> Vector:
        return self.clone()

    def __repr__(self) -> str:
        values = self._buffer.tolist()
        if self._index_policy == DEFAULT_INDEX_POLICY:
            return f"Vector({values})"
        return f"Vector({values}, index_policy={self._index_policy!r})"
