"""
pylinalg: minimal dense linear algebra value types for Python.

Two immutable types on contiguous float64 buffers:

    Vector: fixed-length vector with scaling, inner product, Euclidean
        length and zero-padded or strict indexing
    Matrix: row-major matrix with row/column extraction and transpose

Submodules:
    core: exceptions, validation, index policies, tolerance tiers
    dense: Vector and Matrix
"""

__version__ = "0.1.0"

from pylinalg.core.exceptions import (
    PyLinalgError,
    ValidationError,
    UnsizedSourceError,
    DimensionError,
    InsufficientSourceError,
    MismatchedSizesError,
    IndexOutOfBoundsError,
    RowOutOfBoundsError,
    ColumnOutOfBoundsError,
)
from pylinalg.core.policies import INDEX_POLICY_LENIENT, INDEX_POLICY_STRICT
from pylinalg.dense import Matrix, Vector

__all__ = [
    "__version__",
    "Vector",
    "Matrix",
    "INDEX_POLICY_LENIENT",
    "INDEX_POLICY_STRICT",
    "PyLinalgError",
    "ValidationError",
    "UnsizedSourceError",
    "DimensionError",
    "InsufficientSourceError",
    "MismatchedSizesError",
    "IndexOutOfBoundsError",
    "RowOutOfBoundsError",
    "ColumnOutOfBoundsError",
]
