"""
Core infrastructure for pylinalg.

Shared abstractions used by the dense value types.

Key components:
    protocols: SizedSource protocol
    exceptions: Exception hierarchy
    validation: Input validators
    policies: Index policy constants
    tolerances: Tolerance tiers for approximate comparison
"""

from pylinalg.core.protocols import SizedSource
from pylinalg.core.tolerances import ToleranceTier
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

__all__ = [
    # Protocols
    "SizedSource",
    # Tolerances
    "ToleranceTier",
    # Exceptions
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
