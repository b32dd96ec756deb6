"""
Dense value types.

Public API:
    Vector  - fixed-length vector of reals
    Matrix  - row-major matrix of reals
"""

from pylinalg.dense.vector import Vector
from pylinalg.dense.matrix import Matrix

__all__ = [
    "Vector",
    "Matrix",
]
