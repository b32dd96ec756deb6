"""
Buffer materialisation shared by Vector and Matrix.

Both types hold a single read-only, contiguous, 1-D float64 buffer. This
module turns a sized source into such a buffer: allocate from the
reported count, then fill by iterating.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pylinalg.core.exceptions import InsufficientSourceError
from pylinalg.core.validation import (
    check_1d,
    check_array,
    check_real,
    check_sized,
)


def fill_buffer(source: Any, name: str) -> NDArray[np.float64]:
    """
    Copy a sized source of reals into a fresh float64 buffer.

    NumPy arrays take the vectorised path and must be 1-D. Anything else
    must satisfy SizedSource and yield exactly len(source) real numbers.

    Raises:
        UnsizedSourceError: If source has no len()
        InsufficientSourceError: If iteration yields a different count
            than len() reported
        ValidationError: If an element is not a real number
    """
    if isinstance(source, np.ndarray):
        array = check_array(source, name)
        check_1d(array, name)
        return np.array(array, dtype=np.float64, copy=True)

    count = check_sized(source, name)
    buffer = np.empty(count, dtype=np.float64)

    filled = 0
    for value in source:
        if filled == count:
            raise InsufficientSourceError(
                f"{name}: yielded more than the {count} elements it reported",
                expected=count,
                actual=filled + 1,
            )
        buffer[filled] = check_real(value, f"{name}[{filled}]")
        filled += 1

    if filled != count:
        raise InsufficientSourceError(
            f"{name}: reported {count} elements but yielded {filled}",
            expected=count,
            actual=filled,
        )

    return buffer


def freeze(buffer: NDArray[np.float64]) -> NDArray[np.float64]:
    """Mark an owned buffer read-only and return it."""
    buffer.flags.writeable = False
    return buffer
