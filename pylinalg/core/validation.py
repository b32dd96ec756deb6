"""
Input validation utilities for pylinalg.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on arrays)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers
import operator
import warnings

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pylinalg.core.exceptions import (
    DimensionError,
    IndexOutOfBoundsError,
    MismatchedSizesError,
    UnsizedSourceError,
    ValidationError,
)
from pylinalg.core.policies import ALL_INDEX_POLICIES
from pylinalg.core.protocols import SizedSource


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.float64]:
    """
    Validate and convert input to a float64 numpy array.

    Rejects inputs that result in object dtype (mixed types or non-numeric
    data), non-numeric dtypes (strings, booleans, datetimes) and complex
    dtypes.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with dtype float64

    Raises:
        ValidationError: If input cannot be converted to a real array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected real numbers"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, expected real numbers"
        )

    return result.astype(np.float64, copy=False)


def check_ndim(array: NDArray[np.float64], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.float64], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.float64], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_sized(source: Any, name: str) -> int:
    """
    Verify a source reports its element count before consumption.

    Args:
        source: Candidate sized source
        name: Parameter name for error messages

    Returns:
        The reported element count

    Raises:
        ValidationError: If source is a str or bytes object
        UnsizedSourceError: If source has no len(), or len() fails
    """
    if isinstance(source, (str, bytes, bytearray)):
        raise ValidationError(
            f"{name}: got {type(source).__name__}, expected a sequence of real numbers"
        )

    if not isinstance(source, SizedSource):
        raise UnsizedSourceError(
            f"{name}: {type(source).__name__} cannot report its element count; "
            f"pass a list, tuple or array instead of a generator or iterator",
            source_type=type(source).__name__,
        )

    try:
        return len(source)
    except TypeError as e:
        raise UnsizedSourceError(
            f"{name}: {type(source).__name__} cannot report its element count: {e}",
            source_type=type(source).__name__,
        ) from e


def check_real(value: Any, name: str) -> float:
    """
    Verify a value is a real number and return it as a float.

    Booleans are rejected even though bool subclasses int.

    Raises:
        ValidationError: If value is not a real number or overflows float64
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__} {value!r}"
        )
    try:
        return float(value)
    except OverflowError as e:
        raise ValidationError(
            f"{name}: {type(value).__name__} value is too large for float64"
        ) from e


def check_index(index: Any, name: str) -> int:
    """
    Verify an index is a non-negative integer.

    Accepts anything implementing __index__ (int, numpy integers).

    Raises:
        ValidationError: If index is not an integer
        IndexOutOfBoundsError: If index is negative
    """
    if isinstance(index, (bool, np.bool_)):
        raise ValidationError(f"{name}: expected an integer, got bool")
    try:
        result = operator.index(index)
    except TypeError as e:
        raise ValidationError(
            f"{name}: expected an integer, got {type(index).__name__}"
        ) from e

    if result < 0:
        raise IndexOutOfBoundsError(
            f"{name}: negative index {result} is not supported",
            index=result,
        )
    return result


def check_non_negative_int(value: Any, name: str) -> int:
    """
    Verify a shape component is a non-negative integer.

    Raises:
        ValidationError: If value is not an integer or is negative
    """
    if isinstance(value, (bool, np.bool_)):
        raise ValidationError(f"{name}: expected an integer, got bool")
    try:
        result = operator.index(value)
    except TypeError as e:
        raise ValidationError(
            f"{name}: expected an integer, got {type(value).__name__}"
        ) from e

    if result < 0:
        raise ValidationError(f"{name}: must be non-negative, got {result}")
    return result


def check_index_policy(policy: str) -> str:
    """
    Verify an index policy is one of the known policies.

    Raises:
        ValidationError: If policy is unknown
    """
    if policy not in ALL_INDEX_POLICIES:
        raise ValidationError(
            f"index_policy: unknown policy {policy!r}, "
            f"expected one of {sorted(ALL_INDEX_POLICIES)}"
        )
    return policy


def check_same_size(left: int, right: int) -> None:
    """
    Verify two operands have the same number of elements.

    Raises:
        MismatchedSizesError: If sizes differ
    """
    if left != right:
        raise MismatchedSizesError(
            f"Mismatched vector sizes: left={left}, right={right}",
            left_size=left,
            right_size=right,
        )


def warn_non_finite(array: NDArray[np.float64], name: str) -> None:
    """
    Warn if array contains NaN or Inf values.

    Non-finite values are valid float64 data, so this never raises.

    Args:
        array: Array to check
        name: Parameter name for the warning message
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        warnings.warn(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)",
            RuntimeWarning,
            stacklevel=3,
        )
