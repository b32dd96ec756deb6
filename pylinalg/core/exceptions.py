"""
Exception hierarchy for pylinalg.

All exceptions inherit from PyLinalgError to allow catching any
library-specific error. Every construction or access failure in the dense
types is a ValidationError subclass: the input was wrong, not the
arithmetic.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyLinalgError(Exception):
    """Base exception for all pylinalg errors."""
    pass


class ValidationError(PyLinalgError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class UnsizedSourceError(ValidationError):
    """
    Source cannot report its element count before being consumed.

    Buffers are allocated up front, so generators and bare iterators are
    rejected instead of being drained to discover their length.

    Attributes:
        source_type: Name of the offending source's type
    """

    def __init__(self, message: str, source_type: str | None = None):
        super().__init__(message)
        self.source_type = source_type


class DimensionError(ValidationError):
    """
    Sizes or shapes are incorrect or inconsistent.

    Raised when a buffer does not match the requested shape or when two
    operands have incompatible sizes.
    """
    pass


class InsufficientSourceError(DimensionError):
    """
    Source element count does not match the requested shape.

    Too few and too many elements are both rejected.

    Attributes:
        expected: Element count required by the shape (rows * cols)
        actual: Element count the source reported or yielded
    """

    def __init__(
        self,
        message: str,
        expected: int | None = None,
        actual: int | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class MismatchedSizesError(DimensionError):
    """
    Two vectors combined element-wise have different sizes.

    Attributes:
        left_size: Size of the left operand
        right_size: Size of the right operand
    """

    def __init__(
        self,
        message: str,
        left_size: int | None = None,
        right_size: int | None = None,
    ):
        super().__init__(message)
        self.left_size = left_size
        self.right_size = right_size


class IndexOutOfBoundsError(ValidationError, IndexError):
    """
    Requested index lies outside the valid range.

    Also an IndexError, so code written against plain sequences keeps
    working.

    Attributes:
        index: The requested index
        bound: Exclusive upper bound of the valid range
    """

    def __init__(
        self,
        message: str,
        index: int | None = None,
        bound: int | None = None,
    ):
        super().__init__(message)
        self.index = index
        self.bound = bound


class RowOutOfBoundsError(IndexOutOfBoundsError):
    """Requested row index is not below the matrix row count."""
    pass


class ColumnOutOfBoundsError(IndexOutOfBoundsError):
    """Requested column index is not below the matrix column count."""
    pass
