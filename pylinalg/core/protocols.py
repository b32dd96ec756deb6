"""
Core protocols for pylinalg.

These define structural interfaces the dense types accept as input.
We use Protocol (structural typing) rather than ABC (nominal typing) so
lists, tuples, ranges, NumPy arrays and the library's own Vector all
qualify without registration.
"""

from typing import Iterator, Protocol, runtime_checkable


@runtime_checkable
class SizedSource(Protocol):
    """
    Finite source of real numbers whose element count is known up front.

    The count must be obtainable BEFORE consumption: buffers are allocated
    from len() and then filled from iteration. Generators and bare
    iterators do not satisfy this protocol because they have no __len__.

    Note:
        isinstance() against a runtime_checkable protocol only checks that
        the methods exist. Element types are validated when the buffer is
        filled.
    """

    def __len__(self) -> int:
        """Number of elements iteration will yield."""
        ...

    def __iter__(self) -> Iterator[float]:
        """Yield the elements in order."""
        ...
