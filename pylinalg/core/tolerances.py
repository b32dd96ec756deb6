"""
Tolerance tiers for approximate comparison.

Exact equality (==) on dense values compares element by element with no
slack. Results that went through arithmetic (scaling chains, inner
products) are compared with a tier instead:

- EXACT: bit-for-bit, for values that were only copied or permuted
- CPU_FP64: a single rounding step per element
- CPU_FP64_ACCUMULATED: reductions and chained products

Used by Vector.isclose(), Matrix.isclose() and the test suite.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='No tolerance, for copies and permutations only',
)

CPU_FP64 = ToleranceTier(
    rtol=1e-12,
    atol=1e-14,
    name='cpu_fp64',
    description='Double precision, one rounding per element',
)

# Reductions (dot, length) and chained scalings lose a few ulps per step
CPU_FP64_ACCUMULATED = ToleranceTier(
    rtol=1e-9,
    atol=1e-12,
    name='cpu_fp64_accumulated',
    description='Double precision after accumulated rounding',
)

