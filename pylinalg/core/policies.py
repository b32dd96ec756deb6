"""
Index policy constants for pylinalg.

This module is the SINGLE SOURCE OF TRUTH for index policy strings.
Import from here, never use raw strings.

Usage:
    from pylinalg.core.policies import INDEX_POLICY_STRICT

    v = Vector.from_sequence([1.0, 2.0], index_policy=INDEX_POLICY_STRICT)
    v[5]  # IndexOutOfBoundsError
"""

# Reads past the end return ZERO_VALUE, as if the vector were padded with
# zeros to infinite dimension
INDEX_POLICY_LENIENT = 'lenient'

# Reads past the end raise IndexOutOfBoundsError
INDEX_POLICY_STRICT = 'strict'

DEFAULT_INDEX_POLICY = INDEX_POLICY_LENIENT

# Value returned for out-of-range reads under the lenient policy
ZERO_VALUE = 0.0

# All policies as a frozenset for validation
ALL_INDEX_POLICIES = frozenset({
    INDEX_POLICY_LENIENT,
    INDEX_POLICY_STRICT,
})

__all__ = [
    'INDEX_POLICY_LENIENT',
    'INDEX_POLICY_STRICT',
    'DEFAULT_INDEX_POLICY',
    'ZERO_VALUE',
    'ALL_INDEX_POLICIES',
]
