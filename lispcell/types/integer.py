"""The fixed-width Integer variant.

Python ints are unbounded; every int that enters the runtime, whether read
from a literal or produced by arithmetic, is folded into this range.
"""

INT_BITS = 64
INT_MIN = -(1 << (INT_BITS - 1))
INT_MAX = (1 << (INT_BITS - 1)) - 1
_INT_RANGE = 1 << INT_BITS


def wrap_int(n: int) -> int:
    """Fold `n` into the signed 64-bit range (two's complement)."""
    return (n - INT_MIN) % _INT_RANGE + INT_MIN
