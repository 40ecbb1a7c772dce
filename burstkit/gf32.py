"""
GF(32) arithmetic used by the address checksum.

The field is GF(2^5) built on x^5 + x^2 + 1 with primitive element 2.
Both tables are fixed tuples, so they can be shared between threads freely.
"""

from __future__ import annotations

from typing import Final

FIELD_SIZE: Final[int] = 32
GROUP_ORDER: Final[int] = FIELD_SIZE - 1

# GEXP[i] = 2^i; the last entry wraps back to 1.
GEXP: Final[tuple[int, ...]] = (
    1, 2, 4, 8, 16, 5, 10, 20, 13, 26, 17, 7, 14, 28, 29, 31,
    27, 19, 3, 6, 12, 24, 21, 15, 30, 25, 23, 11, 22, 9, 18, 1,
)

# GLOG[x] = log_2(x); GLOG[0] is unused.
GLOG: Final[tuple[int, ...]] = (
    0, 0, 1, 18, 2, 5, 19, 11, 3, 29, 6, 27, 20, 8, 12, 23,
    4, 10, 30, 17, 7, 22, 28, 26, 21, 25, 9, 16, 13, 14, 24, 15,
)


def multiply(a: int, b: int) -> int:
    """Multiply two field elements in [0, 31]."""
    if a == 0 or b == 0:
        return 0
    return GEXP[(GLOG[a] + GLOG[b]) % GROUP_ORDER]


__all__ = ["FIELD_SIZE", "GROUP_ORDER", "GEXP", "GLOG", "multiply"]
