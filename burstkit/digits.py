"""Split a 64-bit account ID into its decimal digits."""

from __future__ import annotations

from typing import Final

DIGIT_CAPACITY: Final[int] = 20  # len(str(2**64 - 1))
U64_MAX: Final[int] = 2**64 - 1


def to_digit_array(number: int) -> tuple[list[int], int]:
    """
    Return the big-endian decimal digits of ``number`` and how many are significant.

    The buffer always has ``DIGIT_CAPACITY`` cells; cells past the significant
    length are zero. Zero is reported as one digit.

    Raises:
        ValueError: if ``number`` does not fit in an unsigned 64-bit integer.
    """
    if not 0 <= number <= U64_MAX:
        raise ValueError(f"numeric ID must be 0-{U64_MAX}, got {number}")

    reversed_digits: list[int] = []
    n = number
    while n:
        n, digit = divmod(n, 10)
        reversed_digits.append(digit)
    if not reversed_digits:
        reversed_digits.append(0)

    buf = [0] * DIGIT_CAPACITY
    for i, digit in enumerate(reversed(reversed_digits)):
        buf[i] = digit
    return buf, len(reversed_digits)


__all__ = ["DIGIT_CAPACITY", "U64_MAX", "to_digit_array"]
