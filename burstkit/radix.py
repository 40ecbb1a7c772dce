"""
Arbitrary-precision radix conversion by repeated long division.

Used in both directions of the address codec: decimal → base 32 when
encoding, base 32 → decimal when decoding.
"""

from __future__ import annotations

from collections.abc import Sequence


def _check_digits(digits: Sequence[int], length: int, base: int) -> None:
    if not 0 <= length <= len(digits):
        raise ValueError(f"length {length} outside buffer of {len(digits)} digits")
    for d in digits[:length]:
        if not 0 <= d < base:
            raise ValueError(f"digit {d} out of range for base {base}")


def convert_base_lsd(
    digits: Sequence[int], length: int, from_base: int, to_base: int
) -> list[int]:
    """
    Convert, returning the output digits in the order the division passes emit them.

    That order is least-significant first. Each pass reads the live part of the
    dividend, emits one remainder and leaves the quotient in place with its
    leading zeros dropped. The loop stops once the quotient is empty, so an
    all-zero input yields ``[0]`` after a single pass.
    """
    if from_base < 2 or to_base < 2:
        raise ValueError(f"bases must be >= 2, got {from_base} -> {to_base}")
    _check_digits(digits, length, from_base)

    scratch = list(digits[:length])
    out: list[int] = []
    while True:
        new_length = 0
        remainder = 0
        for i in range(length):
            remainder = remainder * from_base + scratch[i]
            if remainder >= to_base:
                scratch[new_length], remainder = divmod(remainder, to_base)
                new_length += 1
            elif new_length > 0:
                scratch[new_length] = 0
                new_length += 1
        length = new_length
        out.append(remainder)
        if length == 0:
            return out


def convert_base(
    digits: Sequence[int], length: int, from_base: int, to_base: int
) -> list[int]:
    """
    Convert the first ``length`` big-endian digits of ``digits`` between bases.

    The result is big-endian: the digits produced by
    :func:`convert_base_lsd` are reversed before returning. The input
    sequence is never modified.

    >>> convert_base([2, 5, 5], 3, 10, 16)
    [15, 15]
    """
    return convert_base_lsd(digits, length, from_base, to_base)[::-1]


def digits_to_int(digits: Sequence[int], base: int) -> int:
    """Fold big-endian ``digits`` into an int."""
    value = 0
    for d in digits:
        value = value * base + d
    return value


__all__ = ["convert_base", "convert_base_lsd", "digits_to_int"]
