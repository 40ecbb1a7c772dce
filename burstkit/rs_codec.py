"""
Reed–Solomon style checksum over GF(32) for 17-symbol address codewords.

Layout: positions 0–12 carry the data (least-significant base-32 digit
first), positions 13–16 carry the parity. The code detects corruption; it
does not attempt correction.

This is RS(31, 27) over GF(32) (primitive 0x25, generator 2, first
consecutive root 27) shortened to 17 symbols: exponents 13-26 of the full
codeword are implicit zeros. The tables are module constants, so every
function here is safe to call from any thread without locking.
"""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from typing import Final

from .gf32 import GEXP, GROUP_ORDER, multiply

DATA_LENGTH: Final[int] = 13
PARITY_LENGTH: Final[int] = 4
CODEWORD_LENGTH: Final[int] = DATA_LENGTH + PARITY_LENGTH

# Feedback taps of the parity shift register, p[0] .. p[3].
_TAPS: Final[tuple[int, int, int, int]] = (17, 9, 6, 30)


def encode_parity(data: Sequence[int]) -> list[int]:
    """Compute the 4 parity symbols for the first 13 symbols of ``data``."""
    if len(data) < DATA_LENGTH:
        raise ValueError(f"need {DATA_LENGTH} data symbols, got {len(data)}")
    p = [0] * PARITY_LENGTH
    for i in range(DATA_LENGTH - 1, -1, -1):
        fb = data[i] ^ p[3]
        p[3] = p[2] ^ multiply(_TAPS[3], fb)
        p[2] = p[1] ^ multiply(_TAPS[2], fb)
        p[1] = p[0] ^ multiply(_TAPS[1], fb)
        p[0] = multiply(_TAPS[0], fb)
    return p


def append_parity(codeword: MutableSequence[int]) -> None:
    """Fill positions 13–16 of ``codeword`` in place."""
    codeword[DATA_LENGTH:CODEWORD_LENGTH] = encode_parity(codeword)


def syndromes(codeword: Sequence[int]) -> list[int]:
    """
    Return the four syndromes of a 17-symbol codeword.

    The codeword is read as a shortened length-31 code: exponents 0–12 map to
    the data, 27–30 to the parity, and 13–26 are implicit zeros.
    """
    if len(codeword) != CODEWORD_LENGTH:
        raise ValueError(f"codeword must have {CODEWORD_LENGTH} symbols, got {len(codeword)}")
    out = []
    for i in range(1, PARITY_LENGTH + 1):
        t = 0
        for j in range(GROUP_ORDER):
            if DATA_LENGTH <= j < GROUP_ORDER - PARITY_LENGTH:
                continue
            pos = j if j < DATA_LENGTH else j - (GROUP_ORDER - CODEWORD_LENGTH)
            t ^= multiply(codeword[pos], GEXP[(i * j) % GROUP_ORDER])
        out.append(t)
    return out


def is_codeword_valid(codeword: Sequence[int]) -> bool:
    """True when every syndrome is zero."""
    acc = 0
    for s in syndromes(codeword):
        acc |= s
    return acc == 0


__all__ = [
    "CODEWORD_LENGTH",
    "DATA_LENGTH",
    "PARITY_LENGTH",
    "append_parity",
    "encode_parity",
    "is_codeword_valid",
    "syndromes",
]
