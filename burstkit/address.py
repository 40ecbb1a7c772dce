"""
Burst account addresses ⇄ numeric account IDs.

A numeric ID is written in base 32 as 13 data symbols, protected by 4
parity symbols, shuffled through ``CODEWORD_MAP`` and spelled with a
32-character alphabet::

    399812073269533888  <->  BURST-B982-YTG4-ZS2F-2C55D

Parsing is lenient on purpose: characters outside the alphabet (dashes,
spaces, lower case, anything else) are skipped rather than rejected, which is
how existing wallets read addresses. Pass ``strict=True`` to refuse anything
other than alphabet symbols and dashes.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from . import config
from .config import ALPHABET, CODEWORD_MAP, GROUP_SIZE, INITIAL_CODEWORD
from .digits import U64_MAX, to_digit_array
from .errors import CodewordInvalid, CodewordTooLong, ConversionError, InvalidCharacter
from .logger import get_logger
from .radix import convert_base, convert_base_lsd, digits_to_int
from .rs_codec import CODEWORD_LENGTH, DATA_LENGTH, append_parity, is_codeword_valid

log = get_logger(__name__)

# Reverse lookup: character -> symbol value
CHAR_TO_INDEX = {c: i for i, c in enumerate(ALPHABET)}
_SEPARATOR = "-"


def _prefix(prefix: str | None) -> str:
    return config.PREFIX if prefix is None else prefix


def format_codeword(codeword: Sequence[int], prefix: str | None = None) -> str:
    """Spell a 17-symbol codeword as ``PREFIX-XXXX-XXXX-XXXX-XXXXX``."""
    if len(codeword) != CODEWORD_LENGTH:
        raise ValueError(f"codeword must have {CODEWORD_LENGTH} symbols, got {len(codeword)}")
    out = [_prefix(prefix)]
    for i, idx in enumerate(CODEWORD_MAP):
        out.append(ALPHABET[codeword[idx]])
        if (i & (GROUP_SIZE - 1)) == GROUP_SIZE - 1 and i < DATA_LENGTH:
            out.append(_SEPARATOR)
    return "".join(out)


def parse_codeword(text: str, prefix: str | None = None, *, strict: bool = False) -> list[int]:
    """
    Read the codeword back out of an address and verify its checksum.

    Raises:
        CodewordTooLong: more than 17 alphabet symbols were found.
        CodewordInvalid: fewer than 17 symbols, or the checksum failed.
        InvalidCharacter: ``strict`` is set and a foreign character was found.
    """
    pfx = _prefix(prefix)
    body = text.replace(pfx, "") if pfx else text
    codeword = list(INITIAL_CODEWORD)
    count = 0

    for pos, ch in enumerate(body):
        value = CHAR_TO_INDEX.get(ch)
        if value is None:
            if strict and ch != _SEPARATOR:
                raise InvalidCharacter(ch, pos, codeword)
            continue
        if count >= CODEWORD_LENGTH:
            raise CodewordTooLong(codeword)
        codeword[CODEWORD_MAP[count]] = value
        count += 1

    if count != CODEWORD_LENGTH or not is_codeword_valid(codeword):
        raise CodewordInvalid(codeword)
    return codeword


def encode_id(numeric_id: int) -> list[int]:
    """Build the full 17-symbol codeword (data + parity) for a numeric ID."""
    digits, length = to_digit_array(numeric_id)
    codeword = [0] * CODEWORD_LENGTH
    # Division passes emit least-significant first, which is codeword order.
    for i, d in enumerate(convert_base_lsd(digits, length, 10, 32)):
        codeword[i] = d
    append_parity(codeword)
    return codeword


def decode_id(codeword: Sequence[int]) -> int:
    """Recover the numeric ID from the data part of a validated codeword."""
    base32 = [codeword[DATA_LENGTH - 1 - i] for i in range(DATA_LENGTH)]
    value = digits_to_int(convert_base(base32, DATA_LENGTH, 32, 10), 10)
    if value > U64_MAX:
        # 13 base-32 digits hold 65 bits; a checksummed codeword can still be out of range.
        raise CodewordInvalid(codeword, f"address encodes {value}, outside the 64-bit range")
    return value


@dataclass(frozen=True)
class BurstId:
    """A Burst account numeric ID, e.g. ``BurstId(399812073269533888)``."""

    id: int

    def __post_init__(self) -> None:
        if isinstance(self.id, bool) or not isinstance(self.id, int):
            raise TypeError(f"numeric ID must be an int, got {type(self.id).__name__}")
        if not 0 <= self.id <= U64_MAX:
            raise ValueError(f"numeric ID must be 0-{U64_MAX}, got {self.id}")

    @classmethod
    def from_address(
        cls, address: str | BurstAddress, *, prefix: str | None = None, strict: bool = False
    ) -> BurstId:
        return address_to_numeric_id(address, prefix=prefix, strict=strict)

    def to_address(self, *, prefix: str | None = None) -> BurstAddress:
        return numeric_id_to_address(self, prefix=prefix)

    def __int__(self) -> int:
        return self.id

    def __str__(self) -> str:
        return str(self.id)


@dataclass(frozen=True)
class BurstAddress:
    """A Burst account address, e.g. ``BURST-B982-YTG4-ZS2F-2C55D``.

    Construction does not validate; equality is exact string comparison.
    """

    address: str

    @classmethod
    def from_id(cls, numeric_id: int | BurstId, *, prefix: str | None = None) -> BurstAddress:
        return numeric_id_to_address(numeric_id, prefix=prefix)

    def to_id(self, *, prefix: str | None = None, strict: bool = False) -> BurstId:
        return address_to_numeric_id(self, prefix=prefix, strict=strict)

    def is_valid(self, *, prefix: str | None = None, strict: bool = False) -> bool:
        return is_valid_address(self.address, prefix=prefix, strict=strict)

    def __str__(self) -> str:
        return self.address


def numeric_id_to_address(numeric_id: int | BurstId, *, prefix: str | None = None) -> BurstAddress:
    """Encode any unsigned 64-bit ID as an address. Never fails for a valid ID."""
    bid = numeric_id if isinstance(numeric_id, BurstId) else BurstId(numeric_id)
    return BurstAddress(format_codeword(encode_id(bid.id), prefix))


def address_to_numeric_id(
    address: str | BurstAddress, *, prefix: str | None = None, strict: bool = False
) -> BurstId:
    """Decode and checksum-verify an address.

    Raises:
        CodewordTooLong, CodewordInvalid: see :func:`parse_codeword`.
    """
    text = address.address if isinstance(address, BurstAddress) else address
    try:
        codeword = parse_codeword(text, prefix, strict=strict)
        return BurstId(decode_id(codeword))
    except ConversionError as exc:
        log.debug("Rejected address %r: %s", text, exc)
        raise


def is_valid_address(text: str | BurstAddress, *, prefix: str | None = None, strict: bool = False) -> bool:
    """True if ``text`` decodes to a numeric ID."""
    try:
        address_to_numeric_id(text, prefix=prefix, strict=strict)
    except ConversionError:
        return False
    return True


__all__ = [
    "BurstAddress",
    "BurstId",
    "CHAR_TO_INDEX",
    "address_to_numeric_id",
    "decode_id",
    "encode_id",
    "format_codeword",
    "is_valid_address",
    "numeric_id_to_address",
    "parse_codeword",
]
