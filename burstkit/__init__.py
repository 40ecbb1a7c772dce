"""burstkit: Burstcoin account utilities.

Exports:
- numeric_id_to_address / address_to_numeric_id / is_valid_address
- BurstId, BurstAddress value objects and the ConversionError family
- Passphrase, PrivateKey, PublicKey and SecureBytes for secrets in memory

Cryptography proper (signing, hashing, key agreement) is left to
general-purpose libraries such as ``cryptography``.
"""

from __future__ import annotations

from .address import (
    BurstAddress,
    BurstId,
    address_to_numeric_id,
    is_valid_address,
    numeric_id_to_address,
)
from .config import ALPHABET, CANONICAL_PREFIX, PREFIX
from .credential import Passphrase, PrivateKey, PublicKey
from .errors import CodewordInvalid, CodewordTooLong, ConversionError, InvalidCharacter
from .logger import LOG_PATH, logger
from .secure_bytes import SecureBytes

__version__ = "0.2.0"

__all__ = [
    "ALPHABET",
    "BurstAddress",
    "BurstId",
    "CANONICAL_PREFIX",
    "CodewordInvalid",
    "CodewordTooLong",
    "ConversionError",
    "InvalidCharacter",
    "LOG_PATH",
    "PREFIX",
    "Passphrase",
    "PrivateKey",
    "PublicKey",
    "SecureBytes",
    "address_to_numeric_id",
    "is_valid_address",
    "logger",
    "numeric_id_to_address",
]
