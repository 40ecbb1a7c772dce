"""
Account credentials held in zeroing memory.

Each wrapper owns a :class:`SecureBytes` buffer that is wiped when the
object is cleared, leaves a ``with`` block, or is garbage collected. Key
material is produced elsewhere: these classes only hold it. X25519 key
objects from ``cryptography`` are accepted for convenience.
"""

from __future__ import annotations

import hmac
from typing import ClassVar, TypeVar

from cryptography.hazmat.primitives.asymmetric.x25519 import X25519PrivateKey, X25519PublicKey

from .secure_bytes import BytesLike, SecureBytes

KEY_SIZE = 32

_C = TypeVar("_C", bound="_Credential")


class _Credential:
    """Common scoped-resource behaviour for the wrappers below."""

    __slots__ = ("_secret",)
    label: ClassVar[str] = "credential"

    def __init__(self, data: BytesLike) -> None:
        self._secret = SecureBytes(data)

    def view(self) -> memoryview:
        """Read-only view into the protected buffer (no copy)."""
        return self._secret.view()

    def matches(self, other: _Credential | BytesLike) -> bool:
        """Constant-time comparison against another credential or raw bytes."""
        theirs = other.view() if isinstance(other, _Credential) else other
        return hmac.compare_digest(self.view(), bytes(theirs))

    def clear(self) -> None:
        self._secret.clear()

    @property
    def cleared(self) -> bool:
        return self._secret.cleared

    def __enter__(self: _C) -> _C:
        return self

    def __exit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        self.clear()

    def __len__(self) -> int:
        return len(self._secret)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.matches(other)  # type: ignore[arg-type]

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"<{type(self).__name__} ***>"

    __str__ = __repr__


class Passphrase(_Credential):
    """Account passphrase. Zeroed on clear, context exit or collection."""

    __slots__ = ()
    label = "passphrase"

    def __init__(self, passphrase: str) -> None:
        if not isinstance(passphrase, str):
            raise TypeError(f"passphrase must be str, got {type(passphrase).__name__}")
        if not passphrase:
            raise ValueError("passphrase cannot be empty")
        super().__init__(passphrase.encode("utf-8"))

    def value(self) -> str:
        """Decoded passphrase. The returned str is a copy that cannot be wiped."""
        return self._secret.with_bytes(lambda b: b.decode("utf-8"))


class _Key(_Credential):
    __slots__ = ()

    def __init__(self, raw: BytesLike) -> None:
        if not isinstance(raw, (bytes, bytearray, memoryview)):
            raise TypeError(f"{self.label} must be bytes, got {type(raw).__name__}")
        if len(raw) != KEY_SIZE:
            raise ValueError(f"{self.label} must be {KEY_SIZE} bytes, got {len(raw)}")
        super().__init__(raw)

    @classmethod
    def from_hex(cls: type[_C], text: str) -> _C:
        return cls(bytes.fromhex(text))

    def value(self) -> bytes:
        """Copy of the raw key bytes."""
        return self._secret.to_bytes()

    def hex(self) -> str:
        return self._secret.with_bytes(bytes.hex)


class PrivateKey(_Key):
    """32-byte Curve25519 private key."""

    __slots__ = ()
    label = "private key"

    @classmethod
    def from_x25519(cls, key: X25519PrivateKey) -> PrivateKey:
        return cls(key.private_bytes_raw())

    def to_x25519(self) -> X25519PrivateKey:
        return self._secret.with_bytes(X25519PrivateKey.from_private_bytes)


class PublicKey(_Key):
    """32-byte Curve25519 public key."""

    __slots__ = ()
    label = "public key"

    @classmethod
    def from_x25519(cls, key: X25519PublicKey) -> PublicKey:
        return cls(key.public_bytes_raw())

    def to_x25519(self) -> X25519PublicKey:
        return self._secret.with_bytes(X25519PublicKey.from_public_bytes)


__all__ = ["KEY_SIZE", "Passphrase", "PrivateKey", "PublicKey"]
