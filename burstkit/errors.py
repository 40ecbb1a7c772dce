"""Exceptions raised when a textual address cannot be turned back into an ID."""

from __future__ import annotations

from collections.abc import Sequence


class ConversionError(ValueError):
    """Base class for address → numeric ID failures.

    ``codeword`` holds the 17-symbol buffer as it stood when parsing stopped,
    which is handy when diagnosing a mistyped address.
    """

    reason = "address conversion failed"

    def __init__(self, codeword: Sequence[int] = (), message: str | None = None) -> None:
        self.codeword: tuple[int, ...] = tuple(codeword)
        super().__init__(message or f"{self.reason}: {list(self.codeword)}")


class CodewordTooLong(ConversionError):
    """More than 17 alphabet symbols were found in the address."""

    reason = "the code word was too long"


class CodewordInvalid(ConversionError):
    """Fewer than 17 symbols, or the checksum does not match."""

    reason = "the code word was invalid"


class InvalidCharacter(CodewordInvalid):
    """Strict parsing met a character that is neither a symbol nor a dash."""

    reason = "unexpected character in address"

    def __init__(self, char: str, position: int, codeword: Sequence[int] = ()) -> None:
        self.char = char
        self.position = position
        super().__init__(codeword, f"{self.reason}: {char!r} at position {position}")


__all__ = ["ConversionError", "CodewordTooLong", "CodewordInvalid", "InvalidCharacter"]
