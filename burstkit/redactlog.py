"""
Log record scrubbing for burstkit.

Addresses and numeric IDs are public and are logged as-is. Passphrases and
raw key bytes must never reach a log file, so anything shaped like them is
masked before a record is written.
"""

from __future__ import annotations

import logging
import re
from typing import Pattern


class NoLocalsFilter(logging.Filter):
    """Fold ``exc_info`` into the message as ``Type: text`` and drop the traceback."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401
        if record.exc_info:
            etype, evalue, _tb = record.exc_info
            if etype is not None:
                record.msg = f"{record.msg} | {etype.__name__}: {evalue}"
            record.exc_info = None
        return True


class RedactingFormatter(logging.Formatter):
    """
    Formatter that masks credential material in the rendered line.

    Hex runs of 40+ digits cover 32-byte Curve25519 keys; base64 runs of 32+
    characters cover the same keys in transport form; ``passphrase=...`` style
    pairs cover secrets passed in free text. An optional ANSI colour by level
    is applied after masking.
    """

    _HEX_RE: Pattern[str] = re.compile(r"\b[0-9a-fA-F]{40,}\b")
    _B64_RE: Pattern[str] = re.compile(r"\b[A-Za-z0-9+/]{32,}={0,2}(?![A-Za-z0-9+/=])")
    _KEYVAL_RE: Pattern[str] = re.compile(
        r"(?i)\b(passphrase|password|passwd|pwd|secret|seed|token|private[-_]?key|key)\s*[=:]\s*([^\s,;]+)"
    )
    _LEVEL_COLOURS = (
        (logging.ERROR, "\x1b[31m"),
        (logging.WARNING, "\x1b[33m"),
        (logging.INFO, "\x1b[37m"),
    )

    def __init__(self, fmt: str, datefmt: str | None = None, enable_colors: bool = False):
        super().__init__(fmt=fmt, datefmt=datefmt)
        self._colors = enable_colors

    def _redact(self, msg: str) -> str:
        msg = self._HEX_RE.sub("[hex_redacted]", msg)
        msg = self._B64_RE.sub("[b64_redacted]", msg)
        return self._KEYVAL_RE.sub(lambda m: f"{m.group(1)}=[redacted]", msg)

    def format(self, record: logging.LogRecord) -> str:
        out = self._redact(super().format(record))
        if not self._colors:
            return out
        colour = next((c for lvl, c in self._LEVEL_COLOURS if record.levelno >= lvl), "\x1b[90m")
        return f"{colour}{out}\x1b[0m"
