"""
Central logger for burstkit.

Goals:
- Rotate log file at LOG_PATH (created lazily, 0600 on POSIX).
- Redact key material (hex, base64, passphrase=/key= pairs).
- Remove full tracebacks (keep type+message only).

Public API: `logger`, `LOG_PATH`
"""

from __future__ import annotations

import contextlib
import logging
import os
import sys
from logging import Logger
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .config import LOG_BACKUP_COUNT, LOG_LEVEL, LOG_MAX_BYTES
from .paths import LOG_PATH, ensure_private_dir
from .redactlog import NoLocalsFilter, RedactingFormatter

LOGGER_NAME = "burstkit"


class SecureRotatingFileHandler(RotatingFileHandler):
    """RotatingFileHandler with owner-only file permissions (POSIX)."""

    def _set_secure_mode(self, path: str) -> None:
        if os.name != "nt":
            with contextlib.suppress(OSError):
                os.chmod(path, 0o600)

    def _open(self):
        # delay=True defers this to the first emitted record.
        ensure_private_dir(Path(self.baseFilename).parent)
        stream = super()._open()
        self._set_secure_mode(self.baseFilename)
        return stream

    def doRollover(self) -> None:
        super().doRollover()
        if os.name == "nt":
            return
        self._set_secure_mode(self.baseFilename)
        for idx in range(1, self.backupCount + 1):
            candidate = self.rotation_filename(f"{self.baseFilename}.{idx}")
            if os.path.exists(candidate):
                self._set_secure_mode(candidate)


def _build_logger() -> Logger:
    level = getattr(logging, LOG_LEVEL, logging.INFO)
    lg = logging.getLogger(LOGGER_NAME)
    lg.setLevel(level)
    lg.propagate = False

    if lg.handlers:
        return lg

    fh = SecureRotatingFileHandler(
        LOG_PATH,
        maxBytes=LOG_MAX_BYTES,
        backupCount=LOG_BACKUP_COUNT,
        encoding="utf-8",
        delay=True,
    )
    fh.setFormatter(
        RedactingFormatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s (%(pathname)s:%(lineno)d in %(funcName)s)",
            datefmt="%Y-%m-%d %H:%M:%S%z",
        )
    )
    lg.addHandler(fh)

    if level <= logging.DEBUG:
        sh = logging.StreamHandler(sys.stderr)
        sh.setFormatter(
            RedactingFormatter(
                fmt="%(asctime)s [%(levelname)s] %(message)s (%(pathname)s:%(lineno)d)",
                datefmt="%H:%M:%S",
                enable_colors=sys.stderr.isatty(),
            )
        )
        lg.addHandler(sh)

    for handler in lg.handlers:
        handler.addFilter(NoLocalsFilter())
    return lg


def get_logger(name: str | None = None) -> Logger:
    """Child logger under the package logger, e.g. ``burstkit.address``."""
    if not name or name == LOGGER_NAME:
        return logger
    if name.startswith(LOGGER_NAME + "."):
        name = name[len(LOGGER_NAME) + 1:]
    return logger.getChild(name)


logger: Logger = _build_logger()


def log_best_effort(channel: str, exc: BaseException, *, message: str | None = None) -> None:
    """Record a failed cleanup step at DEBUG and carry on."""
    get_logger(channel).debug("%s: %s", message or "Best-effort failure", exc, exc_info=True)


__all__ = ["logger", "get_logger", "LOG_PATH", "LOGGER_NAME", "log_best_effort"]
