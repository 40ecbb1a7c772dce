"""
Central settings for burstkit.

Codec constants are fixed; a few runtime knobs come from the environment.
"""

from __future__ import annotations

import os
from typing import Final

from .paths import BASE_DIR, LOG_PATH

_TRUTHY = {"1", "true", "yes", "on"}


def env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


# ───── address format ───────────────────────────────────────────────────
CANONICAL_PREFIX: Final[str] = "BURST-"
ALPHABET: Final[str] = "23456789ABCDEFGHJKLMNPQRSTUVWXYZ"
CODEWORD_MAP: Final[tuple[int, ...]] = (3, 2, 1, 0, 7, 6, 5, 4, 13, 14, 15, 16, 12, 8, 9, 10, 11)
INITIAL_CODEWORD: Final[tuple[int, ...]] = (1,) + (0,) * 16
GROUP_SIZE: Final[int] = 4

PREFIX: str = os.getenv("BURSTKIT_PREFIX", CANONICAL_PREFIX)

# ───── parsing / memory ────────────────────────────────────────────────
STRICT_PARSE: bool = env_flag("BURSTKIT_STRICT_PARSE")
LOCK_MEMORY: bool = env_flag("BURSTKIT_LOCK_MEMORY", default=True)

# ───── logging ─────────────────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("BURSTKIT_LOG_LEVEL", "INFO").upper()
LOG_MAX_BYTES = 1 * 1024 * 1024
LOG_BACKUP_COUNT = 3


__all__ = [
    "ALPHABET",
    "BASE_DIR",
    "CANONICAL_PREFIX",
    "CODEWORD_MAP",
    "GROUP_SIZE",
    "INITIAL_CODEWORD",
    "LOCK_MEMORY",
    "LOG_BACKUP_COUNT",
    "LOG_LEVEL",
    "LOG_MAX_BYTES",
    "LOG_PATH",
    "PREFIX",
    "STRICT_PARSE",
    "env_flag",
]
