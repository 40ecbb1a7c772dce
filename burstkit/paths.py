"""
Path constants for burstkit - separate from config to avoid circular imports.
"""

from __future__ import annotations

import contextlib
import functools
import os
import sys
from pathlib import Path

APP_NAME = "burstkit"

IS_WIN = sys.platform.startswith("win")
IS_LINUX = sys.platform.startswith("linux")


@functools.lru_cache(maxsize=None)
def app_data_dir() -> Path:
    """Return the application data directory (``BURSTKIT_HOME`` wins)."""
    override = os.getenv("BURSTKIT_HOME")
    if override:
        return Path(override).expanduser()
    if IS_WIN:
        base = os.getenv("LOCALAPPDATA")
        fallback = Path(base) if base else Path.home() / "AppData" / "Local"
    else:
        base = os.getenv("XDG_DATA_HOME")
        fallback = Path(base) if base else Path.home() / ".local" / "share"
    return fallback / APP_NAME


@functools.lru_cache(maxsize=None)
def log_file_path() -> Path:
    """Path to the rotating log file."""
    return app_data_dir() / "logs" / "burstkit.log"


BASE_DIR = app_data_dir()
LOG_PATH = log_file_path()


def ensure_private_dir(path: Path) -> None:
    """Create ``path`` (and parents) and make it owner-only where possible."""
    with contextlib.suppress(OSError):
        path.mkdir(parents=True, exist_ok=True)
        if not IS_WIN:
            os.chmod(path, 0o700)


__all__ = ["APP_NAME", "BASE_DIR", "LOG_PATH", "app_data_dir", "ensure_private_dir", "log_file_path"]
