# secure_bytes.py
"""Byte container for account secrets with guaranteed zeroing and optional memory locking."""
from __future__ import annotations

import ctypes
import platform
import threading
import warnings
import weakref
from typing import Callable, Final, Optional, TypeVar, Union

from . import config
from .logger import log_best_effort

# Type alias for byte-like objects
BytesLike = Union[bytes, bytearray, memoryview]
T = TypeVar("T")

MIN_LOCK_SIZE: Final[int] = 4096  # Smaller buffers share pages with other objects
_LIBC_NAMES: Final[tuple[str, ...]] = ("libc.so.6", "libc.so.7", "libc.dylib", "libSystem.dylib")


def _libc_function(name: str) -> Optional[Callable[..., int]]:
    for lib_name in _LIBC_NAMES:
        try:
            libc = ctypes.CDLL(lib_name)
        except OSError:
            continue
        fn = getattr(libc, name, None)
        if fn is not None:
            fn.argtypes = (ctypes.c_void_p, ctypes.c_size_t)
            return fn
    return None


def _buffer_address(buf: bytearray) -> int:
    return ctypes.addressof(ctypes.c_char.from_buffer(buf))


def secure_memzero(buf: bytearray) -> None:
    """
    Zero a buffer in place.

    Tries in order:
    1. Windows: RtlSecureZeroMemory
    2. POSIX: explicit_bzero when available
    3. Generic: ctypes.memset
    A manual pass always follows, so the buffer is zero even if every native
    call failed.

    Args:
        buf: Buffer to zero. Safe to pass empty buffer.
    """
    if not buf:
        return

    n = len(buf)
    try:
        addr = _buffer_address(buf)
        zeroed = False
        if platform.system() == "Windows":
            try:
                rtl_zero = ctypes.windll.kernel32.RtlSecureZeroMemory  # type: ignore[attr-defined]
                rtl_zero.argtypes = (ctypes.c_void_p, ctypes.c_size_t)
                rtl_zero.restype = ctypes.c_void_p
                rtl_zero(addr, n)
                zeroed = True
            except (AttributeError, OSError) as exc:
                log_best_effort(__name__, exc, message="RtlSecureZeroMemory unavailable")
        if not zeroed:
            bzero = _libc_function("explicit_bzero")
            if bzero is not None:
                bzero.restype = None
                bzero(addr, n)
            else:
                ctypes.memset(addr, 0, n)
    except (BufferError, TypeError, ValueError, OSError) as exc:
        log_best_effort(__name__, exc, message="native zeroing failed")

    for i in range(n):
        buf[i] = 0


def try_lock_memory(buf: bytearray) -> bool:
    """
    Attempt to lock memory pages to prevent swapping.

    Returns:
        True if successfully locked, False otherwise
    """
    if not buf or len(buf) < MIN_LOCK_SIZE:
        return False
    try:
        addr = _buffer_address(buf)
        if platform.system() == "Windows":
            kernel32 = ctypes.windll.kernel32  # type: ignore[attr-defined]
            return bool(kernel32.VirtualLock(ctypes.c_void_p(addr), ctypes.c_size_t(len(buf))))
        mlock = _libc_function("mlock")
        if mlock is None:
            return False
        mlock.restype = ctypes.c_int
        return mlock(addr, len(buf)) == 0
    except (AttributeError, BufferError, OSError) as exc:
        log_best_effort(__name__, exc, message="mlock failed")
        return False


def try_unlock_memory(buf: bytearray) -> bool:
    """Attempt to unlock previously locked memory pages."""
    if not buf:
        return False
    try:
        addr = _buffer_address(buf)
        if platform.system() == "Windows":
            kernel32 = ctypes.windll.kernel32  # type: ignore[attr-defined]
            return bool(kernel32.VirtualUnlock(ctypes.c_void_p(addr), ctypes.c_size_t(len(buf))))
        munlock = _libc_function("munlock")
        if munlock is None:
            return False
        munlock.restype = ctypes.c_int
        return munlock(addr, len(buf)) == 0
    except (AttributeError, BufferError, OSError) as exc:
        log_best_effort(__name__, exc, message="munlock failed")
        return False


def _zero_and_release(buf: bytearray, locked: list[bool]) -> None:
    # Shared with weakref.finalize, so it must not reference the owner.
    secure_memzero(buf)
    if locked[0]:
        try_unlock_memory(buf)
        locked[0] = False
    try:
        buf.clear()
    except BufferError as exc:
        # A live view() pins the size; the contents are already zero.
        log_best_effort(__name__, exc, message="buffer still exported")


class SecureBytes:
    """
    Container for sensitive byte data (passphrases, private keys).

    Features:
    - Internal mutable buffer (bytearray) for in-place zeroing
    - Optional memory locking to prevent swap (best-effort)
    - Thread-safe operations with RLock
    - Context manager support for automatic cleanup
    - Zeroing on garbage collection via weakref.finalize
    - No information leakage through repr/str

    Usage:
        with SecureBytes(b"temporary_secret") as sb:
            view = sb.view()
        # Zeroed when leaving the block, also on exceptions
    """

    __slots__ = ("_buf", "_cleared", "_locked", "_lock", "_finalizer", "__weakref__")

    def __init__(self, data: BytesLike, *, lock_memory: Optional[bool] = None) -> None:
        """
        Args:
            data: Bytes to protect. Must not be empty. Copied, never aliased.
            lock_memory: Try to mlock the pages; defaults to ``BURSTKIT_LOCK_MEMORY``.

        Raises:
            TypeError: If data is not bytes/bytearray/memoryview
            ValueError: If data is empty
        """
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"SecureBytes requires bytes/bytearray/memoryview, got {type(data).__name__}")

        buf = bytearray(data)
        if not buf:
            raise ValueError("SecureBytes cannot be empty")

        self._buf = buf
        self._cleared = False
        self._locked = [False]
        self._lock = threading.RLock()
        self._finalizer = weakref.finalize(self, _zero_and_release, self._buf, self._locked)

        if lock_memory is None:
            lock_memory = config.LOCK_MEMORY
        if lock_memory and len(self._buf) >= MIN_LOCK_SIZE:
            self._locked[0] = try_lock_memory(self._buf)
            if not self._locked[0]:
                warnings.warn(
                    f"Failed to lock {len(self._buf)} bytes in memory; data may be swapped to disk",
                    stacklevel=2,
                )

    def _check(self) -> None:
        if self._cleared:
            raise ValueError("SecureBytes already cleared")

    def view(self) -> memoryview:
        """
        Read-only view of the data without copying.

        Raises:
            ValueError: If already cleared
        """
        with self._lock:
            self._check()
            return memoryview(self._buf).toreadonly()

    def with_bytes(self, callback: Callable[[bytes], T]) -> T:
        """
        Call ``callback`` with a temporary bytes copy and return its result.

        The copy is immutable and cannot be zeroed; its reference is dropped
        as soon as the callback returns.
        """
        with self._lock:
            self._check()
            temp = bytes(self._buf)
            try:
                return callback(temp)
            finally:
                del temp

    def to_bytes(self) -> bytes:
        """Copy of the data. The copy is NOT zeroed on clear()."""
        with self._lock:
            self._check()
            return bytes(self._buf)

    def clear(self) -> None:
        """
        Zero the internal buffer and mark as cleared.

        Idempotent. If memory was locked, attempts to unlock it.
        """
        with self._lock:
            if not self._cleared:
                self._finalizer()
                self._cleared = True

    @property
    def cleared(self) -> bool:
        with self._lock:
            return self._cleared

    def __enter__(self) -> SecureBytes:
        return self

    def __exit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        self.clear()

    def __del__(self) -> None:
        finalizer = getattr(self, "_finalizer", None)
        if finalizer is not None:
            finalizer()

    def __len__(self) -> int:
        with self._lock:
            return 0 if self._cleared else len(self._buf)

    def __repr__(self) -> str:
        return "<SecureBytes ***>"

    __str__ = __repr__


__all__ = ["BytesLike", "SecureBytes", "secure_memzero", "try_lock_memory", "try_unlock_memory"]
