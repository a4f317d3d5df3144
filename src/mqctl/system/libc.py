"""mount(2) and umount(2) through ctypes.

The standard library has no binding for either call, so they are reached
through the C library directly. Failures are raised as OSError carrying the
errno the kernel returned.
"""

from __future__ import annotations

import ctypes
import ctypes.util
import os
from functools import lru_cache


@lru_cache(maxsize=None)
def load_libc() -> ctypes.CDLL:
    """Load the C library once, with errno capture enabled."""
    libc = ctypes.CDLL(ctypes.util.find_library("c") or "libc.so.6", use_errno=True)

    libc.mount.argtypes = [
        ctypes.c_char_p,
        ctypes.c_char_p,
        ctypes.c_char_p,
        ctypes.c_ulong,
        ctypes.c_void_p,
    ]
    libc.mount.restype = ctypes.c_int
    libc.umount.argtypes = [ctypes.c_char_p]
    libc.umount.restype = ctypes.c_int
    return libc


def _raise_for_errno(filename: str) -> None:
    code = ctypes.get_errno()
    raise OSError(code, os.strerror(code), filename)


def mount(source: str, target: str, fstype: str, flags: int = 0) -> None:
    """Attach ``fstype`` from ``source`` at ``target``."""
    result = load_libc().mount(
        os.fsencode(source),
        os.fsencode(target),
        os.fsencode(fstype),
        flags,
        None,
    )
    if result != 0:
        _raise_for_errno(target)


def umount(target: str) -> None:
    """Detach whatever is mounted at ``target``."""
    if load_libc().umount(os.fsencode(target)) != 0:
        _raise_for_errno(target)
