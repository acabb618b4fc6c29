"""Helpers for the Linux system-call layer: mmap2 offsets, open flags and time."""

from __future__ import annotations

import errno
import os
import time

MMAP2_SHIFT = 12
MMAP2_PAGE_SIZE = 1 << MMAP2_SHIFT

# Kernel value of O_LARGEFILE on x86 and the generic ABI. The C library
# reports 0 for it on 64-bit hosts, so it is spelled out here.
O_LARGEFILE = 0o100000
O_CREAT = os.O_CREAT
CREAT_FLAGS = os.O_CREAT | os.O_TRUNC | os.O_WRONLY

# Cache sizes tuned for Silvermont-class x86 cores.
SHARED_CACHE_SIZE = 1024 * 1024
DATA_CACHE_SIZE = 24 * 1024
SHARED_CACHE_SIZE_HALF = SHARED_CACHE_SIZE // 2
DATA_CACHE_SIZE_HALF = DATA_CACHE_SIZE // 2


def mmap2_page_offset(offset: int) -> int:
    """Convert a byte offset for mmap into the page offset mmap2 takes.

    The offset must be non-negative and a multiple of 4096 bytes;
    otherwise an OSError with errno EINVAL is raised.
    """
    if offset < 0 or offset & (MMAP2_PAGE_SIZE - 1):
        raise OSError(errno.EINVAL, f"invalid mmap offset {offset}")
    return offset >> MMAP2_SHIFT


def force_large_file(flags: int, lp64: bool = True) -> int:
    """Return open flags with O_LARGEFILE added on 32-bit targets."""
    if lp64:
        return flags
    return flags | O_LARGEFILE


def open_mode(flags: int, mode: int = 0) -> int:
    """Return the mode passed to openat: `mode` only when O_CREAT is set."""
    if flags & O_CREAT:
        return mode
    return 0


def current_time() -> int:
    """Return the current time in whole seconds since the epoch."""
    return int(time.time())