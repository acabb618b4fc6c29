"""Operating-system entropy, unbiased bounded random numbers and rand_r."""

from __future__ import annotations

import errno
import os
from typing import NamedTuple

LONG_MAX = 2**63 - 1
RAND_MAX = 0x7FFFFFFF
MAX_ENTROPY_REQUEST = 255

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


def getentropy(length: int) -> bytes:
    """Return `length` bytes from the kernel's random source (at most 255)."""
    if length < 0:
        raise ValueError("length must not be negative")
    if length > MAX_ENTROPY_REQUEST:
        raise OSError(errno.EIO, "entropy request larger than 255 bytes")
    if hasattr(os, "getrandom"):
        try:
            out = b""
            while len(out) < length:
                try:
                    out += os.getrandom(length - len(out))
                except InterruptedError:
                    continue
            return out
        except OSError as exc:
            if exc.errno != errno.ENOSYS:
                raise
    return os.urandom(length)


def rand_below(limit: int) -> int:
    """Return a uniformly distributed integer in ``[0, limit)``."""
    if limit <= 0 or limit > LONG_MAX:
        raise ValueError("limit must be in the range 1..LONG_MAX")
    cutoff = LONG_MAX - ((LONG_MAX % limit) + 1)
    while True:
        value = int.from_bytes(getentropy(8), "little") & _MASK64
        if value <= cutoff:
            return value % limit


class RandR(NamedTuple):
    """A rand_r result and the updated seed to pass to the next call."""

    value: int
    seed: int


def rand_r(seed: int) -> RandR:
    """Advance the linear congruential generator by one step."""
    new_seed = (seed * 1103515245 + 12345) & _MASK32
    return RandR(new_seed & RAND_MAX, new_seed)