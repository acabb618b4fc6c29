"""32-bit Fowler/Noll/Vo FNV-1a hashing."""

from __future__ import annotations

from enum import IntEnum

FNV_VERSION = "5.0.2"

FNV0_32_INIT = 0
FNV1_32_INIT = 0x811C9DC5
FNV1_32A_INIT = FNV1_32_INIT
FNV_32_PRIME = 0x01000193

_MASK32 = 0xFFFFFFFF


class FnvType(IntEnum):
    """Kinds of FNV hash."""

    FNV_NONE = 0
    FNV0_32 = 1
    FNV1_32 = 2
    FNV1a_32 = 3
    FNV0_64 = 4
    FNV1_64 = 5
    FNV1a_64 = 6


def fnv_32a_buf(data: bytes, hval: int = FNV1_32A_INIT) -> int:
    """Hash every octet of `data`, continuing from `hval`."""
    hval &= _MASK32
    for octet in bytes(data):
        hval = ((hval ^ octet) * FNV_32_PRIME) & _MASK32
    return hval


def fnv_32a_str(text: str | bytes, hval: int = FNV1_32A_INIT) -> int:
    """Hash a string up to (not including) its first NUL, continuing from `hval`."""
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    return fnv_32a_buf(data.split(b"\0", 1)[0], hval)