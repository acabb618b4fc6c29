"""Relocation handling for 32-bit x86 (i386) ELF code held in a byte buffer.

Addresses are offsets into the buffer passed as ``memory``. Pointers and
pointer differences are 32 bits wide and wrap around like the hardware's.
"""

from __future__ import annotations

import struct
from enum import IntEnum

_MASK32 = 0xFFFFFFFF


class RelocationError(ValueError):
    """Raised when the code around a relocation is not what it must be."""


class RelocType(IntEnum):
    """i386 ELF relocation types handled here."""

    R_386_32 = 1
    R_386_PC32 = 2
    R_386_GOT32 = 3
    R_386_PLT32 = 4
    R_386_GOTOFF = 9
    R_386_GOTPC = 10
    R_386_GOT32X = 43


POINTER_RELOC_TYPE = RelocType.R_386_32

_GOT32_TYPES = (RelocType.R_386_GOT32, RelocType.R_386_GOT32X)
_PCREL_TYPES = (RelocType.R_386_PC32, RelocType.R_386_PLT32, RelocType.R_386_GOTPC)


def _peek(memory, addr: int, fmt: str) -> int | None:
    """Read a value, or None if it lies outside the buffer."""
    if addr < 0 or addr + struct.calcsize(fmt) > len(memory):
        return None
    return struct.unpack_from(fmt, memory, addr)[0]


def _read(memory, addr: int, fmt: str) -> int:
    value = _peek(memory, addr, fmt)
    if value is None:
        raise IndexError(f"address {addr:#x} is outside memory")
    return value


def _write(memory, addr: int, fmt: str, value: int) -> None:
    if addr < 0 or addr + struct.calcsize(fmt) > len(memory):
        raise IndexError(f"address {addr:#x} is outside memory")
    struct.pack_into(fmt, memory, addr, value)


def _is_patched_got32(memory, src: int, include_lea: bool) -> bool:
    # The linker may rewrite a GOT load into an immediate or GOTOFF form.
    opcode = _peek(memory, src - 2, "<B")
    if include_lea and opcode == 0x8D:
        return True
    return opcode in (0xC7, 0xF7, 0x81)


def _is_patched_tls_get_addr_call(memory, src: int) -> bool:
    # gold replaces a call to __tls_get_addr with a MOV from GS:0 to EAX.
    first = _peek(memory, src - 8, "<I")
    second = _peek(memory, src - 4, "<I")
    if first is None or second is None:
        return False
    if first == 0x0000A165 and second in (0xE8810000, 0x83030000, 0xB68D0000):
        return True
    return (first >> 8) == 0x00A165 and second in (0x2D000000, 0x90000000)


class X86Relocation:
    """One relocation at address `src` in `memory`.

    `orig_src` is where the relocated field sat before the code was moved;
    PC-relative targets are computed from it. It defaults to `src`.
    """

    def __init__(self, memory, src: int, reloc_type: int, addend: int = 0,
                 got: int = 0, orig_src: int | None = None) -> None:
        self.memory = memory
        self.src = src
        self.type = int(reloc_type)
        self.addend = addend
        self.got = got
        self.orig_src = src if orig_src is None else orig_src

    def _abs32(self) -> bool:
        return self.type == RelocType.R_386_32 or (
            self.type in _GOT32_TYPES and _is_patched_got32(self.memory, self.src, False)
        )

    def _skipped_tls(self) -> bool:
        if self.type == RelocType.R_386_GOT32X or self.type in _PCREL_TYPES:
            return _is_patched_tls_get_addr_call(self.memory, self.src)
        return False

    def target(self) -> int | None:
        """Return the address the relocation points at, or None if it has none."""
        if self._abs32():
            return _read(self.memory, self.src, "<I")
        if self._skipped_tls():
            return None
        if self.type in _GOT32_TYPES or self.type == RelocType.R_386_GOTOFF:
            return (self.got + _read(self.memory, self.src, "<i")) & _MASK32
        if self.type in _PCREL_TYPES:
            offset = _read(self.memory, self.src, "<i")
            return (self.orig_src - self.addend + offset) & _MASK32
        return None

    def set_target(self, new_target: int) -> None:
        """Rewrite the relocated field so that it points at `new_target`."""
        if self._abs32():
            if not 0 <= new_target <= _MASK32:
                raise OverflowError(f"pointer {new_target:#x} does not fit in 32 bits")
            _write(self.memory, self.src, "<I", new_target)
        elif self._skipped_tls():
            return
        elif self.type in _GOT32_TYPES or self.type == RelocType.R_386_GOTOFF:
            _write(self.memory, self.src, "<I", (new_target - self.got) & _MASK32)
        elif self.type in _PCREL_TYPES:
            value = new_target + self.addend - self.src
            _write(self.memory, self.src, "<I", value & _MASK32)
        else:
            raise RelocationError(f"unknown relocation type {self.type}")

    def got_entry(self) -> int | None:
        """Return the GOT slot the relocation reads through, if any."""
        if self.type not in _GOT32_TYPES:
            return None
        if _is_patched_got32(self.memory, self.src, True):
            return None
        offset = _read(self.memory, self.src, "<i")
        return (self.got + offset - self.addend) & _MASK32


def fixup_entry_point(memory, entry_point: int, target: int, got: int = 0) -> None:
    """Point the JMP at `entry_point` to `target`."""
    if _peek(memory, entry_point, "<B") != 0xE9:
        raise RelocationError(f"no JMP instruction at entry point {entry_point:#x}")
    reloc = X86Relocation(memory, entry_point + 1, RelocType.R_386_PC32, -4, got)
    reloc.set_target(target)