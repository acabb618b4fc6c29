# randolib

Building blocks for load-time code randomization, written in plain Python
with no dependencies beyond the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## What is inside

- `randolib.fnv`: the 32-bit FNV-1a hash. `fnv_32a_buf(data, hval)` hashes
  bytes and `fnv_32a_str(text, hval)` hashes a string up to its first NUL;
  both start from `FNV1_32A_INIT` when no `hval` is given. `FnvType` lists
  the FNV hash kinds.
- `randolib.hashmap`: `HashMap`, an open-addressing table with Robin Hood
  displacement. `insert(key, value)` keeps an existing entry and returns an
  `InsertResult(value, inserted)`; `get`, `in`, `len`, iteration over keys,
  `items()` and `clear()` are supported. `None` is not a valid key. The
  integer mixers `int_hash32` and `int_hash64` are also available; integer
  keys are hashed with `int_hash64` by default.
- `randolib.qsort`: `qsort(items, cmp)`, the Bentley–McIlroy quicksort that
  sorts a mutable sequence in place using a three-way comparison function.
- `randolib.strtol`: `strtol(text, base)`, C-style integer parsing that skips
  leading whitespace, accepts a sign, detects `0x` and octal prefixes for
  base 0, clamps to `LONG_MIN`/`LONG_MAX`, and returns a
  `StrtolResult(value, end)`. An invalid base raises `ValueError`.
- `randolib.printf`: `snprintf(bufsize, fmt, *args)`, a small formatter for
  `%d`, `%u`, `%x`, `%p`, `%P`, `%s`, `%%` and the escapes `\n`, `\r`, `\t`,
  `\\`, whose output is cut to `bufsize - 1` characters.
- `randolib.rng`: `getentropy(length)` reads up to 255 bytes from the
  kernel, `rand_below(limit)` returns an unbiased integer in `[0, limit)`,
  and `rand_r(seed)` performs one linear-congruential step, returning
  `RandR(value, seed)`.
- `randolib.environ`: `parse_environ_block`, `read_proc_environ`,
  `find_env` and `getenv` for NUL-separated environment blocks such as
  `/proc/self/environ`.
- `randolib.syscalls`: `mmap2_page_offset` (raises `OSError` with `EINVAL`
  for unaligned or negative offsets), `force_large_file`, `open_mode` and
  `current_time`, plus cache-size constants.
- `randolib.reloc_x86`: `X86Relocation` reads and rewrites i386 relocations
  (`target()`, `set_target()`, `got_entry()`) in a writable memory image
  such as a `bytearray`, and `fixup_entry_point` retargets a `JMP` at an
  entry point. `RelocType` lists the handled relocation types.

## Example

```python
from randolib.fnv import fnv_32a_str
from randolib.hashmap import HashMap
from randolib.printf import snprintf
from randolib.reloc_x86 import RelocType, X86Relocation, fixup_entry_point
from randolib.strtol import strtol

print(hex(fnv_32a_str("hello")))

table = HashMap()
table.insert(0x1000, "start")
print(table.get(0x1000))             # start

print(strtol("  0x1f rest", 0))      # StrtolResult(value=31, end=6)
print(snprintf(8, "%s=%d", "count", 42))  # count=4

memory = bytearray(16)
memory[0] = 0xE9                     # JMP rel32
fixup_entry_point(memory, 0, 0x100)
print(hex(X86Relocation(memory, 1, RelocType.R_386_PC32, -4).target()))  # 0x100
```

## Limitations

- There is no seedable stream-cipher random number generator: randomness
  comes from the operating system through `getentropy` and `rand_below`, or
  from the simple, predictable `rand_r` step.
- Relocation patching covers 32-bit x86 (i386) only; 64-bit x86 relocations
  are not handled.
- The package works on memory images you supply; it does not load, map or
  randomize running programs itself, and it provides no command-line tool.