"""Open-addressing hash map using Robin Hood hashing, plus integer hash functions."""

from __future__ import annotations

from typing import Any, Callable, Hashable, Iterator, NamedTuple

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


def int_hash32(key: int) -> int:
    """Thomas Wang's 32-bit integer hash."""
    key &= _MASK32
    key = (key + (~(key << 15) & _MASK32)) & _MASK32
    key ^= key >> 10
    key = (key + (key << 3)) & _MASK32
    key ^= key >> 6
    key = (key + (~(key << 11) & _MASK32)) & _MASK32
    key ^= key >> 16
    return key


def int_hash64(key: int) -> int:
    """Thomas Wang's 64-bit integer hash, truncated to 32 bits."""
    key &= _MASK64
    key = (key + (~(key << 32) & _MASK64)) & _MASK64
    key ^= key >> 22
    key = (key + (~(key << 13) & _MASK64)) & _MASK64
    key ^= key >> 8
    key = (key + (key << 3)) & _MASK64
    key ^= key >> 15
    key = (key + (~(key << 27) & _MASK64)) & _MASK64
    key ^= key >> 31
    return key & _MASK32


def _default_key_hash(key: Hashable) -> int:
    if isinstance(key, int):
        return int_hash64(key)
    return hash(key) & _MASK32


class InsertResult(NamedTuple):
    """Outcome of an insertion: the value stored under the key, and whether it is new."""

    value: Any
    inserted: bool


class HashMap:
    """Hash map with linear probing and Robin Hood displacement.

    ``None`` is not a valid key. The table starts with 16 slots and doubles
    once it is about 90% (232/256) full.
    """

    DEFAULT_CAPACITY = 16
    LOAD_FACTOR256 = 232

    def __init__(self, key_hash: Callable[[Any], int] | None = None) -> None:
        self._key_hash = key_hash if key_hash is not None else _default_key_hash
        self._slots: list[tuple[int, Any, Any] | None] = []
        self._count = 0

    @property
    def capacity(self) -> int:
        """Number of slots in the table."""
        return len(self._slots)

    @property
    def _mask(self) -> int:
        return len(self._slots) - 1 if self._slots else 0

    def _hash(self, key: Any) -> int:
        return self._key_hash(key) & _MASK32

    def _distance(self, idx: int) -> int:
        slot = self._slots[idx]
        mask = self._mask
        return (idx - (slot[0] & mask)) & mask

    def _find(self, key: Any) -> tuple[int, Any, Any] | None:
        if key is None or not self._slots:
            return None
        kh = self._hash(key)
        mask = self._mask
        pos = kh & mask
        dist = 0
        while True:
            slot = self._slots[pos]
            if slot is None:
                return None
            if dist > self._distance(pos):
                return None
            if slot[0] == kh and slot[1] == key:
                return slot
            pos = (pos + 1) & mask
            dist += 1

    def get(self, key: Any) -> Any:
        """Return the value stored under `key`, or None if it is absent."""
        slot = self._find(key)
        return None if slot is None else slot[2]

    def __contains__(self, key: Any) -> bool:
        return self._find(key) is not None

    def insert(self, key: Any, value: Any) -> InsertResult:
        """Store `value` under `key` unless the key is already present."""
        if key is None:
            raise ValueError("None is not a valid HashMap key")
        self._grow()
        return self._place((self._hash(key), key, value))

    def _place(self, entry: tuple[int, Any, Any]) -> InsertResult:
        new_value = entry[2]
        mask = self._mask
        pos = entry[0] & mask
        dist = 0
        while True:
            slot = self._slots[pos]
            if slot is None:
                self._slots[pos] = entry
                self._count += 1
                return InsertResult(new_value, True)
            if slot[0] == entry[0] and slot[1] == entry[1]:
                return InsertResult(slot[2], False)
            existing_dist = self._distance(pos)
            if existing_dist < dist:
                self._slots[pos], entry = entry, slot
                dist = existing_dist
            pos = (pos + 1) & mask
            dist += 1

    def _grow(self) -> None:
        cap = len(self._slots)
        if self._count < (cap * self.LOAD_FACTOR256) // 256:
            return
        new_cap = self.DEFAULT_CAPACITY if cap < self.DEFAULT_CAPACITY else cap * 2
        old = self._slots
        self._slots = [None] * new_cap
        self._count = 0
        for slot in old:
            if slot is not None:
                self._place(slot)

    def clear(self) -> None:
        """Remove every entry and release the table."""
        self._slots = []
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        """Iterate over keys in table order."""
        return (slot[1] for slot in self._slots if slot is not None)

    def items(self) -> Iterator[tuple[Any, Any]]:
        """Iterate over (key, value) pairs in table order."""
        return ((slot[1], slot[2]) for slot in self._slots if slot is not None)