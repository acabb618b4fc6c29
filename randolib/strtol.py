"""String-to-integer conversion with C ``strtol`` semantics."""

from __future__ import annotations

from typing import NamedTuple

LONG_MAX = 2**63 - 1
LONG_MIN = -(2**63)

_WHITESPACE = frozenset(" \f\n\r\t\v")


class StrtolResult(NamedTuple):
    """Parsed value and the index just past the digits consumed (0 if none)."""

    value: int
    end: int


def _digit_value(ch: str) -> int | None:
    if "0" <= ch <= "9":
        return ord(ch) - ord("0")
    if "a" <= ch <= "z":
        return ord(ch) - ord("a") + 10
    if "A" <= ch <= "Z":
        return ord(ch) - ord("A") + 10
    return None


def strtol(text: str, base: int = 10) -> StrtolResult:
    """Parse a signed integer from the start of `text`.

    Leading whitespace and a sign are accepted; base 0 detects ``0x`` and
    leading-zero octal prefixes, and base 16 accepts ``0x``. Values out of
    range are clamped to LONG_MIN or LONG_MAX.
    """
    if base < 0 or base == 1 or base > 36:
        raise ValueError(f"invalid base {base}")

    def char_at(i: int) -> str:
        return text[i] if i < len(text) else ""

    i = 0
    while char_at(i) and char_at(i) in _WHITESPACE:
        i += 1

    negative = False
    if char_at(i) == "-":
        negative = True
        i += 1
    elif char_at(i) == "+":
        i += 1

    if base in (0, 16) and char_at(i) == "0" and char_at(i + 1) in ("x", "X") and char_at(i + 1):
        i += 2
        base = 16
    if base == 0:
        base = 8 if char_at(i) == "0" else 10

    acc = 0
    consumed = False
    while True:
        ch = char_at(i)
        digit = _digit_value(ch) if ch else None
        if digit is None or digit >= base:
            break
        acc = acc * base + digit
        consumed = True
        i += 1

    value = -acc if negative else acc
    value = max(LONG_MIN, min(LONG_MAX, value))
    return StrtolResult(value, i if consumed else 0)