"""Minimal bounded formatter supporting %d, %u, %x, %p, %P, %s and %%."""

from __future__ import annotations

from typing import Any, Iterator, Sequence

_UINT32_MAX = 0xFFFFFFFF
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_UINTPTR_MAX = 2**64 - 1

_ESCAPES = {"n": "\n", "r": "\r", "t": "\t", "\\": "\\"}


def _int_arg(value: Any, low: int, high: int, spec: str) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"%{spec} requires an integer argument, got {value!r}")
    if not low <= value <= high:
        raise ValueError(f"%{spec} argument {value} out of range [{low}, {high}]")
    return value


def _render(fmt: str, args: Sequence[Any]) -> Iterator[str]:
    remaining = iter(args)

    def next_arg(spec: str) -> Any:
        try:
            return next(remaining)
        except StopIteration:
            raise TypeError(f"not enough arguments for %{spec}") from None

    i = 0
    length = len(fmt)
    while i < length:
        ch = fmt[i]
        if ch == "\\":
            esc = fmt[i + 1] if i + 1 < length else ""
            if esc not in _ESCAPES:
                raise ValueError(f"unsupported escape sequence \\{esc}")
            i += 2
            yield _ESCAPES[esc]
            continue
        if ch != "%":
            i += 1
            yield ch
            continue

        spec = fmt[i + 1] if i + 1 < length else ""
        i += 2
        if spec == "%":
            yield "%"
        elif spec == "d":
            value = _int_arg(next_arg(spec), _INT32_MIN, _INT32_MAX, spec)
            if value < 0:
                yield "-"
            yield str(abs(value))
        elif spec == "u":
            yield str(_int_arg(next_arg(spec), 0, _UINT32_MAX, spec))
        elif spec in ("p", "P"):
            value = _int_arg(next_arg(spec), 0, _UINTPTR_MAX, spec)
            yield "0x"
            yield format(value, "x")
        elif spec == "x":
            yield format(_int_arg(next_arg(spec), 0, _UINT32_MAX, spec), "x")
        elif spec == "s":
            text = next_arg(spec)
            if not isinstance(text, str):
                raise TypeError(f"%s requires a string argument, got {text!r}")
            yield text.split("\0", 1)[0]
        else:
            raise ValueError(f"unsupported conversion %{spec}")


def snprintf(bufsize: int, fmt: str, *args: Any) -> str:
    """Format `args` into at most ``bufsize - 1`` characters.

    Output that does not fit is cut off, and formatting stops at that point.
    """
    if bufsize < 1:
        raise ValueError("bufsize must be at least 1")
    limit = bufsize - 1
    out: list[str] = []
    written = 0
    for chunk in _render(fmt, args):
        room = limit - written
        if len(chunk) > room:
            out.append(chunk[:room])
            break
        out.append(chunk)
        written += len(chunk)
    return "".join(out)