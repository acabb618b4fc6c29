"""Environment lookup over NAME=VALUE lists, including /proc/self/environ."""

from __future__ import annotations

import os
from typing import NamedTuple, Sequence

PROC_ENVIRON = "/proc/self/environ"


class EnvMatch(NamedTuple):
    """A variable's value and the index of its entry in the environment list."""

    value: str
    offset: int


def parse_environ_block(data: bytes) -> list[str]:
    """Split a NUL-separated environment block into its entries."""
    data = bytes(data)
    if not data:
        return []
    entries = data.split(b"\0")
    if data.endswith(b"\0"):
        entries.pop()
    return [entry.decode("utf-8", "surrogateescape") for entry in entries]


def read_proc_environ(path: str = PROC_ENVIRON) -> list[str]:
    """Read an environment block from `path`; an unreadable file gives no entries."""
    try:
        with open(path, "rb") as fh:
            data = fh.read()
    except OSError:
        return []
    return parse_environ_block(data)


def find_env(environ: Sequence[str] | None, name: str | None, offset: int = 0) -> EnvMatch | None:
    """Find the first entry at or after `offset` that defines `name`."""
    if name is None or environ is None:
        return None
    prefix = name + "="
    for index in range(offset, len(environ)):
        entry = environ[index]
        if entry.startswith(prefix):
            return EnvMatch(entry[len(prefix):], index)
    return None


def getenv(name: str, environ: Sequence[str] | None = None) -> str | None:
    """Return the value of `name` (up to any '='), or None if it is not set."""
    name = name.split("=", 1)[0]
    if environ is None:
        environ = [f"{key}={value}" for key, value in os.environ.items()]
    match = find_env(environ, name)
    return None if match is None else match.value