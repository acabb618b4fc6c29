"""Helpers for load-time code randomization: hashing, a hash map, sorting, parsing, formatting, entropy and i386 relocation patching."""

__version__ = "0.1.0"