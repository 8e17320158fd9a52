"""Helpers for formatting and splitting register data."""

from __future__ import annotations

import string
from collections.abc import Iterable

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def to_hex(data: Iterable[int] | bytes) -> str:
    """Format bytes as upper-case hex pairs separated by spaces."""
    return " ".join(f"{byte:02X}" for byte in bytes(data))


def to_hex_words(words: Iterable[int]) -> str:
    """Format 16-bit words as upper-case four-digit hex separated by spaces."""
    parts = []
    for word in words:
        if not 0 <= word <= 0xFFFF:
            raise ValueError(f"word out of range: {word}")
        parts.append(f"{word:04X}")
    return " ".join(parts)


def to_binary_string(byte: int) -> str:
    """Return the eight bits of ``byte``, most significant first."""
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"byte out of range: {byte}")
    return f"{byte:08b}"


def get_msb(value: int) -> int:
    """Return the most significant byte of a 16-bit value."""
    return (value >> 8) & 0xFF


def get_lsb(value: int) -> int:
    """Return the least significant byte of a 16-bit value."""
    return value & 0xFF


def to_lower(text: str) -> str:
    """Lower-case the ASCII letters of ``text``."""
    return text.translate(_ASCII_LOWER)