"""CRC-16 checksum used by Modbus RTU frames."""

from __future__ import annotations

from collections.abc import Iterable

_POLYNOMIAL = 0xA001  # Reflected form of 0x8005.
_INITIAL = 0xFFFF


def _build_table() -> tuple[int, ...]:
    table = []
    for value in range(256):
        crc = value
        for _ in range(8):
            crc = (crc >> 1) ^ _POLYNOMIAL if crc & 1 else crc >> 1
        table.append(crc)
    return tuple(table)


_TABLE = _build_table()


def compute_crc(data: Iterable[int] | bytes) -> int:
    """Return the Modbus CRC-16 of ``data``.

    The result is arranged so that its most significant byte is the first
    checksum byte on the wire and its least significant byte the second.
    """
    crc = _INITIAL
    for byte in bytes(data):
        crc = (crc >> 8) ^ _TABLE[(crc ^ byte) & 0xFF]
    return ((crc & 0xFF) << 8) | (crc >> 8)