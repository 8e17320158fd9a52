"""Serial port used to exchange Modbus frames with the gripper."""

from __future__ import annotations

from typing import Any, Optional

import serial


class SerialIOError(OSError):
    """Raised when the serial port cannot be opened, read or written."""


class SerialPort:
    """A thin wrapper over a pyserial port that insists on complete transfers."""

    def __init__(self, port: Optional[Any] = None) -> None:
        self._serial = port if port is not None else serial.Serial()

    @property
    def port(self) -> Optional[str]:
        return self._serial.port

    @port.setter
    def port(self, value: str) -> None:
        self._serial.port = value

    @property
    def baudrate(self) -> int:
        return self._serial.baudrate

    @baudrate.setter
    def baudrate(self, value: int) -> None:
        self._serial.baudrate = value

    @property
    def timeout_ms(self) -> int:
        """Read timeout in milliseconds (0 when no timeout is set)."""
        timeout = self._serial.timeout
        return 0 if timeout is None else round(timeout * 1000)

    @timeout_ms.setter
    def timeout_ms(self, value: int) -> None:
        self._serial.timeout = value / 1000
        self._serial.write_timeout = value / 1000

    def open(self) -> None:
        try:
            self._serial.open()
        except serial.SerialException as exc:
            raise SerialIOError(str(exc)) from exc

    def is_open(self) -> bool:
        return bool(self._serial.is_open)

    def close(self) -> None:
        self._serial.close()

    def read(self, size: int) -> bytes:
        """Read exactly ``size`` bytes or raise :class:`SerialIOError`."""
        try:
            data = bytes(self._serial.read(size))
        except serial.SerialException as exc:
            raise SerialIOError(str(exc)) from exc
        if len(data) != size:
            raise SerialIOError(f"Requested {size} bytes, but got {len(data)}")
        return data

    def write(self, data: bytes) -> None:
        """Write all of ``data`` or raise :class:`SerialIOError`."""
        payload = bytes(data)
        try:
            written = self._serial.write(payload)
            self._serial.flush()
        except serial.SerialException as exc:
            raise SerialIOError(str(exc)) from exc
        if written != len(payload):
            raise SerialIOError(
                f"Attempted to write {len(payload)} bytes, but wrote {written}"
            )

    def __enter__(self) -> "SerialPort":
        self.open()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()