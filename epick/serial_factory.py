"""Build a serial port from the hardware parameters."""

from __future__ import annotations

import logging

from .hardware_info import HardwareInfo
from .serial_port import SerialPort

_LOGGER = logging.getLogger(__name__)

USB_PORT_PARAM = "usb_port"
USB_PORT_DEFAULT = "/dev/ttyUSB0"

BAUDRATE_PARAM = "baudrate"
BAUDRATE_DEFAULT = 115200

TIMEOUT_PARAM = "timeout"
TIMEOUT_DEFAULT = 0.5  # seconds


def _seconds_to_ms(seconds: float) -> int:
    """Convert seconds to whole milliseconds, truncating toward zero."""
    return int(seconds * 1000)


class SerialFactory:
    """Create and configure a :class:`SerialPort` from a :class:`HardwareInfo`."""

    def create(self, info: HardwareInfo) -> SerialPort:
        """Return a serial port configured with the port, baud rate and timeout of ``info``."""
        params = info.hardware_parameters

        _LOGGER.info("Reading usb_port...")
        usb_port = params.get(USB_PORT_PARAM, USB_PORT_DEFAULT)
        _LOGGER.info("usb_port: %s", usb_port)

        _LOGGER.info("Reading baudrate...")
        baudrate = (
            int(params[BAUDRATE_PARAM].strip(), 10) & 0xFFFFFFFF
            if BAUDRATE_PARAM in params
            else BAUDRATE_DEFAULT
        )
        _LOGGER.info("baudrate: %dbps", baudrate)

        _LOGGER.info("Reading timeout...")
        timeout = float(params[TIMEOUT_PARAM]) if TIMEOUT_PARAM in params else TIMEOUT_DEFAULT
        _LOGGER.info("timeout: %fs", timeout)

        serial_port = self.create_serial()
        serial_port.port = usb_port
        serial_port.baudrate = baudrate
        serial_port.timeout_ms = _seconds_to_ms(timeout)
        return serial_port

    def create_serial(self) -> SerialPort:
        """Return a new, unconfigured serial port."""
        return SerialPort()