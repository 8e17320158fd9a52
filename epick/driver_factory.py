"""Build a gripper driver from the hardware parameters."""

from __future__ import annotations

import logging
from typing import Optional

from .data_utils import to_lower
from .driver import DefaultDriver, Driver
from .fake_driver import FakeDriver
from .hardware_info import HardwareInfo
from .registers import GripperMode, gripper_mode_to_string
from .serial_factory import SerialFactory

_LOGGER = logging.getLogger(__name__)

SLAVE_ADDRESS_PARAM = "slave_address"
SLAVE_ADDRESS_DEFAULT = 0x9

MODE_PARAM = "mode"
MODE_DEFAULT = GripperMode.AUTOMATIC_MODE

GRIP_MAX_VACUUM_PRESSURE_PARAM = "grip_max_vacuum_pressure"
GRIP_MAX_VACUUM_PRESSURE_DEFAULT = -100.0  # kPa

GRIP_MIN_VACUUM_PRESSURE_PARAM = "grip_min_vacuum_pressure"
GRIP_MIN_VACUUM_PRESSURE_DEFAULT = -10.0  # kPa

GRIP_TIMEOUT_PARAM = "grip_timeout"
GRIP_TIMEOUT_DEFAULT = 0.5  # seconds

RELEASE_TIMEOUT_PARAM = "release_timeout"
RELEASE_TIMEOUT_DEFAULT = 0.5  # seconds

USE_DUMMY_PARAM = "use_dummy"
USE_DUMMY_DEFAULT = "False"


def _seconds_to_ms(seconds: float) -> int:
    """Convert seconds to whole milliseconds, truncating toward zero."""
    return int(seconds * 1000)


class DriverFactory:
    """Create and configure a :class:`Driver` from a :class:`HardwareInfo`."""

    def __init__(self, serial_factory: Optional[SerialFactory] = None) -> None:
        self._serial_factory = serial_factory if serial_factory is not None else SerialFactory()

    def create(self, info: HardwareInfo) -> Driver:
        """Return a driver configured with the parameters of ``info``."""
        params = info.hardware_parameters

        _LOGGER.info("Reading slave_address...")
        # The address is stored as a base-16 string, for example "0x9".
        slave_address = (
            int(params[SLAVE_ADDRESS_PARAM].strip(), 16) & 0xFF
            if SLAVE_ADDRESS_PARAM in params
            else SLAVE_ADDRESS_DEFAULT
        )
        _LOGGER.info("slave_address: %d", slave_address)

        _LOGGER.info("Reading mode...")
        advanced = gripper_mode_to_string(GripperMode.ADVANCED_MODE)
        mode = GripperMode.ADVANCED_MODE if params.get(MODE_PARAM) == advanced else MODE_DEFAULT
        _LOGGER.info("mode: %s", gripper_mode_to_string(mode))

        _LOGGER.info("Reading grip max vacuum pressure...")
        grip_max_vacuum_pressure = self._float_param(
            params, GRIP_MAX_VACUUM_PRESSURE_PARAM, GRIP_MAX_VACUUM_PRESSURE_DEFAULT
        )
        _LOGGER.info("%s: %fkPa", GRIP_MAX_VACUUM_PRESSURE_PARAM, grip_max_vacuum_pressure)

        _LOGGER.info("Reading grip min vacuum pressure...")
        grip_min_vacuum_pressure = self._float_param(
            params, GRIP_MIN_VACUUM_PRESSURE_PARAM, GRIP_MIN_VACUUM_PRESSURE_DEFAULT
        )
        _LOGGER.info("%s: %fkPa", GRIP_MIN_VACUUM_PRESSURE_PARAM, grip_min_vacuum_pressure)

        _LOGGER.info("Reading grip timeout...")
        grip_timeout = self._float_param(params, GRIP_TIMEOUT_PARAM, GRIP_TIMEOUT_DEFAULT)
        _LOGGER.info("%s: %fs", GRIP_TIMEOUT_PARAM, grip_timeout)

        _LOGGER.info("Reading release timeout...")
        release_timeout = self._float_param(params, RELEASE_TIMEOUT_PARAM, RELEASE_TIMEOUT_DEFAULT)
        _LOGGER.info("%s: %fs", RELEASE_TIMEOUT_PARAM, release_timeout)

        driver = self.create_driver(info)
        driver.slave_address = slave_address
        driver.mode = mode
        driver.grip_max_vacuum_pressure = grip_max_vacuum_pressure
        driver.grip_min_vacuum_pressure = grip_min_vacuum_pressure
        driver.grip_timeout_ms = _seconds_to_ms(grip_timeout)
        driver.release_timeout_ms = _seconds_to_ms(release_timeout)
        return driver

    def create_driver(self, info: HardwareInfo) -> Driver:
        """Return a simulated driver when ``use_dummy`` asks for one, else a serial driver."""
        use_dummy = info.hardware_parameters.get(USE_DUMMY_PARAM)
        if use_dummy is not None and to_lower(use_dummy) != to_lower(USE_DUMMY_DEFAULT):
            _LOGGER.info("You are connected to a dummy driver, not a real hardware.")
            return FakeDriver()
        return DefaultDriver(self._serial_factory.create(info))

    @staticmethod
    def _float_param(params: dict[str, str], name: str, default: float) -> float:
        return float(params[name]) if name in params else default