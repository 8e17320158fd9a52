"""Modbus RTU driver for the vacuum gripper."""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from .crc import compute_crc
from .data_utils import get_lsb, get_msb
from .registers import (
    ActuatorStatus,
    FunctionCode,
    GripperActivationAction,
    GripperActivationStatus,
    GripperFaultStatus,
    GripperMode,
    GripperRegulateAction,
    ObjectDetectionStatus,
    get_actuator_status,
    get_gripper_activation_action,
    get_gripper_activation_status,
    get_gripper_fault_status,
    get_gripper_mode,
    get_gripper_regulate_action,
    get_object_detection_status,
    set_gripper_activation_action,
    set_gripper_mode,
    set_gripper_regulate_action,
)
from .serial_port import SerialIOError

_LOGGER = logging.getLogger(__name__)

ATMOSPHERIC_PRESSURE = 100.0  # kPa

# If the connection is not stable the command is sent again.
MAX_RETRIES = 5

GRIPPER_STATUS_REGISTER = 0x07D0
ACTION_REQUEST_REGISTER = 0x03E8

ACTIVATE_RESPONSE_SIZE = 8
DEACTIVATE_RESPONSE_SIZE = 8
GRIP_RESPONSE_SIZE = 8
RELEASE_RESPONSE_SIZE = 8
GET_STATUS_RESPONSE_SIZE = 11

MIN_TIMEOUT_MS = 0
MAX_TIMEOUT_MS = 25500

MIN_ABSOLUTE_PRESSURE = 0.0  # kPa
MAX_ABSOLUTE_PRESSURE = 255.0  # kPa

DEFAULT_SLAVE_ADDRESS = 0x09


class DriverError(Exception):
    """Raised when a command cannot be exchanged with the gripper."""


@dataclass(frozen=True)
class GripperStatus:
    """Snapshot of the gripper's status registers."""

    gripper_activation_action: GripperActivationAction
    gripper_mode: GripperMode
    gripper_regulate_action: GripperRegulateAction
    gripper_activation_status: GripperActivationStatus
    object_detection_status: ObjectDetectionStatus
    gripper_fault_status: GripperFaultStatus
    actuator_status: ActuatorStatus
    max_vacuum_pressure: float  # kPa relative to atmosphere
    actual_vacuum_pressure: float  # kPa relative to atmosphere


class Driver(ABC):
    """Common interface of gripper drivers and their configuration."""

    def __init__(self) -> None:
        self.slave_address: int = DEFAULT_SLAVE_ADDRESS
        self.mode: GripperMode = GripperMode.AUTOMATIC_MODE
        self.grip_max_vacuum_pressure: float = -100.0
        self.grip_min_vacuum_pressure: float = -10.0
        self.grip_timeout_ms: int = 500
        self.release_timeout_ms: int = 500

    @abstractmethod
    def connect(self) -> bool:
        """Open the connection; return whether it is open."""

    @abstractmethod
    def disconnect(self) -> None:
        """Close the connection."""

    @abstractmethod
    def activate(self) -> None:
        """Activate the gripper."""

    @abstractmethod
    def deactivate(self) -> None:
        """Deactivate the gripper."""

    @abstractmethod
    def grip(self) -> None:
        """Start the vacuum generator to grip an object."""

    @abstractmethod
    def release(self) -> None:
        """Release any held object."""

    @abstractmethod
    def get_status(self) -> GripperStatus:
        """Read the gripper status."""

    def __enter__(self) -> "Driver":
        if not self.connect():
            raise DriverError("Cannot connect to the gripper.")
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.disconnect()


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def _absolute_pressure(vacuum_pressure: float) -> int:
    value = _round_half_away(vacuum_pressure + ATMOSPHERIC_PRESSURE)
    return int(min(max(value, MIN_ABSOLUTE_PRESSURE), MAX_ABSOLUTE_PRESSURE))


def _timeout_byte(timeout_ms: int) -> int:
    """Clamp a timeout and express it in tenths of a second."""
    clamped = min(max(int(timeout_ms), MIN_TIMEOUT_MS), MAX_TIMEOUT_MS)
    return clamped // 100


def _with_crc(frame: list[int]) -> bytes:
    crc = compute_crc(frame)
    return bytes([*frame, get_msb(crc), get_lsb(crc)])


class DefaultDriver(Driver):
    """Driver talking to the gripper over a serial port with Modbus RTU."""

    def __init__(self, serial: Any) -> None:
        self._serial = serial
        self._mode = GripperMode.AUTOMATIC_MODE
        self._grip_max_vacuum_pressure = -100.0
        self._grip_min_vacuum_pressure = -10.0
        super().__init__()

    @property
    def mode(self) -> GripperMode:
        return self._mode

    @mode.setter
    def mode(self, value: GripperMode) -> None:
        if value is GripperMode.UNKNOWN:
            raise ValueError(f"Invalid gripper mode: {value.value}")
        self._mode = value

    @property
    def grip_max_vacuum_pressure(self) -> float:
        return self._grip_max_vacuum_pressure

    @grip_max_vacuum_pressure.setter
    def grip_max_vacuum_pressure(self, value: float) -> None:
        if value > 0:
            raise ValueError(
                f"Invalid grip max vacuum pressure: {value}. "
                "Must be a value between -100kPa and 0kPa."
            )
        self._grip_max_vacuum_pressure = value

    @property
    def grip_min_vacuum_pressure(self) -> float:
        return self._grip_min_vacuum_pressure

    @grip_min_vacuum_pressure.setter
    def grip_min_vacuum_pressure(self, value: float) -> None:
        if value > 0:
            raise ValueError(
                f"Invalid grip min vacuum pressure: {value}. "
                "Must be a value between -100kPa and 0kPa."
            )
        self._grip_min_vacuum_pressure = value

    def send(self, request: bytes, response_size: int) -> bytes:
        """Write ``request`` and read the response, retrying on I/O errors."""
        for attempt in range(1, MAX_RETRIES + 1):
            try:
                self._serial.write(bytes(request))
                return bytes(self._serial.read(response_size))
            except SerialIOError as exc:
                _LOGGER.debug(
                    "Resending the command because the previous attempt (%d of %d) failed: %s",
                    attempt,
                    MAX_RETRIES,
                    exc,
                )
        _LOGGER.error("Reached maximum retries. Operation failed.")
        raise DriverError("Reached maximum retries. Operation failed.")

    def _exchange(self, request: bytes, response_size: int, failure: str) -> bytes:
        try:
            response = self.send(request, response_size)
        except DriverError as exc:
            raise DriverError(failure) from exc
        if not response:
            raise DriverError(failure)
        return response

    def connect(self) -> bool:
        self._serial.open()
        return bool(self._serial.is_open())

    def disconnect(self) -> None:
        self._serial.close()

    def _action_register(self) -> int:
        reg = set_gripper_activation_action(0, GripperActivationAction.ACTIVATE)
        reg = set_gripper_mode(reg, self._mode)
        return set_gripper_regulate_action(
            reg, GripperRegulateAction.FOLLOW_REQUESTED_VACUUM_PARAMETERS
        )

    def _preset_action_registers(
        self, action: int, max_pressure: int, timeout: int, min_pressure: int
    ) -> bytes:
        return _with_crc(
            [
                self.slave_address,
                FunctionCode.PRESET_MULTIPLE_REGISTERS,
                get_msb(ACTION_REQUEST_REGISTER),
                get_lsb(ACTION_REQUEST_REGISTER),
                0x00,  # Number of registers to write MSB.
                0x03,  # Number of registers to write LSB.
                0x06,  # Number of bytes to write.
                action,
                0x00,  # Reserved.
                0x00,  # Reserved.
                max_pressure,
                timeout,
                min_pressure,
            ]
        )

    def activate(self) -> None:
        _LOGGER.info("Activate...")
        pressure = int(ATMOSPHERIC_PRESSURE)
        request = self._preset_action_registers(
            self._action_register(), pressure, _timeout_byte(self.grip_timeout_ms), pressure
        )
        self._exchange(request, ACTIVATE_RESPONSE_SIZE, "Failed to activate the gripper.")

    def deactivate(self) -> None:
        _LOGGER.info("Deactivate...")
        request = self._preset_action_registers(0x00, 0x00, 0x00, 0x00)
        self._exchange(request, DEACTIVATE_RESPONSE_SIZE, "Failed to deactivate the gripper.")

    def grip(self) -> None:
        _LOGGER.info("Gripping...")
        if self._mode is GripperMode.ADVANCED_MODE:
            max_pressure = _absolute_pressure(self._grip_max_vacuum_pressure)
        else:
            max_pressure = int(MIN_ABSOLUTE_PRESSURE)
        request = self._preset_action_registers(
            self._action_register(),
            max_pressure,
            _timeout_byte(self.grip_timeout_ms),
            _absolute_pressure(self._grip_min_vacuum_pressure),
        )
        self._exchange(request, GRIP_RESPONSE_SIZE, "Failed to grip.")

    def release(self) -> None:
        _LOGGER.info("Releasing...")
        request = self._preset_action_registers(
            self._action_register(),
            int(MAX_ABSOLUTE_PRESSURE),
            _timeout_byte(self.release_timeout_ms),
            _absolute_pressure(self._grip_min_vacuum_pressure),
        )
        self._exchange(request, RELEASE_RESPONSE_SIZE, "Failed to release.")

    def get_status(self) -> GripperStatus:
        request = _with_crc(
            [
                self.slave_address,
                FunctionCode.READ_INPUT_REGISTERS,
                get_msb(GRIPPER_STATUS_REGISTER),
                get_lsb(GRIPPER_STATUS_REGISTER),
                0x00,  # Number of registers to read MSB.
                0x03,  # Number of registers to read LSB.
            ]
        )
        response = self._exchange(request, GET_STATUS_RESPONSE_SIZE, "Failed to read the status.")
        if len(response) < 8:
            raise DriverError("Failed to read the status.")

        # The content of the requested registers starts from byte 3.
        status_reg, actuator_reg, fault_reg = response[3], response[4], response[5]
        return GripperStatus(
            gripper_activation_action=get_gripper_activation_action(status_reg),
            gripper_mode=get_gripper_mode(status_reg),
            gripper_regulate_action=get_gripper_regulate_action(status_reg),
            gripper_activation_status=get_gripper_activation_status(status_reg),
            object_detection_status=get_object_detection_status(status_reg),
            gripper_fault_status=get_gripper_fault_status(fault_reg),
            actuator_status=get_actuator_status(actuator_reg),
            max_vacuum_pressure=float(response[6]) - ATMOSPHERIC_PRESSURE,
            actual_vacuum_pressure=float(response[7]) - ATMOSPHERIC_PRESSURE,
        )