"""Hardware interface exposing the gripper as command and state values."""

from __future__ import annotations

import logging
import threading
from typing import Optional

from .driver import Driver
from .driver_factory import DriverFactory
from .hardware_info import (
    HardwareInfo,
    get_gpios_command_interface,
    get_gpios_state_interface,
    get_joints_state_interface,
    is_false,
    is_true,
)
from .registers import object_detection_to_double

_LOGGER = logging.getLogger(__name__)

GRIPPER_PREFIX = "gripper"
GRIP_COMMAND_INTERFACE = "grip_cmd"
GRIP_STATE_INTERFACE = "grip_cmd"
OBJECT_DETECTION_STATE_INTERFACE = "object_detection_status"
POSITION_STATE_INTERFACE = "position"

COMMS_LOOP_PERIOD = 0.010  # seconds


class HardwareInterfaceError(Exception):
    """Raised when a lifecycle transition of the hardware interface fails."""


def _full_name(interface: str) -> str:
    return f"{GRIPPER_PREFIX}/{interface}"


class GripperHardwareInterface:
    """Bridges double-valued command and state interfaces to a gripper driver.

    A background thread polls the driver and issues grip or release requests
    whenever the commanded value and the reported state disagree.
    """

    def __init__(self, driver_factory: Optional[DriverFactory] = None) -> None:
        self._driver_factory = driver_factory if driver_factory is not None else DriverFactory()
        self._driver: Optional[Driver] = None
        self._info: Optional[HardwareInfo] = None

        # Values seen by read()/write() callers.
        self._status = {GRIP_STATE_INTERFACE: 0.0, OBJECT_DETECTION_STATE_INTERFACE: 0.0}
        self._commands = {GRIP_COMMAND_INTERFACE: 0.0}

        # Values shared with the background thread.
        self._lock = threading.Lock()
        self._safe_status = dict(self._status)
        self._safe_commands = dict(self._commands)

        # Exported full interface names mapped to the stored value they expose.
        self._state_interfaces: dict[str, str] = {}
        self._command_interfaces: dict[str, str] = {}

        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def driver(self) -> Optional[Driver]:
        return self._driver

    def on_init(self, info: HardwareInfo) -> None:
        """Store ``info`` and create the driver it describes."""
        _LOGGER.debug("on_init")
        self._info = info
        try:
            self._driver = self._driver_factory.create(info)
        except Exception as exc:
            _LOGGER.error("Cannot initialize the gripper: %s", exc)
            raise HardwareInterfaceError(f"Cannot initialize the gripper: {exc}") from exc

    def _require_driver(self) -> Driver:
        if self._driver is None:
            raise HardwareInterfaceError("The hardware interface has not been initialized.")
        return self._driver

    def on_configure(self) -> None:
        """Open the connection to the gripper."""
        _LOGGER.debug("on_configure")
        driver = self._require_driver()
        try:
            connected = driver.connect()
        except Exception as exc:
            _LOGGER.error("Cannot configure the gripper: %s", exc)
            raise HardwareInterfaceError(f"Cannot configure the gripper: {exc}") from exc
        if not connected:
            _LOGGER.error("Cannot connect to the gripper")
            raise HardwareInterfaceError("Cannot connect to the gripper.")

    def export_state_interfaces(self) -> list[str]:
        """Return the names of the state interfaces declared in the hardware info."""
        _LOGGER.debug("export_state_interfaces")
        info = self._info if self._info is not None else HardwareInfo()
        exported: dict[str, str] = {}

        if get_gpios_state_interface(GRIPPER_PREFIX, OBJECT_DETECTION_STATE_INTERFACE, info):
            exported[_full_name(OBJECT_DETECTION_STATE_INTERFACE)] = OBJECT_DETECTION_STATE_INTERFACE
        else:
            _LOGGER.error(
                "State interface %s/%s not found.", GRIPPER_PREFIX, OBJECT_DETECTION_STATE_INTERFACE
            )

        if get_gpios_state_interface(GRIPPER_PREFIX, GRIP_STATE_INTERFACE, info):
            exported[_full_name(GRIP_STATE_INTERFACE)] = GRIP_STATE_INTERFACE
        else:
            _LOGGER.error("State interface %s/%s not found.", GRIPPER_PREFIX, GRIP_STATE_INTERFACE)

        # This joint state is optional and mirrors the grip state.
        if get_joints_state_interface(GRIPPER_PREFIX, POSITION_STATE_INTERFACE, info):
            exported[_full_name(POSITION_STATE_INTERFACE)] = GRIP_STATE_INTERFACE

        self._state_interfaces = exported
        return list(exported)

    def export_command_interfaces(self) -> list[str]:
        """Return the names of the command interfaces declared in the hardware info."""
        _LOGGER.debug("export_command_interfaces")
        info = self._info if self._info is not None else HardwareInfo()
        exported: dict[str, str] = {}
        if get_gpios_command_interface(GRIPPER_PREFIX, GRIP_COMMAND_INTERFACE, info):
            exported[_full_name(GRIP_COMMAND_INTERFACE)] = GRIP_COMMAND_INTERFACE
        else:
            _LOGGER.error(
                "Command interface %s/%s not found.", GRIPPER_PREFIX, GRIP_COMMAND_INTERFACE
            )
        self._command_interfaces = exported
        return list(exported)

    def on_activate(self) -> None:
        """Activate the gripper and start the communication thread."""
        _LOGGER.debug("on_activate")
        driver = self._require_driver()
        try:
            driver.activate()
        except Exception as exc:
            _LOGGER.critical("Failed to activate the gripper: %s", exc)
            raise HardwareInterfaceError(f"Failed to activate the gripper: {exc}") from exc

        self._stop.clear()
        self._thread = threading.Thread(
            target=self._background_task, name="gripper-comms", daemon=True
        )
        self._thread.start()
        _LOGGER.info("Gripper successfully activated!")

    def on_deactivate(self) -> None:
        """Stop the communication thread and deactivate the gripper."""
        _LOGGER.debug("on_deactivate")
        self._stop_communication()
        driver = self._require_driver()
        try:
            driver.deactivate()
        except Exception as exc:
            _LOGGER.error("Failed to deactivate the gripper: %s", exc)
            raise HardwareInterfaceError(f"Failed to deactivate the gripper: {exc}") from exc
        _LOGGER.info("Gripper successfully deactivated!")

    def read(self) -> None:
        """Publish the latest values gathered by the communication thread."""
        with self._lock:
            self._status.update(self._safe_status)

    def write(self) -> None:
        """Hand the current command values to the communication thread."""
        with self._lock:
            self._safe_commands.update(self._commands)

    def get_state(self, name: str) -> float:
        """Return the value of an exported state interface such as ``gripper/grip_cmd``."""
        return self._status[self._state_interfaces[name]]

    def get_command(self, name: str) -> float:
        """Return the value of an exported command interface."""
        return self._commands[self._command_interfaces[name]]

    def set_command(self, name: str, value: float) -> None:
        """Set the value of an exported command interface."""
        self._commands[self._command_interfaces[name]] = float(value)

    def _stop_communication(self) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None

    def _background_task(self) -> None:
        driver = self._require_driver()
        while not self._stop.is_set():
            try:
                status = driver.get_status()
                with self._lock:
                    self._safe_status[OBJECT_DETECTION_STATE_INTERFACE] = object_detection_to_double(
                        status.object_detection_status
                    )
                    grip_cmd = self._safe_commands[GRIP_COMMAND_INTERFACE]
                    grip_state = self._safe_status[GRIP_STATE_INTERFACE]

                # On success the grip state follows the grip command.
                if is_false(grip_state) and is_true(grip_cmd):
                    driver.grip()
                    with self._lock:
                        self._safe_status[GRIP_STATE_INTERFACE] = grip_cmd
                elif is_true(grip_state) and is_false(grip_cmd):
                    driver.release()
                    with self._lock:
                        self._safe_status[GRIP_STATE_INTERFACE] = grip_cmd
            except Exception as exc:
                _LOGGER.error("Error: %s", exc)
            self._stop.wait(COMMS_LOOP_PERIOD)