"""A driver that simulates the gripper without any hardware."""

from __future__ import annotations

import logging

from .driver import Driver, GripperStatus
from .registers import (
    ActuatorStatus,
    GripperActivationAction,
    GripperActivationStatus,
    GripperFaultStatus,
    GripperRegulateAction,
    ObjectDetectionStatus,
)

_LOGGER = logging.getLogger(__name__)


class FakeDriver(Driver):
    """In-memory gripper that follows every command immediately."""

    def __init__(self) -> None:
        super().__init__()
        self.connected = False
        self.activated = False
        self.regulate = False

    def connect(self) -> bool:
        self.connected = True
        _LOGGER.info("Gripper connected.")
        return True

    def disconnect(self) -> None:
        _LOGGER.info("Gripper disconnected.")
        self.connected = False

    def activate(self) -> None:
        _LOGGER.info("Gripper activated.")
        self.activated = True

    def deactivate(self) -> None:
        _LOGGER.info("Gripper deactivated.")
        self.activated = False

    def grip(self) -> None:
        self.regulate = True
        _LOGGER.info("Grip enable.")

    def release(self) -> None:
        self.regulate = False
        _LOGGER.info("Grip released.")

    def get_status(self) -> GripperStatus:
        return GripperStatus(
            gripper_activation_action=(
                GripperActivationAction.ACTIVATE
                if self.activated
                else GripperActivationAction.CLEAR_GRIPPER_FAULT_STATUS
            ),
            gripper_mode=self.mode,
            gripper_regulate_action=(
                GripperRegulateAction.FOLLOW_REQUESTED_VACUUM_PARAMETERS
                if self.regulate
                else GripperRegulateAction.STOP_VACUUM_GENERATOR
            ),
            gripper_activation_status=(
                GripperActivationStatus.GRIPPER_OPERATIONAL
                if self.activated
                else GripperActivationStatus.GRIPPER_NOT_ACTIVATED
            ),
            object_detection_status=(
                ObjectDetectionStatus.OBJECT_DETECTED_AT_MAX_PRESSURE
                if self.regulate
                else ObjectDetectionStatus.NO_OBJECT_DETECTED
            ),
            gripper_fault_status=GripperFaultStatus.NO_FAULT,
            actuator_status=(
                ActuatorStatus.GRIPPING if self.regulate else ActuatorStatus.PASSIVE_RELEASING
            ),
            max_vacuum_pressure=self.grip_max_vacuum_pressure,
            actual_vacuum_pressure=(
                self.grip_max_vacuum_pressure + self.grip_min_vacuum_pressure
            )
            / 2,
        )