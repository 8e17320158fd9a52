"""Bit fields of the gripper's action and status registers."""

from __future__ import annotations

from enum import Enum, IntEnum


class FunctionCode(IntEnum):
    """Modbus function codes used to talk to the gripper."""

    READ_INPUT_REGISTERS = 0x04
    PRESET_MULTIPLE_REGISTERS = 0x10


class GripperActivationAction(Enum):
    CLEAR_GRIPPER_FAULT_STATUS = "ClearGripperFaultStatus"
    ACTIVATE = "Activate"


class GripperMode(Enum):
    AUTOMATIC_MODE = "AutomaticMode"
    ADVANCED_MODE = "AdvancedMode"
    UNKNOWN = "Unknown"


class GripperRegulateAction(Enum):
    STOP_VACUUM_GENERATOR = "StopVacuumGenerator"
    FOLLOW_REQUESTED_VACUUM_PARAMETERS = "FollowRequestedVacuumParameters"


class GripperReleaseAction(Enum):
    NORMAL_RELEASE = "NormalRelease"
    RELEASE_WITHOUT_TIMEOUT = "ReleaseWithoutTimeout"


class GripperActivationStatus(Enum):
    GRIPPER_NOT_ACTIVATED = "GripperNotActivated"
    GRIPPER_OPERATIONAL = "GripperOperational"
    UNKNOWN = "Unknown"


class ObjectDetectionStatus(Enum):
    UNKNOWN = "Unknown"
    OBJECT_DETECTED_AT_MIN_PRESSURE = "ObjectDetectedAtMinPressure"
    OBJECT_DETECTED_AT_MAX_PRESSURE = "ObjectDetectedAtMaxPressure"
    NO_OBJECT_DETECTED = "NoObjectDetected"


class GripperFaultStatus(Enum):
    NO_FAULT = "NoFault"
    ACTION_DELAYED = "ActionDelayed"
    POROUS_MATERIAL_DETECTED = "PorousMaterialDetected"
    GRIPPING_TIMEOUT = "GrippingTimeout"
    ACTIVATION_BIT_NOT_SET = "ActivationBitNotSet"
    MAXIMUM_TEMPERATURE_EXCEEDED = "MaximumTemperatureExceeded"
    NO_COMMUNICATION_FOR_AT_LEAST_ONE_SECOND = "NoCommunicationForAtLeastOneSecond"
    UNDER_MINIMUM_OPERATING_VOLTAGE = "UnderMinimumOperatingVoltage"
    AUTOMATIC_RELEASE_IN_PROGRESS = "AutomaticReleaseInProgress"
    INTERNAL_FAULT = "InternalFault"
    AUTOMATIC_RELEASE_COMPLETED = "AutomaticReleaseCompleted"
    UNKNOWN = "Unknown"


class ActuatorStatus(Enum):
    STANDBY = "Standby"
    GRIPPING = "Gripping"
    PASSIVE_RELEASING = "PassiveReleasing"
    ACTIVE_RELEASING = "ActiveReleasing"


def set_bits(reg: int, bitmask: int, bits: int) -> int:
    """Return ``reg`` with the bits selected by ``bitmask`` replaced by ``bits``."""
    return ((reg & ~bitmask) | (bits & bitmask)) & 0xFF


# Gripper activation request.

_GACT_MASK = 0b00000001

_ACTIVATION_ACTION_BITS = {
    GripperActivationAction.CLEAR_GRIPPER_FAULT_STATUS: 0b00000000,
    GripperActivationAction.ACTIVATE: 0b00000001,
}
_ACTIVATION_ACTION_FROM_BITS = {bits: action for action, bits in _ACTIVATION_ACTION_BITS.items()}


def set_gripper_activation_action(reg: int, action: GripperActivationAction) -> int:
    """Return ``reg`` with the activation bit set for ``action``."""
    bits = _ACTIVATION_ACTION_BITS.get(action)
    return reg if bits is None else set_bits(reg, _GACT_MASK, bits)


def get_gripper_activation_action(reg: int) -> GripperActivationAction:
    """Decode the activation request bit of ``reg``."""
    return _ACTIVATION_ACTION_FROM_BITS[reg & _GACT_MASK]


def gripper_activation_action_to_string(action: GripperActivationAction) -> str:
    return action.value


# Gripper mode.

_GMOD_MASK = 0b00000110

_MODE_BITS = {
    GripperMode.AUTOMATIC_MODE: 0b00000000,
    GripperMode.ADVANCED_MODE: 0b00000010,
}
_MODE_FROM_BITS = {
    0b00000000: GripperMode.AUTOMATIC_MODE,
    0b00000010: GripperMode.ADVANCED_MODE,
    0b00000100: GripperMode.UNKNOWN,
    0b00000110: GripperMode.UNKNOWN,
}


def set_gripper_mode(reg: int, mode: GripperMode) -> int:
    """Return ``reg`` with the mode bits set; an unknown mode leaves it unchanged."""
    bits = _MODE_BITS.get(mode)
    return reg if bits is None else set_bits(reg, _GMOD_MASK, bits)


def get_gripper_mode(reg: int) -> GripperMode:
    """Decode the mode bits of ``reg``."""
    return _MODE_FROM_BITS[reg & _GMOD_MASK]


def gripper_mode_to_string(mode: GripperMode) -> str:
    return mode.value


# Regulate.

_GGTO_MASK = 0b00001000

_REGULATE_BITS = {
    GripperRegulateAction.STOP_VACUUM_GENERATOR: 0b00000000,
    GripperRegulateAction.FOLLOW_REQUESTED_VACUUM_PARAMETERS: 0b00001000,
}
_REGULATE_FROM_BITS = {bits: action for action, bits in _REGULATE_BITS.items()}


def set_gripper_regulate_action(reg: int, action: GripperRegulateAction) -> int:
    """Return ``reg`` with the regulate bit set for ``action``."""
    bits = _REGULATE_BITS.get(action)
    return reg if bits is None else set_bits(reg, _GGTO_MASK, bits)


def get_gripper_regulate_action(reg: int) -> GripperRegulateAction:
    """Decode the regulate bit of ``reg``."""
    return _REGULATE_FROM_BITS[reg & _GGTO_MASK]


def gripper_regulate_action_to_string(action: GripperRegulateAction) -> str:
    return action.value


def double_to_regulate_action(value: float) -> GripperRegulateAction:
    """Map a double-valued flag to a regulate action (true at 0.5 and above)."""
    if value >= 0.5:
        return GripperRegulateAction.FOLLOW_REQUESTED_VACUUM_PARAMETERS
    return GripperRegulateAction.STOP_VACUUM_GENERATOR


def regulate_action_to_double(action: GripperRegulateAction) -> float:
    """Map a regulate action to 1.0 or 0.0."""
    if action is GripperRegulateAction.FOLLOW_REQUESTED_VACUUM_PARAMETERS:
        return 1.0
    return 0.0


# Automatic release action.

_GATR_MASK = 0b00010000

_RELEASE_BITS = {
    GripperReleaseAction.NORMAL_RELEASE: 0b00000000,
    GripperReleaseAction.RELEASE_WITHOUT_TIMEOUT: 0b00010000,
}


def set_gripper_automatic_release_action(reg: int, action: GripperReleaseAction) -> int:
    """Return ``reg`` with the automatic release bit set for ``action``."""
    bits = _RELEASE_BITS.get(action)
    return reg if bits is None else set_bits(reg, _GATR_MASK, bits)


def gripper_release_action_to_string(action: GripperReleaseAction) -> str:
    return action.value


# Activation status.

_GSTA_MASK = 0b00110000

_ACTIVATION_STATUS_FROM_BITS = {
    0b00000000: GripperActivationStatus.GRIPPER_NOT_ACTIVATED,
    0b00010000: GripperActivationStatus.UNKNOWN,
    0b00100000: GripperActivationStatus.UNKNOWN,
    0b00110000: GripperActivationStatus.GRIPPER_OPERATIONAL,
}


def get_gripper_activation_status(reg: int) -> GripperActivationStatus:
    """Decode the activation status bits of ``reg``."""
    return _ACTIVATION_STATUS_FROM_BITS[reg & _GSTA_MASK]


def gripper_activation_status_to_string(status: GripperActivationStatus) -> str:
    return status.value


# Object detection status.

_GOBJ_MASK = 0b11000000

_OBJECT_DETECTION_FROM_BITS = {
    0b00000000: ObjectDetectionStatus.UNKNOWN,
    0b01000000: ObjectDetectionStatus.OBJECT_DETECTED_AT_MIN_PRESSURE,
    0b10000000: ObjectDetectionStatus.OBJECT_DETECTED_AT_MAX_PRESSURE,
    0b11000000: ObjectDetectionStatus.NO_OBJECT_DETECTED,
}

_OBJECT_DETECTION_TO_DOUBLE = {
    ObjectDetectionStatus.UNKNOWN: 0.0,
    ObjectDetectionStatus.OBJECT_DETECTED_AT_MIN_PRESSURE: 1.0,
    ObjectDetectionStatus.OBJECT_DETECTED_AT_MAX_PRESSURE: 2.0,
    ObjectDetectionStatus.NO_OBJECT_DETECTED: 3.0,
}


def get_object_detection_status(reg: int) -> ObjectDetectionStatus:
    """Decode the object detection bits of ``reg``."""
    return _OBJECT_DETECTION_FROM_BITS[reg & _GOBJ_MASK]


def object_detection_to_string(status: ObjectDetectionStatus) -> str:
    return status.value


def object_detection_to_double(status: ObjectDetectionStatus) -> float:
    """Encode an object detection status as 0.0 to 3.0."""
    return _OBJECT_DETECTION_TO_DOUBLE[status]


# Gripper fault status.

_GFLT_MASK = 0b00001111

_FAULT_FROM_BITS = {
    0x0: GripperFaultStatus.NO_FAULT,
    0x1: GripperFaultStatus.UNKNOWN,
    0x2: GripperFaultStatus.UNKNOWN,
    0x3: GripperFaultStatus.POROUS_MATERIAL_DETECTED,
    0x4: GripperFaultStatus.UNKNOWN,
    0x5: GripperFaultStatus.ACTION_DELAYED,
    0x6: GripperFaultStatus.GRIPPING_TIMEOUT,
    0x7: GripperFaultStatus.ACTIVATION_BIT_NOT_SET,
    0x8: GripperFaultStatus.MAXIMUM_TEMPERATURE_EXCEEDED,
    0x9: GripperFaultStatus.NO_COMMUNICATION_FOR_AT_LEAST_ONE_SECOND,
    0xA: GripperFaultStatus.UNDER_MINIMUM_OPERATING_VOLTAGE,
    0xB: GripperFaultStatus.AUTOMATIC_RELEASE_IN_PROGRESS,
    0xC: GripperFaultStatus.INTERNAL_FAULT,
    0xD: GripperFaultStatus.UNKNOWN,
    0xE: GripperFaultStatus.UNKNOWN,
    0xF: GripperFaultStatus.AUTOMATIC_RELEASE_COMPLETED,
}


def get_gripper_fault_status(reg: int) -> GripperFaultStatus:
    """Decode the fault bits of ``reg``."""
    return _FAULT_FROM_BITS[reg & _GFLT_MASK]


def fault_status_to_string(status: GripperFaultStatus) -> str:
    return status.value


# Actuator status.

_GVAS_MASK = 0b00000011

_ACTUATOR_FROM_BITS = {
    0b00: ActuatorStatus.STANDBY,
    0b01: ActuatorStatus.GRIPPING,
    0b10: ActuatorStatus.PASSIVE_RELEASING,
    0b11: ActuatorStatus.ACTIVE_RELEASING,
}


def get_actuator_status(reg: int) -> ActuatorStatus:
    """Decode the actuator status bits of ``reg``."""
    return _ACTUATOR_FROM_BITS[reg & _GVAS_MASK]


def actuator_status_to_string(status: ActuatorStatus) -> str:
    return status.value