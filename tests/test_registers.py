import pytest

from epick.registers import (
    ActuatorStatus,
    GripperActivationAction,
    GripperActivationStatus,
    GripperFaultStatus,
    GripperMode,
    GripperRegulateAction,
    GripperReleaseAction,
    ObjectDetectionStatus,
    actuator_status_to_string,
    double_to_regulate_action,
    fault_status_to_string,
    get_actuator_status,
    get_gripper_activation_action,
    get_gripper_activation_status,
    get_gripper_fault_status,
    get_gripper_mode,
    get_gripper_regulate_action,
    get_object_detection_status,
    gripper_activation_action_to_string,
    gripper_activation_status_to_string,
    gripper_mode_to_string,
    gripper_regulate_action_to_string,
    gripper_release_action_to_string,
    object_detection_to_double,
    object_detection_to_string,
    regulate_action_to_double,
    set_bits,
    set_gripper_activation_action,
    set_gripper_automatic_release_action,
    set_gripper_mode,
    set_gripper_regulate_action,
)


def test_set_bits_only_touches_masked_bits():
    assert set_bits(0b11110000, 0b00001111, 0b11111111) == 0b11111111
    assert set_bits(0b11111111, 0b00000110, 0b00000000) == 0b11111001


def test_action_register_for_activation_in_advanced_mode():
    reg = set_gripper_activation_action(0, GripperActivationAction.ACTIVATE)
    reg = set_gripper_mode(reg, GripperMode.ADVANCED_MODE)
    reg = set_gripper_regulate_action(reg, GripperRegulateAction.FOLLOW_REQUESTED_VACUUM_PARAMETERS)
    assert reg == 0x0B


@pytest.mark.parametrize("action", list(GripperActivationAction))
def test_activation_action_round_trip(action):
    assert get_gripper_activation_action(set_gripper_activation_action(0xFF, action)) is action


@pytest.mark.parametrize("mode", [GripperMode.AUTOMATIC_MODE, GripperMode.ADVANCED_MODE])
def test_mode_round_trip(mode):
    assert get_gripper_mode(set_gripper_mode(0xFF, mode)) is mode


def test_unknown_mode_leaves_register_unchanged():
    assert set_gripper_mode(0b00000100, GripperMode.UNKNOWN) == 0b00000100
    assert get_gripper_mode(0b00000100) is GripperMode.UNKNOWN
    assert get_gripper_mode(0b00000110) is GripperMode.UNKNOWN


@pytest.mark.parametrize("action", list(GripperRegulateAction))
def test_regulate_round_trip(action):
    assert get_gripper_regulate_action(set_gripper_regulate_action(0, action)) is action


def test_regulate_double_conversion():
    assert double_to_regulate_action(0.5) is GripperRegulateAction.FOLLOW_REQUESTED_VACUUM_PARAMETERS
    assert double_to_regulate_action(0.49) is GripperRegulateAction.STOP_VACUUM_GENERATOR
    for action in GripperRegulateAction:
        assert double_to_regulate_action(regulate_action_to_double(action)) is action


def test_automatic_release_bit():
    reg = set_gripper_automatic_release_action(0, GripperReleaseAction.RELEASE_WITHOUT_TIMEOUT)
    assert reg == 0b00010000
    assert set_gripper_automatic_release_action(0xFF, GripperReleaseAction.NORMAL_RELEASE) == 0b11101111


def test_activation_status_decoding():
    assert get_gripper_activation_status(0b00110000) is GripperActivationStatus.GRIPPER_OPERATIONAL
    assert get_gripper_activation_status(0b00000000) is GripperActivationStatus.GRIPPER_NOT_ACTIVATED
    assert get_gripper_activation_status(0b00010000) is GripperActivationStatus.UNKNOWN
    assert get_gripper_activation_status(0b00100000) is GripperActivationStatus.UNKNOWN


def test_object_detection_decoding_and_doubles():
    assert get_object_detection_status(0b01000000) is ObjectDetectionStatus.OBJECT_DETECTED_AT_MIN_PRESSURE
    assert get_object_detection_status(0b10000000) is ObjectDetectionStatus.OBJECT_DETECTED_AT_MAX_PRESSURE
    assert get_object_detection_status(0b11000000) is ObjectDetectionStatus.NO_OBJECT_DETECTED
    assert object_detection_to_double(ObjectDetectionStatus.UNKNOWN) == 0.0
    assert object_detection_to_double(ObjectDetectionStatus.OBJECT_DETECTED_AT_MAX_PRESSURE) == 2.0
    assert object_detection_to_double(ObjectDetectionStatus.NO_OBJECT_DETECTED) == 3.0


def test_fault_status_decoding():
    assert get_gripper_fault_status(0x00) is GripperFaultStatus.NO_FAULT
    assert get_gripper_fault_status(0x03) is GripperFaultStatus.POROUS_MATERIAL_DETECTED
    assert get_gripper_fault_status(0xF6) is GripperFaultStatus.GRIPPING_TIMEOUT
    assert get_gripper_fault_status(0x0F) is GripperFaultStatus.AUTOMATIC_RELEASE_COMPLETED
    assert get_gripper_fault_status(0x0D) is GripperFaultStatus.UNKNOWN


def test_actuator_status_decoding():
    assert [get_actuator_status(v) for v in range(4)] == [
        ActuatorStatus.STANDBY,
        ActuatorStatus.GRIPPING,
        ActuatorStatus.PASSIVE_RELEASING,
        ActuatorStatus.ACTIVE_RELEASING,
    ]


def test_every_register_byte_decodes():
    for reg in range(256):
        assert get_gripper_activation_action(reg) in GripperActivationAction
        assert get_gripper_mode(reg) in GripperMode
        assert get_gripper_fault_status(reg) in GripperFaultStatus
        assert get_object_detection_status(reg) in ObjectDetectionStatus


def test_to_string_functions():
    assert gripper_mode_to_string(GripperMode.ADVANCED_MODE) == "AdvancedMode"
    assert gripper_mode_to_string(GripperMode.AUTOMATIC_MODE) == "AutomaticMode"
    assert gripper_activation_action_to_string(GripperActivationAction.ACTIVATE) == "Activate"
    assert (
        gripper_regulate_action_to_string(GripperRegulateAction.STOP_VACUUM_GENERATOR)
        == "StopVacuumGenerator"
    )
    assert gripper_release_action_to_string(GripperReleaseAction.NORMAL_RELEASE) == "NormalRelease"
    assert (
        gripper_activation_status_to_string(GripperActivationStatus.GRIPPER_OPERATIONAL)
        == "GripperOperational"
    )
    assert object_detection_to_string(ObjectDetectionStatus.NO_OBJECT_DETECTED) == "NoObjectDetected"
    assert fault_status_to_string(GripperFaultStatus.INTERNAL_FAULT) == "InternalFault"
    assert actuator_status_to_string(ActuatorStatus.PASSIVE_RELEASING) == "PassiveReleasing"