from epick.fake_driver import FakeDriver
from epick.registers import (
    ActuatorStatus,
    GripperActivationAction,
    GripperActivationStatus,
    GripperFaultStatus,
    GripperMode,
    GripperRegulateAction,
    ObjectDetectionStatus,
)


def test_connect_and_disconnect():
    driver = FakeDriver()
    assert driver.connect() is True
    assert driver.connected is True
    driver.disconnect()
    assert driver.connected is False


def test_activation_is_reported():
    driver = FakeDriver()
    assert driver.get_status().gripper_activation_status is GripperActivationStatus.GRIPPER_NOT_ACTIVATED
    driver.activate()
    status = driver.get_status()
    assert status.gripper_activation_action is GripperActivationAction.ACTIVATE
    assert status.gripper_activation_status is GripperActivationStatus.GRIPPER_OPERATIONAL
    driver.deactivate()
    status = driver.get_status()
    assert status.gripper_activation_action is GripperActivationAction.CLEAR_GRIPPER_FAULT_STATUS


def test_grip_and_release():
    driver = FakeDriver()
    driver.activate()
    driver.grip()
    status = driver.get_status()
    assert status.gripper_regulate_action is GripperRegulateAction.FOLLOW_REQUESTED_VACUUM_PARAMETERS
    assert status.object_detection_status is ObjectDetectionStatus.OBJECT_DETECTED_AT_MAX_PRESSURE
    assert status.actuator_status is ActuatorStatus.GRIPPING

    driver.release()
    status = driver.get_status()
    assert status.gripper_regulate_action is GripperRegulateAction.STOP_VACUUM_GENERATOR
    assert status.object_detection_status is ObjectDetectionStatus.NO_OBJECT_DETECTED
    assert status.actuator_status is ActuatorStatus.PASSIVE_RELEASING


def test_never_reports_a_fault():
    driver = FakeDriver()
    driver.grip()
    assert driver.get_status().gripper_fault_status is GripperFaultStatus.NO_FAULT
    driver.release()
    assert driver.get_status().gripper_fault_status is GripperFaultStatus.NO_FAULT


def test_status_follows_configuration():
    driver = FakeDriver()
    driver.mode = GripperMode.ADVANCED_MODE
    driver.grip_max_vacuum_pressure = -60.0
    driver.grip_min_vacuum_pressure = -10.0
    status = driver.get_status()
    assert status.gripper_mode is GripperMode.ADVANCED_MODE
    assert status.max_vacuum_pressure == -60.0
    assert -60.0 <= status.actual_vacuum_pressure <= -10.0


def test_accepts_any_pressure():
    driver = FakeDriver()
    driver.grip_max_vacuum_pressure = 155.0
    assert driver.get_status().max_vacuum_pressure == 155.0


def test_context_manager_connects():
    driver = FakeDriver()
    with driver as connected:
        assert connected.connected is True
    assert driver.connected is False