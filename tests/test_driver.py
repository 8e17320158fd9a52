import pytest

from epick.crc import compute_crc
from epick.data_utils import to_hex
from epick.driver import DefaultDriver, DriverError
from epick.registers import (
    ActuatorStatus,
    FunctionCode,
    GripperActivationAction,
    GripperActivationStatus,
    GripperFaultStatus,
    GripperMode,
    GripperRegulateAction,
    ObjectDetectionStatus,
)
from epick.serial_port import SerialIOError

SLAVE = 0x09
PRESET = int(FunctionCode.PRESET_MULTIPLE_REGISTERS)

ACK = bytes([SLAVE, PRESET, 0x03, 0xE8, 0x00, 0x03, 0x01, 0x30])


class MockSerial:
    def __init__(self, responses=(), failures=0):
        self.responses = list(responses)
        self.failures = failures
        self.writes = []
        self.read_sizes = []
        self.opened = False

    def open(self):
        self.opened = True

    def is_open(self):
        return self.opened

    def close(self):
        self.opened = False

    def write(self, data):
        self.writes.append(bytes(data))
        if self.failures:
            self.failures -= 1
            raise SerialIOError("link down")

    def read(self, size):
        self.read_sizes.append(size)
        return self.responses.pop(0)


def make_driver(serial):
    driver = DefaultDriver(serial)
    driver.slave_address = SLAVE
    return driver


def test_activate():
    expected = bytes(
        [SLAVE, PRESET, 0x03, 0xE8, 0x00, 0x03, 0x06, 0x0B, 0x00, 0x00, 0x64, 0x05, 0x64, 0x31, 0x2F]
    )
    serial = MockSerial([ACK])
    driver = make_driver(serial)
    driver.mode = GripperMode.ADVANCED_MODE
    driver.grip_max_vacuum_pressure = -100.0
    driver.grip_min_vacuum_pressure = -10.0
    driver.grip_timeout_ms = 500
    driver.release_timeout_ms = 500

    driver.activate()

    assert to_hex(serial.writes[0]) == to_hex(expected)


def test_deactivate():
    expected = bytes(
        [SLAVE, PRESET, 0x03, 0xE8, 0x00, 0x03, 0x06, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x73, 0x30]
    )
    serial = MockSerial([ACK])
    driver = make_driver(serial)

    driver.deactivate()

    assert to_hex(serial.writes[0]) == to_hex(expected)


def test_grip():
    expected = bytes(
        [SLAVE, PRESET, 0x03, 0xE8, 0x00, 0x03, 0x06, 0x0B, 0x00, 0x00, 0x28, 0x46, 0x5A, 0x40, 0x18]
    )
    serial = MockSerial([ACK])
    driver = make_driver(serial)
    driver.mode = GripperMode.ADVANCED_MODE
    driver.grip_max_vacuum_pressure = -60.0
    driver.grip_min_vacuum_pressure = -10.0
    driver.grip_timeout_ms = 7000
    driver.release_timeout_ms = 2000

    driver.grip()

    assert to_hex(serial.writes[0]) == to_hex(expected)


def test_release():
    expected = bytes(
        [SLAVE, PRESET, 0x03, 0xE8, 0x00, 0x03, 0x06, 0x0B, 0x00, 0x00, 0xFF, 0x14, 0x5A, 0xCD, 0x40]
    )
    serial = MockSerial([ACK])
    driver = make_driver(serial)
    driver.mode = GripperMode.ADVANCED_MODE
    with pytest.raises(ValueError):
        driver.grip_max_vacuum_pressure = 155.0
    driver.grip_min_vacuum_pressure = -10.0
    driver.grip_timeout_ms = 7000
    driver.release_timeout_ms = 2000

    driver.release()

    assert to_hex(serial.writes[0]) == to_hex(expected)


def test_grip_in_automatic_mode_sends_zero_max_pressure():
    serial = MockSerial([ACK])
    driver = make_driver(serial)
    driver.mode = GripperMode.AUTOMATIC_MODE
    driver.grip()
    request = serial.writes[0]
    assert request[7] == 0x09
    assert request[10] == 0x00


def test_timeout_is_clamped():
    serial = MockSerial([ACK])
    driver = make_driver(serial)
    driver.grip_timeout_ms = 60000
    driver.grip()
    assert serial.writes[0][11] == 0xFF


def test_request_reads_expected_response_size():
    serial = MockSerial([ACK])
    driver = make_driver(serial)
    driver.activate()
    assert serial.read_sizes == [8]


def test_request_ends_with_crc():
    serial = MockSerial([ACK])
    driver = make_driver(serial)
    driver.grip()
    request = serial.writes[0]
    crc = compute_crc(request[:-2])
    assert request[-2:] == bytes([crc >> 8, crc & 0xFF])


def test_send_retries_after_io_errors():
    serial = MockSerial([ACK], failures=4)
    driver = make_driver(serial)
    driver.deactivate()
    assert len(serial.writes) == 5


def test_send_gives_up_after_max_retries():
    serial = MockSerial([ACK], failures=5)
    driver = make_driver(serial)
    with pytest.raises(DriverError, match="Failed to deactivate the gripper."):
        driver.deactivate()
    assert len(serial.writes) == 5


def test_get_status():
    response = bytes([SLAVE, 0x04, 0x06, 0b11111001, 0b01, 0x06, 0x28, 0x5A, 0x00, 0x00, 0x00])
    serial = MockSerial([response])
    driver = make_driver(serial)

    status = driver.get_status()

    request = serial.writes[0]
    assert request[:6] == bytes([SLAVE, 0x04, 0x07, 0xD0, 0x00, 0x03])
    assert serial.read_sizes == [11]
    assert status.gripper_activation_action is GripperActivationAction.ACTIVATE
    assert status.gripper_mode is GripperMode.AUTOMATIC_MODE
    assert status.gripper_regulate_action is GripperRegulateAction.FOLLOW_REQUESTED_VACUUM_PARAMETERS
    assert status.gripper_activation_status is GripperActivationStatus.GRIPPER_OPERATIONAL
    assert status.object_detection_status is ObjectDetectionStatus.NO_OBJECT_DETECTED
    assert status.actuator_status is ActuatorStatus.GRIPPING
    assert status.gripper_fault_status is GripperFaultStatus.GRIPPING_TIMEOUT
    assert status.max_vacuum_pressure == -60.0
    assert status.actual_vacuum_pressure == -10.0


def test_get_status_failure_raises():
    serial = MockSerial([], failures=5)
    driver = make_driver(serial)
    with pytest.raises(DriverError, match="Failed to read the status."):
        driver.get_status()


def test_unknown_mode_is_rejected():
    driver = make_driver(MockSerial())
    driver.mode = GripperMode.ADVANCED_MODE
    with pytest.raises(ValueError):
        driver.mode = GripperMode.UNKNOWN
    assert driver.mode is GripperMode.ADVANCED_MODE


def test_positive_min_pressure_is_rejected():
    driver = make_driver(MockSerial())
    driver.grip_min_vacuum_pressure = -20.0
    with pytest.raises(ValueError):
        driver.grip_min_vacuum_pressure = 5.0
    assert driver.grip_min_vacuum_pressure == -20.0


def test_connect_and_disconnect():
    serial = MockSerial()
    driver = make_driver(serial)
    assert driver.connect() is True
    assert serial.opened is True
    driver.disconnect()
    assert serial.opened is False


def test_context_manager_closes_port():
    serial = MockSerial()
    with make_driver(serial) as driver:
        assert driver.slave_address == SLAVE
        assert serial.opened is True
    assert serial.opened is False