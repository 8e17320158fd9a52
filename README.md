# epick

A Python driver for a vacuum gripper that speaks Modbus RTU over a serial
line. It builds the gripper's register frames with their CRC, sends them
with retries, decodes the status registers, and offers a small hardware
interface that talks to the gripper from a background thread.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `epick.crc`: `compute_crc(data)`, the Modbus CRC-16 of a byte sequence.
  The low-order CRC byte is returned in the high half, so `get_msb` and
  `get_lsb` give the two checksum bytes in the order they go on the wire.
- `epick.data_utils`: `to_hex` (bytes as `"09 10 03"`), `to_hex_words`
  (16-bit words as four hex digits), `to_binary_string`, `get_msb`,
  `get_lsb` and `to_lower` (ASCII lower-casing).
- `epick.hardware_info`: the `InterfaceInfo`, `ComponentInfo` and
  `HardwareInfo` dataclasses describing a hardware system, lookups
  `get_gpios_command_interface`, `get_gpios_state_interface`,
  `get_joints_command_interface`, `get_joints_state_interface`, and the
  flag helpers `is_true` (value >= 0.5) and `is_false` (value < 0.5).
- `epick.registers`: `FunctionCode` and enums for the register fields
  (`GripperActivationAction`, `GripperMode`, `GripperRegulateAction`,
  `GripperReleaseAction`, `GripperActivationStatus`,
  `ObjectDetectionStatus`, `GripperFaultStatus`, `ActuatorStatus`), with
  functions that set bits in a register value (`set_bits`,
  `set_gripper_mode`, ...) and decode them (`get_gripper_mode`,
  `get_gripper_fault_status`, ...). The setters return the new register
  value.
- `epick.serial_port`: `SerialPort`, a pyserial wrapper with `port`,
  `baudrate` and `timeout_ms` properties that raises `SerialIOError` when
  the port fails or a read or write is short. It can be used as a context
  manager.
- `epick.driver`: the abstract `Driver`, the serial `DefaultDriver`, the
  frozen `GripperStatus` dataclass and `DriverError`. A driver is
  configured through its attributes `slave_address`, `mode`,
  `grip_max_vacuum_pressure`, `grip_min_vacuum_pressure` (kPa relative to
  the atmosphere), `grip_timeout_ms` and `release_timeout_ms`.
  `DefaultDriver` raises `ValueError` for `GripperMode.UNKNOWN` or a
  positive vacuum pressure, and `DriverError` when a command still fails
  after five attempts. A driver used as a context manager connects on
  entry and disconnects on exit.
- `epick.fake_driver`: `FakeDriver`, an in-memory gripper that follows
  every command at once.
- `epick.serial_factory`: `SerialFactory.create(info)` builds a configured
  `SerialPort` from a `HardwareInfo`'s parameters.
- `epick.driver_factory`: `DriverFactory.create(info)` builds a configured
  driver; `create_driver(info)` picks `FakeDriver` or `DefaultDriver`.
- `epick.hardware_interface`: `GripperHardwareInterface`, which polls the
  driver in a background thread and exposes the `gripper/grip_cmd`
  command and the `gripper/grip_cmd`, `gripper/object_detection_status`
  and optional `gripper/position` states. Failed lifecycle steps raise
  `HardwareInterfaceError`.

## Example

```python
from epick.driver import DefaultDriver
from epick.registers import GripperMode
from epick.serial_port import SerialPort

port = SerialPort()
port.port = "/dev/ttyUSB0"
port.baudrate = 115200
port.timeout_ms = 500

driver = DefaultDriver(port)
driver.slave_address = 0x09
driver.mode = GripperMode.ADVANCED_MODE
driver.grip_max_vacuum_pressure = -60.0
driver.grip_timeout_ms = 7000

with driver:
    driver.activate()
    driver.grip()
    print(driver.get_status())
    driver.release()
    driver.deactivate()
```

Without hardware, ask for the fake driver through the hardware interface:

```python
import time

from epick.driver_factory import DriverFactory
from epick.hardware_info import ComponentInfo, HardwareInfo, InterfaceInfo
from epick.hardware_interface import GripperHardwareInterface

info = HardwareInfo(
    name="gripper_system",
    hardware_parameters={"use_dummy": "true"},
    gpios=[
        ComponentInfo(
            name="gripper",
            command_interfaces=[InterfaceInfo("grip_cmd")],
            state_interfaces=[
                InterfaceInfo("grip_cmd"),
                InterfaceInfo("object_detection_status"),
            ],
        )
    ],
)

hw = GripperHardwareInterface(DriverFactory())
hw.on_init(info)
hw.on_configure()
hw.export_state_interfaces()
hw.export_command_interfaces()
hw.on_activate()

hw.set_command("gripper/grip_cmd", 1.0)
hw.write()
time.sleep(0.1)  # give the background thread time to act
hw.read()
print(hw.get_state("gripper/grip_cmd"))  # 1.0 once the grip went through

hw.on_deactivate()
```

## Hardware parameters

Read from `HardwareInfo.hardware_parameters`, all as strings.

| Name                       | Default         | Notes                                              |
|----------------------------|-----------------|----------------------------------------------------|
| `slave_address`            | `0x9`           | parsed as hexadecimal                              |
| `mode`                     | `AutomaticMode` | `AdvancedMode` selects advanced mode, anything else automatic |
| `grip_max_vacuum_pressure` | `-100` kPa      |                                                    |
| `grip_min_vacuum_pressure` | `-10` kPa       |                                                    |
| `grip_timeout`             | `0.5` s         |                                                    |
| `release_timeout`          | `0.5` s         |                                                    |
| `use_dummy`                | `False`         | any value other than `false` (any case) uses `FakeDriver` |
| `usb_port`                 | `/dev/ttyUSB0`  |                                                    |
| `baudrate`                 | `115200`        |                                                    |
| `timeout`                  | `0.5` s         | serial read and write timeout                      |

## What it does not do

This is a library only: it installs no command-line program, and it does
not publish the gripper's state or accept grip requests over any network
or messaging service. Callers drive `GripperHardwareInterface` or a
`Driver` directly from their own code.