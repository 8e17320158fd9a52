"""Driver for a Modbus RTU vacuum gripper: frames, serial transport, fake driver and hardware interface."""

__version__ = "0.1.0"

__all__ = [
    "crc",
    "data_utils",
    "hardware_info",
    "registers",
    "serial_port",
    "driver",
    "fake_driver",
    "serial_factory",
    "driver_factory",
    "hardware_interface",
]