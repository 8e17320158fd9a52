"""Description of hardware components and lookups of their interfaces."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class InterfaceInfo:
    """A single command or state interface of a component."""

    name: str
    min: str = ""
    max: str = ""
    initial_value: str = ""
    data_type: str = "double"
    size: int = 1


@dataclass
class ComponentInfo:
    """A joint, sensor or GPIO with its interfaces."""

    name: str
    type: str = ""
    command_interfaces: list[InterfaceInfo] = field(default_factory=list)
    state_interfaces: list[InterfaceInfo] = field(default_factory=list)
    parameters: dict[str, str] = field(default_factory=dict)


@dataclass
class HardwareInfo:
    """Configuration of a hardware system."""

    name: str = ""
    type: str = "system"
    hardware_class_type: str = ""
    hardware_parameters: dict[str, str] = field(default_factory=dict)
    joints: list[ComponentInfo] = field(default_factory=list)
    sensors: list[ComponentInfo] = field(default_factory=list)
    gpios: list[ComponentInfo] = field(default_factory=list)


def _find_interface(
    components: list[ComponentInfo], component_name: str, interface_name: str, kind: str
) -> Optional[InterfaceInfo]:
    component = next((c for c in components if c.name == component_name), None)
    if component is None:
        return None
    interfaces = getattr(component, kind)
    return next((i for i in interfaces if i.name == interface_name), None)


def get_gpios_command_interface(
    gpio_name: str, interface_name: str, info: HardwareInfo
) -> Optional[InterfaceInfo]:
    """Return the named command interface of the named GPIO, if any."""
    return _find_interface(info.gpios, gpio_name, interface_name, "command_interfaces")


def get_gpios_state_interface(
    gpio_name: str, interface_name: str, info: HardwareInfo
) -> Optional[InterfaceInfo]:
    """Return the named state interface of the named GPIO, if any."""
    return _find_interface(info.gpios, gpio_name, interface_name, "state_interfaces")


def get_joints_command_interface(
    joint_name: str, interface_name: str, info: HardwareInfo
) -> Optional[InterfaceInfo]:
    """Return the named command interface of the named joint, if any."""
    return _find_interface(info.joints, joint_name, interface_name, "command_interfaces")


def get_joints_state_interface(
    joint_name: str, interface_name: str, info: HardwareInfo
) -> Optional[InterfaceInfo]:
    """Return the named state interface of the named joint, if any."""
    return _find_interface(info.joints, joint_name, interface_name, "state_interfaces")


def is_true(value: float) -> bool:
    """Interpret a double-valued flag as true when it is at least 0.5."""
    return value >= 0.5


def is_false(value: float) -> bool:
    """Interpret a double-valued flag as false when it is below 0.5."""
    return value < 0.5