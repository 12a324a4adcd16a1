from typing import Dict, Type
from .base import BaseDevice
from .light import Light
from .thermostat import Thermostat
from .door import DoorLock
from ..utils.exceptions import UnknownDeviceKind

class DeviceFactory:
    """Factory for creating device instances"""
    _device_types: Dict[str, Type[BaseDevice]] = {
        "light": Light,
        "thermostat": Thermostat,
        "door": DoorLock
    }

    @classmethod
    def register_device_type(cls, device_type: str, device_class: Type[BaseDevice]) -> None:
        """Register a new device type"""
        cls._device_types[device_type.lower()] = device_class

    @classmethod
    def create(cls, device_id: int, device_type: str) -> BaseDevice:
        """Create a device instance based on type (matched case-insensitively)"""
        if isinstance(device_id, bool) or not isinstance(device_id, int) or device_id <= 0:
            raise ValueError(f"Device id must be a positive integer, got {device_id!r}")

        key = device_type.lower() if isinstance(device_type, str) else None
        if key not in cls._device_types:
            raise UnknownDeviceKind(f"Unknown device type: {device_type}")

        device_class = cls._device_types[key]
        return device_class(device_id)
