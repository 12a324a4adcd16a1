from .base import BaseDevice, CommandSpec
from .light import Light
from .thermostat import Thermostat
from .door import DoorLock
from .factory import DeviceFactory

__all__ = ["BaseDevice", "CommandSpec", "Light", "Thermostat", "DoorLock", "DeviceFactory"]
