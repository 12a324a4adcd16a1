from typing import Dict

from .base import BaseDevice, CommandSpec
from ..models.device import CommandType, DeviceKind

DEFAULT_TEMPERATURE = 70  # °F


class Thermostat(BaseDevice):
    """Thermostat holding an integer set point in °F"""
    kind = DeviceKind.THERMOSTAT

    def __init__(self, device_id: int):
        super().__init__(device_id)
        self.state = {"temperature": DEFAULT_TEMPERATURE}

    def command_table(self) -> Dict[str, CommandSpec]:
        return {
            CommandType.SET_TEMPERATURE.value: CommandSpec(self.set_temperature, (int,)),
        }

    def set_temperature(self, temperature: int) -> None:
        self.state["temperature"] = temperature

    def status_report(self) -> str:
        return f"Thermostat {self.device_id} at {self.state['temperature']}°F"
