from typing import Dict

from .base import BaseDevice, CommandSpec
from ..models.device import CommandType, DeviceKind


class Light(BaseDevice):
    """On/off light, starts switched off"""
    kind = DeviceKind.LIGHT

    def __init__(self, device_id: int):
        super().__init__(device_id)
        self.state = {"power": "off"}

    def command_table(self) -> Dict[str, CommandSpec]:
        return {
            CommandType.TURN_ON.value: CommandSpec(self.turn_on),
            CommandType.TURN_OFF.value: CommandSpec(self.turn_off),
        }

    def turn_on(self) -> None:
        self.state["power"] = "on"

    def turn_off(self) -> None:
        self.state["power"] = "off"

    def status_report(self) -> str:
        return f"Light {self.device_id} is {self.state['power']}"
