from typing import Dict

from .base import BaseDevice, CommandSpec
from ..models.device import CommandType, DeviceKind


class DoorLock(BaseDevice):
    kind = DeviceKind.DOOR

    def __init__(self, device_id: int):
        super().__init__(device_id)
        self.state = {"lock": "locked"}

    def command_table(self) -> Dict[str, CommandSpec]:
        return {
            CommandType.LOCK_DOOR.value: CommandSpec(self.lock_door),
            CommandType.UNLOCK_DOOR.value: CommandSpec(self.unlock_door),
        }

    def lock_door(self) -> None:
        self.state["lock"] = "locked"

    def unlock_door(self) -> None:
        self.state["lock"] = "unlocked"

    def status_report(self) -> str:
        return f"Door {self.device_id} is {self.state['lock']}"
