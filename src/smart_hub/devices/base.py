# Base class for all controllable devices
# Each device kind lives in its own module (light.py, thermostat.py, door.py)
# and publishes the commands it accepts through command_table()

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, NamedTuple, Tuple

from ..models.device import DeviceKind


class CommandSpec(NamedTuple):
    """A named command's handler and the argument types it expects"""
    handler: Callable[..., None]
    arg_types: Tuple[type, ...] = ()


class BaseDevice(ABC):
    """Base class for all device implementations"""
    kind: DeviceKind

    def __init__(self, device_id: int):
        self._device_id = device_id
        self.state: Dict[str, Any] = {}

    @property
    def device_id(self) -> int:
        return self._device_id

    @abstractmethod
    def command_table(self) -> Dict[str, CommandSpec]:
        """Map each command name valid for this kind to its handler"""
        pass

    @abstractmethod
    def status_report(self) -> str:
        """Human readable one-line status"""
        pass

    def get_state(self) -> Dict[str, Any]:
        return {"id": self.device_id, "type": self.kind.value, **self.state}
