# Access-gated command dispatch for a single device
from typing import Any, Tuple, Union

from ..devices.base import BaseDevice
from ..models.device import AccessToken, DeviceKind
from ..utils.exceptions import DeviceError, InvalidCommand, Unauthorized

# Kinds a public token may control
PUBLIC_KINDS = frozenset({DeviceKind.LIGHT})


def coerce_argument(value: Any, expected: type) -> Any:
    """Coerce a command argument to the type its handler expects"""
    if expected is int:
        if isinstance(value, bool):
            raise TypeError("booleans are not accepted as integers")
        if isinstance(value, float):
            if not value.is_integer():
                raise ValueError(f"{value} is not a whole number")
            return int(value)
        if isinstance(value, (int, str)):
            return int(value)
        raise TypeError(f"cannot use {type(value).__name__} as int")
    if not isinstance(value, expected):
        raise TypeError(f"expected {expected.__name__}, got {type(value).__name__}")
    return value


class DeviceProxy:
    """
    Wraps one device with an access token.

    Callers only see command names and status reports; the concrete device
    class stays behind the proxy. Commands are resolved against the device's
    command table, built once when the proxy is created.
    """
    def __init__(self, device: BaseDevice, token: Union[AccessToken, str]):
        self._device = device
        self.token = AccessToken(token)
        self._commands = device.command_table()

    @property
    def device_id(self) -> int:
        return self._device.device_id

    @property
    def kind(self) -> DeviceKind:
        return self._device.kind

    def is_authorized(self) -> bool:
        return self.token == AccessToken.ADMIN or self.kind in PUBLIC_KINDS

    def call(self, command: str, *args: Any) -> Tuple[Any, ...]:
        """
        Authorize and run a named command on the wrapped device.

        Returns the arguments as they were handed to the device, after coercion.

        Raises:
            Unauthorized: the token may not control this kind of device
            InvalidCommand: unknown command for the kind, or bad arguments
            DeviceError: the device handler itself failed
        """
        if not self.is_authorized():
            raise Unauthorized(
                f"Token '{self.token.value}' may not control {self.kind.value} {self.device_id}"
            )

        name = getattr(command, "value", command)
        command_spec = self._commands.get(name) if isinstance(name, str) else None
        if command_spec is None:
            raise InvalidCommand(f"Command {command!r} is not valid for {self.kind.value} {self.device_id}")

        if len(args) != len(command_spec.arg_types):
            raise InvalidCommand(
                f"Command {command!r} takes {len(command_spec.arg_types)} argument(s), got {len(args)}"
            )
        try:
            coerced = tuple(coerce_argument(value, expected)
                            for value, expected in zip(args, command_spec.arg_types))
        except (TypeError, ValueError) as e:
            raise InvalidCommand(f"Bad argument for {command!r}: {e}") from e

        try:
            command_spec.handler(*coerced)
        except Exception as e:
            raise DeviceError(f"{self.kind.value} {self.device_id} failed to run {command!r}: {e}") from e
        return coerced

    def status_report(self) -> str:
        return self._device.status_report()

    def get_state(self):
        return self._device.get_state()
