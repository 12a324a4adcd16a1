# Device registry, command dispatch, event fan-out and schedules
import asyncio
import traceback
from typing import Any, Dict, List, Union
from datetime import datetime, time

from pydantic import ValidationError

from .proxy import DeviceProxy
from .observers import HubObserver
from ..devices.base import BaseDevice
from ..models.device import AccessToken, CommandResult, CommandType, ScheduleEntry
from ..utils.exceptions import DeviceError, DeviceNotFound, InvalidCommand, ScheduleError
from ..utils.helpers import format_clock
from ..utils.logging import get_logger

logger = get_logger(__name__)

# Event emitted after each command succeeds
COMMAND_EVENTS: Dict[str, str] = {
    CommandType.TURN_ON.value: "turn_on",
    CommandType.TURN_OFF.value: "turn_off",
    CommandType.SET_TEMPERATURE.value: "set_temp",
    CommandType.LOCK_DOOR.value: "lock",
    CommandType.UNLOCK_DOOR.value: "unlock",
}

# Commands a schedule entry may fire
SCHEDULABLE_COMMANDS = frozenset({CommandType.TURN_ON.value, CommandType.TURN_OFF.value})


class Hub:
    """
    Single entry point for every device command, query, registration and
    schedule operation.

    All operations run under one asyncio.Lock, and observers are awaited in
    registration order before the triggering call returns. An observer must
    not call back into the hub from update(); the lock is not re-entrant.
    """
    def __init__(self):
        self._devices: Dict[int, DeviceProxy] = {}
        self._observers: List[HubObserver] = []
        self._schedules: List[ScheduleEntry] = []
        self._lock = asyncio.Lock()

    async def add_observer(self, observer: HubObserver) -> None:
        async with self._lock:
            self._observers.append(observer)

    async def _notify_all_observers(self, event: str, payload: Dict[str, Any]) -> None:
        for observer in list(self._observers):
            try:
                await observer.update(event, dict(payload))
            except Exception:
                logger.error(f"Observer {observer!r} failed on {event}: {traceback.format_exc()}")

    async def add_device(self, device: BaseDevice, token: Union[AccessToken, str]) -> None:
        """Register a device behind a proxy; re-adding an id replaces the old entry"""
        proxy = DeviceProxy(device, token)
        async with self._lock:
            self._devices[device.device_id] = proxy
            logger.info(f"Registered {device.kind.value} {device.device_id} with {proxy.token.value} token")
            await self._notify_all_observers(
                "device_added", {"id": device.device_id, "type": device.kind.value}
            )

    async def execute(self, device_id: int, command: Union[CommandType, str], *args: Any) -> None:
        """
        Run a named command against a registered device and emit its event.

        Raises:
            DeviceNotFound: no device registered under device_id
            Unauthorized: the device's token may not run commands on it
            InvalidCommand: command or arguments do not fit the device
        """
        async with self._lock:
            await self._execute(device_id, command, *args)

    async def _execute(self, device_id: int, command: Union[CommandType, str], *args: Any) -> None:
        command = getattr(command, "value", command)
        proxy = self._devices.get(device_id)
        if proxy is None:
            logger.warning(f"Command {command} rejected: unknown device {device_id}")
            raise DeviceNotFound(f"Unknown device: {device_id}")

        try:
            applied = proxy.call(command, *args)
        except DeviceError as e:
            logger.warning(f"Command {command} rejected for device {device_id}: {e}")
            raise

        payload: Dict[str, Any] = {"id": device_id}
        if command == CommandType.SET_TEMPERATURE.value:
            payload["temp"] = applied[0]
        elif applied and command not in COMMAND_EVENTS:
            payload["args"] = list(applied)
        logger.info(f"Device {device_id} executed {command}")
        await self._notify_all_observers(COMMAND_EVENTS.get(command, command), payload)

    async def turn_on(self, device_id: int) -> None:
        await self.execute(device_id, CommandType.TURN_ON)

    async def turn_off(self, device_id: int) -> None:
        await self.execute(device_id, CommandType.TURN_OFF)

    async def set_temp(self, device_id: int, temperature: int) -> None:
        await self.execute(device_id, CommandType.SET_TEMPERATURE, temperature)

    async def lock(self, device_id: int) -> None:
        await self.execute(device_id, CommandType.LOCK_DOOR)

    async def unlock(self, device_id: int) -> None:
        await self.execute(device_id, CommandType.UNLOCK_DOOR)

    async def status(self) -> List[str]:
        """Status report of every registered device, in registry order"""
        async with self._lock:
            return [proxy.status_report() for proxy in self._devices.values()]

    async def devices(self) -> List[Dict[str, Any]]:
        async with self._lock:
            return [proxy.get_state() for proxy in self._devices.values()]

    async def schedules(self) -> List[ScheduleEntry]:
        async with self._lock:
            return list(self._schedules)

    async def set_schedule(self, device_id: int, at: str, command: str) -> ScheduleEntry:
        """
        Store a (device, time, command) trigger.

        Neither the device nor the command is checked here; both are
        resolved when the entry fires.
        """
        try:
            entry = ScheduleEntry(device_id=device_id, time=at, command=getattr(command, "value", command))
        except ValidationError as e:
            raise ScheduleError(f"Invalid schedule for device {device_id}: {e}") from e

        async with self._lock:
            self._schedules.append(entry)
            logger.info(f"Scheduled {entry.command} for device {entry.device_id} at {entry.time}")
            await self._notify_all_observers(
                "schedule_added", {"id": entry.device_id, "time": entry.time, "cmd": entry.command}
            )
        return entry

    async def run_pending(self, now: Union[str, datetime, time]) -> List[CommandResult]:
        """
        Fire every schedule entry whose time equals now.

        Entries are never marked as fired, so calling this twice with the same
        now fires them twice. Each entry is evaluated on its own; the returned
        list holds one result per due entry, failures included.
        """
        now = format_clock(now)
        results: List[CommandResult] = []
        async with self._lock:
            due = [entry for entry in self._schedules if entry.time == now]
            for entry in due:
                try:
                    if entry.command not in SCHEDULABLE_COMMANDS:
                        raise InvalidCommand(f"Command {entry.command!r} cannot be scheduled")
                    await self._execute(entry.device_id, entry.command)
                except DeviceError as e:
                    logger.warning(f"Scheduled {entry.command} for device {entry.device_id} failed: {e}")
                    results.append(CommandResult(
                        device_id=entry.device_id,
                        command=entry.command,
                        status="FAILED",
                        error=type(e).__name__,
                        message=str(e)
                    ))
                else:
                    results.append(CommandResult(
                        device_id=entry.device_id,
                        command=entry.command,
                        status="SUCCESS"
                    ))
        return results
