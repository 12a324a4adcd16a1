from pydantic import BaseModel, ConfigDict, Field, field_validator
from datetime import datetime
from typing import Any, List, Optional
from enum import Enum

from ..utils.helpers import is_valid_clock


class DeviceKind(str, Enum):
    LIGHT = "light"
    THERMOSTAT = "thermostat"
    DOOR = "door"


class AccessToken(str, Enum):
    ADMIN = "admin"
    PUBLIC = "public"


class CommandType(str, Enum):
    TURN_ON = "turnOn"
    TURN_OFF = "turnOff"
    SET_TEMPERATURE = "setTemperature"
    LOCK_DOOR = "lockDoor"
    UNLOCK_DOOR = "unlockDoor"


class DeviceRegistration(BaseModel):
    id: int = Field(gt=0)
    type: str
    token: AccessToken = AccessToken.PUBLIC


class DeviceCommand(BaseModel):
    command: str
    args: List[Any] = Field(default_factory=list)


class ScheduleEntry(BaseModel):
    """A stored (device, time, command) trigger; never mutated once created"""
    model_config = ConfigDict(frozen=True)

    device_id: int
    time: str
    command: str

    @field_validator('time')
    def validate_time(cls, v):
        if not is_valid_clock(v):
            raise ValueError(f"Schedule time {v!r} is not in HH:MM form")
        return v


class ScheduleRequest(BaseModel):
    id: int
    time: str
    command: str


class RunPendingRequest(BaseModel):
    now: str


class CommandResult(BaseModel):
    device_id: int
    command: str
    status: str
    error: Optional[str] = None
    message: Optional[str] = None
    executed_at: datetime = Field(default_factory=datetime.now)

    @property
    def ok(self) -> bool:
        return self.status == "SUCCESS"
