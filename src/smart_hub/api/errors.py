from fastapi import HTTPException

from ..utils.exceptions import (
    DeviceNotFound, InvalidCommand, ScheduleError, SmartHubError, Unauthorized, UnknownDeviceKind
)

_STATUS_CODES = {
    DeviceNotFound: 404,
    Unauthorized: 403,
    InvalidCommand: 400,
    UnknownDeviceKind: 400,
    ScheduleError: 400,
}

def to_http_exception(error: SmartHubError) -> HTTPException:
    """Translate a hub error into the matching HTTP error response"""
    for error_type, status_code in _STATUS_CODES.items():
        if isinstance(error, error_type):
            return HTTPException(status_code=status_code, detail=str(error))
    return HTTPException(status_code=500, detail=str(error))
