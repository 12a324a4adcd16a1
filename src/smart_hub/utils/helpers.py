from datetime import datetime, time
import re
from typing import Union

CLOCK_PATTERN = re.compile(r"^(?:[01]\d|2[0-3]):[0-5]\d$")

def format_clock(value: Union[str, datetime, time]) -> str:
    """
    Render a wall-clock value as the HH:MM string schedules are keyed on.

    Strings are passed through untouched so callers may supply any value;
    datetime and time objects are truncated to the minute.

    Example: datetime(2024, 1, 7, 7, 0, 42) -> "07:00"
    """
    if isinstance(value, (datetime, time)):
        return value.strftime('%H:%M')
    return value

def is_valid_clock(value: str) -> bool:
    """True for a zero-padded 24-hour HH:MM string"""
    return isinstance(value, str) and CLOCK_PATTERN.match(value) is not None
