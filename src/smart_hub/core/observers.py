# Listeners for hub events
from abc import ABC, abstractmethod
import logging
from typing import Any, Dict, Optional, TextIO
import sys

from ..utils.logging import get_logger

logger = get_logger(__name__)


class HubObserver(ABC):
    """Anything that wants (event_name, payload) notifications from the hub"""

    @abstractmethod
    async def update(self, event: str, payload: Dict[str, Any]) -> None:
        pass


class ConsoleObserver(HubObserver):
    """Prints each event as "[EVENT] <name>: <payload>" """
    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    async def update(self, event: str, payload: Dict[str, Any]) -> None:
        print(f"[EVENT] {event}: {payload}", file=self.stream or sys.stdout)


class LoggingObserver(HubObserver):
    """Forwards hub events to a logger"""
    def __init__(self, event_logger: Optional[logging.Logger] = None, level: int = logging.INFO):
        self.logger = event_logger or logger
        self.level = level

    async def update(self, event: str, payload: Dict[str, Any]) -> None:
        self.logger.log(self.level, f"Hub event {event}: {payload}")


OBSERVER_TYPES = {
    "console": ConsoleObserver,
    "logging": LoggingObserver,
}
