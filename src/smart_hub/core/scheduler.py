import asyncio
import traceback
from datetime import datetime
from typing import Callable, List, Optional

from .hub import Hub
from ..models.device import CommandResult
from ..utils.helpers import format_clock
from ..utils.logging import get_logger

logger = get_logger(__name__)

class ScheduleRunner:
    """
    Periodic driver for Hub.run_pending.

    The clock is sampled every tick_interval seconds and run_pending is
    called once for each new HH:MM value seen.
    """
    def __init__(self, hub: Hub, tick_interval: float = 1.0,
                 clock: Optional[Callable[[], datetime]] = None):
        self.hub = hub
        self.tick_interval = tick_interval
        self.clock = clock or datetime.now
        self.is_running = False
        self._last_minute: Optional[str] = None

    async def tick(self) -> List[CommandResult]:
        now = format_clock(self.clock())
        if now == self._last_minute:
            return []
        results = await self.hub.run_pending(now)
        self._last_minute = now
        for result in results:
            if not result.ok:
                logger.warning(
                    f"Schedule {result.command} for device {result.device_id} at {now} "
                    f"failed: {result.error}: {result.message}"
                )
        if results:
            logger.info(f"Fired {len(results)} schedule(s) at {now}")
        return results

    async def start(self) -> None:
        self.is_running = True
        logger.info(f"Schedule runner started, checking every {self.tick_interval}s")
        while self.is_running:
            try:
                await self.tick()
            except Exception:
                logger.error(f"Error while running schedules: {traceback.format_exc()}")
            await asyncio.sleep(self.tick_interval)

    async def stop(self) -> None:
        self.is_running = False
        logger.info("Schedule runner stopped")
