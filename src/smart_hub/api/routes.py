from typing import Optional

from fastapi import FastAPI

from .endpoints.devices import device_router
from .endpoints.schedules import schedule_router
from ..core.hub import Hub
from ..core.scheduler import ScheduleRunner


class AppState:
    """Holds application state and components"""
    def __init__(self, hub: Optional[Hub] = None):
        self.hub: Optional[Hub] = hub
        self.schedule_runner: Optional[ScheduleRunner] = None


def create_app(app_state: AppState) -> FastAPI:
    """Build the FastAPI application around an already constructed hub"""
    app = FastAPI(
        title="Smart Hub API",
        description="Home automation hub managing devices, events and schedules",
        version="1.0.0"
    )

    # Store app state for dependency injection
    app.state.components = app_state

    app.include_router(device_router, prefix="/api/v1")
    app.include_router(schedule_router, prefix="/api/v1")
    return app
