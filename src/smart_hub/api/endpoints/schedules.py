from fastapi import APIRouter
from typing import Dict, Any
from ..dependencies import HubDependency
from ..errors import to_http_exception
from ...models.device import RunPendingRequest, ScheduleRequest
from ...utils.exceptions import SmartHubError

schedule_router = APIRouter()


@schedule_router.post("/schedules", status_code=201)
async def add_schedule(request: ScheduleRequest, hub: HubDependency) -> Dict[str, Any]:
    try:
        entry = await hub.set_schedule(request.id, request.time, request.command)
    except SmartHubError as e:
        raise to_http_exception(e)
    return entry.model_dump()


@schedule_router.get("/schedules")
async def list_schedules(hub: HubDependency) -> Dict[str, Any]:
    return {"schedules": [entry.model_dump() for entry in await hub.schedules()]}


@schedule_router.post("/schedules/run")
async def run_pending(request: RunPendingRequest, hub: HubDependency) -> Dict[str, Any]:
    """Fire the schedules due at the given HH:MM, as the periodic driver would"""
    results = await hub.run_pending(request.now)
    return {"results": [result.model_dump(mode="json") for result in results]}
