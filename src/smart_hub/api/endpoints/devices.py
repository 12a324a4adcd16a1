from fastapi import APIRouter, HTTPException
from typing import Dict, Any
from ..dependencies import HubDependency
from ..errors import to_http_exception
from ...devices.factory import DeviceFactory
from ...models.device import DeviceCommand, DeviceRegistration
from ...utils.exceptions import SmartHubError
from ...utils.logging import get_logger

logger = get_logger(__name__)

device_router = APIRouter()


'''
# Register a device and switch it on
await client.post("/api/v1/devices", json={"id": 1, "type": "light", "token": "public"})
await client.post("/api/v1/devices/1/commands", json={"command": "turnOn"})

# Read back every device's status line
status = await client.get("/api/v1/devices/status")
'''

@device_router.post("/devices", status_code=201)
async def register_device(registration: DeviceRegistration, hub: HubDependency) -> Dict[str, Any]:
    try:
        device = DeviceFactory.create(registration.id, registration.type)
        await hub.add_device(device, registration.token)
    except SmartHubError as e:
        raise to_http_exception(e)

    return {
        "id": device.device_id,
        "type": device.kind.value,
        "token": registration.token.value
    }


@device_router.get("/devices")
async def list_devices(hub: HubDependency) -> Dict[str, Any]:
    return {"devices": await hub.devices()}


@device_router.get("/devices/status")
async def device_status(hub: HubDependency) -> Dict[str, Any]:
    return {"status": await hub.status()}


@device_router.post("/devices/{device_id}/commands")
async def control_device(device_id: int, command: DeviceCommand, hub: HubDependency) -> Dict[str, Any]:
    try:
        await hub.execute(device_id, command.command, *command.args)
    except SmartHubError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.error(f"Error controlling device {device_id}: {e}")
        raise HTTPException(
            status_code=500,
            detail=f"Failed to control device: {str(e)}"
        )

    return {
        "device_id": device_id,
        "command": command.command,
        "status": "SUCCESS"
    }
