# src/smart_hub/api/dependencies.py
from fastapi import Request
from typing import Annotated
from fastapi import Depends
from ..core.hub import Hub

async def get_hub(request: Request) -> Hub:
    return request.app.state.components.hub

# Type definitions for dependencies
HubDependency = Annotated[Hub, Depends(get_hub)]
