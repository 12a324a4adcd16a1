import pytest
import pytest_asyncio
from typing import Any, Dict, List, Tuple

from smart_hub.core.hub import Hub
from smart_hub.core.observers import HubObserver


class RecordingObserver(HubObserver):
    """Test probe that keeps every event it receives"""
    def __init__(self, name: str = "recorder", journal: List[Tuple[str, str]] = None):
        self.name = name
        self.journal = journal
        self.events: List[Tuple[str, Dict[str, Any]]] = []

    async def update(self, event: str, payload: Dict[str, Any]) -> None:
        self.events.append((event, payload))
        if self.journal is not None:
            self.journal.append((self.name, event))

    def names(self) -> List[str]:
        return [event for event, _ in self.events]


@pytest.fixture
def recorder():
    return RecordingObserver()


@pytest_asyncio.fixture
async def hub(recorder):
    hub = Hub()
    await hub.add_observer(recorder)
    return hub
