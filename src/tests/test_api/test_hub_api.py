import asyncio
import pytest
from fastapi.testclient import TestClient

from smart_hub.api.routes import AppState, create_app
from smart_hub.core.hub import Hub
from conftest import RecordingObserver


@pytest.fixture
def recorder():
    return RecordingObserver()


@pytest.fixture
def client(recorder):
    hub = Hub()
    asyncio.run(hub.add_observer(recorder))
    app = create_app(AppState(hub))
    with TestClient(app) as client:
        yield client


def register(client, device_id, kind, token="admin"):
    return client.post("/api/v1/devices", json={"id": device_id, "type": kind, "token": token})


def test_register_and_control_light(client, recorder):
    response = register(client, 1, "Light", "public")
    assert response.status_code == 201
    assert response.json() == {"id": 1, "type": "light", "token": "public"}

    response = client.post("/api/v1/devices/1/commands", json={"command": "turnOn"})
    assert response.status_code == 200
    assert response.json() == {"device_id": 1, "command": "turnOn", "status": "SUCCESS"}

    assert client.get("/api/v1/devices/status").json() == {"status": ["Light 1 is on"]}
    assert client.get("/api/v1/devices").json() == {"devices": [{"id": 1, "type": "light", "power": "on"}]}
    assert recorder.names() == ["device_added", "turn_on"]


def test_register_validation(client):
    assert register(client, 1, "bogus").status_code == 400
    assert register(client, 0, "light").status_code == 422
    assert register(client, 1, "light", "root").status_code == 422


def test_command_errors_map_to_status_codes(client):
    register(client, 2, "thermostat", "public")
    register(client, 3, "door")

    assert client.post("/api/v1/devices/9/commands", json={"command": "turnOn"}).status_code == 404
    assert client.post("/api/v1/devices/2/commands",
                       json={"command": "setTemperature", "args": [60]}).status_code == 403
    assert client.post("/api/v1/devices/3/commands", json={"command": "turnOn"}).status_code == 400
    response = client.post("/api/v1/devices/3/commands", json={"command": "unlockDoor"})
    assert response.status_code == 200
    assert client.get("/api/v1/devices/status").json()["status"] == [
        "Thermostat 2 at 70°F", "Door 3 is unlocked"
    ]


def test_schedules_round_trip(client, recorder):
    register(client, 1, "light", "public")
    client.post("/api/v1/devices/1/commands", json={"command": "turnOn"})

    response = client.post("/api/v1/schedules", json={"id": 1, "time": "07:00", "command": "turnOff"})
    assert response.status_code == 201
    assert response.json() == {"device_id": 1, "time": "07:00", "command": "turnOff"}
    client.post("/api/v1/schedules", json={"id": 99, "time": "07:00", "command": "turnOn"})

    assert client.post("/api/v1/schedules", json={"id": 1, "time": "7am", "command": "turnOn"}).status_code == 400
    assert len(client.get("/api/v1/schedules").json()["schedules"]) == 2

    results = client.post("/api/v1/schedules/run", json={"now": "07:00"}).json()["results"]
    assert [(r["device_id"], r["status"], r["error"]) for r in results] == [
        (1, "SUCCESS", None),
        (99, "FAILED", "DeviceNotFound"),
    ]
    assert client.get("/api/v1/devices/status").json() == {"status": ["Light 1 is off"]}
    assert recorder.names()[-1] == "turn_off"
