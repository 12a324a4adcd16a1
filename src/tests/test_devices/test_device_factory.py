import pytest

from smart_hub.devices.base import BaseDevice, CommandSpec
from smart_hub.devices.door import DoorLock
from smart_hub.devices.factory import DeviceFactory
from smart_hub.devices.light import Light
from smart_hub.devices.thermostat import Thermostat
from smart_hub.models.device import DeviceKind
from smart_hub.utils.exceptions import UnknownDeviceKind


@pytest.mark.parametrize("kind, device_class, report", [
    ("light", Light, "Light 1 is off"),
    ("thermostat", Thermostat, "Thermostat 1 at 70°F"),
    ("door", DoorLock, "Door 1 is locked"),
])
def test_create_reports_initial_state(kind, device_class, report):
    device = DeviceFactory.create(1, kind)
    assert isinstance(device, device_class)
    assert device.kind == DeviceKind(kind)
    assert device.status_report() == report


def test_kind_is_matched_case_insensitively():
    assert isinstance(DeviceFactory.create(4, "LiGhT"), Light)
    assert isinstance(DeviceFactory.create(5, DeviceKind.DOOR), DoorLock)


def test_unknown_kind_is_rejected():
    with pytest.raises(UnknownDeviceKind):
        DeviceFactory.create(1, "bogus")
    with pytest.raises(UnknownDeviceKind):
        DeviceFactory.create(1, None)


@pytest.mark.parametrize("device_id", [0, -3, True, "1"])
def test_device_id_must_be_positive_integer(device_id):
    with pytest.raises(ValueError):
        DeviceFactory.create(device_id, "light")


def test_device_state_snapshot():
    device = DeviceFactory.create(2, "thermostat")
    device.set_temperature(65)
    assert device.get_state() == {"id": 2, "type": "thermostat", "temperature": 65}


def test_command_tables_follow_kind():
    assert set(DeviceFactory.create(1, "light").command_table()) == {"turnOn", "turnOff"}
    assert set(DeviceFactory.create(2, "thermostat").command_table()) == {"setTemperature"}
    assert set(DeviceFactory.create(3, "door").command_table()) == {"lockDoor", "unlockDoor"}


def test_register_device_type():
    class Fan(BaseDevice):
        kind = DeviceKind.LIGHT

        def command_table(self):
            return {"turnOn": CommandSpec(lambda: None)}

        def status_report(self):
            return f"Fan {self.device_id}"

    DeviceFactory.register_device_type("Fan", Fan)
    try:
        assert DeviceFactory.create(9, "fan").status_report() == "Fan 9"
    finally:
        DeviceFactory._device_types.pop("fan")
