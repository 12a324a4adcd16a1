import pytest

from smart_hub.core.proxy import DeviceProxy
from smart_hub.devices.factory import DeviceFactory
from smart_hub.models.device import AccessToken, CommandType
from smart_hub.devices.base import CommandSpec
from smart_hub.utils.exceptions import DeviceError, InvalidCommand, Unauthorized


def make_proxy(kind, token, device_id=1):
    return DeviceProxy(DeviceFactory.create(device_id, kind), token)


def test_public_token_cannot_set_thermostat():
    proxy = make_proxy("thermostat", "public")
    with pytest.raises(Unauthorized):
        proxy.call("setTemperature", 60)
    assert proxy.status_report() == "Thermostat 1 at 70°F"


@pytest.mark.parametrize("command", ["lockDoor", "unlockDoor"])
def test_public_token_cannot_touch_door(command):
    proxy = make_proxy("door", "public")
    with pytest.raises(Unauthorized):
        proxy.call(command)
    assert proxy.status_report() == "Door 1 is locked"


def test_authorization_is_checked_before_command_lookup():
    proxy = make_proxy("door", AccessToken.PUBLIC)
    with pytest.raises(Unauthorized):
        proxy.call("selfDestruct")


def test_public_token_controls_lights():
    proxy = make_proxy("light", "public")
    proxy.call("turnOn")
    assert proxy.status_report() == "Light 1 is on"
    proxy.call(CommandType.TURN_OFF)
    assert proxy.status_report() == "Light 1 is off"


def test_admin_runs_every_valid_command():
    light = make_proxy("light", "admin", 1)
    light.call("turnOn")
    assert light.status_report() == "Light 1 is on"

    thermostat = make_proxy("thermostat", "admin", 2)
    assert thermostat.call("setTemperature", 76) == (76,)
    assert thermostat.status_report() == "Thermostat 2 at 76°F"

    door = make_proxy("door", "admin", 3)
    door.call("unlockDoor")
    assert door.status_report() == "Door 3 is unlocked"
    door.call("lockDoor")
    assert door.status_report() == "Door 3 is locked"


def test_admin_command_outside_kind_table_is_invalid():
    proxy = make_proxy("light", "admin")
    with pytest.raises(InvalidCommand):
        proxy.call("lockDoor")
    assert proxy.status_report() == "Light 1 is off"


@pytest.mark.parametrize("args", [(), (70, 71), ("warm",), (True,), (70.5,), (None,)])
def test_bad_arguments_are_invalid(args):
    proxy = make_proxy("thermostat", "admin")
    with pytest.raises(InvalidCommand):
        proxy.call("setTemperature", *args)
    assert proxy.status_report() == "Thermostat 1 at 70°F"


def test_arguments_are_coerced():
    proxy = make_proxy("thermostat", "admin")
    assert proxy.call("setTemperature", "68") == (68,)
    assert proxy.call("setTemperature", 72.0) == (72,)
    assert proxy.status_report() == "Thermostat 1 at 72°F"


def test_extra_argument_to_light_is_invalid():
    proxy = make_proxy("light", "public")
    with pytest.raises(InvalidCommand):
        proxy.call("turnOn", 1)


def test_unknown_token_is_rejected():
    with pytest.raises(ValueError):
        make_proxy("light", "root")


@pytest.mark.parametrize("command", [["turnOn"], None, 3])
def test_non_string_command_is_invalid(command):
    proxy = make_proxy("light", "admin")
    with pytest.raises(InvalidCommand):
        proxy.call(command)
    assert proxy.status_report() == "Light 1 is off"


def test_handler_failure_becomes_device_error():
    proxy = make_proxy("thermostat", "admin")

    def broken(temperature):
        raise RuntimeError("sensor offline")

    proxy._commands["setTemperature"] = CommandSpec(broken, (int,))
    with pytest.raises(DeviceError, match="sensor offline"):
        proxy.call("setTemperature", 65)
