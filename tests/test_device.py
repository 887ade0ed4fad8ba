"""Tests for the floodlight device adapter."""
from __future__ import annotations

import pytest

from pyfoscamfloodlight import (
    Credentials,
    FloodlightState,
    FoscamFloodlightDevice,
    MemorySettingsStore,
)
from pyfoscamfloodlight.const import (
    EVENT_BRIGHTNESS,
    EVENT_ON_OFF,
    EVENT_SETTINGS,
    KEY_HDR_WORKAROUND,
    KEY_HOST,
    KEY_PASSWORD,
    KEY_USERNAME,
)

from .common import CONFIGURED, protocol_failure, transport_failure, white_light

CREDENTIALS = Credentials("192.168.0.100:88", "admin", "secret")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "missing",
    [
        (KEY_HOST,),
        (KEY_USERNAME,),
        (KEY_PASSWORD,),
        (KEY_HOST, KEY_USERNAME),
        (KEY_USERNAME, KEY_PASSWORD),
        (KEY_HOST, KEY_PASSWORD),
        (KEY_HOST, KEY_USERNAME, KEY_PASSWORD),
    ],
)
async def test_update_state_unconfigured(client, missing):
    """Any missing credential means no network call and the default state."""
    settings = {key: value for key, value in CONFIGURED.items() if key not in missing}
    device = FoscamFloodlightDevice("foscamfl:1", client, MemorySettingsStore(settings))

    assert await device.async_update_state() is False

    client.get_white_light_brightness.assert_not_awaited()
    assert device.credentials is None
    assert device.state == FloodlightState()
    assert device.is_on is False


@pytest.mark.asyncio
async def test_update_state_empty_credential(client, store):
    """An empty string counts as missing."""
    store.set_item(KEY_PASSWORD, "")
    device = FoscamFloodlightDevice("foscamfl:1", client, store)

    await device.async_update_state()

    client.get_white_light_brightness.assert_not_awaited()


@pytest.mark.asyncio
async def test_update_state_keeps_on_when_unconfigured(device, client, store):
    """Losing a credential keeps the last known on value."""
    await device.async_update_state()
    assert device.is_on is True

    store.set_item(KEY_PASSWORD, None)
    await device.async_update_state()

    assert device.is_on is True
    assert client.get_white_light_brightness.await_count == 1


@pytest.mark.asyncio
async def test_update_state_success(device, client, events):
    assert await device.async_update_state() is True

    client.get_white_light_brightness.assert_awaited_once_with(CREDENTIALS)
    assert device.is_on is True
    assert device.brightness == 80
    assert device.light_interval == 60
    assert events.of(EVENT_ON_OFF) == [True]
    assert events.of(EVENT_BRIGHTNESS) == [80]


@pytest.mark.asyncio
async def test_update_state_light_off(device, client):
    client.get_white_light_brightness.return_value = white_light(False, 30, 90)

    await device.async_update_state()

    assert device.state == FloodlightState(on=False, brightness=30, light_interval=90)


@pytest.mark.asyncio
@pytest.mark.parametrize("failure", [protocol_failure(-4), transport_failure()])
async def test_update_state_failure_keeps_state(device, client, events, failure):
    await device.async_update_state()
    before = device.state
    events.events.clear()
    client.get_white_light_brightness.return_value = failure

    assert await device.async_update_state() is False

    assert device.state == before
    assert events.events == []


@pytest.mark.asyncio
async def test_turn_on_acknowledged(device, client, events):
    assert await device.async_turn_on() is True

    client.set_white_light_brightness.assert_awaited_once_with(CREDENTIALS, True, 100, 60)
    assert device.is_on is True
    assert events.of(EVENT_ON_OFF) == [True]


@pytest.mark.asyncio
async def test_turn_on_not_acknowledged(device, client):
    client.set_white_light_brightness.return_value = protocol_failure()

    assert await device.async_turn_on() is False

    assert device.is_on is False
    client.set_white_light_brightness.assert_awaited_once()


@pytest.mark.asyncio
async def test_turn_off_uses_current_brightness(device, client):
    client.get_white_light_brightness.return_value = white_light(True, 45, 120)
    await device.async_update_state()

    assert await device.async_turn_off() is True

    client.set_white_light_brightness.assert_awaited_once_with(CREDENTIALS, False, 45, 120)
    assert device.is_on is False
    assert device.brightness == 45


@pytest.mark.asyncio
async def test_turn_off_transport_error_keeps_on(device, client):
    await device.async_update_state()
    client.set_white_light_brightness.return_value = transport_failure()

    assert await device.async_turn_off() is False

    assert device.is_on is True


@pytest.mark.asyncio
async def test_turn_on_unconfigured(client):
    device = FoscamFloodlightDevice("foscamfl:1", client, MemorySettingsStore())

    assert await device.async_turn_on() is False

    client.set_white_light_brightness.assert_not_awaited()


@pytest.mark.asyncio
async def test_set_brightness_acknowledged(device, client, events):
    assert await device.async_set_brightness(35) is True

    client.set_white_light_brightness.assert_awaited_once_with(CREDENTIALS, True, 35, 60)
    assert device.brightness == 35
    assert device.is_on is True
    assert events.of(EVENT_BRIGHTNESS) == [35]


@pytest.mark.asyncio
async def test_set_brightness_zero_turns_off(device, client):
    await device.async_update_state()

    await device.async_set_brightness(0)

    client.set_white_light_brightness.assert_awaited_once_with(CREDENTIALS, False, 0, 60)
    assert device.is_on is False


@pytest.mark.asyncio
async def test_set_brightness_clamped(device, client):
    await device.async_set_brightness(150)

    client.set_white_light_brightness.assert_awaited_once_with(CREDENTIALS, True, 100, 60)


@pytest.mark.asyncio
async def test_set_brightness_not_acknowledged(device, client):
    client.set_white_light_brightness.return_value = protocol_failure()

    assert await device.async_set_brightness(20) is False

    assert device.state == FloodlightState()


@pytest.mark.asyncio
async def test_put_setting_persists_refreshes_and_notifies(client, events):
    store = MemorySettingsStore({KEY_HOST: "10.0.0.5", KEY_USERNAME: "admin"})
    device = FoscamFloodlightDevice("foscamfl:1", client, store, events)

    await device.async_put_setting(KEY_PASSWORD, " hunter2 ")

    assert store.get_item(KEY_PASSWORD) == "hunter2"
    client.get_white_light_brightness.assert_awaited_once_with(
        Credentials("10.0.0.5", "admin", "hunter2")
    )
    assert events.of(EVENT_SETTINGS) == [KEY_PASSWORD]


@pytest.mark.asyncio
async def test_put_setting_unknown_key(device, client, store, events):
    await device.async_put_setting("brightness", 10)

    assert store.get_item("brightness") is None
    client.get_white_light_brightness.assert_not_awaited()
    assert events.events == []


@pytest.mark.asyncio
async def test_put_setting_workaround_flag_is_bool(device, store):
    await device.async_put_setting(KEY_HDR_WORKAROUND, "true")
    try:
        assert store.get_item(KEY_HDR_WORKAROUND) is True
        assert device.hdr_workaround_enabled is True
    finally:
        await device.async_shutdown()


def test_get_settings(device):
    settings = {setting.key: setting for setting in device.get_settings()}

    assert list(settings) == [KEY_HOST, KEY_USERNAME, KEY_PASSWORD, KEY_HDR_WORKAROUND]
    assert settings[KEY_HOST].title == "Floodlight IP"
    assert settings[KEY_HOST].placeholder == "192.168.0.100:88"
    assert settings[KEY_HOST].value == "192.168.0.100:88"
    assert settings[KEY_PASSWORD].type == "password"
    assert settings[KEY_HDR_WORKAROUND].type == "boolean"
    assert settings[KEY_HDR_WORKAROUND].value is False


@pytest.mark.asyncio
async def test_no_event_without_change(device, client, events):
    await device.async_update_state()
    events.events.clear()

    await device.async_update_state()

    assert events.events == []
