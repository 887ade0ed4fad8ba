"""Device adapter for one Foscam floodlight."""
from __future__ import annotations

import dataclasses
import logging
from typing import Any, Mapping, Optional

from .client import FoscamCgiClient
from .const import (
    EVENT_BRIGHTNESS,
    EVENT_ON_OFF,
    EVENT_SETTINGS,
    KEY_HDR_WORKAROUND,
    KEY_HOST,
    KEY_PASSWORD,
    KEY_USERNAME,
    SETTING_KEYS,
    WORKAROUND_POLL_INTERVAL,
    WORKAROUND_REASSERT_DELAY,
)
from .host import DeviceEventNotifier, SettingsStore
from .models import CgiFailure, Credentials, FloodlightState, Setting
from .workaround import HdrModeWorkaround

_LOGGER = logging.getLogger(__name__)


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


def floodlight_settings(values: Mapping[str, Any]) -> list[Setting]:
    """Describe the user settings of a floodlight, filled from values."""
    return [
        Setting(
            key=KEY_HOST,
            title="Floodlight IP",
            description="The floodlight ip address.",
            placeholder="192.168.0.100:88",
            value=values.get(KEY_HOST),
        ),
        Setting(key=KEY_USERNAME, title="Username", value=values.get(KEY_USERNAME)),
        Setting(
            key=KEY_PASSWORD,
            title="Password",
            type="password",
            value=values.get(KEY_PASSWORD),
        ),
        Setting(
            key=KEY_HDR_WORKAROUND,
            title="HDR Workaround",
            description="Re-apply HDR mode when the night vision LEDs switch on or off.",
            type="boolean",
            value=_as_bool(values.get(KEY_HDR_WORKAROUND)),
        ),
    ]


class FoscamFloodlightDevice:
    """Keep a local model of a floodlight in sync with the device.

    State changes only after the device answers with result 0. Every
    failure leaves the last known state in place.
    """

    def __init__(
        self,
        native_id: str,
        client: FoscamCgiClient,
        storage: SettingsStore,
        notifier: Optional[DeviceEventNotifier] = None,
        poll_interval: float = WORKAROUND_POLL_INTERVAL,
        reassert_delay: float = WORKAROUND_REASSERT_DELAY,
    ) -> None:
        """Initialize the adapter with the host collaborators."""
        self.native_id = native_id
        self._client = client
        self._storage = storage
        self._notifier = notifier
        self._state = FloodlightState()
        self._workaround = HdrModeWorkaround(
            client,
            lambda: self.credentials,
            lambda: self.hdr_workaround_enabled,
            poll_interval=poll_interval,
            reassert_delay=reassert_delay,
            name=native_id,
        )

    @property
    def state(self) -> FloodlightState:
        """Return the last known light state."""
        return self._state

    @property
    def is_on(self) -> bool:
        return self._state.on

    @property
    def brightness(self) -> int:
        return self._state.brightness

    @property
    def light_interval(self) -> int:
        return self._state.light_interval

    @property
    def host(self) -> Optional[str]:
        return self._storage.get_item(KEY_HOST)

    @property
    def username(self) -> Optional[str]:
        return self._storage.get_item(KEY_USERNAME)

    @property
    def password(self) -> Optional[str]:
        return self._storage.get_item(KEY_PASSWORD)

    @property
    def hdr_workaround_enabled(self) -> bool:
        return _as_bool(self._storage.get_item(KEY_HDR_WORKAROUND))

    @property
    def workaround_running(self) -> bool:
        return self._workaround.running

    @property
    def credentials(self) -> Optional[Credentials]:
        """Return the credentials, or None while any of them is missing."""
        host, username, password = self.host, self.username, self.password
        if not host or not username or not password:
            return None
        return Credentials(host=host, username=username, password=password)

    def get_settings(self) -> list[Setting]:
        """Return the settings surface with current values."""
        return floodlight_settings(
            {
                KEY_HOST: self.host,
                KEY_USERNAME: self.username,
                KEY_PASSWORD: self.password,
                KEY_HDR_WORKAROUND: self.hdr_workaround_enabled,
            }
        )

    async def async_put_setting(self, key: str, value: Any) -> None:
        """Store a setting, refresh the device and notify the host."""
        if key not in SETTING_KEYS:
            _LOGGER.debug("%s: ignoring unknown setting %s", self.native_id, key)
            return

        if key == KEY_HDR_WORKAROUND:
            value = _as_bool(value)
        elif value is not None:
            value = str(value).strip()
        self._storage.set_item(key, value)

        await self.async_update_state()
        self._notify(EVENT_SETTINGS, key)

    async def async_update_state(self) -> bool:
        """Read the white light state from the device.

        Returns True when the local state was refreshed.
        """
        await self._async_sync_workaround()

        credentials = self.credentials
        if credentials is None:
            _LOGGER.debug("%s: not configured, skipping refresh", self.native_id)
            return False

        result = await self._client.get_white_light_brightness(credentials)
        if isinstance(result, CgiFailure):
            return False

        report = result.value
        self._set_state(
            on=report.enable,
            brightness=report.brightness,
            light_interval=report.light_interval,
        )
        return True

    async def async_turn_on(self) -> bool:
        """Switch the light on."""
        _LOGGER.debug("%s: sending white light turn on request", self.native_id)
        return await self._async_set_white_light(True, self._state.brightness)

    async def async_turn_off(self) -> bool:
        """Switch the light off."""
        _LOGGER.debug("%s: sending white light turn off request", self.native_id)
        return await self._async_set_white_light(False, self._state.brightness)

    async def async_set_brightness(self, brightness: int) -> bool:
        """Set the brightness; zero switches the light off."""
        level = max(0, min(100, int(brightness)))
        _LOGGER.debug("%s: setting brightness to %s", self.native_id, level)
        return await self._async_set_white_light(level > 0, level)

    async def async_shutdown(self) -> None:
        """Stop background work."""
        await self._workaround.async_stop()

    async def _async_set_white_light(self, enable: bool, brightness: int) -> bool:
        credentials = self.credentials
        if credentials is None:
            _LOGGER.warning(
                "%s: cannot switch light, device is not configured", self.native_id
            )
            return False

        result = await self._client.set_white_light_brightness(
            credentials, enable, brightness, self._state.light_interval
        )
        if isinstance(result, CgiFailure):
            return False

        self._set_state(on=enable, brightness=brightness)
        return True

    async def _async_sync_workaround(self) -> None:
        if self.hdr_workaround_enabled:
            self._workaround.start()
        else:
            await self._workaround.async_stop()

    def _set_state(self, **changes: Any) -> None:
        previous = self._state
        self._state = dataclasses.replace(previous, **changes)
        if self._state.on != previous.on:
            self._notify(EVENT_ON_OFF, self._state.on)
        if self._state.brightness != previous.brightness:
            self._notify(EVENT_BRIGHTNESS, self._state.brightness)

    def _notify(self, event: str, value: Any) -> None:
        if self._notifier is not None:
            self._notifier(event, value)
