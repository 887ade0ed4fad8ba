"""Home Assistant side of the floodlight host interfaces."""
from __future__ import annotations

import logging
from typing import Any

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant, callback
from homeassistant.exceptions import HomeAssistantError
from homeassistant.helpers import device_registry as dr
from homeassistant.helpers.dispatcher import async_dispatcher_send

from pyfoscamfloodlight import DeviceEventNotifier, DeviceManifest

from .const import (
    CONF_HOST,
    CONF_NATIVE_ID,
    DOMAIN,
    MANUFACTURER,
    MODEL,
    SIGNAL_DEVICE_EVENT,
)

_LOGGER = logging.getLogger(__name__)


class ConfigEntrySettingsStore:
    """Floodlight settings kept in a config entry.

    Options override data; writes go to options.
    """

    def __init__(self, hass: HomeAssistant, entry: ConfigEntry) -> None:
        """Initialize the store."""
        self._hass = hass
        self._entry = entry

    def get_item(self, key: str) -> Any:
        """Return a stored setting."""
        if key in self._entry.options:
            return self._entry.options[key]
        return self._entry.data.get(key)

    def set_item(self, key: str, value: Any) -> None:
        """Persist a setting into the entry options."""
        if self.get_item(key) == value:
            return
        self._hass.config_entries.async_update_entry(
            self._entry, options={**self._entry.options, key: value}
        )


class HomeAssistantDeviceHost:
    """Expose config entries, dispatcher and device registry to the provider."""

    def __init__(self, hass: HomeAssistant) -> None:
        """Initialize the host."""
        self.hass = hass

    def _entry_for(self, native_id: str) -> ConfigEntry | None:
        for entry in self.hass.config_entries.async_entries(DOMAIN):
            if entry.data.get(CONF_NATIVE_ID) == native_id:
                return entry
        return None

    def native_ids(self) -> list[str]:
        """Return the native ids of all configured floodlights."""
        return [
            entry.data[CONF_NATIVE_ID]
            for entry in self.hass.config_entries.async_entries(DOMAIN)
            if CONF_NATIVE_ID in entry.data
        ]

    def storage_for(self, native_id: str) -> ConfigEntrySettingsStore:
        """Return the settings store of a floodlight."""
        entry = self._entry_for(native_id)
        if entry is None:
            raise HomeAssistantError(f"No config entry for floodlight {native_id}")
        return ConfigEntrySettingsStore(self.hass, entry)

    def notifier_for(self, native_id: str) -> DeviceEventNotifier:
        """Return a callback that forwards device events over the dispatcher."""

        @callback
        def _async_notify(event: str, value: Any) -> None:
            async_dispatcher_send(
                self.hass, SIGNAL_DEVICE_EVENT.format(native_id), event, value
            )

        return _async_notify

    async def async_on_device_discovered(self, manifest: DeviceManifest) -> None:
        """Add the floodlight to the device registry."""
        entry = self._entry_for(manifest.native_id)
        if entry is None:
            _LOGGER.debug(
                "Floodlight %s has no config entry yet, not registering",
                manifest.native_id,
            )
            return

        address = ConfigEntrySettingsStore(self.hass, entry).get_item(CONF_HOST)
        device_registry = dr.async_get(self.hass)
        device_registry.async_get_or_create(
            config_entry_id=entry.entry_id,
            identifiers={(DOMAIN, manifest.native_id)},
            name=manifest.name,
            manufacturer=MANUFACTURER,
            model=MODEL,
            configuration_url=f"http://{address}",
        )
        _LOGGER.debug(
            "Registered floodlight %s (%s) with interfaces %s",
            manifest.name,
            manifest.native_id,
            ", ".join(interface.value for interface in manifest.interfaces),
        )
