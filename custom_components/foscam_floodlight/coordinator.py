"""Data update coordinator for Foscam floodlights."""
from __future__ import annotations

import logging
from datetime import timedelta
from typing import Any, Callable

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant, callback
from homeassistant.helpers.device_registry import DeviceInfo
from homeassistant.helpers.dispatcher import async_dispatcher_connect
from homeassistant.helpers.update_coordinator import DataUpdateCoordinator, UpdateFailed

from pyfoscamfloodlight import FloodlightState, FoscamFloodlightDevice

from .const import (
    DEFAULT_SCAN_INTERVAL,
    DOMAIN,
    MANUFACTURER,
    MODEL,
    SIGNAL_DEVICE_EVENT,
)

_LOGGER = logging.getLogger(__name__)


class FloodlightCoordinator(DataUpdateCoordinator[FloodlightState]):
    """Poll one floodlight and relay its change events to entities."""

    def __init__(
        self, hass: HomeAssistant, entry: ConfigEntry, device: FoscamFloodlightDevice
    ) -> None:
        """Initialize the coordinator."""
        self.entry = entry
        self.device = device
        self._unsub_dispatcher: Callable[[], None] | None = None

        super().__init__(
            hass,
            _LOGGER,
            config_entry=entry,
            name=f"{DOMAIN}_{device.native_id}",
            update_interval=timedelta(seconds=DEFAULT_SCAN_INTERVAL),
        )

    async def async_setup(self) -> None:
        """Subscribe to device events."""
        self._unsub_dispatcher = async_dispatcher_connect(
            self.hass,
            SIGNAL_DEVICE_EVENT.format(self.device.native_id),
            self._handle_device_event,
        )

    @callback
    def _handle_device_event(self, event: str, value: Any) -> None:
        """Push a state or settings change to the entities."""
        _LOGGER.debug("%s: %s -> %s", self.device.native_id, event, value)
        self.async_update_listeners()

    async def _async_update_data(self) -> FloodlightState:
        """Refresh the light state from the device."""
        if not await self.device.async_update_state():
            raise UpdateFailed(
                f"Error communicating with floodlight {self.device.host}"
            )
        return self.device.state

    async def async_unload(self) -> None:
        """Unsubscribe and stop the device's background work."""
        if self._unsub_dispatcher is not None:
            self._unsub_dispatcher()
            self._unsub_dispatcher = None
        await self.device.async_shutdown()

    @property
    def device_info(self) -> DeviceInfo:
        """Return device information."""
        return DeviceInfo(
            identifiers={(DOMAIN, self.device.native_id)},
            name=self.entry.title,
            manufacturer=MANUFACTURER,
            model=MODEL,
            configuration_url=f"http://{self.device.host}",
        )
