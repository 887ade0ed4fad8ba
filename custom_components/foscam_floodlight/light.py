"""Light platform for Foscam Floodlight."""
from __future__ import annotations

import logging
import math
from typing import Any

from homeassistant.components.light import ATTR_BRIGHTNESS, ColorMode, LightEntity
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback
from homeassistant.helpers.update_coordinator import CoordinatorEntity
from homeassistant.util.color import brightness_to_value, value_to_brightness

from .const import DOMAIN
from .coordinator import FloodlightCoordinator

_LOGGER = logging.getLogger(__name__)

# Device brightness range
BRIGHTNESS_SCALE = (1, 100)


async def async_setup_entry(
    hass: HomeAssistant,
    config_entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up the floodlight entity."""
    coordinator: FloodlightCoordinator = hass.data[DOMAIN][config_entry.entry_id]
    async_add_entities([FoscamFloodlightLight(coordinator)])


class FoscamFloodlightLight(CoordinatorEntity[FloodlightCoordinator], LightEntity):
    """The white light of a Foscam floodlight."""

    _attr_has_entity_name = True
    _attr_name = None
    _attr_color_mode = ColorMode.BRIGHTNESS
    _attr_supported_color_modes = {ColorMode.BRIGHTNESS}

    def __init__(self, coordinator: FloodlightCoordinator) -> None:
        """Initialize the light."""
        super().__init__(coordinator)
        self._device = coordinator.device
        self._attr_unique_id = coordinator.device.native_id

    @property
    def device_info(self):
        """Return device information."""
        return self.coordinator.device_info

    @property
    def is_on(self) -> bool:
        """Return true if the light is on."""
        return self._device.is_on

    @property
    def brightness(self) -> int:
        """Return the brightness on Home Assistant's 0-255 scale."""
        return value_to_brightness(BRIGHTNESS_SCALE, self._device.brightness)

    @property
    def extra_state_attributes(self) -> dict[str, Any]:
        """Return extra state attributes."""
        return {
            "light_interval": self._device.light_interval,
            "hdr_workaround": self._device.hdr_workaround_enabled,
        }

    async def async_turn_on(self, **kwargs: Any) -> None:
        """Turn the light on, optionally at a given brightness."""
        if ATTR_BRIGHTNESS in kwargs:
            level = math.ceil(
                brightness_to_value(BRIGHTNESS_SCALE, kwargs[ATTR_BRIGHTNESS])
            )
            success = await self._device.async_set_brightness(level)
        else:
            success = await self._device.async_turn_on()
        if not success:
            _LOGGER.warning("Floodlight %s did not turn on", self._device.host)

    async def async_turn_off(self, **kwargs: Any) -> None:
        """Turn the light off."""
        if not await self._device.async_turn_off():
            _LOGGER.warning("Floodlight %s did not turn off", self._device.host)
