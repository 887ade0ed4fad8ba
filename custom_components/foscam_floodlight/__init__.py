"""The Foscam Floodlight integration."""
from __future__ import annotations

import logging

from homeassistant.config_entries import ConfigEntry
from homeassistant.const import Platform
from homeassistant.core import HomeAssistant
from homeassistant.helpers import config_validation as cv
from homeassistant.helpers.aiohttp_client import async_get_clientsession
from homeassistant.helpers.typing import ConfigType

from pyfoscamfloodlight import FloodlightProvider, FoscamCgiClient

from .const import CONF_NATIVE_ID, DATA_PROVIDER, DOMAIN
from .coordinator import FloodlightCoordinator
from .host import HomeAssistantDeviceHost

_LOGGER = logging.getLogger(__name__)

PLATFORMS: list[Platform] = [Platform.LIGHT]

CONFIG_SCHEMA = cv.config_entry_only_config_schema(DOMAIN)


async def async_setup(hass: HomeAssistant, config: ConfigType) -> bool:
    """Create the provider and an adapter for every known floodlight."""
    provider = FloodlightProvider(
        HomeAssistantDeviceHost(hass), FoscamCgiClient(async_get_clientsession(hass))
    )
    provider.load_devices()
    hass.data.setdefault(DOMAIN, {})[DATA_PROVIDER] = provider
    return True


async def async_setup_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Set up a Foscam floodlight from a config entry."""
    provider: FloodlightProvider = hass.data[DOMAIN][DATA_PROVIDER]
    native_id = entry.data[CONF_NATIVE_ID]

    await provider.async_on_discovered(native_id, entry.title)
    coordinator = FloodlightCoordinator(hass, entry, provider.get_device(native_id))
    await coordinator.async_setup()

    try:
        await coordinator.async_config_entry_first_refresh()
    except Exception:
        await coordinator.async_unload()
        raise

    hass.data[DOMAIN][entry.entry_id] = coordinator

    await hass.config_entries.async_forward_entry_setups(entry, PLATFORMS)

    return True


async def async_unload_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Unload a config entry."""
    if unload_ok := await hass.config_entries.async_unload_platforms(entry, PLATFORMS):
        coordinator: FloodlightCoordinator = hass.data[DOMAIN].pop(entry.entry_id)
        await coordinator.async_unload()

    return unload_ok


async def async_remove_entry(hass: HomeAssistant, entry: ConfigEntry) -> None:
    """Forget the adapter of a deleted floodlight."""
    provider: FloodlightProvider | None = hass.data.get(DOMAIN, {}).get(DATA_PROVIDER)
    if provider is not None:
        await provider.async_remove_device(entry.data[CONF_NATIVE_ID])
    _LOGGER.debug("Removed floodlight %s", entry.title)
