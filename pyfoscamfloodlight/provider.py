"""Registry mapping native ids to floodlight adapters."""
from __future__ import annotations

import logging
import secrets
from typing import Optional

from .client import FoscamCgiClient
from .const import DEFAULT_NAME, KEY_NAME, NATIVE_ID_PREFIX
from .device import FoscamFloodlightDevice
from .host import DeviceHost
from .models import DeviceManifest, DeviceType, Interface, Setting

_LOGGER = logging.getLogger(__name__)

FLOODLIGHT_INTERFACES = (Interface.ON_OFF, Interface.BRIGHTNESS, Interface.SETTINGS)


def generate_native_id() -> str:
    """Return a new random floodlight identifier."""
    return NATIVE_ID_PREFIX + secrets.token_hex(8)


def create_device_settings() -> list[Setting]:
    """Return the settings asked for when creating a floodlight."""
    return [Setting(key=KEY_NAME, title="Floodlight Name", placeholder=DEFAULT_NAME)]


class FloodlightProvider:
    """Create, cache and register floodlight adapters for a host."""

    def __init__(self, host: DeviceHost, client: FoscamCgiClient) -> None:
        """Initialize the provider."""
        self._host = host
        self._client = client
        self._devices: dict[str, FoscamFloodlightDevice] = {}

    @property
    def devices(self) -> dict[str, FoscamFloodlightDevice]:
        return dict(self._devices)

    def load_devices(self) -> None:
        """Create adapters for every device the host already knows."""
        for native_id in self._host.native_ids():
            if native_id:
                self.get_device(native_id)
        _LOGGER.debug("Loaded %d floodlight(s)", len(self._devices))

    def get_device(self, native_id: str) -> FoscamFloodlightDevice:
        """Return the adapter for native_id, creating it on first use."""
        device = self._devices.get(native_id)
        if device is None:
            device = FoscamFloodlightDevice(
                native_id,
                self._client,
                self._host.storage_for(native_id),
                self._host.notifier_for(native_id),
            )
            self._devices[native_id] = device
        return device

    def get_create_device_settings(self) -> list[Setting]:
        """Return the settings asked for when creating a floodlight.

        The Home Assistant config flow builds its form from
        create_device_settings() directly, before any provider exists.
        """
        return create_device_settings()

    async def async_create_device(self, name: Optional[str] = None) -> str:
        """Create a new identifier and announce it to the host.

        Home Assistant does not call this: its config flow generates the id
        and the device is registered through async_on_discovered at entry
        setup.
        """
        native_id = generate_native_id()
        await self.async_on_discovered(native_id, name or DEFAULT_NAME)
        return native_id

    async def async_on_discovered(self, native_id: str, name: str) -> None:
        """Register a floodlight with the host."""
        manifest = DeviceManifest(
            native_id=native_id,
            name=name,
            interfaces=FLOODLIGHT_INTERFACES,
            device_type=DeviceType.LIGHT,
        )
        await self._host.async_on_device_discovered(manifest)

    async def async_remove_device(self, native_id: str) -> None:
        """Stop and forget an adapter."""
        device = self._devices.pop(native_id, None)
        if device is not None:
            await device.async_shutdown()
