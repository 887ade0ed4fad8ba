"""Interfaces the library expects from its host platform."""
from __future__ import annotations

from typing import Any, Callable, Iterable, Optional, Protocol

from .models import DeviceManifest

DeviceEventNotifier = Callable[[str, Any], None]


class SettingsStore(Protocol):
    """Per-device key/value settings owned by the host."""

    def get_item(self, key: str) -> Optional[Any]:
        """Return the stored value or None."""

    def set_item(self, key: str, value: Any) -> None:
        """Persist a value."""


class DeviceHost(Protocol):
    """Host services used by the provider."""

    def native_ids(self) -> Iterable[str]:
        """Return the identifiers of every device the host already knows."""

    def storage_for(self, native_id: str) -> SettingsStore:
        """Return the settings store of one device."""

    def notifier_for(self, native_id: str) -> DeviceEventNotifier:
        """Return the change callback of one device."""

    async def async_on_device_discovered(self, manifest: DeviceManifest) -> None:
        """Register a device with the host."""


class MemorySettingsStore:
    """Settings store backed by a dict."""

    def __init__(self, initial: Optional[dict[str, Any]] = None) -> None:
        self._items: dict[str, Any] = dict(initial or {})

    def get_item(self, key: str) -> Optional[Any]:
        return self._items.get(key)

    def set_item(self, key: str, value: Any) -> None:
        self._items[key] = value
