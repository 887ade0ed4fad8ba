"""Control Foscam floodlight accessories over the CGIProxy interface."""
from .client import FoscamCgiClient, parse_cgi_response
from .device import FoscamFloodlightDevice, floodlight_settings
from .exceptions import FoscamError, MalformedResponseError
from .host import DeviceEventNotifier, DeviceHost, MemorySettingsStore, SettingsStore
from .models import (
    CgiFailure,
    CgiResult,
    CgiSuccess,
    Credentials,
    DeviceManifest,
    DeviceType,
    FailureKind,
    FloodlightState,
    Interface,
    Setting,
)
from .provider import FloodlightProvider, create_device_settings, generate_native_id
from .workaround import HdrModeWorkaround

__version__ = "0.1.0"

__all__ = [
    "CgiFailure",
    "CgiResult",
    "CgiSuccess",
    "Credentials",
    "DeviceEventNotifier",
    "DeviceHost",
    "DeviceManifest",
    "DeviceType",
    "FailureKind",
    "FloodlightProvider",
    "FloodlightState",
    "FoscamCgiClient",
    "FoscamError",
    "FoscamFloodlightDevice",
    "HdrModeWorkaround",
    "Interface",
    "MalformedResponseError",
    "MemorySettingsStore",
    "Setting",
    "SettingsStore",
    "create_device_settings",
    "floodlight_settings",
    "generate_native_id",
    "parse_cgi_response",
]
