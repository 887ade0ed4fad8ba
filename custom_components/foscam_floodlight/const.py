"""Constants for the Foscam Floodlight integration."""
from __future__ import annotations

from typing import Final

from pyfoscamfloodlight.const import (
    KEY_HOST,
    KEY_NAME,
    KEY_PASSWORD,
    KEY_USERNAME,
)

DOMAIN: Final = "foscam_floodlight"

# Configuration
CONF_NATIVE_ID: Final = "native_id"
CONF_HOST: Final = KEY_HOST
CONF_USERNAME: Final = KEY_USERNAME
CONF_PASSWORD: Final = KEY_PASSWORD
CONF_NAME: Final = KEY_NAME

# Default values
DEFAULT_SCAN_INTERVAL: Final = 30  # seconds

# hass.data keys
DATA_PROVIDER: Final = "provider"

# Dispatcher signal, formatted with the native id
SIGNAL_DEVICE_EVENT: Final = "foscam_floodlight_event_{}"

# Device info
MANUFACTURER: Final = "Foscam"
MODEL: Final = "Floodlight"
