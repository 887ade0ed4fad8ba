"""Constants for the Foscam floodlight library."""
from __future__ import annotations

from typing import Final

# CGI endpoint
CGI_PATH: Final = "/cgi-bin/CGIProxy.fcgi"
CGI_ROOT_TAG: Final = "CGI_Result"

# CGI commands
CMD_GET_WHITE_LIGHT_BRIGHTNESS: Final = "getWhiteLightBrightness"
CMD_SET_WHITE_LIGHT_BRIGHTNESS: Final = "setWhiteLightBrightness"
CMD_GET_HDR_MODE: Final = "getHdrMode"
CMD_SET_HDR_MODE: Final = "setHdrMode"
CMD_GET_DEV_STATE: Final = "getDevState"

# Result codes
RESULT_SUCCESS: Final = 0
RESULT_BAD_CREDENTIALS: Final = -2
RESULT_ACCESS_DENIED: Final = -3
RESULT_MESSAGES: Final = {
    -1: "CGI request string format error",
    -2: "username or password error",
    -3: "access denied",
    -4: "CGI execute failed",
    -5: "timeout",
    -7: "unknown error",
}

HDR_MODE_ON: Final = 1

# Setting keys
KEY_HOST: Final = "host"
KEY_USERNAME: Final = "username"
KEY_PASSWORD: Final = "password"
KEY_HDR_WORKAROUND: Final = "hdr_workaround"
KEY_NAME: Final = "name"

SETTING_KEYS: Final = (KEY_HOST, KEY_USERNAME, KEY_PASSWORD, KEY_HDR_WORKAROUND)

# Device events sent to the host
EVENT_ON_OFF: Final = "on_off"
EVENT_BRIGHTNESS: Final = "brightness"
EVENT_SETTINGS: Final = "settings"

# Defaults
DEFAULT_BRIGHTNESS: Final = 100
DEFAULT_LIGHT_INTERVAL: Final = 60
DEFAULT_NAME: Final = "Floodlight"
NATIVE_ID_PREFIX: Final = "foscamfl:"

# Timing (seconds)
REQUEST_TIMEOUT: Final = 10
WORKAROUND_POLL_INTERVAL: Final = 2.0
WORKAROUND_REASSERT_DELAY: Final = 2.0
