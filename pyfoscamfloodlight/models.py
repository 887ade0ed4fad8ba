"""Data models for the Foscam floodlight library."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, Optional, TypeVar, Union

from .const import (
    CGI_PATH,
    DEFAULT_BRIGHTNESS,
    DEFAULT_LIGHT_INTERVAL,
    RESULT_MESSAGES,
)

T = TypeVar("T")


class FailureKind(str, Enum):
    """Why a CGI command produced no data."""

    TRANSPORT = "transport"
    PROTOCOL = "protocol"
    MALFORMED = "malformed"


class Interface(str, Enum):
    """Capabilities a device advertises to the host."""

    ON_OFF = "OnOff"
    BRIGHTNESS = "Brightness"
    SETTINGS = "Settings"


class DeviceType(str, Enum):
    """Device categories understood by the host."""

    LIGHT = "Light"


@dataclass(frozen=True)
class Credentials:
    """Address and login for one floodlight."""

    host: str
    username: str
    password: str

    @property
    def base_url(self) -> str:
        """Return the CGI endpoint url."""
        host = self.host
        for scheme in ("http://", "https://"):
            if host.startswith(scheme):
                host = host[len(scheme):]
        return f"http://{host.rstrip('/')}{CGI_PATH}"


@dataclass(frozen=True)
class CgiSuccess(Generic[T]):
    """A command answered with result code 0."""

    value: T


@dataclass(frozen=True)
class CgiFailure:
    """A command that produced no usable data."""

    kind: FailureKind
    code: Optional[int] = None
    detail: str = ""

    def __str__(self) -> str:
        if self.kind is FailureKind.PROTOCOL:
            message = RESULT_MESSAGES.get(self.code, "device error")
            return f"result {self.code} ({message})"
        return f"{self.kind.value} error: {self.detail}"


CgiResult = Union[CgiSuccess[T], CgiFailure]


@dataclass(frozen=True)
class WhiteLightReport:
    """Parsed getWhiteLightBrightness response."""

    enable: bool
    brightness: int
    light_interval: int


@dataclass(frozen=True)
class DevStateReport:
    """The parts of getDevState the workaround needs."""

    infra_led_state: int


@dataclass(frozen=True)
class FloodlightState:
    """Last known light state of a floodlight."""

    on: bool = False
    brightness: int = DEFAULT_BRIGHTNESS
    light_interval: int = DEFAULT_LIGHT_INTERVAL


@dataclass
class Setting:
    """One user-editable setting as shown by the host UI."""

    key: str
    title: str
    type: str = "string"
    description: Optional[str] = None
    placeholder: Optional[str] = None
    value: Any = None


@dataclass(frozen=True)
class DeviceManifest:
    """What the host needs to register a discovered device."""

    native_id: str
    name: str
    interfaces: tuple[Interface, ...] = field(default_factory=tuple)
    device_type: DeviceType = DeviceType.LIGHT
