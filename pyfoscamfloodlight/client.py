"""HTTP client for the Foscam CGIProxy command interface."""
from __future__ import annotations

import asyncio
import logging
import xml.etree.ElementTree as ET
from typing import Any, Callable

import aiohttp
import async_timeout

from .const import (
    CGI_ROOT_TAG,
    CMD_GET_DEV_STATE,
    CMD_GET_HDR_MODE,
    CMD_GET_WHITE_LIGHT_BRIGHTNESS,
    CMD_SET_HDR_MODE,
    CMD_SET_WHITE_LIGHT_BRIGHTNESS,
    REQUEST_TIMEOUT,
    RESULT_SUCCESS,
)
from .exceptions import MalformedResponseError
from .models import (
    CgiFailure,
    CgiResult,
    CgiSuccess,
    Credentials,
    DevStateReport,
    FailureKind,
    WhiteLightReport,
)

_LOGGER = logging.getLogger(__name__)


def parse_cgi_response(text: str) -> tuple[int, dict[str, str]]:
    """Parse a CGI_Result document into its result code and child fields.

    Raises MalformedResponseError when the body is not XML, has no
    CGI_Result element, or carries a result that is not an integer.
    """
    try:
        root = ET.fromstring(text.strip())
    except ET.ParseError as err:
        raise MalformedResponseError(f"invalid XML: {err}") from err

    if root.tag != CGI_ROOT_TAG:
        root = root.find(f".//{CGI_ROOT_TAG}")
        if root is None:
            raise MalformedResponseError(f"missing {CGI_ROOT_TAG} element")

    fields = {child.tag: (child.text or "").strip() for child in root}
    if "result" not in fields:
        raise MalformedResponseError("missing result element")

    return int_field(fields, "result"), fields


def int_field(fields: dict[str, str], name: str) -> int:
    """Return a field as int or raise MalformedResponseError."""
    try:
        return int(fields[name], 10)
    except KeyError as err:
        raise MalformedResponseError(f"missing field {name}") from err
    except ValueError as err:
        raise MalformedResponseError(
            f"field {name} is not an integer: {fields[name]!r}"
        ) from err


def _parse_white_light(fields: dict[str, str]) -> WhiteLightReport:
    return WhiteLightReport(
        enable=int_field(fields, "enable") == 1,
        brightness=int_field(fields, "brightness"),
        light_interval=int_field(fields, "lightinterval"),
    )


def _parse_hdr_mode(fields: dict[str, str]) -> int:
    return int_field(fields, "mode")


def _parse_dev_state(fields: dict[str, str]) -> DevStateReport:
    return DevStateReport(infra_led_state=int_field(fields, "infraLedState"))


def _parse_ack(fields: dict[str, str]) -> None:
    return None


class FoscamCgiClient:
    """Issue CGI commands against a Foscam device.

    The client holds no credentials; every call takes them so a settings
    change applies to the next request. Failures are returned as
    CgiFailure and logged, never raised.
    """

    def __init__(
        self, session: aiohttp.ClientSession, timeout: float = REQUEST_TIMEOUT
    ) -> None:
        """Initialize the client."""
        self._session = session
        self._timeout = timeout

    async def async_command(
        self,
        credentials: Credentials,
        command: str,
        parser: Callable[[dict[str, str]], Any],
        **params: Any,
    ) -> CgiResult:
        """Send one command and parse the answer with parser."""
        query = {
            "cmd": command,
            "usr": credentials.username,
            "pwd": credentials.password,
        }
        query.update({key: str(value) for key, value in params.items()})

        try:
            async with async_timeout.timeout(self._timeout):
                async with self._session.get(
                    credentials.base_url, params=query
                ) as response:
                    if response.status != 200:
                        failure = CgiFailure(
                            FailureKind.TRANSPORT, detail=f"HTTP {response.status}"
                        )
                        _LOGGER.warning(
                            "IP: %s %s: %s", credentials.host, command, failure
                        )
                        return failure
                    text = await response.text()
        except asyncio.TimeoutError:
            failure = CgiFailure(FailureKind.TRANSPORT, detail="timed out")
            _LOGGER.warning("IP: %s %s: %s", credentials.host, command, failure)
            return failure
        except aiohttp.ClientError as err:
            failure = CgiFailure(FailureKind.TRANSPORT, detail=str(err))
            _LOGGER.warning("IP: %s %s: %s", credentials.host, command, failure)
            return failure
        except (UnicodeDecodeError, LookupError) as err:
            failure = CgiFailure(FailureKind.MALFORMED, detail=f"undecodable body: {err}")
            _LOGGER.warning("IP: %s %s: %s", credentials.host, command, failure)
            return failure

        _LOGGER.debug("IP: %s %s: %s", credentials.host, command, text)

        try:
            code, fields = parse_cgi_response(text)
            if code != RESULT_SUCCESS:
                failure = CgiFailure(FailureKind.PROTOCOL, code=code)
                _LOGGER.warning("IP: %s %s: %s", credentials.host, command, failure)
                return failure
            return CgiSuccess(parser(fields))
        except MalformedResponseError as err:
            failure = CgiFailure(FailureKind.MALFORMED, detail=str(err))
            _LOGGER.warning("IP: %s %s: %s", credentials.host, command, failure)
            return failure

    async def get_white_light_brightness(
        self, credentials: Credentials
    ) -> CgiResult[WhiteLightReport]:
        """Read the white light state."""
        return await self.async_command(
            credentials, CMD_GET_WHITE_LIGHT_BRIGHTNESS, _parse_white_light
        )

    async def set_white_light_brightness(
        self,
        credentials: Credentials,
        enable: bool,
        brightness: int,
        light_interval: int,
    ) -> CgiResult[None]:
        """Switch the white light and set its brightness."""
        return await self.async_command(
            credentials,
            CMD_SET_WHITE_LIGHT_BRIGHTNESS,
            _parse_ack,
            enable=1 if enable else 0,
            brightness=brightness,
            lightinterval=light_interval,
        )

    async def get_hdr_mode(self, credentials: Credentials) -> CgiResult[int]:
        """Read the HDR mode."""
        return await self.async_command(credentials, CMD_GET_HDR_MODE, _parse_hdr_mode)

    async def set_hdr_mode(self, credentials: Credentials, mode: int) -> CgiResult[None]:
        """Write the HDR mode."""
        return await self.async_command(
            credentials, CMD_SET_HDR_MODE, _parse_ack, mode=mode
        )

    async def get_dev_state(
        self, credentials: Credentials
    ) -> CgiResult[DevStateReport]:
        """Read the device state."""
        return await self.async_command(
            credentials, CMD_GET_DEV_STATE, _parse_dev_state
        )
