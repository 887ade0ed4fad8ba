"""Re-apply HDR mode after the infra-red LEDs switch.

Some floodlight firmware drops HDR whenever the night vision LEDs turn on
or off. While enabled, this loop watches ``infraLedState`` and, on every
transition, writes HDR mode back if the camera still reports it as on.
"""
from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import Callable, Optional

from .client import FoscamCgiClient
from .const import HDR_MODE_ON, WORKAROUND_POLL_INTERVAL, WORKAROUND_REASSERT_DELAY
from .models import CgiFailure, Credentials

_LOGGER = logging.getLogger(__name__)


class HdrModeWorkaround:
    """Background poll loop bound to one floodlight."""

    def __init__(
        self,
        client: FoscamCgiClient,
        get_credentials: Callable[[], Optional[Credentials]],
        is_enabled: Callable[[], bool],
        poll_interval: float = WORKAROUND_POLL_INTERVAL,
        reassert_delay: float = WORKAROUND_REASSERT_DELAY,
        name: str = "",
    ) -> None:
        """Initialize the loop in the idle state."""
        self._client = client
        self._get_credentials = get_credentials
        self._is_enabled = is_enabled
        self._poll_interval = poll_interval
        self._reassert_delay = reassert_delay
        self._name = name
        self._task: Optional[asyncio.Task] = None
        self._infra_led_state: Optional[int] = None

    @property
    def running(self) -> bool:
        """Return True while the loop task is alive."""
        return self._task is not None and not self._task.done()

    @property
    def infra_led_state(self) -> Optional[int]:
        """Return the last observed infraLedState."""
        return self._infra_led_state

    def start(self) -> None:
        """Start polling unless already running."""
        if self.running:
            return
        _LOGGER.debug("%s: starting HDR workaround loop", self._name)
        self._infra_led_state = None
        self._task = asyncio.get_running_loop().create_task(self._async_run())

    async def async_stop(self) -> None:
        """Stop polling and wait for the loop to finish."""
        task, self._task = self._task, None
        if task is None or task.done():
            return
        _LOGGER.debug("%s: stopping HDR workaround loop", self._name)
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task

    async def _async_run(self) -> None:
        while self._is_enabled():
            credentials = self._get_credentials()
            if credentials is not None:
                try:
                    await self._async_check_transition(credentials)
                except Exception:  # pylint: disable=broad-except
                    _LOGGER.exception(
                        "%s: HDR workaround check failed, retrying next tick",
                        self._name,
                    )
            await asyncio.sleep(self._poll_interval)
        _LOGGER.debug("%s: HDR workaround disabled, loop exited", self._name)

    async def _async_check_transition(self, credentials: Credentials) -> None:
        result = await self._client.get_dev_state(credentials)
        if isinstance(result, CgiFailure):
            return

        current = result.value.infra_led_state
        previous, self._infra_led_state = self._infra_led_state, current
        if previous is None or previous == current:
            return

        _LOGGER.debug(
            "%s: infraLedState changed %s -> %s", self._name, previous, current
        )
        mode = await self._client.get_hdr_mode(credentials)
        if isinstance(mode, CgiFailure) or mode.value != HDR_MODE_ON:
            return

        # Firmware resets HDR shortly after the switch; write it after that.
        await asyncio.sleep(self._reassert_delay)
        ack = await self._client.set_hdr_mode(credentials, HDR_MODE_ON)
        if isinstance(ack, CgiFailure):
            _LOGGER.warning("%s: could not re-apply HDR mode: %s", self._name, ack)
        else:
            _LOGGER.info("%s: HDR mode re-applied", self._name)
