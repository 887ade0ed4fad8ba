"""Helpers shared by the floodlight tests."""
from __future__ import annotations

import asyncio
from typing import Any, Callable

from pyfoscamfloodlight import CgiFailure, CgiSuccess, FailureKind
from pyfoscamfloodlight.const import KEY_HOST, KEY_PASSWORD, KEY_USERNAME
from pyfoscamfloodlight.models import DevStateReport, WhiteLightReport

CONFIGURED = {
    KEY_HOST: "192.168.0.100:88",
    KEY_USERNAME: "admin",
    KEY_PASSWORD: "secret",
}


def white_light(enable: bool = True, brightness: int = 80, interval: int = 60):
    """Build a successful getWhiteLightBrightness result."""
    return CgiSuccess(WhiteLightReport(enable, brightness, interval))


def protocol_failure(code: int = -4) -> CgiFailure:
    return CgiFailure(FailureKind.PROTOCOL, code=code)


def transport_failure() -> CgiFailure:
    return CgiFailure(FailureKind.TRANSPORT, detail="connection refused")


def dev_states(*values: int) -> Callable[..., Any]:
    """Side effect yielding infraLedState values, repeating the last one."""
    remaining = list(values)

    async def _next(credentials):
        value = remaining.pop(0) if len(remaining) > 1 else remaining[0]
        return CgiSuccess(DevStateReport(infra_led_state=value))

    return _next


async def wait_until(predicate: Callable[[], bool], timeout: float = 2.0) -> None:
    """Yield to the loop until predicate holds."""
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout
    while not predicate():
        if loop.time() > deadline:
            raise AssertionError("condition not reached in time")
        await asyncio.sleep(0.005)


class EventRecorder:
    """Collect device events."""

    def __init__(self) -> None:
        self.events: list[tuple[str, Any]] = []

    def __call__(self, event: str, value: Any) -> None:
        self.events.append((event, value))

    def of(self, event: str) -> list[Any]:
        return [value for name, value in self.events if name == event]

