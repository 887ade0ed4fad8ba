"""Fixtures for the Foscam floodlight tests."""
from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from pyfoscamfloodlight import (
    CgiSuccess,
    FoscamCgiClient,
    FoscamFloodlightDevice,
    MemorySettingsStore,
)

from .common import CONFIGURED, EventRecorder, dev_states, white_light


@pytest.fixture
def client() -> MagicMock:
    """A CGI client whose commands succeed unless a test says otherwise."""
    mock = MagicMock(spec=FoscamCgiClient)
    mock.get_white_light_brightness.return_value = white_light()
    mock.set_white_light_brightness.return_value = CgiSuccess(None)
    mock.get_hdr_mode.return_value = CgiSuccess(1)
    mock.set_hdr_mode.return_value = CgiSuccess(None)
    mock.get_dev_state.side_effect = dev_states(0)
    return mock


@pytest.fixture
def store() -> MemorySettingsStore:
    return MemorySettingsStore(CONFIGURED)


@pytest.fixture
def events() -> EventRecorder:
    return EventRecorder()


@pytest.fixture
def device(client, store, events) -> FoscamFloodlightDevice:
    return FoscamFloodlightDevice(
        "foscamfl:0011223344556677",
        client,
        store,
        events,
        poll_interval=0.01,
        reassert_delay=0.01,
    )
