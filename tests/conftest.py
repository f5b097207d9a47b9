# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""Root conftest — shared sinks, clocks and settings isolation."""

import os
from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest


@pytest.fixture
def sink():
    """Mock message sink that records every delivered Geomessage."""
    mock = MagicMock()
    mock.sent = []
    mock.send_message.side_effect = mock.sent.append
    return mock


@pytest.fixture
def fixed_now():
    return datetime(2026, 3, 14, 15, 9, 26, tzinfo=timezone.utc)


@pytest.fixture
def fixed_clock(fixed_now):
    return lambda: fixed_now


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch, tmp_path):
    """Keep MILAPPS_* env vars and any local .env out of every test."""
    from militaryapps.config import get_settings

    for key in list(os.environ):
        if key.upper().startswith("MILAPPS_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
