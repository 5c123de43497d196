"""Shared fixtures."""

import time

import pytest


@pytest.fixture
def tokyo_tz(monkeypatch):
    """Pin the local zone to UTC+9 (no DST) for the duration of a test."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    monkeypatch.setenv("TZ", "Asia/Tokyo")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()
