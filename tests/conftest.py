"""Shared fixtures for remind tests."""

import os

import pytest
from loguru import logger

from core.domain.models import Duration


class RecordingNotifier:
    """Notifier that records every call instead of writing to a terminal."""

    def __init__(self):
        self.events = []

    def announce(self, delta: Duration) -> None:
        self.events.append(("announce", delta))

    def clear(self) -> None:
        self.events.append(("clear", None))

    def alert(self, message: str) -> None:
        self.events.append(("alert", message))


class StopLoop(Exception):
    """Raised by FakeSleep to break out of the endless alert loop."""


class FakeSleep:
    """Records requested sleeps; raises StopLoop after `limit` calls."""

    def __init__(self, limit=None):
        self.calls = []
        self.limit = limit

    def __call__(self, seconds):
        self.calls.append(seconds)
        if self.limit is not None and len(self.calls) >= self.limit:
            raise StopLoop()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Keep REMIND_* variables and a stray .env out of every test."""
    for key in list(os.environ):
        if key.upper().startswith("REMIND_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    yield tmp_path
    # Sinks added by the CLI point at streams the runner has already closed.
    logger.remove()


@pytest.fixture
def fake_sleep():
    """Factory: fake_sleep(limit=None) -> FakeSleep."""
    return FakeSleep


@pytest.fixture
def stop_loop():
    return StopLoop
