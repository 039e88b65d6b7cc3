"""Shared fixtures for the game core tests."""

from __future__ import annotations

import random

import pytest

from pathrecall.core.grid import Grid
from pathrecall.core.scheduler import ManualScheduler
from pathrecall.core.session import Highlight, SessionListener, SessionPhase, Status


class RecordingListener(SessionListener):
    """Collects every notification as a tuple, in order."""

    def __init__(self) -> None:
        self.events: list[tuple] = []

    def highlight_on(self, index: int, highlight: Highlight) -> None:
        self.events.append(("on", index, highlight))

    def highlight_off(self, index: int) -> None:
        self.events.append(("off", index))

    def status_changed(self, status: Status) -> None:
        self.events.append(("status", status))

    def phase_changed(self, phase: SessionPhase) -> None:
        self.events.append(("phase", phase))

    def of_kind(self, kind: str) -> list[tuple]:
        return [e for e in self.events if e[0] == kind]


@pytest.fixture()
def grid() -> Grid:
    return Grid(12)


@pytest.fixture()
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture()
def listener() -> RecordingListener:
    return RecordingListener()


@pytest.fixture()
def rng() -> random.Random:
    return random.Random(1234)
