"""Qt adapters for the game core: timers and signals."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QObject, QTimer, Signal

from pathrecall.core.scheduler import Callback
from pathrecall.core.session import Highlight, SessionListener, SessionPhase, Status


class QtScheduler:
    """Runs core callbacks on the Qt event loop."""

    def call_later(self, delay_ms: int, callback: Callback) -> None:
        QTimer.singleShot(max(0, int(delay_ms)), callback)


class SessionSignals(QObject):
    """Session notifications re-emitted as Qt signals (enum values as str)."""

    highlight_on = Signal(int, str)
    highlight_off = Signal(int)
    status_changed = Signal(str)
    phase_changed = Signal(str)


class SignalListener(SessionListener):
    def __init__(self, parent: Optional[QObject] = None) -> None:
        self.signals = SessionSignals(parent)

    def highlight_on(self, index: int, highlight: Highlight) -> None:
        self.signals.highlight_on.emit(index, highlight.value)

    def highlight_off(self, index: int) -> None:
        self.signals.highlight_off.emit(index)

    def status_changed(self, status: Status) -> None:
        self.signals.status_changed.emit(status.text)

    def phase_changed(self, phase: SessionPhase) -> None:
        self.signals.phase_changed.emit(phase.value)
