from __future__ import annotations

import logging
from enum import Enum
from typing import Iterator, Optional, Sequence

from pathrecall.core.errors import IllegalTransition, InvalidLength, InvalidPath
from pathrecall.core.grid import Grid
from pathrecall.core.schedule import EventKind, RevealTiming, ScheduledEvent
from pathrecall.core.scheduler import Scheduler

logger = logging.getLogger(__name__)


class SessionPhase(Enum):
    IDLE = "idle"
    REVEALING = "revealing"
    AWAITING_INPUT = "awaiting_input"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class Highlight(Enum):
    ACTIVE = "active"
    CORRECT = "correct"
    WRONG = "wrong"


class Status(Enum):
    MEMORIZE = "Memorize the sequence..."
    YOUR_TURN = "Your turn! Replicate the sequence."
    COMPLETE = "Perfect! Level Complete."
    GAME_OVER = "Incorrect! Press Start to try again."

    @property
    def text(self) -> str:
        return self.value


class RestartPolicy(Enum):
    """What ``start`` does while a round is still in progress."""

    REJECT = "reject"
    RESET = "reset"


class SessionListener:
    """Receives notifications from a :class:`GameSession`.

    The default implementation ignores everything; subclasses override what
    they render.
    """

    def highlight_on(self, index: int, highlight: Highlight) -> None:
        pass

    def highlight_off(self, index: int) -> None:
        pass

    def status_changed(self, status: Status) -> None:
        pass

    def phase_changed(self, phase: SessionPhase) -> None:
        pass


_STARTABLE = (SessionPhase.IDLE, SessionPhase.SUCCEEDED, SessionPhase.FAILED)


class GameSession:
    """Turn-based state machine for one player on one grid.

    Each ``start`` opens a new round: the path is revealed through the
    scheduler, then clicks are compared against it until the round either
    succeeds or fails. Every scheduled callback is tagged with the round it
    belongs to and is dropped once a newer round has started.
    """

    def __init__(
        self,
        grid: Grid,
        scheduler: Scheduler,
        listener: Optional[SessionListener] = None,
        timing: Optional[RevealTiming] = None,
        restart_policy: RestartPolicy = RestartPolicy.REJECT,
        wrong_clear_ms: int = 0,
    ) -> None:
        self._grid = grid
        self._scheduler = scheduler
        self._listener = listener if listener is not None else SessionListener()
        self._timing = timing if timing is not None else RevealTiming()
        self._restart_policy = restart_policy
        self._wrong_clear_ms = wrong_clear_ms
        self._phase = SessionPhase.IDLE
        self._path: tuple[int, ...] = ()
        self._progress: list[int] = []
        self._lit: dict[int, Highlight] = {}
        self._round = 0

    @property
    def phase(self) -> SessionPhase:
        return self._phase

    @property
    def path(self) -> tuple[int, ...]:
        return self._path

    @property
    def progress(self) -> tuple[int, ...]:
        """Cells clicked correctly so far in the current round."""
        return tuple(self._progress)

    @property
    def round(self) -> int:
        """Identity of the current round; 0 before the first ``start``."""
        return self._round

    @property
    def timing(self) -> RevealTiming:
        return self._timing

    @property
    def lit_cells(self) -> dict[int, Highlight]:
        return dict(self._lit)

    def start(self, path: Sequence[int]) -> None:
        """Begin a new round with *path* and start revealing it."""
        path = tuple(path)
        if not path:
            raise InvalidLength("cannot start a round with an empty path")
        outside = [cell for cell in path if not self._grid.contains(cell)]
        if outside:
            raise InvalidPath(f"cells {outside} are outside a {self._grid.size}x{self._grid.size} grid")
        if self._phase not in _STARTABLE:
            if self._restart_policy is RestartPolicy.REJECT:
                raise IllegalTransition(f"cannot start a new round while {self._phase.value}")
            logger.info("Abandoning round %d while %s", self._round, self._phase.value)

        self._round += 1
        self._clear_highlights()
        self._path = path
        self._progress = []
        logger.info("Round %d started with a %d-cell path", self._round, len(path))
        self._set_phase(SessionPhase.REVEALING)
        self._listener.status_changed(Status.MEMORIZE)
        self._schedule_next(self._round, self._timing.schedule(path))

    def tile_click(self, index: int) -> None:
        """Handle a click on cell *index*; ignored outside the input phase."""
        if self._phase is not SessionPhase.AWAITING_INPUT:
            return
        if not self._grid.contains(index):
            return

        expected = self._path[len(self._progress)]
        if index == expected:
            self._progress.append(index)
            self._light(index, Highlight.CORRECT)
            if len(self._progress) == len(self._path):
                self._set_phase(SessionPhase.SUCCEEDED)
                self._listener.status_changed(Status.COMPLETE)
            return

        self._light(index, Highlight.WRONG)
        self._progress = []
        self._set_phase(SessionPhase.FAILED)
        self._listener.status_changed(Status.GAME_OVER)
        if self._wrong_clear_ms > 0:
            round_id = self._round
            self._scheduler.call_later(
                self._wrong_clear_ms, lambda: self._clear_wrong(round_id, index)
            )

    # -- reveal loop ------------------------------------------------------

    def _schedule_next(self, round_id: int, events: Iterator[ScheduledEvent]) -> None:
        event = next(events, None)
        if event is None:
            return
        self._scheduler.call_later(event.delay_ms, lambda: self._fire(round_id, event, events))

    def _fire(self, round_id: int, event: ScheduledEvent, events: Iterator[ScheduledEvent]) -> None:
        if round_id != self._round:
            logger.debug("Dropping stale %s from round %d", event.kind.value, round_id)
            return
        if event.kind is EventKind.HIGHLIGHT_ON:
            self._light(event.cell, Highlight.ACTIVE)
        elif event.kind is EventKind.HIGHLIGHT_OFF:
            self._unlight(event.cell)
        elif event.kind is EventKind.REVEAL_DONE:
            self._set_phase(SessionPhase.AWAITING_INPUT)
            self._listener.status_changed(Status.YOUR_TURN)
        self._schedule_next(round_id, events)

    # -- helpers ----------------------------------------------------------

    def _set_phase(self, phase: SessionPhase) -> None:
        logger.debug("Round %d: %s -> %s", self._round, self._phase.value, phase.value)
        self._phase = phase
        self._listener.phase_changed(phase)

    def _light(self, index: int, highlight: Highlight) -> None:
        self._lit[index] = highlight
        self._listener.highlight_on(index, highlight)

    def _unlight(self, index: int) -> None:
        if self._lit.pop(index, None) is not None:
            self._listener.highlight_off(index)

    def _clear_highlights(self) -> None:
        for index in list(self._lit):
            self._unlight(index)

    def _clear_wrong(self, round_id: int, index: int) -> None:
        if round_id != self._round:
            return
        if self._lit.get(index) is Highlight.WRONG:
            self._unlight(index)
