"""Reveal timing policies expressed as lazy event schedules.

A schedule is an iterator of :class:`ScheduledEvent`. Each event's
``delay_ms`` is measured from the previous event (or from reveal start for
the first one), so a consumer only ever needs to wait, apply, and pull the
next item.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Sequence


class RevealPolicy(Enum):
    STAGGERED = "staggered"
    FLASH = "flash"


class EventKind(Enum):
    HIGHLIGHT_ON = "highlight_on"
    HIGHLIGHT_OFF = "highlight_off"
    REVEAL_DONE = "reveal_done"


@dataclass(frozen=True)
class ScheduledEvent:
    delay_ms: int
    kind: EventKind
    cell: Optional[int] = None


@dataclass(frozen=True)
class RevealTiming:
    """Delays driving the reveal phase.

    ``step_delay_ms`` and ``hold_ms`` apply to the staggered policy,
    ``flash_delay_ms`` to the flash policy.
    """

    policy: RevealPolicy = RevealPolicy.STAGGERED
    step_delay_ms: int = 100
    hold_ms: int = 2000
    flash_delay_ms: int = 400

    def __post_init__(self) -> None:
        for name in ("step_delay_ms", "hold_ms", "flash_delay_ms"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative")

    def total_ms(self, length: int) -> int:
        """Time from reveal start until input is accepted."""
        if self.policy is RevealPolicy.FLASH:
            return length * 2 * self.flash_delay_ms
        return length * self.step_delay_ms + self.hold_ms

    def schedule(self, path: Sequence[int]) -> Iterator[ScheduledEvent]:
        if self.policy is RevealPolicy.FLASH:
            return flash_schedule(path, self.flash_delay_ms)
        return staggered_schedule(path, self.step_delay_ms, self.hold_ms)


def staggered_schedule(path: Sequence[int], step_delay_ms: int, hold_ms: int) -> Iterator[ScheduledEvent]:
    """Light cell ``i`` at ``i * step``; clear everything at ``len * step + hold``."""
    for i, cell in enumerate(path):
        yield ScheduledEvent(0 if i == 0 else step_delay_ms, EventKind.HIGHLIGHT_ON, cell)
    # the last "on" fired at (len - 1) * step
    clear_delay = step_delay_ms + hold_ms if path else hold_ms
    for i, cell in enumerate(path):
        yield ScheduledEvent(clear_delay if i == 0 else 0, EventKind.HIGHLIGHT_OFF, cell)
    yield ScheduledEvent(0 if path else clear_delay, EventKind.REVEAL_DONE)


def flash_schedule(path: Sequence[int], flash_delay_ms: int) -> Iterator[ScheduledEvent]:
    """Flash each cell in turn: wait, on, wait, off."""
    for cell in path:
        yield ScheduledEvent(flash_delay_ms, EventKind.HIGHLIGHT_ON, cell)
        yield ScheduledEvent(flash_delay_ms, EventKind.HIGHLIGHT_OFF, cell)
    yield ScheduledEvent(0, EventKind.REVEAL_DONE)
