"""Command facade tying path generation to a game session."""

from __future__ import annotations

import logging
import random
from typing import Optional

from pathrecall.core.config import GameConfig
from pathrecall.core.grid import Grid
from pathrecall.core.path_generator import Path, PathGenerator, PathMode
from pathrecall.core.scheduler import Scheduler
from pathrecall.core.session import GameSession, SessionListener, SessionPhase

logger = logging.getLogger(__name__)


class MemoryGame:
    def __init__(
        self,
        config: GameConfig,
        scheduler: Scheduler,
        listener: Optional[SessionListener] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._config = config
        self._grid = Grid(config.grid_size)
        self._generator = PathGenerator(
            rng=rng,
            anchor=config.fixed_anchor,
            direction=config.fixed_direction,
        )
        self._session = GameSession(
            self._grid,
            scheduler,
            listener=listener,
            timing=config.reveal_timing(),
            restart_policy=config.restart_policy,
            wrong_clear_ms=config.wrong_clear_ms,
        )

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def session(self) -> GameSession:
        return self._session

    @property
    def phase(self) -> SessionPhase:
        return self._session.phase

    @property
    def progress(self) -> tuple[int, ...]:
        return self._session.progress

    def start(self, length: Optional[int] = None, mode: PathMode = PathMode.RANDOM) -> Path:
        """Generate a path and begin revealing it. Returns the new path."""
        if length is None:
            length = self._config.default_length
        path = self._generator.generate(self._grid, length, mode)
        logger.debug("Starting %s round of length %d", mode.value, length)
        self._session.start(path)
        return path

    def tile_click(self, index: int) -> None:
        self._session.tile_click(index)
