"""Path generation: random walks and fixed straight lines over a grid."""

from __future__ import annotations

import logging
import random
from enum import Enum
from typing import Optional

from pathrecall.core.errors import InvalidGridConfig, InvalidLength
from pathrecall.core.grid import Grid

logger = logging.getLogger(__name__)

Path = tuple[int, ...]


class PathMode(Enum):
    RANDOM = "random"
    FIXED = "fixed"


class Direction(Enum):
    """Step direction for fixed paths as ``(row delta, col delta)``."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)


DEFAULT_ANCHOR = 133


class PathGenerator:
    """Builds the secret path for a round.

    ``RANDOM`` walks from a uniformly chosen start cell, picking a uniformly
    chosen neighbor each step; cells may repeat. ``FIXED`` walks in a straight
    line from ``anchor`` and is mostly useful for demos and tests.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        anchor: int = DEFAULT_ANCHOR,
        direction: Direction = Direction.UP,
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._anchor = anchor
        self._direction = direction

    @property
    def anchor(self) -> int:
        return self._anchor

    @property
    def direction(self) -> Direction:
        return self._direction

    def generate(self, grid: Grid, length: int, mode: PathMode = PathMode.RANDOM) -> Path:
        if length < 1:
            raise InvalidLength(f"path length must be at least 1, got {length}")
        if mode is PathMode.FIXED:
            return self._fixed(grid, length)
        return self._random_walk(grid, length)

    def fixed_capacity(self, grid: Grid) -> int:
        """Number of in-grid cells from the anchor along the direction, anchor included."""
        if not grid.contains(self._anchor):
            raise InvalidGridConfig(
                f"fixed anchor {self._anchor} is outside a {grid.size}x{grid.size} grid"
            )
        row, col = grid.row_col(self._anchor)
        d_row, d_col = self._direction.value
        if d_row < 0:
            return row + 1
        if d_row > 0:
            return grid.size - row
        if d_col < 0:
            return col + 1
        return grid.size - col

    def _fixed(self, grid: Grid, length: int) -> Path:
        capacity = self.fixed_capacity(grid)
        if length > capacity:
            raise InvalidLength(
                f"fixed path of length {length} leaves the grid; at most {capacity} "
                f"cells fit {self._direction.name.lower()} from {self._anchor}"
            )
        d_row, d_col = self._direction.value
        step = d_row * grid.size + d_col
        return tuple(self._anchor + i * step for i in range(length))

    def _random_walk(self, grid: Grid, length: int) -> Path:
        current = self._rng.randrange(grid.cell_count)
        path = [current]
        if length == 1:
            return tuple(path)
        if grid.cell_count == 1:
            raise InvalidLength("a 1x1 grid only admits paths of length 1")
        while len(path) < length:
            current = self._rng.choice(grid.neighbors(current))
            path.append(current)
        logger.debug("Generated random path of %d cells starting at %d", length, path[0])
        return tuple(path)
