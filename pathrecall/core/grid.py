from __future__ import annotations

from dataclasses import dataclass

from pathrecall.core.errors import InvalidGridConfig


@dataclass(frozen=True)
class Grid:
    """Square board of ``size`` x ``size`` cells addressed by linear index."""

    size: int

    def __post_init__(self) -> None:
        if not isinstance(self.size, int) or self.size <= 0:
            raise InvalidGridConfig(f"grid size must be a positive integer, got {self.size!r}")

    @property
    def cell_count(self) -> int:
        return self.size * self.size

    def contains(self, index: int) -> bool:
        return 0 <= index < self.cell_count

    def row_col(self, index: int) -> tuple[int, int]:
        """Return ``(row, col)`` for a linear cell index."""
        return index // self.size, index % self.size

    def index_of(self, row: int, col: int) -> int:
        return row * self.size + col

    def neighbors(self, index: int) -> list[int]:
        """Cells one step up, down, left or right of *index*, in that order."""
        row, col = self.row_col(index)
        result: list[int] = []
        if row > 0:
            result.append(index - self.size)
        if row < self.size - 1:
            result.append(index + self.size)
        if col > 0:
            result.append(index - 1)
        if col < self.size - 1:
            result.append(index + 1)
        return result

    def is_adjacent(self, a: int, b: int) -> bool:
        if not (self.contains(a) and self.contains(b)):
            return False
        ra, ca = self.row_col(a)
        rb, cb = self.row_col(b)
        return abs(ra - rb) + abs(ca - cb) == 1
