"""Painted tile board that reports clicked cell indices."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt, QRectF, Signal
from PySide6.QtGui import QColor, QPainter, QPen
from PySide6.QtWidgets import QSizePolicy, QWidget

from pathrecall.core.grid import Grid
from pathrecall.ui.colors import GridColors, blend_hex, tile_color


class TileGridWidget(QWidget):
    """Square board of ``grid.size`` x ``grid.size`` rounded tiles."""

    tile_clicked = Signal(int)

    def __init__(self, grid: Grid, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._grid = grid
        self._highlights: dict[int, str] = {}
        self._hover: Optional[int] = None
        self._spacing = 4
        self.setMouseTracking(True)
        self.setCursor(Qt.PointingHandCursor)
        self.setMinimumSize(grid.size * 24, grid.size * 24)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)

    def set_highlight(self, index: int, highlight: str) -> None:
        self._highlights[index] = highlight
        self.update()

    def clear_highlight(self, index: int) -> None:
        if self._highlights.pop(index, None) is not None:
            self.update()

    def _board_rect(self) -> QRectF:
        side = min(self.width(), self.height())
        x = (self.width() - side) / 2
        y = (self.height() - side) / 2
        return QRectF(x, y, side, side)

    def _tile_at(self, x: float, y: float) -> Optional[int]:
        board = self._board_rect()
        if not board.contains(x, y):
            return None
        cell = board.width() / self._grid.size
        col = min(int((x - board.left()) // cell), self._grid.size - 1)
        row = min(int((y - board.top()) // cell), self._grid.size - 1)
        return self._grid.index_of(row, col)

    def mousePressEvent(self, event) -> None:
        if event.button() == Qt.LeftButton:
            pos = event.position()
            index = self._tile_at(pos.x(), pos.y())
            if index is not None:
                self.tile_clicked.emit(index)
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event) -> None:
        pos = event.position()
        index = self._tile_at(pos.x(), pos.y())
        if index != self._hover:
            self._hover = index
            self.update()
        super().mouseMoveEvent(event)

    def leaveEvent(self, event) -> None:
        self._hover = None
        self.update()
        super().leaveEvent(event)

    def paintEvent(self, event) -> None:
        super().paintEvent(event)
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing, True)

        board = self._board_rect()
        cell = board.width() / self._grid.size
        radius = max(2.0, cell * 0.18)
        for index in range(self._grid.cell_count):
            row, col = self._grid.row_col(index)
            rect = QRectF(
                board.left() + col * cell + self._spacing / 2,
                board.top() + row * cell + self._spacing / 2,
                cell - self._spacing,
                cell - self._spacing,
            )
            highlight = self._highlights.get(index)
            fill = tile_color(highlight)
            if highlight is None and index == self._hover:
                fill = GridColors.TILE_HOVER
            border = GridColors.TILE_BORDER if highlight is None else blend_hex(fill, "#000000", 0.25)
            painter.setBrush(QColor(fill))
            painter.setPen(QPen(QColor(border), 1))
            painter.drawRoundedRect(rect, radius, radius)
