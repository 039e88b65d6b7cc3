from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QKeySequence, QShortcut
from PySide6.QtWidgets import (
    QComboBox,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QSlider,
    QVBoxLayout,
    QWidget,
)

from pathrecall.core.config import GameConfig, coerce_length
from pathrecall.core.errors import PathRecallError
from pathrecall.core.game import MemoryGame
from pathrecall.core.path_generator import PathMode
from pathrecall.core.session import SessionPhase
from pathrecall.ui.bridge import QtScheduler, SignalListener
from pathrecall.ui.colors import GridColors
from pathrecall.ui.grid_widget import TileGridWidget

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Board, status line and round controls."""

    def __init__(self, config: GameConfig) -> None:
        super().__init__()
        self.setWindowTitle("Path Recall")
        self._config = config
        self._listener = SignalListener(self)
        self._game = MemoryGame(config, QtScheduler(), listener=self._listener)

        self._grid_widget: Optional[TileGridWidget] = None
        self._status_label: Optional[QLabel] = None
        self._length_slider: Optional[QSlider] = None
        self._length_value: Optional[QLabel] = None
        self._mode_combo: Optional[QComboBox] = None
        self._start_button: Optional[QPushButton] = None

        self._build_ui()
        self._connect_signals()
        QTimer.singleShot(0, self._center_board)

    def _build_ui(self) -> None:
        root = QWidget()
        root.setObjectName("root")
        layout = QVBoxLayout(root)
        layout.setContentsMargins(24, 20, 24, 20)
        layout.setSpacing(14)

        self._status_label = QLabel("Press Start to play.")
        self._status_label.setObjectName("status")
        self._status_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self._status_label)

        self._grid_widget = TileGridWidget(self._game.grid)
        layout.addWidget(self._grid_widget, 1)

        controls = QHBoxLayout()
        controls.setSpacing(10)

        controls.addWidget(QLabel("Length"))
        self._length_slider = QSlider(Qt.Horizontal)
        self._length_slider.setRange(self._config.min_length, self._config.max_length)
        self._length_slider.setValue(self._config.default_length)
        controls.addWidget(self._length_slider, 1)

        self._length_value = QLabel(str(self._config.default_length))
        self._length_value.setMinimumWidth(28)
        controls.addWidget(self._length_value)

        self._mode_combo = QComboBox()
        for mode in PathMode:
            self._mode_combo.addItem(mode.value.capitalize(), mode)
        controls.addWidget(self._mode_combo)

        self._start_button = QPushButton("Start")
        self._start_button.setObjectName("startButton")
        self._start_button.setCursor(Qt.PointingHandCursor)
        controls.addWidget(self._start_button)

        layout.addLayout(controls)
        self.setCentralWidget(root)

        self.setStyleSheet(
            f"""
            QWidget#root {{
                background: qlineargradient(x1:0, y1:0, x2:0, y2:1,
                    stop:0 {GridColors.BG_TOP}, stop:1 {GridColors.BG_BOTTOM});
            }}
            QLabel {{
                color: {GridColors.TEXT_SECONDARY};
                font-size: 14px;
            }}
            QLabel#status {{
                color: {GridColors.TEXT_PRIMARY};
                font-size: 20px;
                font-weight: 700;
            }}
            QPushButton#startButton {{
                background: {GridColors.PRIMARY};
                color: white;
                border: none;
                border-radius: 10px;
                padding: 8px 22px;
                font-weight: 700;
            }}
            QPushButton#startButton:hover {{
                background: {GridColors.PRIMARY_DARK};
            }}
            QPushButton#startButton:disabled {{
                background: {GridColors.TEXT_MUTED};
            }}
            """
        )

        self.start_shortcut = QShortcut(QKeySequence(Qt.Key_Return), self)
        self.start_shortcut.activated.connect(self._start_round)

    def _connect_signals(self) -> None:
        signals = self._listener.signals
        signals.highlight_on.connect(self._grid_widget.set_highlight)
        signals.highlight_off.connect(self._grid_widget.clear_highlight)
        signals.status_changed.connect(self._status_label.setText)
        signals.phase_changed.connect(self._on_phase_changed)
        self._grid_widget.tile_clicked.connect(self._game.tile_click)
        self._length_slider.valueChanged.connect(lambda v: self._length_value.setText(str(v)))
        self._start_button.clicked.connect(self._start_round)

    def _start_round(self) -> None:
        length = coerce_length(self._length_slider.value(), self._config.default_length)
        mode = self._mode_combo.currentData()
        try:
            self._game.start(length, mode)
        except PathRecallError as e:
            logger.warning("Could not start round: %s", e)
            self._status_label.setText(str(e))

    def _on_phase_changed(self, phase: str) -> None:
        revealing = phase == SessionPhase.REVEALING.value
        self._length_slider.setEnabled(not revealing)
        self._mode_combo.setEnabled(not revealing)
        self._grid_widget.setCursor(Qt.WaitCursor if revealing else Qt.PointingHandCursor)

    def _center_board(self) -> None:
        screen = self.screen()
        if screen is None:
            return
        geometry = screen.availableGeometry()
        side = int(min(geometry.width(), geometry.height()) * 0.8)
        self.resize(int(side * 0.9), side)
        self.move(geometry.center() - self.rect().center())
