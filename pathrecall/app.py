"""Application entry point and setup for the Path Recall memory game."""

import logging
import os
import sys

from PySide6.QtWidgets import QApplication

from pathrecall.core.config import load_config
from pathrecall.ui.main_window import MainWindow


def configure_logging() -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def run() -> None:
    """Load the config, build the main window and enter the Qt event loop."""
    configure_logging()
    app = QApplication(sys.argv)
    app.setApplicationName("Path Recall")
    app.setApplicationDisplayName("Path Recall")

    config_path = os.environ.get("PATHRECALL_CONFIG")
    config = load_config(config_path)
    logging.info(f"Grid {config.grid_size}x{config.grid_size}, {config.reveal_policy.value} reveal")

    window = MainWindow(config=config)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    run()
