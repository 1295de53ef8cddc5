from __future__ import annotations

import logging

from PyQt6.QtWidgets import QApplication

from . import config
from .logging_config import setup_logging
from .polygon_window import PolygonWindow

logger = logging.getLogger(__name__)


def run_app() -> None:
    import sys

    setup_logging(config.log_level_from_env(), config.log_file_from_env())
    app = QApplication(sys.argv)
    window = PolygonWindow()
    window.show()
    logger.info("Polygon editor started")
    sys.exit(app.exec())
