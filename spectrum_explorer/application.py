"""Application factory — logging, QApplication creation, theme loading."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from PyQt6.QtCore import QtMsgType, qInstallMessageHandler
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QApplication

from spectrum_explorer.constants import (
    APP_NAME,
    APP_ORGANIZATION,
    APP_VERSION,
    DEFAULT_LOG_LEVEL,
    LOG_LEVEL_ENV,
)

logger = logging.getLogger(__name__)
_qt_logger = logging.getLogger("spectrum_explorer.qt")

_QT_LEVELS = {
    QtMsgType.QtDebugMsg: logging.DEBUG,
    QtMsgType.QtInfoMsg: logging.INFO,
    QtMsgType.QtWarningMsg: logging.WARNING,
    QtMsgType.QtCriticalMsg: logging.ERROR,
    QtMsgType.QtFatalMsg: logging.CRITICAL,
}

_THEME_PATH = Path(__file__).parent / "ui" / "styles" / "dark_theme.qss"


def configure_logging(level: str | None = None) -> int:
    """Configure root logging; *level* defaults to $SPECTRUM_EXPLORER_LOG_LEVEL.

    Returns the numeric level in effect.  Unknown level names fall back to
    WARNING.
    """
    name = (level or os.environ.get(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).upper()
    numeric = logging.getLevelName(name)
    if not isinstance(numeric, int):
        numeric = logging.WARNING
    logging.basicConfig(
        level=numeric,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    )
    logging.getLogger().setLevel(numeric)
    return numeric


def _qt_message_handler(msg_type, context, message):
    """Route Qt messages into logging.

    Drops the QPainter noise Qt emits while styled widgets have no size yet.
    """
    if "QPainter" in message or "Paint device returned engine == 0" in message:
        return
    _qt_logger.log(_QT_LEVELS.get(msg_type, logging.WARNING), "%s", message)


def create_application(argv: list[str]) -> QApplication:
    """Create and configure the QApplication instance."""
    qInstallMessageHandler(_qt_message_handler)

    app = QApplication(argv)
    app.setApplicationName(APP_NAME)
    app.setApplicationVersion(APP_VERSION)
    app.setOrganizationName(APP_ORGANIZATION)

    font = QFont("Segoe UI", 10)
    font.setStyleHint(QFont.StyleHint.SansSerif)
    app.setFont(font)

    if _THEME_PATH.exists():
        app.setStyleSheet(_THEME_PATH.read_text(encoding="utf-8"))
    else:
        logger.info("Theme file not found at %s", _THEME_PATH)

    return app


def main(argv: list[str] | None = None) -> int:
    """Console entry point."""
    from spectrum_explorer.main_window import MainWindow

    configure_logging()
    app = create_application(list(sys.argv if argv is None else argv))
    window = MainWindow()
    window.show()
    return app.exec()
