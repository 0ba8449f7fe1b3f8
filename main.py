"""Quantum Circuit Simulator - Application entry point."""

import logging
import os
import sys

from PyQt6.QtWidgets import QApplication
from PyQt6.QtCore import qInstallMessageHandler, QtMsgType

from qcs.gui.main_window import MainWindow
from qcs.core.config import AppConfig

# Suppress noisy Qt warnings
_SUPPRESSED_QT_PATTERNS = (
    "setPointSize",
    "QFont::",
)


def _qt_message_handler(msg_type, _context, message):
    """Custom Qt message handler that suppresses known harmless warnings."""
    if msg_type == QtMsgType.QtWarningMsg:
        for pattern in _SUPPRESSED_QT_PATTERNS:
            if pattern in message:
                return
    if msg_type == QtMsgType.QtCriticalMsg or msg_type == QtMsgType.QtFatalMsg:
        print(message, file=sys.stderr)


def _configure_logging():
    level = logging.DEBUG if os.environ.get("QCS_DEBUG") else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main():
    _configure_logging()
    qInstallMessageHandler(_qt_message_handler)
    app = QApplication(sys.argv)

    app.setApplicationName("Quantum Circuit Simulator")
    app.setOrganizationName("QCS")
    app.setApplicationVersion("1.0.0")

    config = AppConfig.load()

    window = MainWindow(app=app, config=config)
    window.show()

    sys.exit(app.exec())


if __name__ == '__main__':
    main()
