"""Simple about dialog for the Quantum Circuit Simulator."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QDialog, QVBoxLayout, QLabel, QPushButton, QWidget,
)

from qcs.core.i18n import Translator


class AboutDialog(QDialog):
    """About dialog showing project name, version, team, course and year."""

    APP_VERSION = "1.0"
    TEAM = "I.F/E.R"
    COURSE = "CST8221 - JAP"
    YEAR = "2025"

    def __init__(self, translator: Translator, parent: QWidget | None = None):
        super().__init__(parent)
        self._translator = translator
        self.setWindowTitle(f"{translator.tr('About')} QCS")
        self.setFixedSize(360, 260)

        self._setup_ui()

    def details(self) -> list[str]:
        """The detail lines shown under the title, in display order."""
        tr = self._translator.tr
        return [
            f"{tr('Version')} {self.APP_VERSION}",
            f"{tr('Team')} {self.TEAM}",
            f"{tr('Course')} {self.COURSE}",
            tr('College'),
            f"{tr('Year')} - {self.YEAR}",
        ]

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(8)

        name_label = QLabel(self._translator.tr("AboutTitle"))
        name_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        name_label.setStyleSheet("font-size: 18px; font-weight: bold;")
        layout.addWidget(name_label)

        separator = QLabel()
        separator.setFixedHeight(1)
        separator.setStyleSheet("background-color: #555555;")
        layout.addWidget(separator)

        for line in self.details():
            label = QLabel(line)
            label.setAlignment(Qt.AlignmentFlag.AlignCenter)
            layout.addWidget(label)

        layout.addStretch()

        close_btn = QPushButton(self._translator.tr("Close"))
        close_btn.setFixedWidth(100)
        close_btn.clicked.connect(self.accept)

        btn_layout = QVBoxLayout()
        btn_layout.setAlignment(Qt.AlignmentFlag.AlignCenter)
        btn_layout.addWidget(close_btn)
        layout.addLayout(btn_layout)
