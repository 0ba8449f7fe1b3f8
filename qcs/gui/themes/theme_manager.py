"""Theme manager for dark/light QSS stylesheets and Qt widget styles."""

from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtWidgets import QApplication, QStyleFactory


logger = logging.getLogger(__name__)


class ThemeManager:
    """Manages application themes by loading and applying QSS stylesheets.

    Also switches the Qt widget style ("look and feel") among the styles
    available on the running platform.
    """

    THEMES = {'dark': 'dark.qss', 'light': 'light.qss'}

    def __init__(self, app: QApplication):
        self._app = app
        self._current_theme = 'light'
        self._current_style = app.style().name() if app.style() else ""

    @property
    def current_theme(self) -> str:
        """Returns the name of the currently applied theme."""
        return self._current_theme

    @property
    def current_style(self) -> str:
        return self._current_style

    @staticmethod
    def available_styles() -> list[str]:
        return list(QStyleFactory.keys())

    def apply_theme(self, theme_name: str):
        """Apply the specified theme by loading its QSS file.

        Args:
            theme_name: Either 'dark' or 'light'.

        Raises:
            KeyError: If theme_name is not a recognized theme.
            FileNotFoundError: If the QSS file does not exist.
        """
        if theme_name not in self.THEMES:
            raise KeyError(
                f"Unknown theme '{theme_name}'. "
                f"Available themes: {list(self.THEMES.keys())}"
            )
        qss_path = Path(__file__).parent / self.THEMES[theme_name]
        with open(qss_path, 'r', encoding='utf-8') as f:
            self._app.setStyleSheet(f.read())
        self._current_theme = theme_name
        logger.debug("Applied theme %s", theme_name)

    def apply_style(self, style_name: str):
        """Switch the Qt widget style.

        Raises:
            KeyError: If the style is not available on this platform.
        """
        available = self.available_styles()
        match = next(
            (s for s in available if s.lower() == style_name.lower()), None)
        if match is None:
            raise KeyError(
                f"Unknown style '{style_name}'. Available styles: {available}")
        self._app.setStyle(match)
        self._current_style = match
        logger.debug("Applied style %s", match)
