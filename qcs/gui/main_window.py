"""Main application window for the Quantum Circuit Simulator.

Provides the top-level QMainWindow that coordinates all GUI components:
menu bar, gate palette, circuit grid, play controls, messages log and
status bar, wired to the editor state through the CircuitController.
"""

from __future__ import annotations

import logging
from typing import Callable

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton,
    QPlainTextEdit, QStatusBar, QMessageBox, QInputDialog, QApplication,
)

from qcs.core.config import AppConfig
from qcs.core.i18n import Translator, LocalizationError, DEFAULT_LANGUAGE
from qcs.controller.circuit_controller import CircuitController, mode_name
from qcs.engine.circuit_state import Mode
from qcs.gui.themes.theme_manager import ThemeManager
from qcs.gui.panels.gate_palette import GatePalette
from qcs.gui.circuit_editor.grid_view import CircuitGrid
from qcs.gui.dialogs.about_dialog import AboutDialog


logger = logging.getLogger(__name__)

MAX_QUBITS = 32
MAX_DEPTH = 64


class LogoLabel(QLabel):
    """Header label that opens the About dialog when clicked."""

    clicked = pyqtSignal()

    def mousePressEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            self.clicked.emit()
        super().mousePressEvent(event)


class MainWindow(QMainWindow):
    """The main application window for the Quantum Circuit Simulator.

    Coordinates:
    - Menu bar with File, Circuit, Settings and Help menus
    - Header logo (click for About)
    - Left: gate palette; center: circuit grid
    - Bottom: play controls, tensor product placeholder, messages log
    - Status bar showing qubits, depth, gate count and mode

    Every localizable widget is registered once at construction together
    with its catalog key; a language change re-applies that list.
    """

    APP_NAME = "Quantum Circuit Simulator"

    def __init__(
        self,
        app: QApplication,
        config: AppConfig | None = None,
        parent: QWidget | None = None,
    ):
        super().__init__(parent)
        self._app = app
        self._config = config or AppConfig.load()

        try:
            self._translator = Translator(self._config.language)
        except LocalizationError:
            logger.warning(
                "Unsupported language %r, falling back to %s.",
                self._config.language, DEFAULT_LANGUAGE, exc_info=True,
            )
            self._translator = Translator(DEFAULT_LANGUAGE)

        self._theme_manager = ThemeManager(app)
        self._controller = CircuitController(
            self._translator,
            rows=self._config.default_rows,
            columns=self._config.default_columns,
            max_steps=self._config.max_steps,
            parent=self,
        )
        self._localized: list[tuple[Callable[[str], None], str]] = []

        # Build UI
        self._setup_window()
        self._create_actions()
        self._create_menus()
        self._create_central_widget()
        self._create_status_bar()
        self._connect_signals()

        self._apply_saved_appearance()
        self._retranslate()
        self._controller.log("ApplicationStarted")

    @property
    def controller(self) -> CircuitController:
        return self._controller

    @property
    def translator(self) -> Translator:
        return self._translator

    def _register(self, setter: Callable[[str], None], key: str):
        """Track a widget text setter so it follows language changes."""
        self._localized.append((setter, key))
        setter(self._translator.tr(key))

    # ------------------------------------------------------------------
    # Window setup
    # ------------------------------------------------------------------

    def _setup_window(self):
        """Configure basic window properties."""
        self.setWindowTitle(self.APP_NAME)
        self.resize(self._config.window_width, self._config.window_height)
        self.setMinimumSize(640, 480)

    def _apply_saved_appearance(self):
        """Restore theme and widget style from the configuration."""
        try:
            self._theme_manager.apply_theme(self._config.theme)
        except (KeyError, OSError):
            logger.warning(
                "Theme %r could not be applied.", self._config.theme,
                exc_info=True,
            )
        self._action_dark_mode.blockSignals(True)
        self._action_dark_mode.setChecked(
            self._theme_manager.current_theme == "dark")
        self._action_dark_mode.blockSignals(False)

        if self._config.style:
            try:
                self._theme_manager.apply_style(self._config.style)
            except KeyError:
                logger.warning(
                    "Style %r is not available.", self._config.style,
                    exc_info=True,
                )

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def _create_actions(self):
        """Create all QActions used in menus."""

        # -- File actions --
        self._action_new = QAction(self)
        self._action_new.setShortcut(QKeySequence.StandardKey.New)
        self._action_new.triggered.connect(self._on_new_circuit)
        self._register(self._action_new.setText, "New")

        self._action_open = QAction(self)
        self._action_open.setShortcut(QKeySequence.StandardKey.Open)
        self._action_open.triggered.connect(self._on_open)
        self._register(self._action_open.setText, "Open")

        self._action_save = QAction(self)
        self._action_save.setShortcut(QKeySequence.StandardKey.Save)
        self._action_save.triggered.connect(self._on_save)
        self._register(self._action_save.setText, "Save")

        self._action_exit = QAction(self)
        self._action_exit.setShortcut(QKeySequence("Alt+F4"))
        self._action_exit.triggered.connect(self.close)
        self._register(self._action_exit.setText, "Exit")

        # -- Circuit actions --
        self._action_clear = QAction(self)
        self._action_clear.setShortcut(QKeySequence("Ctrl+Shift+Delete"))
        self._action_clear.triggered.connect(self._controller.clear_circuit)
        self._register(self._action_clear.setText, "ClearCircuit")

        # -- Settings actions --
        self._action_dark_mode = QAction(self)
        self._action_dark_mode.setCheckable(True)
        self._action_dark_mode.toggled.connect(self._on_dark_mode_toggled)
        self._register(self._action_dark_mode.setText, "DarkMode")

        self._action_language = QAction(self)
        self._action_language.triggered.connect(self.change_language)
        self._register(self._action_language.setText, "ChangeLanguage")

        self._action_look_feel = QAction(self)
        self._action_look_feel.triggered.connect(self._on_change_look_and_feel)
        self._register(self._action_look_feel.setText, "ChangeLookFeel")

        # -- Help actions --
        self._action_about = QAction(self)
        self._action_about.triggered.connect(self._on_about)
        self._register(self._action_about.setText, "About")

    # ------------------------------------------------------------------
    # Menus
    # ------------------------------------------------------------------

    def _create_menus(self):
        """Build the menu bar."""
        menu_bar = self.menuBar()

        # --- File menu ---
        file_menu = menu_bar.addMenu("")
        self._register(file_menu.setTitle, "File")
        file_menu.addAction(self._action_new)
        file_menu.addAction(self._action_open)
        file_menu.addAction(self._action_save)
        file_menu.addSeparator()
        file_menu.addAction(self._action_exit)

        # --- Circuit menu ---
        circuit_menu = menu_bar.addMenu("")
        self._register(circuit_menu.setTitle, "Circuit")
        circuit_menu.addAction(self._action_clear)

        # --- Settings menu ---
        settings_menu = menu_bar.addMenu("")
        self._register(settings_menu.setTitle, "Settings")
        settings_menu.addAction(self._action_dark_mode)
        settings_menu.addAction(self._action_language)
        settings_menu.addAction(self._action_look_feel)

        # --- Help menu ---
        help_menu = menu_bar.addMenu("")
        self._register(help_menu.setTitle, "Help")
        help_menu.addAction(self._action_about)

    # ------------------------------------------------------------------
    # Central widget
    # ------------------------------------------------------------------

    def _create_central_widget(self):
        """Header, palette + grid, then the bottom controls and log."""
        central = QWidget()
        layout = QVBoxLayout(central)
        layout.setContentsMargins(10, 10, 10, 10)
        layout.setSpacing(10)

        # --- Header ---
        self._logo = LogoLabel("QCS")
        self._logo.setObjectName("LogoLabel")
        self._logo.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._logo.setCursor(Qt.CursorShape.PointingHandCursor)
        header = QHBoxLayout()
        header.addStretch()
        header.addWidget(self._logo)
        header.addStretch()
        layout.addLayout(header)

        # --- Palette and grid ---
        body = QHBoxLayout()
        self._gate_palette = GatePalette(self._translator)
        body.addWidget(self._gate_palette)
        editor = self._controller.editor
        self._circuit_grid = CircuitGrid(
            self._translator, editor.rows, editor.columns)
        body.addWidget(self._circuit_grid, 1)
        layout.addLayout(body, 1)

        # --- Controls ---
        controls = QHBoxLayout()
        controls.addStretch()

        self._btn_new_circuit = QPushButton()
        self._btn_new_circuit.clicked.connect(self._on_new_circuit)
        self._register(self._btn_new_circuit.setText, "NewCircuit")
        controls.addWidget(self._btn_new_circuit)

        self._btn_step = QPushButton()
        self._btn_step.clicked.connect(self._controller.step)
        self._register(self._btn_step.setText, "Step")
        controls.addWidget(self._btn_step)

        self._btn_reset = QPushButton()
        self._btn_reset.clicked.connect(self._controller.reset)
        self._register(self._btn_reset.setText, "Reset")
        controls.addWidget(self._btn_reset)

        self._btn_mode = QPushButton()
        self._btn_mode.setObjectName("ModeButton")
        self._btn_mode.clicked.connect(self._controller.toggle_mode)
        controls.addWidget(self._btn_mode)

        self._step_label = QLabel()
        controls.addWidget(self._step_label)
        controls.addStretch()
        layout.addLayout(controls)

        # --- Tensor product placeholder ---
        self._tensor_label = QLabel()
        self._tensor_label.setObjectName("TensorLabel")
        self._register(self._tensor_label.setText, "TensorProduct")
        layout.addWidget(self._tensor_label)

        # --- Messages ---
        self._messages_title = QLabel()
        self._messages_title.setStyleSheet("font-weight: bold;")
        self._register(self._messages_title.setText, "Messages")
        layout.addWidget(self._messages_title)

        self._messages = QPlainTextEdit()
        self._messages.setReadOnly(True)
        self._messages.setObjectName("MessagesLog")
        self._messages.setFixedHeight(110)
        layout.addWidget(self._messages)

        self.setCentralWidget(central)

    # ------------------------------------------------------------------
    # Status bar
    # ------------------------------------------------------------------

    def _create_status_bar(self):
        """Build the status bar with qubits, depth, gate count and mode."""
        self._status_bar = QStatusBar()
        self.setStatusBar(self._status_bar)

        self._status_qubits = QLabel()
        self._status_depth = QLabel()
        self._status_gates = QLabel()
        self._status_mode = QLabel()

        self._status_bar.addPermanentWidget(self._status_qubits)
        self._status_bar.addPermanentWidget(self._status_depth)
        self._status_bar.addPermanentWidget(self._status_gates)
        self._status_bar.addPermanentWidget(self._status_mode)

    def _update_status_bar(self):
        """Refresh status bar labels from the editor state."""
        tr = self._translator.tr
        editor = self._controller.editor
        self._status_qubits.setText(tr("StatusQubits", rows=editor.rows))
        self._status_depth.setText(tr("StatusDepth", columns=editor.columns))
        self._status_gates.setText(tr("StatusGates", count=editor.gate_count()))
        self._status_mode.setText(
            tr("StatusMode", mode=mode_name(editor.mode, self._translator)))

    # ------------------------------------------------------------------
    # Signal connections
    # ------------------------------------------------------------------

    def _connect_signals(self):
        """Connect inter-component signals."""
        self._gate_palette.gate_clicked.connect(self._controller.select_gate)
        self._circuit_grid.cell_clicked.connect(self._controller.click_cell)
        self._logo.clicked.connect(self._on_about)

        ctrl = self._controller
        ctrl.message_logged.connect(self._append_message)
        ctrl.cell_changed.connect(self._on_cell_changed)
        ctrl.grid_rebuilt.connect(self._on_grid_rebuilt)
        ctrl.grid_cleared.connect(self._on_grid_cleared)
        ctrl.step_changed.connect(self._on_step_changed)
        ctrl.mode_changed.connect(self._on_mode_changed)
        ctrl.selection_changed.connect(self._gate_palette.set_selected_gate)

    # ------------------------------------------------------------------
    # Controller signal handlers
    # ------------------------------------------------------------------

    def _append_message(self, text: str):
        self._messages.appendPlainText(text)
        self._messages.verticalScrollBar().setValue(
            self._messages.verticalScrollBar().maximum())

    def _on_cell_changed(self, row: int, col: int, label: str):
        self._circuit_grid.set_cell(row, col, label)
        self._update_status_bar()

    def _on_grid_rebuilt(self, rows: int, columns: int):
        self._circuit_grid.rebuild(rows, columns)
        self._update_status_bar()

    def _on_grid_cleared(self):
        self._circuit_grid.clear_cells()
        self._update_status_bar()

    def _on_step_changed(self, step: int, max_steps: int):
        self._step_label.setText(
            self._translator.tr("StepCount", step=step, max_steps=max_steps))
        self._circuit_grid.highlight_column(step - 1)

    def _on_mode_changed(self, mode: Mode):
        self._update_mode_button(mode)
        self._update_status_bar()

    def _update_mode_button(self, mode: Mode):
        # The button names the mode it switches to
        target = Mode.DESIGN if mode is Mode.PLAY else Mode.PLAY
        self._btn_mode.setText(mode_name(target, self._translator))

    # ------------------------------------------------------------------
    # File operations
    # ------------------------------------------------------------------

    def _on_new_circuit(self):
        """Prompt for a new grid size: qubits first, then depth."""
        tr = self._translator.tr
        editor = self._controller.editor
        rows, ok = QInputDialog.getInt(
            self, tr("NewCircuitTitle"), tr("EnterQubits"),
            editor.rows, 1, MAX_QUBITS,
        )
        if not ok:
            return
        columns, ok = QInputDialog.getInt(
            self, tr("NewCircuitTitle"), tr("EnterDepth"),
            editor.columns, 1, MAX_DEPTH,
        )
        if not ok:
            return
        self._controller.resize(rows, columns)

    def _on_save(self):
        """Acknowledge the save request; circuits are not written to disk."""
        self._controller.acknowledge_save()
        QMessageBox.information(
            self, self._translator.tr("Save"),
            self._translator.tr("CircuitSavedMessage"),
        )

    def _on_open(self):
        """Acknowledge the open request; circuits are not read from disk."""
        self._controller.acknowledge_open()
        QMessageBox.information(
            self, self._translator.tr("Open"),
            self._translator.tr("OpenCircuitMessage"),
        )

    # ------------------------------------------------------------------
    # Settings
    # ------------------------------------------------------------------

    def _on_dark_mode_toggled(self, checked: bool):
        theme = "dark" if checked else "light"
        try:
            self._theme_manager.apply_theme(theme)
        except (KeyError, OSError) as e:
            logger.warning("Theme %r could not be applied.", theme, exc_info=True)
            self._controller.log("ErrorChangingTheme", error=e)
            return
        self._config.theme = theme
        self._controller.log("DarkModeEnabled" if checked else "DarkModeDisabled")

    def set_dark_mode(self, enabled: bool):
        """Check or uncheck the Dark Mode action, applying the theme."""
        self._action_dark_mode.setChecked(enabled)

    def change_language(self) -> str:
        """Switch to the next language and relabel the whole window."""
        language = self._translator.cycle_language()
        self._config.language = language
        self._retranslate()
        self._controller.log("LanguageChanged")
        return language

    def apply_look_and_feel(self, style_name: str) -> bool:
        try:
            self._theme_manager.apply_style(style_name)
        except KeyError as e:
            logger.warning("Style %r could not be applied.", style_name, exc_info=True)
            self._controller.log("ErrorChangingLookAndFeel", error=e)
            return False
        self._config.style = self._theme_manager.current_style
        self._controller.log("LookAndFeelChanged", style=style_name)
        return True

    def _on_change_look_and_feel(self):
        tr = self._translator.tr
        styles = self._theme_manager.available_styles()
        if not styles:
            return
        current = self._theme_manager.current_style
        index = next(
            (i for i, s in enumerate(styles) if s.lower() == current.lower()), 0)
        selected, ok = QInputDialog.getItem(
            self, tr("LookAndFeel"), tr("ChooseLookAndFeel"),
            styles, index, False,
        )
        if ok and selected:
            self.apply_look_and_feel(selected)

    def _retranslate(self):
        """Re-apply every registered text and the state-dependent labels."""
        for setter, key in self._localized:
            setter(self._translator.tr(key))
        self._gate_palette.retranslate()
        self._circuit_grid.retranslate()

        editor = self._controller.editor
        self._update_mode_button(editor.mode)
        self._on_step_changed(editor.current_step, editor.max_steps)
        self._update_status_bar()

    # ------------------------------------------------------------------
    # About dialog
    # ------------------------------------------------------------------

    def _on_about(self):
        """Show the About dialog."""
        AboutDialog(self._translator, self).exec()

    # ------------------------------------------------------------------
    # Close event
    # ------------------------------------------------------------------

    def closeEvent(self, event):
        """Persist window size and appearance settings."""
        self._config.window_width = self.width()
        self._config.window_height = self.height()
        try:
            self._config.save()
        except OSError:
            logger.error(
                "Failed to save configuration: %s", self._config.config_path,
                exc_info=True,
            )
        event.accept()
