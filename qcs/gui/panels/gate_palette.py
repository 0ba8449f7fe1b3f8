"""Gate palette panel with clickable gate buttons.

Gates are grouped into Single Qubit, Multi Qubit and Operations boxes,
followed by the Phase Parameters box. Clicking a button emits
``gate_clicked`` with the gate label; the button of the pending selection
is drawn with a highlight ring.
"""

from __future__ import annotations

from PyQt6.QtCore import Qt, QSize, pyqtSignal
from PyQt6.QtGui import QColor, QPainter, QFont, QPen, QDoubleValidator
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QGridLayout, QGroupBox, QLabel, QLineEdit,
)

from qcs.core.i18n import Translator
from qcs.engine.gate_registry import GateCategory, GateDefinition, GateRegistry
from qcs.gui.themes.gate_colors import gate_color, text_color


class GateButton(QWidget):
    """A clickable button representing a quantum gate.

    Displays the gate label centered on a colored rounded square.

    Attributes:
        gate_name: The registry name of the gate.
        gate_color: The hex color string for the button background.
    """

    clicked = pyqtSignal(str)

    BUTTON_WIDTH = 56
    BUTTON_HEIGHT = 36

    def __init__(self, gate_def: GateDefinition, parent: QWidget | None = None):
        super().__init__(parent)
        self.gate_name = gate_def.name
        self.gate_color = gate_color(gate_def.name)
        self._hovered = False
        self._pressed = False
        self._selected = False

        self.setFixedSize(self.BUTTON_WIDTH, self.BUTTON_HEIGHT)
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setToolTip(f"{gate_def.display_name} ({gate_def.name})")
        self.setMouseTracking(True)

    def sizeHint(self):
        return QSize(self.BUTTON_WIDTH, self.BUTTON_HEIGHT)

    @property
    def selected(self) -> bool:
        return self._selected

    def set_selected(self, selected: bool):
        if selected != self._selected:
            self._selected = selected
            self.update()

    def enterEvent(self, event):
        self._hovered = True
        self.update()

    def leaveEvent(self, event):
        self._hovered = False
        self._pressed = False
        self.update()

    def mousePressEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            self._pressed = True
            self.update()

    def mouseReleaseEvent(self, event):
        was_pressed = self._pressed
        self._pressed = False
        self.update()
        if (was_pressed and event.button() == Qt.MouseButton.LeftButton
                and self.rect().contains(event.position().toPoint())):
            self.clicked.emit(self.gate_name)

    def paintEvent(self, event):
        """Draw the gate button with color, label, and hover/press effects."""
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        margin = 2
        width = self.BUTTON_WIDTH - 2 * margin
        height = self.BUTTON_HEIGHT - 2 * margin

        base_color = QColor(self.gate_color)
        if self._pressed:
            base_color = base_color.darker(130)
        elif self._hovered:
            base_color = base_color.lighter(115)

        painter.setBrush(base_color)
        painter.setPen(Qt.PenStyle.NoPen)
        painter.drawRoundedRect(margin, margin, width, height, 6, 6)

        if self._selected:
            painter.setPen(QPen(QColor("#F38BA8"), 2.5))
            painter.setBrush(Qt.BrushStyle.NoBrush)
            painter.drawRoundedRect(margin, margin, width, height, 6, 6)

        painter.setPen(QPen(QColor(text_color(self.gate_color))))
        font = QFont("Segoe UI", 10, QFont.Weight.Bold)
        painter.setFont(font)
        painter.drawText(
            margin, margin, width, height,
            Qt.AlignmentFlag.AlignCenter, self.gate_name,
        )

        painter.end()


class GatePalette(QGroupBox):
    """Left-hand panel holding the gate buttons and phase parameter fields.

    Sections and their grid shapes:
    - Single Qubit: I, X, Y, Z, H, S, T, U (two columns)
    - Multi Qubit: CX, SWAP, CU, CCX (one column)
    - Operations: BARRIER
    - Phase Parameters: a, b, c
    """

    gate_clicked = pyqtSignal(str)

    SECTIONS = (
        ("SingleQubit", GateCategory.SINGLE, 2),
        ("MultiQubit", GateCategory.MULTI, 1),
        ("Operations", GateCategory.OPERATION, 1),
    )
    PHASE_PARAMETERS = ("a", "b", "c")

    def __init__(self, translator: Translator, parent: QWidget | None = None):
        super().__init__(parent)
        self.setObjectName("GatePalette")
        self._translator = translator
        self._buttons: dict[str, GateButton] = {}
        self._phase_fields: dict[str, QLineEdit] = {}
        # (group box, catalog key) pairs re-titled on language change
        self._titled: list[tuple[QGroupBox, str]] = [(self, "QuantumGates")]

        self._setup_ui()
        self.retranslate()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(6, 6, 6, 6)
        layout.setSpacing(6)

        registry = GateRegistry.instance()
        for key, category, columns in self.SECTIONS:
            gate_defs = registry.by_category(category)
            if not gate_defs:
                continue
            box = QGroupBox()
            grid = QGridLayout(box)
            grid.setSpacing(5)
            for i, gate_def in enumerate(gate_defs):
                btn = GateButton(gate_def)
                btn.clicked.connect(self.gate_clicked)
                self._buttons[gate_def.name] = btn
                grid.addWidget(btn, i // columns, i % columns)
            self._titled.append((box, key))
            layout.addWidget(box)

        phase_box = QGroupBox()
        phase_grid = QGridLayout(phase_box)
        phase_grid.setSpacing(5)
        for i, name in enumerate(self.PHASE_PARAMETERS):
            field = QLineEdit("0.0")
            field.setValidator(QDoubleValidator(field))
            field.setFixedWidth(70)
            phase_grid.addWidget(QLabel(f"{name}:"), i, 0)
            phase_grid.addWidget(field, i, 1)
            self._phase_fields[name] = field
        self._titled.append((phase_box, "PhaseParameters"))
        layout.addWidget(phase_box)

        layout.addStretch()

    def retranslate(self):
        for box, key in self._titled:
            box.setTitle(self._translator.tr(key))

    def gate_names(self) -> list[str]:
        return list(self._buttons)

    def set_selected_gate(self, label: str | None):
        """Highlight the button of the pending selection (None clears it)."""
        for name, btn in self._buttons.items():
            btn.set_selected(name == label)

