"""CircuitGrid -- matrix of clickable cells showing the placed gates.

Responsibilities:
- One CellButton per (qubit row, time-step column).
- Renders gate labels with their palette colors.
- Highlights the column of the current play step.
- Emits cell_clicked(row, col); it never mutates circuit state itself.
"""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import (
    QGroupBox, QGridLayout, QPushButton, QSizePolicy, QWidget,
)

from qcs.core.i18n import Translator
from qcs.gui.themes.gate_colors import gate_color, text_color


CELL_MIN_SIZE = 44


class CellButton(QPushButton):
    """A single grid cell; shows a gate label or nothing."""

    def __init__(self, row: int, col: int, parent: QWidget | None = None):
        super().__init__(parent)
        self.row = row
        self.col = col
        self.label: str | None = None
        self.setObjectName("CircuitCell")
        self.setMinimumSize(CELL_MIN_SIZE, CELL_MIN_SIZE)
        self.setSizePolicy(
            QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setToolTip(f"q{row}, t{col}")

    def set_label(self, label: str | None):
        self.label = label
        self.setText(label or "")
        if label is None:
            self.setStyleSheet("")
        else:
            background = gate_color(label)
            self.setStyleSheet(
                f"QPushButton#CircuitCell {{ background-color: {background};"
                f" color: {text_color(background)}; }}"
            )

    def set_active_column(self, active: bool):
        self.setProperty("activeColumn", active)
        # Dynamic properties only restyle after a re-polish
        self.style().unpolish(self)
        self.style().polish(self)


class CircuitGrid(QGroupBox):
    """Titled panel that lays the cells out in a rows x columns grid.

    Signals
    -------
    cell_clicked(int, int)
        Emitted with (row, col) when a cell is clicked.
    """

    cell_clicked = pyqtSignal(int, int)

    def __init__(self, translator: Translator, rows: int, columns: int,
                 parent: QWidget | None = None):
        super().__init__(parent)
        self._translator = translator
        self._cells: list[list[CellButton]] = []
        self._active_column = -1

        self._layout = QGridLayout(self)
        self._layout.setSpacing(1)
        self._layout.setContentsMargins(6, 6, 6, 6)

        self.rebuild(rows, columns)
        self.retranslate()

    @property
    def rows(self) -> int:
        return len(self._cells)

    @property
    def columns(self) -> int:
        return len(self._cells[0]) if self._cells else 0

    def retranslate(self):
        self.setTitle(self._translator.tr("QuantumCircuit"))

    def cell(self, row: int, col: int) -> CellButton:
        return self._cells[row][col]

    def rebuild(self, rows: int, columns: int):
        """Discard all cells and create an empty rows x columns grid."""
        for row_cells in self._cells:
            for btn in row_cells:
                self._layout.removeWidget(btn)
                btn.setParent(None)
                btn.deleteLater()
        self._cells = []
        self._active_column = -1

        for r in range(rows):
            row_cells = []
            for c in range(columns):
                btn = CellButton(r, c, self)
                btn.clicked.connect(
                    lambda _checked, row=r, col=c: self.cell_clicked.emit(row, col)
                )
                self._layout.addWidget(btn, r, c)
                row_cells.append(btn)
            self._cells.append(row_cells)

    def set_cell(self, row: int, col: int, label: str | None):
        self._cells[row][col].set_label(label)

    def clear_cells(self):
        for row_cells in self._cells:
            for btn in row_cells:
                btn.set_label(None)

    def highlight_column(self, col: int):
        """Mark one column as the active play step; -1 removes the mark."""
        if col == self._active_column:
            return
        for row_cells in self._cells:
            for c, btn in enumerate(row_cells):
                if c == self._active_column or c == col:
                    btn.set_active_column(c == col)
        self._active_column = col
