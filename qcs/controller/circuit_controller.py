"""Circuit controller connecting the editor state model to the GUI.

Every user action is forwarded to the CircuitEditor; the returned outcome
is rendered into exactly one localized log message and the affected views
are notified through signals.
"""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal

from qcs.core.i18n import Translator
from qcs.engine.circuit_state import (
    CircuitEditor, EditResult, InvalidDimension, Mode, Outcome,
    DEFAULT_MAX_STEPS,
)


logger = logging.getLogger(__name__)

_OUTCOME_KEYS = {
    Outcome.SELECTED: "GateSelected",
    Outcome.REJECTED_WRONG_MODE: "CannotSelectGate",
    Outcome.PLACED: "GatePlaced",
    Outcome.POSITION_OCCUPIED: "PositionOccupied",
    Outcome.NO_GATE_SELECTED: "SelectGateFirst",
    Outcome.PLAY_MODE_INFO: "PlayModeActive",
    Outcome.ADVANCED: "StepExecuted",
    Outcome.WRONG_MODE_FOR_STEP: "SwitchToPlayMode",
    Outcome.MAX_STEPS_REACHED: "MaxStepsReached",
}


def mode_name(mode: Mode, translator: Translator) -> str:
    return translator.tr("PlayMode" if mode is Mode.PLAY else "DesignMode")


def describe_result(result: EditResult, translator: Translator) -> str:
    """Render an editor outcome as a user-facing message."""
    key = _OUTCOME_KEYS[result.outcome]
    return translator.tr(
        key,
        gate=result.label,
        row=result.row,
        col=result.col,
        step=result.step,
    )


class CircuitController(QObject):
    """Controller that drives a CircuitEditor on behalf of the main window.

    Signals
    -------
    message_logged(str)
        One localized line for the messages area.
    cell_changed(int, int, str)
        A gate label was placed at (row, col).
    grid_rebuilt(int, int)
        The grid was replaced with an empty (rows, columns) one.
    grid_cleared()
        Every cell was emptied.
    step_changed(int, int)
        (current_step, max_steps) after any counter change.
    mode_changed(object)
        The new Mode after a toggle.
    selection_changed(object)
        The pending gate label, or None.
    """

    message_logged = pyqtSignal(str)
    cell_changed = pyqtSignal(int, int, str)
    grid_rebuilt = pyqtSignal(int, int)
    grid_cleared = pyqtSignal()
    step_changed = pyqtSignal(int, int)
    mode_changed = pyqtSignal(object)
    selection_changed = pyqtSignal(object)

    def __init__(
        self,
        translator: Translator,
        rows: int = 3,
        columns: int = 5,
        max_steps: int = DEFAULT_MAX_STEPS,
        parent: QObject | None = None,
    ):
        super().__init__(parent)
        self._translator = translator
        self._editor = CircuitEditor(rows, columns, max_steps)

    @property
    def editor(self) -> CircuitEditor:
        """The underlying state model."""
        return self._editor

    @property
    def translator(self) -> Translator:
        return self._translator

    def log(self, key: str, **kwargs) -> str:
        """Emit a localized message and return it."""
        text = self._translator.tr(key, **kwargs)
        self.message_logged.emit(text)
        return text

    def _report(self, result: EditResult) -> EditResult:
        logger.debug("Editor outcome: %s", result)
        self.message_logged.emit(describe_result(result, self._translator))
        return result

    def _emit_step(self):
        self.step_changed.emit(
            self._editor.current_step, self._editor.max_steps)

    # ------------------------------------------------------------------
    # Editing
    # ------------------------------------------------------------------

    def select_gate(self, label: str) -> EditResult:
        result = self._report(self._editor.select_gate(label))
        if result.outcome is Outcome.SELECTED:
            self.selection_changed.emit(label)
        return result

    def click_cell(self, row: int, col: int) -> EditResult:
        result = self._report(self._editor.click_cell(row, col))
        if result.outcome is Outcome.PLACED:
            self.cell_changed.emit(row, col, result.label)
            self.selection_changed.emit(None)
        return result

    def clear_circuit(self):
        self._editor.clear()
        logger.debug("Circuit cleared")
        self.grid_cleared.emit()
        self._emit_step()
        self.log("CircuitCleared")

    def resize(self, rows: int, columns: int) -> bool:
        """Rebuild the grid; return False if the size was rejected."""
        try:
            self._editor.resize(rows, columns)
        except InvalidDimension as e:
            logger.warning("Rejected circuit size %sx%s: %s", rows, columns, e)
            self.log("InvalidDimension", error=e)
            return False
        logger.debug("Circuit resized to %dx%d", rows, columns)
        self.grid_rebuilt.emit(rows, columns)
        self.selection_changed.emit(None)
        self._emit_step()
        self.log("CircuitResized", rows=rows, columns=columns)
        return True

    # ------------------------------------------------------------------
    # Playing
    # ------------------------------------------------------------------

    def step(self) -> EditResult:
        result = self._report(self._editor.step())
        if result.outcome is Outcome.ADVANCED:
            self._emit_step()
        return result

    def reset(self):
        self._editor.reset()
        self._emit_step()
        self.log("CircuitReset")

    def toggle_mode(self) -> Mode:
        mode = self._editor.toggle_mode()
        logger.debug("Mode toggled to %s", mode.value)
        self.mode_changed.emit(mode)
        self.log("SwitchedTo", mode=mode_name(mode, self._translator))
        return mode

    # ------------------------------------------------------------------
    # File stubs
    # ------------------------------------------------------------------

    def acknowledge_save(self) -> str:
        return self.log("CircuitSaved")

    def acknowledge_open(self) -> str:
        return self.log("LoadingCircuit")
