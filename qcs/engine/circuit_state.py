"""Circuit editor/player state model.

Holds the gate grid, the interaction mode, the pending gate selection and
the play-mode step counter. Every user-facing operation returns an
``EditResult`` describing what happened; only caller contract violations
(bad dimensions, bad coordinates) raise.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator

import numpy as np


DEFAULT_MAX_STEPS = 5


class InvalidDimension(ValueError):
    """Raised when rows, columns or max_steps is not a positive integer."""


class IndexOutOfRange(IndexError):
    """Raised when a cell coordinate lies outside the current grid."""


class Mode(Enum):
    DESIGN = "design"
    PLAY = "play"


class Outcome(Enum):
    SELECTED = "selected"
    REJECTED_WRONG_MODE = "rejected_wrong_mode"
    PLACED = "placed"
    POSITION_OCCUPIED = "position_occupied"
    NO_GATE_SELECTED = "no_gate_selected"
    PLAY_MODE_INFO = "play_mode_info"
    ADVANCED = "advanced"
    WRONG_MODE_FOR_STEP = "wrong_mode_for_step"
    MAX_STEPS_REACHED = "max_steps_reached"


@dataclass(frozen=True)
class EditResult:
    """Outcome of a single editor operation.

    Only the fields relevant to ``outcome`` are set: ``label`` for
    selections and placements (the occupant for POSITION_OCCUPIED),
    ``row``/``col`` for cell clicks, ``step`` for step attempts.
    """
    outcome: Outcome
    label: str | None = None
    row: int | None = None
    col: int | None = None
    step: int | None = None


def _check_dimension(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidDimension(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise InvalidDimension(f"{name} must be positive, got {value}")
    return int(value)


class CircuitEditor:
    """Grid, mode, selection and step counter of one circuit session."""

    def __init__(self, rows: int, columns: int,
                 max_steps: int = DEFAULT_MAX_STEPS):
        rows = _check_dimension("rows", rows)
        columns = _check_dimension("columns", columns)
        self._max_steps = _check_dimension("max_steps", max_steps)
        self._grid = self._empty_grid(rows, columns)
        self._mode = Mode.DESIGN
        self._selection: str | None = None
        self._step = 0

    @staticmethod
    def _empty_grid(rows: int, columns: int) -> np.ndarray:
        return np.full((rows, columns), None, dtype=object)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def rows(self) -> int:
        return self._grid.shape[0]

    @property
    def columns(self) -> int:
        return self._grid.shape[1]

    @property
    def max_steps(self) -> int:
        return self._max_steps

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def selection(self) -> str | None:
        return self._selection

    @property
    def current_step(self) -> int:
        return self._step

    def _check_index(self, row: int, col: int):
        if not (0 <= row < self.rows and 0 <= col < self.columns):
            raise IndexOutOfRange(
                f"Cell ({row}, {col}) outside {self.rows}x{self.columns} grid")

    def cell(self, row: int, col: int) -> str | None:
        """Return the gate label at (row, col), or None if empty."""
        self._check_index(row, col)
        return self._grid[row, col]

    def grid(self) -> tuple[tuple[str | None, ...], ...]:
        """Immutable snapshot of the whole grid, row by row."""
        return tuple(tuple(r) for r in self._grid.tolist())

    def placed_gates(self) -> Iterator[tuple[int, int, str]]:
        for row, col in zip(*np.nonzero(np.not_equal(self._grid, None))):
            yield int(row), int(col), self._grid[row, col]

    def gate_count(self) -> int:
        return int(np.count_nonzero(np.not_equal(self._grid, None)))

    # ------------------------------------------------------------------
    # Design mode
    # ------------------------------------------------------------------

    def select_gate(self, label: str) -> EditResult:
        if not label:
            raise ValueError("Gate label must be a non-empty string")
        if self._mode is not Mode.DESIGN:
            return EditResult(Outcome.REJECTED_WRONG_MODE, label=label)
        self._selection = label
        return EditResult(Outcome.SELECTED, label=label)

    def click_cell(self, row: int, col: int) -> EditResult:
        """Handle a click on a grid cell.

        Checks run in a fixed order: mode, then selection, then occupancy,
        so a Play-mode click on an occupied cell is still reported as
        PLAY_MODE_INFO.
        """
        self._check_index(row, col)
        if self._mode is Mode.PLAY:
            return EditResult(Outcome.PLAY_MODE_INFO, row=row, col=col)
        if self._selection is None:
            return EditResult(Outcome.NO_GATE_SELECTED, row=row, col=col)
        occupant = self._grid[row, col]
        if occupant is not None:
            return EditResult(Outcome.POSITION_OCCUPIED, label=occupant,
                              row=row, col=col)
        label = self._selection
        self._grid[row, col] = label
        self._selection = None
        return EditResult(Outcome.PLACED, label=label, row=row, col=col)

    # ------------------------------------------------------------------
    # Play mode
    # ------------------------------------------------------------------

    def step(self) -> EditResult:
        """Advance the step counter by one."""
        if self._mode is not Mode.PLAY:
            return EditResult(Outcome.WRONG_MODE_FOR_STEP, step=self._step)
        if self._step >= self._max_steps:
            return EditResult(Outcome.MAX_STEPS_REACHED, step=self._step)
        self._step += 1
        return EditResult(Outcome.ADVANCED, step=self._step)

    def reset(self):
        """Rewind the step counter; placed gates stay."""
        self._step = 0

    # ------------------------------------------------------------------
    # Whole-circuit operations
    # ------------------------------------------------------------------

    def clear(self):
        """Empty every cell and rewind the step counter."""
        self._grid[:, :] = None
        self._step = 0

    def toggle_mode(self) -> Mode:
        self._mode = Mode.PLAY if self._mode is Mode.DESIGN else Mode.DESIGN
        return self._mode

    def resize(self, rows: int, columns: int):
        """Replace the grid with an empty one of the given size."""
        rows = _check_dimension("rows", rows)
        columns = _check_dimension("columns", columns)
        self._grid = self._empty_grid(rows, columns)
        self._selection = None
        self._step = 0
