"""Display colors for gate labels in the palette and the circuit grid."""

from __future__ import annotations

YELLOW = "#F4D03F"
BLUE = "#3B6FD4"
RED = "#E74C3C"
PINK = "#F5A3B5"
GREEN = "#2ECC71"
GRAY = "#95A5A6"

GATE_COLORS: dict[str, str] = {
    "I": YELLOW,
    "X": BLUE,
    "Y": RED,
    "Z": PINK,
    "H": PINK,
    "CX": YELLOW,
    "SWAP": GREEN,
    "BARRIER": GRAY,
}

DEFAULT_GATE_COLOR = PINK

# Labels drawn on light backgrounds need dark text.
_LIGHT_BACKGROUNDS = {YELLOW, PINK, GREEN, GRAY}


def gate_color(label: str) -> str:
    return GATE_COLORS.get(label, DEFAULT_GATE_COLOR)


def text_color(background: str) -> str:
    return "#1E1E2E" if background in _LIGHT_BACKGROUNDS else "#FFFFFF"
