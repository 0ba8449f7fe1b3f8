"""Palette gate catalog using the Singleton pattern."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class GateCategory(Enum):
    SINGLE = "single"
    MULTI = "multi"
    OPERATION = "operation"


@dataclass(frozen=True)
class GateDefinition:
    """Immutable palette entry for a gate label."""
    name: str
    display_name: str
    category: GateCategory
    num_qubits: int = 1


class GateRegistry:
    """Singleton registry mapping gate labels to GateDefinition objects.

    Registration order is the palette order.
    """

    _instance: GateRegistry | None = None

    def __init__(self):
        self._gates: dict[str, GateDefinition] = {}

    @classmethod
    def instance(cls) -> GateRegistry:
        if cls._instance is None:
            cls._instance = cls()
            cls._instance._register_builtins()
        return cls._instance

    @classmethod
    def reset(cls):
        """Reset the singleton (for testing)."""
        cls._instance = None

    def _register_builtins(self):
        # Single-qubit gates
        for name, display in (
            ("I", "Identity"),
            ("X", "Pauli-X"),
            ("Y", "Pauli-Y"),
            ("Z", "Pauli-Z"),
            ("H", "Hadamard"),
            ("S", "S Gate"),
            ("T", "T Gate"),
            ("U", "Universal U"),
        ):
            self.register(GateDefinition(name, display, GateCategory.SINGLE))

        # Multi-qubit gates
        self.register(GateDefinition(
            "CX", "Controlled-NOT", GateCategory.MULTI, num_qubits=2))
        self.register(GateDefinition(
            "SWAP", "SWAP", GateCategory.MULTI, num_qubits=2))
        self.register(GateDefinition(
            "CU", "Controlled-U", GateCategory.MULTI, num_qubits=2))
        self.register(GateDefinition(
            "CCX", "Toffoli (CCX)", GateCategory.MULTI, num_qubits=3))

        self.register(GateDefinition(
            "BARRIER", "Barrier", GateCategory.OPERATION))

    def register(self, gate_def: GateDefinition):
        self._gates[gate_def.name] = gate_def

    def get(self, name: str) -> GateDefinition:
        if name not in self._gates:
            raise KeyError(f"Gate '{name}' not found in registry")
        return self._gates[name]

    def all_gates(self) -> list[GateDefinition]:
        return list(self._gates.values())

    def by_category(self, category: GateCategory) -> list[GateDefinition]:
        return [g for g in self._gates.values() if g.category == category]

    def gate_names(self) -> list[str]:
        return list(self._gates.keys())
