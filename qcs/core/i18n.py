"""Localized UI strings.

The English catalog is the total fallback: every key the application asks
for must exist there. Other catalogs are validated against it at start-up
so a missing translation is caught before any widget is built.
"""

from __future__ import annotations

import logging


logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"


class LocalizationError(Exception):
    """Raised for incomplete catalogs or unknown language codes."""


CATALOGS: dict[str, dict[str, str]] = {
    "en": {
        # Menus
        "File": "File",
        "New": "New",
        "Open": "Open",
        "Save": "Save",
        "Exit": "Exit",
        "Circuit": "Circuit",
        "ClearCircuit": "Clear Circuit",
        "Settings": "Settings",
        "DarkMode": "Dark Mode",
        "ChangeLanguage": "Change Language",
        "ChangeLookFeel": "Change Look & Feel",
        "Help": "Help",
        "About": "About",
        # Panels
        "QuantumGates": "Quantum Gates",
        "SingleQubit": "Single Qubit",
        "MultiQubit": "Multi Qubit",
        "Operations": "Operations",
        "PhaseParameters": "Phase Parameters",
        "QuantumCircuit": "Quantum Circuit",
        "Messages": "Messages",
        "TensorProduct": "Tensor Product:|0...0>",
        # Controls
        "NewCircuit": "New Circuit",
        "Step": "Step",
        "Reset": "Reset",
        "PlayMode": "Play Mode",
        "DesignMode": "Design Mode",
        "StepCount": "Step:{step}/{max_steps}",
        # Status bar
        "StatusQubits": "Qubits: {rows}",
        "StatusDepth": "Depth: {columns}",
        "StatusGates": "Gates: {count}",
        "StatusMode": "Mode: {mode}",
        # Editor feedback
        "ApplicationStarted": "Application started in Design Mode",
        "GateSelected": "Gate selected: {gate}",
        "CannotSelectGate": "Cannot select gates in Play mode",
        "PlayModeActive": "Circuit position [{row},{col}] - Play mode active",
        "SelectGateFirst": "Select a gate first",
        "GatePlaced": "Gate {gate} placed at position [{row},{col}]",
        "PositionOccupied": "Position already occupied: [{row},{col}]",
        "StepExecuted": "Step executed: {step}",
        "SwitchToPlayMode": "Switch to Play mode to execute steps",
        "MaxStepsReached": "Maximum steps reached",
        "CircuitReset": "Circuit reset to initial state",
        "CircuitCleared": "New circuit created",
        "SwitchedTo": "Switched to {mode}",
        "CircuitResized": "Circuit resized to {rows} qubits and depth {columns}",
        "InvalidDimension": "Invalid circuit size: {error}",
        # New circuit prompts
        "NewCircuitTitle": "New Circuit",
        "EnterQubits": "Enter number of qubits (rows):",
        "EnterDepth": "Enter circuit depth (columns):",
        # Save / open
        "CircuitSaved": "Circuit configuration saved to memory",
        "CircuitSavedMessage": "Circuit saved successfully!",
        "LoadingCircuit": "Loading circuit configuration...",
        "OpenCircuitMessage": "Open circuit functionality - to be implemented",
        # Settings feedback
        "DarkModeEnabled": "Dark mode enabled",
        "DarkModeDisabled": "Dark mode disabled",
        "LanguageChanged": "Language changed to English",
        "ChooseLookAndFeel": "Choose Look and Feel:",
        "LookAndFeel": "Look and Feel",
        "LookAndFeelChanged": "Look and Feel changed to: {style}",
        "ErrorChangingLookAndFeel": "Error changing Look and Feel: {error}",
        "ErrorChangingTheme": "Error changing theme: {error}",
        # About
        "AboutTitle": "Quantum Circuit Simulator",
        "Version": "Version",
        "Team": "Team:",
        "Course": "Course:",
        "Year": "Year",
        "College": "Algonquin College",
        "Close": "Close",
    },
    "fr": {
        "File": "Fichier",
        "New": "Nouveau",
        "Open": "Ouvrir",
        "Save": "Enregistrer",
        "Exit": "Quitter",
        "Circuit": "Circuit",
        "ClearCircuit": "Effacer le circuit",
        "Settings": "Paramètres",
        "DarkMode": "Mode sombre",
        "ChangeLanguage": "Changer de langue",
        "ChangeLookFeel": "Changer l'apparence",
        "Help": "Aide",
        "About": "À propos",
        "QuantumGates": "Portes Quantiques",
        "SingleQubit": "Qubit Unique",
        "MultiQubit": "Multi Qubit",
        "Operations": "Opérations",
        "PhaseParameters": "Paramètres de Phase",
        "QuantumCircuit": "Circuit Quantique",
        "Messages": "Messages",
        "TensorProduct": "Produit tensoriel:|0...0>",
        "NewCircuit": "Nouveau circuit",
        "Step": "Étape",
        "Reset": "Réinitialiser",
        "PlayMode": "Mode lecture",
        "DesignMode": "Mode conception",
        "StepCount": "Étape:{step}/{max_steps}",
        "StatusQubits": "Qubits : {rows}",
        "StatusDepth": "Profondeur : {columns}",
        "StatusGates": "Portes : {count}",
        "StatusMode": "Mode : {mode}",
        "ApplicationStarted": "Application démarrée en mode conception",
        "GateSelected": "Porte sélectionnée : {gate}",
        "CannotSelectGate": "Impossible de sélectionner une porte en mode lecture",
        "PlayModeActive": "Position du circuit [{row},{col}] - Mode lecture actif",
        "SelectGateFirst": "Sélectionnez d'abord une porte",
        "GatePlaced": "Porte {gate} placée à la position [{row},{col}]",
        "PositionOccupied": "Position déjà occupée : [{row},{col}]",
        "StepExecuted": "Étape exécutée : {step}",
        "SwitchToPlayMode": "Passez en mode lecture pour exécuter des étapes",
        "MaxStepsReached": "Nombre maximal d'étapes atteint",
        "CircuitReset": "Circuit réinitialisé à l'état initial",
        "CircuitCleared": "Nouveau circuit créé",
        "SwitchedTo": "Passage en {mode}",
        "CircuitResized": "Circuit redimensionné à {rows} qubits et profondeur {columns}",
        "InvalidDimension": "Taille de circuit invalide : {error}",
        "NewCircuitTitle": "Nouveau circuit",
        "EnterQubits": "Entrez le nombre de qubits (lignes) :",
        "EnterDepth": "Entrez la profondeur du circuit (colonnes) :",
        "CircuitSaved": "Configuration du circuit enregistrée en mémoire",
        "CircuitSavedMessage": "Circuit enregistré avec succès !",
        "LoadingCircuit": "Chargement de la configuration du circuit...",
        "OpenCircuitMessage": "Ouverture de circuit - à implémenter",
        "DarkModeEnabled": "Mode sombre activé",
        "DarkModeDisabled": "Mode sombre désactivé",
        "LanguageChanged": "Langue changée en français",
        "ChooseLookAndFeel": "Choisissez l'apparence :",
        "LookAndFeel": "Apparence",
        "LookAndFeelChanged": "Apparence changée en : {style}",
        "ErrorChangingLookAndFeel": "Erreur lors du changement d'apparence : {error}",
        "ErrorChangingTheme": "Erreur lors du changement de thème : {error}",
        "AboutTitle": "Simulateur de Circuits Quantiques",
        "Version": "Version",
        "Team": "Équipe :",
        "Course": "Cours :",
        "Year": "Année",
        "College": "Collège Algonquin",
        "Close": "Fermer",
    },
}


def missing_keys(catalogs: dict[str, dict[str, str]] | None = None,
                 default: str = DEFAULT_LANGUAGE) -> dict[str, list[str]]:
    """Map each language to the default-catalog keys it lacks."""
    catalogs = CATALOGS if catalogs is None else catalogs
    if default not in catalogs:
        raise LocalizationError(f"Default catalog '{default}' is missing")
    reference = catalogs[default]
    result = {}
    for language, catalog in catalogs.items():
        absent = sorted(k for k in reference if k not in catalog)
        if absent:
            result[language] = absent
    return result


def validate_catalogs(catalogs: dict[str, dict[str, str]] | None = None,
                      default: str = DEFAULT_LANGUAGE):
    """Raise LocalizationError if any catalog lacks a default key."""
    missing = missing_keys(catalogs, default)
    if missing:
        details = "; ".join(
            f"{lang}: {', '.join(keys)}" for lang, keys in missing.items())
        raise LocalizationError(f"Incomplete catalogs -- {details}")


class Translator:
    """Looks up UI strings for the current language.

    Lookup order is current catalog, then the default catalog, then the
    key itself.
    """

    def __init__(self, language: str = DEFAULT_LANGUAGE,
                 catalogs: dict[str, dict[str, str]] | None = None,
                 default: str = DEFAULT_LANGUAGE):
        self._catalogs = CATALOGS if catalogs is None else catalogs
        self._default = default
        validate_catalogs(self._catalogs, default)
        self._language = default
        self.set_language(language)

    @property
    def language(self) -> str:
        return self._language

    @property
    def languages(self) -> list[str]:
        return list(self._catalogs)

    def set_language(self, language: str):
        if language not in self._catalogs:
            raise LocalizationError(
                f"Unknown language '{language}'. "
                f"Available languages: {self.languages}")
        self._language = language

    def cycle_language(self) -> str:
        """Switch to the next available language and return its code."""
        languages = self.languages
        index = languages.index(self._language)
        self._language = languages[(index + 1) % len(languages)]
        logger.debug("Language switched to %s", self._language)
        return self._language

    def tr(self, key: str, **kwargs) -> str:
        text = self._catalogs[self._language].get(key)
        if text is None:
            text = self._catalogs[self._default].get(key, key)
        if kwargs:
            text = text.format(**kwargs)
        return text
