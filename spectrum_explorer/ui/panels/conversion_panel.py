"""Conversion panel — wavelength / frequency / energy inputs.

Each field accepts a number with an optional unit suffix ("550nm",
"2.4 GHz", "1.5eV").  Committing a field (Enter or focus out) selects the
matching wavelength through the SelectionController; the other two fields
are then recomputed from it.  Rejected input marks the field and shows a
short message instead of changing the selection.
"""

from __future__ import annotations

from PyQt6.QtWidgets import QFormLayout, QLabel, QLineEdit, QVBoxLayout, QWidget

from spectrum_explorer.core.photon import (
    format_energy,
    format_frequency,
    format_wavelength,
)
from spectrum_explorer.core.units import QuantityKind
from spectrum_explorer.ui.selection_controller import SelectionController

_PLACEHOLDERS = {
    QuantityKind.WAVELENGTH: "e.g. 550 nm",
    QuantityKind.FREQUENCY: "e.g. 545 THz",
    QuantityKind.ENERGY: "e.g. 2.25 eV",
}

_LABELS = {
    QuantityKind.WAVELENGTH: "Wavelength (λ)",
    QuantityKind.FREQUENCY: "Frequency (f)",
    QuantityKind.ENERGY: "Photon energy (E)",
}


class ConversionPanel(QWidget):
    """Three linked input fields plus auto-scaled readouts."""

    def __init__(self, controller: SelectionController, parent: QWidget | None = None):
        super().__init__(parent)
        self._controller = controller
        self._edits: dict[QuantityKind, QLineEdit] = {}
        self._readouts: dict[QuantityKind, QLabel] = {}
        self._build_ui()

        controller.wavelength_changed.connect(self._on_wavelength_changed)
        controller.preferences_changed.connect(self._on_preferences_changed)
        controller.input_rejected.connect(self._on_input_rejected)
        self.refresh()

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 6, 8, 6)
        layout.setSpacing(6)

        title = QLabel("Conversions")
        title.setProperty("cssClass", "section-title")
        layout.addWidget(title)

        form = QFormLayout()
        form.setSpacing(4)
        for kind in QuantityKind:
            edit = QLineEdit()
            edit.setPlaceholderText(_PLACEHOLDERS[kind])
            edit.setAccessibleName(_LABELS[kind])
            edit.editingFinished.connect(
                lambda k=kind: self._commit(k)
            )
            readout = QLabel("")
            readout.setProperty("cssClass", "prop-label")
            self._edits[kind] = edit
            self._readouts[kind] = readout
            form.addRow(_LABELS[kind], edit)
            form.addRow("", readout)
        layout.addLayout(form)

        self._error_label = QLabel("")
        self._error_label.setProperty("cssClass", "error-label")
        layout.addWidget(self._error_label)

        formula = QLabel("c = λ·f      E = h·f = h·c / λ")
        formula.setProperty("cssClass", "prop-label")
        layout.addWidget(formula)
        layout.addStretch()

    # ------------------------------------------------------------------
    # Public
    # ------------------------------------------------------------------

    def edit_for(self, kind: QuantityKind) -> QLineEdit:
        return self._edits[kind]

    def refresh(self) -> None:
        """Rewrite all fields from the controller's current state."""
        state = self._controller.state
        prefs = self._controller.preferences
        values = {
            QuantityKind.WAVELENGTH: state.wavelength,
            QuantityKind.FREQUENCY: state.frequency,
            QuantityKind.ENERGY: state.energy_ev,
        }
        for kind, value in values.items():
            edit = self._edits[kind]
            edit.blockSignals(True)
            edit.setText(prefs.format(value, kind))
            edit.blockSignals(False)
            self._set_invalid(edit, False)

        self._readouts[QuantityKind.WAVELENGTH].setText(f"≈ {format_wavelength(state.wavelength)}")
        self._readouts[QuantityKind.FREQUENCY].setText(f"≈ {format_frequency(state.frequency)}")
        self._readouts[QuantityKind.ENERGY].setText(f"≈ {format_energy(state.energy_ev)}")
        self._error_label.setText("")

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _commit(self, kind: QuantityKind) -> None:
        edit = self._edits[kind]
        if not edit.isModified():
            return
        edit.setModified(False)
        if self._controller.set_from_text(kind, edit.text()):
            # Re-entering the current value emits nothing; clear the mark here
            self.refresh()

    def _set_invalid(self, edit: QLineEdit, invalid: bool) -> None:
        edit.setProperty("invalid", "true" if invalid else "false")
        edit.style().unpolish(edit)
        edit.style().polish(edit)

    def _on_wavelength_changed(self, _wavelength: float) -> None:
        self.refresh()

    def _on_preferences_changed(self, _preferences) -> None:
        self.refresh()

    def _on_input_rejected(self, kind_value: str) -> None:
        kind = QuantityKind(kind_value)
        self._set_invalid(self._edits[kind], True)
        self._error_label.setText(f"Invalid {kind.value}: enter a positive number with an optional unit")
