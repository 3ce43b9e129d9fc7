"""Preferences dialog — display units, notation and precision."""

from __future__ import annotations

from PyQt6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from spectrum_explorer.constants import MAX_DECIMAL_PLACES
from spectrum_explorer.core.units import QuantityKind, units_for
from spectrum_explorer.models.preferences import DisplayPreferences


class PreferencesDialog(QDialog):
    """Edit a copy of DisplayPreferences; read it back with ``preferences()``."""

    def __init__(self, preferences: DisplayPreferences, parent: QWidget | None = None):
        super().__init__(parent)
        self.setWindowTitle("Preferences")
        self.setMinimumWidth(320)

        layout = QVBoxLayout(self)
        form = QFormLayout()

        self._unit_combos: dict[QuantityKind, QComboBox] = {}
        for kind, label in (
            (QuantityKind.WAVELENGTH, "Wavelength unit"),
            (QuantityKind.FREQUENCY, "Frequency unit"),
            (QuantityKind.ENERGY, "Energy unit"),
        ):
            combo = QComboBox()
            for unit in units_for(kind):
                combo.addItem(f"{unit.symbol} ({unit.display_name})", unit.symbol)
            index = combo.findData(preferences.unit_for(kind))
            combo.setCurrentIndex(max(0, index))
            self._unit_combos[kind] = combo
            form.addRow(label, combo)

        self._scientific = QCheckBox("Scientific notation")
        self._scientific.setChecked(preferences.scientific_notation)
        form.addRow("", self._scientific)

        self._decimals = QSpinBox()
        self._decimals.setRange(0, MAX_DECIMAL_PLACES)
        self._decimals.setValue(preferences.decimal_places)
        form.addRow("Decimal places", self._decimals)
        layout.addLayout(form)

        buttons = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok
            | QDialogButtonBox.StandardButton.Cancel
            | QDialogButtonBox.StandardButton.RestoreDefaults
        )
        buttons.accepted.connect(self.accept)
        buttons.rejected.connect(self.reject)
        buttons.button(QDialogButtonBox.StandardButton.RestoreDefaults).clicked.connect(
            self.restore_defaults
        )
        layout.addWidget(buttons)

    def combo_for(self, kind: QuantityKind) -> QComboBox:
        return self._unit_combos[kind]

    def restore_defaults(self) -> None:
        self._apply(DisplayPreferences())

    def _apply(self, preferences: DisplayPreferences) -> None:
        for kind, combo in self._unit_combos.items():
            combo.setCurrentIndex(max(0, combo.findData(preferences.unit_for(kind))))
        self._scientific.setChecked(preferences.scientific_notation)
        self._decimals.setValue(preferences.decimal_places)

    def preferences(self) -> DisplayPreferences:
        """Preferences as currently shown in the dialog."""
        return DisplayPreferences(
            wavelength_unit=self._unit_combos[QuantityKind.WAVELENGTH].currentData(),
            frequency_unit=self._unit_combos[QuantityKind.FREQUENCY].currentData(),
            energy_unit=self._unit_combos[QuantityKind.ENERGY].currentData(),
            scientific_notation=self._scientific.isChecked(),
            decimal_places=self._decimals.value(),
        )
