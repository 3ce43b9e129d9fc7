"""Educational panel — description of the selected spectral region.

Shows the region name with its colour, its wavelength, frequency and
energy ranges, a short description, typical applications and examples,
and for visible light the nearest named colour.  Outside the catalog the
panel reads "Unknown region".

A "Quick region select" grid below the card jumps the selection to the
log-scale centre of any region.
"""

from __future__ import annotations

from PyQt6.QtWidgets import (
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from spectrum_explorer.core.photon import format_energy, format_frequency, format_wavelength
from spectrum_explorer.models.spectrum import SpectrumRegion
from spectrum_explorer.ui.selection_controller import SelectionController
from spectrum_explorer.ui.styles.colors import UNKNOWN_REGION
from spectrum_explorer.ui.widgets.collapsible_section import CollapsibleSection

_QUICK_SELECT_COLUMNS = 4


class EducationalPanel(QWidget):
    """Region information card driven by the selected wavelength."""

    def __init__(self, controller: SelectionController, parent: QWidget | None = None):
        super().__init__(parent)
        self._controller = controller
        self._region_buttons: dict[str, QPushButton] = {}
        self._build_ui()
        controller.wavelength_changed.connect(self._on_wavelength_changed)
        self.refresh()

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 6, 8, 6)
        layout.setSpacing(6)

        header = QHBoxLayout()
        self._swatch = QLabel()
        self._swatch.setFixedSize(16, 16)
        header.addWidget(self._swatch)
        self._name_label = QLabel()
        self._name_label.setProperty("cssClass", "section-title")
        header.addWidget(self._name_label)
        header.addStretch()
        layout.addLayout(header)

        self._range_label = QLabel()
        self._range_label.setProperty("cssClass", "prop-label")
        layout.addWidget(self._range_label)
        self._frequency_range_label = QLabel()
        self._frequency_range_label.setProperty("cssClass", "prop-label")
        layout.addWidget(self._frequency_range_label)
        self._energy_range_label = QLabel()
        self._energy_range_label.setProperty("cssClass", "prop-label")
        layout.addWidget(self._energy_range_label)

        self._band_label = QLabel()
        self._band_label.setProperty("cssClass", "prop-label")
        layout.addWidget(self._band_label)

        self._description = QLabel()
        self._description.setWordWrap(True)
        layout.addWidget(self._description)

        self._applications = CollapsibleSection("Applications")
        layout.addWidget(self._applications)
        self._examples = CollapsibleSection("Examples")
        layout.addWidget(self._examples)

        quick_title = QLabel("Quick region select")
        quick_title.setProperty("cssClass", "section-title")
        layout.addWidget(quick_title)
        grid = QGridLayout()
        grid.setSpacing(4)
        for i, region in enumerate(self._controller.catalog.regions):
            btn = QPushButton(region.name)
            btn.setCheckable(True)
            btn.setProperty("cssClass", "region-button")
            btn.setStyleSheet(f"border-left: 4px solid {region.color};")
            btn.setToolTip(f"Jump to {format_wavelength(region.center_wavelength)}")
            btn.clicked.connect(lambda _checked, r=region: self._on_region_clicked(r))
            grid.addWidget(btn, i // _QUICK_SELECT_COLUMNS, i % _QUICK_SELECT_COLUMNS)
            self._region_buttons[region.id] = btn
        layout.addLayout(grid)
        layout.addStretch()

    @property
    def region_name(self) -> str:
        return self._name_label.text()

    def region_button(self, region_id: str) -> QPushButton:
        """Quick-select button for *region_id*.

        Raises:
            KeyError: If *region_id* is not in the catalog.
        """
        return self._region_buttons[region_id]

    def refresh(self) -> None:
        wavelength = self._controller.wavelength
        region = self._controller.catalog.classify_by_wavelength(wavelength)
        for region_id, btn in self._region_buttons.items():
            btn.setChecked(region is not None and region.id == region_id)
        if region is None:
            self._show_unknown()
            return
        self._show_region(region)

        band = self._controller.catalog.visible_band(wavelength)
        if band is None:
            self._band_label.setVisible(False)
        else:
            self._band_label.setText(f"Colour: {band.name}")
            self._band_label.setStyleSheet(f"color: {band.color};")
            self._band_label.setVisible(True)

    def _show_region(self, region: SpectrumRegion) -> None:
        self._set_swatch(region.color)
        self._name_label.setText(region.name)
        self._range_label.setText(
            f"Wavelength: {format_wavelength(region.wavelength_min)} – "
            f"{format_wavelength(region.wavelength_max)}"
        )
        self._frequency_range_label.setText(
            f"Frequency: {format_frequency(region.frequency_min)} – "
            f"{format_frequency(region.frequency_max)}"
        )
        self._energy_range_label.setText(
            f"Energy: {format_energy(region.energy_min)} – "
            f"{format_energy(region.energy_max)}"
        )
        self._frequency_range_label.setVisible(True)
        self._energy_range_label.setVisible(True)
        self._description.setText(region.description)
        self._applications.set_items(list(region.applications))
        self._examples.set_items(list(region.examples))
        self._applications.setVisible(True)
        self._examples.setVisible(True)

    def _show_unknown(self) -> None:
        self._set_swatch(UNKNOWN_REGION)
        self._name_label.setText("Unknown region")
        lo, hi = self._controller.catalog.wavelength_range
        self._range_label.setText(
            f"Outside the charted range ({format_wavelength(lo)} – {format_wavelength(hi)})"
        )
        self._frequency_range_label.setVisible(False)
        self._energy_range_label.setVisible(False)
        self._band_label.setVisible(False)
        self._description.setText("")
        self._applications.setVisible(False)
        self._examples.setVisible(False)

    def _set_swatch(self, color: str) -> None:
        self._swatch.setStyleSheet(
            f"background-color: {color}; border-radius: 3px;"
        )

    def _on_region_clicked(self, region: SpectrumRegion) -> None:
        self._controller.set_wavelength(region.center_wavelength)
        # Clicking the already selected region leaves the wavelength unchanged
        self.refresh()

    def _on_wavelength_changed(self, _wavelength: float) -> None:
        self.refresh()
