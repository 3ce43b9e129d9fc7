"""Spectrum chart widget — photon energy against wavelength.

Log-log plot of E = hc/λ across the catalog's wavelength range, with each
spectral region shaded in its colour and a marker at the selected
wavelength.

Units: x axis wavelength [m], y axis photon energy [eV].
"""

from __future__ import annotations

import numpy as np
from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QVBoxLayout, QWidget

from spectrum_explorer.constants import CHART_SAMPLES
from spectrum_explorer.core.photon import format_wavelength, wavelengths_to_energies_ev
from spectrum_explorer.ui.charts.base_chart import BaseChart
from spectrum_explorer.ui.selection_controller import SelectionController
from spectrum_explorer.ui.styles.colors import ACCENT, INDICATOR


class SpectrumChartWidget(QWidget):
    """Energy-wavelength relation with region bands and selection marker."""

    def __init__(self, controller: SelectionController, parent: QWidget | None = None):
        super().__init__(parent)
        self._controller = controller
        self._marker = None

        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)

        self._chart = BaseChart(
            title="Photon energy vs wavelength",
            x_label="Wavelength [m]",
            y_label="Energy [eV]",
            log_x=True,
            log_y=True,
        )
        layout.addWidget(self._chart)

        self._draw_static()
        controller.wavelength_changed.connect(self._on_wavelength_changed)
        self._update_marker()

    @property
    def chart(self) -> BaseChart:
        return self._chart

    def sample_curve(self) -> tuple[np.ndarray, np.ndarray]:
        """Wavelength samples [m] and their photon energies [eV]."""
        lo, hi = self._controller.catalog.wavelength_range
        wavelengths = np.logspace(np.log10(lo), np.log10(hi), CHART_SAMPLES)
        return wavelengths, wavelengths_to_energies_ev(wavelengths)

    def _draw_static(self) -> None:
        chart = self._chart
        chart.clear_curves()
        for region in self._controller.catalog.regions:
            chart.add_region(
                chart.view_x(region.wavelength_min),
                chart.view_x(region.wavelength_max),
                color=region.color,
                alpha=0.25,
            )
        wavelengths, energies = self.sample_curve()
        chart.add_curve(wavelengths, energies, name="E = hc/λ", color=ACCENT)

    def _update_marker(self) -> None:
        if self._marker is not None:
            self._chart.remove_item(self._marker)
        wavelength = self._controller.wavelength
        self._marker = self._chart.add_infinite_line(
            self._chart.view_x(wavelength),
            color=INDICATOR,
            style=Qt.PenStyle.SolidLine,
            label=format_wavelength(wavelength),
        )

    def _on_wavelength_changed(self, _wavelength: float) -> None:
        self._update_marker()
