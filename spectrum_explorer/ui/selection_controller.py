"""Selection controller — owns the selected wavelength.

The wavelength is the single authoritative value; frequency, photon energy
and region are always derived from it.  Every input path (bar click,
keyboard, typed wavelength/frequency/energy) goes through this controller,
which emits Qt signals so the bar, panels and chart stay in sync.
"""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal

from spectrum_explorer.constants import DEFAULT_WAVELENGTH_M
from spectrum_explorer.core.photon import (
    energy_ev_to_wavelength,
    frequency_to_wavelength,
    is_valid_wavelength,
    parse_energy,
    parse_frequency,
    parse_wavelength,
)
from spectrum_explorer.core.spectrum_bar import NavKey, SpectrumBarLayout, step_wavelength
from spectrum_explorer.core.spectrum_catalog import SpectrumCatalog, default_catalog
from spectrum_explorer.core.units import QuantityKind
from spectrum_explorer.models.preferences import DisplayPreferences
from spectrum_explorer.models.spectrum import PhotonState

logger = logging.getLogger(__name__)

_PARSERS = {
    QuantityKind.WAVELENGTH: parse_wavelength,
    QuantityKind.FREQUENCY: parse_frequency,
    QuantityKind.ENERGY: parse_energy,
}


class SelectionController(QObject):
    """Mediator between the selected wavelength and the UI views."""

    # New wavelength [m]
    wavelength_changed = pyqtSignal(float)
    # Input could not be turned into a wavelength (QuantityKind.value)
    input_rejected = pyqtSignal(str)
    # DisplayPreferences replaced
    preferences_changed = pyqtSignal(object)

    def __init__(
        self,
        catalog: SpectrumCatalog | None = None,
        parent: QObject | None = None,
    ):
        super().__init__(parent)
        self._catalog = catalog if catalog is not None else default_catalog()
        self._bar_layout = SpectrumBarLayout.from_catalog(self._catalog)
        self._wavelength: float = DEFAULT_WAVELENGTH_M
        self._preferences = DisplayPreferences()

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def catalog(self) -> SpectrumCatalog:
        return self._catalog

    @property
    def bar_layout(self) -> SpectrumBarLayout:
        return self._bar_layout

    @property
    def wavelength(self) -> float:
        return self._wavelength

    @property
    def state(self) -> PhotonState:
        """Frequency, energy and region derived from the current wavelength."""
        return self._catalog.describe(self._wavelength)

    @property
    def preferences(self) -> DisplayPreferences:
        return self._preferences

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def set_wavelength(self, wavelength_m: float) -> bool:
        """Select *wavelength_m* [m].

        Returns False (and emits ``input_rejected``) for values that are not
        a plausible wavelength.
        """
        return self._select(wavelength_m, QuantityKind.WAVELENGTH)

    def set_frequency(self, frequency_hz: float) -> bool:
        """Select the wavelength matching *frequency_hz* [Hz]."""
        return self._select(frequency_to_wavelength(frequency_hz), QuantityKind.FREQUENCY)

    def set_energy(self, energy_ev: float) -> bool:
        """Select the wavelength matching *energy_ev* [eV]."""
        return self._select(energy_ev_to_wavelength(energy_ev), QuantityKind.ENERGY)

    def _select(self, wavelength_m: float | None, source: QuantityKind) -> bool:
        # Rejections are reported against the quantity the user entered
        if wavelength_m is None or not is_valid_wavelength(wavelength_m):
            logger.debug("Rejected %s input (wavelength %r)", source.value, wavelength_m)
            self.input_rejected.emit(source.value)
            return False
        wavelength_m = float(wavelength_m)
        if wavelength_m == self._wavelength:
            return True
        self._wavelength = wavelength_m
        self.wavelength_changed.emit(wavelength_m)
        return True

    def set_from_text(self, kind: QuantityKind, text: str) -> bool:
        """Parse free text for *kind* (e.g. ``"2.4 GHz"``) and select it."""
        value = _PARSERS[kind](text)
        if value is None:
            self.input_rejected.emit(kind.value)
            return False
        if kind is QuantityKind.FREQUENCY:
            return self.set_frequency(value)
        if kind is QuantityKind.ENERGY:
            return self.set_energy(value)
        return self.set_wavelength(value)

    def set_bar_position(self, position: float) -> bool:
        """Select the wavelength under a spectrum bar position [0–1]."""
        return self.set_wavelength(self._bar_layout.wavelength_at(position))

    def step(self, key: NavKey, large: bool = False) -> bool:
        """Apply a keyboard navigation action."""
        return self.set_wavelength(step_wavelength(self._wavelength, key, large))

    def set_preferences(self, preferences: DisplayPreferences) -> None:
        if preferences == self._preferences:
            return
        self._preferences = preferences
        self.preferences_changed.emit(preferences)
