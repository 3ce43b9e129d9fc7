"""Tests for SelectionController — selected-wavelength mediator.

Tests every input path, signal emissions and rejection of invalid values.
"""

import sys
from unittest.mock import MagicMock

import pytest
from PyQt6.QtWidgets import QApplication

from spectrum_explorer.core.photon import wavelength_to_frequency
from spectrum_explorer.core.physical_constants import PhysicalConstants
from spectrum_explorer.core.spectrum_bar import NavKey
from spectrum_explorer.core.units import QuantityKind
from spectrum_explorer.models.preferences import DisplayPreferences
from spectrum_explorer.ui.selection_controller import SelectionController

# QApplication instance needed for QObject / signals
_app = QApplication.instance() or QApplication(sys.argv)


class TestControllerDefaults:
    def setup_method(self):
        self.ctrl = SelectionController()

    def test_default_wavelength(self):
        assert self.ctrl.wavelength == 550e-9

    def test_default_state(self):
        state = self.ctrl.state
        assert state.region.id == "visible"
        assert state.frequency == pytest.approx(5.450772e14, rel=1e-6)

    def test_default_preferences(self):
        assert self.ctrl.preferences == DisplayPreferences()

    def test_bar_layout_matches_catalog(self):
        assert len(self.ctrl.bar_layout.segments) == len(self.ctrl.catalog.regions)


class TestSetWavelength:
    def setup_method(self):
        self.ctrl = SelectionController()
        self.changed = MagicMock()
        self.rejected = MagicMock()
        self.ctrl.wavelength_changed.connect(self.changed)
        self.ctrl.input_rejected.connect(self.rejected)

    def test_emits_once(self):
        assert self.ctrl.set_wavelength(600e-9)
        self.changed.assert_called_once_with(600e-9)
        assert self.ctrl.state.region.id == "visible"

    def test_same_value_no_signal(self):
        assert self.ctrl.set_wavelength(550e-9)
        self.changed.assert_not_called()

    @pytest.mark.parametrize("value", [0, -1e-9, float("nan"), float("inf"), 2e10])
    def test_rejected(self, value):
        assert not self.ctrl.set_wavelength(value)
        self.changed.assert_not_called()
        self.rejected.assert_called_once_with("wavelength")
        assert self.ctrl.wavelength == 550e-9

    def test_outside_catalog_still_selectable(self):
        assert self.ctrl.set_wavelength(1e6)
        assert self.ctrl.state.region is None
        assert self.ctrl.state.region_name == "Unknown region"


class TestOtherInputs:
    def setup_method(self):
        self.ctrl = SelectionController()
        self.changed = MagicMock()
        self.rejected = MagicMock()
        self.ctrl.wavelength_changed.connect(self.changed)
        self.ctrl.input_rejected.connect(self.rejected)

    def test_set_frequency(self):
        assert self.ctrl.set_frequency(wavelength_to_frequency(1e-6))
        assert self.ctrl.wavelength == pytest.approx(1e-6)
        self.changed.assert_called_once()

    def test_set_energy(self):
        assert self.ctrl.set_energy(2.0)
        assert self.ctrl.wavelength == pytest.approx(PhysicalConstants.HC_EV_M / 2.0)

    def test_invalid_energy(self):
        assert not self.ctrl.set_energy(-1)
        self.rejected.assert_called_once_with("energy")

    def test_invalid_frequency(self):
        assert not self.ctrl.set_frequency(0)
        self.rejected.assert_called_once_with("frequency")

    def test_frequency_beyond_wavelength_limit_reported_as_frequency(self):
        # 0.001 Hz is a 3e11 m wave, longer than any plausible wavelength
        assert not self.ctrl.set_from_text(QuantityKind.FREQUENCY, "0.001 Hz")
        self.rejected.assert_called_once_with("frequency")
        self.changed.assert_not_called()
        assert self.ctrl.wavelength == 550e-9

    def test_energy_beyond_wavelength_limit_reported_as_energy(self):
        assert not self.ctrl.set_energy(1e-20)
        self.rejected.assert_called_once_with("energy")
        self.changed.assert_not_called()

    def test_set_from_text_frequency(self):
        assert self.ctrl.set_from_text(QuantityKind.FREQUENCY, "2.4 GHz")
        assert self.ctrl.wavelength == pytest.approx(PhysicalConstants.SPEED_OF_LIGHT / 2.4e9)

    def test_set_from_text_wavelength(self):
        assert self.ctrl.set_from_text(QuantityKind.WAVELENGTH, "1 mm")
        assert self.ctrl.wavelength == pytest.approx(1e-3)

    def test_set_from_text_energy(self):
        assert self.ctrl.set_from_text(QuantityKind.ENERGY, "1 keV")
        assert self.ctrl.state.region.id == "xray"

    def test_set_from_text_rejected(self):
        assert not self.ctrl.set_from_text(QuantityKind.WAVELENGTH, "abc")
        self.rejected.assert_called_once_with("wavelength")
        self.changed.assert_not_called()

    def test_bar_position(self):
        assert self.ctrl.set_bar_position(0.0)
        assert self.ctrl.wavelength == pytest.approx(1e-15)
        assert self.ctrl.state.region.id == "gamma"

    def test_step(self):
        assert self.ctrl.step(NavKey.RIGHT)
        assert self.ctrl.wavelength == pytest.approx(550e-9 * 1.05)
        assert self.ctrl.step(NavKey.HOME)
        assert self.ctrl.wavelength == 1e-12
        assert self.changed.call_count == 2


class TestPreferences:
    def test_emits_on_change(self):
        ctrl = SelectionController()
        spy = MagicMock()
        ctrl.preferences_changed.connect(spy)
        prefs = DisplayPreferences(energy_unit="keV")
        ctrl.set_preferences(prefs)
        spy.assert_called_once_with(prefs)
        ctrl.set_preferences(DisplayPreferences(energy_unit="keV"))
        assert spy.call_count == 1
