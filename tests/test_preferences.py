"""Display preferences model and QSettings persistence."""

import logging
import sys

import pytest
from PyQt6.QtCore import QSettings
from PyQt6.QtWidgets import QApplication

from spectrum_explorer.core.units import QuantityKind
from spectrum_explorer.models.preferences import DisplayPreferences
from spectrum_explorer.ui.preferences_store import load_preferences, save_preferences

_app = QApplication.instance() or QApplication(sys.argv)


class TestDefaults:
    def test_values(self):
        prefs = DisplayPreferences()
        assert prefs.wavelength_unit == "nm"
        assert prefs.frequency_unit == "THz"
        assert prefs.energy_unit == "eV"
        assert prefs.scientific_notation is True
        assert prefs.decimal_places == 2

    def test_unit_for(self):
        prefs = DisplayPreferences()
        assert prefs.unit_for(QuantityKind.WAVELENGTH) == "nm"
        assert prefs.unit_for(QuantityKind.FREQUENCY) == "THz"
        assert prefs.unit_for(QuantityKind.ENERGY) == "eV"


class TestFormatting:
    def test_scientific_default(self):
        assert DisplayPreferences().format_wavelength(550e-9) == "5.50e+02 nm"

    def test_fixed(self):
        prefs = DisplayPreferences(scientific_notation=False)
        assert prefs.format_frequency(5.450772e14) == "545.08 THz"
        assert prefs.format_energy(2.254258) == "2.25 eV"

    def test_chosen_unit_and_decimals(self):
        prefs = DisplayPreferences(
            wavelength_unit="μm", scientific_notation=False, decimal_places=3,
        )
        assert prefs.format_wavelength(550e-9) == "0.550 μm"

    def test_invalid_value(self):
        assert DisplayPreferences().format_energy(None) == "Invalid energy"


class TestSerialisation:
    def test_round_trip(self):
        prefs = DisplayPreferences(
            wavelength_unit="Å", frequency_unit="GHz", energy_unit="keV",
            scientific_notation=False, decimal_places=4,
        )
        assert DisplayPreferences.from_dict(prefs.to_dict()) == prefs

    def test_empty_gives_defaults(self):
        assert DisplayPreferences.from_dict({}) == DisplayPreferences()

    def test_unknown_keys_ignored(self):
        assert DisplayPreferences.from_dict({"theme": "dark"}) == DisplayPreferences()

    def test_bad_unit_falls_back(self, caplog):
        with caplog.at_level(logging.WARNING):
            prefs = DisplayPreferences.from_dict({"energy_unit": "erg"})
        assert prefs.energy_unit == "eV"
        assert "erg" in caplog.text

    def test_decimal_places_clamped(self):
        assert DisplayPreferences.from_dict({"decimal_places": "15"}).decimal_places == 10
        assert DisplayPreferences.from_dict({"decimal_places": -3}).decimal_places == 0

    def test_decimal_places_garbage(self, caplog):
        with caplog.at_level(logging.WARNING):
            prefs = DisplayPreferences.from_dict({"decimal_places": "many"})
        assert prefs.decimal_places == 2
        assert "decimal_places" in caplog.text

    @pytest.mark.parametrize(
        "raw, expected",
        [("true", True), ("false", False), ("0", False), ("1", True), (False, False), (True, True)],
    )
    def test_bool_strings(self, raw, expected):
        assert DisplayPreferences.from_dict({"scientific_notation": raw}).scientific_notation is expected


class TestPreferencesStore:
    def _settings(self, tmp_path):
        return QSettings(str(tmp_path / "prefs.ini"), QSettings.Format.IniFormat)

    def test_empty_store_gives_defaults(self, tmp_path):
        assert load_preferences(self._settings(tmp_path)) == DisplayPreferences()

    def test_save_and_load(self, tmp_path):
        prefs = DisplayPreferences(
            wavelength_unit="pm", frequency_unit="MHz", energy_unit="MeV",
            scientific_notation=False, decimal_places=5,
        )
        save_preferences(self._settings(tmp_path), prefs)
        assert load_preferences(self._settings(tmp_path)) == prefs

    def test_meV_survives(self, tmp_path):
        save_preferences(self._settings(tmp_path), DisplayPreferences(energy_unit="meV"))
        assert load_preferences(self._settings(tmp_path)).energy_unit == "meV"

    def test_corrupt_value_falls_back(self, tmp_path):
        settings = self._settings(tmp_path)
        settings.setValue("preferences/wavelength_unit", "furlong")
        settings.setValue("preferences/decimal_places", 3)
        settings.sync()
        prefs = load_preferences(self._settings(tmp_path))
        assert prefs.wavelength_unit == "nm"
        assert prefs.decimal_places == 3
