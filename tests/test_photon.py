"""Photon relations: conversions, validators, formatting and parsing."""

import logging
import math

import numpy as np
import pytest

from spectrum_explorer.core.photon import (
    energy_ev_to_frequency,
    energy_ev_to_wavelength,
    format_energy,
    format_frequency,
    format_wavelength,
    frequency_to_energy_ev,
    frequency_to_energy_joules,
    frequency_to_wavelength,
    is_valid_energy,
    is_valid_frequency,
    is_valid_wavelength,
    parse_energy,
    parse_frequency,
    parse_wavelength,
    wavelength_to_energy_ev,
    wavelength_to_frequency,
    wavelengths_to_energies_ev,
    wavelengths_to_frequencies,
)

GREEN_M = 550e-9
GREEN_HZ = 5.450772e14
GREEN_EV = 2.254258

_CONVERSIONS = [
    wavelength_to_frequency,
    frequency_to_wavelength,
    frequency_to_energy_ev,
    frequency_to_energy_joules,
    wavelength_to_energy_ev,
    energy_ev_to_wavelength,
    energy_ev_to_frequency,
]


class TestConversions:
    def test_wavelength_to_frequency(self):
        assert wavelength_to_frequency(GREEN_M) == pytest.approx(GREEN_HZ, rel=1e-6)

    def test_frequency_to_wavelength(self):
        assert frequency_to_wavelength(GREEN_HZ) == pytest.approx(GREEN_M, rel=1e-6)

    def test_wavelength_to_energy(self):
        assert wavelength_to_energy_ev(GREEN_M) == pytest.approx(GREEN_EV, rel=1e-6)

    def test_energy_to_wavelength(self):
        # 1 eV ↔ 1239.84 nm
        assert energy_ev_to_wavelength(1.0) == pytest.approx(1.239841984e-6, rel=1e-9)

    def test_frequency_to_energy(self):
        assert frequency_to_energy_ev(1e15) == pytest.approx(4.135667696, rel=1e-9)

    def test_energy_to_frequency(self):
        assert energy_ev_to_frequency(4.135667696) == pytest.approx(1e15, rel=1e-9)

    def test_frequency_to_energy_joules(self):
        assert frequency_to_energy_joules(1e15) == pytest.approx(6.62607015e-19, rel=1e-12)

    def test_accepts_int(self):
        assert wavelength_to_frequency(1) == pytest.approx(299_792_458.0)

    @pytest.mark.parametrize("func", _CONVERSIONS)
    @pytest.mark.parametrize(
        "value", [0, 0.0, -1, -1e-9, math.inf, -math.inf, math.nan, None, "550", True],
    )
    def test_invalid_input_returns_none(self, func, value):
        assert func(value) is None


class TestVectorised:
    def test_energies(self):
        out = wavelengths_to_energies_ev([GREEN_M, 0.0, -1.0, np.nan])
        assert out[0] == pytest.approx(GREEN_EV, rel=1e-6)
        assert np.isnan(out[1:]).all()

    def test_frequencies(self):
        out = wavelengths_to_frequencies(np.array([1.0, np.inf]))
        assert out[0] == pytest.approx(299_792_458.0)
        assert np.isnan(out[1])

    def test_matches_scalar(self):
        wavelengths = np.logspace(-15, 4, 20)
        out = wavelengths_to_energies_ev(wavelengths)
        expected = [wavelength_to_energy_ev(float(w)) for w in wavelengths]
        assert out == pytest.approx(np.array(expected), rel=1e-12)


class TestValidators:
    def test_wavelength(self):
        assert is_valid_wavelength(GREEN_M)
        assert is_valid_wavelength(1e10)
        assert not is_valid_wavelength(1.1e10)
        assert not is_valid_wavelength(0)
        assert not is_valid_wavelength(math.nan)

    def test_frequency(self):
        assert is_valid_frequency(1e30)
        assert not is_valid_frequency(1.1e30)
        assert not is_valid_frequency(-5)

    def test_energy(self):
        assert is_valid_energy(1e15)
        assert not is_valid_energy(1.1e15)
        assert not is_valid_energy(None)


class TestFormatWavelength:
    def test_nanometres(self):
        assert format_wavelength(GREEN_M) == "550.00 nm"

    def test_decimals(self):
        assert format_wavelength(GREEN_M, decimals=0) == "550 nm"

    def test_metres_exponential(self):
        assert format_wavelength(2.5) == "2.50e+00 m"

    def test_millimetres(self):
        assert format_wavelength(1e-3) == "1.00 mm"

    def test_micrometres(self):
        assert format_wavelength(1.5e-6) == "1.50 μm"

    def test_picometres(self):
        assert format_wavelength(5e-12) == "5.00 pm"

    def test_below_picometre(self):
        assert format_wavelength(5e-13) == "5.00e-13 m"

    @pytest.mark.parametrize("value", [0, -1, math.inf, math.nan, None])
    def test_invalid(self, value):
        assert format_wavelength(value) == "Invalid wavelength"


class TestFormatFrequency:
    def test_units(self):
        assert format_frequency(2e15) == "2.00 PHz"
        assert format_frequency(5.45e14) == "545.00 THz"
        assert format_frequency(2.4e9) == "2.40 GHz"
        assert format_frequency(1e8) == "100.00 MHz"
        assert format_frequency(5e3) == "5.00 kHz"
        assert format_frequency(50) == "50.00 Hz"

    def test_invalid(self):
        assert format_frequency(0) == "Invalid frequency"


class TestFormatEnergy:
    def test_units(self):
        assert format_energy(2e9) == "2.00 GeV"
        assert format_energy(1.5e6) == "1.50 MeV"
        assert format_energy(511e3) == "511.00 keV"
        assert format_energy(2.254) == "2.25 eV"
        assert format_energy(0.02) == "20.00 meV"

    def test_below_milli(self):
        assert format_energy(1e-5) == "1.00e-05 eV"

    def test_invalid(self):
        assert format_energy(-2) == "Invalid energy"


class TestParseWavelength:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("550nm", 550e-9),
            ("550 nm", 550e-9),
            ("  550  nm  ", 550e-9),
            ("550 NM", 550e-9),
            ("1.2 μm", 1.2e-6),
            ("1.2µm", 1.2e-6),
            ("1.2um", 1.2e-6),
            ("5 Å", 5e-10),
            ("3 cm", 3e-2),
            ("2km", 2e3),
            ("3e-7", 3e-7),
            ("3E-7 m", 3e-7),
            (".5mm", 5e-4),
            ("550 nanometers", 550e-9),
        ],
    )
    def test_valid(self, text, expected):
        assert parse_wavelength(text) == pytest.approx(expected, rel=1e-12)

    def test_unknown_suffix_means_metres(self):
        assert parse_wavelength("550 xyz") == 550.0

    def test_unknown_suffix_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="spectrum_explorer.core.photon"):
            parse_wavelength("550 xyz")
        assert "xyz" in caplog.text

    @pytest.mark.parametrize(
        "text",
        ["", "   ", None, 550, "abc", "nm", "-5nm", "0", "0 nm",
         "NaN", "Infinity", "1/2", "null", "undefined", "1e400"],
    )
    def test_rejected(self, text):
        assert parse_wavelength(text) is None


class TestParseFrequency:
    def test_units(self):
        assert parse_frequency("2.4 GHz") == pytest.approx(2.4e9)
        assert parse_frequency("545THz") == pytest.approx(5.45e14)
        assert parse_frequency("545thz") == pytest.approx(5.45e14)
        assert parse_frequency("100 kHz") == pytest.approx(1e5)

    def test_no_suffix_means_hertz(self):
        assert parse_frequency("100") == 100.0

    def test_rejected(self):
        assert parse_frequency("-2.4 GHz") is None


class TestParseEnergy:
    def test_units(self):
        assert parse_energy("1.5eV") == pytest.approx(1.5)
        assert parse_energy("511 keV") == pytest.approx(511e3)
        assert parse_energy("1 GeV") == pytest.approx(1e9)
        assert parse_energy("1 J") == pytest.approx(6.241509074e18, rel=1e-9)

    def test_milli_versus_mega(self):
        assert parse_energy("2 meV") == pytest.approx(2e-3)
        assert parse_energy("2 MeV") == pytest.approx(2e6)
        assert parse_energy("2 mev") == pytest.approx(2e6)
        assert parse_energy("2 MEV") == pytest.approx(2e6)

    def test_no_suffix_means_ev(self):
        assert parse_energy("2.25") == pytest.approx(2.25)

    def test_rejected(self):
        assert parse_energy("eV") is None
        assert parse_energy("NaN eV") is None
