"""Photon relations — wavelength ↔ frequency ↔ photon energy.

Canonical units: wavelength [m], frequency [Hz], energy [eV].

Every scalar conversion accepts a finite, strictly positive real number and
returns ``None`` for anything else (zero, negative, NaN, ±inf, non-numeric).
Interactive callers see partial or empty input constantly, so bad magnitudes
are a normal outcome rather than an error.

Also provides human-readable formatting with automatic unit selection and
lenient parsing of ``"<number><unit>"`` strings back to canonical values.
"""

from __future__ import annotations

import logging
import math
import re

import numpy as np
from numpy.typing import ArrayLike, NDArray

from spectrum_explorer.core.physical_constants import PhysicalConstants
from spectrum_explorer.core.units import (
    EnergyUnit,
    FrequencyUnit,
    QuantityKind,
    Unit,
    WavelengthUnit,
    canonical_unit,
    is_positive_finite,
    to_canonical,
)

logger = logging.getLogger(__name__)

_C = PhysicalConstants.SPEED_OF_LIGHT
_H_J = PhysicalConstants.PLANCK_J
_H_EV = PhysicalConstants.PLANCK_EV
_HC_EV = PhysicalConstants.HC_EV_M

# Plausibility ceilings for user-entered values
MAX_VALID_WAVELENGTH_M = 1e10
MAX_VALID_FREQUENCY_HZ = 1e30
MAX_VALID_ENERGY_EV = 1e15


def positive_magnitude(value) -> float | None:
    """*value* as float if finite and > 0, else None."""
    if not is_positive_finite(value):
        return None
    return float(value)


# ---------------------------------------------------------------------------
# Scalar conversions
# ---------------------------------------------------------------------------

def wavelength_to_frequency(wavelength_m: float) -> float | None:
    """f = c / λ.  Wavelength [m] → frequency [Hz]."""
    wl = positive_magnitude(wavelength_m)
    if wl is None:
        return None
    return _C / wl


def frequency_to_wavelength(frequency_hz: float) -> float | None:
    """λ = c / f.  Frequency [Hz] → wavelength [m]."""
    f = positive_magnitude(frequency_hz)
    if f is None:
        return None
    return _C / f


def frequency_to_energy_ev(frequency_hz: float) -> float | None:
    """E = h·f.  Frequency [Hz] → photon energy [eV]."""
    f = positive_magnitude(frequency_hz)
    if f is None:
        return None
    return _H_EV * f


def frequency_to_energy_joules(frequency_hz: float) -> float | None:
    """E = h·f.  Frequency [Hz] → photon energy [J]."""
    f = positive_magnitude(frequency_hz)
    if f is None:
        return None
    return _H_J * f


def wavelength_to_energy_ev(wavelength_m: float) -> float | None:
    """E = h·c / λ.  Wavelength [m] → photon energy [eV]."""
    wl = positive_magnitude(wavelength_m)
    if wl is None:
        return None
    return _HC_EV / wl


def energy_ev_to_wavelength(energy_ev: float) -> float | None:
    """λ = h·c / E.  Photon energy [eV] → wavelength [m]."""
    e = positive_magnitude(energy_ev)
    if e is None:
        return None
    return _HC_EV / e


def energy_ev_to_frequency(energy_ev: float) -> float | None:
    """f = E / h.  Photon energy [eV] → frequency [Hz]."""
    e = positive_magnitude(energy_ev)
    if e is None:
        return None
    return e / _H_EV


# ---------------------------------------------------------------------------
# Vectorised conversions (plotting)
# ---------------------------------------------------------------------------

def _valid_mask(arr: NDArray[np.float64]) -> NDArray[np.bool_]:
    return np.isfinite(arr) & (arr > 0)


def wavelengths_to_frequencies(wavelengths_m: ArrayLike) -> NDArray[np.float64]:
    """Array form of :func:`wavelength_to_frequency`; invalid entries → nan."""
    arr = np.asarray(wavelengths_m, dtype=float)
    out = np.full(arr.shape, np.nan)
    valid = _valid_mask(arr)
    out[valid] = _C / arr[valid]
    return out


def wavelengths_to_energies_ev(wavelengths_m: ArrayLike) -> NDArray[np.float64]:
    """Array form of :func:`wavelength_to_energy_ev`; invalid entries → nan."""
    arr = np.asarray(wavelengths_m, dtype=float)
    out = np.full(arr.shape, np.nan)
    valid = _valid_mask(arr)
    out[valid] = _HC_EV / arr[valid]
    return out


# ---------------------------------------------------------------------------
# Plausibility checks
# ---------------------------------------------------------------------------

def is_valid_wavelength(wavelength_m) -> bool:
    """Positive, finite and at most 1e10 m."""
    wl = positive_magnitude(wavelength_m)
    return wl is not None and wl <= MAX_VALID_WAVELENGTH_M


def is_valid_frequency(frequency_hz) -> bool:
    """Positive, finite and at most 1e30 Hz."""
    f = positive_magnitude(frequency_hz)
    return f is not None and f <= MAX_VALID_FREQUENCY_HZ


def is_valid_energy(energy_ev) -> bool:
    """Positive, finite and at most 1e15 eV."""
    e = positive_magnitude(energy_ev)
    return e is not None and e <= MAX_VALID_ENERGY_EV


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------

def format_wavelength(wavelength_m: float | None, decimals: int = 2) -> str:
    """Format a wavelength [m] with a readable unit.

    Brackets: ≥ 1 m and < 1 pm use exponential metres; otherwise mm, μm,
    nm or pm with *decimals* fixed digits.
    """
    wl = positive_magnitude(wavelength_m)
    if wl is None:
        return "Invalid wavelength"
    if wl >= 1.0:
        return f"{wl:.{decimals}e} m"
    if wl >= 1e-3:
        return f"{wl * 1e3:.{decimals}f} mm"
    if wl >= 1e-6:
        return f"{wl * 1e6:.{decimals}f} μm"
    if wl >= 1e-9:
        return f"{wl * 1e9:.{decimals}f} nm"
    if wl >= 1e-12:
        return f"{wl * 1e12:.{decimals}f} pm"
    return f"{wl:.{decimals}e} m"


def format_frequency(frequency_hz: float | None, decimals: int = 2) -> str:
    """Format a frequency [Hz] as PHz, THz, GHz, MHz, kHz or Hz."""
    f = positive_magnitude(frequency_hz)
    if f is None:
        return "Invalid frequency"
    if f >= 1e15:
        return f"{f / 1e15:.{decimals}f} PHz"
    if f >= 1e12:
        return f"{f / 1e12:.{decimals}f} THz"
    if f >= 1e9:
        return f"{f / 1e9:.{decimals}f} GHz"
    if f >= 1e6:
        return f"{f / 1e6:.{decimals}f} MHz"
    if f >= 1e3:
        return f"{f / 1e3:.{decimals}f} kHz"
    return f"{f:.{decimals}f} Hz"


def format_energy(energy_ev: float | None, decimals: int = 2) -> str:
    """Format a photon energy [eV] as GeV, MeV, keV, eV or meV.

    Below 1 meV falls back to exponential electron-volts.
    """
    e = positive_magnitude(energy_ev)
    if e is None:
        return "Invalid energy"
    if e >= 1e9:
        return f"{e / 1e9:.{decimals}f} GeV"
    if e >= 1e6:
        return f"{e / 1e6:.{decimals}f} MeV"
    if e >= 1e3:
        return f"{e / 1e3:.{decimals}f} keV"
    if e >= 1.0:
        return f"{e:.{decimals}f} eV"
    if e >= 1e-3:
        return f"{e * 1e3:.{decimals}f} meV"
    return f"{e:.{decimals}e} eV"


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

# Literal fragments that mark pathological input (checked case-sensitively)
_REJECTED_FRAGMENTS = ("null", "undefined", "/", "Infinity", "NaN")

_NUMBER_RE = re.compile(
    r"^\s*(?P<number>[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)(?P<suffix>.*)$",
    re.DOTALL,
)

_WAVELENGTH_ALIASES: tuple[tuple[str, Unit], ...] = (
    ("km", WavelengthUnit.KM), ("kilometer", WavelengthUnit.KM),
    ("kilometers", WavelengthUnit.KM),
    ("m", WavelengthUnit.M), ("meter", WavelengthUnit.M),
    ("meters", WavelengthUnit.M),
    ("cm", WavelengthUnit.CM), ("centimeter", WavelengthUnit.CM),
    ("centimeters", WavelengthUnit.CM),
    ("mm", WavelengthUnit.MM), ("millimeter", WavelengthUnit.MM),
    ("millimeters", WavelengthUnit.MM),
    ("μm", WavelengthUnit.UM), ("µm", WavelengthUnit.UM),
    ("um", WavelengthUnit.UM), ("micron", WavelengthUnit.UM),
    ("microns", WavelengthUnit.UM), ("micrometer", WavelengthUnit.UM),
    ("micrometers", WavelengthUnit.UM),
    ("nm", WavelengthUnit.NM), ("nanometer", WavelengthUnit.NM),
    ("nanometers", WavelengthUnit.NM),
    ("Å", WavelengthUnit.ANGSTROM), ("angstrom", WavelengthUnit.ANGSTROM),
    ("angstroms", WavelengthUnit.ANGSTROM),
    ("pm", WavelengthUnit.PM), ("picometer", WavelengthUnit.PM),
    ("picometers", WavelengthUnit.PM),
    ("fm", WavelengthUnit.FM), ("femtometer", WavelengthUnit.FM),
    ("femtometers", WavelengthUnit.FM),
)

_FREQUENCY_ALIASES: tuple[tuple[str, Unit], ...] = (
    ("Hz", FrequencyUnit.HZ), ("hertz", FrequencyUnit.HZ),
    ("kHz", FrequencyUnit.KHZ), ("kilohertz", FrequencyUnit.KHZ),
    ("MHz", FrequencyUnit.MHZ), ("megahertz", FrequencyUnit.MHZ),
    ("GHz", FrequencyUnit.GHZ), ("gigahertz", FrequencyUnit.GHZ),
    ("THz", FrequencyUnit.THZ), ("terahertz", FrequencyUnit.THZ),
    ("PHz", FrequencyUnit.PHZ), ("petahertz", FrequencyUnit.PHZ),
)

# "meV" vs "MeV" differ only in case: the exact spelling decides, and any
# other casing of "mev" means mega (listed last so it wins the folded table).
_ENERGY_ALIASES: tuple[tuple[str, Unit], ...] = (
    ("meV", EnergyUnit.MEV_MILLI), ("millielectronvolt", EnergyUnit.MEV_MILLI),
    ("millielectronvolts", EnergyUnit.MEV_MILLI),
    ("eV", EnergyUnit.EV), ("electronvolt", EnergyUnit.EV),
    ("electronvolts", EnergyUnit.EV),
    ("keV", EnergyUnit.KEV), ("GeV", EnergyUnit.GEV), ("TeV", EnergyUnit.TEV),
    ("J", EnergyUnit.J), ("joule", EnergyUnit.J), ("joules", EnergyUnit.J),
    ("MeV", EnergyUnit.MEV),
)


class _SuffixTable:
    """Maps free-text unit suffixes to unit enum members."""

    def __init__(self, aliases: tuple[tuple[str, Unit], ...]):
        self._exact = dict(aliases)
        self._folded = {alias.casefold(): unit for alias, unit in aliases}

    def lookup(self, suffix: str) -> Unit | None:
        unit = self._exact.get(suffix)
        if unit is None:
            unit = self._folded.get(suffix.casefold())
        return unit


_SUFFIX_TABLES: dict[QuantityKind, _SuffixTable] = {
    QuantityKind.WAVELENGTH: _SuffixTable(_WAVELENGTH_ALIASES),
    QuantityKind.FREQUENCY: _SuffixTable(_FREQUENCY_ALIASES),
    QuantityKind.ENERGY: _SuffixTable(_ENERGY_ALIASES),
}


def _parse_quantity(text: str | None, kind: QuantityKind) -> float | None:
    if not isinstance(text, str) or not text.strip():
        return None
    if any(fragment in text for fragment in _REJECTED_FRAGMENTS):
        logger.debug("Rejected %s input %r", kind.value, text)
        return None

    match = _NUMBER_RE.match(text)
    if match is None:
        return None
    value = float(match.group("number"))
    if not math.isfinite(value) or value <= 0:
        return None

    suffix = "".join(match.group("suffix").split())
    unit = canonical_unit(kind)
    if suffix:
        found = _SUFFIX_TABLES[kind].lookup(suffix)
        if found is None:
            logger.debug(
                "Unknown %s unit %r, assuming %s",
                kind.value, suffix, unit.symbol,
            )
        else:
            unit = found

    result = to_canonical(value, unit, kind)
    if not math.isfinite(result) or result <= 0:
        return None
    return result


def parse_wavelength(text: str | None) -> float | None:
    """Parse ``"550nm"``, ``"1.2 μm"``, ``"3e-7"`` → wavelength [m].

    Unknown or missing unit suffix means metres.
    """
    return _parse_quantity(text, QuantityKind.WAVELENGTH)


def parse_frequency(text: str | None) -> float | None:
    """Parse ``"2.4 GHz"``, ``"545THz"`` → frequency [Hz].

    Unknown or missing unit suffix means hertz.
    """
    return _parse_quantity(text, QuantityKind.FREQUENCY)


def parse_energy(text: str | None) -> float | None:
    """Parse ``"1.5eV"``, ``"511 keV"``, ``"3e-19 J"`` → energy [eV].

    Unknown or missing unit suffix means electron-volts.
    """
    return _parse_quantity(text, QuantityKind.ENERGY)
