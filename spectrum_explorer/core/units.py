"""Unit conversion module — single conversion point between UI and Core layers.

CRITICAL: All unit conversions MUST go through this module.

Internal (core) units:
    Wavelength : m
    Frequency  : Hz
    Energy     : eV

Each quantity kind has a closed set of units (``WavelengthUnit``,
``FrequencyUnit``, ``EnergyUnit``).  Free-text unit symbols are resolved
to those enums by :func:`get_unit`, which raises :class:`UnknownUnitError`
for anything outside the table.

Scale factors are exact rationals, so a conversion is one exact
multiply/divide followed by a single rounding to float.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from enum import Enum
from fractions import Fraction
from typing import NamedTuple, Union


class QuantityKind(Enum):
    WAVELENGTH = "wavelength"
    FREQUENCY = "frequency"
    ENERGY = "energy"


@dataclass(frozen=True)
class UnitDefinition:
    """A unit within one quantity kind.

    Attributes:
        symbol: Display symbol ("nm", "GHz", "keV").
        display_name: Long name ("nanometers").
        scale: Exact factor converting one of this unit to the canonical unit.
    """
    symbol: str
    display_name: str
    scale: Fraction

    @property
    def factor(self) -> float:
        """Scale factor to the canonical unit, as float."""
        return float(self.scale)


class UnknownUnitError(KeyError):
    """Unit symbol not present in the table for the requested quantity kind."""

    def __init__(self, symbol: str, kind: QuantityKind):
        super().__init__(symbol)
        self.symbol = symbol
        self.kind = kind

    def __str__(self) -> str:
        return f"Unknown {self.kind.value} unit: {self.symbol!r}"


class Unit(Enum):
    """Base for per-kind unit enumerations (member value is a UnitDefinition)."""

    @property
    def symbol(self) -> str:
        return self.value.symbol

    @property
    def display_name(self) -> str:
        return self.value.display_name

    @property
    def scale(self) -> Fraction:
        return self.value.scale

    @property
    def factor(self) -> float:
        return self.value.factor


class WavelengthUnit(Unit):
    KM = UnitDefinition("km", "kilometers", Fraction(1000))
    M = UnitDefinition("m", "meters", Fraction(1))
    CM = UnitDefinition("cm", "centimeters", Fraction("1e-2"))
    MM = UnitDefinition("mm", "millimeters", Fraction("1e-3"))
    UM = UnitDefinition("μm", "micrometers", Fraction("1e-6"))
    NM = UnitDefinition("nm", "nanometers", Fraction("1e-9"))
    ANGSTROM = UnitDefinition("Å", "angstroms", Fraction("1e-10"))
    PM = UnitDefinition("pm", "picometers", Fraction("1e-12"))
    FM = UnitDefinition("fm", "femtometers", Fraction("1e-15"))


class FrequencyUnit(Unit):
    HZ = UnitDefinition("Hz", "hertz", Fraction(1))
    KHZ = UnitDefinition("kHz", "kilohertz", Fraction("1e3"))
    MHZ = UnitDefinition("MHz", "megahertz", Fraction("1e6"))
    GHZ = UnitDefinition("GHz", "gigahertz", Fraction("1e9"))
    THZ = UnitDefinition("THz", "terahertz", Fraction("1e12"))
    PHZ = UnitDefinition("PHz", "petahertz", Fraction("1e15"))


class EnergyUnit(Unit):
    MEV_MILLI = UnitDefinition("meV", "millielectron volts", Fraction("1e-3"))
    EV = UnitDefinition("eV", "electron volts", Fraction(1))
    KEV = UnitDefinition("keV", "kiloelectron volts", Fraction("1e3"))
    MEV = UnitDefinition("MeV", "megaelectron volts", Fraction("1e6"))
    GEV = UnitDefinition("GeV", "gigaelectron volts", Fraction("1e9"))
    TEV = UnitDefinition("TeV", "teraelectron volts", Fraction("1e12"))
    # 1 J = 1 / 1.602176634e-19 eV (exact by SI definition)
    J = UnitDefinition("J", "joules", 1 / Fraction("1.602176634e-19"))


UnitLike = Union[str, Unit]

UNIT_ENUMS: dict[QuantityKind, type[Unit]] = {
    QuantityKind.WAVELENGTH: WavelengthUnit,
    QuantityKind.FREQUENCY: FrequencyUnit,
    QuantityKind.ENERGY: EnergyUnit,
}

_CANONICAL_UNITS: dict[QuantityKind, Unit] = {
    QuantityKind.WAVELENGTH: WavelengthUnit.M,
    QuantityKind.FREQUENCY: FrequencyUnit.HZ,
    QuantityKind.ENERGY: EnergyUnit.EV,
}

# Best-unit thresholds, largest first: (minimum |canonical value|, unit)
_BEST_UNIT_THRESHOLDS: dict[QuantityKind, tuple[tuple[float, Unit], ...]] = {
    QuantityKind.WAVELENGTH: (
        (1e3, WavelengthUnit.KM),
        (1.0, WavelengthUnit.M),
        (1e-2, WavelengthUnit.CM),
        (1e-3, WavelengthUnit.MM),
        (1e-6, WavelengthUnit.UM),
        (1e-9, WavelengthUnit.NM),
        (1e-12, WavelengthUnit.PM),
        (1e-15, WavelengthUnit.FM),
    ),
    QuantityKind.FREQUENCY: (
        (1e15, FrequencyUnit.PHZ),
        (1e12, FrequencyUnit.THZ),
        (1e9, FrequencyUnit.GHZ),
        (1e6, FrequencyUnit.MHZ),
        (1e3, FrequencyUnit.KHZ),
    ),
    QuantityKind.ENERGY: (
        (1e12, EnergyUnit.TEV),
        (1e9, EnergyUnit.GEV),
        (1e6, EnergyUnit.MEV),
        (1e3, EnergyUnit.KEV),
        (1.0, EnergyUnit.EV),
        (1e-3, EnergyUnit.MEV_MILLI),
    ),
}


class ScaledValue(NamedTuple):
    """A value expressed in a specific unit."""
    value: float
    unit: Unit

    @property
    def symbol(self) -> str:
        return self.unit.symbol


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------

def canonical_unit(kind: QuantityKind) -> Unit:
    """Canonical unit for *kind* (m, Hz, eV)."""
    return _CANONICAL_UNITS[kind]


def units_for(kind: QuantityKind) -> list[Unit]:
    """All units defined for *kind*, in declaration order."""
    return list(UNIT_ENUMS[kind])


def get_unit(kind: QuantityKind, unit: UnitLike) -> Unit:
    """Resolve a unit symbol (exact match) or enum member for *kind*.

    Raises:
        UnknownUnitError: If *unit* is not defined for *kind*.
    """
    enum_cls = UNIT_ENUMS[kind]
    if isinstance(unit, enum_cls):
        return unit
    if isinstance(unit, Unit):
        raise UnknownUnitError(unit.symbol, kind)
    for member in enum_cls:
        if member.symbol == unit:
            return member
    raise UnknownUnitError(str(unit), kind)


# ---------------------------------------------------------------------------
# Conversion
# ---------------------------------------------------------------------------

def _rescale(value: float, from_scale: Fraction, to_scale: Fraction) -> float:
    """value × from_scale / to_scale with a single final rounding."""
    if not isinstance(value, (int, Fraction)):
        value = float(value)
    if from_scale == to_scale:
        return float(value)
    if isinstance(value, float) and not math.isfinite(value):
        return value * float(from_scale) / float(to_scale)
    exact = Fraction(value) * from_scale / to_scale
    try:
        return float(exact)
    except OverflowError:
        return math.inf if exact > 0 else -math.inf


def convert(
    value: float,
    from_unit: UnitLike,
    to_unit: UnitLike,
    kind: QuantityKind,
) -> float:
    """Convert *value* between two units of the same quantity kind.

    Linear and sign-agnostic: zero and negative values convert like any
    other number.  Physical plausibility is the caller's concern.

    Raises:
        UnknownUnitError: If either unit is not defined for *kind*.
    """
    src = get_unit(kind, from_unit)
    dst = get_unit(kind, to_unit)
    return _rescale(value, src.scale, dst.scale)


def convert_wavelength(value: float, from_unit: UnitLike, to_unit: UnitLike) -> float:
    return convert(value, from_unit, to_unit, QuantityKind.WAVELENGTH)


def convert_frequency(value: float, from_unit: UnitLike, to_unit: UnitLike) -> float:
    return convert(value, from_unit, to_unit, QuantityKind.FREQUENCY)


def convert_energy(value: float, from_unit: UnitLike, to_unit: UnitLike) -> float:
    return convert(value, from_unit, to_unit, QuantityKind.ENERGY)


def to_canonical(value: float, unit: UnitLike, kind: QuantityKind) -> float:
    """Value in *unit* → canonical unit (m, Hz, eV)."""
    return _rescale(value, get_unit(kind, unit).scale, Fraction(1))


def from_canonical(value: float, unit: UnitLike, kind: QuantityKind) -> float:
    """Canonical value (m, Hz, eV) → *unit*."""
    return _rescale(value, Fraction(1), get_unit(kind, unit).scale)


def best_unit(canonical_value: float, kind: QuantityKind) -> ScaledValue:
    """Pick the most readable unit for *canonical_value*.

    The largest threshold that ``abs(canonical_value)`` meets wins.  Values
    below every threshold (zero included) stay in the canonical unit.
    """
    magnitude = abs(canonical_value)
    for threshold, unit in _BEST_UNIT_THRESHOLDS[kind]:
        if magnitude >= threshold:
            return ScaledValue(
                _rescale(canonical_value, Fraction(1), unit.scale), unit,
            )
    return ScaledValue(float(canonical_value), canonical_unit(kind))


# ---------------------------------------------------------------------------
# Display
# ---------------------------------------------------------------------------

def is_positive_finite(value) -> bool:
    """True for real numbers that are finite and strictly positive."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return math.isfinite(value) and value > 0


def format_number(value: float, precision: int = 3) -> str:
    """Format *value* with a magnitude-dependent number of digits."""
    if value == 0:
        return "0"
    magnitude = abs(value)
    if magnitude >= 1000 or magnitude < 0.001:
        return f"{value:.{precision - 1}e}"
    if magnitude >= 100:
        return f"{value:.0f}"
    if magnitude >= 10:
        return f"{value:.1f}"
    if magnitude >= 1:
        return f"{value:.2f}"
    return f"{value:.{precision}f}"


def format_in_unit(
    value: float | None,
    kind: QuantityKind,
    unit: UnitLike,
    decimals: int = 2,
    scientific: bool = False,
) -> str:
    """Render a canonical *value* in a caller-chosen *unit*.

    Returns ``"Invalid <kind>"`` for missing, non-finite or non-positive
    values.

    Raises:
        UnknownUnitError: If *unit* is not defined for *kind*.
    """
    target = get_unit(kind, unit)
    if not is_positive_finite(value):
        return f"Invalid {kind.value}"
    scaled = from_canonical(value, target, kind)
    if scientific:
        return f"{scaled:.{decimals}e} {target.symbol}"
    return f"{scaled:.{decimals}f} {target.symbol}"
