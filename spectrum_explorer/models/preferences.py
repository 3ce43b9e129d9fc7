"""Display preference model.

Unit choice, notation and precision used when showing converted values.
Persistence lives in ``spectrum_explorer.ui.preferences_store``.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any

from spectrum_explorer.constants import (
    DEFAULT_DECIMAL_PLACES,
    DEFAULT_ENERGY_UNIT,
    DEFAULT_FREQUENCY_UNIT,
    DEFAULT_SCIENTIFIC_NOTATION,
    DEFAULT_WAVELENGTH_UNIT,
    MAX_DECIMAL_PLACES,
)
from spectrum_explorer.core.units import (
    QuantityKind,
    UnknownUnitError,
    format_in_unit,
    get_unit,
)

logger = logging.getLogger(__name__)

_UNIT_FIELDS: dict[str, QuantityKind] = {
    "wavelength_unit": QuantityKind.WAVELENGTH,
    "frequency_unit": QuantityKind.FREQUENCY,
    "energy_unit": QuantityKind.ENERGY,
}


@dataclass
class DisplayPreferences:
    """User display preferences.

    Attributes:
        wavelength_unit: Wavelength unit symbol ("nm").
        frequency_unit: Frequency unit symbol ("THz").
        energy_unit: Energy unit symbol ("eV").
        scientific_notation: Render values as mantissa/exponent.
        decimal_places: Digits after the decimal point [0–10].
    """
    wavelength_unit: str = DEFAULT_WAVELENGTH_UNIT
    frequency_unit: str = DEFAULT_FREQUENCY_UNIT
    energy_unit: str = DEFAULT_ENERGY_UNIT
    scientific_notation: bool = DEFAULT_SCIENTIFIC_NOTATION
    decimal_places: int = DEFAULT_DECIMAL_PLACES

    def unit_for(self, kind: QuantityKind) -> str:
        if kind is QuantityKind.WAVELENGTH:
            return self.wavelength_unit
        if kind is QuantityKind.FREQUENCY:
            return self.frequency_unit
        return self.energy_unit

    def format(self, value: float | None, kind: QuantityKind) -> str:
        """Render a canonical value using these preferences."""
        return format_in_unit(
            value,
            kind,
            self.unit_for(kind),
            decimals=self.decimal_places,
            scientific=self.scientific_notation,
        )

    def format_wavelength(self, wavelength_m: float | None) -> str:
        return self.format(wavelength_m, QuantityKind.WAVELENGTH)

    def format_frequency(self, frequency_hz: float | None) -> str:
        return self.format(frequency_hz, QuantityKind.FREQUENCY)

    def format_energy(self, energy_ev: float | None) -> str:
        return self.format(energy_ev, QuantityKind.ENERGY)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DisplayPreferences:
        """Build preferences from stored values.

        Unknown keys are ignored.  Invalid values fall back to the default
        for that field and are logged.
        """
        prefs = cls()
        for field_name, kind in _UNIT_FIELDS.items():
            if field_name not in data:
                continue
            symbol = data[field_name]
            try:
                setattr(prefs, field_name, get_unit(kind, symbol).symbol)
            except UnknownUnitError:
                logger.warning(
                    "Ignoring stored %s %r, using %r",
                    field_name, symbol, getattr(prefs, field_name),
                )

        if "scientific_notation" in data:
            prefs.scientific_notation = _to_bool(data["scientific_notation"])

        if "decimal_places" in data:
            try:
                places = int(data["decimal_places"])
            except (TypeError, ValueError):
                logger.warning(
                    "Ignoring stored decimal_places %r", data["decimal_places"],
                )
            else:
                prefs.decimal_places = max(0, min(MAX_DECIMAL_PLACES, places))
        return prefs


def _to_bool(value: Any) -> bool:
    # QSettings INI backends hand booleans back as strings
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)
