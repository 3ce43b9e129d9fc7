"""Core — unit tables, photon relations, spectrum catalog, log-scale helpers."""

from spectrum_explorer.core.log_scale import from_position, to_position
from spectrum_explorer.core.photon import (
    energy_ev_to_frequency,
    energy_ev_to_wavelength,
    format_energy,
    format_frequency,
    format_wavelength,
    frequency_to_energy_ev,
    frequency_to_wavelength,
    parse_energy,
    parse_frequency,
    parse_wavelength,
    wavelength_to_energy_ev,
    wavelength_to_frequency,
)
from spectrum_explorer.core.physical_constants import PhysicalConstants
from spectrum_explorer.core.spectrum_catalog import (
    CatalogError,
    SpectrumCatalog,
    classify_by_energy,
    classify_by_frequency,
    classify_by_wavelength,
    default_catalog,
)
from spectrum_explorer.core.units import (
    QuantityKind,
    UnknownUnitError,
    best_unit,
    convert,
)

__all__ = [
    "CatalogError",
    "PhysicalConstants",
    "QuantityKind",
    "SpectrumCatalog",
    "UnknownUnitError",
    "best_unit",
    "classify_by_energy",
    "classify_by_frequency",
    "classify_by_wavelength",
    "convert",
    "default_catalog",
    "energy_ev_to_frequency",
    "energy_ev_to_wavelength",
    "format_energy",
    "format_frequency",
    "format_wavelength",
    "frequency_to_energy_ev",
    "frequency_to_wavelength",
    "from_position",
    "parse_energy",
    "parse_frequency",
    "parse_wavelength",
    "to_position",
    "wavelength_to_energy_ev",
    "wavelength_to_frequency",
]
