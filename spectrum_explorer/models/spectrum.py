"""Spectrum data models.

Defines spectral regions, visible colour bands and the derived photon
state shown for a selected wavelength.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field


@dataclass(frozen=True)
class VisibleBand:
    """Named colour inside visible light.

    Attributes:
        name: Colour name ("Green").
        wavelength_m: Reference wavelength [m].
        color: Hex colour code for UI display.
    """
    name: str
    wavelength_m: float
    color: str


@dataclass(frozen=True)
class SpectrumRegion:
    """A named contiguous band of the electromagnetic spectrum.

    Wavelength bounds are authoritative; frequency and energy bounds are
    derived from them when the catalog is loaded.

    Attributes:
        id: Stable identifier ("visible", "xray", ...).
        name: Display name ("Visible Light").
        color: Hex colour hint for UI display.
        wavelength_min: Shortest wavelength [m].
        wavelength_max: Longest wavelength [m].
        frequency_min: Lowest frequency [Hz] (= c / wavelength_max).
        frequency_max: Highest frequency [Hz] (= c / wavelength_min).
        energy_min: Lowest photon energy [eV] (= hc / wavelength_max).
        energy_max: Highest photon energy [eV] (= hc / wavelength_min).
        description: One-paragraph educational description.
        applications: Typical uses.
        examples: Concrete example sources or values.
        subregions: Named colour bands (visible light only).
    """
    id: str
    name: str
    color: str
    wavelength_min: float
    wavelength_max: float
    frequency_min: float
    frequency_max: float
    energy_min: float
    energy_max: float
    description: str = ""
    applications: tuple[str, ...] = ()
    examples: tuple[str, ...] = ()
    subregions: tuple[VisibleBand, ...] = field(default_factory=tuple)

    @property
    def center_wavelength(self) -> float:
        """Geometric mean of the wavelength bounds (midpoint on a log axis) [m]."""
        return math.sqrt(self.wavelength_min * self.wavelength_max)

    def contains_wavelength(self, wavelength_m: float) -> bool:
        return self.wavelength_min <= wavelength_m <= self.wavelength_max

    def contains_frequency(self, frequency_hz: float) -> bool:
        return self.frequency_min <= frequency_hz <= self.frequency_max

    def contains_energy(self, energy_ev: float) -> bool:
        return self.energy_min <= energy_ev <= self.energy_max


@dataclass(frozen=True)
class PhotonState:
    """All quantities derived from one authoritative wavelength.

    Attributes:
        wavelength: Wavelength [m].
        frequency: Frequency [Hz].
        energy_ev: Photon energy [eV].
        region: Owning spectral region, or None outside the catalog.
    """
    wavelength: float
    frequency: float
    energy_ev: float
    region: SpectrumRegion | None = None

    @property
    def region_name(self) -> str:
        return self.region.name if self.region is not None else "Unknown region"
