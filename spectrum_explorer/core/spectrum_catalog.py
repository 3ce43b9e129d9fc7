"""Spectrum catalog service — loads spectral regions and classifies values.

Loads ``data/spectrum_regions.json``.  Only the wavelength bounds are
stored; frequency and energy bounds are derived with f = c/λ and
E = hc/λ, so the three axes agree exactly and adjacent regions share
their boundaries.

Regions are kept in ascending-wavelength order.  Classification is a linear
scan over closed intervals where the first match wins, so a shared boundary
(380 nm, 700 nm, ...) belongs to the shorter-wavelength region.
"""

from __future__ import annotations

import json
import logging
import pathlib
from typing import Callable, Iterable

from spectrum_explorer.constants import CATALOG_RELATION_TOLERANCE
from spectrum_explorer.core.photon import (
    energy_ev_to_wavelength,
    frequency_to_energy_ev,
    positive_magnitude,
    wavelength_to_energy_ev,
    wavelength_to_frequency,
)
from spectrum_explorer.core.physical_constants import PhysicalConstants
from spectrum_explorer.models.spectrum import PhotonState, SpectrumRegion, VisibleBand

logger = logging.getLogger(__name__)

_DEFAULT_DATA_PATH = (
    pathlib.Path(__file__).resolve().parents[1] / "data" / "spectrum_regions.json"
)

_REQUIRED_FIELDS = ("id", "name", "color", "wavelength_min_m", "wavelength_max_m")


class CatalogError(ValueError):
    """Malformed spectrum catalog data."""


def _check_bounds(region_id: str, wl_min, wl_max) -> None:
    if positive_magnitude(wl_min) is None or positive_magnitude(wl_max) is None:
        raise CatalogError(f"Region {region_id!r}: wavelength bounds must be positive")
    if wl_min >= wl_max:
        raise CatalogError(
            f"Region {region_id!r}: wavelength_min ({wl_min}) >= wavelength_max ({wl_max})"
        )


def _derive_region(raw: dict) -> SpectrumRegion:
    """Build a SpectrumRegion from one JSON entry, deriving f and E bounds."""
    missing = [name for name in _REQUIRED_FIELDS if name not in raw]
    if missing:
        raise CatalogError(
            f"Region {raw.get('id', '?')!r} is missing fields: {', '.join(missing)}"
        )

    wl_min = raw["wavelength_min_m"]
    wl_max = raw["wavelength_max_m"]
    _check_bounds(raw["id"], wl_min, wl_max)

    c = PhysicalConstants.SPEED_OF_LIGHT
    hc = PhysicalConstants.HC_EV_M
    bands = tuple(
        VisibleBand(
            name=band["name"],
            wavelength_m=band["wavelength_m"],
            color=band["color"],
        )
        for band in raw.get("subregions", [])
    )
    return SpectrumRegion(
        id=raw["id"],
        name=raw["name"],
        color=raw["color"],
        wavelength_min=float(wl_min),
        wavelength_max=float(wl_max),
        frequency_min=c / wl_max,
        frequency_max=c / wl_min,
        energy_min=hc / wl_max,
        energy_max=hc / wl_min,
        description=raw.get("description", ""),
        applications=tuple(raw.get("applications", [])),
        examples=tuple(raw.get("examples", [])),
        subregions=bands,
    )


def load_regions(data_path: str | pathlib.Path | None = None) -> list[SpectrumRegion]:
    """Load and derive all regions from the catalog JSON.

    Args:
        data_path: Path to spectrum_regions.json.  Bundled file if None.

    Raises:
        CatalogError: If an entry is malformed or regions are out of order.
    """
    path = pathlib.Path(data_path) if data_path is not None else _DEFAULT_DATA_PATH
    with open(path, encoding="utf-8") as f:
        raw = json.load(f)

    regions = [_derive_region(entry) for entry in raw.get("regions", [])]
    if not regions:
        raise CatalogError(f"No spectrum regions defined in {path}")
    logger.debug("Loaded %d spectrum regions from %s", len(regions), path)
    return regions


class SpectrumCatalog:
    """Ordered, read-only table of spectral regions with classification.

    Args:
        data_path: Path to ``spectrum_regions.json``.  If *None*, the file
                   bundled with the package is used.
    """

    def __init__(self, data_path: str | pathlib.Path | None = None) -> None:
        self._regions: tuple[SpectrumRegion, ...] = ()
        self._set_regions(load_regions(data_path))

    @classmethod
    def from_regions(cls, regions: Iterable[SpectrumRegion]) -> SpectrumCatalog:
        """Build a catalog from already constructed regions."""
        catalog = cls.__new__(cls)
        catalog._regions = ()
        catalog._set_regions(list(regions))
        return catalog

    def _set_regions(self, regions: list[SpectrumRegion]) -> None:
        ids = [r.id for r in regions]
        if len(ids) != len(set(ids)):
            raise CatalogError(f"Duplicate region ids: {ids}")
        for region in regions:
            _check_bounds(region.id, region.wavelength_min, region.wavelength_max)
        for prev, cur in zip(regions, regions[1:]):
            if cur.wavelength_min <= prev.wavelength_min:
                raise CatalogError(
                    f"Regions not in ascending wavelength order: {prev.id!r} before {cur.id!r}"
                )
            # shared boundaries are allowed
            if cur.wavelength_min < prev.wavelength_max:
                raise CatalogError(f"Regions {prev.id!r} and {cur.id!r} overlap")
        self._regions = tuple(regions)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def regions(self) -> tuple[SpectrumRegion, ...]:
        """All regions, shortest wavelength first."""
        return self._regions

    @property
    def wavelength_range(self) -> tuple[float, float]:
        """(shortest, longest) wavelength covered by the catalog [m]."""
        return self._regions[0].wavelength_min, self._regions[-1].wavelength_max

    def get_region(self, region_id: str) -> SpectrumRegion:
        """Return a region by id.

        Raises:
            KeyError: If *region_id* is not found.
        """
        for region in self._regions:
            if region.id == region_id:
                return region
        raise KeyError(f"Unknown region: {region_id!r}")

    def _first_match(
        self,
        value,
        contains: Callable[[SpectrumRegion, float], bool],
    ) -> SpectrumRegion | None:
        magnitude = positive_magnitude(value)
        if magnitude is None:
            return None
        for region in self._regions:
            if contains(region, magnitude):
                return region
        return None

    def classify_by_wavelength(self, wavelength_m: float) -> SpectrumRegion | None:
        """Region owning *wavelength_m* [m], or None if invalid/out of range."""
        return self._first_match(wavelength_m, SpectrumRegion.contains_wavelength)

    def classify_by_frequency(self, frequency_hz: float) -> SpectrumRegion | None:
        """Region owning *frequency_hz* [Hz], or None if invalid/out of range."""
        return self._first_match(frequency_hz, SpectrumRegion.contains_frequency)

    def classify_by_energy(self, energy_ev: float) -> SpectrumRegion | None:
        """Region owning *energy_ev* [eV], or None if invalid/out of range."""
        return self._first_match(energy_ev, SpectrumRegion.contains_energy)

    def describe(self, wavelength_m: float) -> PhotonState | None:
        """Derive frequency, energy and region from one wavelength [m]."""
        frequency = wavelength_to_frequency(wavelength_m)
        if frequency is None:
            return None
        return PhotonState(
            wavelength=float(wavelength_m),
            frequency=frequency,
            energy_ev=wavelength_to_energy_ev(wavelength_m),
            region=self.classify_by_wavelength(wavelength_m),
        )

    def visible_band(self, wavelength_m: float) -> VisibleBand | None:
        """Nearest named colour for a wavelength inside a region with colour bands.

        Ties go to the shorter reference wavelength.
        """
        region = self.classify_by_wavelength(wavelength_m)
        if region is None or not region.subregions:
            return None
        return min(
            region.subregions,
            key=lambda band: abs(band.wavelength_m - wavelength_m),
        )


def check_catalog_consistency(
    catalog: SpectrumCatalog,
    tolerance: float = CATALOG_RELATION_TOLERANCE,
) -> list[str]:
    """Cross-check region ranges against c = λf and E = hc/λ.

    Also checks that adjacent regions are contiguous.  All comparisons use
    the relative *tolerance*.

    Returns:
        Human-readable issue descriptions; empty when consistent.
    """
    issues: list[str] = []

    def rel_error(expected: float, actual: float) -> float:
        return abs(expected - actual) / abs(actual)

    for region in catalog.regions:
        pairs = (
            ("frequency_min", wavelength_to_frequency(region.wavelength_max), region.frequency_min),
            ("frequency_max", wavelength_to_frequency(region.wavelength_min), region.frequency_max),
            ("energy_min", frequency_to_energy_ev(region.frequency_min), region.energy_min),
            ("energy_max", frequency_to_energy_ev(region.frequency_max), region.energy_max),
            ("wavelength_min", energy_ev_to_wavelength(region.energy_max), region.wavelength_min),
        )
        for label, expected, actual in pairs:
            error = rel_error(expected, actual)
            if error > tolerance:
                issues.append(
                    f"{region.name}: {label} off by {error * 100:.1f}% "
                    f"(stored {actual:.4g}, expected {expected:.4g})"
                )

    for prev, cur in zip(catalog.regions, catalog.regions[1:]):
        error = rel_error(prev.wavelength_max, cur.wavelength_min)
        if error > tolerance:
            issues.append(
                f"{prev.name} → {cur.name}: boundary mismatch "
                f"({prev.wavelength_max:.4g} m vs {cur.wavelength_min:.4g} m)"
            )

    for issue in issues:
        logger.warning("Catalog inconsistency: %s", issue)
    return issues


# ---------------------------------------------------------------------------
# Module-level default catalog (loaded once)
# ---------------------------------------------------------------------------

_DEFAULT_CATALOG: SpectrumCatalog | None = None


def default_catalog() -> SpectrumCatalog:
    global _DEFAULT_CATALOG
    if _DEFAULT_CATALOG is None:
        _DEFAULT_CATALOG = SpectrumCatalog()
    return _DEFAULT_CATALOG


def classify_by_wavelength(wavelength_m: float) -> SpectrumRegion | None:
    return default_catalog().classify_by_wavelength(wavelength_m)


def classify_by_frequency(frequency_hz: float) -> SpectrumRegion | None:
    return default_catalog().classify_by_frequency(frequency_hz)


def classify_by_energy(energy_ev: float) -> SpectrumRegion | None:
    return default_catalog().classify_by_energy(energy_ev)
