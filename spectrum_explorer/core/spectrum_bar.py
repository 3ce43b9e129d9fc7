"""Spectrum bar layout — bar position ↔ wavelength mapping.

The bar shows every catalog region left to right in ascending wavelength.
Each region gets a share of the bar proportional to its weight, and inside
a region the wavelength runs on a log10 scale.  Used both to turn a click
into a wavelength and to place the indicator for a wavelength.

Positions are fractions of the bar width: 0.0 is the left edge, 1.0 the
right edge.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Mapping

from spectrum_explorer.constants import (
    DEFAULT_WAVELENGTH_M,
    KEY_END_WAVELENGTH_M,
    KEY_HOME_WAVELENGTH_M,
    KEY_STEP_LARGE,
    KEY_STEP_MULTIPLIER,
    KEY_STEP_NORMAL,
    REGION_BAR_WEIGHTS,
    WAVELENGTH_MAX_M,
    WAVELENGTH_MIN_M,
)
from spectrum_explorer.core.log_scale import from_position, to_position
from spectrum_explorer.core.photon import positive_magnitude
from spectrum_explorer.core.spectrum_catalog import SpectrumCatalog
from spectrum_explorer.models.spectrum import SpectrumRegion


class NavKey(Enum):
    """Keyboard actions on the spectrum bar."""
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    HOME = "home"
    END = "end"


@dataclass(frozen=True)
class BarSegment:
    """One region's slice of the bar.

    Attributes:
        region: Spectral region drawn in this slice.
        start: Left edge as a fraction of the bar width.
        width: Slice width as a fraction of the bar width.
    """
    region: SpectrumRegion
    start: float
    width: float

    @property
    def end(self) -> float:
        return self.start + self.width


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


class SpectrumBarLayout:
    """Weighted, log-scaled layout of spectral regions along a bar."""

    def __init__(self, segments: list[BarSegment]) -> None:
        if not segments:
            raise ValueError("Spectrum bar needs at least one segment")
        self._segments = tuple(segments)

    @classmethod
    def from_catalog(
        cls,
        catalog: SpectrumCatalog,
        weights: Mapping[str, float] | None = None,
    ) -> SpectrumBarLayout:
        """Lay out *catalog* regions using *weights* keyed by region id.

        Regions without a weight get weight 1.

        Raises:
            ValueError: If a weight is not positive.
        """
        if weights is None:
            weights = REGION_BAR_WEIGHTS
        region_weights = [float(weights.get(r.id, 1.0)) for r in catalog.regions]
        if any(w <= 0 for w in region_weights):
            raise ValueError(f"Region weights must be positive: {region_weights}")

        total = sum(region_weights)
        segments: list[BarSegment] = []
        start = 0.0
        for region, weight in zip(catalog.regions, region_weights):
            width = weight / total
            segments.append(BarSegment(region=region, start=start, width=width))
            start += width
        return cls(segments)

    @property
    def segments(self) -> tuple[BarSegment, ...]:
        return self._segments

    @property
    def wavelength_min(self) -> float:
        return self._segments[0].region.wavelength_min

    @property
    def wavelength_max(self) -> float:
        return self._segments[-1].region.wavelength_max

    def segment_at(self, position: float) -> BarSegment:
        """Segment under *position* (clamped to [0, 1])."""
        position = _clamp(position, 0.0, 1.0)
        for segment in self._segments:
            if position <= segment.end:
                return segment
        # Float accumulation can leave the last end a hair below 1.0
        return self._segments[-1]

    def position_of(self, wavelength_m: float) -> float | None:
        """Bar position for *wavelength_m* [m].

        Wavelengths beyond either end of the bar pin to 0.0 / 1.0.
        Returns None for invalid input.
        """
        wl = positive_magnitude(wavelength_m)
        if wl is None:
            return None
        if wl <= self.wavelength_min:
            return 0.0
        if wl >= self.wavelength_max:
            return 1.0
        for segment in self._segments:
            region = segment.region
            if region.contains_wavelength(wl):
                local = to_position(wl, region.wavelength_min, region.wavelength_max)
                return _clamp(segment.start + local * segment.width, 0.0, 1.0)
        # Gap between regions: pin to the start of the next segment
        for segment in self._segments:
            if wl < segment.region.wavelength_min:
                return segment.start
        return 1.0

    def wavelength_at(self, position: float) -> float:
        """Wavelength [m] under *position*; clamped to the bar."""
        position = _clamp(position, 0.0, 1.0)
        segment = self.segment_at(position)
        local = _clamp((position - segment.start) / segment.width, 0.0, 1.0)
        region = segment.region
        return from_position(local, region.wavelength_min, region.wavelength_max)


def step_wavelength(
    wavelength_m: float,
    key: NavKey,
    large: bool = False,
    bounds: tuple[float, float] = (WAVELENGTH_MIN_M, WAVELENGTH_MAX_M),
) -> float:
    """Next wavelength after a keyboard action.

    LEFT/DOWN shrink and RIGHT/UP grow the wavelength by 5% per step
    (10 steps with *large*).  HOME and END jump into gamma and radio.
    The result is clamped to *bounds*.
    """
    current = positive_magnitude(wavelength_m)
    if current is None:
        current = DEFAULT_WAVELENGTH_M
    step = KEY_STEP_LARGE if large else KEY_STEP_NORMAL
    factor = 1.0 + step * KEY_STEP_MULTIPLIER

    if key in (NavKey.LEFT, NavKey.DOWN):
        new = current / factor
    elif key in (NavKey.RIGHT, NavKey.UP):
        new = current * factor
    elif key is NavKey.HOME:
        new = KEY_HOME_WAVELENGTH_M
    else:
        new = KEY_END_WAVELENGTH_M
    return _clamp(new, bounds[0], bounds[1])
