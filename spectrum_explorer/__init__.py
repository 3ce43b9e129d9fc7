"""Electromagnetic Spectrum Explorer — wavelength, frequency and photon energy."""

from spectrum_explorer.constants import APP_VERSION as __version__

__all__ = ["__version__"]
