"""Data models — spectral regions, photon state, display preferences."""
