"""Application-wide constants.

Physical constants live in ``spectrum_explorer.core.physical_constants``;
this module only holds application and presentation configuration.
"""

APP_NAME = "Electromagnetic Spectrum Explorer"
APP_VERSION = "0.1.0"
APP_ORGANIZATION = "SpectrumExplorer"

# Environment variable read by the application factory for the root log level
LOG_LEVEL_ENV = "SPECTRUM_EXPLORER_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

# Window constraints
MIN_WINDOW_WIDTH = 960
MIN_WINDOW_HEIGHT = 640

# Wavelength bounds [m]
WAVELENGTH_MIN_M = 1e-15   # 1 fm
WAVELENGTH_MAX_M = 1e4     # 10 km
DEFAULT_WAVELENGTH_M = 550e-9  # green light

# Keyboard navigation on the spectrum bar
KEY_STEP_NORMAL = 1
KEY_STEP_LARGE = 10
KEY_STEP_MULTIPLIER = 0.05  # 5% change per step
KEY_HOME_WAVELENGTH_M = 1e-12  # jump into gamma rays
KEY_END_WAVELENGTH_M = 1e2     # jump into radio waves

# Relative width of each region on the spectrum bar, keyed by region id
REGION_BAR_WEIGHTS = {
    "gamma": 25,
    "xray": 15,
    "ultraviolet": 10,
    "visible": 5,
    "infrared": 15,
    "microwave": 10,
    "radio": 20,
}

# Spectrum bar visual [pixels]
SPECTRUM_BAR_HEIGHT = 60
SPECTRUM_BAR_BORDER_WIDTH = 2
SPECTRUM_BAR_BORDER_RADIUS = 8
INDICATOR_WIDTH = 3
INDICATOR_DOT_SIZE = 12

# Relative tolerance for catalog range cross-checks (c = λf, E = hc/λ)
CATALOG_RELATION_TOLERANCE = 0.10

# Display preference defaults
DEFAULT_WAVELENGTH_UNIT = "nm"
DEFAULT_FREQUENCY_UNIT = "THz"
DEFAULT_ENERGY_UNIT = "eV"
DEFAULT_SCIENTIFIC_NOTATION = True
DEFAULT_DECIMAL_PLACES = 2
MAX_DECIMAL_PLACES = 10

# Spectrum chart sampling
CHART_SAMPLES = 400
