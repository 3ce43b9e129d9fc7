"""Physical constants (CODATA 2018 exact SI values).

Single source of truth for every constant used by the conversion core.
"""

from typing import Final


class PhysicalConstants:
    """Physical constants, accessed statically (e.g. ``PhysicalConstants.C``)."""

    # Speed of light in vacuum [m/s]
    SPEED_OF_LIGHT: Final[float] = 299_792_458.0

    # Planck constant [J·s]
    PLANCK_J: Final[float] = 6.62607015e-34

    # Elementary charge, i.e. one electron-volt expressed in joules [J]
    ELECTRON_VOLT_J: Final[float] = 1.602176634e-19

    # One joule expressed in electron-volts [eV]
    JOULE_TO_EV: Final[float] = 1.0 / ELECTRON_VOLT_J

    # Planck constant [eV·s]
    PLANCK_EV: Final[float] = PLANCK_J / ELECTRON_VOLT_J

    # h·c [eV·m], so that E[eV] = HC_EV_M / λ[m]
    HC_EV_M: Final[float] = PLANCK_EV * SPEED_OF_LIGHT

    # Short alias
    C: Final[float] = SPEED_OF_LIGHT
