"""Physical constant consistency."""

import pytest

from spectrum_explorer.core.physical_constants import PhysicalConstants as PC


class TestExactValues:
    def test_speed_of_light(self):
        assert PC.SPEED_OF_LIGHT == 299_792_458.0
        assert PC.C == PC.SPEED_OF_LIGHT

    def test_planck_joules(self):
        assert PC.PLANCK_J == 6.62607015e-34

    def test_electron_volt(self):
        assert PC.ELECTRON_VOLT_J == 1.602176634e-19


class TestDerivedValues:
    def test_planck_ev_matches_joule_value(self):
        # h[eV·s] = h[J·s] / (J per eV), checked independently of the literal
        assert PC.PLANCK_EV == pytest.approx(PC.PLANCK_J / PC.ELECTRON_VOLT_J, rel=1e-15)
        assert PC.PLANCK_EV == pytest.approx(PC.PLANCK_J * PC.JOULE_TO_EV, rel=1e-12)

    def test_planck_ev_value(self):
        assert PC.PLANCK_EV == pytest.approx(4.135667696e-15, rel=1e-9)

    def test_hc(self):
        assert PC.HC_EV_M == pytest.approx(1.239841984e-6, rel=1e-9)

    def test_joule_to_ev_inverse(self):
        assert PC.JOULE_TO_EV * PC.ELECTRON_VOLT_J == pytest.approx(1.0, rel=1e-15)
