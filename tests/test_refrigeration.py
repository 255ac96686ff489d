"""Tests for the vapour-compression refrigeration calculator."""

import pytest

from thermocalc.core.refrigeration import vapor_compression_cycle


class TestVaporCompression:
    """Test the simplified enthalpy model."""

    def test_enthalpies(self):
        res = vapor_compression_cycle(-10, 40, 0.1)
        assert res.h1 == pytest.approx(240.0)
        assert res.h3 == pytest.approx(132.0)
        assert res.h2 == pytest.approx(240.0 + 0.3 * 108.0)
        assert res.h4 == res.h3

    def test_reference_case(self):
        res = vapor_compression_cycle(-10, 40, 0.1)
        assert res.w_c == pytest.approx(32.4)
        assert res.q_e == pytest.approx(108.0)
        assert res.q_c == pytest.approx(140.4)
        assert res.COP == pytest.approx(108.0 / 32.4)
        assert res.capacity == pytest.approx(10.8)

    def test_energy_balance(self):
        res = vapor_compression_cycle(-20, 35, 0.5)
        assert res.q_c == pytest.approx(res.q_e + res.w_c)

    def test_default_mass_flow(self):
        res = vapor_compression_cycle(-10, 40)
        assert res.capacity == pytest.approx(0.1 * res.q_e)

    def test_cop_fixed_by_model(self):
        """Compressor work is 0.3·q_e in this model, so COP = 1/0.3."""
        for T_evap, T_cond in ((-30, 50), (-10, 40), (5, 30)):
            assert vapor_compression_cycle(T_evap, T_cond).COP == pytest.approx(1 / 0.3)
