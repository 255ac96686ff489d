"""Tests for the heat exchanger calculator."""

import logging
import math

import pytest

from thermocalc.core.heat_exchanger import (
    counterflow_effectiveness,
    heat_exchanger,
    log_mean_temperature_difference,
)


def _reference():
    """Hot water 90 → 40 °C at 2.5 kg/s, cold water in at 20 °C, 5 kg/s, UA 50 kW/K."""
    return heat_exchanger(2.5, 4.18, 90, 40, 5.0, 4.18, 20, 50)


class TestHeatExchanger:
    """Test the LMTD / effectiveness-NTU rating."""

    def test_duty_and_cold_outlet(self):
        res = _reference()
        assert res.Q == pytest.approx(2.5 * 4.18 * 50)
        assert res.Tc_out == pytest.approx(45.0)

    def test_energy_balance(self):
        res = _reference()
        assert 5.0 * 4.18 * (res.Tc_out - 20) == pytest.approx(res.Q)

    def test_lmtd(self):
        res = _reference()
        assert res.LMTD == pytest.approx(25 / math.log(45 / 20))

    def test_capacity_rates(self):
        res = _reference()
        assert res.C_min == pytest.approx(10.45)
        assert res.C_max == pytest.approx(20.9)
        assert res.C_r == pytest.approx(0.5)
        assert res.NTU == pytest.approx(50 / 10.45)

    def test_effectiveness_percent(self):
        res = _reference()
        ntu = 50 / 10.45
        expected = (1 - math.exp(-ntu * 0.5)) / (1 - 0.5 * math.exp(-ntu * 0.5))
        assert res.epsilon == pytest.approx(expected * 100)
        assert 0 < res.epsilon < 100

    def test_balanced_flow(self):
        """Ch = Cc uses ε = NTU/(1+NTU) and the balanced LMTD branch."""
        res = heat_exchanger(1.0, 4.18, 90, 40, 1.0, 4.18, 20, 5.0)
        ntu = 5.0 / 4.18
        assert res.C_r == 1.0
        assert res.epsilon == pytest.approx(ntu / (1 + ntu) * 100)
        # dT1 = dT2 = 20 K
        assert res.LMTD == pytest.approx(20.0)


class TestEffectiveness:
    def test_limit_near_balanced(self):
        """General relation at Cr=0.999 approaches NTU/(1+NTU)."""
        for ntu in (0.5, 1.0, 2.0, 5.0):
            assert counterflow_effectiveness(ntu, 0.999) == pytest.approx(
                counterflow_effectiveness(ntu, 1.0), abs=1e-3
            )

    def test_zero_capacity_ratio(self):
        """Cr = 0 (condensing/evaporating stream) gives 1 − exp(−NTU)."""
        assert counterflow_effectiveness(2.0, 0.0) == pytest.approx(1 - math.exp(-2.0))

    def test_increases_with_ntu(self):
        assert counterflow_effectiveness(3.0, 0.5) > counterflow_effectiveness(1.0, 0.5)


class TestLMTD:
    def test_balanced_guard(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="thermocalc.core.heat_exchanger"):
            assert log_mean_temperature_difference(20.0, 20.0005) == 20.0
        assert "Balanced" in caplog.text

    def test_symmetric(self):
        assert log_mean_temperature_difference(45, 20) == pytest.approx(
            log_mean_temperature_difference(20, 45)
        )

    def test_crossed_terminals_raise(self):
        """A negative terminal difference has no logarithmic mean."""
        with pytest.raises(ValueError):
            log_mean_temperature_difference(10.0, -5.0)
