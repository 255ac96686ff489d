"""Tests for the second-law feasibility check."""

import logging
import math

import pytest

from thermocalc.core.entropy import (
    FeasibilityStatus,
    classify_entropy_generation,
    validate_process,
)


class TestValidateProcess:
    def test_identical_states_reversible(self):
        res = validate_process(100, 300, 100, 300, 0, 298)
        assert res.dS_sys == 0.0
        assert res.dS_surr == 0.0
        assert res.S_gen == 0.0
        assert res.status is FeasibilityStatus.REVERSIBLE

    def test_adiabatic_compression_with_heating_possible(self):
        res = validate_process(100, 300, 500, 600, 0, 298)
        expected = 1.005 * math.log(2) - 0.287 * math.log(5)
        assert res.dS_sys == pytest.approx(expected)
        assert res.S_gen == pytest.approx(expected)
        assert res.status is FeasibilityStatus.POSSIBLE

    def test_adiabatic_cooling_impossible(self, caplog):
        with caplog.at_level(logging.WARNING, logger="thermocalc.core.entropy"):
            res = validate_process(100, 600, 100, 300, 0, 298)
        assert res.S_gen < 0
        assert res.status is FeasibilityStatus.IMPOSSIBLE
        assert "second law" in caplog.text

    def test_reversible_isothermal_expansion(self):
        """Heat drawn from a reservoir at the gas temperature generates no entropy."""
        dS = -0.287 * math.log(0.5)
        res = validate_process(200, 300, 100, 300, 300 * dS, 300)
        assert res.dS_surr == pytest.approx(-dS)
        assert res.status is FeasibilityStatus.REVERSIBLE

    def test_to_dict_status_string(self):
        d = validate_process(100, 300, 100, 300, 0, 298).to_dict()
        assert d["status"] == "REVERSIBLE"


class TestClassification:
    def test_tolerance_checked_before_sign(self):
        """Slightly negative but within tolerance is reversible."""
        assert classify_entropy_generation(-5e-5) is FeasibilityStatus.REVERSIBLE

    def test_negative(self):
        assert classify_entropy_generation(-2e-4) is FeasibilityStatus.IMPOSSIBLE

    def test_positive(self):
        assert classify_entropy_generation(2e-4) is FeasibilityStatus.POSSIBLE

    def test_boundary(self):
        assert classify_entropy_generation(1e-4) is FeasibilityStatus.POSSIBLE
