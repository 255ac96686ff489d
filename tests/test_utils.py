"""Tests for constants and input validation."""

import pytest

from thermocalc.utils.constants import (
    CP_AIR,
    CV_AIR,
    GAMMA_AIR,
    R_AIR,
    STEFAN_BOLTZMANN,
    T_CELSIUS_OFFSET,
)
from thermocalc.utils.validation import (
    Severity,
    ValidationResult,
    validate_brayton,
    validate_conduction,
    validate_diesel,
    validate_gas_process,
    validate_heat_exchanger,
    validate_otto,
    validate_positive,
    validate_radiation,
    validate_range,
    validate_rankine,
    validate_refrigeration,
)


class TestConstants:
    def test_air_mayer_relation(self):
        assert CP_AIR - CV_AIR == pytest.approx(R_AIR, rel=1e-3)

    def test_air_gamma(self):
        assert CP_AIR / CV_AIR == pytest.approx(GAMMA_AIR, rel=1e-3)

    def test_stefan_boltzmann(self):
        assert STEFAN_BOLTZMANN == pytest.approx(5.67e-8)

    def test_celsius_offset(self):
        assert T_CELSIUS_OFFSET == 273.15


class TestValidationResult:
    def test_positive_check(self):
        result = ValidationResult()
        validate_positive("x", -1.0, result)
        assert not result.is_valid
        assert len(result.errors) == 1

    def test_range_warning(self):
        result = ValidationResult()
        validate_range("x", 200.0, 0.0, 100.0, result, severity=Severity.WARNING)
        assert result.is_valid
        assert result.has_warnings

    def test_merge(self):
        a, b = ValidationResult(), ValidationResult()
        a.error("x", "bad")
        b.warning("y", "odd")
        a.merge(b)
        assert len(a.messages) == 2


class TestCalculatorValidators:
    def test_gas_defaults_valid(self):
        inputs = {"process": "ISOTHERMAL", "P1": 100, "V1": 1, "T1": 300, "param": 2, "n": 1.3}
        assert validate_gas_process(inputs).is_valid

    def test_gas_unknown_process(self):
        assert not validate_gas_process({"process": "ISENTHALPIC"}).is_valid

    def test_gas_polytropic_unit_index(self):
        result = validate_gas_process({"process": "POLYTROPIC", "n": 1.0})
        assert [m.parameter for m in result.errors] == ["n"]

    def test_otto_ratio(self):
        assert not validate_otto({"r": 1.0}).is_valid
        result = validate_otto({"r": 20.0, "T1": 300, "P1": 100})
        assert result.is_valid
        assert result.has_warnings

    def test_diesel_cutoff_below_compression(self):
        assert validate_diesel({"r": 18, "rc": 2, "T1": 300, "P1": 100}).is_valid
        assert not validate_diesel({"r": 8, "rc": 9}).is_valid

    def test_brayton_turbine_hotter(self):
        assert not validate_brayton({"rp": 10, "T1": 300, "T3": 300}).is_valid

    def test_rankine_pressures(self):
        assert not validate_rankine({"P3": 10, "P1": 8000}).is_valid
        assert not validate_rankine({"T3": -300}).is_valid

    def test_heat_exchanger_reference_valid(self):
        inputs = {
            "mh": 2.5, "cph": 4.18, "Th_in": 90, "Th_out": 40,
            "mc": 5.0, "cpc": 4.18, "Tc_in": 20, "UA": 50,
        }
        result = validate_heat_exchanger(inputs)
        assert result.is_valid
        assert not result.has_warnings

    def test_heat_exchanger_crossed_terminals(self):
        assert not validate_heat_exchanger({"Th_out": 15, "Tc_in": 20}).is_valid

    def test_refrigeration_inverted_temperatures_warn(self):
        result = validate_refrigeration({"T_evap": 40, "T_cond": -10, "m_dot": 0.1})
        assert result.is_valid
        assert result.has_warnings

    def test_conduction_layers(self):
        assert validate_conduction({"layers": [(0.2, 0.8)], "area": 1}).is_valid
        assert not validate_conduction({"layers": []}).is_valid
        assert not validate_conduction({"layers": [(0.2, 0.0)]}).is_valid

    def test_radiation_emissivity(self):
        assert validate_radiation({"emissivity": 0.8, "T_surf": 500, "T_surr": 30}).is_valid
        assert not validate_radiation({"emissivity": 1.2}).is_valid

    def test_heat_exchanger_temperature_cross(self):
        """Cold outlet computed from the energy balance must stay below the hot inlet."""
        inputs = {
            "mh": 5.0, "cph": 4.18, "Th_in": 90, "Th_out": 40,
            "mc": 1.0, "cpc": 4.18, "Tc_in": 20, "UA": 50,
        }
        result = validate_heat_exchanger(inputs)
        assert not result.is_valid
        assert [m.parameter for m in result.errors] == ["Tc_out"]
        assert result.errors[0].value == pytest.approx(270.0)

    def test_refrigeration_no_compressor_work(self):
        """250 + T_evap == 100 + 0.8·T_cond leaves the COP undefined."""
        result = validate_refrigeration({"T_evap": -10, "T_cond": 175, "m_dot": 0.1})
        assert not result.is_valid
        assert [m.parameter for m in result.errors] == ["T_cond"]

    def test_refrigeration_reference_valid(self):
        result = validate_refrigeration({"T_evap": -10, "T_cond": 40, "m_dot": 0.1})
        assert result.is_valid
        assert not result.messages

    def test_diesel_unusual_ratio_is_info(self):
        result = validate_diesel({"r": 8, "rc": 2, "T1": 300, "P1": 100})
        assert result.is_valid
        assert not result.has_warnings
        assert [m.parameter for m in result.infos] == ["r"]
        assert result.infos[0].severity is Severity.INFO
