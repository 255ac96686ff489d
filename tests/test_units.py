"""Tests for the unit conversion module."""

import pytest

from thermocalc.utils.units import (
    UNIT_TABLE,
    QuantityKind,
    UnitSystem,
    as_quantity,
    convert,
    from_si,
    to_si,
    unit_label,
)

SAMPLE_VALUES = [-40.0, 0.0, 1.0, 300.5, 8000.0, 1.0e6]


class TestRoundTrip:
    """fromSI(toSI(v)) must return v for every kind and system."""

    @pytest.mark.parametrize("kind", list(QuantityKind))
    @pytest.mark.parametrize("system", list(UnitSystem))
    def test_round_trip(self, kind, system):
        for v in SAMPLE_VALUES:
            back = from_si(to_si(v, kind, system), kind, system)
            assert back == pytest.approx(v, rel=1e-9, abs=1e-9)

    @pytest.mark.parametrize("kind", list(QuantityKind))
    def test_si_is_identity(self, kind):
        assert to_si(123.4, kind, UnitSystem.SI) == 123.4
        assert from_si(123.4, kind, UnitSystem.SI) == 123.4


class TestConversionTable:
    """Imperial → SI factors."""

    @pytest.mark.parametrize(
        "kind, factor",
        [
            (QuantityKind.PRESSURE, 6.89476),
            (QuantityKind.VOLUME, 0.0283168),
            (QuantityKind.ENERGY, 1.05506),
            (QuantityKind.SPECIFIC_ENERGY, 2.326),
            (QuantityKind.POWER, 0.7457),
            (QuantityKind.MASS, 0.453592),
            (QuantityKind.MASS_FLOW, 0.453592),
            (QuantityKind.LENGTH, 0.3048),
            (QuantityKind.AREA, 0.092903),
            (QuantityKind.U_VALUE, 5.67826),
            (QuantityKind.DENSITY, 16.0185),
            (QuantityKind.SPECIFIC_HEAT, 4.1868),
        ],
    )
    def test_multiplicative_factors(self, kind, factor):
        assert to_si(2.0, kind, UnitSystem.IMPERIAL) == pytest.approx(2.0 * factor)
        assert from_si(2.0 * factor, kind, UnitSystem.IMPERIAL) == pytest.approx(2.0)

    def test_rankine_to_kelvin(self):
        assert to_si(540.0, QuantityKind.TEMP, UnitSystem.IMPERIAL) == pytest.approx(300.0)
        assert from_si(300.0, QuantityKind.TEMP, UnitSystem.IMPERIAL) == pytest.approx(540.0)

    def test_fahrenheit_to_celsius(self):
        assert to_si(212.0, QuantityKind.TEMP_C, UnitSystem.IMPERIAL) == pytest.approx(100.0)
        assert to_si(32.0, QuantityKind.TEMP_C, UnitSystem.IMPERIAL) == pytest.approx(0.0)
        assert from_si(-40.0, QuantityKind.TEMP_C, UnitSystem.IMPERIAL) == pytest.approx(-40.0)

    def test_conductance_is_inverse(self):
        """BTU/hr·°F → kW/K divides by the factor."""
        assert to_si(1895.63, QuantityKind.CONDUCTANCE, UnitSystem.IMPERIAL) == pytest.approx(1.0)
        assert from_si(1.0, QuantityKind.CONDUCTANCE, UnitSystem.IMPERIAL) == pytest.approx(1895.63)

    def test_every_kind_has_a_rule(self):
        assert set(UNIT_TABLE) == set(QuantityKind)


class TestLookup:
    def test_string_arguments(self):
        assert to_si(1.0, "pressure", "IMPERIAL") == pytest.approx(6.89476)
        assert to_si(1.0, "temp_C", "imperial") == pytest.approx(-155.0 / 9.0)

    def test_unknown_kind(self):
        with pytest.raises(ValueError):
            to_si(1.0, "viscosity", UnitSystem.IMPERIAL)

    def test_unknown_system(self):
        with pytest.raises(ValueError):
            from_si(1.0, QuantityKind.MASS, "cgs")

    def test_labels(self):
        assert unit_label(QuantityKind.TEMP, UnitSystem.SI) == "K"
        assert unit_label(QuantityKind.TEMP, UnitSystem.IMPERIAL) == "°R"
        assert unit_label(QuantityKind.POWER, UnitSystem.IMPERIAL) == "HP"
        assert unit_label("conductance", "IMPERIAL") == "BTU/hr·°F"


class TestPintQuantities:
    """The pint unit attached to each kind agrees with the fixed table."""

    @pytest.mark.parametrize(
        "kind", [k for k in QuantityKind if k is not QuantityKind.TEMP_C]
    )
    def test_pint_agrees_with_table(self, kind):
        q = as_quantity(1.0, kind, UnitSystem.IMPERIAL)
        expected = to_si(1.0, kind, UnitSystem.IMPERIAL)
        assert q.to(UNIT_TABLE[kind].si_pint).magnitude == pytest.approx(expected, rel=1e-3)

    def test_offset_temperature(self):
        q = as_quantity(212.0, QuantityKind.TEMP_C, UnitSystem.IMPERIAL)
        assert q.to("degC").magnitude == pytest.approx(100.0)

    def test_si_quantity_units(self):
        q = as_quantity(100.0, QuantityKind.PRESSURE, UnitSystem.SI)
        assert q.to("Pa").magnitude == pytest.approx(1.0e5)

    def test_convert_generic(self):
        assert convert(1.0, "km", "m") == pytest.approx(1000.0, rel=1e-6)
