"""Unit conversion utilities for ThermoCalc.

Every input and output of the calculators can be expressed in either SI
or Imperial units. The calculators themselves only ever see SI values;
conversion happens at the boundary through :func:`to_si` and
:func:`from_si`, which apply a fixed table of factors per quantity kind.

A pint registry is kept alongside the table so presentation code can
attach proper units to a number (:func:`as_quantity`) or perform ad-hoc
conversions (:func:`convert`).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache

import pint

from thermocalc.utils.constants import (
    BTU_PER_LB_F_TO_KJ_PER_KG_K,
    BTU_PER_LB_TO_KJ_PER_KG,
    BTU_TO_KJ,
    FT2_TO_M2,
    FT3_TO_M3,
    FT_TO_M,
    HP_TO_KW,
    KW_PER_K_TO_BTU_PER_HR_F,
    LB_PER_FT3_TO_KG_PER_M3,
    LB_TO_KG,
    PSI_TO_KPA,
    RANKINE_TO_KELVIN,
    U_VALUE_IMPERIAL_TO_SI,
)

# Module-level unit registry (singleton)
_ureg = pint.UnitRegistry()


def get_unit_registry() -> pint.UnitRegistry:
    """Return the shared pint UnitRegistry instance."""
    return _ureg


Q_ = _ureg.Quantity


class _CaseInsensitiveEnum(Enum):
    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.lower() or member.name == value.upper():
                    return member
        return None


class UnitSystem(_CaseInsensitiveEnum):
    """Unit system an input or output is expressed in."""

    SI = "SI"
    IMPERIAL = "IMPERIAL"


class QuantityKind(_CaseInsensitiveEnum):
    """Physical dimension of a convertible value."""

    TEMP = "temp"  # absolute temperature
    TEMP_C = "temp_C"  # offset (Celsius-like) temperature
    PRESSURE = "pressure"
    VOLUME = "volume"
    ENERGY = "energy"
    SPECIFIC_ENERGY = "specific_energy"
    POWER = "power"
    MASS = "mass"
    MASS_FLOW = "mass_flow"
    LENGTH = "length"
    AREA = "area"
    U_VALUE = "u_value"
    DENSITY = "density"
    SPECIFIC_HEAT = "specific_heat"
    CONDUCTANCE = "conductance"


@dataclass(frozen=True)
class UnitSpec:
    """Conversion rule between the SI and Imperial unit of one kind.

    Imperial → SI is ``(value - offset) * factor``, or ``value / factor``
    when ``inverse`` is set. SI → Imperial is the exact reverse.
    """

    si_label: str
    imperial_label: str
    si_pint: str
    imperial_pint: str
    factor: float
    offset: float = 0.0
    inverse: bool = False


UNIT_TABLE: dict[QuantityKind, UnitSpec] = {
    QuantityKind.TEMP: UnitSpec("K", "°R", "kelvin", "degR", RANKINE_TO_KELVIN),
    QuantityKind.TEMP_C: UnitSpec("°C", "°F", "degC", "degF", RANKINE_TO_KELVIN, offset=32.0),
    QuantityKind.PRESSURE: UnitSpec("kPa", "psi", "kPa", "psi", PSI_TO_KPA),
    QuantityKind.VOLUME: UnitSpec("m³", "ft³", "m**3", "ft**3", FT3_TO_M3),
    QuantityKind.ENERGY: UnitSpec("kJ", "BTU", "kJ", "Btu", BTU_TO_KJ),
    QuantityKind.SPECIFIC_ENERGY: UnitSpec(
        "kJ/kg", "BTU/lb", "kJ/kg", "Btu/lb", BTU_PER_LB_TO_KJ_PER_KG
    ),
    QuantityKind.POWER: UnitSpec("kW", "HP", "kW", "hp", HP_TO_KW),
    QuantityKind.MASS: UnitSpec("kg", "lb", "kg", "lb", LB_TO_KG),
    QuantityKind.MASS_FLOW: UnitSpec("kg/s", "lb/s", "kg/s", "lb/s", LB_TO_KG),
    QuantityKind.LENGTH: UnitSpec("m", "ft", "m", "ft", FT_TO_M),
    QuantityKind.AREA: UnitSpec("m²", "ft²", "m**2", "ft**2", FT2_TO_M2),
    QuantityKind.U_VALUE: UnitSpec(
        "W/m²K", "BTU/hr·ft²·°F", "W/m**2/K", "Btu/hour/ft**2/delta_degF", U_VALUE_IMPERIAL_TO_SI
    ),
    QuantityKind.DENSITY: UnitSpec(
        "kg/m³", "lb/ft³", "kg/m**3", "lb/ft**3", LB_PER_FT3_TO_KG_PER_M3
    ),
    QuantityKind.SPECIFIC_HEAT: UnitSpec(
        "kJ/kg·K", "BTU/lb·°F", "kJ/kg/K", "Btu/lb/delta_degF", BTU_PER_LB_F_TO_KJ_PER_KG_K
    ),
    QuantityKind.CONDUCTANCE: UnitSpec(
        "kW/K",
        "BTU/hr·°F",
        "kW/K",
        "Btu/hour/delta_degF",
        KW_PER_K_TO_BTU_PER_HR_F,
        inverse=True,
    ),
}


def _resolve(kind: QuantityKind | str, system: UnitSystem | str) -> tuple[UnitSpec, UnitSystem]:
    return UNIT_TABLE[QuantityKind(kind)], UnitSystem(system)


def to_si(value: float, kind: QuantityKind | str, system: UnitSystem | str) -> float:
    """Convert a value expressed in *system* units to SI.

    Args:
        value: Numeric value.
        kind: Physical quantity kind (enum member or its string value).
        system: Unit system the value is expressed in.

    Returns:
        Value in the SI unit of *kind*. Identity when *system* is SI.

    Raises:
        ValueError: If *kind* or *system* is not recognised.
    """
    spec, system = _resolve(kind, system)
    if system is UnitSystem.SI:
        return value
    if spec.inverse:
        return value / spec.factor
    return (value - spec.offset) * spec.factor


def from_si(value: float, kind: QuantityKind | str, system: UnitSystem | str) -> float:
    """Convert an SI value to the unit of *kind* in *system*.

    Exact inverse of :func:`to_si`.
    """
    spec, system = _resolve(kind, system)
    if system is UnitSystem.SI:
        return value
    if spec.inverse:
        return value * spec.factor
    return value / spec.factor + spec.offset


def unit_label(kind: QuantityKind | str, system: UnitSystem | str) -> str:
    """Display label of the unit used for *kind* in *system*."""
    spec, system = _resolve(kind, system)
    return spec.si_label if system is UnitSystem.SI else spec.imperial_label


def as_quantity(value: float, kind: QuantityKind | str, system: UnitSystem | str) -> pint.Quantity:
    """Wrap a value in a pint Quantity carrying the unit of *kind* in *system*."""
    spec, system = _resolve(kind, system)
    unit = spec.si_pint if system is UnitSystem.SI else spec.imperial_pint
    return Q_(value, unit)


@lru_cache(maxsize=256)
def convert(value: float, from_unit: str, to_unit: str) -> float:
    """General-purpose unit conversion.

    Args:
        value: Numeric value in *from_unit*.
        from_unit: Source unit string.
        to_unit: Target unit string.

    Returns:
        Converted numeric value.
    """
    return Q_(value, from_unit).to(to_unit).magnitude
