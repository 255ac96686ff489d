"""Utility modules for ThermoCalc."""

from thermocalc.utils.constants import CP_AIR, CV_AIR, GAMMA_AIR, R_AIR
from thermocalc.utils.units import QuantityKind, UnitSystem, from_si, to_si

__all__ = [
    "CP_AIR",
    "CV_AIR",
    "GAMMA_AIR",
    "R_AIR",
    "QuantityKind",
    "UnitSystem",
    "from_si",
    "to_si",
]
