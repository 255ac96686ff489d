"""Power cycle calculators for ThermoCalc.

Air-standard analysis of the Otto, Diesel and Brayton cycles, and an
engineering approximation of the Rankine steam cycle.

Supported cycles:
- Otto: isentropic compression, constant-volume heat addition
- Diesel: isentropic compression, constant-pressure heat addition
- Brayton: gas turbine, constant-pressure heat addition and rejection
- Rankine: steam turbine with a fixed superheated-steam approximation
  (no steam tables)

Units: T [K] (Rankine turbine inlet in °C), P [kPa], specific work and
heat [kJ/kg], MEP [kPa], efficiency [%].
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any

from thermocalc.core.properties import AIR, GasProperties
from thermocalc.utils.constants import CP_STEAM, GAMMA_STEAM, T_CELSIUS_OFFSET, T_CONDENSER_C

logger = logging.getLogger(__name__)


class CycleType(Enum):
    """Power cycle architecture."""

    OTTO = "OTTO"
    DIESEL = "DIESEL"
    RANKINE = "RANKINE"
    BRAYTON = "BRAYTON"


class _Result:
    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class OttoResult(_Result):
    """Otto cycle state temperatures/pressures and performance."""

    T2: float  # K
    T3: float  # K
    T4: float  # K
    P2: float  # kPa
    P3: float  # kPa
    P4: float  # kPa
    w_net: float  # kJ/kg
    efficiency: float  # %
    MEP: float  # kPa


@dataclass(frozen=True)
class DieselResult(_Result):
    """Diesel cycle state temperatures/pressures and performance."""

    T2: float  # K
    T3: float  # K
    T4: float  # K
    P2: float  # kPa
    P3: float  # kPa
    P4: float  # kPa
    q_in: float  # kJ/kg
    q_out: float  # kJ/kg
    w_net: float  # kJ/kg
    efficiency: float  # %
    MEP: float  # kPa


@dataclass(frozen=True)
class BraytonResult(_Result):
    """Brayton cycle state temperatures/pressures and performance."""

    T2: float  # K
    T4: float  # K
    P2: float  # kPa
    P3: float  # kPa
    P4: float  # kPa
    w_comp: float  # kJ/kg
    w_turb: float  # kJ/kg
    w_net: float  # kJ/kg
    q_in: float  # kJ/kg
    efficiency: float  # %
    bwr: float  # back-work ratio


@dataclass(frozen=True)
class RankineStatePoint:
    """Approximate Rankine state point, for diagrams and tables only."""

    P: float  # kPa
    T: float  # °C
    phase: str


@dataclass(frozen=True)
class RankineResult(_Result):
    """Rankine cycle performance and illustrative state points."""

    w_turbine: float  # kJ/kg
    w_net: float  # kJ/kg
    efficiency: float  # %
    power_output: float  # kW
    T3: float  # °C
    P3: float  # kPa
    P1: float  # kPa
    states: tuple[RankineStatePoint, ...] = ()


# --- Air-standard piston cycles ---


def otto_cycle(
    r: float,
    T1: float,
    P1: float,
    q_in: float,
    gas: GasProperties = AIR,
) -> OttoResult:
    """Air-standard Otto cycle.

    Args:
        r: Compression ratio v1/v2.
        T1: Intake temperature [K].
        P1: Intake pressure [kPa].
        q_in: Heat added at constant volume [kJ/kg].
        gas: Working-fluid properties.

    Returns:
        OttoResult. Efficiency is 1 - r^(1-γ), independent of q_in.
    """
    g = gas.gamma
    v1 = gas.R * T1 / P1  # m³/kg
    v2 = v1 / r

    T2 = T1 * r ** (g - 1.0)
    P2 = P1 * r**g
    T3 = T2 + q_in / gas.cv
    P3 = P2 * T3 / T2
    T4 = T3 * r ** (-(g - 1.0))
    P4 = P3 * r ** (-g)

    w_net = q_in - gas.cv * (T4 - T1)
    efficiency = 1.0 - r ** (-(g - 1.0))
    MEP = w_net / (v1 - v2)

    return OttoResult(
        T2=T2, T3=T3, T4=T4, P2=P2, P3=P3, P4=P4,
        w_net=w_net, efficiency=efficiency * 100.0, MEP=MEP,
    )


def diesel_cycle(
    r: float,
    rc: float,
    T1: float,
    P1: float,
    gas: GasProperties = AIR,
) -> DieselResult:
    """Air-standard Diesel cycle.

    Args:
        r: Compression ratio v1/v2.
        rc: Cut-off ratio v3/v2.
        T1: Intake temperature [K].
        P1: Intake pressure [kPa].
        gas: Working-fluid properties.

    Returns:
        DieselResult.
    """
    g = gas.gamma
    v1 = gas.R * T1 / P1
    v2 = v1 / r

    T2 = T1 * r ** (g - 1.0)
    T3 = T2 * rc
    q_in = gas.cp * (T3 - T2)
    T4 = T3 * (rc / r) ** (g - 1.0)
    q_out = gas.cv * (T4 - T1)
    w_net = q_in - q_out
    efficiency = 1.0 - (1.0 / r ** (g - 1.0)) * ((rc**g - 1.0) / (g * (rc - 1.0)))
    MEP = w_net / (v1 - v2)

    P2 = P1 * r**g
    P3 = P2
    P4 = P3 * (rc / r) ** g

    return DieselResult(
        T2=T2, T3=T3, T4=T4, P2=P2, P3=P3, P4=P4,
        q_in=q_in, q_out=q_out, w_net=w_net,
        efficiency=efficiency * 100.0, MEP=MEP,
    )


# --- Gas turbine ---


def brayton_cycle(
    rp: float,
    T1: float,
    T3: float,
    P1: float = 100.0,
    gas: GasProperties = AIR,
) -> BraytonResult:
    """Ideal Brayton (gas turbine) cycle.

    Args:
        rp: Compressor pressure ratio P2/P1.
        T1: Compressor inlet temperature [K].
        T3: Turbine inlet temperature [K].
        P1: Compressor inlet pressure [kPa].
        gas: Working-fluid properties.

    Returns:
        BraytonResult.
    """
    g = gas.gamma
    exponent = (g - 1.0) / g

    T2 = T1 * rp**exponent
    T4 = T3 * rp ** (-exponent)

    w_comp = gas.cp * (T2 - T1)
    w_turb = gas.cp * (T3 - T4)
    w_net = w_turb - w_comp
    q_in = gas.cp * (T3 - T2)

    P2 = P1 * rp

    return BraytonResult(
        T2=T2, T4=T4, P2=P2, P3=P2, P4=P1,
        w_comp=w_comp, w_turb=w_turb, w_net=w_net, q_in=q_in,
        efficiency=w_net / q_in * 100.0,
        bwr=w_comp / w_turb,
    )


# --- Steam cycle ---


def rankine_cycle(
    T3: float,
    P3: float,
    P1: float,
    w_pump: float,
    q_in: float,
    m_dot: float,
) -> RankineResult:
    """Rankine cycle using a fixed superheated-steam approximation.

    Turbine work is the isentropic ideal-gas expansion of steam with
    constant cp and γ:

        w_turbine = cp_steam · T3 · (1 − (P1/P3)^((γ−1)/γ))

    This is deliberately not a steam-table calculation.

    Args:
        T3: Turbine inlet temperature [°C].
        P3: Boiler pressure [kPa].
        P1: Condenser pressure [kPa].
        w_pump: Pump specific work [kJ/kg].
        q_in: Boiler specific heat input [kJ/kg].
        m_dot: Steam mass flow rate [kg/s].

    Returns:
        RankineResult, with four illustrative state points.
    """
    T3K = T3 + T_CELSIUS_OFFSET
    w_turbine = CP_STEAM * T3K * (1.0 - (P1 / P3) ** ((GAMMA_STEAM - 1.0) / GAMMA_STEAM))

    w_net = w_turbine - w_pump
    efficiency = w_net / q_in * 100.0

    states = (
        RankineStatePoint(P=P1, T=T_CONDENSER_C, phase="Saturated Liquid"),
        RankineStatePoint(P=P3, T=T_CONDENSER_C, phase="Compressed Liquid"),
        RankineStatePoint(P=P3, T=T3, phase="Superheated Vapor"),
        RankineStatePoint(P=P1, T=T_CONDENSER_C, phase="Wet Mixture"),
    )

    return RankineResult(
        w_turbine=w_turbine,
        w_net=w_net,
        efficiency=efficiency,
        power_output=m_dot * w_net,
        T3=T3,
        P3=P3,
        P1=P1,
        states=states,
    )


_CALCULATORS = {
    CycleType.OTTO: otto_cycle,
    CycleType.DIESEL: diesel_cycle,
    CycleType.BRAYTON: brayton_cycle,
    CycleType.RANKINE: rankine_cycle,
}


def analyze_cycle(
    cycle_type: CycleType | str, **params: float
) -> OttoResult | DieselResult | BraytonResult | RankineResult:
    """Dispatch to the calculator for *cycle_type*.

    Args:
        cycle_type: Cycle to analyse.
        **params: Keyword arguments of the matching calculator.

    Raises:
        ValueError: If the cycle type is unknown.
    """
    cycle_type = CycleType(cycle_type)
    logger.debug("Analysing %s cycle with %s", cycle_type.value, params)
    return _CALCULATORS[cycle_type](**params)
