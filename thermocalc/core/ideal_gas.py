"""Closed-system ideal-gas processes.

Computes the end state, boundary work, heat transfer and internal energy
change of air undergoing one of the five classic reversible processes.

Units: P [kPa], V [m³], T [K], W/Q [kJ]. Because P·V in kPa·m³ is kJ,
boundary work comes out in kJ directly. dU is cv·ΔT and therefore per unit
mass [kJ/kg]; for ADIABATIC it is taken as −W. Q = dU + W adds the two
numerically.
"""

from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any

from thermocalc.core.properties import AIR, GasProperties

logger = logging.getLogger(__name__)


class GasProcess(Enum):
    """Ideal-gas process path."""

    ISOTHERMAL = "ISOTHERMAL"
    ADIABATIC = "ADIABATIC"
    ISOBARIC = "ISOBARIC"
    ISOCHORIC = "ISOCHORIC"
    POLYTROPIC = "POLYTROPIC"


@dataclass(frozen=True)
class ProcessResult:
    """End state and energy balance of a gas process."""

    P2: float  # kPa
    V2: float  # m³
    T2: float  # K
    W: float  # kJ, boundary work done by the gas
    Q: float  # kJ, heat added to the gas
    dU: float  # kJ/kg, internal energy change

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def ideal_gas_process(
    process: GasProcess | str,
    P1: float,
    V1: float,
    T1: float,
    param: float,
    n: float = 1.3,
    gas: GasProperties = AIR,
) -> ProcessResult:
    """Evaluate an ideal-gas process from state 1.

    Args:
        process: Process path.
        P1: Initial pressure [kPa].
        V1: Initial volume [m³].
        T1: Initial temperature [K].
        param: Final pressure [kPa] for ISOCHORIC, final volume [m³]
            for every other process.
        n: Polytropic index (POLYTROPIC only).
        gas: Gas property set.

    Returns:
        ProcessResult for state 2.

    Raises:
        ValueError: For an unknown process, or when the process exponent
            (γ for ADIABATIC, n for POLYTROPIC) equals 1.
    """
    process = GasProcess(process)
    cv = gas.cv

    if process is GasProcess.ISOTHERMAL:
        V2 = param
        T2 = T1
        P2 = P1 * V1 / V2
        W = P1 * V1 * math.log(V2 / V1)
        return ProcessResult(P2=P2, V2=V2, T2=T2, W=W, Q=W, dU=0.0)

    if process is GasProcess.ADIABATIC:
        g = gas.gamma
        _check_exponent("gamma", g)
        V2 = param
        P2 = P1 * (V1 / V2) ** g
        T2 = T1 * (V1 / V2) ** (g - 1.0)
        W = (P1 * V1 - P2 * V2) / (g - 1.0)
        return ProcessResult(P2=P2, V2=V2, T2=T2, W=W, Q=0.0, dU=-W)

    if process is GasProcess.ISOBARIC:
        V2 = param
        P2 = P1
        T2 = T1 * V2 / V1
        W = P1 * (V2 - V1)
        dU = cv * (T2 - T1)
        return ProcessResult(P2=P2, V2=V2, T2=T2, W=W, Q=dU + W, dU=dU)

    if process is GasProcess.ISOCHORIC:
        P2 = param
        V2 = V1
        T2 = T1 * P2 / P1
        dU = cv * (T2 - T1)
        return ProcessResult(P2=P2, V2=V2, T2=T2, W=0.0, Q=dU, dU=dU)

    # POLYTROPIC
    _check_exponent("polytropic index n", n)
    V2 = param
    P2 = P1 * (V1 / V2) ** n
    T2 = T1 * (V1 / V2) ** (n - 1.0)
    W = (P1 * V1 - P2 * V2) / (n - 1.0)
    dU = cv * (T2 - T1)
    return ProcessResult(P2=P2, V2=V2, T2=T2, W=W, Q=dU + W, dU=dU)


def _check_exponent(name: str, value: float) -> None:
    # W = (P1V1 - P2V2) / (k - 1) is undefined at k = 1
    if value == 1.0:
        logger.debug("Rejected degenerate process exponent %s = 1", name)
        raise ValueError(f"{name} must not equal 1 (boundary work is undefined)")
