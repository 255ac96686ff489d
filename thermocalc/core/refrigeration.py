"""Vapour-compression refrigeration cycle.

Uses a simplified linear enthalpy model in place of refrigerant tables:

    h1 = 250 + T_evap            (evaporator outlet, saturated vapour)
    h3 = 100 + 0.8 · T_cond      (condenser outlet, saturated liquid)
    h2 = h1 + 0.3 · (h1 − h3)    (compressor outlet)
    h4 = h3                      (isenthalpic throttling)

The coefficients are the model itself; they are not fitted to any real
refrigerant.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

H1_OFFSET = 250.0  # kJ/kg
H3_OFFSET = 100.0  # kJ/kg
H3_SLOPE = 0.8  # kJ/(kg·°C)
COMPRESSION_FACTOR = 0.3


@dataclass(frozen=True)
class RefrigerationResult:
    """Vapour-compression cycle result (specific quantities in kJ/kg)."""

    h1: float
    h2: float
    h3: float
    h4: float
    w_c: float  # compressor work
    q_e: float  # evaporator heat (refrigeration effect)
    q_c: float  # condenser heat rejected
    COP: float
    capacity: float  # kW, cooling capacity

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def vapor_compression_cycle(
    T_evap: float,
    T_cond: float,
    m_dot: float = 0.1,
) -> RefrigerationResult:
    """Evaluate the vapour-compression cycle.

    Args:
        T_evap: Evaporator temperature [°C].
        T_cond: Condenser temperature [°C].
        m_dot: Refrigerant mass flow [kg/s].

    Returns:
        RefrigerationResult.
    """
    h1 = H1_OFFSET + T_evap
    h3 = H3_OFFSET + H3_SLOPE * T_cond
    h2 = h1 + COMPRESSION_FACTOR * (h1 - h3)
    h4 = h3

    w_c = h2 - h1
    q_e = h1 - h4
    q_c = h2 - h3

    return RefrigerationResult(
        h1=h1, h2=h2, h3=h3, h4=h4,
        w_c=w_c, q_e=q_e, q_c=q_c,
        COP=q_e / w_c,
        capacity=m_dot * q_e,
    )
