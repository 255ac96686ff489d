"""Counter-flow heat exchanger rating.

Given the hot-stream temperature drop, computes the duty, the cold
outlet temperature and the log-mean temperature difference, then rates
the exchanger with the effectiveness-NTU method:

    ε = (1 − exp(−NTU·(1 − Cr))) / (1 − Cr·exp(−NTU·(1 − Cr)))

which reduces to ε = NTU / (1 + NTU) for balanced flow (Cr = 1).

Units: m [kg/s], cp [kJ/(kg·K)], T [°C], UA [kW/K], Q [kW].
"""

from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass
from typing import Any

logger = logging.getLogger(__name__)

# Terminal differences closer than this are treated as equal (LMTD = dT1)
LMTD_BALANCED_TOLERANCE = 0.001


@dataclass(frozen=True)
class HeatExchangerResult:
    """Heat exchanger analysis result."""

    Q: float  # kW, heat duty
    Tc_out: float  # °C
    LMTD: float  # K
    epsilon: float  # %, effectiveness
    NTU: float
    C_min: float  # kW/K
    C_max: float  # kW/K
    C_r: float  # capacity ratio C_min / C_max

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def log_mean_temperature_difference(dT1: float, dT2: float) -> float:
    """LMTD from the two terminal temperature differences.

    Returns dT1 when the differences are (almost) equal, where the
    logarithmic form is 0/0.
    """
    if abs(dT1 - dT2) < LMTD_BALANCED_TOLERANCE:
        logger.debug("Balanced terminal differences, LMTD = dT1 = %.4f", dT1)
        return dT1
    return (dT1 - dT2) / math.log(dT1 / dT2)


def counterflow_effectiveness(NTU: float, Cr: float) -> float:
    """Counter-flow effectiveness (fraction, 0–1)."""
    if Cr == 1.0:
        logger.debug("Balanced capacity rates, using eps = NTU/(1+NTU)")
        return NTU / (1.0 + NTU)
    decay = math.exp(-NTU * (1.0 - Cr))
    return (1.0 - decay) / (1.0 - Cr * decay)


def heat_exchanger(
    mh: float,
    cph: float,
    Th_in: float,
    Th_out: float,
    mc: float,
    cpc: float,
    Tc_in: float,
    UA: float,
) -> HeatExchangerResult:
    """Rate a counter-flow heat exchanger.

    Args:
        mh: Hot-stream mass flow [kg/s].
        cph: Hot-stream specific heat [kJ/(kg·K)].
        Th_in: Hot inlet temperature [°C].
        Th_out: Hot outlet temperature [°C].
        mc: Cold-stream mass flow [kg/s].
        cpc: Cold-stream specific heat [kJ/(kg·K)].
        Tc_in: Cold inlet temperature [°C].
        UA: Overall conductance [kW/K].

    Returns:
        HeatExchangerResult with effectiveness in percent.
    """
    Ch = mh * cph
    Cc = mc * cpc

    Q = Ch * (Th_in - Th_out)
    Tc_out = Tc_in + Q / Cc

    dT1 = Th_in - Tc_out
    dT2 = Th_out - Tc_in
    LMTD = log_mean_temperature_difference(dT1, dT2)

    C_min = min(Ch, Cc)
    C_max = max(Ch, Cc)
    Cr = C_min / C_max
    NTU = UA / C_min
    epsilon = counterflow_effectiveness(NTU, Cr)

    return HeatExchangerResult(
        Q=Q,
        Tc_out=Tc_out,
        LMTD=LMTD,
        epsilon=epsilon * 100.0,
        NTU=NTU,
        C_min=C_min,
        C_max=C_max,
        C_r=Cr,
    )
