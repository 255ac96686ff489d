"""Second-law feasibility check for an ideal-gas process.

Entropy generation is the sum of the system and surroundings entropy
changes:

    ΔS_sys  = cp · ln(T2/T1) − R · ln(P2/P1)
    ΔS_surr = −Q / T_surr
    S_gen   = ΔS_sys + ΔS_surr

A process is reversible when |S_gen| is below tolerance, impossible when
S_gen < 0, and possible otherwise.
"""

from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any

from thermocalc.core.properties import AIR, GasProperties

logger = logging.getLogger(__name__)

REVERSIBLE_TOLERANCE = 1e-4  # kJ/(kg·K)


class FeasibilityStatus(Enum):
    """Second-law verdict on a process."""

    POSSIBLE = "POSSIBLE"
    IMPOSSIBLE = "IMPOSSIBLE"
    REVERSIBLE = "REVERSIBLE"


@dataclass(frozen=True)
class FeasibilityResult:
    """Entropy balance of a process."""

    dS_sys: float  # kJ/(kg·K)
    dS_surr: float  # kJ/(kg·K)
    S_gen: float  # kJ/(kg·K)
    status: FeasibilityStatus

    def to_dict(self) -> dict[str, Any]:
        d = asdict(self)
        d["status"] = self.status.value
        return d


def classify_entropy_generation(S_gen: float) -> FeasibilityStatus:
    """Map an entropy generation value to a feasibility status."""
    # Tolerance first: tiny negative values are reversible, not impossible
    if abs(S_gen) < REVERSIBLE_TOLERANCE:
        return FeasibilityStatus.REVERSIBLE
    if S_gen < 0:
        return FeasibilityStatus.IMPOSSIBLE
    return FeasibilityStatus.POSSIBLE


def validate_process(
    P1: float,
    T1: float,
    P2: float,
    T2: float,
    Q: float,
    T_surr: float,
    gas: GasProperties = AIR,
) -> FeasibilityResult:
    """Check whether a process from (P1, T1) to (P2, T2) obeys the second law.

    Args:
        P1: Initial pressure [kPa].
        T1: Initial temperature [K].
        P2: Final pressure [kPa].
        T2: Final temperature [K].
        Q: Heat transferred to the system [kJ/kg].
        T_surr: Surroundings temperature [K].
        gas: Gas property set.

    Returns:
        FeasibilityResult.
    """
    dS_sys = gas.cp * math.log(T2 / T1) - gas.R * math.log(P2 / P1)
    dS_surr = -Q / T_surr
    S_gen = dS_sys + dS_surr

    status = classify_entropy_generation(S_gen)
    if status is FeasibilityStatus.IMPOSSIBLE:
        logger.warning("Process violates the second law: S_gen = %.6f kJ/(kg·K)", S_gen)

    return FeasibilityResult(dS_sys=dS_sys, dS_surr=dS_surr, S_gen=S_gen, status=status)
