"""Gas property sets for air-standard analysis."""

from __future__ import annotations

from dataclasses import dataclass

from thermocalc.utils.constants import CP_AIR, CV_AIR, GAMMA_AIR, R_AIR


@dataclass(frozen=True)
class GasProperties:
    """Ideal-gas properties with constant specific heats.

    All values in kJ/(kg·K) except gamma.
    """

    R: float
    cp: float
    cv: float
    gamma: float


AIR = GasProperties(R=R_AIR, cp=CP_AIR, cv=CV_AIR, gamma=GAMMA_AIR)
