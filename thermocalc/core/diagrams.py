"""Plot data for cycle diagrams.

Generates discretised P-v and T-s curves for the Otto, Brayton and
Rankine cycles. These are visual aids: segments that would need data the
engine does not model are drawn with fixed visual scaling (combustion
pressure rise ×3 on the Otto diagram, heat-addition volume ×2.5 on the
Brayton diagram, a parabolic saturation dome and a fixed-shape Rankine
outline). They must not be read as calculator outputs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np

from thermocalc.core.properties import AIR, GasProperties

# Points per isentropic segment
N_SEGMENT_POINTS = 21

OTTO_COMBUSTION_SCALE = 3.0
BRAYTON_HEAT_ADDITION_SCALE = 2.5

# Parabolic saturation dome for water, T [°C] against s [kJ/(kg·K)]
DOME_T_CRITICAL = 374.0
DOME_S_CRITICAL = 4.5
DOME_CURVATURE = 40.0


@dataclass
class CycleDiagram:
    """Discretised diagram curve.

    ``x``/``y`` hold the cycle path, ``stages`` labels each point.
    ``dome_x``/``dome_y`` hold the saturation dome on T-s diagrams.
    """

    x: np.ndarray
    y: np.ndarray
    stages: list[str]
    x_label: str = ""
    y_label: str = ""
    dome_x: np.ndarray = field(default_factory=lambda: np.array([]))
    dome_y: np.ndarray = field(default_factory=lambda: np.array([]))

    def to_dict(self) -> dict[str, Any]:
        return {
            "x": self.x.tolist(),
            "y": self.y.tolist(),
            "stages": list(self.stages),
            "x_label": self.x_label,
            "y_label": self.y_label,
            "dome_x": self.dome_x.tolist(),
            "dome_y": self.dome_y.tolist(),
        }


class _PathBuilder:
    def __init__(self) -> None:
        self._x: list[float] = []
        self._y: list[float] = []
        self._stages: list[str] = []

    def add(self, x: Any, y: Any, stage: str) -> None:
        x = np.atleast_1d(x)
        y = np.atleast_1d(y)
        self._x.extend(x.tolist())
        self._y.extend(y.tolist())
        self._stages.extend([stage] * len(x))

    def build(self, x_label: str, y_label: str) -> CycleDiagram:
        return CycleDiagram(
            x=np.array(self._x),
            y=np.array(self._y),
            stages=self._stages,
            x_label=x_label,
            y_label=y_label,
        )


def otto_pv_diagram(
    r: float,
    P1: float,
    V1: float = 1.0,
    gas: GasProperties = AIR,
) -> CycleDiagram:
    """P-v diagram of the Otto cycle.

    Args:
        r: Compression ratio.
        P1: Intake pressure [kPa].
        V1: Intake volume [m³], sets the horizontal scale.
        gas: Working-fluid properties.
    """
    g = gas.gamma
    V2 = V1 / r
    P2 = P1 * r**g
    P3 = P2 * OTTO_COMBUSTION_SCALE
    P4 = P3 * (V2 / V1) ** g

    path = _PathBuilder()

    v = np.linspace(V1, V2, N_SEGMENT_POINTS)
    path.add(v, P1 * (V1 / v) ** g, "Compression")

    path.add([V2, V2], [P2, P3], "Combustion")

    v = np.linspace(V2, V1, N_SEGMENT_POINTS)
    path.add(v, P3 * (V2 / v) ** g, "Expansion")

    path.add([V1, V1], [P4, P1], "Exhaust")

    return path.build("Volume [m³]", "Pressure [kPa]")


def brayton_pv_diagram(
    rp: float,
    P1: float,
    V1: float = 1.0,
    gas: GasProperties = AIR,
) -> CycleDiagram:
    """P-v diagram of the Brayton cycle.

    Args:
        rp: Compressor pressure ratio.
        P1: Compressor inlet pressure [kPa].
        V1: Compressor inlet volume [m³], sets the horizontal scale.
        gas: Working-fluid properties.
    """
    g = gas.gamma
    V2 = V1 / rp ** (1.0 / g)
    P2 = P1 * (V1 / V2) ** g
    V3 = V2 * BRAYTON_HEAT_ADDITION_SCALE
    V4 = V3 * (P2 / P1) ** (1.0 / g)

    path = _PathBuilder()

    v = np.linspace(V1, V2, N_SEGMENT_POINTS)
    path.add(v, P1 * (V1 / v) ** g, "Compression")

    path.add([V2, V3], [P2, P2], "Heat Addition")

    v = np.linspace(V3, V4, N_SEGMENT_POINTS)
    path.add(v, P2 * (V3 / v) ** g, "Expansion")

    path.add([V4, V1], [P1, P1], "Heat Rejection")

    return path.build("Volume [m³]", "Pressure [kPa]")


def saturation_dome() -> tuple[np.ndarray, np.ndarray]:
    """Parabolic approximation of the water saturation dome (T > 0 only)."""
    s = np.linspace(0.0, 9.0, 19)
    T = DOME_T_CRITICAL - DOME_CURVATURE * (s - DOME_S_CRITICAL) ** 2
    mask = T > 0
    return s[mask], T[mask]


def rankine_ts_diagram(T3: float) -> CycleDiagram:
    """T-s diagram of the Rankine cycle.

    The outline has a fixed shape; only the turbine inlet temperature
    moves with the inputs.

    Args:
        T3: Turbine inlet temperature [°C].
    """
    outline = [
        (1.5, 45.0, "Condenser Outlet"),
        (1.5, 50.0, "Pump Outlet"),
        (2.5, 250.0, "Saturated Liquid"),
        (5.5, 250.0, "Saturated Vapor"),
        (6.5, T3, "Turbine Inlet"),
        (6.5, 45.0, "Turbine Outlet"),
        (1.5, 45.0, "Condenser Outlet"),
    ]
    path = _PathBuilder()
    for s, T, stage in outline:
        path.add(s, T, stage)

    diagram = path.build("Entropy [kJ/(kg·K)]", "Temperature [°C]")
    diagram.dome_x, diagram.dome_y = saturation_dome()
    return diagram
