"""Heat transfer modes for ThermoCalc.

Implements 1-D conduction through a composite wall, Newton's law of
cooling, and net Stefan-Boltzmann radiation exchange with surroundings.

Temperatures are in °C throughout; radiation converts to Kelvin
internally. Heat rates are in W (W/m² for a unit area).
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Iterable

from thermocalc.utils.constants import STEFAN_BOLTZMANN, T_CELSIUS_OFFSET


# --- Conduction ---


@dataclass(frozen=True)
class Layer:
    """One slab of a composite wall."""

    thickness: float  # m
    k: float  # W/(m·K), thermal conductivity


@dataclass(frozen=True)
class ConductionResult:
    """Result of a composite-wall conduction calculation."""

    Q_dot: float  # W
    R_total: float  # K/W
    resistances: tuple[float, ...] = field(default_factory=tuple)  # K/W, per layer
    temperatures: tuple[float, ...] = field(default_factory=tuple)  # °C, per node

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def conduction(
    layers: Iterable[Layer | tuple[float, float]],
    T_in: float,
    T_out: float,
    area: float = 1.0,
) -> ConductionResult:
    """Steady 1-D conduction through layers in series.

    Uses a thermal resistance network:

        T_in --[t1/(k1·A)]-- T_1 --[t2/(k2·A)]-- ... -- T_out

    Args:
        layers: Layers ordered from the inside face outwards, as
            :class:`Layer` or ``(thickness, k)`` pairs.
        T_in: Inside surface temperature [°C].
        T_out: Outside surface temperature [°C].
        area: Wall area [m²].

    Returns:
        ConductionResult. ``temperatures`` starts at T_in and has one
        more entry than there are layers.

    Raises:
        ValueError: If no layers are given.
    """
    layers = [lay if isinstance(lay, Layer) else Layer(*lay) for lay in layers]
    if not layers:
        raise ValueError("Conduction requires at least one layer")

    resistances = tuple(lay.thickness / (lay.k * area) for lay in layers)
    R_total = sum(resistances)
    Q_dot = (T_in - T_out) / R_total

    temperatures = [T_in]
    T = T_in
    for R in resistances:
        T -= Q_dot * R
        temperatures.append(T)

    return ConductionResult(
        Q_dot=Q_dot,
        R_total=R_total,
        resistances=resistances,
        temperatures=tuple(temperatures),
    )


# --- Convection ---


def convection(h: float, T_surf: float, T_inf: float, area: float = 1.0) -> float:
    """Convective heat rate [W].

    Q = h · A · (T_surf − T_inf)
    """
    return h * area * (T_surf - T_inf)


# --- Radiation ---


def radiation(
    emissivity: float,
    T_surf: float,
    T_surr: float,
    area: float = 1.0,
) -> float:
    """Net radiative heat rate from a grey surface to large surroundings [W].

    Q = ε · σ · A · (T_surf⁴ − T_surr⁴)

    Args:
        emissivity: Surface emissivity (0–1).
        T_surf: Surface temperature [°C].
        T_surr: Surroundings temperature [°C].
        area: Surface area [m²].
    """
    T_surf_K = T_surf + T_CELSIUS_OFFSET
    T_surr_K = T_surr + T_CELSIUS_OFFSET
    return emissivity * STEFAN_BOLTZMANN * area * (T_surf_K**4 - T_surr_K**4)
