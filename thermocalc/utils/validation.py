"""Input validation for ThermoCalc calculators.

The calculators evaluate their formulas as given and never check inputs.
Callers (the CLI, or any other front end) run these validators first on
SI inputs to catch values that would make a formula undefined or the
result physically meaningless.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from thermocalc.core.ideal_gas import GasProcess
from thermocalc.core.refrigeration import H1_OFFSET, H3_OFFSET, H3_SLOPE
from thermocalc.utils.constants import T_CELSIUS_OFFSET


class Severity(Enum):
    """Severity level for validation messages."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class ValidationMessage:
    """A single validation finding."""

    severity: Severity
    parameter: str
    message: str
    value: Any = None
    limit: Any = None


@dataclass
class ValidationResult:
    """Aggregated validation result."""

    messages: list[ValidationMessage] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not any(m.severity == Severity.ERROR for m in self.messages)

    @property
    def has_warnings(self) -> bool:
        return any(m.severity == Severity.WARNING for m in self.messages)

    @property
    def errors(self) -> list[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.WARNING]

    @property
    def infos(self) -> list[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.INFO]

    def add(self, severity: Severity, parameter: str, message: str, **kwargs: Any) -> None:
        self.messages.append(
            ValidationMessage(severity=severity, parameter=parameter, message=message, **kwargs)
        )

    def error(self, parameter: str, message: str, **kwargs: Any) -> None:
        self.add(Severity.ERROR, parameter, message, **kwargs)

    def warning(self, parameter: str, message: str, **kwargs: Any) -> None:
        self.add(Severity.WARNING, parameter, message, **kwargs)

    def info(self, parameter: str, message: str, **kwargs: Any) -> None:
        self.add(Severity.INFO, parameter, message, **kwargs)

    def merge(self, other: ValidationResult) -> None:
        self.messages.extend(other.messages)


# --- Common validators ---


def validate_positive(name: str, value: float, result: ValidationResult) -> None:
    """Validate that a value is strictly positive."""
    if value <= 0:
        result.error(name, f"{name} must be positive, got {value}", value=value, limit=0.0)


def validate_range(
    name: str,
    value: float,
    low: float,
    high: float,
    result: ValidationResult,
    severity: Severity = Severity.ERROR,
) -> None:
    """Validate that a value falls within [low, high]."""
    if value < low or value > high:
        result.add(severity, name, f"{name} = {value} is outside [{low}, {high}]", value=value)


def validate_greater_than(
    name: str, value: float, limit: float, result: ValidationResult
) -> None:
    """Validate that a value is strictly greater than *limit*."""
    if value <= limit:
        result.error(name, f"{name} must be greater than {limit}, got {value}", value=value, limit=limit)


def _validate_celsius(name: str, value: float, result: ValidationResult) -> None:
    if value <= -T_CELSIUS_OFFSET:
        result.error(name, f"{name} = {value} °C is at or below absolute zero", value=value)


def _positive_all(inputs: dict, names: tuple[str, ...], result: ValidationResult) -> None:
    for name in names:
        value = inputs.get(name)
        if value is not None:
            validate_positive(name, value, result)


# --- Per-calculator validators (inputs in SI) ---


def validate_gas_process(inputs: dict) -> ValidationResult:
    """Check ideal-gas process inputs (process, P1, V1, T1, param, n)."""
    result = ValidationResult()
    _positive_all(inputs, ("P1", "V1", "T1", "param"), result)

    process = inputs.get("process")
    if process is not None:
        try:
            process = GasProcess(process)
        except ValueError:
            result.error("process", f"Unknown process {process!r}")
            return result
        n = inputs.get("n")
        if process is GasProcess.POLYTROPIC and n is not None and n == 1.0:
            result.error("n", "Polytropic index n = 1 is the isothermal case; use ISOTHERMAL")
    return result


def validate_otto(inputs: dict) -> ValidationResult:
    """Check Otto cycle inputs (r, T1, P1, q_in)."""
    result = ValidationResult()
    _positive_all(inputs, ("T1", "P1"), result)
    r = inputs.get("r")
    if r is not None:
        validate_greater_than("r", r, 1.0, result)
        validate_range("r", r, 4.0, 14.0, result, Severity.WARNING)
    q_in = inputs.get("q_in")
    if q_in is not None and q_in < 0:
        result.warning("q_in", "Negative heat addition gives a cycle that absorbs work")
    return result


def validate_diesel(inputs: dict) -> ValidationResult:
    """Check Diesel cycle inputs (r, rc, T1, P1)."""
    result = ValidationResult()
    _positive_all(inputs, ("T1", "P1"), result)
    r = inputs.get("r")
    rc = inputs.get("rc")
    if r is not None:
        validate_greater_than("r", r, 1.0, result)
        if not 12.0 <= r <= 24.0:
            result.info("r", f"Compression ratio {r} is outside the usual Diesel range [12, 24]", value=r)
    if rc is not None:
        validate_greater_than("rc", rc, 1.0, result)
    if r is not None and rc is not None and rc >= r:
        result.error("rc", f"Cut-off ratio {rc} must be below compression ratio {r}")
    return result


def validate_brayton(inputs: dict) -> ValidationResult:
    """Check Brayton cycle inputs (rp, T1, T3, P1)."""
    result = ValidationResult()
    _positive_all(inputs, ("T1", "T3", "P1"), result)
    rp = inputs.get("rp")
    if rp is not None:
        validate_greater_than("rp", rp, 1.0, result)
    T1, T3 = inputs.get("T1"), inputs.get("T3")
    if T1 is not None and T3 is not None and T3 <= T1:
        result.error("T3", "Turbine inlet temperature must exceed compressor inlet temperature")
    return result


def validate_rankine(inputs: dict) -> ValidationResult:
    """Check Rankine cycle inputs (T3 [°C], P3, P1, w_pump, q_in, m_dot)."""
    result = ValidationResult()
    _positive_all(inputs, ("P3", "P1", "q_in", "m_dot"), result)
    T3 = inputs.get("T3")
    if T3 is not None:
        _validate_celsius("T3", T3, result)
    P1, P3 = inputs.get("P1"), inputs.get("P3")
    if P1 is not None and P3 is not None and P1 >= P3:
        result.error("P1", "Condenser pressure must be below boiler pressure")
    w_pump = inputs.get("w_pump")
    if w_pump is not None and w_pump < 0:
        result.warning("w_pump", "Negative pump work")
    return result


def validate_heat_exchanger(inputs: dict) -> ValidationResult:
    """Check heat exchanger inputs (mh, cph, Th_in, Th_out, mc, cpc, Tc_in, UA)."""
    result = ValidationResult()
    _positive_all(inputs, ("mh", "cph", "mc", "cpc", "UA"), result)
    Th_in, Th_out, Tc_in = inputs.get("Th_in"), inputs.get("Th_out"), inputs.get("Tc_in")
    if Th_in is not None and Th_out is not None and Th_out > Th_in:
        result.warning("Th_out", "Hot outlet is hotter than hot inlet (hot stream is heated)")
    if Th_out is not None and Tc_in is not None and Th_out <= Tc_in:
        result.error("Th_out", "Hot outlet must be above cold inlet for a finite LMTD")
    if Th_in is not None and Tc_in is not None and Th_in <= Tc_in:
        result.error("Th_in", "Hot inlet must be above cold inlet")

    mh, cph, mc, cpc = (inputs.get(k) for k in ("mh", "cph", "mc", "cpc"))
    if None not in (mh, cph, mc, cpc, Th_in, Th_out, Tc_in) and mc * cpc > 0:
        Tc_out = Tc_in + mh * cph * (Th_in - Th_out) / (mc * cpc)
        if Th_in - Tc_out <= 0:
            result.error(
                "Tc_out",
                f"Cold outlet {Tc_out:.4g} °C reaches the hot inlet (temperature cross, LMTD undefined)",
                value=Tc_out,
                limit=Th_in,
            )
    return result


def validate_refrigeration(inputs: dict) -> ValidationResult:
    """Check refrigeration inputs (T_evap, T_cond, m_dot)."""
    result = ValidationResult()
    _positive_all(inputs, ("m_dot",), result)
    T_evap, T_cond = inputs.get("T_evap"), inputs.get("T_cond")
    for name, value in (("T_evap", T_evap), ("T_cond", T_cond)):
        if value is not None:
            _validate_celsius(name, value, result)
    if T_evap is not None and T_cond is not None and T_cond <= T_evap:
        result.warning("T_cond", "Condenser temperature should exceed evaporator temperature")
    if T_evap is not None and T_cond is not None:
        h1 = H1_OFFSET + T_evap
        h3 = H3_OFFSET + H3_SLOPE * T_cond
        if h1 - h3 <= 0:
            result.error(
                "T_cond",
                "Evaporator enthalpy does not exceed condenser enthalpy (no compressor work, COP undefined)",
            )
    return result


def validate_conduction(inputs: dict) -> ValidationResult:
    """Check conduction inputs (layers, T_in, T_out, area)."""
    result = ValidationResult()
    _positive_all(inputs, ("area",), result)
    layers = inputs.get("layers")
    if layers is not None:
        if not layers:
            result.error("layers", "At least one layer is required")
        for i, (thickness, k) in enumerate(layers):
            validate_positive(f"layers[{i}].thickness", thickness, result)
            validate_positive(f"layers[{i}].k", k, result)
    return result


def validate_convection(inputs: dict) -> ValidationResult:
    """Check convection inputs (h, T_surf, T_inf, area)."""
    result = ValidationResult()
    _positive_all(inputs, ("h", "area"), result)
    return result


def validate_radiation(inputs: dict) -> ValidationResult:
    """Check radiation inputs (emissivity, T_surf [°C], T_surr [°C], area)."""
    result = ValidationResult()
    _positive_all(inputs, ("area",), result)
    eps = inputs.get("emissivity")
    if eps is not None:
        validate_range("emissivity", eps, 0.0, 1.0, result)
    for name in ("T_surf", "T_surr"):
        value = inputs.get(name)
        if value is not None:
            _validate_celsius(name, value, result)
    return result


def validate_feasibility(inputs: dict) -> ValidationResult:
    """Check second-law inputs (P1, T1, P2, T2, Q, T_surr)."""
    result = ValidationResult()
    _positive_all(inputs, ("P1", "T1", "P2", "T2", "T_surr"), result)
    return result
