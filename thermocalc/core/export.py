"""Calculation export for ThermoCalc.

Serialises one calculation (unit system, module, raw inputs and result)
to a JSON document with the layout::

    {
      "unitSystem": "SI",
      "timestamp": "2024-01-01T00:00:00+00:00",
      "module": "Cycles",
      "cycleType": "OTTO",          # cycles module only
      "state": {...},               # raw inputs, in the active unit system
      "result": {...}
    }

The cycles module records its inputs and result alongside ``cycleType``.
Older ThermoCalc front ends wrote only ``cycleType`` for that module, so
readers must treat ``state`` and ``result`` as optional there.
"""

from __future__ import annotations

import dataclasses
import json
import logging
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any

import numpy as np

from thermocalc.core.cycles import CycleType
from thermocalc.utils.units import UnitSystem

logger = logging.getLogger(__name__)


class ModuleType(Enum):
    """Calculator module, valued by its export name."""

    IDEAL_GAS = "Ideal Gas"
    CYCLES = "Cycles"
    HEAT_EXCHANGER = "Heat Exchanger"
    REFRIGERATION = "Refrigeration"
    CONDUCTION = "Conduction"
    CONVECTION = "Convection"
    RADIATION = "Radiation"
    VALIDATION = "Validation"


# --- JSON serialization ---


class _ResultEncoder(json.JSONEncoder):
    """JSON encoder that handles result records, enums and numpy types."""

    def default(self, obj: Any) -> Any:
        if hasattr(obj, "to_dict"):
            return obj.to_dict()
        if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
            return dataclasses.asdict(obj)
        if isinstance(obj, Enum):
            return obj.value
        if isinstance(obj, np.ndarray):
            return obj.tolist()
        if isinstance(obj, (np.integer,)):
            return int(obj)
        if isinstance(obj, (np.floating,)):
            return float(obj)
        return super().default(obj)


def build_export(
    unit_system: UnitSystem | str,
    module: ModuleType | str,
    state: dict[str, Any] | None = None,
    result: Any = None,
    cycle_type: CycleType | str | None = None,
) -> dict[str, Any]:
    """Assemble the export document for one calculation.

    Args:
        unit_system: Unit system the inputs were entered in.
        module: Calculator module (member, or its export name).
        state: Raw user inputs.
        result: Result record or plain mapping.
        cycle_type: Active cycle; only recorded for the cycles module.

    Returns:
        Export document as a plain dictionary.
    """
    module = ModuleType(module)
    data: dict[str, Any] = {
        "unitSystem": UnitSystem(unit_system).value,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "module": module.value,
    }
    if module is ModuleType.CYCLES and cycle_type is not None:
        data["cycleType"] = CycleType(cycle_type).value
    if state is not None:
        data["state"] = state
    if result is not None:
        data["result"] = result
    return data


def save_export_json(data: dict[str, Any], path: str | Path) -> None:
    """Write an export document to a JSON file."""
    path = Path(path)
    with open(path, "w") as f:
        json.dump(data, f, indent=2, cls=_ResultEncoder)
    logger.info("Saved %s export to %s", data.get("module", "calculation"), path)


def load_export_json(path: str | Path) -> dict[str, Any]:
    """Read an export document back as plain JSON data.

    Raises:
        ValueError: If a required top-level key is missing.
    """
    path = Path(path)
    with open(path) as f:
        data = json.load(f)

    missing = [k for k in ("unitSystem", "timestamp", "module") if k not in data]
    if missing:
        raise ValueError(f"{path} is not a ThermoCalc export (missing {', '.join(missing)})")
    return data


def save_diagram_json(diagram: Any, path: str | Path) -> None:
    """Write cycle diagram plot data to a JSON file."""
    path = Path(path)
    with open(path, "w") as f:
        json.dump(diagram, f, indent=2, cls=_ResultEncoder)
    logger.info("Saved diagram data to %s", path)
