"""Tests for calculation export."""

import json

import numpy as np
import pytest

from thermocalc.core.cycles import CycleType, otto_cycle
from thermocalc.core.diagrams import brayton_pv_diagram
from thermocalc.core.export import (
    ModuleType,
    build_export,
    load_export_json,
    save_diagram_json,
    save_export_json,
)
from thermocalc.utils.units import UnitSystem


class TestBuildExport:
    def test_top_level_keys(self):
        data = build_export(UnitSystem.SI, ModuleType.IDEAL_GAS, state={"P1": 100})
        assert data["unitSystem"] == "SI"
        assert data["module"] == "Ideal Gas"
        assert "timestamp" in data
        assert "cycleType" not in data
        assert "result" not in data

    def test_cycle_type_recorded_for_cycles(self):
        data = build_export("IMPERIAL", "Cycles", cycle_type=CycleType.DIESEL)
        assert data["unitSystem"] == "IMPERIAL"
        assert data["cycleType"] == "DIESEL"

    def test_cycle_type_ignored_elsewhere(self):
        data = build_export(UnitSystem.SI, ModuleType.REFRIGERATION, cycle_type="OTTO")
        assert "cycleType" not in data

    def test_unknown_module(self):
        with pytest.raises(ValueError):
            build_export(UnitSystem.SI, "Combustion")


class TestJsonPersistence:
    def test_save_and_load(self, tmp_path):
        result = otto_cycle(8, 300, 100, 800)
        data = build_export(
            UnitSystem.SI,
            ModuleType.CYCLES,
            state={"r": 8, "T1": 300, "P1": 100, "q_in": 800},
            result=result,
            cycle_type=CycleType.OTTO,
        )
        path = tmp_path / "otto.json"
        save_export_json(data, path)

        loaded = load_export_json(path)
        assert loaded["module"] == "Cycles"
        assert loaded["cycleType"] == "OTTO"
        assert loaded["state"]["r"] == 8
        assert loaded["result"]["T2"] == pytest.approx(result.T2)
        assert loaded["result"]["efficiency"] == pytest.approx(result.efficiency)

    def test_numpy_values(self, tmp_path):
        data = build_export(
            UnitSystem.SI,
            ModuleType.CONVECTION,
            result={"Q_dot": np.float64(1875.0), "profile": np.linspace(0, 1, 3)},
        )
        path = tmp_path / "conv.json"
        save_export_json(data, path)

        with open(path) as f:
            raw = json.load(f)
        assert raw["result"]["Q_dot"] == 1875.0
        assert raw["result"]["profile"] == [0.0, 0.5, 1.0]

    def test_load_rejects_foreign_json(self, tmp_path):
        path = tmp_path / "other.json"
        path.write_text(json.dumps({"module": "Cycles"}))
        with pytest.raises(ValueError, match="unitSystem"):
            load_export_json(path)

    def test_diagram(self, tmp_path):
        path = tmp_path / "brayton_pv.json"
        save_diagram_json(brayton_pv_diagram(10, 100), path)
        with open(path) as f:
            raw = json.load(f)
        assert len(raw["x"]) == len(raw["stages"]) == 46

    def test_load_cycles_document_without_state(self, tmp_path):
        """Cycles documents carrying only ``cycleType`` still load."""
        path = tmp_path / "legacy.json"
        path.write_text(json.dumps({
            "unitSystem": "SI",
            "timestamp": "2024-01-01T00:00:00+00:00",
            "module": "Cycles",
            "cycleType": "BRAYTON",
        }))
        loaded = load_export_json(path)
        assert loaded["cycleType"] == "BRAYTON"
        assert "state" not in loaded
