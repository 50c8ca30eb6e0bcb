from __future__ import annotations

from pathlib import Path

import pytest

from psyche_power_sim.application import SimulationApplication
from psyche_power_sim.catalog import CatalogLookupError
from psyche_power_sim.result_builder import ResultBuilder
from psyche_power_sim.simulation import ConfigurationError


def test_run_preset_summary():
    """Preset runs return metrics and series without touching disk."""
    app = SimulationApplication(save_outputs=False)
    summary = app.run_preset("baseline", overrides={"duration_hours": 4.2})

    assert summary["scenario"] == "baseline"
    assert summary["output_dir"] is None
    assert set(summary["series"]) == {
        "time",
        "power_generated",
        "power_consumed",
        "battery_soc",
        "temperature",
    }
    assert len(summary["series"]["time"]) == 42
    assert 0 <= summary["metrics"]["system_health"] <= 5


def test_run_default_scenario():
    summary = SimulationApplication().run_scenario()
    assert summary["scenario"] == "no-concentrator"
    assert summary["metrics"]["viable"] is False
    assert summary["metrics"]["system_health"] == 2


def test_run_scenario_with_outputs(tmp_path: Path, simple_scenario_data: dict):
    app = SimulationApplication(save_outputs=True, result_builder=ResultBuilder(tmp_path))
    summary = app.run_scenario(simple_scenario_data)

    output_dir = Path(summary["output_dir"])
    assert output_dir.parent == tmp_path
    assert output_dir.name.endswith("test_minimal")
    assert (output_dir / "timeseries.csv").exists()


def test_missing_scenario_name_defaults(simple_scenario_data: dict):
    simple_scenario_data.pop("scenario_name")
    summary = SimulationApplication().run_scenario(simple_scenario_data)
    assert summary["scenario"] == "custom_scenario"


def test_errors_propagate(simple_scenario_data: dict):
    app = SimulationApplication()
    with pytest.raises(CatalogLookupError):
        app.run_preset("unknown")
    simple_scenario_data["pv_cell"] = None
    with pytest.raises(ConfigurationError):
        app.run_scenario(simple_scenario_data)
