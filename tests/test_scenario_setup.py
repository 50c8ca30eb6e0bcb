from __future__ import annotations

import json

import pytest

from psyche_power_sim.catalog import CatalogLookupError
from psyche_power_sim.scenario_setup import (
    apply_overrides,
    build_simulation_config,
    load_scenario_data,
    scenario_from_preset,
)
from psyche_power_sim.simulation import ConfigurationError, run_simulation


def test_default_scenario_is_no_concentrator_preset(catalog):
    data = load_scenario_data()
    assert data == scenario_from_preset(catalog.get_preset("no-concentrator"))
    assert data["scenario_name"] == "no-concentrator"
    assert data["concentrator"] is None


def test_load_scenario_from_json(tmp_path, simple_scenario_data):
    """Scenario files use the same keys as preset payloads."""
    path = tmp_path / "scenario.json"
    path.write_text(json.dumps(simple_scenario_data), encoding="utf-8")
    assert load_scenario_data(path) == simple_scenario_data
    assert load_scenario_data(str(path)) == simple_scenario_data


def test_mapping_is_copied(simple_scenario_data):
    data = load_scenario_data(simple_scenario_data)
    data["base_load_w"] = 1
    assert simple_scenario_data["base_load_w"] == 80


def test_apply_overrides_skips_none(simple_scenario_data):
    merged = apply_overrides(simple_scenario_data, {"duration_hours": 4.2, "pv_area_m2": None})
    assert merged["duration_hours"] == 4.2
    assert merged["pv_area_m2"] == 0.5
    assert simple_scenario_data["duration_hours"] == 8.4


def test_build_simulation_config(simple_scenario_data):
    config = build_simulation_config(simple_scenario_data)
    assert config.concentrator.name == "Compound Parabolic Concentrator (CPC)"
    assert config.pv_cell.name == "Gallium Arsenide (GaAs)"
    assert config.battery.name == "Lithium-ion (LFP)"
    assert config.battery_capacity_wh == 6000.0
    assert isinstance(config.base_load_w, float)
    assert config.n_steps == 84


def test_missing_battery_surfaces_as_configuration_error(simple_scenario_data):
    simple_scenario_data.pop("battery")
    config = build_simulation_config(simple_scenario_data)
    assert config.battery is None
    with pytest.raises(ConfigurationError):
        run_simulation(config)


def test_unknown_name_raises_lookup_error(simple_scenario_data):
    simple_scenario_data["pv_cell"] = "Unobtainium"
    with pytest.raises(CatalogLookupError):
        build_simulation_config(simple_scenario_data)


@pytest.mark.parametrize("value", ["eight", [8.0], {"m2": 8}])
def test_non_numeric_value_is_configuration_error(simple_scenario_data, value):
    simple_scenario_data["pv_area_m2"] = value
    with pytest.raises(ConfigurationError, match="Invalid value for pv_area_m2"):
        build_simulation_config(simple_scenario_data)


def test_numeric_strings_are_accepted(simple_scenario_data):
    simple_scenario_data["battery_capacity_wh"] = "7500"
    assert build_simulation_config(simple_scenario_data).battery_capacity_wh == 7500.0
