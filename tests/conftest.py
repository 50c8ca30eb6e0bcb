from __future__ import annotations

import pytest
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from psyche_power_sim.catalog import DEFAULT_CATALOG, TechnologyCatalog  # noqa: E402
from psyche_power_sim.simulation import SimulationConfig  # noqa: E402


@pytest.fixture()
def catalog() -> TechnologyCatalog:
    """Provide the built-in read-only technology catalog."""
    return DEFAULT_CATALOG


@pytest.fixture()
def quad_junction(catalog):
    return catalog.get_pv_cell("Quad-junction IMM")


@pytest.fixture()
def nmc_battery(catalog):
    return catalog.get_battery("Lithium-ion (NMC)")


@pytest.fixture()
def direct_config(quad_junction, nmc_battery) -> SimulationConfig:
    """Direct 8 m² quad-junction array, 10 kWh NMC battery, 100 W base load, 48 h."""
    return SimulationConfig(
        pv_cell=quad_junction,
        battery=nmc_battery,
        concentrator=None,
        concentrator_area_m2=0.0,
        pv_area_m2=8.0,
        battery_capacity_wh=10000.0,
        base_load_w=100.0,
        duration_hours=48.0,
        years_in_operation=0.0,
    )


@pytest.fixture()
def concentrated_config(catalog, nmc_battery) -> SimulationConfig:
    """Baseline mission: Linear Fresnel + triple-junction cells."""
    return SimulationConfig(
        pv_cell=catalog.get_pv_cell("Triple-junction GaAs (3J)"),
        battery=nmc_battery,
        concentrator=catalog.get_concentrator("Linear Fresnel Reflector"),
        concentrator_area_m2=3.0,
        pv_area_m2=1.0,
        battery_capacity_wh=8000.0,
        base_load_w=100.0,
        duration_hours=48.0,
        years_in_operation=0.0,
    )


def _build_simple_scenario_data() -> dict:
    return {
        "scenario_name": "test_minimal",
        "concentrator": "Compound Parabolic Concentrator (CPC)",
        "pv_cell": "Gallium Arsenide (GaAs)",
        "battery": "Lithium-ion (LFP)",
        "concentrator_area_m2": 2.0,
        "pv_area_m2": 0.5,
        "battery_capacity_wh": 6000,
        "base_load_w": 80,
        "duration_hours": 8.4,
        "years_in_operation": 2,
    }


@pytest.fixture()
def simple_scenario_data() -> dict:
    """Return a short two-rotation scenario used to keep tests fast."""
    return _build_simple_scenario_data()
