from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

from .catalog import DEFAULT_CATALOG, MissionPreset, TechnologyCatalog
from .simulation import ConfigurationError, SimulationConfig

DEFAULT_PRESET_ID = "no-concentrator"

NUMERIC_KEYS = (
    "concentrator_area_m2",
    "pv_area_m2",
    "battery_capacity_wh",
    "base_load_w",
    "duration_hours",
    "years_in_operation",
)


def scenario_from_preset(preset: MissionPreset) -> dict[str, Any]:
    """
    Express a preset as a JSON-shaped scenario payload.

    Args:
        preset: Mission preset from the catalog.

    Returns:
        Dictionary using the same keys as scenario JSON files.
    """
    params = preset.parameters
    return {
        "scenario_name": preset.id,
        "concentrator": preset.concentrator,
        "pv_cell": preset.pv_cell,
        "battery": preset.battery,
        "concentrator_area_m2": params.concentrator_area_m2,
        "pv_area_m2": params.pv_area_m2,
        "battery_capacity_wh": params.battery_capacity_wh,
        "base_load_w": params.base_load_w,
        "duration_hours": params.duration_hours,
        "years_in_operation": params.years_in_operation,
    }


def load_scenario_data(
    source: str | Path | Mapping[str, Any] | None = None,
    catalog: TechnologyCatalog | None = None,
) -> dict[str, Any]:
    """
    Load scenario data from JSON or return the provided mapping.

    Args:
        source: Path to a JSON file, mapping, or None for the default
            ``no-concentrator`` preset.
        catalog: Catalog used to resolve the default preset.

    Returns:
        Dictionary containing the scenario configuration.
    """
    if source is None:
        catalog = catalog or DEFAULT_CATALOG
        return scenario_from_preset(catalog.get_preset(DEFAULT_PRESET_ID))
    if isinstance(source, (str, Path)):
        path = Path(source)
        return json.loads(path.read_text(encoding="utf-8"))
    return dict(source)


def apply_overrides(
    scenario_data: Mapping[str, Any],
    overrides: Mapping[str, Any] | None,
) -> dict[str, Any]:
    """
    Return a copy of ``scenario_data`` with non-None overrides applied.
    """
    merged = dict(scenario_data)
    for key, value in (overrides or {}).items():
        if value is not None:
            merged[key] = value
    return merged


def build_simulation_config(
    scenario_data: Mapping[str, Any],
    catalog: TechnologyCatalog | None = None,
) -> SimulationConfig:
    """
    Resolve technology names and assemble a :class:`SimulationConfig`.

    Missing ``pv_cell`` or ``battery`` entries are passed through as None so
    that the simulator reports them as configuration errors. Names that are
    present but unknown raise ``CatalogLookupError``.

    Args:
        scenario_data: Scenario payload (see ``scenario_from_preset``).
        catalog: Catalog used for the name lookups.

    Returns:
        SimulationConfig ready for ``run_simulation``.

    Raises:
        CatalogLookupError: If a technology name is not in the catalog.
        ConfigurationError: If a numeric entry cannot be read as a number.
    """
    catalog = catalog or DEFAULT_CATALOG

    concentrator_name = scenario_data.get("concentrator")
    pv_name = scenario_data.get("pv_cell")
    battery_name = scenario_data.get("battery")

    numeric: dict[str, float] = {}
    for key in NUMERIC_KEYS:
        value = scenario_data.get(key)
        if value is None:
            continue
        try:
            numeric[key] = float(value)
        except (TypeError, ValueError):
            raise ConfigurationError(f"Invalid value for {key}: {value!r}") from None

    return SimulationConfig(
        concentrator=catalog.get_concentrator(concentrator_name) if concentrator_name else None,
        pv_cell=catalog.get_pv_cell(pv_name) if pv_name else None,
        battery=catalog.get_battery(battery_name) if battery_name else None,
        **numeric,
    )
