from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Mapping

from .catalog import DEFAULT_CATALOG, TechnologyCatalog
from .result_builder import ResultBuilder
from .scenario_setup import (
    apply_overrides,
    build_simulation_config,
    load_scenario_data,
    scenario_from_preset,
)
from .simulation import EnvironmentModel, run_simulation

logger = logging.getLogger(__name__)

ScenarioData = Mapping[str, Any] | str | Path | None


class SimulationApplication:
    """
    High-level orchestrator used by the CLI and the FastAPI surface.
    """

    def __init__(
        self,
        *,
        save_outputs: bool = False,
        result_builder: ResultBuilder | None = None,
        catalog: TechnologyCatalog | None = None,
        environment: EnvironmentModel | None = None,
    ) -> None:
        """
        Args:
            save_outputs: When True, ResultBuilder saves CSV/plots/summary.
            result_builder: Optional ResultBuilder for exports.
            catalog: Technology catalog used for name lookups.
            environment: Environment model (defaults to 16 Psyche).
        """
        self.save_outputs = save_outputs
        self.result_builder = result_builder
        self.catalog = catalog or DEFAULT_CATALOG
        self.environment = environment

    def run_scenario(
        self,
        scenario_data: ScenarioData = None,
        *,
        overrides: Mapping[str, Any] | None = None,
    ) -> Dict[str, Any]:
        """
        Execute one simulation for a scenario definition.

        Args:
            scenario_data: Mapping or JSON path describing the scenario, or
                None for the default preset.
            overrides: Optional numeric parameters replacing scenario values
                (None entries are ignored).

        Returns:
            Summary dictionary with scenario name, metrics, series and
            optional output directory.

        Raises:
            ConfigurationError: If the assembled configuration is invalid.
            CatalogLookupError: If a technology name is not in the catalog.
        """
        payload = apply_overrides(load_scenario_data(scenario_data, self.catalog), overrides)
        scenario_name = payload.get("scenario_name", "custom_scenario")
        config = build_simulation_config(payload, self.catalog)

        logger.info("Running scenario '%s'", scenario_name)
        result = run_simulation(config, environment=self.environment)
        result_payload = result.to_dict()

        summary: Dict[str, Any] = {
            "scenario": scenario_name,
            "metrics": result_payload.pop("metrics"),
            "series": result_payload,
        }

        output_dir = None
        if self.save_outputs and self.result_builder:
            output_dir = self.result_builder.build_run(
                scenario_name,
                result=result,
                config=config,
            )

        summary["output_dir"] = str(output_dir) if output_dir else None
        return summary

    def run_preset(
        self,
        preset_id: str,
        *,
        overrides: Mapping[str, Any] | None = None,
    ) -> Dict[str, Any]:
        """
        Execute one simulation starting from a catalog preset.

        Args:
            preset_id: Preset identifier (e.g. ``"baseline"``).
            overrides: Optional parameters replacing preset values.
        """
        preset = self.catalog.get_preset(preset_id)
        return self.run_scenario(scenario_from_preset(preset), overrides=overrides)
