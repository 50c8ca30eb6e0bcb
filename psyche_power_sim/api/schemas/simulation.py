"""
Simulation execution schemas for API validation.

This module contains Pydantic models for the simulation endpoint:
- SimulationRequest: preset or inline scenario plus parameter overrides
- SimulationResponse: per-step series and summary metrics of the run
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, model_validator


class SimulationRequest(BaseModel):
    """
    Request schema for a single simulation run.

    Exactly one source can be provided: ``preset_id`` (a catalog preset) or
    ``scenario`` (an inline scenario payload). With neither, the default
    ``no-concentrator`` preset is used. Numeric fields, when set, override
    the corresponding values of the selected source.

    Attributes:
        preset_id: Catalog preset identifier (e.g. ``"baseline"``).
        scenario: Inline scenario using the keys of scenario JSON files:
            ``scenario_name``, ``concentrator``, ``pv_cell``, ``battery``,
            ``concentrator_area_m2``, ``pv_area_m2``, ``battery_capacity_wh``,
            ``base_load_w``, ``duration_hours``, ``years_in_operation``.
        concentrator_area_m2: Override for the concentrator area.
        pv_area_m2: Override for the PV area.
        battery_capacity_wh: Override for the battery capacity.
        base_load_w: Override for the base load.
        duration_hours: Override for the simulated duration. The UI suggests
            multiples of the 4.2 h rotation period; any value is accepted.
        years_in_operation: Override for the mission age.

    Example:
        ```python
        # POST /api/simulations
        {
            "preset_id": "baseline",
            "duration_hours": 96.6,
            "years_in_operation": 5
        }

        # POST /api/simulations
        {
            "scenario": {
                "scenario_name": "direct_array",
                "concentrator": null,
                "pv_cell": "Quad-junction IMM",
                "battery": "Lithium-ion (NMC)",
                "pv_area_m2": 8.0,
                "battery_capacity_wh": 10000,
                "base_load_w": 100,
                "duration_hours": 48,
                "years_in_operation": 0
            }
        }
        ```
    """

    preset_id: Optional[str] = Field(default=None, description="Catalog preset identifier")
    scenario: Optional[Dict[str, Any]] = Field(
        default=None,
        description="Inline scenario configuration (JSON)",
    )
    concentrator_area_m2: Optional[float] = Field(default=None, ge=0.0)
    pv_area_m2: Optional[float] = Field(default=None, ge=0.0)
    battery_capacity_wh: Optional[float] = Field(default=None, gt=0.0)
    base_load_w: Optional[float] = Field(default=None, ge=0.0)
    duration_hours: Optional[float] = Field(default=None, gt=0.0)
    years_in_operation: Optional[float] = Field(default=None, ge=0.0)

    @model_validator(mode="after")
    def check_single_source(self) -> "SimulationRequest":
        if self.preset_id is not None and self.scenario is not None:
            raise ValueError("Provide either 'preset_id' or 'scenario', not both.")
        return self

    def overrides(self) -> Dict[str, Optional[float]]:
        return self.model_dump(exclude={"preset_id", "scenario"})


class MetricsResponse(BaseModel):
    """
    Summary metrics of a run.

    Notes:
        - energy_balance is computed from raw bus powers and is not
          reconciled with the SOC trajectory (no efficiencies, no clamp)
        - viable is the pass/fail gate; system_health is the graded score
    """

    avg_power_generated: float
    peak_power_generated: float
    avg_power_consumed: float
    peak_power_consumed: float
    energy_balance: float = Field(..., description="Energy balance over the run (Wh)")
    min_soc: float = Field(..., ge=0.0, le=1.0)
    final_soc: float = Field(..., ge=0.0, le=1.0)
    system_health: int = Field(..., ge=0, le=5)
    viable: bool


class SeriesResponse(BaseModel):
    time: List[float]
    power_generated: List[float]
    power_consumed: List[float]
    battery_soc: List[float]
    temperature: List[float]


class SimulationResponse(BaseModel):
    """
    Response schema for a completed simulation.

    Attributes:
        scenario: Scenario name (preset id for preset runs).
        metrics: Summary metrics and viability verdict.
        series: Parallel per-step series, one entry per 0.1 h step.
        output_dir: Directory of saved exports, when enabled.
    """

    scenario: str
    metrics: MetricsResponse
    series: SeriesResponse
    output_dir: Optional[str] = None
