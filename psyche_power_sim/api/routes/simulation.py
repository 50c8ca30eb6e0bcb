"""
Simulation execution API endpoints.

Endpoints:
- POST /simulations: Run one deterministic simulation from a preset or an
  inline scenario, with optional parameter overrides

The run is synchronous and bounded (duration / 0.1 h steps), so the result
is returned directly in the response body.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from ...application import SimulationApplication
from ...catalog import CatalogLookupError
from ...simulation import ConfigurationError
from .. import dependencies
from ..schemas import simulation as sim_schemas

router = APIRouter(prefix="/api", tags=["simulation"])


@router.post("/simulations", response_model=sim_schemas.SimulationResponse)
def run_simulation(
    payload: sim_schemas.SimulationRequest | None = None,
    app_service: SimulationApplication = Depends(dependencies.get_application_service),
) -> sim_schemas.SimulationResponse:
    """
    Execute a single power system simulation.

    Args:
        payload: Simulation request with a preset id or inline scenario and
            optional numeric overrides. If None, runs the default
            ``no-concentrator`` preset.
        app_service: Simulation application service (dependency injected).

    Returns:
        SimulationResponse containing:
        - scenario: Scenario name or preset id
        - metrics: Averages, peaks, energy balance, SOC extremes, health, viability
        - series: time, power_generated, power_consumed, battery_soc, temperature

    Raises:
        HTTPException 404: If a preset or technology name is not in the catalog
        HTTPException 422: If the configuration is invalid (missing PV cell or
            battery, non-positive capacity, duration shorter than one step)

    Example:
        ```python
        # POST /api/simulations
        {"preset_id": "baseline", "years_in_operation": 10}

        # Response
        {
            "scenario": "baseline",
            "metrics": {
                "avg_power_generated": 145.2,
                "viable": true,
                "system_health": 4,
                ...
            },
            "series": {"time": [0.0, 0.1, ...], ...},
            "output_dir": null
        }
        ```
    """
    payload = payload or sim_schemas.SimulationRequest()
    overrides = payload.overrides()
    try:
        if payload.scenario is not None:
            summary = app_service.run_scenario(payload.scenario, overrides=overrides)
        elif payload.preset_id is not None:
            summary = app_service.run_preset(payload.preset_id, overrides=overrides)
        else:
            summary = app_service.run_scenario(None, overrides=overrides)
    except CatalogLookupError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except ConfigurationError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return sim_schemas.SimulationResponse(**summary)
