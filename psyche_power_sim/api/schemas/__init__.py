"""
Pydantic schemas for API request/response validation.

This package contains all Pydantic models used by the API, organized by
domain:
- catalog: Concentrator, PV cell, battery and preset records
- simulation: Simulation request/response schemas

All schemas are re-exported from this module.

Example:
    ```python
    # Both import styles work:
    from psyche_power_sim.api.schemas import SimulationResponse
    from psyche_power_sim.api.schemas.simulation import SimulationResponse
    ```
"""

from __future__ import annotations

from .catalog import (
    BatteryResponse,
    ConcentratorResponse,
    PresetParametersResponse,
    PresetResponse,
    PVCellResponse,
)
from .simulation import (
    MetricsResponse,
    SeriesResponse,
    SimulationRequest,
    SimulationResponse,
)

__all__ = [
    # Catalog schemas
    "ConcentratorResponse",
    "PVCellResponse",
    "BatteryResponse",
    "PresetParametersResponse",
    "PresetResponse",
    # Simulation schemas
    "SimulationRequest",
    "SimulationResponse",
    "MetricsResponse",
    "SeriesResponse",
]
