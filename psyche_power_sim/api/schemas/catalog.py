"""
Technology catalog schemas for API responses.

This module contains Pydantic models mirroring the read-only catalog
records:
- Concentrators: optical collectors feeding the PV cells
- PV cells: photovoltaic conversion technologies
- Batteries: energy storage chemistries
- Presets: named mission configurations referencing the above by name

All schemas are built from the catalog dataclasses via
``from_attributes`` so routes can return the records directly.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

EraLiteral = Literal["historical", "current", "theoretical"]


class ConcentratorResponse(BaseModel):
    """
    Concentrator technology record.

    Attributes:
        name: Unique catalog name, used to reference the concentrator.
        concentration_ratio: Geometric concentration (informative only).
        efficiency: Optical efficiency (0-1).
        mass_per_m2: Areal mass in kg/m².
        trl: Technology readiness level (1-9).
        era: Technology era.
    """

    model_config = ConfigDict(from_attributes=True)

    name: str
    concentration_ratio: float
    efficiency: float = Field(..., ge=0.0, le=1.0)
    mass_per_m2: float
    trl: int = Field(..., ge=1, le=9)
    era: EraLiteral


class PVCellResponse(BaseModel):
    """
    Photovoltaic cell technology record.

    Attributes:
        name: Unique catalog name.
        efficiency: Beginning-of-life efficiency (0-1).
        temp_coefficient: Fractional efficiency change per Kelvin.
        degradation_rate: Fractional efficiency loss per year.
        mass_per_m2: Areal mass in kg/m².
        trl: Technology readiness level (1-9).
        era: Technology era.
    """

    model_config = ConfigDict(from_attributes=True)

    name: str
    efficiency: float = Field(..., ge=0.0, le=1.0)
    temp_coefficient: float
    degradation_rate: float = Field(..., ge=0.0, le=1.0)
    mass_per_m2: float
    trl: int = Field(..., ge=1, le=9)
    era: EraLiteral


class BatteryResponse(BaseModel):
    """
    Battery technology record.

    Attributes:
        name: Unique catalog name.
        energy_density: Specific energy in Wh/kg.
        cycle_life: Rated cycle life.
        charge_efficiency: Charging efficiency (0-1).
        discharge_efficiency: Discharging efficiency (0-1).
        self_discharge_rate: Self-discharge fraction (metadata only).
        mass_per_wh: Mass per watt-hour in kg/Wh.
        trl: Technology readiness level (1-9).
        era: Technology era.
    """

    model_config = ConfigDict(from_attributes=True)

    name: str
    energy_density: float
    cycle_life: int
    charge_efficiency: float = Field(..., gt=0.0, le=1.0)
    discharge_efficiency: float = Field(..., gt=0.0, le=1.0)
    self_discharge_rate: float
    mass_per_wh: float
    trl: int = Field(..., ge=1, le=9)
    era: EraLiteral


class PresetParametersResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    concentrator_area_m2: float
    pv_area_m2: float
    battery_capacity_wh: float
    base_load_w: float
    duration_hours: float
    years_in_operation: float


class PresetResponse(BaseModel):
    """
    Mission preset.

    Example:
        ```python
        # Element of GET /api/presets
        {
            "id": "no-concentrator",
            "name": "No Concentrator",
            "description": "Direct PV array without concentration optics",
            "concentrator": null,
            "pv_cell": "Quad-junction IMM",
            "battery": "Lithium-ion (NMC)",
            "parameters": {
                "concentrator_area_m2": 0.0,
                "pv_area_m2": 8.0,
                "battery_capacity_wh": 10000.0,
                "base_load_w": 100.0,
                "duration_hours": 48.0,
                "years_in_operation": 0.0
            }
        }
        ```
    """

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: str
    concentrator: Optional[str] = None
    pv_cell: str
    battery: str
    parameters: PresetParametersResponse
