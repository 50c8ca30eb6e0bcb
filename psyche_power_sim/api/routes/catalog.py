"""
Technology catalog API endpoints.

This module exposes the read-only catalog used to assemble simulation
configurations:
- Concentrators
- PV cells
- Batteries
- Mission presets

Entries are referenced by exact name (technologies) or id (presets) in
simulation requests. The catalog is static; there are no write endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from ...catalog import TechnologyCatalog
from .. import dependencies
from ..schemas import catalog as catalog_schemas

router = APIRouter(prefix="/api", tags=["catalog"])


@router.get("/catalog/concentrators", response_model=list[catalog_schemas.ConcentratorResponse])
def list_concentrators(
    catalog: TechnologyCatalog = Depends(dependencies.get_catalog),
) -> list[catalog_schemas.ConcentratorResponse]:
    """
    List all concentrator technologies in catalog order.
    """
    return catalog.concentrators


@router.get("/catalog/pv-cells", response_model=list[catalog_schemas.PVCellResponse])
def list_pv_cells(
    catalog: TechnologyCatalog = Depends(dependencies.get_catalog),
) -> list[catalog_schemas.PVCellResponse]:
    """
    List all photovoltaic cell technologies in catalog order.
    """
    return catalog.pv_cells


@router.get("/catalog/batteries", response_model=list[catalog_schemas.BatteryResponse])
def list_batteries(
    catalog: TechnologyCatalog = Depends(dependencies.get_catalog),
) -> list[catalog_schemas.BatteryResponse]:
    """
    List all battery technologies in catalog order.
    """
    return catalog.batteries


@router.get("/presets", response_model=list[catalog_schemas.PresetResponse])
def list_presets(
    catalog: TechnologyCatalog = Depends(dependencies.get_catalog),
) -> list[catalog_schemas.PresetResponse]:
    """
    List mission presets.

    Returns:
        List of PresetResponse objects. Technology fields hold catalog
        names; ``concentrator`` is null for direct-PV presets.
    """
    return catalog.presets
