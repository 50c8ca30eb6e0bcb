"""
API route modules for the simulator.

This package organizes FastAPI route handlers by domain:
- catalog: Read-only technology catalog and mission presets
- simulation: Simulation execution

All routers are prefixed with /api when included in the main application.
"""

from __future__ import annotations

from .catalog import router as catalog_router
from .simulation import router as simulation_router

__all__ = [
    "catalog_router",
    "simulation_router",
]
