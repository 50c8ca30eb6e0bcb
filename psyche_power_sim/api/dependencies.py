from __future__ import annotations

from functools import lru_cache

from ..application import SimulationApplication
from ..catalog import DEFAULT_CATALOG, TechnologyCatalog


@lru_cache()
def get_catalog() -> TechnologyCatalog:
    """
    Provide the read-only technology catalog for API routes.
    """
    return DEFAULT_CATALOG


def get_application_service() -> SimulationApplication:
    """
    Provide a SimulationApplication configured for API usage.
    """
    # API does not save graphical outputs by default
    return SimulationApplication(
        save_outputs=False,
        result_builder=None,
        catalog=get_catalog(),
    )
