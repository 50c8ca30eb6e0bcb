"""
Core power-system simulation models.

This package collects all components of the 16 Psyche power balance engine:

* Environment model (`environment`): irradiance, sun angle from rotation,
  surface temperature.
* Generation (`generation`) and load (`loads`) models evaluated per step.
* Battery state-of-charge integrator (`battery`).
* Fixed-step driver (`simulator`) and summary metrics (`metrics`).

Higher layers (`application`, FastAPI routes, CLI) import from this single
namespace.
"""

from __future__ import annotations

from .battery import SOC_MAX, SOC_MIN, BatteryIntegrator
from .environment import (
    EnvironmentConstants,
    EnvironmentModel,
    EnvironmentSample,
    sample_environment,
)
from .generation import (
    CONCENTRATOR_DEGRADATION_PER_YEAR,
    Collector,
    ConcentratedPV,
    DirectPV,
    GenerationModel,
    degraded_efficiency,
)
from .loads import LoadFactors, LoadModel
from .metrics import SimulationMetrics, evaluate_metrics, health_score
from .simulator import (
    INITIAL_SOC,
    TIME_STEP_HOURS,
    ConfigurationError,
    PowerSystemSimulator,
    SimulationConfig,
    SimulationResult,
    run_simulation,
    validate_config,
)
from .technologies import BatteryTechnology, ConcentratorTechnology, PVTechnology

__all__ = [
    # Technology records
    "ConcentratorTechnology",
    "PVTechnology",
    "BatteryTechnology",
    # Environment
    "EnvironmentConstants",
    "EnvironmentModel",
    "EnvironmentSample",
    "sample_environment",
    # Generation + load
    "Collector",
    "DirectPV",
    "ConcentratedPV",
    "GenerationModel",
    "degraded_efficiency",
    "CONCENTRATOR_DEGRADATION_PER_YEAR",
    "LoadFactors",
    "LoadModel",
    # Battery
    "BatteryIntegrator",
    "SOC_MIN",
    "SOC_MAX",
    # Driver + metrics
    "SimulationConfig",
    "SimulationResult",
    "SimulationMetrics",
    "PowerSystemSimulator",
    "ConfigurationError",
    "run_simulation",
    "validate_config",
    "evaluate_metrics",
    "health_score",
    "TIME_STEP_HOURS",
    "INITIAL_SOC",
]
