from .catalog import (
    BATTERIES,
    CONCENTRATORS,
    DEFAULT_CATALOG,
    PRESETS,
    PV_CELLS,
    CatalogLookupError,
    MissionPreset,
    PresetParameters,
    TechnologyCatalog,
)
from .simulation.battery import BatteryIntegrator
from .simulation.environment import EnvironmentConstants, EnvironmentModel
from .simulation.generation import ConcentratedPV, DirectPV, GenerationModel
from .simulation.loads import LoadFactors, LoadModel
from .simulation.metrics import SimulationMetrics, evaluate_metrics
from .simulation.simulator import (
    ConfigurationError,
    PowerSystemSimulator,
    SimulationConfig,
    SimulationResult,
    run_simulation,
)
from .simulation.technologies import BatteryTechnology, ConcentratorTechnology, PVTechnology
from .scenario_setup import build_simulation_config, load_scenario_data, scenario_from_preset
from .result_builder import ResultBuilder
from .application import SimulationApplication

__all__ = [
    "BATTERIES",
    "CONCENTRATORS",
    "PV_CELLS",
    "PRESETS",
    "DEFAULT_CATALOG",
    "CatalogLookupError",
    "MissionPreset",
    "PresetParameters",
    "TechnologyCatalog",
    "BatteryTechnology",
    "ConcentratorTechnology",
    "PVTechnology",
    "EnvironmentConstants",
    "EnvironmentModel",
    "DirectPV",
    "ConcentratedPV",
    "GenerationModel",
    "LoadFactors",
    "LoadModel",
    "BatteryIntegrator",
    "SimulationMetrics",
    "evaluate_metrics",
    "ConfigurationError",
    "PowerSystemSimulator",
    "SimulationConfig",
    "SimulationResult",
    "run_simulation",
    "build_simulation_config",
    "load_scenario_data",
    "scenario_from_preset",
    "ResultBuilder",
    "SimulationApplication",
]
