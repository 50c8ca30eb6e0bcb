"""
Fixed-step simulation driver.

Holds :class:`SimulationConfig`, the pre-run validation that raises
:class:`ConfigurationError`, and :class:`PowerSystemSimulator`, which steps
the environment, generation, load and battery models over the run and
packs the series with their metrics into a :class:`SimulationResult`.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, Optional

import numpy as np
import pandas as pd

from .battery import BatteryIntegrator
from .environment import EnvironmentModel, sample_environment
from .generation import Collector, ConcentratedPV, DirectPV, GenerationModel
from .loads import LoadModel
from .metrics import SimulationMetrics, evaluate_metrics
from .technologies import BatteryTechnology, ConcentratorTechnology, PVTechnology

logger = logging.getLogger(__name__)

TIME_STEP_HOURS = 0.1
INITIAL_SOC = 0.80


class ConfigurationError(ValueError):
    """Raised before the time loop when a run cannot be configured."""


@dataclass(frozen=True)
class SimulationConfig:
    """
    Hardware and mission parameters for one simulation run.

    Attributes:
        pv_cell: PV cell technology (mandatory).
        battery: Battery technology (mandatory).
        concentrator: Concentrator technology, or None for a direct array.
        concentrator_area_m2: Concentrator aperture area (m²).
        pv_area_m2: PV array area (m²).
        battery_capacity_wh: Installed battery capacity (Wh).
        base_load_w: Always-on spacecraft load (W).
        duration_hours: Simulated time span (hours).
        years_in_operation: Mission age used for degradation (years).
    """
    pv_cell: Optional[PVTechnology]
    battery: Optional[BatteryTechnology]
    concentrator: Optional[ConcentratorTechnology] = None
    concentrator_area_m2: float = 0.0
    pv_area_m2: float = 1.0
    battery_capacity_wh: float = 8000.0
    base_load_w: float = 100.0
    duration_hours: float = 48.0
    years_in_operation: float = 0.0

    def collector(self) -> Collector:
        if self.concentrator is None:
            return DirectPV()
        return ConcentratedPV(self.concentrator, self.concentrator_area_m2)

    @property
    def n_steps(self) -> int:
        return int(math.floor(self.duration_hours / TIME_STEP_HOURS))


@dataclass(frozen=True)
class SimulationResult:
    """
    Per-step series and summary metrics of a completed run.

    All series are read-only numpy arrays of identical length (one entry
    per time step). ``battery_soc[i]`` is the state of charge after step
    ``i`` has been applied.
    """
    time: np.ndarray
    power_generated: np.ndarray
    power_consumed: np.ndarray
    battery_soc: np.ndarray
    temperature: np.ndarray
    metrics: SimulationMetrics

    @property
    def n_steps(self) -> int:
        return int(self.time.size)

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame(
            {
                "time_h": self.time,
                "power_generated_w": self.power_generated,
                "power_consumed_w": self.power_consumed,
                "battery_soc": self.battery_soc,
                "temperature_k": self.temperature,
            }
        )

    def to_dict(self) -> Dict[str, Any]:
        """
        JSON-ready representation (plain lists and the metrics mapping).
        """
        return {
            "time": self.time.tolist(),
            "power_generated": self.power_generated.tolist(),
            "power_consumed": self.power_consumed.tolist(),
            "battery_soc": self.battery_soc.tolist(),
            "temperature": self.temperature.tolist(),
            "metrics": self.metrics.to_dict(),
        }


def validate_config(config: SimulationConfig) -> None:
    """
    Check the preconditions of a run.

    Raises:
        ConfigurationError: If the PV cell or battery is missing, an area is
            negative, the battery capacity is not strictly positive, or the
            duration is shorter than one time step.
    """
    if config.pv_cell is None:
        raise ConfigurationError("Cannot run simulation without photovoltaic cells")
    if config.battery is None:
        raise ConfigurationError("Cannot run simulation without battery")
    for field_name in ("pv_area_m2", "concentrator_area_m2"):
        area = getattr(config, field_name)
        if not area >= 0:
            raise ConfigurationError(f"{field_name} must not be negative, got {area}")
    if not config.battery_capacity_wh > 0:
        raise ConfigurationError(
            f"Battery capacity must be positive, got {config.battery_capacity_wh} Wh"
        )
    if config.n_steps < 1:
        raise ConfigurationError(
            f"Duration must cover at least one {TIME_STEP_HOURS} h step, "
            f"got {config.duration_hours} h"
        )


class PowerSystemSimulator:
    """
    Fixed-step time-domain simulation of the spacecraft power system.

    Each step evaluates the environment once, feeds it independently to the
    generation and load models, and advances the battery with the net
    power. The loop always runs its full length; reaching the SoC floor is
    recorded, not a stop condition. No state survives between calls to
    :meth:`run`.
    """

    def __init__(
        self,
        config: SimulationConfig,
        environment: EnvironmentModel | None = None,
    ) -> None:
        validate_config(config)
        self.config = config
        self.environment = environment or EnvironmentModel()

        self.generation = GenerationModel(
            environment=self.environment,
            collector=config.collector(),
            pv_cell=config.pv_cell,
            pv_area_m2=config.pv_area_m2,
            years_in_operation=config.years_in_operation,
        )
        self.load = LoadModel(self.environment, config.base_load_w)
        self.battery = BatteryIntegrator.from_technology(
            config.battery,
            capacity_wh=config.battery_capacity_wh,
            dt_hours=TIME_STEP_HOURS,
        )

    def run(self) -> SimulationResult:
        """
        Execute the time loop and reduce the series into metrics.

        Returns:
            SimulationResult with time, generated/consumed power, SoC and
            surface temperature series plus the summary metrics.
        """
        cfg = self.config
        n_steps = cfg.n_steps
        logger.debug(
            "Simulating %d steps: pv=%s battery=%s concentrator=%s years=%s",
            n_steps,
            cfg.pv_cell.name,
            cfg.battery.name,
            cfg.concentrator.name if cfg.concentrator else None,
            cfg.years_in_operation,
        )

        time = np.zeros(n_steps)
        power_generated = np.zeros(n_steps)
        power_consumed = np.zeros(n_steps)
        battery_soc = np.zeros(n_steps)
        temperature = np.zeros(n_steps)

        soc = INITIAL_SOC
        for step in range(n_steps):
            t = step * TIME_STEP_HOURS
            sample = sample_environment(self.environment, t)

            p_gen = self.generation.power_from_sample(sample)
            p_load = self.load.power_from_sample(sample)
            soc = self.battery.step(soc, p_gen - p_load)

            time[step] = t
            power_generated[step] = p_gen
            power_consumed[step] = p_load
            battery_soc[step] = soc
            temperature[step] = sample.surface_temp_k

        for series in (time, power_generated, power_consumed, battery_soc, temperature):
            series.flags.writeable = False

        metrics = evaluate_metrics(
            power_generated,
            power_consumed,
            battery_soc,
            dt_hours=TIME_STEP_HOURS,
        )
        if metrics.min_soc <= self.battery.soc_min:
            logger.warning(
                "Battery reached the %.0f%% SoC floor during the run",
                self.battery.soc_min * 100,
            )
        logger.info(
            "Simulation finished: viable=%s health=%d/5 energy_balance=%.1f Wh",
            metrics.viable,
            metrics.system_health,
            metrics.energy_balance,
        )

        return SimulationResult(
            time=time,
            power_generated=power_generated,
            power_consumed=power_consumed,
            battery_soc=battery_soc,
            temperature=temperature,
            metrics=metrics,
        )


def run_simulation(
    config: SimulationConfig,
    environment: EnvironmentModel | None = None,
) -> SimulationResult:
    """
    Run one simulation from configuration to result.

    Args:
        config: Hardware and mission parameters.
        environment: Optional environment model (defaults to 16 Psyche).

    Returns:
        SimulationResult of the run.

    Raises:
        ConfigurationError: If the configuration fails validation.
    """
    return PowerSystemSimulator(config, environment=environment).run()
