"""
Summary metrics and viability verdict for a completed simulation run.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict

import numpy as np

VIABLE_MIN_SOC = 0.20
HEALTHY_MIN_SOC = 0.40
HEALTHY_FINAL_SOC = 0.70
GENERATION_MARGIN = 1.2


@dataclass(frozen=True)
class SimulationMetrics:
    """
    Reductions over the per-step series of one run.

    Attributes:
        avg_power_generated: Mean generated power (W).
        peak_power_generated: Maximum generated power (W).
        avg_power_consumed: Mean consumed power (W).
        peak_power_consumed: Maximum consumed power (W).
        energy_balance: Σ generated·dt − Σ consumed·dt (Wh), left-rectangle
            integral of the raw bus powers.
        min_soc: Lowest state of charge reached.
        final_soc: State of charge after the last step.
        system_health: Graded score 0-5, one point per criterion met:
            min_soc > 0.20, min_soc > 0.40, energy_balance > 0,
            final_soc > 0.70, avg generated > 1.2 × avg consumed.
        viable: Pass/fail gate, ``min_soc > 0.20 and energy_balance > 0``.

    Notes:
        - energy_balance ignores charge/discharge losses and the SoC clamp,
          both of which shape the SoC series. A run that sits on the SoC
          ceiling or floor for long stretches can show a positive (or
          negative) balance next to a flat SoC curve. The two reductions
          are computed independently and are not reconciled.
    """
    avg_power_generated: float
    peak_power_generated: float
    avg_power_consumed: float
    peak_power_consumed: float
    energy_balance: float
    min_soc: float
    final_soc: float
    system_health: int
    viable: bool

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def health_score(
    *,
    min_soc: float,
    final_soc: float,
    energy_balance: float,
    avg_generated: float,
    avg_consumed: float,
) -> int:
    """
    Count the independent health criteria met by a run (0-5).
    """
    criteria = (
        min_soc > VIABLE_MIN_SOC,
        min_soc > HEALTHY_MIN_SOC,
        energy_balance > 0,
        final_soc > HEALTHY_FINAL_SOC,
        avg_generated > avg_consumed * GENERATION_MARGIN,
    )
    return sum(1 for met in criteria if met)


def evaluate_metrics(
    power_generated: np.ndarray,
    power_consumed: np.ndarray,
    battery_soc: np.ndarray,
    dt_hours: float,
) -> SimulationMetrics:
    """
    Reduce the series of a run into :class:`SimulationMetrics`.

    Args:
        power_generated: Generated power per step (W).
        power_consumed: Consumed power per step (W).
        battery_soc: State of charge after each step (fraction).
        dt_hours: Step length used for the energy integral (hours).

    Returns:
        SimulationMetrics for the run.

    Raises:
        ValueError: If the series are empty or of different lengths.
    """
    power_generated = np.asarray(power_generated, dtype=float)
    power_consumed = np.asarray(power_consumed, dtype=float)
    battery_soc = np.asarray(battery_soc, dtype=float)

    n = power_generated.size
    if n == 0:
        raise ValueError("Cannot evaluate metrics of an empty run.")
    if power_consumed.size != n or battery_soc.size != n:
        raise ValueError("Series must all have the same length.")

    avg_generated = float(power_generated.mean())
    avg_consumed = float(power_consumed.mean())
    energy_generated = float(np.sum(power_generated * dt_hours))
    energy_consumed = float(np.sum(power_consumed * dt_hours))
    energy_balance = energy_generated - energy_consumed

    min_soc = float(battery_soc.min())
    final_soc = float(battery_soc[-1])

    return SimulationMetrics(
        avg_power_generated=avg_generated,
        peak_power_generated=float(power_generated.max()),
        avg_power_consumed=avg_consumed,
        peak_power_consumed=float(power_consumed.max()),
        energy_balance=energy_balance,
        min_soc=min_soc,
        final_soc=final_soc,
        system_health=health_score(
            min_soc=min_soc,
            final_soc=final_soc,
            energy_balance=energy_balance,
            avg_generated=avg_generated,
            avg_consumed=avg_consumed,
        ),
        viable=bool(min_soc > VIABLE_MIN_SOC and energy_balance > 0),
    )
