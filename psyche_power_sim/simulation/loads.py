"""
Spacecraft electrical load model.

Consumption is built from a base load plus three additive contributions
that switch on independently: science instruments during the day, heaters
during the night, and a periodic communication window.
"""

from __future__ import annotations

from dataclasses import dataclass

from .environment import EnvironmentModel, EnvironmentSample, sample_environment


@dataclass(frozen=True)
class LoadFactors:
    """
    Load contributions as multiples of the base load.

    Attributes:
        science: Instrument load while the surface is illuminated.
        heater: Heater load while the surface is dark.
        comms: Transmitter load during a communication window.
        comms_period_hours: Interval between window starts (hours).
        comms_window_hours: Length of each window (hours).
    """
    science: float = 1.5
    heater: float = 1.0
    comms: float = 0.8
    comms_period_hours: float = 6.0
    comms_window_hours: float = 0.5


class LoadModel:
    """
    Instantaneous power consumption (W), always at least the base load.

    Instruments and heaters are mutually exclusive (day vs. night). The
    communication window recurs on simulated time alone, independent of the
    rotation phase, so it overlaps either of them.
    """

    def __init__(
        self,
        environment: EnvironmentModel,
        base_load_w: float,
        factors: LoadFactors | None = None,
    ) -> None:
        self.environment = environment
        self.base_load_w = base_load_w
        self.factors = factors or LoadFactors()

    def in_comms_window(self, time_hours: float) -> bool:
        f = self.factors
        return time_hours % f.comms_period_hours < f.comms_window_hours

    def power_from_sample(self, sample: EnvironmentSample) -> float:
        f = self.factors
        base = self.base_load_w
        total = base
        if sample.illumination > 0.0:
            total += base * f.science
        if self.in_comms_window(sample.time_hours):
            total += base * f.comms
        if sample.illumination <= 0.0:
            total += base * f.heater
        return total

    def power_w(self, time_hours: float) -> float:
        return self.power_from_sample(sample_environment(self.environment, time_hours))
