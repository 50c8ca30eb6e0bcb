"""
Photovoltaic generation model with optional concentrator optics.

The collector stage is an explicit two-variant type: :class:`DirectPV`
(panels exposed directly to the Sun) or :class:`ConcentratedPV` (a
concentrator delivering its optical output to the cells). The
:class:`GenerationModel` consumes either variant together with the PV cell
parameters and returns instantaneous electrical power.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .environment import EnvironmentModel, EnvironmentSample, sample_environment
from .technologies import ConcentratorTechnology, PVTechnology

CONCENTRATOR_DEGRADATION_PER_YEAR = 0.001
MIN_TEMPERATURE_FACTOR = 0.1


@dataclass(frozen=True)
class DirectPV:
    """Collector stage for a bare PV array (no optics)."""


@dataclass(frozen=True)
class ConcentratedPV:
    """
    Collector stage for a concentrator feeding the PV cells.

    Attributes:
        concentrator: Concentrator technology record.
        area_m2: Concentrator aperture area (m²).
    """
    concentrator: ConcentratorTechnology
    area_m2: float


Collector = Union[DirectPV, ConcentratedPV]


def degraded_efficiency(efficiency: float, rate_per_year: float, years: float) -> float:
    """
    Compound an annual fractional loss over ``years``.

    Returns:
        ``efficiency * (1 - rate_per_year) ** years``.
    """
    return efficiency * (1.0 - rate_per_year) ** years


class GenerationModel:
    """
    Instantaneous electrical output of the solar array.

    Degradation is a slow yearly process, so it is applied once when the
    model is built: the PV efficiency is discounted by the cell's own
    degradation rate and the concentrator efficiency by a fixed 0.1 %/year.
    The per-step path only applies illumination and temperature derating.

    Model:
        incident (direct)       = G × A_pv × f_illum
        incident (concentrated) = G × A_conc × η_conc × f_illum
        P = incident × η_pv × max(0.1, 1 + k_T × (T_surface − T_ref))

    where G is the irradiance at the mission distance and f_illum the
    illumination factor. The mount is assumed sun-tracking: f_illum only
    models the day/night cutoff. The concentration ratio is never applied
    as an extra multiplier; the concentrator efficiency already captures
    its optical throughput.

    Attributes:
        environment: Environment model supplying irradiance and angles.
        collector: DirectPV or ConcentratedPV stage.
        pv_cell: PV technology record.
        pv_area_m2: PV array area (m²), used by the direct branch.
        years_in_operation: Mission age used for degradation.
        pv_efficiency: Degradation-adjusted PV efficiency.
        concentrator_efficiency: Degradation-adjusted optical efficiency
            (0.0 for a direct array).
    """

    def __init__(
        self,
        environment: EnvironmentModel,
        collector: Collector,
        pv_cell: PVTechnology,
        pv_area_m2: float,
        years_in_operation: float = 0.0,
    ) -> None:
        self.environment = environment
        self.collector = collector
        self.pv_cell = pv_cell
        self.pv_area_m2 = pv_area_m2
        self.years_in_operation = years_in_operation

        self.pv_efficiency = degraded_efficiency(
            pv_cell.efficiency,
            pv_cell.degradation_rate,
            years_in_operation,
        )
        if isinstance(collector, ConcentratedPV):
            self.concentrator_efficiency = degraded_efficiency(
                collector.concentrator.efficiency,
                CONCENTRATOR_DEGRADATION_PER_YEAR,
                years_in_operation,
            )
        else:
            self.concentrator_efficiency = 0.0

    def incident_power_w(self, sample: EnvironmentSample) -> float:
        """
        Optical power delivered to the PV conversion stage (W).
        """
        collector = self.collector
        if isinstance(collector, ConcentratedPV):
            return (
                sample.irradiance_w_m2
                * collector.area_m2
                * self.concentrator_efficiency
                * sample.illumination
            )
        if isinstance(collector, DirectPV):
            return sample.irradiance_w_m2 * self.pv_area_m2 * sample.illumination
        raise TypeError(f"Unsupported collector stage: {collector!r}")

    def temperature_factor(self, surface_temp_k: float) -> float:
        delta = surface_temp_k - self.environment.constants.temp_ref_k
        return max(MIN_TEMPERATURE_FACTOR, 1.0 + self.pv_cell.temp_coefficient * delta)

    def power_from_sample(self, sample: EnvironmentSample) -> float:
        """
        Electrical output (W) for already-evaluated environmental conditions.
        """
        efficiency = self.pv_efficiency * self.temperature_factor(sample.surface_temp_k)
        return self.incident_power_w(sample) * efficiency

    def power_w(self, time_hours: float) -> float:
        """
        Electrical output (W) at simulated time ``time_hours``. Never negative.
        """
        return self.power_from_sample(sample_environment(self.environment, time_hours))
