"""
Environmental model for the surface of asteroid 16 Psyche.

Provides :class:`EnvironmentConstants`, the immutable set of physical
constants describing the asteroid's distance and rotation, and
:class:`EnvironmentModel`, which turns simulated time into solar irradiance,
sun angle, illumination and surface temperature.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

TWO_PI = 2.0 * math.pi


@dataclass(frozen=True)
class EnvironmentConstants:
    """
    Physical constants of the mission environment.

    The defaults describe 16 Psyche at 2.9 AU from the Sun. Alternate
    distances or rotation periods can be simulated by passing a different
    instance to :class:`EnvironmentModel`; nothing reads these values from
    module state.

    Attributes:
        solar_constant_w_m2: Solar irradiance at 1 AU (W/m²).
        distance_au: Heliocentric distance of the asteroid (AU).
        rotation_period_hours: Sidereal rotation period (hours).
        temp_min_k: Night-side surface temperature floor (K).
        temp_max_k: Subsolar surface temperature ceiling (K).
        temp_ref_k: Reference temperature for PV cell ratings (K).

    Example:
        ```python
        # Same spacecraft, closer to the Sun
        constants = EnvironmentConstants(distance_au=1.5)
        env = EnvironmentModel(constants)
        env.irradiance()  # ~605 W/m²
        ```
    """
    solar_constant_w_m2: float = 1361.0
    distance_au: float = 2.9
    rotation_period_hours: float = 4.2
    temp_min_k: float = 100.0
    temp_max_k: float = 270.0
    temp_ref_k: float = 298.0


class EnvironmentModel:
    """
    Pure functions of simulated time describing the solar environment.

    The asteroid rotates with a fixed period; angle 0 is the subsolar point
    (maximum illumination) and angle π the anti-solar point (local midnight).
    Surface temperature follows illumination instantaneously, without
    thermal lag.
    """

    def __init__(self, constants: EnvironmentConstants | None = None) -> None:
        self.constants = constants or EnvironmentConstants()

    def irradiance(self, distance_au: float | None = None) -> float:
        """
        Solar irradiance at the given distance, via the inverse-square law.

        Args:
            distance_au: Heliocentric distance in AU. Defaults to the
                configured mission distance.

        Returns:
            Irradiance in W/m².
        """
        if distance_au is None:
            distance_au = self.constants.distance_au
        return self.constants.solar_constant_w_m2 / distance_au ** 2

    def sun_angle(self, time_hours: float) -> float:
        """
        Rotation phase of the surface at ``time_hours``, in radians [0, 2π).
        """
        phase = (time_hours / self.constants.rotation_period_hours) % 1.0
        return phase * TWO_PI

    @staticmethod
    def illumination_factor(sun_angle: float) -> float:
        # cos() is ~6e-17 at exactly π/2 and slightly negative just past it
        return max(0.0, math.cos(sun_angle))

    def surface_temperature(self, sun_angle: float) -> float:
        """
        Surface temperature (K) for a given sun angle.

        Linear interpolation between the night floor and the day ceiling,
        weighted by the illumination factor. Every angle at or beyond π/2
        yields the night floor.
        """
        c = self.constants
        weight = self.illumination_factor(sun_angle)
        return c.temp_min_k + (c.temp_max_k - c.temp_min_k) * weight


@dataclass(frozen=True)
class EnvironmentSample:
    """Environmental conditions evaluated at one instant."""
    time_hours: float
    sun_angle: float
    illumination: float
    surface_temp_k: float
    irradiance_w_m2: float

    @property
    def is_day(self) -> bool:
        return self.illumination > 0.0


def sample_environment(model: EnvironmentModel, time_hours: float) -> EnvironmentSample:
    """
    Evaluate every environmental quantity at ``time_hours`` in one call.

    Args:
        model: Environment model to query.
        time_hours: Simulated time (hours since start).

    Returns:
        EnvironmentSample with angle, illumination, temperature and irradiance.
    """
    angle = model.sun_angle(time_hours)
    return EnvironmentSample(
        time_hours=time_hours,
        sun_angle=angle,
        illumination=model.illumination_factor(angle),
        surface_temp_k=model.surface_temperature(angle),
        irradiance_w_m2=model.irradiance(),
    )
