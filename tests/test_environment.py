from __future__ import annotations

import dataclasses
import math

import pytest

from psyche_power_sim.simulation.environment import (
    EnvironmentConstants,
    EnvironmentModel,
    sample_environment,
)


def test_irradiance_follows_inverse_square_law() -> None:
    env = EnvironmentModel()
    assert env.irradiance() == pytest.approx(1361.0 / 2.9 ** 2, rel=1e-12)
    assert env.irradiance() == pytest.approx(161.83, abs=0.01)
    assert env.irradiance(1.0) == pytest.approx(1361.0)
    assert env.irradiance(2.0) == pytest.approx(env.irradiance(1.0) / 4.0)


def test_sun_angle_phases() -> None:
    env = EnvironmentModel()
    assert env.sun_angle(0.0) == 0.0
    assert env.sun_angle(1.05) == pytest.approx(math.pi / 2)
    assert env.sun_angle(2.1) == pytest.approx(math.pi)
    assert env.sun_angle(3.15) == pytest.approx(3 * math.pi / 2)


def test_sun_angle_stays_in_range() -> None:
    env = EnvironmentModel()
    for step in range(2000):
        angle = env.sun_angle(step * 0.1)
        assert 0.0 <= angle < 2 * math.pi


@pytest.mark.parametrize("t", [0.3, 1.7, 2.5, 10.05, 33.3])
def test_sun_angle_is_periodic(t: float) -> None:
    env = EnvironmentModel()
    a, b = env.sun_angle(t), env.sun_angle(t + 4.2)
    assert math.cos(a) == pytest.approx(math.cos(b), abs=1e-9)
    assert math.sin(a) == pytest.approx(math.sin(b), abs=1e-9)


def test_surface_temperature_bounds() -> None:
    env = EnvironmentModel()
    assert env.surface_temperature(0.0) == pytest.approx(270.0)
    assert env.surface_temperature(math.pi / 3) == pytest.approx(185.0)
    assert env.surface_temperature(math.pi / 2) == pytest.approx(100.0)
    assert env.surface_temperature(math.pi) == 100.0
    assert env.surface_temperature(3 * math.pi / 2) == 100.0


def test_illumination_is_floored_past_quarter_rotation() -> None:
    assert EnvironmentModel.illumination_factor(math.pi / 2 + 1e-12) == 0.0
    assert EnvironmentModel.illumination_factor(math.pi) == 0.0
    assert EnvironmentModel.illumination_factor(0.0) == 1.0


def test_alternate_constants_are_injected() -> None:
    constants = EnvironmentConstants(distance_au=1.0, rotation_period_hours=10.0)
    env = EnvironmentModel(constants)
    assert env.irradiance() == pytest.approx(1361.0)
    assert env.sun_angle(5.0) == pytest.approx(math.pi)
    # default model is unaffected
    assert EnvironmentModel().sun_angle(5.0) != pytest.approx(math.pi)


def test_constants_are_immutable() -> None:
    constants = EnvironmentConstants()
    with pytest.raises(dataclasses.FrozenInstanceError):
        constants.distance_au = 1.0  # type: ignore[misc]


def test_sample_environment_bundles_quantities() -> None:
    env = EnvironmentModel()
    day = sample_environment(env, 0.0)
    night = sample_environment(env, 2.1)
    assert day.is_day and day.illumination == 1.0 and day.surface_temp_k == 270.0
    assert not night.is_day and night.surface_temp_k == 100.0
    assert day.irradiance_w_m2 == pytest.approx(env.irradiance())
