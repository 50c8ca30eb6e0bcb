from __future__ import annotations

import pytest

from psyche_power_sim.simulation.environment import EnvironmentModel
from psyche_power_sim.simulation.loads import LoadFactors, LoadModel


@pytest.fixture()
def loads() -> LoadModel:
    return LoadModel(EnvironmentModel(), base_load_w=100.0)


@pytest.mark.parametrize(
    ("t", "expected"),
    [
        (0.0, 330.0),  # day + comms
        (0.5, 250.0),  # day, window just closed
        (0.7, 250.0),  # day
        (2.1, 200.0),  # night
        (6.2, 280.0),  # night + comms
    ],
)
def test_load_composition(loads: LoadModel, t: float, expected: float) -> None:
    assert loads.power_w(t) == pytest.approx(expected)


def test_comms_window_recurs_on_time_alone(loads: LoadModel) -> None:
    assert loads.in_comms_window(0.0)
    assert loads.in_comms_window(12.3)
    assert not loads.in_comms_window(5.9)
    assert not loads.in_comms_window(6.5)


def test_load_never_below_base(loads: LoadModel) -> None:
    assert all(loads.power_w(step * 0.1) >= 100.0 for step in range(480))


def test_custom_factors() -> None:
    factors = LoadFactors(science=0.5, heater=2.0, comms=0.0)
    model = LoadModel(EnvironmentModel(), base_load_w=50.0, factors=factors)
    assert model.power_w(0.0) == pytest.approx(75.0)
    assert model.power_w(2.1) == pytest.approx(150.0)
