"""Tests for the batch driver and the trajectory history."""

import numpy as np
import pytest

from elastics import ElasticExtentProperties, ElasticProperties, LinearElasticSystem, Vector2ElasticSystem
from elastics.core.history import ElasticHistory
from elastics.simulation import simulate


def _slider() -> LinearElasticSystem:
    extent = ElasticExtentProperties(min_stretch=-1.0, max_stretch=1.0)
    props = ElasticProperties(mass=1.0, hand_k=10.0, end_k=5.0, snap_k=0.0, snap_radius=1.0, drag=1.0)
    return LinearElasticSystem(0.0, 0.0, extent, props)


def test_simulate_records_initial_state_and_each_step() -> None:
    system = _slider()
    history = simulate(system, [1.0] * 10, 0.1)
    assert len(history) == 11
    values = history.get("value")
    assert values[0] == 0.0
    assert values[1] == pytest.approx(0.1)
    assert values[2] == pytest.approx(0.28)
    assert values[-1] == system.current_value
    assert history.get("time")[-1] == pytest.approx(1.0)
    np.testing.assert_allclose(history.get("forcing"), 1.0)


def test_simulate_matches_manual_stepping() -> None:
    forcing = np.sin(np.linspace(0.0, 3.0, 50))
    dts = np.full(50, 0.02)
    history = simulate(_slider(), forcing, dts, record_initial=False)
    manual = _slider()
    expected = [manual.step(f, dt) for f, dt in zip(forcing, dts)]
    np.testing.assert_array_equal(history.get("value"), expected)


def test_simulate_dt_length_mismatch() -> None:
    with pytest.raises(ValueError):
        simulate(_slider(), [1.0, 1.0], [0.1])


def test_simulate_vector_history_shapes() -> None:
    extent = ElasticExtentProperties(min_stretch=0.0, max_stretch=2.0)
    system = Vector2ElasticSystem([0.0, 0.0], [0.0, 0.0], extent, ElasticProperties(drag=1.0))
    history = simulate(system, [[1.0, 0.0]] * 5, 0.05)
    assert history.get("value").shape == (6, 2)
    assert history.get("velocity").shape == (6, 2)


def test_history_max_length_and_clear() -> None:
    history = ElasticHistory(max_length=3)
    for i in range(5):
        history.append(time=float(i), value=float(i))
    assert len(history) == 3
    np.testing.assert_array_equal(history.get("time"), [2.0, 3.0, 4.0])
    assert history.get("missing").size == 0
    history.clear()
    assert len(history) == 0
    assert history.keys() == []


def test_history_stores_array_copies() -> None:
    history = ElasticHistory()
    v = np.array([1.0, 2.0])
    history.append(value=v)
    v[0] = 5.0
    assert history.get("value")[0, 0] == 1.0
