"""Tests for the scalar force terms."""

import pytest

from elastics.physics.forces import bound_force, clamp01, end_force, falloff, hand_force, snap_force


def test_clamp01() -> None:
    assert clamp01(-0.5) == 0.0
    assert clamp01(0.25) == 0.25
    assert clamp01(3.0) == 1.0


def test_falloff_profile() -> None:
    assert falloff(0.0, 0.5) == 1.0
    assert falloff(0.2, 0.5) == pytest.approx(0.6)
    assert falloff(-0.2, 0.5) == pytest.approx(0.6)
    assert falloff(0.5, 0.5) == 0.0
    assert falloff(2.0, 0.5) == 0.0


def test_hand_force_spring_and_drag() -> None:
    # (1 - 0.25) * 10 - 2 * 0.5
    assert hand_force(0.25, 0.5, 1.0, hand_k=10.0, drag=2.0) == pytest.approx(6.5)


def test_snap_force_outside_radius_is_zero() -> None:
    """Snap point at 2.0, value at 2.6: outside a radius of 0.5."""
    assert snap_force(2.6, [2.0], snap_k=10.0, snap_radius=0.5) == pytest.approx(0.0)


def test_snap_force_inside_radius_pulls_towards_point() -> None:
    """Value at 2.2, snap point at 2.0: -0.2 * 10 * (1 - 0.4)."""
    f = snap_force(2.2, [2.0], snap_k=10.0, snap_radius=0.5)
    assert f == pytest.approx(-1.2)
    assert snap_force(1.8, [2.0], snap_k=10.0, snap_radius=0.5) == pytest.approx(1.2)


def test_snap_force_at_point_is_zero() -> None:
    assert snap_force(2.0, [2.0], snap_k=10.0, snap_radius=0.5) == 0.0


def test_snap_force_superposition() -> None:
    points = [2.0, 2.3, 5.0]
    total = snap_force(2.2, points, snap_k=10.0, snap_radius=0.5)
    parts = sum(snap_force(2.2, [p], snap_k=10.0, snap_radius=0.5) for p in points)
    assert total == pytest.approx(parts)
    assert total == pytest.approx(-1.2 + 0.8)


def test_snap_force_no_points() -> None:
    assert snap_force(1.0, [], snap_k=10.0, snap_radius=0.5) == 0.0


def test_end_force_beyond_max_pushes_back() -> None:
    # d_max = 1 - 1.5 = -0.5, full end spring
    assert end_force(1.5, -1.0, 1.0, end_k=5.0, snap_radius=0.5) == pytest.approx(-2.5)


def test_end_force_beyond_min_pushes_back() -> None:
    assert end_force(-1.2, -1.0, 1.0, end_k=5.0, snap_radius=0.5) == pytest.approx(1.0)


def test_end_force_inside_without_snap_to_end_is_zero() -> None:
    assert end_force(0.8, -1.0, 1.0, end_k=5.0, snap_radius=0.5) == 0.0


def test_end_force_magnetizes_near_bound() -> None:
    """Upper cap at distance 0.2 within radius 0.5; lower cap out of range."""
    f = end_force(0.8, -1.0, 1.0, end_k=5.0, snap_radius=0.5, snap_to_end=True)
    assert f == pytest.approx(0.2 * 5.0 * 0.6)


def test_end_force_magnetism_vanishes_far_from_bounds() -> None:
    assert end_force(0.0, -1.0, 1.0, end_k=5.0, snap_radius=0.5, snap_to_end=True) == pytest.approx(0.0)


def test_bound_force_beyond_ignores_snap_radius() -> None:
    assert bound_force(-3.0, True, end_k=2.0, snap_radius=0.1, snap_to_end=True) == pytest.approx(-6.0)
