"""
Force terms of the one-dimensional elastic model.

Each function returns the force contributed by one source at the given
state; the total force is their sum:

  - hand_force: spring towards the forcing value, damped by velocity
  - end_force: one-sided end caps at min/max stretch, optional magnetism
  - snap_force: localized attraction towards each snap point

Pure functions, no state.
"""

from typing import Iterable


def clamp01(x: float) -> float:
    """Clamp to [0, 1]."""
    return min(max(x, 0.0), 1.0)


def falloff(distance: float, radius: float) -> float:
    """1 at zero distance, decreasing linearly to 0 at radius and beyond."""
    return 1.0 - clamp01(abs(distance / radius))


def hand_force(value: float, velocity: float, forcing_value: float, hand_k: float, drag: float) -> float:
    """F = k (x_hand - x) - drag * v."""
    return (forcing_value - value) * hand_k - drag * velocity


def bound_force(
    dist_from_end: float,
    beyond: bool,
    end_k: float,
    snap_radius: float,
    snap_to_end: bool,
) -> float:
    """
    Force from one end cap.

    Beyond the bound the cap pushes back with full spring strength. Inside,
    with snap_to_end, the cap attracts like a snap point.
    """
    if beyond:
        return dist_from_end * end_k
    if snap_to_end:
        return dist_from_end * end_k * falloff(dist_from_end, snap_radius)
    return 0.0


def end_force(
    value: float,
    min_stretch: float,
    max_stretch: float,
    end_k: float,
    snap_radius: float,
    snap_to_end: bool = False,
) -> float:
    """Sum of upper and lower end cap forces; the two caps are independent."""
    upper = bound_force(max_stretch - value, value > max_stretch, end_k, snap_radius, snap_to_end)
    lower = bound_force(min_stretch - value, value < min_stretch, end_k, snap_radius, snap_to_end)
    return upper + lower


def snap_force(value: float, snap_points: Iterable[float], snap_k: float, snap_radius: float) -> float:
    """
    Sum of the snap point attractions.

    The "-kx" spring of each point is scaled by a clamped distance factor,
    which gives a hyperbolic force profile vanishing beyond snap_radius.
    """
    force = 0.0
    for point in snap_points:
        dist = point - value
        force += dist * snap_k * falloff(dist, snap_radius)
    return force
