"""
Numerical integrators for second-order elastic systems: (x, v, a, dt) -> (x_next, v_next).

Pure numerical level: no dependency on ElasticSystem.
Works on floats and numpy arrays alike.
"""

from typing import Tuple, TypeVar

T = TypeVar("T")


def semi_implicit_euler_step(x: T, v: T, a: T, dt: float) -> Tuple[T, T]:
    """
    Semi-implicit (symplectic) Euler, order 1:
    v_{n+1} = v_n + dt * a_n,  x_{n+1} = x_n + dt * v_{n+1}.

    The position advances with the updated velocity; this ordering keeps
    stiff springs stable where explicit Euler gains energy.
    """
    v_next = v + a * dt
    x_next = x + v_next * dt
    return x_next, v_next


def explicit_euler_step(x: T, v: T, a: T, dt: float) -> Tuple[T, T]:
    """Explicit Euler, order 1: position advances with the old velocity."""
    return x + v * dt, v + a * dt


class SemiImplicitEulerIntegrator:
    """Semi-implicit Euler integrator (default for elastic systems)."""

    @staticmethod
    def step(x: T, v: T, a: T, dt: float) -> Tuple[T, T]:
        return semi_implicit_euler_step(x, v, a, dt)


class ExplicitEulerIntegrator:
    """Explicit Euler integrator, for comparison; gains energy on undamped springs."""

    @staticmethod
    def step(x: T, v: T, a: T, dt: float) -> Tuple[T, T]:
        return explicit_euler_step(x, v, a, dt)
