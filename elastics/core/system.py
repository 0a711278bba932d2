"""Base interface of a damped harmonic oscillator over a generic value type."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, Optional, TypeVar

import numpy as np

from elastics.core.integrators import SemiImplicitEulerIntegrator
from elastics.core.properties import ElasticExtentProperties, ElasticProperties

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ElasticSystem(ABC, Generic[T]):
    """
    Damped harmonic oscillator over an N-dimensional value space T.

    Holds the current value and velocity plus the extent and elastic
    properties. Subclasses implement compute_force() for their value space;
    step() integrates it. Not safe for concurrent step() calls on the same
    instance.
    """

    def __init__(
        self,
        initial_value: T,
        initial_velocity: T,
        extent_info: ElasticExtentProperties,
        elastic_properties: ElasticProperties,
        integrator: Optional[Any] = None,
    ) -> None:
        """
        Args:
            initial_value: value at t = 0
            initial_velocity: velocity at t = 0
            extent_info: bounds, snap-to-end flag and snap points
            elastic_properties: mass, spring constants, snap radius, drag
            integrator: object with step(x, v, a, dt) -> (x, v). Default: semi-implicit Euler.

        Raises:
            ConfigurationError: if the properties are invalid (e.g. mass <= 0).
        """
        self.integrator = integrator or SemiImplicitEulerIntegrator()
        self._extent_info = self._check_extent(extent_info)
        self._elastic_properties = self._check_properties(elastic_properties)
        self._value: T
        self._velocity: T
        self._value, self._velocity = self._project(self._coerce(initial_value), self._coerce(initial_velocity))
        self._time: float = 0.0
        self._steps: int = 0
        logger.debug(
            "%s created: value=%s velocity=%s %s",
            type(self).__name__,
            self._value,
            self._velocity,
            self._elastic_properties,
        )

    # -- value space hooks ------------------------------------------------

    def _coerce(self, value: Any) -> T:
        """Convert an input value to the internal representation (a copy)."""
        return float(value)  # type: ignore[return-value]

    def _copy(self, value: T) -> T:
        return value

    def _project(self, value: T, velocity: T) -> tuple:
        """Constrain the state after integration. Default: unconstrained."""
        return value, velocity

    def _check_extent(self, extent_info: ElasticExtentProperties) -> ElasticExtentProperties:
        extent_info.validate()
        return extent_info

    def _check_properties(self, elastic_properties: ElasticProperties) -> ElasticProperties:
        elastic_properties.validate()
        return elastic_properties

    # -- dynamics ---------------------------------------------------------

    @abstractmethod
    def compute_force(self, forcing_value: T) -> T:
        """
        Net force on the oscillator at the current state, without mutating it.

        Args:
            forcing_value: input value, e.g. a desired manipulation position.
        """
        pass

    def step(self, forcing_value: T, dt: float) -> T:
        """
        Update the internal state given the forcing value, returning the new value.

        Args:
            forcing_value: input value, e.g. a desired manipulation position.
            dt: time elapsed since the last update (>= 0).

        Returns:
            The new value of the system.
        """
        dt = float(dt)
        if dt < 0:
            raise ValueError(f"dt must be >= 0, got {dt}")
        if dt == 0:
            return self.current_value
        forcing = self._coerce(forcing_value)
        accel = self.compute_force(forcing) / self._elastic_properties.mass
        value, velocity = self.integrator.step(self._value, self._velocity, accel, dt)
        self._value, self._velocity = self._project(value, velocity)
        self._time += dt
        self._steps += 1
        if not self.is_finite():
            logger.warning(
                "%s diverged at step %d (dt=%s): value=%s velocity=%s; call reset() to recover",
                type(self).__name__,
                self._steps,
                dt,
                self._value,
                self._velocity,
            )
        return self.current_value

    def compute_iteration(self, forcing_value: T, dt: float) -> T:
        """Alias of step()."""
        return self.step(forcing_value, dt)

    def reset(self, value: T, velocity: Optional[T] = None) -> None:
        """Replace the state; velocity defaults to zero. Time and step count restart."""
        value = self._coerce(value)
        velocity = self._coerce(velocity) if velocity is not None else value * 0.0
        self._value, self._velocity = self._project(value, velocity)
        self._time = 0.0
        self._steps = 0

    def is_finite(self) -> bool:
        """True when value and velocity are both finite."""
        return bool(np.all(np.isfinite(self._value)) and np.all(np.isfinite(self._velocity)))

    # -- accessors ----------------------------------------------------------

    @property
    def current_value(self) -> T:
        """Current instantaneous value (a copy)."""
        return self._copy(self._value)

    @property
    def current_velocity(self) -> T:
        """Current instantaneous velocity (a copy)."""
        return self._copy(self._velocity)

    @property
    def time(self) -> float:
        """Simulated time accumulated by step()."""
        return self._time

    @property
    def steps(self) -> int:
        return self._steps

    @property
    def extent_info(self) -> ElasticExtentProperties:
        return self._extent_info

    @extent_info.setter
    def extent_info(self, extent_info: ElasticExtentProperties) -> None:
        """Reconfigure the extent; affects subsequent steps only."""
        self._extent_info = self._check_extent(extent_info)
        logger.debug("%s extent changed: %s", type(self).__name__, extent_info)

    @property
    def elastic_properties(self) -> ElasticProperties:
        return self._elastic_properties

    @elastic_properties.setter
    def elastic_properties(self, elastic_properties: ElasticProperties) -> None:
        """Reconfigure the elastic properties; affects subsequent steps only."""
        self._elastic_properties = self._check_properties(elastic_properties)
        logger.debug("%s properties changed: %s", type(self).__name__, elastic_properties)

    def state_dict(self) -> Dict[str, Any]:
        """Current state for inspection/checkpointing."""
        return {
            "value": self.current_value,
            "velocity": self.current_velocity,
            "time": self._time,
            "steps": self._steps,
        }
