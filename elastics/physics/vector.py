"""
Multi-dimensional elastic systems: 2-D/3-D vectors and quaternion rotations.

Same force model as LinearElasticSystem, generalized through a value space:
hand and snap springs act along the displacement in the space; end caps act
along the direction of growing norm, with the scalar end-cap rule applied to
the norm of the value.
"""

from typing import Any, Optional

import numpy as np

from elastics.core.properties import ElasticExtentProperties, ElasticProperties, snap_points_array
from elastics.core.system import ElasticSystem
from elastics.physics.forces import bound_force, falloff
from elastics.physics.spaces import QuaternionSpace, VectorSpace


class VectorElasticSystem(ElasticSystem[np.ndarray]):
    """
    Damped harmonic oscillator over the value space `space`.

    Values, velocities and forcing values are float arrays of shape (space.dim,).
    min_stretch / max_stretch bound space.norm(value). At a zero-norm value the
    end-cap direction is undefined and the caps exert no force.
    """

    def __init__(
        self,
        space: VectorSpace,
        initial_value: Any,
        initial_velocity: Any,
        extent_info: ElasticExtentProperties,
        elastic_properties: ElasticProperties,
        integrator: Optional[Any] = None,
    ) -> None:
        self.space = space
        super().__init__(initial_value, initial_velocity, extent_info, elastic_properties, integrator=integrator)

    def _coerce(self, value: Any) -> np.ndarray:
        return self.space.coerce(value)

    def _copy(self, value: np.ndarray) -> np.ndarray:
        return value.copy()

    def _project(self, value: np.ndarray, velocity: np.ndarray) -> tuple:
        return self.space.project(value, velocity)

    def _check_extent(self, extent_info: ElasticExtentProperties) -> ElasticExtentProperties:
        extent_info.validate()
        self._snap_points = snap_points_array(extent_info.snap_points, self.space.dim)
        return extent_info

    def compute_force(self, forcing_value: Any) -> np.ndarray:
        space = self.space
        x = self._value
        v = self._velocity
        props = self._elastic_properties
        extent = self._extent_info

        force = space.difference(self._coerce(forcing_value), x) * props.hand_k - props.drag * v

        r = space.norm(x)
        radial = bound_force(
            extent.max_stretch - r, r > extent.max_stretch, props.end_k, props.snap_radius, extent.snap_to_end
        )
        radial += bound_force(
            extent.min_stretch - r, r < extent.min_stretch, props.end_k, props.snap_radius, extent.snap_to_end
        )
        if radial != 0.0:
            force = force + radial * space.direction(x)

        for point in self._snap_points:
            d = space.difference(point, x)
            force = force + d * props.snap_k * falloff(space.distance(point, x), props.snap_radius)
        return force


class Vector2ElasticSystem(VectorElasticSystem):
    """Elastic system over 2-D vectors."""

    def __init__(
        self,
        initial_value: Any,
        initial_velocity: Any,
        extent_info: ElasticExtentProperties,
        elastic_properties: ElasticProperties,
        integrator: Optional[Any] = None,
    ) -> None:
        super().__init__(VectorSpace(2), initial_value, initial_velocity, extent_info, elastic_properties, integrator)


class Vector3ElasticSystem(VectorElasticSystem):
    """Elastic system over 3-D vectors, e.g. a grabbed object's position."""

    def __init__(
        self,
        initial_value: Any,
        initial_velocity: Any,
        extent_info: ElasticExtentProperties,
        elastic_properties: ElasticProperties,
        integrator: Optional[Any] = None,
    ) -> None:
        super().__init__(VectorSpace(3), initial_value, initial_velocity, extent_info, elastic_properties, integrator)


class QuaternionElasticSystem(VectorElasticSystem):
    """
    Elastic system over rotations, as unit quaternions (w, x, y, z).

    min_stretch / max_stretch bound the rotation angle from identity (radians);
    snap_radius is an angle as well. The value is renormalized after each step.
    """

    def __init__(
        self,
        initial_value: Any,
        initial_velocity: Any,
        extent_info: ElasticExtentProperties,
        elastic_properties: ElasticProperties,
        integrator: Optional[Any] = None,
    ) -> None:
        super().__init__(QuaternionSpace(), initial_value, initial_velocity, extent_info, elastic_properties, integrator)
