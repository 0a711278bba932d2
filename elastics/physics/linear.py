"""One-dimensional elastic system: scalar value, four additive force sources."""

from elastics.core.properties import ElasticExtentProperties
from elastics.core.system import ElasticSystem
from elastics.exceptions import ConfigurationError
from elastics.physics.forces import end_force, hand_force, snap_force


class LinearElasticSystem(ElasticSystem[float]):
    """
    Damped harmonic oscillator over a scalar value.

    Net force = hand spring + end caps (with optional end magnetism) + snap points,
    integrated with semi-implicit Euler. min_stretch / max_stretch bound the
    signed value itself.

    Example:
        extent = ElasticExtentProperties(min_stretch=0.0, max_stretch=1.0, snap_points=[0.5])
        props = ElasticProperties(mass=0.03, hand_k=4.0, end_k=3.0, snap_k=2.0, snap_radius=0.1, drag=0.2)
        system = LinearElasticSystem(0.0, 0.0, extent, props)
        value = system.step(hand_position, dt)
    """

    def _check_extent(self, extent_info: ElasticExtentProperties) -> ElasticExtentProperties:
        extent_info.validate()
        for point in extent_info.snap_points:
            if not isinstance(point, float):
                raise ConfigurationError(f"snap points of a scalar system must be scalars, got {point!r}")
        return extent_info

    def compute_force(self, forcing_value: float) -> float:
        x = self._value
        v = self._velocity
        props = self._elastic_properties
        extent = self._extent_info

        force = hand_force(x, v, forcing_value, props.hand_k, props.drag)
        force += end_force(
            x,
            extent.min_stretch,
            extent.max_stretch,
            props.end_k,
            props.snap_radius,
            snap_to_end=extent.snap_to_end,
        )
        force += snap_force(x, extent.snap_points, props.snap_k, props.snap_radius)
        return force
