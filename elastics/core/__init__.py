"""Core: elastic system interface, properties and trajectory history."""

from elastics.core.history import ElasticHistory
from elastics.core.integrators import (
    ExplicitEulerIntegrator,
    SemiImplicitEulerIntegrator,
    explicit_euler_step,
    semi_implicit_euler_step,
)
from elastics.core.properties import ElasticExtentProperties, ElasticProperties
from elastics.core.system import ElasticSystem

__all__ = [
    "ElasticSystem",
    "ElasticExtentProperties",
    "ElasticProperties",
    "ElasticHistory",
    "SemiImplicitEulerIntegrator",
    "ExplicitEulerIntegrator",
    "semi_implicit_euler_step",
    "explicit_euler_step",
]
