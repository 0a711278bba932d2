"""
elastics: damped harmonic oscillators for interaction feedback.
"""

__version__ = "0.1.0"

from elastics.core.properties import ElasticExtentProperties, ElasticProperties
from elastics.core.system import ElasticSystem
from elastics.exceptions import ConfigurationError
from elastics.physics.linear import LinearElasticSystem
from elastics.physics.vector import (
    QuaternionElasticSystem,
    Vector2ElasticSystem,
    Vector3ElasticSystem,
    VectorElasticSystem,
)

__all__ = [
    "__version__",
    "ConfigurationError",
    "ElasticExtentProperties",
    "ElasticProperties",
    "ElasticSystem",
    "LinearElasticSystem",
    "VectorElasticSystem",
    "Vector2ElasticSystem",
    "Vector3ElasticSystem",
    "QuaternionElasticSystem",
]
