"""
Elastic force models.

Hierarchy:
  - forces: scalar force terms (hand spring, end caps, snap points)
  - linear: scalar elastic system (LinearElasticSystem)
  - spaces: value spaces for multi-dimensional systems (VectorSpace, QuaternionSpace)
  - vector: vector and quaternion elastic systems
"""

# --- Force terms ---
from elastics.physics.forces import clamp01, end_force, falloff, hand_force, snap_force

# --- Scalar system ---
from elastics.physics.linear import LinearElasticSystem

# --- Value spaces ---
from elastics.physics.spaces import QuaternionSpace, VectorSpace

# --- Vector / quaternion systems ---
from elastics.physics.vector import (
    QuaternionElasticSystem,
    Vector2ElasticSystem,
    Vector3ElasticSystem,
    VectorElasticSystem,
)

__all__ = [
    # Forze
    "clamp01",
    "falloff",
    "hand_force",
    "end_force",
    "snap_force",
    # Scalare
    "LinearElasticSystem",
    # Spazi
    "VectorSpace",
    "QuaternionSpace",
    # Vettoriali
    "VectorElasticSystem",
    "Vector2ElasticSystem",
    "Vector3ElasticSystem",
    "QuaternionElasticSystem",
]
