"""
Simulation: drive elastic systems over forcing sequences and record trajectories.
"""

from elastics.simulation.runner import simulate

__all__ = ["simulate"]
