"""Extent and elastic properties of a damped harmonic oscillator."""

import dataclasses
import math
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Mapping, Sequence, Tuple

import numpy as np

from elastics.exceptions import ConfigurationError


def _freeze_point(point: Any) -> Any:
    """Scalars stay floats; vectors become read-only float arrays."""
    if np.ndim(point) == 0:
        return float(point)
    arr = np.array(point, dtype=float)
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True, eq=False)
class ElasticExtentProperties:
    """
    Extent in which the oscillator is free to move.

    min_stretch / max_stretch bound the norm of the displacement (the raw
    value for the scalar system). snap_points are interior attractors; their
    order does not matter.
    """

    min_stretch: float
    max_stretch: float
    snap_to_end: bool = False
    snap_points: Tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "min_stretch", float(self.min_stretch))
        object.__setattr__(self, "max_stretch", float(self.max_stretch))
        object.__setattr__(self, "snap_to_end", bool(self.snap_to_end))
        points = () if self.snap_points is None else self.snap_points
        object.__setattr__(self, "snap_points", tuple(_freeze_point(p) for p in points))

    def validate(self) -> None:
        """Raise ConfigurationError for NaN bounds or min_stretch > max_stretch."""
        if math.isnan(self.min_stretch) or math.isnan(self.max_stretch):
            raise ConfigurationError("min_stretch and max_stretch must not be NaN")
        if self.min_stretch > self.max_stretch:
            raise ConfigurationError(
                f"min_stretch ({self.min_stretch}) must not exceed max_stretch ({self.max_stretch})"
            )
        for p in self.snap_points:
            if not np.all(np.isfinite(p)):
                raise ConfigurationError(f"snap point {p!r} is not finite")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "min_stretch": self.min_stretch,
            "max_stretch": self.max_stretch,
            "snap_to_end": self.snap_to_end,
            "snap_points": [p.tolist() if isinstance(p, np.ndarray) else p for p in self.snap_points],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ElasticExtentProperties":
        unknown = set(data) - {f.name for f in fields(cls)}
        if unknown:
            raise ConfigurationError(f"unknown extent properties: {sorted(unknown)}")
        return cls(
            min_stretch=data["min_stretch"],
            max_stretch=data["max_stretch"],
            snap_to_end=data.get("snap_to_end", False),
            snap_points=data.get("snap_points", ()),
        )


@dataclass(frozen=True)
class ElasticProperties:
    """
    Properties of the damped harmonic oscillator.

    Args:
        mass: mass of the simulated element (> 0)
        hand_k: spring constant towards the forcing value
        end_k: spring constant of the end caps
        snap_k: spring constant of the snap points
        snap_radius: distance beyond which snap and end magnetism vanish (> 0)
        drag: damping proportional to velocity (>= 0)
    """

    mass: float = 1.0
    hand_k: float = 1.0
    end_k: float = 1.0
    snap_k: float = 1.0
    snap_radius: float = 1.0
    drag: float = 0.0

    def __post_init__(self) -> None:
        for f in fields(self):
            object.__setattr__(self, f.name, float(getattr(self, f.name)))

    def validate(self) -> None:
        """Raise ConfigurationError for values that would corrupt the state."""
        for name, value in asdict(self).items():
            if not math.isfinite(value):
                raise ConfigurationError(f"{name} must be finite, got {value}")
        if self.mass <= 0:
            raise ConfigurationError(f"mass must be > 0, got {self.mass}")
        if self.snap_radius <= 0:
            raise ConfigurationError(f"snap_radius must be > 0, got {self.snap_radius}")
        if self.drag < 0:
            raise ConfigurationError(f"drag must be >= 0, got {self.drag}")

    def replace(self, **changes: float) -> "ElasticProperties":
        """Copy with some fields changed."""
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ElasticProperties":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigurationError(f"unknown elastic properties: {sorted(unknown)}")
        return cls(**data)


def snap_points_array(points: Sequence[Any], dim: int) -> np.ndarray:
    """Stack snap points into an (n, dim) array, checking their shape."""
    if not points:
        return np.zeros((0, dim))
    arr = np.array([np.asarray(p, dtype=float) for p in points])
    if arr.ndim != 2 or arr.shape[1] != dim:
        raise ConfigurationError(f"snap points must have shape (n, {dim}), got {arr.shape}")
    return arr
