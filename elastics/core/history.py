"""In-memory trajectory buffer for elastic systems."""

from typing import Any, Dict, List, Optional

import numpy as np


class ElasticHistory:
    """
    Buffer of per-step records (time, forcing, value, velocity, ...).
    Each append() is one step; keys become series retrievable as numpy arrays.
    """

    def __init__(self, max_length: Optional[int] = None) -> None:
        """
        Args:
            max_length: maximum number of steps kept (None = unlimited).
        """
        self._max_length = max_length
        self._data: Dict[str, List[Any]] = {}
        self._step_count = 0

    def append(self, **kwargs: Any) -> None:
        """Add a record for the current step (key -> value)."""
        for key, value in kwargs.items():
            if key not in self._data:
                self._data[key] = []
            self._data[key].append(value.copy() if isinstance(value, np.ndarray) else value)
        self._step_count += 1
        if self._max_length is not None and self._step_count > self._max_length:
            for key in self._data:
                self._data[key] = self._data[key][-self._max_length:]
            self._step_count = self._max_length

    def record(self, system: Any, forcing: Any = None) -> None:
        """Append the current time, value and velocity of an elastic system."""
        record = {
            "time": system.time,
            "value": system.current_value,
            "velocity": system.current_velocity,
        }
        if forcing is not None:
            record["forcing"] = forcing
        self.append(**record)

    def clear(self) -> None:
        self._data.clear()
        self._step_count = 0

    def get(self, key: str) -> np.ndarray:
        """Series for a key as a numpy array (empty if missing)."""
        if key not in self._data:
            return np.array([])
        return np.array(self._data[key])

    def keys(self) -> List[str]:
        return list(self._data.keys())

    def to_dict(self) -> Dict[str, np.ndarray]:
        return {k: self.get(k) for k in self._data}

    def __len__(self) -> int:
        return self._step_count
