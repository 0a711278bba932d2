"""Batch driver: run an elastic system over a sequence of forcing values."""

import logging
from typing import Any, Iterable, Optional, Sequence, Union

import numpy as np

from elastics.core.history import ElasticHistory
from elastics.core.system import ElasticSystem

logger = logging.getLogger(__name__)


def simulate(
    system: ElasticSystem,
    forcing: Iterable[Any],
    dt: Union[float, Sequence[float]],
    history: Optional[ElasticHistory] = None,
    record_initial: bool = True,
) -> ElasticHistory:
    """
    Step `system` once per forcing value, recording the trajectory.

    Args:
        system: elastic system to drive (mutated).
        forcing: forcing values, one per step.
        dt: constant time step, or one time step per forcing value.
        history: buffer to append to (default: a new ElasticHistory).
        record_initial: also record the state before the first step.

    Returns:
        The history with keys 'time', 'forcing', 'value', 'velocity'.
    """
    forcing = list(forcing)
    if np.ndim(dt) == 0:
        dts = [float(dt)] * len(forcing)
    else:
        dts = [float(d) for d in dt]  # type: ignore[union-attr]
        if len(dts) != len(forcing):
            raise ValueError(f"dt has {len(dts)} entries, forcing has {len(forcing)}")

    if history is None:
        history = ElasticHistory()
    if record_initial:
        history.record(system, forcing=forcing[0] if forcing else system.current_value)

    for f, step_dt in zip(forcing, dts):
        system.step(f, step_dt)
        history.record(system, forcing=f)

    logger.debug("simulated %d steps of %s, t=%.4f", len(forcing), type(system).__name__, system.time)
    return history
