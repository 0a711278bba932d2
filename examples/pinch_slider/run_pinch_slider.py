"""
Example: elastic slider driven by a synthetic hand trajectory.

The hand sweeps past both ends of a [0, 1] slider; the slider follows it
through a damped spring, is held back by the end caps and snaps to the
detents at 0.25, 0.5 and 0.75. Plots the trajectory if matplotlib is
installed (pip install elastics[examples]).
"""

import logging
import sys
from pathlib import Path

import numpy as np

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT))

from elastics import ElasticExtentProperties, ElasticProperties, LinearElasticSystem
from elastics.simulation import simulate


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    dt = 1.0 / 60.0
    n_steps = 600
    t = np.arange(n_steps) * dt
    # Hand goes from -0.2 to 1.2 and back, with a pause in the middle
    hand = 0.5 + 0.7 * np.sin(0.5 * np.pi * t) * (np.abs(np.sin(0.25 * np.pi * t)) > 0.3)

    extent = ElasticExtentProperties(
        min_stretch=0.0,
        max_stretch=1.0,
        snap_to_end=True,
        snap_points=[0.25, 0.5, 0.75],
    )
    props = ElasticProperties(mass=0.03, hand_k=4.0, end_k=3.0, snap_k=2.0, snap_radius=0.1, drag=0.2)
    slider = LinearElasticSystem(0.5, 0.0, extent, props)

    history = simulate(slider, hand, dt, record_initial=False)
    value = history.get("value")

    print(f"Steps: {len(history)}, t = {slider.time:.2f} s")
    print(f"Slider range: [{value.min():.3f}, {value.max():.3f}], hand range: [{hand.min():.3f}, {hand.max():.3f}]")
    print(f"Final value: {slider.current_value:.4f}, velocity: {slider.current_velocity:.4f}")

    try:
        import matplotlib.pyplot as plt
    except ImportError:
        print("matplotlib not available, skip plot")
        return

    fig, ax = plt.subplots(1, 1, figsize=(8, 4))
    ax.plot(history.get("time"), history.get("forcing"), label="hand", alpha=0.6)
    ax.plot(history.get("time"), value, label="slider")
    for p in extent.snap_points:
        ax.axhline(p, color="gray", lw=0.5, ls="--")
    ax.axhspan(extent.min_stretch, extent.max_stretch, color="green", alpha=0.05)
    ax.set_xlabel("t [s]")
    ax.set_ylabel("value")
    ax.legend()
    ax.grid(True, alpha=0.3)
    plt.tight_layout()
    plt.show()


if __name__ == "__main__":
    main()
