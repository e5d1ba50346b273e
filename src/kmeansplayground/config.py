"""
Configuration & Presets
=======================
This module is the central registry for the tunable constants of the playground.

Why is this file needed?
------------------------
1. Single source: radii, tile size, animation speed and the allowed range of k
   live in one frozen object instead of being scattered through drawing code.
2. Presets: the "classic" and "lesson" flavours of the playground differ only
   in these numbers, so they are expressed as two instances of the same class.

Exports:
    SimulationConfig: Frozen dataclass with all tunables.
    PRESETS (dict): Named configurations.
    DEFAULT_PRESET (str): Name of the preset used when none is requested.
"""
from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class SimulationConfig:
    """
    Tunables for one playground session.

    Pixel values refer to canvas coordinates. The inset fraction is measured
    from every edge, e.g. 0.1 keeps random centroids within 10%..90% of the
    canvas width and height.
    """
    point_radius: float = 8.0
    centroid_radius: float = 16.0
    hover_radius: float = 15.0
    voronoi_step: int = 20
    grid_spacing: int = 50

    auto_step_interval_frames: int = 3
    interpolation_factor: float = 0.1
    convergence_threshold: float = 1.0
    frame_interval_ms: int = 16

    k_bounds: tuple[int, int] = (1, 10)
    default_k: int = 3
    inset_fraction: float = 0.1

    def __post_init__(self) -> None:
        if not 0.0 < self.interpolation_factor <= 1.0:
            raise ValueError(
                f"interpolation_factor must be in (0, 1], got {self.interpolation_factor}"
            )
        if self.auto_step_interval_frames < 1:
            raise ValueError("auto_step_interval_frames must be a positive integer.")
        if self.voronoi_step < 1 or self.grid_spacing < 1:
            raise ValueError("voronoi_step and grid_spacing must be positive.")
        if self.frame_interval_ms < 1:
            raise ValueError("frame_interval_ms must be positive.")
        if self.convergence_threshold < 0.0:
            raise ValueError("convergence_threshold must not be negative.")

        k_min, k_max = self.k_bounds
        if k_min < 0 or k_min > k_max:
            raise ValueError(f"Invalid k_bounds {self.k_bounds}.")
        if not k_min <= self.default_k <= k_max:
            raise ValueError(f"default_k={self.default_k} lies outside k_bounds {self.k_bounds}.")
        if not 0.0 <= self.inset_fraction < 0.5:
            raise ValueError(f"inset_fraction must be in [0, 0.5), got {self.inset_fraction}")

    @property
    def k_min(self) -> int:
        return self.k_bounds[0]

    @property
    def k_max(self) -> int:
        return self.k_bounds[1]

    def with_default_k(self, k: int) -> SimulationConfig:
        """Return a copy with a different starting k (validated)."""
        return replace(self, default_k=k)


PRESETS: dict[str, SimulationConfig] = {
    # Snappy: auto mode steps every 3rd frame, at least one cluster.
    "classic": SimulationConfig(),
    # Slower pace for a classroom; k may be 0 ("no clustering yet").
    "lesson": SimulationConfig(
        point_radius=7.0,
        centroid_radius=14.0,
        voronoi_step=24,
        auto_step_interval_frames=10,
        k_bounds=(0, 10),
        default_k=0,
    ),
}

DEFAULT_PRESET = "classic"


def get_preset(name: str) -> SimulationConfig:
    """Look up a preset by name."""
    try:
        return PRESETS[name]
    except KeyError:
        raise KeyError(f"Unknown preset '{name}'. Available: {', '.join(sorted(PRESETS))}") from None
