"""
Simulation State (Data Model)
=============================
This module defines the single mutable state block of a running playground.

Why is this file needed?
------------------------
1. State Management: points, centroids, k and the auto-mode flag live in one
   object owned by the main window and handed to the canvas every frame.
2. Transitions: reset / restart / k changes are methods here, so the UI only
   forwards user intent and never edits collections directly.
3. Decoupling: the view reads from this object; it has no knowledge of Qt.

Classes:
    Phase: Lifecycle of the state (uninitialized / ready).
    SimulationState: The main container class.
"""
from __future__ import annotations

from dataclasses import dataclass, field, InitVar
from enum import StrEnum
import logging
from typing import Optional

import numpy as np

from kmeansplayground.config import SimulationConfig
from kmeansplayground.model.clustering import (
    Point, Centroid, assign_clusters, compute_centroid_targets, animate_centroids, has_converged
)
from kmeansplayground.model.geometry_primitives import Vector, Rect
from kmeansplayground.utils import clamp

logger = logging.getLogger(__name__)


class Phase(StrEnum):
    UNINITIALIZED = "uninitialized"
    READY = "ready"


@dataclass
class SimulationState:
    """
    Everything the algorithm and the renderer need for one session.
    Pass this instance to the canvas and the controls.
    """
    config: SimulationConfig = field(default_factory=SimulationConfig)
    bounds: Rect = field(default_factory=lambda: Rect(0.0, 0.0, 800.0, 600.0))
    rng: np.random.Generator = field(default_factory=np.random.default_rng)

    points: list[Point] = field(default_factory=list)
    centroids: list[Centroid] = field(default_factory=list)
    k: int = field(init=False)
    auto_mode: bool = False
    frame_count: int = 0
    phase: Phase = Phase.UNINITIALIZED

    # Requested cluster count; None means the preset's default_k.
    initial_k: InitVar[Optional[int]] = None

    def __post_init__(self, initial_k: Optional[int]) -> None:
        if initial_k is None:
            self.k = self.config.default_k
        else:
            self.k = clamp(int(initial_k), self.config.k_min, self.config.k_max)

    # --- Read-only views used by rendering ---

    @property
    def point_count(self) -> int:
        return len(self.points)

    @property
    def spawn_area(self) -> Rect:
        """Inset rectangle in which centroids are (re)spawned."""
        return self.bounds.inset(self.config.inset_fraction)

    @property
    def is_converged(self) -> bool:
        return has_converged(self.centroids, self.config.convergence_threshold)

    def centroid_positions(self) -> list[Vector]:
        return [c.position for c in self.centroids]

    def centroid_for(self, point: Point) -> Optional[Centroid]:
        """The centroid a point belongs to, or None when unassigned or stale."""
        if point.cluster is None or not 0 <= point.cluster < len(self.centroids):
            return None
        return self.centroids[point.cluster]

    # --- Transitions ---

    def initialize(self) -> None:
        """
        Draw a fresh set of k centroids and unassign every point.

        Points are kept. Each centroid starts at rest (target == position).
        """
        for p in self.points:
            p.cluster = None

        area = self.spawn_area
        self.centroids = [Centroid.at(area.random_point(self.rng)) for _ in range(self.k)]

        if self.phase is Phase.UNINITIALIZED:
            logger.info(f"Simulation initialized with k={self.k}.")
        else:
            logger.debug(f"Centroids re-initialized (k={self.k}, points={self.point_count}).")
        self.phase = Phase.READY

    # Re-initialization is the same transition once the state is ready
    reinitialize = initialize

    def restart(self) -> None:
        """Keep the points, draw new centroids and colour the points straight away."""
        self.reinitialize()
        self.assign()

    def reset(self) -> None:
        """Drop all points and return k to its default. Auto mode is kept."""
        self.points = []
        self.k = self.config.default_k
        self.reinitialize()
        logger.info("Simulation state has been reset.")

    def set_k(self, value: int) -> bool:
        """
        Change the number of clusters, clamped to the configured bounds.

        Returns:
            True if k actually changed (and the centroids were redrawn).
        """
        value = clamp(value, self.config.k_min, self.config.k_max)
        if value == self.k:
            return False
        self.k = value
        self.restart()
        return True

    def increment_k(self) -> bool:
        return self.set_k(self.k + 1)

    def decrement_k(self) -> bool:
        return self.set_k(self.k - 1)

    def add_point(self, x: float, y: float) -> Point:
        """Append a new point and immediately assign it."""
        point = Point(x, y)
        self.points.append(point)
        self.assign()
        return point

    def set_auto(self, enabled: bool) -> None:
        if enabled != self.auto_mode:
            self.auto_mode = enabled
            logger.debug(f"Auto mode {'on' if enabled else 'off'}.")

    def toggle_auto(self) -> bool:
        self.set_auto(not self.auto_mode)
        return self.auto_mode

    def resize(self, width: float, height: float) -> None:
        """Follow the canvas size. Existing centroids stay where they are."""
        self.bounds = Rect(0.0, 0.0, float(width), float(height))

    # --- Algorithm ---

    def assign(self) -> None:
        assign_clusters(self.points, self.centroids)

    def step(self) -> bool:
        """
        One k-means iteration: assignment, then new targets.

        Returns:
            False when there are no points to cluster (nothing happens).
        """
        if not self.points:
            return False

        self.assign()
        targets = compute_centroid_targets(self.points, self.k, self.spawn_area, self.rng)
        for centroid, target in zip(self.centroids, targets):
            centroid.target = target
        return True

    def animate(self) -> None:
        animate_centroids(self.centroids, self.config.interpolation_factor)

    def advance_frame(self) -> bool:
        """
        Per-frame hook driven by the render loop.

        Steps every `auto_step_interval_frames` frames while auto mode is on,
        then eases the centroids. Returns whether a step happened.
        """
        self.frame_count += 1
        stepped = False
        if self.auto_mode and self.frame_count % self.config.auto_step_interval_frames == 0:
            stepped = self.step()
        self.animate()
        return stepped
