"""
K-Means Core
============
The algorithmic heart of the playground: assignment, target update,
centroid animation and the convergence test.

All functions take the collections they work on explicitly; they never reach
for global state. Assignment and animation mutate the objects they are given,
target computation returns a fresh list.

Functions:
    nearest_centroid_indices: Nearest-site lookup shared with the Voronoi tiles.
    assign_clusters: Writes the nearest centroid index into every point.
    compute_centroid_targets: Mean of each cluster, random respawn when empty.
    animate_centroids: Eases every centroid position towards its target.
    has_converged: True when all centroids sit on their targets.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Optional, Sequence, TYPE_CHECKING

import numpy as np
from scipy.spatial.distance import cdist

from kmeansplayground.model.geometry_primitives import Vector, Rect

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


@dataclass
class Point:
    """A data point placed by the user. `cluster` is None while unassigned."""
    x: float
    y: float
    cluster: Optional[int] = None


@dataclass
class Centroid:
    """
    A cluster representative.

    `position` is what is drawn and what assignment measures against;
    `target` is the most recently computed location the position trails.
    """
    position: Vector
    target: Optional[Vector] = None

    @classmethod
    def at(cls, location: Vector) -> Centroid:
        """A centroid resting at `location` (target == position, separate copies)."""
        return cls(position=location.copy(), target=location.copy())


@dataclass
class ClusterStats:
    """Per-cluster accumulation used while computing new targets."""
    sum_x: list[float] = field(default_factory=list)
    sum_y: list[float] = field(default_factory=list)
    counts: list[int] = field(default_factory=list)

    @classmethod
    def empty(cls, k: int) -> ClusterStats:
        return cls(sum_x=[0.0] * k, sum_y=[0.0] * k, counts=[0] * k)

    def add(self, index: int, x: float, y: float) -> None:
        self.sum_x[index] += x
        self.sum_y[index] += y
        self.counts[index] += 1

    def mean(self, index: int) -> Optional[Vector]:
        n = self.counts[index]
        if n == 0:
            return None
        return Vector(self.sum_x[index] / n, self.sum_y[index] / n)


def _points_to_array(points: Sequence[Point]) -> npt.NDArray[np.float64]:
    return np.array([(p.x, p.y) for p in points], dtype=float).reshape(-1, 2)


def _vectors_to_array(vectors: Sequence[Vector]) -> npt.NDArray[np.float64]:
    return np.array([v.to_array() for v in vectors], dtype=float).reshape(-1, 2)


def nearest_centroid_indices(
        points_xy: npt.NDArray[np.float64],
        centroids_xy: npt.NDArray[np.float64]
) -> npt.NDArray[np.intp]:
    """
    Index of the nearest centroid for every point, by squared distance.

    Args:
        points_xy: (N, 2) array of point coordinates.
        centroids_xy: (K, 2) array of centroid coordinates, K >= 1.

    Returns:
        (N,) integer array. Exact ties go to the lowest centroid index,
        since argmin reports the first minimum.
    """
    d2 = cdist(points_xy, centroids_xy, metric="sqeuclidean")
    return np.argmin(d2, axis=1)


def assign_clusters(points: Sequence[Point], centroids: Sequence[Centroid]) -> None:
    """
    Assign every point to its nearest centroid (measured to `position`).

    With no centroids this is a no-op and every `cluster` is left untouched.
    """
    if not points or not centroids:
        return

    labels = nearest_centroid_indices(
        _points_to_array(points),
        _vectors_to_array([c.position for c in centroids])
    )
    for p, label in zip(points, labels):
        p.cluster = int(label)


def compute_centroid_targets(
        points: Sequence[Point],
        k: int,
        bounds: Rect,
        rng: np.random.Generator
) -> list[Vector]:
    """
    New target for each of the k clusters.

    A populated cluster targets the mean of its members. An empty cluster is
    respawned at a uniformly random location inside `bounds` so that it can
    pick up points again. Points that are unassigned, or whose index is not
    in [0, k), do not contribute.
    """
    stats = ClusterStats.empty(k)
    for p in points:
        if p.cluster is not None and 0 <= p.cluster < k:
            stats.add(p.cluster, p.x, p.y)

    targets: list[Vector] = []
    for i in range(k):
        mean = stats.mean(i)
        if mean is None:
            mean = bounds.random_point(rng)
            logger.debug(f"Cluster {i} is empty, respawning at ({mean.x:.1f}, {mean.y:.1f})")
        targets.append(mean)
    return targets


def animate_centroids(centroids: Sequence[Centroid], alpha: float = 0.1) -> None:
    """Move each position `alpha` of the remaining way towards its target."""
    for c in centroids:
        if c.target is None:
            continue
        c.position = c.position.lerp(c.target, alpha)


def has_converged(centroids: Sequence[Centroid], threshold: float = 1.0) -> bool:
    """True when every centroid is within `threshold` of its target."""
    for c in centroids:
        if c.target is None:
            continue
        if c.position.distance_to(c.target) > threshold:
            return False
    return True
