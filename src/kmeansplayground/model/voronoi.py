"""
Coarse Voronoi partition of the canvas.

The plane is cut into square tiles and every tile is labelled with the
centroid nearest to its centre. Drawing one rectangle per tile is cheap
enough to redo every frame while the centroids are moving.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, TYPE_CHECKING

import numpy as np

from kmeansplayground.model.clustering import nearest_centroid_indices
from kmeansplayground.model.geometry_primitives import Vector

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass
class VoronoiTiles:
    """
    Tile grid for one frame.

    Attributes:
        xs: Left edge of every tile column.
        ys: Top edge of every tile row.
        step: Tile edge length.
        labels: (len(ys), len(xs)) centroid index per tile; empty if there
            are no centroids.
    """
    xs: npt.NDArray[np.float64]
    ys: npt.NDArray[np.float64]
    step: int
    labels: npt.NDArray[np.intp]

    @property
    def is_empty(self) -> bool:
        return self.labels.size == 0

    def __iter__(self):
        """Yield (x, y, label) for every tile, row by row."""
        if self.is_empty:
            return
        for row, y in enumerate(self.ys):
            for col, x in enumerate(self.xs):
                yield float(x), float(y), int(self.labels[row, col])


def voronoi_tiles(width: float, height: float, step: int, centroids: Sequence[Vector]) -> VoronoiTiles:
    """
    Label each `step` x `step` tile covering a width x height canvas.

    Ties between equidistant centroids go to the lowest index.
    """
    xs = np.arange(0, max(width, 0), step, dtype=float)
    ys = np.arange(0, max(height, 0), step, dtype=float)

    if len(centroids) == 0 or xs.size == 0 or ys.size == 0:
        return VoronoiTiles(xs=xs, ys=ys, step=step, labels=np.empty((0, 0), dtype=np.intp))

    cx, cy = np.meshgrid(xs + step / 2, ys + step / 2)
    centres = np.column_stack([cx.ravel(), cy.ravel()])
    sites = np.array([c.to_array() for c in centroids], dtype=float)

    labels = nearest_centroid_indices(centres, sites).reshape(ys.size, xs.size)
    return VoronoiTiles(xs=xs, ys=ys, step=step, labels=labels)
