"""
Clustering Canvas
=================
Immediate-mode drawing of one frame of the playground.

The widget owns no algorithm state. Every paint reads the SimulationState it
was given: Voronoi tiles, grid, membership lines, points and centroids are
redrawn from scratch in that order.
"""
from __future__ import annotations

import logging
import math
from typing import Optional

from PySide6.QtCore import Qt, Signal, QPointF, QRectF
from PySide6.QtGui import QColor, QPainter, QPen, QFont, QMouseEvent, QPaintEvent, QResizeEvent
from PySide6.QtWidgets import QWidget

from kmeansplayground.model.clustering import Point
from kmeansplayground.model.state import SimulationState
from kmeansplayground.model.voronoi import voronoi_tiles
from kmeansplayground.view.themes import Theme, DARK

logger = logging.getLogger(__name__)

PULSE_SPEED = 0.08
RING_PADDING = 6.0


def _color(hex_or_rgb: str | tuple[int, int, int], alpha: int = 255) -> QColor:
    c = QColor(*hex_or_rgb) if isinstance(hex_or_rgb, tuple) else QColor(hex_or_rgb)
    c.setAlpha(alpha)
    return c


def _remap(value: float, lo: float, hi: float, out_lo: float, out_hi: float) -> float:
    return out_lo + (value - lo) * (out_hi - out_lo) / (hi - lo)


class KMeansCanvas(QWidget):
    """Draws the clustering state and turns left clicks into new points."""
    # Emitted after a click added a point (canvas coordinates)
    point_added = Signal(float, float)

    def __init__(self, state: SimulationState, theme: Theme = DARK, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.state = state
        self.theme = theme
        self._hover_pos: Optional[QPointF] = None

        self.setMouseTracking(True)
        self.setMinimumSize(320, 240)
        self.setCursor(Qt.CrossCursor)

    # --- PUBLIC API ---

    def set_theme(self, theme: Theme) -> None:
        self.theme = theme
        self.update()

    def is_hovered(self, point: Point) -> bool:
        if self._hover_pos is None:
            return False
        d = math.hypot(self._hover_pos.x() - point.x, self._hover_pos.y() - point.y)
        return d < self.state.config.hover_radius

    # --- QT EVENTS ---

    def resizeEvent(self, event: QResizeEvent) -> None:
        self.state.resize(self.width(), self.height())
        super().resizeEvent(event)

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.LeftButton:
            pos = event.position()
            self.state.add_point(pos.x(), pos.y())
            logger.debug(f"Point added at ({pos.x():.0f}, {pos.y():.0f}), total {self.state.point_count}")
            self.point_added.emit(pos.x(), pos.y())
            self.update()
            event.accept()
            return
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        self._hover_pos = event.position()
        super().mouseMoveEvent(event)

    def leaveEvent(self, event) -> None:
        self._hover_pos = None
        super().leaveEvent(event)

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing)
            painter.fillRect(self.rect(), _color(self.theme.background))

            # Order matters: Voronoi -> Grid -> Lines -> Points -> Centroids
            if self.state.centroids:
                self._draw_voronoi(painter)
            self._draw_grid(painter)
            self._draw_cluster_lines(painter)
            self._draw_points(painter)
            self._draw_centroids(painter)
            if not self.state.points:
                self._draw_hint(painter)
        finally:
            painter.end()

    # --- DRAWING ---

    def _draw_voronoi(self, painter: QPainter) -> None:
        tiles = voronoi_tiles(
            self.width(), self.height(), self.state.config.voronoi_step, self.state.centroid_positions()
        )
        painter.setPen(Qt.NoPen)
        colors = [_color(c, self.theme.voronoi_alpha) for c in self.theme.palette]
        step = float(tiles.step)
        for x, y, label in tiles:
            painter.fillRect(QRectF(x, y, step, step), colors[label % len(colors)])

    def _draw_grid(self, painter: QPainter) -> None:
        pen = QPen(_color(self.theme.grid))
        pen.setWidthF(1.5)
        painter.setPen(pen)
        spacing = self.state.config.grid_spacing
        w, h = self.width(), self.height()
        for x in range(0, w, spacing):
            painter.drawLine(x, 0, x, h)
        for y in range(0, h, spacing):
            painter.drawLine(0, y, w, y)

    def _draw_cluster_lines(self, painter: QPainter) -> None:
        for p in self.state.points:
            centroid = self.state.centroid_for(p)
            if centroid is None:
                continue
            pen = QPen(_color(self.theme.palette_color(p.cluster), self.theme.line_alpha))
            pen.setWidthF(1.0)
            painter.setPen(pen)
            painter.drawLine(QPointF(p.x, p.y), QPointF(centroid.position.x, centroid.position.y))

    def _draw_points(self, painter: QPainter) -> None:
        radius = self.state.config.point_radius
        for p in self.state.points:
            hovered = self.is_hovered(p)

            # A stale index draws as unassigned until the next assignment
            if self.state.centroid_for(p) is not None:
                fill = _color(self.theme.palette_color(p.cluster), self.theme.point_cluster_alpha)
            else:
                fill = _color(self.theme.point_default)

            r = radius * 0.75 if hovered else radius
            center = QPointF(p.x, p.y)

            # Soft glow (dark) or drop shadow (light)
            painter.setPen(Qt.NoPen)
            if self.theme.glow:
                halo = QColor(fill)
                halo.setAlpha(90 if hovered else 45)
                painter.setBrush(halo)
                painter.drawEllipse(center, r * 1.8, r * 1.8)
            else:
                painter.setBrush(QColor(0, 0, 0, 25))
                painter.drawEllipse(center + QPointF(0.0, 2.0), r + 1.0, r + 1.0)

            if self.theme.use_stroke:
                pen = QPen(QColor(255, 255, 255))
                pen.setWidthF(2.0)
                painter.setPen(pen)
            painter.setBrush(fill)
            painter.drawEllipse(center, r, r)

    def _draw_centroids(self, painter: QPainter) -> None:
        radius = self.state.config.centroid_radius
        wave = math.sin(self.state.frame_count * PULSE_SPEED)
        pulse = _remap(wave, -1.0, 1.0, 1.2, 1.6)
        pulse_alpha = int(_remap(wave, -1.0, 1.0, 20, 50))

        font = QFont(painter.font())
        font.setPointSize(11)
        font.setBold(True)

        for i, centroid in enumerate(self.state.centroids):
            color = _color(self.theme.palette_color(i))
            center = QPointF(centroid.position.x, centroid.position.y)

            # 1. Pulsing halo
            painter.setPen(Qt.NoPen)
            painter.setBrush(_color(self.theme.palette_color(i), pulse_alpha))
            painter.drawEllipse(center, radius * pulse, radius * pulse)

            # 2. Outer ring
            ring = QPen(color)
            ring.setWidthF(3.0 if self.theme.use_stroke else 2.5)
            painter.setPen(ring)
            painter.setBrush(Qt.NoBrush)
            painter.drawEllipse(center, radius + RING_PADDING / 2, radius + RING_PADDING / 2)

            # 3. Inner core
            if self.theme.use_stroke:
                core_pen = QPen(QColor(255, 255, 255))
                core_pen.setWidthF(2.0)
                painter.setPen(core_pen)
            else:
                painter.setPen(Qt.NoPen)
            painter.setBrush(color)
            painter.drawEllipse(center, radius, radius)

            # 4. Label (1-based)
            painter.setPen(QColor(255, 255, 255))
            painter.setFont(font)
            box = QRectF(center.x() - radius, center.y() - radius + 1, 2 * radius, 2 * radius)
            painter.drawText(box, Qt.AlignCenter, str(i + 1))

    def _draw_hint(self, painter: QPainter) -> None:
        painter.setPen(_color(self.theme.text, 140))
        painter.drawText(self.rect(), Qt.AlignCenter, self.tr("Click anywhere to add points"))
