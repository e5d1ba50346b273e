"""
Colour themes for the canvas.

Plain data only (hex strings and alpha values), so it can be used and tested
without a running QApplication. The canvas turns these into QColors.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class ThemeName(StrEnum):
    DARK = "dark"
    LIGHT = "light"


@dataclass(frozen=True)
class Theme:
    name: ThemeName
    background: str
    grid: str
    text: str
    point_default: tuple[int, int, int]
    point_cluster_alpha: int
    voronoi_alpha: int
    line_alpha: int
    glow: bool          # glow in the point colour instead of a drop shadow
    use_stroke: bool    # white outline around points and centroid cores
    palette: tuple[str, ...]

    def palette_color(self, index: int) -> str:
        return self.palette[index % len(self.palette)]


DARK = Theme(
    name=ThemeName.DARK,
    background="#0f172a",
    grid="#1e293b",
    text="#f8fafc",
    point_default=(148, 163, 184),
    point_cluster_alpha=200,
    voronoi_alpha=15,
    line_alpha=50,
    glow=True,
    use_stroke=False,
    palette=(
        "#22d3ee",  # cyan
        "#f472b6",  # pink
        "#a3e635",  # lime
        "#facc15",  # yellow
        "#c084fc",  # purple
        "#fb7185",  # rose
        "#38bdf8",  # sky
        "#34d399",  # emerald
        "#818cf8",  # indigo
        "#fbbf24",  # amber
    ),
)

LIGHT = Theme(
    name=ThemeName.LIGHT,
    background="#ffffff",
    grid="#cbd5e1",
    text="#1e293b",
    point_default=(203, 213, 225),
    point_cluster_alpha=220,
    voronoi_alpha=20,
    line_alpha=50,
    glow=False,
    use_stroke=True,
    palette=(
        "#0ea5e9",
        "#ec4899",
        "#84cc16",
        "#f59e0b",
        "#a855f7",
        "#f43f5e",
        "#06b6d4",
        "#10b981",
        "#6366f1",
        "#ea580c",
    ),
)

THEMES: dict[ThemeName, Theme] = {DARK.name: DARK, LIGHT.name: LIGHT}


def other_theme(theme: Theme) -> Theme:
    """The theme a toggle switches to."""
    return LIGHT if theme.name is ThemeName.DARK else DARK
