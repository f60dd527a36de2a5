from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from complexplane.config import (
    ARROW_LENGTH, ARROW_SPREAD, ARC_SEGMENTS_PER_TURN, CANVAS_HEIGHT, CANVAS_WIDTH, SCALE,
)

if TYPE_CHECKING:
    import numpy.typing as npt

Point = tuple[float, float]


@dataclass(frozen=True)
class ViewTransform:
    """
    Maps plane coordinates to pixel coordinates of the drawing surface.

    The origin sits at the centre of the surface and the imaginary axis is
    inverted, because pixel rows grow downwards.
    """
    width: int = CANVAS_WIDTH
    height: int = CANVAS_HEIGHT
    scale: float = SCALE

    @property
    def center(self) -> Point:
        return self.width / 2, self.height / 2

    def to_pixel(self, x: float, y: float) -> Point:
        cx, cy = self.center
        return cx + x * self.scale, cy - y * self.scale

    def to_pixels(self, points: npt.ArrayLike) -> np.ndarray:
        """Vectorised `to_pixel` for an (N, 2) array of plane points."""
        pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
        cx, cy = self.center
        return np.c_[cx + pts[:, 0] * self.scale, cy - pts[:, 1] * self.scale]

    def tick_range_x(self) -> range:
        """Integer ticks that fit on the real axis, origin included."""
        n = math.floor(self.center[0] / self.scale)
        return range(-n, n + 1)

    def tick_range_y(self) -> range:
        n = math.floor(self.center[1] / self.scale)
        return range(-n, n + 1)


def arrowhead(tail: Point, tip: Point, length: float = ARROW_LENGTH,
              spread: float = ARROW_SPREAD) -> tuple[Point, Point]:
    """
    End points of the two short strokes forming an arrowhead at `tip`.

    Both points are in pixel coordinates. The strokes leave the tip at
    ±`spread` from the direction pointing back along the shaft.
    """
    angle = math.atan2(tip[1] - tail[1], tip[0] - tail[0])
    left = (tip[0] - length * math.cos(angle - spread), tip[1] - length * math.sin(angle - spread))
    right = (tip[0] - length * math.cos(angle + spread), tip[1] - length * math.sin(angle + spread))
    return left, right


def arc_points(
    angle_rad: float,
    radius: float,
    segments_per_turn: int = ARC_SEGMENTS_PER_TURN
) -> np.ndarray:
    """
    Discretize the rotation arc into an (N, 2) polyline in plane coordinates.

    The arc starts on the positive real axis and sweeps `angle_rad`,
    counter-clockwise for positive angles and clockwise for negative ones.
    The sweep is capped at one full turn, so the point count stays bounded
    for any finite angle.

    Args:
        angle_rad: Rotation angle in radians (mathematical convention).
        radius: Arc radius in plane units.
        segments_per_turn: Resolution of a full 2π sweep.

    Returns:
        An array of shape (n, 2), 3 <= n <= segments_per_turn + 1.
    """
    sweep = math.copysign(min(abs(angle_rad), 2.0 * math.pi), angle_rad)
    n_segments = max(2, math.ceil(abs(sweep) / (2.0 * math.pi) * segments_per_turn))
    theta = np.linspace(0.0, sweep, n_segments + 1)
    return np.c_[radius * np.cos(theta), radius * np.sin(theta)]


def arc_label_position(angle_rad: float, radius_px: float, center: Point) -> Point:
    """Label anchor at the angular midpoint of the arc, half way out."""
    cx, cy = center
    label_radius = radius_px * 0.5
    label_angle = angle_rad / 2
    return cx + label_radius * math.cos(label_angle), cy - label_radius * math.sin(label_angle)
