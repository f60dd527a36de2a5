"""
Plane Renderer
==============
Draws the axes, vectors and rotation arcs onto a drawing surface.

Why is this file needed?
------------------------
The renderer only knows the `Surface` protocol, so the whole scene can be
recorded and checked without a running Qt application. The Qt-backed surface
lives in `view.widgets.plane_canvas`.
"""
from __future__ import annotations

import logging
from typing import Optional, Protocol, Sequence

from complexplane.config import (
    ARC_COLOR, ARC_DASH, ARC_FONT_SIZE, ARC_LABEL_COLOR, AXIS_COLOR, AXIS_FONT_SIZE,
    AXIS_LABEL_COLOR, LABEL_DROP, LABEL_FONT_SIZE, LABEL_OFFSET, MIN_ARC_RADIUS,
    TICK_HALF_LENGTH, VECTOR_WIDTH,
)
from complexplane.model.formatting import format_degrees
from complexplane.model.geometry import (
    Point, ViewTransform, arc_label_position, arc_points, arrowhead,
)

logger = logging.getLogger(__name__)


class Surface(Protocol):
    """Minimal immediate-mode drawing API, in pixel coordinates."""
    width: int
    height: int

    def clear(self) -> None: ...

    def line(self, start: Point, end: Point, color: str, width: float = 1.0) -> None: ...

    def polyline(self, points: Sequence[Point], color: str, width: float = 1.0,
                 dash: Optional[tuple[float, float]] = None) -> None: ...

    def text(self, position: Point, text: str, color: str, font_size: int) -> None:
        """Draw `text` with its baseline starting at `position`."""
        ...

    def text_width(self, text: str, font_size: int) -> float: ...


class PlaneRenderer:
    def __init__(self, surface: Surface, transform: ViewTransform | None = None) -> None:
        self.surface = surface
        self.transform = transform or ViewTransform(width=surface.width, height=surface.height)

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def redraw(self) -> None:
        """Start a new scene: clear the whole surface and draw bare axes."""
        self.surface.clear()
        self.draw_axes()

    def draw_axes(self) -> None:
        s = self.surface
        t = self.transform
        cx, cy = t.center

        s.line((0, cy), (t.width, cy), AXIS_COLOR)
        s.line((cx, 0), (cx, t.height), AXIS_COLOR)

        for i in t.tick_range_x():
            if i == 0:
                continue
            px, _ = t.to_pixel(i, 0)
            s.text((px - 3, cy + 12), str(i), AXIS_LABEL_COLOR, AXIS_FONT_SIZE)
            s.line((px, cy - TICK_HALF_LENGTH), (px, cy + TICK_HALF_LENGTH), AXIS_COLOR)

        for i in t.tick_range_y():
            if i == 0:
                continue
            _, py = t.to_pixel(0, i)
            s.text((cx + 5, py + 3), f"{i}i", AXIS_LABEL_COLOR, AXIS_FONT_SIZE)
            s.line((cx - TICK_HALF_LENGTH, py), (cx + TICK_HALF_LENGTH, py), AXIS_COLOR)

        s.text((t.width - 15, cy + 12), "Re", AXIS_LABEL_COLOR, AXIS_FONT_SIZE)
        s.text((cx + 5, 12), "Im", AXIS_LABEL_COLOR, AXIS_FONT_SIZE)

    def draw_vector(self, x: float, y: float, color: str, label: str | None = None) -> None:
        """
        Draw an arrow from the origin to (x, y) with an optional label.

        The label sits up-right of the tip and flips left when x < 0 and
        below when y < 0, so it does not cover the shaft.
        """
        s = self.surface
        origin = self.transform.center
        tip = self.transform.to_pixel(x, y)

        s.line(origin, tip, color, VECTOR_WIDTH)
        left, right = arrowhead(origin, tip)
        s.line(tip, left, color, VECTOR_WIDTH)
        s.line(tip, right, color, VECTOR_WIDTH)

        if label:
            label_x = tip[0] + LABEL_OFFSET
            label_y = tip[1] - LABEL_OFFSET
            if x < 0:
                label_x = tip[0] - LABEL_OFFSET - s.text_width(label, LABEL_FONT_SIZE)
            if y < 0:
                label_y = tip[1] + LABEL_DROP
            s.text((label_x, label_y), label, color, LABEL_FONT_SIZE)

        logger.debug(f"Vector drawn to ({x:g}, {y:g}) in {color}")

    def draw_rotation_arc(self, angle_rad: float, radius: float) -> None:
        """
        Draw a dashed arc of `radius` plane units sweeping `angle_rad` from the
        positive real axis, labelled with the angle in degrees.

        Nothing is drawn for radius <= 0.01. Sweeps beyond one full turn are
        drawn as a full circle; the label keeps the whole angle.
        """
        if radius <= MIN_ARC_RADIUS:
            return
        radius_px = radius * self.transform.scale
        center = self.transform.center

        pts = self.transform.to_pixels(arc_points(angle_rad, radius))
        self.surface.polyline([(float(px), float(py)) for px, py in pts], ARC_COLOR, 1.0, dash=ARC_DASH)

        self.surface.text(
            arc_label_position(angle_rad, radius_px, center),
            format_degrees(angle_rad),
            ARC_LABEL_COLOR,
            ARC_FONT_SIZE,
        )
