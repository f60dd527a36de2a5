"""
Plane Canvas
Qt drawing surface for the complex plane: a QImage painted with QPainter and
shown by a fixed-size widget.
"""
from __future__ import annotations

from typing import Optional, Sequence

from PySide6.QtCore import QPointF, QSize
from PySide6.QtGui import QColor, QFont, QFontMetricsF, QImage, QPainter, QPen, QPolygonF
from PySide6.QtWidgets import QSizePolicy, QWidget

from complexplane.config import CANVAS_HEIGHT, CANVAS_WIDTH
from complexplane.model.geometry import Point


def _font(font_size: int) -> QFont:
    font = QFont()
    font.setStyleHint(QFont.SansSerif)
    font.setPixelSize(font_size)
    return font


class QPainterSurface:
    """Implements the renderer's `Surface` protocol on an offscreen QImage."""

    def __init__(self, width: int = CANVAS_WIDTH, height: int = CANVAS_HEIGHT,
                 background: str = "white") -> None:
        self.width = width
        self.height = height
        self.background = QColor(background)
        self.image = QImage(width, height, QImage.Format_ARGB32_Premultiplied)
        self.image.fill(self.background)

    def _painter(self, color: str, width: float, dash: Optional[tuple[float, float]] = None) -> QPainter:
        painter = QPainter(self.image)
        painter.setRenderHint(QPainter.Antialiasing, True)
        pen = QPen(QColor(color))
        pen.setWidthF(width)
        if dash:
            # QPen dash pattern is expressed in units of the pen width
            pen.setDashPattern([d / width for d in dash])
        painter.setPen(pen)
        return painter

    def clear(self) -> None:
        self.image.fill(self.background)

    def line(self, start: Point, end: Point, color: str, width: float = 1.0) -> None:
        painter = self._painter(color, width)
        try:
            painter.drawLine(QPointF(*start), QPointF(*end))
        finally:
            painter.end()

    def polyline(self, points: Sequence[Point], color: str, width: float = 1.0,
                 dash: Optional[tuple[float, float]] = None) -> None:
        painter = self._painter(color, width, dash)
        try:
            painter.drawPolyline(QPolygonF([QPointF(x, y) for x, y in points]))
        finally:
            painter.end()

    def text(self, position: Point, text: str, color: str, font_size: int) -> None:
        painter = self._painter(color, 1.0)
        try:
            painter.setFont(_font(font_size))
            painter.drawText(QPointF(*position), text)
        finally:
            painter.end()

    def text_width(self, text: str, font_size: int) -> float:
        return QFontMetricsF(_font(font_size)).horizontalAdvance(text)


class PlaneCanvas(QWidget):
    """Fixed-size widget showing the image of a `QPainterSurface`."""

    def __init__(self, surface: QPainterSurface | None = None, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.surface = surface or QPainterSurface()
        self.setFixedSize(self.surface.width, self.surface.height)
        self.setSizePolicy(QSizePolicy.Fixed, QSizePolicy.Fixed)

    def sizeHint(self) -> QSize:
        return QSize(self.surface.width, self.surface.height)

    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        try:
            painter.drawImage(0, 0, self.surface.image)
            painter.setPen(QColor("#ddd"))
            painter.drawRect(self.rect().adjusted(0, 0, -1, -1))
        finally:
            painter.end()
