"""
QPainter adapter for the render replay.

Implements the DrawContext operations with QPainterPath, QPen and QBrush.
"""

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QBrush, QColor, QLinearGradient, QPainter, QPainterPath, QPen

from ...core.render import StrokeStyle
from ...core.stroke import Brush, GradientBrush, SolidBrush


def to_qcolor(r: float, g: float, b: float, a: float = 1.0) -> QColor:
    """Normalized RGBA to QColor."""
    return QColor.fromRgbF(r, g, b, a)


def to_qbrush(brush: Brush) -> QBrush:
    """
    Convert a brush descriptor to a QBrush.

    Args:
        brush: SolidBrush or GradientBrush

    Returns:
        QBrush with a solid colour or a linear gradient
    """
    if isinstance(brush, SolidBrush):
        return QBrush(to_qcolor(brush.r, brush.g, brush.b, brush.a))

    if isinstance(brush, GradientBrush):
        gradient = QLinearGradient(brush.x0, brush.y0, brush.x1, brush.y1)
        for stop in brush.stops:
            gradient.setColorAt(stop.pos, to_qcolor(stop.r, stop.g, stop.b, stop.a))
        return QBrush(gradient)

    raise TypeError(f"Unsupported brush: {type(brush).__name__}")


class QtDrawContext:
    """Draw context backed by an active QPainter."""

    def __init__(self, painter: QPainter):
        self._painter = painter

    @property
    def painter(self) -> QPainter:
        return self._painter

    def begin_path(self) -> QPainterPath:
        path = QPainterPath()
        path.setFillRule(Qt.FillRule.WindingFill)
        return path

    def move_to(self, path: QPainterPath, x: float, y: float):
        path.moveTo(x, y)

    def line_to(self, path: QPainterPath, x: float, y: float):
        path.lineTo(x, y)

    def close_path(self, path: QPainterPath):
        path.closeSubpath()

    def stroke(self, path: QPainterPath, brush: Brush, style: StrokeStyle):
        pen = QPen(to_qbrush(brush), style.width)
        self._painter.strokePath(path, pen)

    def fill(self, path: QPainterPath, brush: Brush):
        self._painter.fillPath(path, to_qbrush(brush))


__all__ = ['QtDrawContext', 'to_qbrush', 'to_qcolor']
