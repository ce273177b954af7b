"""
Caption and sample arcs painted above the strokes.

Purely cosmetic: a centred caption line with an outlined and a filled
half circle underneath it.
"""

from PyQt6.QtCore import Qt, QRectF
from PyQt6.QtGui import QBrush, QFont, QFontMetricsF, QPainter, QPainterPath, QPen
from PyQt6.QtWidgets import QApplication

from ...config import Config
from .qt_draw_context import to_qcolor


def caption_font() -> QFont:
    """Application font at caption size."""
    font = QFont(QApplication.font())
    font.setPointSize(Config.CAPTION_FONT_SIZE)
    return font


def half_circle_path(center_x: float, center_y: float, radius: float) -> QPainterPath:
    """Lower half of a circle, from the right-hand point round to the left."""
    rect = QRectF(center_x - radius, center_y - radius, radius * 2, radius * 2)
    path = QPainterPath()
    path.arcMoveTo(rect, 0)
    path.arcTo(rect, 0, -180)
    return path


def draw_decorations(painter: QPainter, width: float) -> float:
    """
    Paint the caption and the two half circles.

    Args:
        painter: Active painter on the drawing area
        width: Width of the drawing area

    Returns:
        Height of the caption text
    """
    color = to_qcolor(*Config.DECORATION_COLOR)
    font = caption_font()
    text_height = QFontMetricsF(font).height()

    painter.save()
    painter.setFont(font)
    painter.setPen(QPen(color))
    painter.drawText(
        QRectF(0, 0, width, text_height),
        Qt.AlignmentFlag.AlignHCenter | Qt.AlignmentFlag.AlignTop,
        Config.CAPTION_TEXT
    )

    radius = Config.ARC_RADIUS
    center_y = text_height + radius
    outline = half_circle_path(width / 2 - Config.ARC_OFFSET, center_y, radius)
    painter.strokePath(outline, QPen(color, Config.STROKE_WIDTH))

    filled = half_circle_path(width / 2 + Config.ARC_OFFSET, center_y, radius)
    painter.fillPath(filled, QBrush(color))
    painter.restore()

    return text_height


__all__ = ['draw_decorations', 'half_circle_path', 'caption_font']
