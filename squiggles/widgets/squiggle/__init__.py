"""
Qt helpers for the squiggle drawing area.

- qt_draw_context: QPainter implementation of the draw context
- decorations: caption and sample arcs
"""

from .qt_draw_context import QtDrawContext, to_qbrush, to_qcolor
from .decorations import draw_decorations, half_circle_path, caption_font

__all__ = [
    'QtDrawContext',
    'to_qbrush',
    'to_qcolor',
    'draw_decorations',
    'half_circle_path',
    'caption_font',
]
