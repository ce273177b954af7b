"""
Drawing core, independent of Qt.

- stroke: Point, DrawMode, brush descriptors, Stroke
- brush_factory: solid and pastel gradient brushes
- capture: mouse-driven capture state machine
- render: replay of strokes against a draw context
"""

from .stroke import (
    Point, DrawMode, SolidBrush, GradientStop, GradientBrush, Brush, Stroke
)
from .brush_factory import BrushFactory
from .capture import (
    Idle, Capturing, CaptureState, IDLE, MouseResult, WidgetState, mode_for_button
)
from .render import StrokeStyle, DrawContext, draw_points, replay

__all__ = [
    # Data types
    'Point',
    'DrawMode',
    'SolidBrush',
    'GradientStop',
    'GradientBrush',
    'Brush',
    'Stroke',
    # Brushes
    'BrushFactory',
    # Capture
    'Idle',
    'Capturing',
    'CaptureState',
    'IDLE',
    'MouseResult',
    'WidgetState',
    'mode_for_button',
    # Rendering
    'StrokeStyle',
    'DrawContext',
    'draw_points',
    'replay',
]
