"""
Render replay of captured strokes.

Replays the pending capture and every finalized stroke against a draw
context. The context is anything implementing DrawContext; the Qt
widget passes a QPainter adapter, tests pass a recorder.
"""

from dataclasses import dataclass
from typing import Any, Optional, Protocol, Sequence

from ..config import Config
from .capture import WidgetState
from .stroke import Brush, DrawMode, Point


@dataclass(frozen=True)
class StrokeStyle:
    """Pen settings for outlined paths. Joins and caps are the context defaults."""
    width: float = Config.STROKE_WIDTH


class DrawContext(Protocol):
    """Drawing operations the host rendering context must provide."""

    def begin_path(self) -> Any: ...

    def move_to(self, path: Any, x: float, y: float) -> None: ...

    def line_to(self, path: Any, x: float, y: float) -> None: ...

    def close_path(self, path: Any) -> None: ...

    def stroke(self, path: Any, brush: Brush, style: StrokeStyle) -> None: ...

    def fill(self, path: Any, brush: Brush) -> None: ...


def draw_points(
    ctx: DrawContext,
    points: Sequence[Point],
    mode: DrawMode,
    brush: Brush,
    style: Optional[StrokeStyle] = None
) -> bool:
    """
    Draw one point sequence.

    Args:
        ctx: Draw context to paint into
        points: Points in capture order
        mode: LINE strokes the open path, FILL closes and fills it
        brush: Brush to paint with
        style: Stroke style for LINE mode (defaults to StrokeStyle())

    Returns:
        True if anything was drawn
    """
    if not points or mode == DrawMode.NONE:
        return False

    path = ctx.begin_path()
    first = points[0]
    ctx.move_to(path, first.x, first.y)
    for point in points[1:]:
        ctx.line_to(path, point.x, point.y)

    if mode == DrawMode.LINE:
        ctx.stroke(path, brush, style or StrokeStyle())
    else:
        ctx.close_path(path)
        ctx.fill(path, brush)
    return True


def replay(ctx: DrawContext, state: WidgetState, style: Optional[StrokeStyle] = None) -> int:
    """
    Paint the widget state: pending capture first, then strokes in insertion order.

    Returns:
        Number of point sequences drawn
    """
    drawn = 0

    pending = state.pending
    if pending is not None:
        if draw_points(ctx, pending, state.draw_mode, state.brushes.pending_brush(), style):
            drawn += 1

    for stroke in state.strokes:
        if draw_points(ctx, stroke.points, stroke.mode, stroke.brush, style):
            drawn += 1

    return drawn


__all__ = ['StrokeStyle', 'DrawContext', 'draw_points', 'replay']
