"""
Stroke data types.

Plain immutable records shared by the capture state machine, the brush
factory and the render replay. Nothing here depends on Qt.
"""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Tuple, Union


class Point(NamedTuple):
    """(x, y) in widget-local coordinates."""
    x: float
    y: float


class DrawMode(Enum):
    """How a point sequence is rendered."""
    NONE = 0   # Not drawing
    LINE = 1   # Open stroked path
    FILL = 2   # Closed filled path


@dataclass(frozen=True)
class SolidBrush:
    """Single colour, normalized RGBA."""
    r: float
    g: float
    b: float
    a: float = 1.0


@dataclass(frozen=True)
class GradientStop:
    """Colour stop of a linear gradient. pos is in 0-1."""
    pos: float
    r: float
    g: float
    b: float
    a: float = 1.0


@dataclass(frozen=True)
class GradientBrush:
    """
    Linear gradient from (x0, y0) to (x1, y1).

    Attributes:
        x0, y0: Start of the gradient line in widget coordinates
        x1, y1: End of the gradient line in widget coordinates
        stops: Colour stops ordered by position
    """
    x0: float
    y0: float
    x1: float
    y1: float
    stops: Tuple[GradientStop, ...]


Brush = Union[SolidBrush, GradientBrush]


@dataclass(frozen=True)
class Stroke:
    """
    A finalized line.

    Attributes:
        points: Captured points in order, never empty
        mode: LINE or FILL
        brush: Brush the stroke is painted with
    """
    points: Tuple[Point, ...]
    mode: DrawMode
    brush: Brush

    def __post_init__(self):
        if not self.points:
            raise ValueError("Stroke needs at least one point")

    def __len__(self) -> int:
        return len(self.points)


__all__ = [
    'Point',
    'DrawMode',
    'SolidBrush',
    'GradientStop',
    'GradientBrush',
    'Brush',
    'Stroke',
]
