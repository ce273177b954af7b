"""
Input capture state machine for the drawing area.

Turns host mouse events into point sequences:

    Idle --down(button)--> Capturing(mode)
    Capturing --move(x, y)--> Capturing (point appended)
    Capturing --up(button)--> Idle (capture finalized into a Stroke)

Button 1 draws an open line, buttons 2 and 3 draw a filled shape, any
other button is ignored. The capture state is a tagged variant, so a
pending point list exists exactly while a mode is active.
"""

import logging
from dataclasses import dataclass, field
from typing import List, NamedTuple, Optional, Tuple, Union

from ..config import Config
from .brush_factory import BrushFactory
from .stroke import DrawMode, Point, Stroke

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Idle:
    """No mouse button held."""


@dataclass
class Capturing:
    """
    A stroke is being drawn.

    Attributes:
        mode: LINE or FILL
        button: Button number that started the capture
        points: Points captured so far
    """
    mode: DrawMode
    button: int
    points: List[Point] = field(default_factory=list)


CaptureState = Union[Idle, Capturing]

IDLE = Idle()


class MouseResult(NamedTuple):
    """What a mouse event did to the widget state."""
    redraw: bool = False
    started: bool = False
    finished: bool = False
    stroke: Optional[Stroke] = None


def mode_for_button(button: int) -> DrawMode:
    """Map a host button number to a draw mode (NONE = ignored)."""
    if button in Config.LINE_BUTTONS:
        return DrawMode.LINE
    if button in Config.FILL_BUTTONS:
        return DrawMode.FILL
    return DrawMode.NONE


class WidgetState:
    """
    Pending capture plus finalized strokes of one drawing area.

    Strokes are kept in insertion order, which is also paint order.
    All methods are called from the GUI thread only.
    """

    def __init__(self, brush_factory: Optional[BrushFactory] = None):
        self._capture: CaptureState = IDLE
        self._strokes: List[Stroke] = []
        self._brushes = brush_factory or BrushFactory()
        self._released = False

    # ==================== Properties ====================

    @property
    def capture(self) -> CaptureState:
        return self._capture

    @property
    def draw_mode(self) -> DrawMode:
        if isinstance(self._capture, Capturing):
            return self._capture.mode
        return DrawMode.NONE

    @property
    def pending(self) -> Optional[Tuple[Point, ...]]:
        """Snapshot of the pending points, None while idle."""
        if isinstance(self._capture, Capturing):
            return tuple(self._capture.points)
        return None

    @property
    def strokes(self) -> Tuple[Stroke, ...]:
        return tuple(self._strokes)

    @property
    def brushes(self) -> BrushFactory:
        return self._brushes

    @property
    def released(self) -> bool:
        return self._released

    # ==================== Mouse Events ====================

    def on_mouse(self, down: int, up: int, x: float, y: float) -> MouseResult:
        """
        Handle one host mouse event.

        Args:
            down: Number of the button pressed by this event, 0 if none
            up: Number of the button released by this event, 0 if none
            x, y: Pointer position in widget coordinates

        Returns:
            MouseResult telling the caller whether to redraw and whether a
            capture started or finished
        """
        if self._released:
            logger.debug("Mouse event after release ignored")
            return MouseResult()

        started = False
        finished = False
        stroke = None

        if down > 0:
            mode = mode_for_button(down)
            if mode == DrawMode.NONE:
                return MouseResult()
            if isinstance(self._capture, Capturing):
                # Second button while drawing, keep the current capture as is
                return MouseResult()
            self._capture = Capturing(mode, down, self._new_point_buffer())
            started = True
            logger.debug(f"Capture started: {mode.name} (button {down})")

        if up > 0:
            if isinstance(self._capture, Capturing) and up == self._capture.button:
                stroke = self._finalize()
                finished = True
            elif not started:
                return MouseResult()

        if isinstance(self._capture, Capturing):
            self._append_point(Point(float(x), float(y)))
            return MouseResult(True, started, finished, stroke)

        return MouseResult(finished, started, finished, stroke)

    def mouse_down(self, button: int, x: float, y: float) -> MouseResult:
        return self.on_mouse(button, 0, x, y)

    def mouse_move(self, x: float, y: float) -> MouseResult:
        return self.on_mouse(0, 0, x, y)

    def mouse_up(self, button: int, x: float = 0.0, y: float = 0.0) -> MouseResult:
        """Release of button. The release position is not recorded, so x and y are ignored."""
        return self.on_mouse(0, button, x, y)

    # ==================== Capture ====================

    def _new_point_buffer(self) -> List[Point]:
        """Factory for the point list of a new capture."""
        return []

    def _append_point(self, point: Point):
        """Append to the pending capture; the point is dropped if memory runs out."""
        try:
            self._capture.points.append(point)
        except MemoryError:
            logger.warning(f"Out of memory, dropped point ({point.x}, {point.y})")

    def _finalize(self) -> Optional[Stroke]:
        """Turn the pending capture into a stroke and return to Idle."""
        capture = self._capture
        self._capture = IDLE

        if not capture.points:
            logger.debug("Empty capture discarded")
            return None

        points = tuple(capture.points)
        stroke = Stroke(points, capture.mode, self._brushes.brush_for(capture.mode, points))
        try:
            self._strokes.append(stroke)
        except MemoryError:
            logger.warning("Out of memory, dropped finished stroke")
            return None

        logger.debug(f"Stroke {len(self._strokes)} finished: {capture.mode.name}, {len(points)} points")
        return stroke

    # ==================== Lifecycle ====================

    def clear(self) -> int:
        """
        Drop every stroke and any pending capture.

        Returns:
            Number of point sequences dropped
        """
        count = len(self._strokes)
        if isinstance(self._capture, Capturing):
            count += 1
        self._strokes.clear()
        self._capture = IDLE
        return count

    def release(self) -> int:
        """
        Release all owned point sequences. Only the first call does anything.

        Returns:
            Number of point sequences released (0 on repeated calls)
        """
        if self._released:
            return 0
        count = self.clear()
        self._released = True
        logger.debug(f"Widget state released ({count} point sequences)")
        return count


__all__ = [
    'Idle',
    'Capturing',
    'CaptureState',
    'IDLE',
    'MouseResult',
    'WidgetState',
    'mode_for_button',
]
