"""
SquiggleArea - freehand drawing area

Left button drags draw open lines, middle/right button drags draw filled
shapes. Finished strokes are kept and repainted in the order they were
drawn.
"""

import logging
from typing import Optional, Tuple

from PyQt6.QtWidgets import QSizePolicy, QWidget
from PyQt6.QtCore import Qt, pyqtSignal, QSize
from PyQt6.QtGui import QPainter

from ..config import Config
from ..core.brush_factory import BrushFactory
from ..core.capture import MouseResult, WidgetState
from ..core.render import StrokeStyle, replay
from ..core.stroke import DrawMode, Stroke
from .squiggle.decorations import draw_decorations
from .squiggle.qt_draw_context import QtDrawContext

logger = logging.getLogger(__name__)


class SquiggleArea(QWidget):
    """
    Drawing area widget.

    Features:
    - Line mode (button 1) and fill mode (buttons 2/3)
    - Pastel gradient fills
    - Caption and sample arcs above the strokes
    """

    # Signals
    drawing_started = pyqtSignal()
    drawing_finished = pyqtSignal()
    stroke_added = pyqtSignal(object)  # Stroke
    strokes_cleared = pyqtSignal(int)  # number of point sequences dropped

    # Qt button -> host button number
    BUTTON_NUMBERS = {
        Qt.MouseButton.LeftButton: 1,
        Qt.MouseButton.MiddleButton: 2,
        Qt.MouseButton.RightButton: 3,
    }
    OTHER_BUTTON = 4

    def __init__(
        self,
        parent: Optional[QWidget] = None,
        brush_factory: Optional[BrushFactory] = None,
        show_decorations: bool = Config.SHOW_DECORATIONS
    ):
        super().__init__(parent)

        self._state = WidgetState(brush_factory)
        self._style = StrokeStyle()
        self._show_decorations = show_decorations

        self._setup_widget()

    def _setup_widget(self):
        """Configure the widget."""
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setAttribute(Qt.WidgetAttribute.WA_OpaquePaintEvent)
        self.setCursor(Qt.CursorShape.CrossCursor)

    # ==================== Properties ====================

    @property
    def state(self) -> WidgetState:
        return self._state

    @property
    def strokes(self) -> Tuple[Stroke, ...]:
        return self._state.strokes

    @property
    def stroke_count(self) -> int:
        return len(self._state.strokes)

    @property
    def draw_mode(self) -> DrawMode:
        return self._state.draw_mode

    @property
    def show_decorations(self) -> bool:
        return self._show_decorations

    @show_decorations.setter
    def show_decorations(self, value: bool):
        self._show_decorations = value
        self.update()

    def minimumSizeHint(self) -> QSize:
        return QSize(Config.MIN_WINDOW_SIZE, Config.MIN_WINDOW_SIZE)

    # ==================== Mouse Events ====================

    def _button_number(self, button: Qt.MouseButton) -> int:
        return self.BUTTON_NUMBERS.get(button, self.OTHER_BUTTON)

    def mousePressEvent(self, event):
        pos = event.position()
        result = self._state.mouse_down(self._button_number(event.button()), pos.x(), pos.y())
        self._apply(result)
        event.accept()

    def mouseMoveEvent(self, event):
        pos = event.position()
        result = self._state.mouse_move(pos.x(), pos.y())
        self._apply(result)
        event.accept()

    def mouseReleaseEvent(self, event):
        pos = event.position()
        result = self._state.mouse_up(self._button_number(event.button()), pos.x(), pos.y())
        self._apply(result)
        event.accept()

    def keyPressEvent(self, event):
        # Keys are left to the parent window
        event.ignore()

    def _apply(self, result: MouseResult):
        """Emit signals and request a repaint for a mouse result."""
        if result.started:
            self.drawing_started.emit()
        if result.finished:
            if result.stroke is not None:
                self.stroke_added.emit(result.stroke)
            self.drawing_finished.emit()
        if result.redraw:
            self.update()

    # ==================== Painting ====================

    def paintEvent(self, event):
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing)
            painter.fillRect(self.rect(), Qt.GlobalColor.white)
            if self._show_decorations:
                draw_decorations(painter, self.width())
            replay(QtDrawContext(painter), self._state, self._style)
        finally:
            painter.end()

    # ==================== Lifecycle ====================

    def clear(self) -> int:
        """Drop all strokes and any capture in progress."""
        count = self._state.clear()
        logger.info(f"Cleared {count} point sequences")
        self.strokes_cleared.emit(count)
        self.update()
        return count

    def dispose(self) -> int:
        """Release the drawing state. Later calls return 0."""
        return self._state.release()


__all__ = ['SquiggleArea']
