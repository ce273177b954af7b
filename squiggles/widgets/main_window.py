"""
MainWindow - Main application window

Pattern: QMainWindow with a single stretching drawing area
"""

import logging
from typing import Optional

from PyQt6.QtWidgets import QApplication, QMainWindow, QStatusBar, QVBoxLayout, QWidget
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QCloseEvent, QKeySequence

from ..config import Config
from ..core.brush_factory import BrushFactory
from ..core.stroke import Stroke
from .squiggle_area import SquiggleArea

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """
    Main application window

    Layout:
        +---------------------------+
        |  SquiggleArea (stretch)   |
        +---------------------------+
        |  StatusBar                |
        +---------------------------+
    """

    def __init__(
        self,
        title: str = Config.DEFAULT_WINDOW_TITLE,
        width: int = Config.DEFAULT_WINDOW_WIDTH,
        height: int = Config.DEFAULT_WINDOW_HEIGHT,
        show_decorations: bool = Config.SHOW_DECORATIONS,
        brush_factory: Optional[BrushFactory] = None,
        parent: Optional[QWidget] = None
    ):
        super().__init__(parent)

        self._title = title
        self._size = (max(Config.MIN_WINDOW_SIZE, width), max(Config.MIN_WINDOW_SIZE, height))
        self._show_decorations = show_decorations
        self._brush_factory = brush_factory

        self._setup_window()
        self._create_widgets()
        self._create_layout()
        self._create_actions()
        self._connect_signals()
        self._update_status()

    def _setup_window(self):
        """Configure window properties"""
        self.setWindowTitle(self._title)
        self.resize(*self._size)
        self.menuBar().hide()

    def _create_widgets(self):
        """Create UI widgets"""
        self._area = SquiggleArea(
            brush_factory=self._brush_factory,
            show_decorations=self._show_decorations
        )
        self._status_bar = QStatusBar()
        self.setStatusBar(self._status_bar)

    def _create_layout(self):
        """Vertical box holding the drawing area"""
        central = QWidget()
        layout = QVBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)
        layout.addWidget(self._area, 1)
        self.setCentralWidget(central)

    def _create_actions(self):
        """Window-level shortcuts"""
        self._clear_action = QAction("Clear", self)
        self._clear_action.setShortcut(QKeySequence("Ctrl+L"))
        self._clear_action.setShortcutContext(Qt.ShortcutContext.WindowShortcut)
        self._clear_action.triggered.connect(self._area.clear)
        self.addAction(self._clear_action)

    def _connect_signals(self):
        """Connect drawing area signals"""
        self._area.stroke_added.connect(self._on_stroke_added)
        self._area.strokes_cleared.connect(self._update_status)

    # ==================== Properties ====================

    @property
    def area(self) -> SquiggleArea:
        return self._area

    @property
    def clear_action(self) -> QAction:
        return self._clear_action

    # ==================== Slots ====================

    def _on_stroke_added(self, stroke: Stroke):
        logger.debug(f"{stroke.mode.name} stroke added ({len(stroke)} points)")
        self._update_status()

    def _update_status(self, *args):
        count = self._area.stroke_count
        self._status_bar.showMessage(f"{count} stroke{'s' if count != 1 else ''}")

    # ==================== Lifecycle ====================

    def closeEvent(self, event: QCloseEvent):
        """Release the drawing state and quit"""
        released = self._area.dispose()
        logger.info(f"Window closed, released {released} point sequences")
        event.accept()
        app = QApplication.instance()
        if app is not None:
            app.quit()


__all__ = ['MainWindow']
