"""UI widgets for Squiggles"""

from .squiggle_area import SquiggleArea
from .main_window import MainWindow

__all__ = ['SquiggleArea', 'MainWindow']
