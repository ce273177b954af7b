"""
Squiggles - freehand line and fill drawing area on PyQt6
"""

from .config import Config

__version__ = Config.APP_VERSION
