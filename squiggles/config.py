"""
Global configuration for Squiggles

Window defaults, colours and input mapping for the drawing area.
"""

import os
import sys
from pathlib import Path
from typing import Final, Tuple


class Config:
    """Central configuration class for all application settings"""

    # Application metadata
    APP_NAME: Final[str] = "Squiggles"
    APP_VERSION: Final[str] = "0.1.0"
    APP_AUTHOR: Final[str] = "Squiggles"

    # Paths
    APP_ROOT: Final[Path] = Path(__file__).parent

    # Window settings
    DEFAULT_WINDOW_TITLE: Final[str] = "Draw some lines"
    DEFAULT_WINDOW_WIDTH: Final[int] = 320
    DEFAULT_WINDOW_HEIGHT: Final[int] = 240
    MIN_WINDOW_SIZE: Final[int] = 1

    # Mouse button numbers (1 = left, 2 = middle, 3 = right)
    LINE_BUTTONS: Final[Tuple[int, ...]] = (1,)
    FILL_BUTTONS: Final[Tuple[int, ...]] = (2, 3)

    # Colours, normalized RGBA
    PENDING_COLOR: Final[Tuple[float, float, float, float]] = (0.0, 1.0, 0.0, 1.0)
    LINE_COLOR: Final[Tuple[float, float, float, float]] = (0.0, 0.8, 0.8, 1.0)
    DECORATION_COLOR: Final[Tuple[float, float, float, float]] = (0.0, 0.0, 0.0, 1.0)

    # Fill gradient: each channel drawn from [PASTEL_MIN, PASTEL_MAX]
    PASTEL_MIN: Final[float] = 0.6
    PASTEL_MAX: Final[float] = 0.8
    GRADIENT_ALPHA: Final[float] = 0.9

    # Default stroke style
    STROKE_WIDTH: Final[float] = 1.0

    # Decorations (caption + half circles above the strokes)
    SHOW_DECORATIONS: Final[bool] = True
    CAPTION_TEXT: Final[str] = "This is my custom widget!"
    CAPTION_FONT_SIZE: Final[int] = 24
    ARC_RADIUS: Final[float] = 12.0
    ARC_OFFSET: Final[float] = 24.0

    # Logging
    LOG_FILE_NAME: Final[str] = "squiggles.log"
    DEFAULT_LOG_LEVEL: Final[str] = "INFO"
    FATAL_EXIT_CODE: Final[int] = 1  # Qt reported a fatal error (e.g. no platform plugin)

    @classmethod
    def get_user_data_dir(cls) -> Path:
        """
        Get user data directory.

        Uses system AppData/Local (Windows), Application Support (macOS)
        or .local/share (Linux). A 'portable.txt' next to the package
        keeps everything in a local 'data' folder instead.
        """
        portable_flag = cls.APP_ROOT.parent / 'portable.txt'
        if portable_flag.exists():
            user_dir = cls.APP_ROOT.parent / 'data'
        elif sys.platform == 'win32':
            base_path = Path(os.environ.get('LOCALAPPDATA', os.path.expanduser('~')))
            user_dir = base_path / cls.APP_NAME
        elif sys.platform == 'darwin':
            user_dir = Path.home() / 'Library' / 'Application Support' / cls.APP_NAME
        else:
            user_dir = Path.home() / '.local' / 'share' / cls.APP_NAME

        user_dir.mkdir(parents=True, exist_ok=True)
        return user_dir

    @classmethod
    def get_log_dir(cls) -> Path:
        """Get the log directory"""
        log_dir = cls.get_user_data_dir() / 'logs'
        log_dir.mkdir(parents=True, exist_ok=True)
        return log_dir


__all__ = ['Config']
