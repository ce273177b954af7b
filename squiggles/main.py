"""
Squiggles - Main Entry Point

Opens a window with a drawing area: drag with the left button to draw
lines, with the middle or right button to draw filled shapes.

Usage:
    python -m squiggles.main [--title TITLE] [--width W] [--height H]
"""

import argparse
import sys
from typing import List, Optional, Tuple

from PyQt6.QtWidgets import QApplication

from .config import Config
from .utils.logging_config import LoggingConfig


def parse_args(argv: Optional[List[str]] = None) -> Tuple[argparse.Namespace, List[str]]:
    """
    Parse command line options

    Returns:
        (options, leftover arguments to hand to Qt, e.g. -platform, -style)
    """
    parser = argparse.ArgumentParser(prog='squiggles', description="Draw some lines.")
    parser.add_argument('--title', default=Config.DEFAULT_WINDOW_TITLE,
                        help="window title")
    parser.add_argument('--width', type=int, default=Config.DEFAULT_WINDOW_WIDTH,
                        help="initial window width in pixels")
    parser.add_argument('--height', type=int, default=Config.DEFAULT_WINDOW_HEIGHT,
                        help="initial window height in pixels")
    parser.add_argument('--no-decorations', dest='decorations', action='store_false',
                        help="hide the caption and sample arcs")
    parser.add_argument('--log-level', default=Config.DEFAULT_LOG_LEVEL,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help="console log level")
    return parser.parse_known_args(argv)


def setup_application(argv: List[str]) -> QApplication:
    """
    Initialize and configure the Qt application

    Returns:
        Configured QApplication instance
    """
    app = QApplication.instance() or QApplication(argv)

    app.setApplicationName(Config.APP_NAME)
    app.setApplicationVersion(Config.APP_VERSION)
    app.setOrganizationName(Config.APP_AUTHOR)

    return app


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for Squiggles

    Creates the application, shows the main window and runs the event loop.
    """
    args, qt_args = parse_args(argv)

    # Setup logging first
    LoggingConfig.setup_logging(Config.get_log_dir(), args.log_level)
    logger = LoggingConfig.get_logger(__name__)
    logger.info(f"Starting {Config.APP_NAME} {Config.APP_VERSION}...")

    # A fatal Qt error (e.g. missing platform plugin) is logged and exits
    LoggingConfig.install_qt_message_handler()
    app = setup_application([sys.argv[0]] + qt_args)

    from .widgets.main_window import MainWindow
    window = MainWindow(
        title=args.title,
        width=args.width,
        height=args.height,
        show_decorations=args.decorations
    )
    window.show()

    logger.info(f"Window '{args.title}' opened at {args.width}x{args.height}")

    # Run event loop
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
