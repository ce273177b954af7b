"""
Centralized logging configuration for Squiggles
"""
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from PyQt6.QtCore import QtMsgType, qInstallMessageHandler

from ..config import Config

# Qt message type -> logging level
QT_LOG_LEVELS = {
    QtMsgType.QtDebugMsg: logging.DEBUG,
    QtMsgType.QtInfoMsg: logging.INFO,
    QtMsgType.QtWarningMsg: logging.WARNING,
    QtMsgType.QtCriticalMsg: logging.CRITICAL,
    QtMsgType.QtFatalMsg: logging.CRITICAL,
}


class LoggingConfig:
    """Central logging configuration"""

    _initialized = False
    _log_file_path: Optional[Path] = None
    _handlers = []

    @classmethod
    def setup_logging(cls, log_dir: Path, console_level: str = Config.DEFAULT_LOG_LEVEL):
        """Setup logging system"""
        if cls._initialized:
            return

        log_dir.mkdir(parents=True, exist_ok=True)
        cls._log_file_path = log_dir / Config.LOG_FILE_NAME

        # Root logger
        logger = logging.getLogger()
        logger.setLevel(logging.DEBUG)

        # File handler
        file_handler = logging.FileHandler(cls._log_file_path, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_formatter = logging.Formatter(
            '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

        # Console handler (for terminal output)
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(getattr(logging, console_level.upper(), logging.INFO))
        console_formatter = logging.Formatter('[%(levelname)s] %(message)s')
        console_handler.setFormatter(console_formatter)
        logger.addHandler(console_handler)

        cls._handlers = [file_handler, console_handler]
        cls._initialized = True
        logger.info("Logging system initialized")

    @classmethod
    def shutdown(cls):
        """Detach and close the handlers added by setup_logging"""
        logger = logging.getLogger()
        for handler in cls._handlers:
            logger.removeHandler(handler)
            handler.close()
        cls._handlers = []
        cls._initialized = False

    @classmethod
    def install_qt_message_handler(cls):
        """Route Qt's own messages (qWarning, qCritical, qFatal) into logging"""
        qInstallMessageHandler(qt_message_handler)

    @classmethod
    def get_logger(cls, name: str):
        """Get a logger instance"""
        return logging.getLogger(name)

    @classmethod
    def get_log_file_path(cls) -> Optional[Path]:
        """Get the log file path"""
        return cls._log_file_path


def qt_message_handler(msg_type, context, message):
    """
    Qt message handler forwarding to the 'qt' logger.

    A fatal message is logged, the log handlers are flushed and the process
    exits with Config.FATAL_EXIT_CODE, since Qt would abort once this returns.
    """
    logger = logging.getLogger('qt')
    logger.log(QT_LOG_LEVELS.get(msg_type, logging.WARNING), message)

    if msg_type == QtMsgType.QtFatalMsg:
        logging.shutdown()
        os._exit(Config.FATAL_EXIT_CODE)


__all__ = ['LoggingConfig', 'qt_message_handler']
