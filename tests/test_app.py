"""Tests for command line parsing, logging and configuration."""

import logging
import os
import subprocess
import sys
from pathlib import Path

import pytest

from squiggles.config import Config
from squiggles.main import parse_args
from PyQt6.QtCore import QtMsgType

from squiggles.utils.logging_config import LoggingConfig, qt_message_handler


class TestParseArgs:

    def test_defaults(self):
        args, qt_args = parse_args([])

        assert args.title == Config.DEFAULT_WINDOW_TITLE
        assert args.width == 320
        assert args.height == 240
        assert args.decorations is True
        assert args.log_level == "INFO"
        assert qt_args == []

    def test_options(self):
        args, _ = parse_args(["--title", "Lines", "--width", "640", "--height", "480",
                           "--no-decorations", "--log-level", "DEBUG"])

        assert args.title == "Lines"
        assert (args.width, args.height) == (640, 480)
        assert args.decorations is False
        assert args.log_level == "DEBUG"

    def test_qt_options_passed_through(self):
        args, qt_args = parse_args(["--width", "640", "-platform", "offscreen"])

        assert args.width == 640
        assert qt_args == ["-platform", "offscreen"]

    def test_invalid_width(self):
        with pytest.raises(SystemExit):
            parse_args(["--width", "wide"])


class TestLoggingConfig:

    @pytest.fixture(autouse=True)
    def reset_logging(self):
        LoggingConfig.shutdown()
        yield
        LoggingConfig.shutdown()

    def test_setup_writes_log_file(self, tmp_path):
        LoggingConfig.setup_logging(tmp_path / "logs", "WARNING")

        logging.getLogger("squiggles.test").debug("debug line")
        for handler in logging.getLogger().handlers:
            handler.flush()

        log_file = LoggingConfig.get_log_file_path()
        assert log_file == tmp_path / "logs" / Config.LOG_FILE_NAME
        assert "debug line" in log_file.read_text(encoding="utf-8")

    def test_setup_only_once(self, tmp_path):
        root = logging.getLogger()
        LoggingConfig.setup_logging(tmp_path)
        count = len(root.handlers)
        LoggingConfig.setup_logging(tmp_path)

        assert len(root.handlers) == count

    def test_qt_messages_forwarded(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="qt"):
            qt_message_handler(QtMsgType.QtWarningMsg, None, "odd font")
            qt_message_handler(QtMsgType.QtCriticalMsg, None, "bad surface")

        assert [(r.levelno, r.getMessage()) for r in caplog.records] == [
            (logging.WARNING, "odd font"),
            (logging.CRITICAL, "bad surface"),
        ]


class TestConfig:

    def test_user_data_dir_created(self, tmp_path, monkeypatch):
        monkeypatch.setenv("HOME", str(tmp_path))
        monkeypatch.setenv("LOCALAPPDATA", str(tmp_path))

        log_dir = Config.get_log_dir()

        assert log_dir.is_dir()
        assert log_dir.name == "logs"

    def test_pastel_range(self):
        assert 0.0 <= Config.PASTEL_MIN <= Config.PASTEL_MAX <= 1.0


class TestMain:

    def test_missing_platform_plugin_is_fatal(self, tmp_path):
        """Qt failing to start is logged at CRITICAL and exits with status 1."""
        env = dict(os.environ)
        env.update({
            "QT_QPA_PLATFORM": "nosuchplatform",
            "HOME": str(tmp_path),
            "LOCALAPPDATA": str(tmp_path),
        })
        repo_root = Path(__file__).resolve().parent.parent

        result = subprocess.run(
            [sys.executable, "-c", "import sys; from squiggles.main import main; sys.exit(main([]))"],
            cwd=str(repo_root),
            env=env,
            capture_output=True,
            text=True,
            timeout=120,
        )

        assert result.returncode == Config.FATAL_EXIT_CODE
        assert "[CRITICAL]" in result.stdout
