"""Unit tests for the logging system with platform-aware paths and rotation."""

import logging
from pathlib import Path
from unittest.mock import patch

import pytest
import yaml

from flightcalc.core.logging_system import (
    PACKAGE_LOGGER,
    LoggingError,
    get_logger,
    get_platform_log_dir,
    initialize_logging,
    rotate_logs,
    shutdown_logging,
)


def write_config(path: Path, data: dict) -> Path:
    """Write a YAML logging config and return its path."""
    path.write_text(yaml.safe_dump(data), encoding="utf-8")
    return path


@pytest.fixture
def file_log_config(tmp_path: Path) -> Path:
    """Config enabling the file log in a temporary directory."""
    return write_config(
        tmp_path / "logging.yaml",
        {"file_log": {"enabled": True, "log_dir": str(tmp_path / "logs")}},
    )


def _installed_handlers() -> list[logging.Handler]:
    return list(logging.getLogger(PACKAGE_LOGGER).handlers)


class TestPlatformLogDir:
    """Tests for get_platform_log_dir function."""

    def test_macos_log_dir(self) -> None:
        """Test macOS log directory path."""
        with patch("platform.system", return_value="Darwin"):
            assert get_platform_log_dir() == Path.home() / "Library" / "Logs" / "FlightCalc"

    def test_linux_log_dir(self) -> None:
        """Test Linux log directory path."""
        with patch("platform.system", return_value="Linux"):
            assert get_platform_log_dir() == Path.home() / ".flightcalc" / "logs"

    def test_windows_log_dir(self) -> None:
        """Test Windows log directory path."""
        with patch("platform.system", return_value="Windows"):
            with patch.dict("os.environ", {"APPDATA": "C:/Users/Test/AppData/Roaming"}):
                log_dir = get_platform_log_dir()
                assert "FlightCalc" in str(log_dir)
                assert "Logs" in str(log_dir)

    def test_unknown_platform_defaults_to_linux(self) -> None:
        """Test unknown platform defaults to Linux-style path."""
        with patch("platform.system", return_value="FreeBSD"):
            assert ".flightcalc" in str(get_platform_log_dir())


class TestLogRotation:
    """Tests for log rotation functionality."""

    def test_rotate_logs_no_existing_log(self, tmp_path: Path) -> None:
        """Test rotation when no log file exists - should do nothing."""
        rotate_logs(tmp_path, "test.log", 5)
        assert list(tmp_path.glob("*")) == []

    def test_rotate_logs_single_file(self, tmp_path: Path) -> None:
        """Test rotation with single existing log file."""
        (tmp_path / "test.log").write_text("old log content")

        rotate_logs(tmp_path, "test.log", 5)

        assert not (tmp_path / "test.log").exists()
        assert (tmp_path / "test.log.1").read_text() == "old log content"

    def test_rotate_logs_multiple_files(self, tmp_path: Path) -> None:
        """Test rotation shifts every numbered log by one."""
        (tmp_path / "test.log").write_text("current")
        (tmp_path / "test.log.1").write_text("previous-1")
        (tmp_path / "test.log.2").write_text("previous-2")

        rotate_logs(tmp_path, "test.log", 5)

        assert (tmp_path / "test.log.1").read_text() == "current"
        assert (tmp_path / "test.log.2").read_text() == "previous-1"
        assert (tmp_path / "test.log.3").read_text() == "previous-2"

    def test_rotate_logs_deletes_oldest(self, tmp_path: Path) -> None:
        """Test that oldest log beyond keep_count is deleted."""
        (tmp_path / "test.log").write_text("current")
        for i in range(1, 6):
            (tmp_path / f"test.log.{i}").write_text(f"old-{i}")

        rotate_logs(tmp_path, "test.log", keep_count=5)

        assert not (tmp_path / "test.log.6").exists()
        assert (tmp_path / "test.log.5").read_text() == "old-4"


class TestLoggingInitialization:
    """Tests for logging system initialization."""

    def test_defaults_log_warnings_to_stderr_only(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test default console level is WARNING and stdout stays empty."""
        initialize_logging()

        logger = get_logger("flightcalc.test")
        logger.info("quiet message")
        logger.warning("loud message")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "loud message" in captured.err
        assert "quiet message" not in captured.err

    def test_verbose_enables_debug(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test verbose mode shows debug messages."""
        initialize_logging(verbose=True)
        get_logger("flightcalc.test").debug("debug detail")

        assert "debug detail" in capsys.readouterr().err

    def test_no_file_by_default(self, tmp_path: Path) -> None:
        """Test the file log is disabled unless configured."""
        with patch("flightcalc.core.logging_system.get_platform_log_dir", return_value=tmp_path):
            initialize_logging()
            get_logger("flightcalc.test").warning("message")

        assert list(tmp_path.glob("*")) == []

    def test_missing_config(self) -> None:
        """Test initialization fails with a missing config file."""
        with pytest.raises(LoggingError, match="Configuration file not found"):
            initialize_logging(config_path="/nonexistent/config.yaml")

    def test_invalid_level(self, tmp_path: Path) -> None:
        """Test an unknown level name is rejected."""
        config = write_config(tmp_path / "bad.yaml", {"console": {"level": "LOUD"}})
        with pytest.raises(LoggingError, match="Unknown log level"):
            initialize_logging(config)

    def test_reinitialization_replaces_handlers(self) -> None:
        """Test repeated initialization does not stack handlers."""
        initialize_logging()
        first = _installed_handlers()
        initialize_logging()

        handlers = _installed_handlers()
        assert len(handlers) == len(first) == 1
        assert handlers[0] is not first[0]

    def test_foreign_handlers_untouched(self) -> None:
        """Test handlers added by other code survive re-initialization."""
        package_logger = logging.getLogger(PACKAGE_LOGGER)
        foreign = logging.NullHandler()
        package_logger.addHandler(foreign)
        try:
            initialize_logging()
            assert foreign in package_logger.handlers
        finally:
            package_logger.removeHandler(foreign)

    def test_per_logger_level(self, tmp_path: Path) -> None:
        """Test the loggers section sets individual levels."""
        config = write_config(
            tmp_path / "levels.yaml", {"loggers": {"flightcalc.test.quiet": {"level": "ERROR"}}}
        )
        initialize_logging(config)

        assert get_logger("flightcalc.test.quiet").getEffectiveLevel() == logging.ERROR

    def test_per_logger_level_reset_on_reinitialization(self, tmp_path: Path) -> None:
        """Test levels from a previous config do not leak into the next one."""
        config = write_config(
            tmp_path / "levels.yaml", {"loggers": {"flightcalc.test.quiet": {"level": "ERROR"}}}
        )
        initialize_logging(config)
        initialize_logging()

        assert logging.getLogger("flightcalc.test.quiet").level == logging.NOTSET
        assert get_logger("flightcalc.test.quiet").getEffectiveLevel() == logging.DEBUG

    def test_per_logger_level_reset_on_shutdown(self, tmp_path: Path) -> None:
        """Test shutdown undoes levels set from the loggers section."""
        config = write_config(
            tmp_path / "levels.yaml", {"loggers": {"flightcalc.test.quiet": {"level": "ERROR"}}}
        )
        initialize_logging(config)
        shutdown_logging()

        assert logging.getLogger("flightcalc.test.quiet").level == logging.NOTSET

    def test_console_can_be_disabled(self, tmp_path: Path) -> None:
        """Test console.enabled false installs no console handler."""
        config = write_config(tmp_path / "silent.yaml", {"console": {"enabled": False}})
        initialize_logging(config)

        assert _installed_handlers() == []


class TestLoggerFunctionality:
    """Tests for logger creation and usage."""

    def test_get_logger_caches_loggers(self) -> None:
        """Test that loggers are cached and reused."""
        assert get_logger("flightcalc.test") is get_logger("flightcalc.test")

    def test_get_logger_returns_named_logger(self) -> None:
        """Test that get_logger returns a standard logger with that name."""
        logger = get_logger("flightcalc.component")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "flightcalc.component"

    def test_logger_writes_to_file(self, file_log_config: Path, tmp_path: Path) -> None:
        """Test that logger messages are written to the log file."""
        initialize_logging(file_log_config)

        logger = get_logger("flightcalc.test")
        logger.debug("Debug message")
        logger.error("Error message")
        shutdown_logging()

        content = (tmp_path / "logs" / "flightcalc.log").read_text()
        assert "Debug message" in content
        assert "Error message" in content

    def test_timestamps_have_milliseconds(self, file_log_config: Path, tmp_path: Path) -> None:
        """Test log timestamps end with .mmm."""
        initialize_logging(file_log_config)
        get_logger("flightcalc.test").info("stamped")
        shutdown_logging()

        line = (tmp_path / "logs" / "flightcalc.log").read_text().splitlines()[0]
        timestamp = line.split(" - ")[0]
        assert timestamp[-4] == "."
        assert timestamp[-3:].isdigit()


class TestLogRotationIntegration:
    """Integration tests for log rotation on startup."""

    def test_each_run_rotates_previous_log(self, file_log_config: Path, tmp_path: Path) -> None:
        """Test that initialization rotates the log from the previous run."""
        log_dir = tmp_path / "logs"

        initialize_logging(file_log_config)
        get_logger("flightcalc.test").info("First run")
        shutdown_logging()

        initialize_logging(file_log_config)
        get_logger("flightcalc.test").info("Second run")
        shutdown_logging()

        assert "First run" in (log_dir / "flightcalc.log.1").read_text()
        current = (log_dir / "flightcalc.log").read_text()
        assert "Second run" in current
        assert "First run" not in current

    def test_keep_count_limits_history(self, tmp_path: Path) -> None:
        """Test only keep_count previous logs are kept."""
        config = write_config(
            tmp_path / "logging.yaml",
            {"file_log": {"enabled": True, "log_dir": str(tmp_path / "logs"), "keep_count": 2}},
        )

        for i in range(5):
            initialize_logging(config)
            get_logger("flightcalc.test").info("Run %d", i)
            shutdown_logging()

        assert len(list((tmp_path / "logs").glob("flightcalc.log*"))) == 3
        assert "Run 2" in (tmp_path / "logs" / "flightcalc.log.2").read_text()
