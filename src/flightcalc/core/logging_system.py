"""Logging set-up for the calculators.

This module configures the ``flightcalc`` logger hierarchy from built-in
defaults optionally overridden by a YAML file. Standard output is reserved
for calculator results, so the console handler always writes to stderr.

Platform-specific log locations (file logging is off by default):
    - macOS: ~/Library/Logs/FlightCalc/flightcalc.log
    - Linux: ~/.flightcalc/logs/flightcalc.log
    - Windows: %AppData%/FlightCalc/Logs/flightcalc.log

When file logging is on, each initialization rotates the previous logs,
keeping the last 5 invocations.

Typical usage example:
    from flightcalc.core.logging_system import get_logger

    logger = get_logger(__name__)
    logger.debug("Radius: %.2f nm", radius_nm)
"""

import logging
import os
import platform
import sys
import time
from pathlib import Path
from typing import Any

from flightcalc.core.config import ConfigError, ConfigLoader

PACKAGE_LOGGER = "flightcalc"

_config = ConfigLoader()
_installed_handlers: list[logging.Handler] = []
_configured_loggers: list[str] = []
_loggers_cache: dict[str, logging.Logger] = {}
_initialized = False


class LoggingError(Exception):
    """Raised when logging system operations fail."""


def get_platform_log_dir() -> Path:
    """Get platform-specific log directory.

    Returns:
        Path to the platform-appropriate log directory:
        - macOS: ~/Library/Logs/FlightCalc
        - Linux: ~/.flightcalc/logs
        - Windows: %AppData%/FlightCalc/Logs
    """
    system = platform.system()

    if system == "Darwin":
        return Path.home() / "Library" / "Logs" / "FlightCalc"
    elif system == "Windows":
        appdata = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return appdata / "FlightCalc" / "Logs"
    else:
        return Path.home() / ".flightcalc" / "logs"


def rotate_logs(log_dir: Path, log_filename: str = "flightcalc.log", keep_count: int = 5) -> None:
    """Rotate logs on startup, keeping the last N invocations.

    Renames the current log to flightcalc.log.1, shifts older logs, and
    deletes logs beyond keep_count.

    Args:
        log_dir: Directory containing log files.
        log_filename: Base name of the log file.
        keep_count: Number of old logs to keep.

    Examples:
        >>> rotate_logs(Path("logs"), "flightcalc.log", 5)
        # flightcalc.log -> flightcalc.log.1
        # flightcalc.log.1 -> flightcalc.log.2
        # flightcalc.log.5 -> deleted
    """
    log_file = log_dir / log_filename

    if not log_file.exists():
        return

    oldest_log = log_dir / f"{log_filename}.{keep_count}"
    if oldest_log.exists():
        oldest_log.unlink()

    for i in range(keep_count - 1, 0, -1):
        old_log = log_dir / f"{log_filename}.{i}"
        if old_log.exists():
            old_log.rename(log_dir / f"{log_filename}.{i + 1}")

    log_file.rename(log_dir / f"{log_filename}.1")


def _get_default_config() -> dict[str, Any]:
    return {
        "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        "date_format": "%Y-%m-%d %H:%M:%S",
        "console": {
            "enabled": True,
            "level": "WARNING",
        },
        "file_log": {
            "enabled": False,
            "level": "DEBUG",
            "log_dir": None,  # None = platform log directory
            "filename": "flightcalc.log",
            "keep_count": 5,
        },
        "loggers": {},
    }


def _parse_level(name: Any) -> int:
    level = logging.getLevelName(str(name).upper())
    if not isinstance(level, int):
        raise LoggingError(f"Unknown log level: {name}")
    return level


def initialize_logging(config_path: str | Path | None = None, verbose: bool = False) -> None:
    """Initialize the logging system.

    Safe to call more than once: handlers and per-logger levels set by a
    previous call are undone first, other handlers are left alone.

    Args:
        config_path: YAML file merged over the built-in defaults.
            If None, defaults are used as is.
        verbose: Force the console handler to DEBUG.

    Raises:
        LoggingError: If the configuration cannot be loaded or is invalid.

    Examples:
        >>> initialize_logging("config/logging.yaml")
        >>> initialize_logging(verbose=True)
    """
    global _config, _initialized

    config = ConfigLoader(_get_default_config())
    if config_path:
        try:
            config.merge(ConfigLoader.load(config_path))
        except ConfigError as e:
            raise LoggingError(f"Failed to load logging config: {e}") from e

    _remove_installed_handlers()
    _reset_logger_levels()
    _config = config

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(logging.DEBUG)  # Capture all, filter in handlers

    if config.get("console.enabled", True):
        console_handler = logging.StreamHandler(sys.stderr)
        level = logging.DEBUG if verbose else _parse_level(config.get("console.level", "WARNING"))
        console_handler.setLevel(level)
        console_handler.setFormatter(_get_formatter())
        _install_handler(package_logger, console_handler)

    if config.get("file_log.enabled", False):
        _install_handler(package_logger, _create_file_handler())

    for name, settings in config.get_section("loggers").items():
        if isinstance(settings, dict) and "level" in settings:
            logging.getLogger(name).setLevel(_parse_level(settings["level"]))
            _configured_loggers.append(name)

    _initialized = True


def _create_file_handler() -> logging.Handler:
    log_dir = Path(_config.get("file_log.log_dir") or get_platform_log_dir())
    filename = _config.get("file_log.filename", "flightcalc.log")

    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        rotate_logs(log_dir, filename, int(_config.get("file_log.keep_count", 5)))
        # Overwrite: the previous log was rotated above
        file_handler = logging.FileHandler(log_dir / filename, mode="w", encoding="utf-8")
    except OSError as e:
        raise LoggingError(f"Cannot open log file in {log_dir}: {e}") from e

    file_handler.setLevel(_parse_level(_config.get("file_log.level", "DEBUG")))
    file_handler.setFormatter(_get_formatter())
    return file_handler


def _install_handler(logger: logging.Logger, handler: logging.Handler) -> None:
    logger.addHandler(handler)
    _installed_handlers.append(handler)


def _remove_installed_handlers() -> None:
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in _installed_handlers:
        package_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()


def _reset_logger_levels() -> None:
    for name in _configured_loggers:
        logging.getLogger(name).setLevel(logging.NOTSET)
    _configured_loggers.clear()


class MillisecondFormatter(logging.Formatter):
    """Formatter that appends milliseconds with a dot separator."""

    def formatTime(self, record, datefmt=None):
        ct = self.converter(record.created)
        s = time.strftime(datefmt or "%Y-%m-%d %H:%M:%S", ct)
        return f"{s}.{int(record.msecs):03d}"


def _get_formatter() -> logging.Formatter:
    fmt = _config.get("format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    datefmt = _config.get("date_format", "%Y-%m-%d %H:%M:%S")
    return MillisecondFormatter(fmt, datefmt)


def get_logger(name: str) -> logging.Logger:
    """Get a cached logger, initializing logging with defaults if needed.

    Args:
        name: Logger name, normally the module's ``__name__``.

    Returns:
        Logger instance.

    Note:
        Use lazy formatting (%) instead of f-strings where the message is
        built on a hot path.
    """
    if not _initialized:
        initialize_logging()

    if name not in _loggers_cache:
        _loggers_cache[name] = logging.getLogger(name)
    return _loggers_cache[name]


def shutdown_logging() -> None:
    """Close installed handlers and undo per-logger levels from the config."""
    global _initialized

    _remove_installed_handlers()
    _reset_logger_levels()
    _loggers_cache.clear()
    _initialized = False
