"""Logging bootstrap for the performance engine and its command line.

This module provides a small logging system with YAML configuration,
per-module logger overrides, platform-aware log locations, and
startup-based rotation of the optional combined log file.

Platform-specific log locations (used when ``use_platform_dir`` is set):
    - macOS: ~/Library/Logs/TakeoffPerf/takeoffperf.log
    - Linux: ~/.takeoffperf/logs/takeoffperf.log
    - Windows: %AppData%/TakeoffPerf/Logs/takeoffperf.log

Typical usage example:
    from takeoffperf.core.logging_system import get_logger

    logger = get_logger(__name__)
    logger.debug("Flex search interval %s..%s", start, end)
"""

import logging
import logging.handlers
import os
import platform
import time
from pathlib import Path
from typing import Any

import yaml

# Global configuration
_logging_config: dict[str, Any] = {}
_loggers_cache: dict[str, logging.Logger] = {}
_initialized = False

_DEFAULT_LOG_FILENAME = "takeoffperf.log"


class LoggingError(Exception):
    """Raised when logging system operations fail."""


def get_platform_log_dir() -> Path:
    """Get platform-specific log directory.

    Returns:
        Path to the platform-appropriate log directory:
        - macOS: ~/Library/Logs/TakeoffPerf
        - Linux: ~/.takeoffperf/logs
        - Windows: %AppData%/TakeoffPerf/Logs
    """
    system = platform.system()

    if system == "Darwin":  # macOS
        return Path.home() / "Library" / "Logs" / "TakeoffPerf"
    elif system == "Windows":
        appdata = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return appdata / "TakeoffPerf" / "Logs"
    else:  # Linux and other Unix-like systems
        return Path.home() / ".takeoffperf" / "logs"


def rotate_logs(log_dir: Path, log_filename: str = _DEFAULT_LOG_FILENAME, keep_count: int = 5) -> None:
    """Rotate logs on startup, keeping the last N runs.

    Renames the current log to ``<name>.1``, shifts older logs, and deletes
    logs beyond keep_count.

    Args:
        log_dir: Directory containing log files.
        log_filename: Base name of the log file.
        keep_count: Number of old logs to keep (default: 5).
    """
    log_file = log_dir / log_filename

    if not log_file.exists():
        return

    oldest_log = log_dir / f"{log_filename}.{keep_count}"
    if oldest_log.exists():
        oldest_log.unlink()

    for i in range(keep_count - 1, 0, -1):
        old_log = log_dir / f"{log_filename}.{i}"
        new_log = log_dir / f"{log_filename}.{i + 1}"
        if old_log.exists():
            old_log.rename(new_log)

    log_file.rename(log_dir / f"{log_filename}.1")


def initialize_logging(
    config_path: str | Path | None = None,
    use_platform_dir: bool = False,
    level: str | None = None,
) -> None:
    """Initialize the logging system from YAML configuration.

    Call once at startup before any logging occurs. Library callers may skip
    it; the first ``get_logger`` call then initializes with defaults (console
    only, no log file).

    Args:
        config_path: Path to logging configuration YAML file.
            If None, uses default configuration.
        use_platform_dir: If True, write the combined log to the
            platform-specific log directory instead of ``log_dir``.
        level: Optional console level overriding the configured one
            (e.g. "DEBUG").

    Raises:
        LoggingError: If the configuration cannot be loaded or is invalid.

    Examples:
        >>> initialize_logging("config/logging.yaml", level="DEBUG")
        >>> get_logger("takeoffperf").info("Logging initialized")
    """
    global _logging_config, _initialized

    if config_path:
        config_path = Path(config_path)
        if not config_path.exists():
            raise LoggingError(f"Logging config file not found: {config_path}")

        try:
            with config_path.open("r", encoding="utf-8") as f:
                loaded = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise LoggingError(f"Failed to load logging config: {e}") from e

        if not isinstance(loaded, dict):
            raise LoggingError(f"Logging config must be a mapping: {config_path}")
        _logging_config = loaded
    else:
        _logging_config = _get_default_config()

    if level is not None:
        _logging_config.setdefault("console", {})["level"] = level.upper()

    if use_platform_dir:
        _logging_config["log_dir"] = str(get_platform_log_dir())

    combined = _logging_config.get("combined_log", {})
    if combined.get("enabled", False):
        log_dir = Path(_logging_config.get("log_dir", "logs"))
        log_dir.mkdir(parents=True, exist_ok=True)
        rotate_logs(
            log_dir,
            combined.get("filename", _DEFAULT_LOG_FILENAME),
            combined.get("backup_count", 5),
        )

    _configure_root_logger()

    # Cached loggers pick up per-logger overrides from the new configuration
    for name, logger in list(_loggers_cache.items()):
        _apply_logger_config(name, logger)

    _initialized = True


def _get_default_config() -> dict[str, Any]:
    """Get default logging configuration.

    Returns:
        Default logging configuration dictionary.
    """
    return {
        "version": 1,
        "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        "date_format": "%Y-%m-%d %H:%M:%S",
        "log_dir": "logs",
        "combined_log": {
            "enabled": False,
            "filename": _DEFAULT_LOG_FILENAME,
            "backup_count": 5,
        },
        "console": {
            "enabled": True,
            "level": "WARNING",
        },
        "loggers": {},
    }


def _level_from_name(name: str) -> int:
    level = logging.getLevelName(str(name).upper())
    if not isinstance(level, int):
        raise LoggingError(f"Unknown log level: {name}")
    return level


def _configure_root_logger() -> None:
    """Configure the root logger with handlers."""
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Capture all, filter in handlers

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    console_config = _logging_config.get("console", {})
    if console_config.get("enabled", True):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(_level_from_name(console_config.get("level", "WARNING")))
        console_handler.setFormatter(_get_formatter())
        root_logger.addHandler(console_handler)

    combined_config = _logging_config.get("combined_log", {})
    if combined_config.get("enabled", False):
        log_dir = Path(_logging_config.get("log_dir", "logs"))
        log_file = log_dir / combined_config.get("filename", _DEFAULT_LOG_FILENAME)

        # Rotation happens on startup, not by size
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(_get_formatter())
        root_logger.addHandler(file_handler)


class MillisecondFormatter(logging.Formatter):
    """Formatter that shows milliseconds with dot separator."""

    def formatTime(self, record, datefmt=None):
        """Format time with milliseconds using dot separator."""
        ct = self.converter(record.created)
        s = time.strftime(datefmt or "%Y-%m-%d %H:%M:%S", ct)
        return f"{s}.{int(record.msecs):03d}"


def _get_formatter() -> logging.Formatter:
    fmt = _logging_config.get("format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    datefmt = _logging_config.get("date_format", "%Y-%m-%d %H:%M:%S")
    return MillisecondFormatter(fmt, datefmt)


def _apply_logger_config(name: str, logger: logging.Logger) -> None:
    logger_config = _logging_config.get("loggers", {}).get(name, {})

    if not logger_config.get("enabled", True):
        logger.disabled = True
        return

    logger.disabled = False
    if "level" in logger_config:
        logger.setLevel(_level_from_name(logger_config["level"]))


def get_logger(name: str) -> logging.Logger:
    """Get a logger for an engine module.

    Loggers are cached and reused. Each logger can have its own level, or be
    disabled, under the ``loggers`` section of the logging YAML.

    Args:
        name: Logger name (typically ``__name__``).

    Returns:
        Configured logger instance.

    Examples:
        >>> log = get_logger("takeoffperf.performance.flex")
        >>> log.debug("Flex %s limited by %s", flex, factor)
    """
    if not _initialized:
        # Auto-initialize with defaults if not done explicitly
        initialize_logging()

    if name in _loggers_cache:
        return _loggers_cache[name]

    logger = logging.getLogger(name)
    _apply_logger_config(name, logger)

    _loggers_cache[name] = logger
    return logger


def shutdown_logging() -> None:
    """Shutdown the logging system gracefully.

    Flushes all handlers and closes log files.
    """
    global _initialized

    logging.shutdown()
    _loggers_cache.clear()
    _initialized = False
