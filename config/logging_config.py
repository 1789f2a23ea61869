"""Logging configuration for Hostname Menu.

Provides logging with file rotation and optional debug output.
All components use this logging system instead of print().

Usage:
    from config.logging_config import setup_logging, get_logger

    # Initialize at app startup
    setup_logging(data_dir=STORAGE.data_dir)

    # Get logger in any module
    logger = get_logger(__name__)
    logger.info("Display item selected")
"""
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from config.constants import STORAGE


ROOT_LOGGER_NAME = 'hostmenu'

# Module-level logger cache
_loggers: dict = {}
_initialized: bool = False


class HostnameMenuFormatter(logging.Formatter):
    """Formatter with color support for console output."""

    # ANSI color codes
    COLORS = {
        'DEBUG': '\033[36m',     # Cyan
        'INFO': '\033[32m',      # Green
        'WARNING': '\033[33m',   # Yellow
        'ERROR': '\033[31m',     # Red
        'CRITICAL': '\033[35m',  # Magenta
        'RESET': '\033[0m',
    }

    def __init__(self, use_colors: bool = True):
        self.use_colors = use_colors
        super().__init__(
            fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

    def format(self, record: logging.LogRecord) -> str:
        if self.use_colors and sys.stderr.isatty():
            color = self.COLORS.get(record.levelname, '')
            reset = self.COLORS['RESET']
            record = logging.makeLogRecord(record.__dict__)
            record.levelname = f"{color}{record.levelname}{reset}"
        return super().format(record)


def setup_logging(
    data_dir: Optional[Path] = None,
    debug: bool = False,
    console_output: bool = True,
    log_to_file: bool = True
) -> logging.Logger:
    """Initialize the logging system.

    Should be called once at application startup. Subsequent calls
    reconfigure the existing logger.

    Args:
        data_dir: Directory for log files. Defaults to the app support directory.
        debug: Enable debug-level logging.
        console_output: Also log to stderr.
        log_to_file: Write logs to file with rotation.

    Returns:
        The root logger for the application.
    """
    global _initialized

    if data_dir is None:
        data_dir = STORAGE.data_dir

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(logging.DEBUG if debug else logging.INFO)
    root_logger.handlers.clear()

    if log_to_file:
        data_dir.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            data_dir / STORAGE.LOG_FILE,
            maxBytes=STORAGE.LOG_MAX_BYTES,
            backupCount=STORAGE.LOG_BACKUP_COUNT,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        root_logger.addHandler(file_handler)

    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.DEBUG if debug else logging.WARNING)
        console_handler.setFormatter(HostnameMenuFormatter(use_colors=True))
        root_logger.addHandler(console_handler)

    root_logger.info(
        f"Logging initialized - level={'DEBUG' if debug else 'INFO'}, "
        f"file={log_to_file}, console={console_output}"
    )

    _initialized = True
    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a specific module.

    Returns a child of the root 'hostmenu' logger named after the last
    two parts of the module path, e.g. "hostinfo.system".

    Args:
        name: Usually __name__ of the calling module.

    Returns:
        A logger instance.
    """
    short_name = '.'.join(name.split('.')[-2:])

    if short_name not in _loggers:
        if not _initialized:
            # Fallback when setup_logging hasn't been called (tests, scripts)
            logging.basicConfig(level=logging.INFO)
        _loggers[short_name] = logging.getLogger(f'{ROOT_LOGGER_NAME}.{short_name}')

    return _loggers[short_name]


def log_exception(logger: logging.Logger, message: str, exc: Exception) -> None:
    """Log an exception with full traceback and context.

    Example:
        >>> try:
        ...     store.save()
        ... except StorageError as e:
        ...     log_exception(logger, "Failed to persist config", e)
    """
    logger.error(
        f"{message}: {type(exc).__name__}: {exc}",
        exc_info=True,
        extra={'exception_type': type(exc).__name__}
    )


def log_subprocess_call(
    logger: logging.Logger,
    command: list,
    returncode: int,
    duration_ms: float,
    success: bool
) -> None:
    """Log a subprocess call with timing information."""
    level = logging.DEBUG if success else logging.WARNING
    logger.log(
        level,
        f"Subprocess: {' '.join(command[:3])}{'...' if len(command) > 3 else ''} "
        f"-> rc={returncode}, {duration_ms:.1f}ms"
    )
