"""
Logging Configuration for League Standings

This module provides logging configuration with:
- Rotating file handlers (prevents unbounded log growth)
- Colored console output
- Module-specific loggers for granular control

Usage Example:
    from logging_config import setup_logging, get_logger

    setup_logging(level="INFO", log_dir="logs", enable_console=True, enable_file=False)

    logger = get_logger(__name__)
    logger.info("Standings calculated")

Log Files Created (when enable_file=True):
- logs/league_standings.log: Main log (INFO+)
- logs/league_standings_debug.log: Debug log (DEBUG+)
- logs/league_standings_error.log: Error log (ERROR+)

Each file rotates at 10MB with 5 backup files.
"""

import copy
import logging
import logging.handlers
import os
from pathlib import Path
from typing import Optional


LOG_FILE_PREFIX = "league_standings"

# Log format templates
DETAILED_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "[%(filename)s:%(lineno)d] - %(funcName)s() - %(message)s"
)

SIMPLE_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

CONSOLE_FORMAT = "%(levelname)s - %(name)s - %(message)s"

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Loggers of the standings package
STANDINGS_MODULES = [
    "standings_system",
    "standings_system.head_to_head",
    "standings_system.tie_resolver",
    "standings_system.division_seeder",
    "standings_system.rank_assigner",
    "standings_system.ranking_engine",
    "standings_system.tiebreaker_explainer",
]


class ColoredFormatter(logging.Formatter):
    """
    Colored formatter for console output.

    Colors the level name of a copy of the record, so other handlers
    attached to the same logger still see the plain level name.
    """

    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
    }
    RESET = '\033[0m'

    def format(self, record):
        """Add color to levelname"""
        color = self.COLORS.get(record.levelname)
        if color:
            record = copy.copy(record)
            record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


def _rotating_handler(
    log_dir: str,
    suffix: str,
    level: int,
    log_format: str,
    max_bytes: int,
    backup_count: int
) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        filename=os.path.join(log_dir, f"{LOG_FILE_PREFIX}{suffix}.log"),
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding='utf-8'
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(log_format, datefmt=DATE_FORMAT))
    return handler


def setup_logging(
    level: str = "INFO",
    log_dir: str = "logs",
    enable_console: bool = True,
    enable_file: bool = True,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
    format_style: str = "detailed"
) -> None:
    """
    Setup application-wide logging configuration.

    Call once at application startup; replaces existing root handlers.

    Args:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for log files
        enable_console: Whether to log to console
        enable_file: Whether to log to file
        max_bytes: Maximum size per log file before rotation
        backup_count: Number of backup files to keep
        format_style: "detailed" or "simple" format for the main log
    """
    numeric_level = getattr(logging, level.upper())

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    if enable_console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(ColoredFormatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT))
        root_logger.addHandler(console_handler)

    if enable_file:
        Path(log_dir).mkdir(parents=True, exist_ok=True)
        main_format = DETAILED_FORMAT if format_style == "detailed" else SIMPLE_FORMAT

        for suffix, handler_level, log_format in (
            ("", logging.INFO, main_format),
            ("_debug", logging.DEBUG, DETAILED_FORMAT),
            ("_error", logging.ERROR, DETAILED_FORMAT),
        ):
            root_logger.addHandler(_rotating_handler(
                log_dir, suffix, handler_level, log_format, max_bytes, backup_count
            ))

    root_logger.info(
        f"Logging initialized - Level: {level}, "
        f"Console: {enable_console}, File: {enable_file}"
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def log_exception(
    logger: logging.Logger,
    exception: Exception,
    context: Optional[dict] = None,
    level: str = "ERROR"
) -> None:
    """
    Log an exception with traceback and context.

    Args:
        logger: Logger instance
        exception: Exception to log
        context: Additional context dict (league, season, etc.)
        level: Log level (default: ERROR)
    """
    context_str = ""
    if context:
        context_items = [f"{k}={v}" for k, v in context.items()]
        context_str = f" [{', '.join(context_items)}]"

    logger.log(
        getattr(logging, level.upper()),
        f"Exception occurred{context_str}: {type(exception).__name__}: {exception}",
        exc_info=True
    )


def configure_module_logger(
    module_name: str,
    level: Optional[str] = None,
    propagate: bool = True
) -> logging.Logger:
    """
    Configure logging for a specific module.

    Args:
        module_name: Module name (e.g., "standings_system.tie_resolver")
        level: Log level for this module (None = inherit from root)
        propagate: Whether to propagate to parent loggers

    Returns:
        Configured logger
    """
    logger = logging.getLogger(module_name)

    if level:
        logger.setLevel(getattr(logging, level.upper()))

    logger.propagate = propagate
    return logger


class LogContext:
    """
    Context manager for temporary log level changes.

    Example:
        >>> logger = get_logger("standings_system.tie_resolver")
        >>> with LogContext(logger, "DEBUG"):
        ...     engine.calculate_rankings(records, match_log)
    """

    def __init__(self, logger: logging.Logger, level: str):
        self.logger = logger
        self.new_level = getattr(logging, level.upper())
        self.original_level = logger.level

    def __enter__(self):
        self.logger.setLevel(self.new_level)
        return self.logger

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.logger.setLevel(self.original_level)


def setup_standings_logging(level: str = "INFO") -> None:
    """
    Configure logging for the standings modules.

    DEBUG traces every tie resolution and bump decision.

    Args:
        level: Log level for standings modules
    """
    for module_name in STANDINGS_MODULES:
        configure_module_logger(module_name, level=level)


def setup_development_logging(log_dir: str = "logs") -> None:
    """DEBUG level, colored console plus rotating files."""
    setup_logging(
        level="DEBUG",
        log_dir=log_dir,
        enable_console=True,
        enable_file=True,
        format_style="detailed"
    )


def setup_testing_logging() -> None:
    """WARNING level, console only."""
    setup_logging(
        level="WARNING",
        enable_console=True,
        enable_file=False,
        format_style="simple"
    )
