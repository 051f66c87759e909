# utils/logger.py
# This file is part of Trigpoint - A Trigger Point Expression Formatter
#
# Logging utility for trigger point formatting with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Log levels for trigger point formatting."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class TrigpointLogger:
    """Centralized logger for the formatter with structured output.

    Writes to stderr so that stdout stays reserved for rendered expressions.
    """

    def __init__(self, name: str = "trigpoint", level: LogLevel = LogLevel.WARNING):
        """Initialize the formatter logger.

        Args:
            name: Logger name (typically module name)
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(TrigpointFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    # Core logging methods
    def debug(self, message: str, **kwargs):
        """Log debug message (detailed internal state)."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message (general progress)."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, **kwargs)

    # Specialized methods for formatting events
    def document_parsed(self, condition_count: int, group_keys):
        """Log a successfully bound trigger point document."""
        keys_str = ", ".join(str(key) for key in group_keys)
        self.debug(
            f"Trigger point parsed: {condition_count} SPT(s) in groups [{keys_str}]"
        )

    def mode_selected(self, mode: str, reason: str):
        """Log normal form selection."""
        self.debug(f"Normal form {mode} selected ({reason})")

    def group_rendered(self, key: int, condition_count: int, connective: str):
        """Log rendering of a single group."""
        self.debug(
            f"  Group {key}: {condition_count} condition(s) joined by '{connective}'"
        )


class TrigpointFormatter(logging.Formatter):
    """Custom formatter for clean CLI output."""

    def format(self, record):
        # For INFO level, show message only
        if record.levelno == logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[TrigpointLogger] = None


def get_logger(name: str = "trigpoint") -> TrigpointLogger:
    """Get or create the global formatter logger instance.

    Args:
        name: Logger name (default: "trigpoint")

    Returns:
        TrigpointLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = TrigpointLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    get_logger().set_level(level)


def configure_logging(verbose: bool = False, debug: bool = False):
    """Configure logging based on command line flags.

    Args:
        verbose: Enable verbose (INFO) output
        debug: Enable debug output (overrides verbose)
    """
    if debug:
        set_log_level(LogLevel.DEBUG)
    elif verbose:
        set_log_level(LogLevel.INFO)
    else:
        set_log_level(LogLevel.WARNING)
