# utils/logger.py
# This file is part of propcalc - A propositional formula evaluator
#
# Logging utility for formula parsing and evaluation with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Log levels for formula processing."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class PropLogger:
    """Centralized logger for parsing and evaluation with structured output."""

    def __init__(self, name: str = "propcalc", level: LogLevel = LogLevel.INFO):
        """Initialize the logger.

        Args:
            name: Logger name
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(PropFormatter())

        self.logger.addHandler(console_handler)
        self.logger.propagate = False

    @property
    def level(self) -> int:
        return self.logger.level

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

    # Specialized methods for parsing and evaluation events
    def formula_parsed(self, formula: str, rendered: str):
        """Log a completed parse with the tree rendered back to text."""
        self.debug(f"Parsed '{formula}' as: {rendered}")

    def assignment_overridden(self, atom: str, previous: str, value: str):
        """Log an atom assigned twice (the later value wins)."""
        self.debug(f"Atom {atom} reassigned: {previous} → {value}")

    def modal_placeholder(self, operator: str):
        """Log evaluation of a modal connective without a frame."""
        self.debug(f"Modal {operator} evaluated in the actual world only")

    def evaluation_result(self, rendered: str, result: bool):
        """Log the truth value of an evaluated formula."""
        self.debug(f"{rendered} ⇒ {result}")


class PropFormatter(logging.Formatter):
    """Custom formatter with clean output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[PropLogger] = None


def get_logger(name: str = "propcalc") -> PropLogger:
    """Get or create the global logger instance.

    Args:
        name: Logger name (default: "propcalc")

    Returns:
        PropLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = PropLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    get_logger().set_level(level)


def configure_logging(verbose: bool = False, debug: bool = False):
    """Configure logging from verbosity flags.

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
