"""Logging configuration for cliwarn's own diagnostics.

Warnings shown to users go straight to the registry's sink; this module only
controls the DEBUG trail the library leaves on the ``cliwarn`` logger
(registrations, suppressions, dispatch decisions).

Nothing is configured on import. Tools that want the trail call
``setup_logging()``.

Environment Variables:
    CLIWARN_LOG_LEVEL: Set log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    CLIWARN_LOG_FORMAT: Set format (json, human, simple)
    LOG_LEVEL: Fallback for log level
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional, TextIO

from cliwarn.colors import ANSI_COLORS, supports_color
from cliwarn.config import get_log_level_from_env

__all__ = [
    "JSONFormatter",
    "HumanReadableFormatter",
    "get_log_format_from_env",
    "setup_logging",
]

LIBRARY_LOGGER = "cliwarn"

_RESERVED_ATTRS = set(logging.LogRecord("", 0, "", 0, "", (), None).__dict__) | {"message", "asctime"}


class JSONFormatter(logging.Formatter):
    """Format log records as JSON for structured logging."""

    def __init__(self, include_context: bool = True):
        """
        Initialize JSON formatter.

        Args:
            include_context: Whether to include module/function/line fields
        """
        super().__init__()
        self.include_context = include_context

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON string."""
        log_data: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if self.include_context:
            log_data["module"] = record.module
            log_data["function"] = record.funcName
            log_data["line"] = record.lineno

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Add extra fields from record
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                log_data[key] = value

        return json.dumps(log_data, default=str)


class HumanReadableFormatter(logging.Formatter):
    """Format log records in human-readable format with colors (optional)."""

    LEVEL_COLORS = {
        "DEBUG": ANSI_COLORS["cyan"],
        "INFO": ANSI_COLORS["green"],
        "WARNING": ANSI_COLORS["yellow"],
        "ERROR": ANSI_COLORS["red"],
        "CRITICAL": ANSI_COLORS["magenta"],
    }
    RESET = "\033[0m"

    def __init__(self, use_colors: bool = False, include_context: bool = False, stream: Optional[TextIO] = None):
        """
        Initialize human-readable formatter.

        Args:
            use_colors: Whether to use ANSI colors (only honored on terminals)
            include_context: Whether to include module/function info
            stream: Stream the handler writes to; defaults to sys.stderr
        """
        if include_context:
            fmt = "[%(levelname)s] %(asctime)s - %(name)s - %(module)s.%(funcName)s:%(lineno)d - %(message)s"
        else:
            fmt = "[%(levelname)s] %(asctime)s - %(name)s - %(message)s"

        super().__init__(fmt=fmt, datefmt="%Y-%m-%d %H:%M:%S")
        self.use_colors = use_colors and supports_color(stream if stream is not None else sys.stderr)

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with optional colors."""
        formatted = super().format(record)

        if self.use_colors:
            color = self.LEVEL_COLORS.get(record.levelname, "")
            return f"{color}{formatted}{self.RESET}"

        return formatted


def get_log_format_from_env() -> str:
    """
    Get log format from environment variable.

    Environment variable: CLIWARN_LOG_FORMAT
    Values: 'json', 'human', 'simple'

    Returns:
        Log format name (default: 'human')
    """
    return os.environ.get("CLIWARN_LOG_FORMAT", "human").lower()


def setup_logging(
    level: Optional[int] = None,
    format_type: Optional[str] = None,
    stream: Optional[TextIO] = None,
    use_colors: bool = False,
    include_context: bool = False,
) -> logging.Logger:
    """
    Configure the ``cliwarn`` logger.

    Only the library's own logger is touched; the root logger and the
    host application's handlers are left alone.

    Args:
        level: Logging level (defaults to CLIWARN_LOG_LEVEL or WARNING)
        format_type: Format type ('json', 'human', 'simple')
        stream: Destination stream (defaults to sys.stderr)
        use_colors: Use ANSI colors in console output
        include_context: Include module/function context in logs

    Returns:
        The configured ``cliwarn`` logger

    Examples:
        >>> # Show dispatch decisions while debugging a tool
        >>> setup_logging(level=logging.DEBUG)

        >>> # Machine-readable trail
        >>> setup_logging(level=logging.DEBUG, format_type='json')
    """
    if level is None:
        level = get_log_level_from_env()

    if format_type is None:
        format_type = get_log_format_from_env()

    stream = stream if stream is not None else sys.stderr

    library_logger = logging.getLogger(LIBRARY_LOGGER)
    library_logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    for handler in library_logger.handlers[:]:
        library_logger.removeHandler(handler)

    if format_type == "json":
        formatter: logging.Formatter = JSONFormatter(include_context=include_context)
    elif format_type == "simple":
        formatter = logging.Formatter("%(levelname)s: %(message)s")
    else:  # human
        formatter = HumanReadableFormatter(use_colors=use_colors, include_context=include_context, stream=stream)

    handler = logging.StreamHandler(stream)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    library_logger.addHandler(handler)

    return library_logger
