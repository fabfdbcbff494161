"""
Logging configuration for tie.

Provides a formatter with abbreviated, aligned logger names and colored
levels, and a setup function for applications embedding the package.
"""

import logging
import sys
from typing import Optional

from tie.config import settings

# Width for the logger name field (for alignment)
LOGGER_NAME_WIDTH = 32


def abbreviate_logger_name(name: str) -> str:
    """
    Abbreviate logger name for cleaner output.

    Examples:
        tie.domain.feedback_details -> t.d.feedback_details
        tie.config -> t.config
    """
    abbreviations = [
        ("tie.", "t."),
        ("domain.", "d."),
    ]
    result = name
    for full, short in abbreviations:
        result = result.replace(full, short)
    return result


class TieFormatter(logging.Formatter):
    """
    Log formatter with:
    - Abbreviated, fixed-width logger names
    - Colored log levels (only when writing to a terminal)
    - Continuation lines indented under the message
    """

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[1;31m",  # Bold Red
    }
    RESET = "\033[0m"

    # "YYYY-MM-DD HH:MM:SS.mmm | LEVEL | logger_name... | "
    CONTINUATION_PREFIX = " " * (23 + 3 + 5 + 3 + LOGGER_NAME_WIDTH + 3)

    def __init__(self, use_colors: bool = True):
        super().__init__()
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        padded_name = abbreviate_logger_name(record.name)[:LOGGER_NAME_WIDTH].ljust(
            LOGGER_NAME_WIDTH
        )

        timestamp = self.formatTime(record, "%Y-%m-%d %H:%M:%S")
        timestamp_with_ms = f"{timestamp}.{int(record.msecs):03d}"

        level_name = record.levelname[:5].ljust(5)
        color = self.COLORS.get(record.levelname, "") if self.use_colors else ""
        colored_level = f"{color}{level_name}{self.RESET}" if color else level_name

        message = record.getMessage()
        if "\n" in message:
            lines = message.split("\n")
            message = (
                lines[0]
                + "\n"
                + "\n".join(self.CONTINUATION_PREFIX + line for line in lines[1:])
            )

        if record.exc_info and not record.exc_text:
            record.exc_text = self.formatException(record.exc_info)

        log_line = f"{timestamp_with_ms} | {colored_level} | {padded_name} | {message}"

        if record.exc_text:
            indented_exc = "\n".join(
                self.CONTINUATION_PREFIX + line for line in record.exc_text.split("\n")
            )
            log_line = f"{log_line}\n{indented_exc}"

        return log_line


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure the "tie" logger hierarchy.

    Should be called once by the embedding application.

    Args:
        level: The log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to the configured log_level.
    """
    tie_logger = logging.getLogger("tie")
    tie_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(TieFormatter(use_colors=sys.stdout.isatty()))

    log_level = getattr(logging, (level or settings.log_level).upper(), logging.INFO)
    tie_logger.setLevel(log_level)
    console_handler.setLevel(log_level)

    tie_logger.addHandler(console_handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the given name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        A logger instance
    """
    return logging.getLogger(name)
