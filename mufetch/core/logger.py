"""
Logging configuration for mufetch.

This module sets up the logging system with multiple outputs:
    - Console: colored, compact messages on stderr (stdout is reserved
      for the rendered display)
    - log_full.log: Complete log of all events (DEBUG and above)
    - log_errors.log: Only ERROR and CRITICAL level messages

Log File Locations:
    All log files are created in <config dir>/logs.
    Files are overwritten on each run (no rotation).

Usage:
    from mufetch.core.logger import setup_logging, get_logger

    setup_logging(log_dir)  # Call once at startup
    logger = get_logger(__name__)  # Get logger for each module
"""

import logging
from pathlib import Path

import click


LOG_FULL_FILENAME = "log_full.log"
LOG_ERRORS_FILENAME = "log_errors.log"

# Log format for file output (detailed with timestamp)
FILE_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
FILE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


# ANSI color codes
class Colors:
    """ANSI color codes for terminal output."""
    RESET = "\033[0m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    PURPLE = "\033[35m"
    CYAN = "\033[36m"
    WHITE = "\033[37m"
    BOLD = "\033[1m"


class ColoredConsoleFormatter(logging.Formatter):
    """
    Custom formatter that adds colors to console output.

    Colors:
        - DEBUG: Blue
        - INFO: Green
        - WARNING: Yellow
        - ERROR: Red
        - CRITICAL: Bold Red
    """

    LEVEL_COLORS = {
        logging.DEBUG: Colors.BLUE,
        logging.INFO: Colors.GREEN,
        logging.WARNING: Colors.YELLOW,
        logging.ERROR: Colors.RED,
        logging.CRITICAL: Colors.BOLD + Colors.RED,
    }

    def format(self, record: logging.LogRecord) -> str:
        color = self.LEVEL_COLORS.get(record.levelno, Colors.WHITE)
        colored_levelname = f"{color}{record.levelname}{Colors.RESET}"
        return f"{colored_levelname}: {record.getMessage()}"


class ConsoleHandler(logging.Handler):
    """
    Logging handler that writes to stderr through click.echo().

    stdout carries the rendered display, so log output must never
    interleave with it. click.echo() resolves sys.stderr on every call,
    which keeps the handler valid when the stream is swapped after setup.

    Behavior:
        - Formats the log record using the handler's formatter
        - Writes using click.echo(err=True)
        - Handles any exceptions by calling handleError()
    """

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
            click.echo(msg, err=True)
        except Exception:
            self.handleError(record)


class ErrorOnlyFilter(logging.Filter):
    """
    Filter that only allows ERROR and CRITICAL level records.

    Used by the error log file handler to exclude DEBUG, INFO, and WARNING.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno >= logging.ERROR


def setup_logging(log_dir: Path | None, verbose: bool = False) -> None:
    """
    Configure the logging system for the application.

    This function should be called ONCE at application startup.

    Args:
        log_dir: Directory where log files will be created.
                 If None, or if the directory cannot be created,
                 only console logging is configured.
        verbose: If True the console shows DEBUG messages,
                 otherwise WARNING and above.

    Behavior:
        1. Configure root logger level to DEBUG
        2. Create console handler (colored, stderr)
        3. Create full log file handler (DEBUG, timestamped format)
        4. Create error log file handler (filtered to ERROR+)
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Remove any existing handlers
    root_logger.handlers.clear()

    console_handler = ConsoleHandler()
    console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    console_handler.setFormatter(ColoredConsoleFormatter())
    root_logger.addHandler(console_handler)

    # Third-party HTTP chatter stays out of the console
    for noisy in ("urllib3", "spotipy", "PIL"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    if log_dir is None:
        return

    try:
        log_dir.mkdir(parents=True, exist_ok=True)

        full_handler = logging.FileHandler(
            log_dir / LOG_FULL_FILENAME, mode="w", encoding="utf-8"
        )
        full_handler.setLevel(logging.DEBUG)
        full_handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT, FILE_DATE_FORMAT))
        root_logger.addHandler(full_handler)

        error_handler = logging.FileHandler(
            log_dir / LOG_ERRORS_FILENAME, mode="w", encoding="utf-8"
        )
        error_handler.setLevel(logging.DEBUG)  # Filter handles the level restriction
        error_handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT, FILE_DATE_FORMAT))
        error_handler.addFilter(ErrorOnlyFilter())
        root_logger.addHandler(error_handler)
    except OSError as e:
        root_logger.warning(f"File logging disabled, cannot write to {log_dir}: {e}")


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: The logger name, typically __name__ of the calling module.

    Returns:
        logging.Logger: A logger instance configured by setup_logging().

    Note:
        Loggers obtained before setup_logging() is called will have no
        handlers and will not produce output.
    """
    return logging.getLogger(name)


def shutdown_logging() -> None:
    """
    Flush, close and detach all root handlers.

    Called from the CLI's finally block.
    """
    root_logger = logging.getLogger()

    for handler in root_logger.handlers[:]:
        try:
            handler.flush()
            handler.close()
        except OSError:
            pass
        root_logger.removeHandler(handler)
