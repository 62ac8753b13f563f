"""
Logging configuration for aoide-bridge.

This module sets up the logging system with multiple outputs:
    - Console: Real-time messages with tqdm-compatible formatting
    - log_full.log: Complete log of all events (DEBUG and above)
    - log_errors.log: Only ERROR and CRITICAL level messages
    - import_failures.log: Entities that could not be imported

Everything written to screen is also saved to file, then filtered into
specialized files.

Log File Locations:
    All log files are created in a 'logs' subdirectory of the output
    directory passed to setup_logging(). Each run gets its own timestamp.

Usage:
    from aoide_bridge.core.logger import setup_logging, get_logger

    setup_logging(output_dir)  # Call once at startup
    logger = get_logger(__name__)  # Get logger for each module

    logger.info("Importing tracks")
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import TextIO

from tqdm import tqdm


# Log file name prefixes (created in output_dir/logs)
LOG_FULL_FILENAME = "log_full"
LOG_ERRORS_FILENAME = "log_errors"
IMPORT_FAILURES_FILENAME = "import_failures"

# Log format for file output (detailed with timestamp)
FILE_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
FILE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class Colors:
    """ANSI color codes for terminal output."""
    RESET = "\033[0m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    WHITE = "\033[37m"
    BOLD = "\033[1m"


class ColoredConsoleFormatter(logging.Formatter):
    """
    Formatter that colors the level name of console output.

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
        return f"{color}{record.levelname}{Colors.RESET}: {record.getMessage()}"


class TqdmLoggingHandler(logging.Handler):
    """
    Logging handler that writes to console without breaking tqdm progress bars.

    Uses tqdm.write(), so messages appear above any active progress bar
    (e.g. the one shown by a batch import).
    """

    def __init__(self, stream: TextIO = sys.stderr) -> None:
        super().__init__()
        self.stream = stream

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
            tqdm.write(msg, file=self.stream)
        except Exception:
            self.handleError(record)


class ImportFailureHandler(logging.Handler):
    """
    Handler that captures entity import failures for the failures report.

    Records carrying the 'import_failed_uid' extra field are written to
    import_failures.log in a simple, human-readable format:

        01HXYZ...
        file:///music/broken.flac
        missing content URL

    All other records are ignored.

    Attributes:
        report_path: Path to the import_failures.log file.
        report_file: Open file handle, set by open().
    """

    def __init__(self, report_path: Path) -> None:
        super().__init__()
        self.report_path = report_path
        self.report_file: TextIO | None = None

    def open(self) -> None:
        """Open the report file for writing (overwrites existing content)."""
        self.report_file = open(self.report_path, "w", encoding="utf-8")

    def emit(self, record: logging.LogRecord) -> None:
        if not hasattr(record, "import_failed_uid"):
            return

        if self.report_file is None:
            return

        try:
            uid = getattr(record, "import_failed_uid", "Unknown")
            url = getattr(record, "import_failed_url", None) or ""
            reason = getattr(record, "import_failed_reason", "")

            self.acquire()
            try:
                self.report_file.write(f"{uid}\n{url}\n{reason}\n\n")
                self.report_file.flush()
            finally:
                self.release()
        except Exception:
            self.handleError(record)

    def close(self) -> None:
        """Close the report file handle. Safe to call multiple times."""
        if self.report_file is not None:
            self.report_file.close()
            self.report_file = None
        super().close()


class ErrorOnlyFilter(logging.Filter):
    """Filter that only allows ERROR and CRITICAL level records."""

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno >= logging.ERROR


def setup_logging(output_dir: Path, console_level: int | str = logging.INFO) -> None:
    """
    Configure the logging system for the application.

    Call ONCE at application startup, after the configuration is loaded.

    Args:
        output_dir: Directory where log files will be created.
                    Logs are stored in a 'logs' subdirectory.
        console_level: Minimum level shown on the console. Files always
                       receive DEBUG and above.

    Behavior:
        1. Create output_dir/logs if it doesn't exist
        2. Configure root logger level to DEBUG and drop existing handlers
        3. Add console handler (TqdmLoggingHandler, colored)
        4. Add full log file handler (DEBUG)
        5. Add error log file handler (ERROR+ via ErrorOnlyFilter)
        6. Add import failures handler

    Thread Safety:
        This function is NOT thread-safe. Call it from the main thread
        before starting any worker threads.
    """
    logs_dir = output_dir / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.handlers.clear()

    console_handler = TqdmLoggingHandler()
    console_handler.setLevel(console_level)
    console_handler.setFormatter(ColoredConsoleFormatter())
    root_logger.addHandler(console_handler)

    full_log_path = logs_dir / f"{LOG_FULL_FILENAME}_{timestamp}.log"
    full_handler = logging.FileHandler(full_log_path, mode="w", encoding="utf-8")
    full_handler.setLevel(logging.DEBUG)
    full_handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT, FILE_DATE_FORMAT))
    root_logger.addHandler(full_handler)

    error_log_path = logs_dir / f"{LOG_ERRORS_FILENAME}_{timestamp}.log"
    error_handler = logging.FileHandler(error_log_path, mode="w", encoding="utf-8")
    error_handler.setLevel(logging.DEBUG)  # Filter handles the level restriction
    error_handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT, FILE_DATE_FORMAT))
    error_handler.addFilter(ErrorOnlyFilter())
    root_logger.addHandler(error_handler)

    failures_path = logs_dir / f"{IMPORT_FAILURES_FILENAME}_{timestamp}.log"
    failures_handler = ImportFailureHandler(failures_path)
    failures_handler.open()
    root_logger.addHandler(failures_handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: The logger name, typically __name__ of the calling module.

    Note:
        Loggers obtained before setup_logging() is called have no handlers
        of their own and fall back to the root logger configuration.
    """
    return logging.getLogger(name)


def log_import_failure(
    logger: logging.Logger,
    uid: str,
    content_url: str | None,
    error_message: str,
) -> None:
    """
    Log an entity whose import failed.

    Logs a WARNING with the extra fields that ImportFailureHandler
    picks up for import_failures.log.

    Args:
        logger: The logger to use for the message.
        uid: Uid of the entity that failed.
        content_url: Content URL of the entity, if it has one.
        error_message: Description of why the import failed.

    Example:
        log_import_failure(
            logger,
            uid="01HXYZ",
            content_url="https://example.com/a.mp3",
            error_message="unsupported content URL: https://example.com/a.mp3"
        )
    """
    logger.warning(
        f"Import failed: {uid} - {error_message}",
        extra={
            "import_failed_uid": uid,
            "import_failed_url": content_url,
            "import_failed_reason": error_message,
        }
    )


def shutdown_logging() -> None:
    """
    Flush, close and remove all handlers of the root logger.

    Typically called in a finally block at application exit.
    """
    root_logger = logging.getLogger()

    for handler in root_logger.handlers[:]:
        handler.flush()
        handler.close()
        root_logger.removeHandler(handler)
