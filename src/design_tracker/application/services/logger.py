import logging
import sys
from collections.abc import Iterable

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_QUIET_LIBRARIES = ("uvicorn", "fastapi", "pymongo", "httpx", "httpcore")
DEFAULT_QUIET_LEVEL = "WARNING"

_console_handler: logging.Handler | None = None


def configure_logging(
    log_level: str = "INFO",
    log_format: str = DEFAULT_LOG_FORMAT,
    quiet_libraries: Iterable[str] = DEFAULT_QUIET_LIBRARIES,
    quiet_level: str = DEFAULT_QUIET_LEVEL,
) -> None:
    """Configure the root logger with a single stdout handler.

    Args:
        log_level: Root log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Format of the log records
        quiet_libraries: Third-party loggers kept at ``quiet_level`` whatever the root level
        quiet_level: Level applied to ``quiet_libraries``
    """
    global _console_handler
    level = getattr(logging, log_level.upper(), logging.INFO)

    # Replace our own handler so repeated app creation does not duplicate output
    root_logger = logging.getLogger()
    if _console_handler is not None:
        root_logger.removeHandler(_console_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(log_format))
    root_logger.addHandler(console_handler)
    _console_handler = console_handler
    root_logger.setLevel(level)

    for library in quiet_libraries:
        logging.getLogger(library).setLevel(quiet_level.upper())
