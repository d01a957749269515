"""
Logging utilities for cngeno.

Everything logs under the "cngeno" logger namespace. setup_logging attaches
handlers to that namespace only, so applications embedding cngeno keep
control of the root logger:
- Rich console output on stderr for interactive use
- Optional plain-text log file
"""

import logging
import time
from collections.abc import Callable
from contextlib import contextmanager
from functools import wraps
from typing import Any

from rich.console import Console
from rich.logging import RichHandler

__all__ = [
    "PACKAGE_LOGGER",
    "setup_logging",
    "get_logger",
    "timed",
    "log_call",
]

PACKAGE_LOGGER = "cngeno"

FILE_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(verbose: bool = False, log_file: str | None = None) -> logging.Logger:
    """
    Configure the cngeno logger.

    Calling it again replaces the handlers installed by a previous call.

    Args:
        verbose: If True, set log level to DEBUG. Otherwise INFO.
        log_file: Optional path to write logs to file.

    Returns:
        The configured package logger.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    # Console is created per call so it follows the current sys.stderr
    console_handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        markup=False,
        show_path=verbose,
        log_time_format="[%X]",
    )
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT))
        package_logger.addHandler(file_handler)

    package_logger.propagate = False
    return package_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger inside the cngeno namespace."""
    if name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")


@contextmanager
def timed(operation: str, logger: logging.Logger | None = None):
    """
    Log how long the enclosed block takes, at DEBUG level.

    Genotyper.genotype_many wraps its joblib fan-out in this, so a verbose
    run shows the wall time of resolving a whole batch:

        with timed(f"Genotyping {len(items)} requests", logger):
            outcomes = self._map(items)

    Without a logger, records go to the top-level cngeno logger.
    """
    log = logger or logging.getLogger(PACKAGE_LOGGER)
    start = time.perf_counter()
    log.debug("Starting: %s", operation)
    try:
        yield
    finally:
        log.debug("Completed: %s (%.3fs)", operation, time.perf_counter() - start)


def log_call(logger: logging.Logger | None = None) -> Callable:
    """
    Decorator logging entry, duration and failure of a function.

    Used on Genotyper.genotype_many: with on_invalid="raise" the first
    InvalidInputError is logged at ERROR under the qualified method name
    (e.g. "Genotyper.genotype_many failed: ...") and re-raised unchanged,
    so CLI and library callers still see the original exception.
    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            log = logger or logging.getLogger(func.__module__)
            log.debug("Calling %s", func.__qualname__)
            start = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                log.error("%s failed: %s", func.__qualname__, e)
                raise
            log.debug("%s completed (%.3fs)", func.__qualname__, time.perf_counter() - start)
            return result

        return wrapper

    return decorator
