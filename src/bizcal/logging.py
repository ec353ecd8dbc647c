"""Structured logging for bizcal.

Calendars log through structlog. Nothing is printed until an application
calls configure_logging (or configures structlog itself).
"""

import logging
import time
from contextlib import contextmanager
from typing import Generator

import structlog

from bizcal.validation import ConfigurationError

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a structlog logger, named "bizcal" unless told otherwise."""
    return structlog.get_logger(name or "bizcal")


def _level_number(level: str) -> int:
    key = level.upper()
    if key not in _LEVELS:
        raise ConfigurationError(
            f"Unknown log level: {level!r}. Expected one of {list(_LEVELS)}"
        )
    return getattr(logging, key)


def configure_logging(
    level: str = "WARNING",
    json_output: bool = False,
    colors: bool = True,
) -> None:
    """Route bizcal events to stdout.

    Args:
        level: Minimum level to emit ("DEBUG", "INFO", "WARNING", "ERROR").
            DEBUG shows every calendar construction and timed walk.
        json_output: One JSON object per line instead of console output.
        colors: Colorize console output. Ignored with json_output.

    Raises:
        ConfigurationError: If level is not one of the names above.
    """
    threshold = _level_number(level)
    logging.basicConfig(format="%(message)s", level=threshold)

    processors = [
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=colors))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(threshold),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


@contextmanager
def timed_block(
    logger: structlog.BoundLogger,
    event: str,
    level: str = "debug",
    **fields,
) -> Generator[None, None, None]:
    """Log event with elapsed_ms and fields once the block exits, even on error."""
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed_ms = round((time.perf_counter() - start) * 1000, 2)
        getattr(logger, level)(event, elapsed_ms=elapsed_ms, **fields)
