"""
Logging configuration using loguru.

The console entry point calls setup_logging() once at startup; library code
just does ``from loguru import logger``. Registry log lines carry ids only,
and ``diagnose`` stays off so tracebacks never print local variables
(passwords included).
"""

import sys

from loguru import logger

from daybook.core.exceptions import ConfigurationError

LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    fmt: str = "<level>[{level.name}]</level> {message}",
    rotation: str = "10 MB",
    retention: str = "7 days",
) -> None:
    """
    Configure loguru with a stderr sink and an optional rotating file sink.

    Args:
        level: Minimum log level name, case-insensitive.
        log_file: Path to log file. If None, only logs to stderr.
        fmt: Loguru format string for the stderr sink.
        rotation: Log file rotation size.
        retention: How long to keep rotated logs.

    Raises:
        ConfigurationError: If *level* is not a loguru level name.
    """
    level = level.upper()
    if level not in LEVELS:
        raise ConfigurationError(f"Unknown log level: {level}")

    logger.remove()
    logger.add(sys.stderr, level=level, format=fmt, diagnose=False)

    if log_file:
        logger.add(
            log_file,
            level=level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {name}:{function} | {message}",
            rotation=rotation,
            retention=retention,
            diagnose=False,
        )
