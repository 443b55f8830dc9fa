"""Logging configuration for filterRPF.

Per-sample read counts are reported through the ``filterRPF`` logger (see
core.reporting.LoggingReporter), so the CLI configures that logger here.
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = None,
    module_name: str = "filterRPF",
) -> logging.Logger:
    """Attach stream and optional file handlers to the package logger.

    Handlers are attached to the package logger rather than the root
    logger, and any handlers from an earlier call are replaced, so repeated
    CLI invocations in one process do not duplicate output.

    Args:
        log_level: Level name, case-insensitive (default: "INFO")
        log_file: Optional log file; missing parent directories are created
        module_name: Logger to configure (default: "filterRPF")

    Returns:
        The configured logger

    Raises:
        ValueError: If log_level is not a logging level name
        PermissionError: If log_file cannot be written
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Invalid log level: {log_level}")

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        try:
            handlers.append(logging.FileHandler(log_file))
        except PermissionError:
            raise PermissionError(f"Cannot write to log file: {log_file}")

    logger = logging.getLogger(module_name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger
