"""
Logging for the evapotranspiration engine.

Operational messages go to the console at INFO; the per-station trail
(defaulted variables, day/night classification, timings) is DEBUG and only
reaches the optional log file.
"""

import logging
import math
import os
from pathlib import Path
from typing import Mapping, Optional
from datetime import datetime


def setup_logger(
    name: str = "reference_et",
    log_file: Optional[str] = None,
    log_level: str = "INFO"
) -> logging.Logger:
    """
    Set up application logger with a console handler and an optional file handler.

    Args:
        name: Logger name
        log_file: Path to log file. If None, uses LOG_FILE env var; without
                  either, only console logging is configured
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        Configured logger instance
    """
    if log_file is None:
        log_file = os.getenv("LOG_FILE")

    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    detailed_formatter = logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    console_formatter = logging.Formatter(
        fmt="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(detailed_formatter)
        logger.addHandler(file_handler)

    # Prevent propagation to root logger
    logger.propagate = False

    return logger


class LoggerContext:
    """
    Context manager timing one ET timestep or input load.

    When given the results dict being filled, the completion message reports
    how many stations were computed and how many came out non-finite.
    """

    def __init__(
        self,
        logger: logging.Logger,
        operation: str,
        results: Optional[Mapping[int, float]] = None
    ):
        """
        Initialize logger context.

        Args:
            logger: Logger instance
            operation: Name of the step being logged
            results: Station results filled inside the block
        """
        self.logger = logger
        self.operation = operation
        self.results = results
        self.start_time = None

    def __enter__(self):
        self.start_time = datetime.now()
        self.logger.debug(f"Starting {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        duration = (datetime.now() - self.start_time).total_seconds()

        if exc_type is not None:
            self.logger.error(
                f"Failed {self.operation} after {duration:.3f}s: {exc_val}",
                exc_info=True
            )
            return False

        if self.results is None:
            self.logger.debug(f"Completed {self.operation} in {duration:.3f}s")
            return False

        non_finite = sum(1 for value in self.results.values() if not math.isfinite(value))
        self.logger.debug(
            f"Completed {self.operation} in {duration:.3f}s: "
            f"{len(self.results)} stations, {non_finite} non-finite"
        )
        return False
