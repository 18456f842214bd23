"""
Core utilities for the reference evapotranspiration system.

Provides configuration management, logging, constants and date handling.
"""

from .config import Config
from .logger import setup_logger, LoggerContext
from . import constants
from .date_utils import DateUtils
from .exceptions import EtpError, PreconditionError, ConfigurationError

__all__ = [
    "Config",
    "setup_logger",
    "LoggerContext",
    "constants",
    "DateUtils",
    "EtpError",
    "PreconditionError",
    "ConfigurationError",
]
