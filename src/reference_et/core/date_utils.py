"""
Date and daylight utilities.

Parses the timestep timestamp and classifies it as day or night. All
functions are stateless; the timestamp format is always passed in.
"""

import logging
from datetime import datetime
from typing import Optional
import pytz

from . import constants
from .exceptions import PreconditionError


class DateUtils:
    """Utilities for timestamp parsing and day/night classification."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize date utilities.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    @staticmethod
    def parse_timestamp(
        value: str,
        fmt: str = constants.DEFAULT_TIMESTAMP_FORMAT
    ) -> datetime:
        """
        Parse a UTC timestamp string.

        Args:
            value: Timestamp string (e.g., '202406151300' for the default format)
            fmt: strptime format of the timestamp

        Returns:
            Timezone-aware datetime in UTC

        Raises:
            PreconditionError: If the value is missing or does not match the format
        """
        if not value:
            raise PreconditionError("Timestamp is required", {"format": fmt})

        try:
            parsed = datetime.strptime(value, fmt)
        except (TypeError, ValueError) as e:
            raise PreconditionError(
                f"Invalid timestamp: {value!r}",
                {"format": fmt, "reason": str(e)}
            ) from e

        # strptime accepts short fields, so "2024061513" would parse as 01:03
        if parsed.strftime(fmt) != value:
            raise PreconditionError(
                f"Invalid timestamp: {value!r}",
                {"format": fmt, "reason": "value does not match the fixed-width format"}
            )

        return pytz.UTC.localize(parsed)

    @staticmethod
    def is_daylight(hour: int) -> bool:
        """
        Classify an hour of the day as daylight.

        Hours 6 and 18 are night; 7 through 17 are daylight.

        Args:
            hour: Hour of day (0-23)

        Returns:
            True if the hour falls in the daylight window
        """
        return constants.DAYLIGHT_START_HOUR < hour < constants.DAYLIGHT_END_HOUR

    def classify(
        self,
        value: str,
        fmt: str = constants.DEFAULT_TIMESTAMP_FORMAT
    ) -> bool:
        """
        Parse a timestamp and return its daylight flag.

        Args:
            value: Timestamp string
            fmt: strptime format of the timestamp

        Returns:
            True if the timestamp's UTC hour is a daylight hour
        """
        timestamp = self.parse_timestamp(value, fmt)
        daylight = self.is_daylight(timestamp.hour)

        self.logger.debug(
            f"Timestamp {timestamp.isoformat()} classified as "
            f"{'day' if daylight else 'night'}"
        )

        return daylight
