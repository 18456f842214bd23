"""
Data validation module.

Checks call preconditions and the plausibility of normalized station inputs.
"""

import logging
from dataclasses import asdict
from typing import List, Optional, Tuple, Union

from ..core import constants
from ..core.exceptions import PreconditionError
from ..models import (
    FaoDailyInputs,
    FaoHourlyInputs,
    PriestleyTaylorInputs,
    VariableSeries,
)

StationInputs = Union[FaoDailyInputs, FaoHourlyInputs, PriestleyTaylorInputs]


class DataValidator:
    """Validate driving series and normalized inputs."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize data validator.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def require_driving_series(
        self,
        series: Optional[VariableSeries],
        name: str
    ) -> VariableSeries:
        """
        Ensure the series that determines the station set is usable.

        Args:
            series: Driving series
            name: Variable name, used in the error message

        Returns:
            The series itself

        Raises:
            PreconditionError: If the series is None or empty
        """
        if series is None:
            raise PreconditionError(
                f"Missing required driving series: {name}", {"variable": name}
            )

        if len(series) == 0:
            raise PreconditionError(
                f"Driving series is empty: {name}", {"variable": name}
            )

        return series

    def validate_inputs(self, inputs: StationInputs) -> Tuple[bool, List[str]]:
        """
        Check that normalized inputs lie in physically plausible ranges.

        Implausible values are reported but still computed.

        Args:
            inputs: Normalized station inputs

        Returns:
            Tuple of (is_valid, list_of_errors)
        """
        errors = []
        values = asdict(inputs)

        if "relative_humidity" in values:
            rh = values["relative_humidity"]
            if not (0 <= rh <= 100):
                errors.append(f"Invalid relative_humidity: {rh} (must be 0-100)")

        if "wind" in values:
            if values["wind"] < 0:
                errors.append(f"Invalid wind: {values['wind']} (must be >= 0)")

        if "max_temp" in values and "min_temp" in values:
            if values["min_temp"] > values["max_temp"]:
                errors.append("min_temp cannot be greater than max_temp")

        pressure = values["pressure"]
        if not (constants.MIN_PLAUSIBLE_PRESSURE < pressure < constants.MAX_PLAUSIBLE_PRESSURE):
            errors.append(
                f"Suspicious pressure: {pressure} kPa "
                f"(expected {constants.MIN_PLAUSIBLE_PRESSURE:.0f}-"
                f"{constants.MAX_PLAUSIBLE_PRESSURE:.0f} kPa)"
            )

        is_valid = len(errors) == 0
        return is_valid, errors
