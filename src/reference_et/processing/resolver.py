"""
Input resolution module.

Looks up per-station observations and substitutes configured defaults for
missing series, missing stations and no-value observations.
"""

import logging
import math
from typing import Dict, Optional, Tuple

from ..core import constants
from ..models import ResolvedInputs, ResolvedValue, VariableSeries


def is_novalue(value: float, novalue: float = constants.NOVALUE) -> bool:
    """
    Check whether an observation is flagged as missing.

    Args:
        value: Observed value
        novalue: Missing-data sentinel

    Returns:
        True if the value equals the sentinel or is NaN
    """
    return value is None or value == novalue or math.isnan(value)


class InputResolver:
    """Resolve per-station inputs with default substitution."""

    def __init__(
        self,
        novalue: float = constants.NOVALUE,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize input resolver.

        Args:
            novalue: Missing-data sentinel
            logger: Logger instance
        """
        self.novalue = novalue
        self.logger = logger or logging.getLogger(__name__)

    def resolve(
        self,
        series: Optional[VariableSeries],
        station_id: int,
        default: float
    ) -> ResolvedValue:
        """
        Resolve one variable for one station.

        Args:
            series: Station id -> observed value, or None when not supplied
            station_id: Station to look up
            default: Value used when the observation is missing

        Returns:
            ResolvedValue with the observation or the default
        """
        if series is None:
            return ResolvedValue(default, True)

        value = series.get(station_id)
        if value is None or is_novalue(value, self.novalue):
            return ResolvedValue(default, True)

        return ResolvedValue(float(value), False)

    def resolve_station(
        self,
        station_id: int,
        sources: Dict[str, Tuple[Optional[VariableSeries], float]]
    ) -> ResolvedInputs:
        """
        Resolve every variable of one station.

        Args:
            station_id: Station to resolve
            sources: Variable name -> (series or None, default)

        Returns:
            Variable name -> ResolvedValue
        """
        resolved = {
            name: self.resolve(series, station_id, default)
            for name, (series, default) in sources.items()
        }

        defaulted = [name for name, item in resolved.items() if item.is_default]
        if defaulted:
            self.logger.debug(
                f"Station {station_id}: using defaults for {', '.join(defaulted)}"
            )

        return resolved
