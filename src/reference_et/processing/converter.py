"""
Unit conversion module.

Applies the fixed radiation and pressure conversions that turn resolved
observations into the units the formulas expect.
"""

import logging
from typing import Optional

from ..core import constants
from ..models import (
    ResolvedInputs,
    ResolvedValue,
    FaoDailyInputs,
    FaoHourlyInputs,
    PriestleyTaylorInputs,
    NET_RADIATION,
    WIND,
    MAX_TEMP,
    MIN_TEMP,
    TEMPERATURE,
    RELATIVE_HUMIDITY,
    PRESSURE,
)


class UnitConverter:
    """
    Convert resolved inputs to formula units.

    FAO defaults are declared in converted units and bypass conversion;
    Priestley-Taylor radiation defaults are raw W m⁻² and are converted
    exactly like observations.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize unit converter.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    @staticmethod
    def fao_net_radiation(value_wm2: float) -> float:
        """Convert W m⁻² to MJ m⁻² per FAO timestep."""
        return value_wm2 * 3.6 / 1000.0

    @staticmethod
    def fao_pressure(value: float) -> float:
        """Convert hPa to kPa."""
        return value / constants.FAO_PRESSURE_DIVISOR

    @staticmethod
    def pt_net_radiation(value_wm2: float, hourly: bool) -> float:
        """
        Convert W m⁻² to MJ m⁻² day⁻¹ (daily) or MJ m⁻² hour⁻¹ (hourly).

        Args:
            value_wm2: Net radiation (W m⁻²)
            hourly: True for the hourly cadence

        Returns:
            Net radiation in MJ m⁻² per timestep
        """
        if hourly:
            return value_wm2 * constants.PT_RADIATION_FACTOR / constants.HOURS_PER_DAY
        return value_wm2 * constants.PT_RADIATION_FACTOR

    @staticmethod
    def _observed_only(item: ResolvedValue, convert) -> float:
        if item.is_default:
            return item.value
        return convert(item.value)

    def normalize_fao_daily(self, resolved: ResolvedInputs) -> FaoDailyInputs:
        """Build daily FAO inputs, converting observed radiation and pressure."""
        return FaoDailyInputs(
            net_radiation=self._observed_only(resolved[NET_RADIATION], self.fao_net_radiation),
            wind=resolved[WIND].value,
            max_temp=resolved[MAX_TEMP].value,
            min_temp=resolved[MIN_TEMP].value,
            relative_humidity=resolved[RELATIVE_HUMIDITY].value,
            pressure=self._observed_only(resolved[PRESSURE], self.fao_pressure),
        )

    def normalize_fao_hourly(self, resolved: ResolvedInputs) -> FaoHourlyInputs:
        """Build hourly FAO inputs, converting observed radiation and pressure."""
        return FaoHourlyInputs(
            net_radiation=self._observed_only(resolved[NET_RADIATION], self.fao_net_radiation),
            wind=resolved[WIND].value,
            temperature=resolved[TEMPERATURE].value,
            relative_humidity=resolved[RELATIVE_HUMIDITY].value,
            pressure=self._observed_only(resolved[PRESSURE], self.fao_pressure),
        )

    def normalize_priestley_taylor(
        self,
        resolved: ResolvedInputs,
        hourly: bool,
        is_daylight: Optional[bool] = None
    ) -> PriestleyTaylorInputs:
        """
        Build Priestley-Taylor inputs.

        Net radiation is converted whether observed or defaulted; pressure is
        already in kPa.

        Args:
            resolved: Resolved station inputs
            hourly: True for the hourly cadence
            is_daylight: Daylight flag of the timestep

        Returns:
            PriestleyTaylorInputs
        """
        return PriestleyTaylorInputs(
            net_radiation=self.pt_net_radiation(resolved[NET_RADIATION].value, hourly),
            temperature=resolved[TEMPERATURE].value,
            pressure=resolved[PRESSURE].value,
            is_daylight=is_daylight,
        )
