"""
Model parameter records.

FAO defaults are expressed in post-conversion units; Priestley-Taylor net
radiation defaults are raw W m⁻² and go through the same conversion as observations.
"""

from dataclasses import dataclass

from ..core import constants


@dataclass(frozen=True)
class FaoDailyDefaults:
    """Fallback values for the daily FAO Penman-Monteith model."""

    net_radiation: float = constants.FAO_DAILY_DEFAULT_NET_RADIATION
    wind: float = constants.FAO_DAILY_DEFAULT_WIND
    max_temp: float = constants.FAO_DAILY_DEFAULT_MAX_TEMP
    min_temp: float = constants.FAO_DAILY_DEFAULT_MIN_TEMP
    relative_humidity: float = constants.FAO_DAILY_DEFAULT_RH
    pressure: float = constants.FAO_DAILY_DEFAULT_PRESSURE


@dataclass(frozen=True)
class FaoHourlyDefaults:
    """Fallback values for the hourly FAO Penman-Monteith model."""

    net_radiation: float = constants.FAO_HOURLY_DEFAULT_NET_RADIATION
    wind: float = constants.FAO_HOURLY_DEFAULT_WIND
    temperature: float = constants.FAO_HOURLY_DEFAULT_TEMP
    relative_humidity: float = constants.FAO_HOURLY_DEFAULT_RH
    pressure: float = constants.FAO_HOURLY_DEFAULT_PRESSURE


@dataclass(frozen=True)
class PriestleyTaylorParameters:
    """
    Coefficients and fallback values for the Priestley-Taylor model.

    ``morning_coefficient`` is the soil heat flux coefficient used for every
    daylight hour (7 to 17 UTC), not only for the morning.
    """

    alpha: float = constants.PT_DEFAULT_ALPHA
    morning_coefficient: float = constants.PT_DEFAULT_MORNING_COEFFICIENT
    night_coefficient: float = constants.PT_DEFAULT_NIGHT_COEFFICIENT
    do_hourly: bool = False
    default_daily_net_radiation: float = constants.PT_DEFAULT_DAILY_NET_RADIATION
    default_hourly_net_radiation: float = constants.PT_DEFAULT_HOURLY_NET_RADIATION
    default_temperature: float = constants.PT_DEFAULT_TEMP
    default_pressure: float = constants.PT_DEFAULT_PRESSURE

    @property
    def default_net_radiation(self) -> float:
        """Raw default net radiation (W m⁻²) for the configured cadence."""
        if self.do_hourly:
            return self.default_hourly_net_radiation
        return self.default_daily_net_radiation
