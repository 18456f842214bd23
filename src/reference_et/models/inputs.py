"""
Input data models.

Contains the model kinds, variable names and the per-station input records
passed from the resolver through the unit normalizer to the formulas.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Mapping, NamedTuple, Optional

# Variable names used in series dictionaries and config sections
NET_RADIATION = "net_radiation"
WIND = "wind"
MAX_TEMP = "max_temp"
MIN_TEMP = "min_temp"
TEMPERATURE = "temperature"
RELATIVE_HUMIDITY = "relative_humidity"
PRESSURE = "pressure"

VARIABLES = (
    NET_RADIATION,
    WIND,
    MAX_TEMP,
    MIN_TEMP,
    TEMPERATURE,
    RELATIVE_HUMIDITY,
    PRESSURE,
)

# Station id -> single observed value
VariableSeries = Mapping[int, float]


class ModelKind(Enum):
    """Closed set of supported evapotranspiration model variants."""

    FAO_DAILY = "fao_daily"
    FAO_HOURLY = "fao_hourly"
    PT_DAILY = "pt_daily"
    PT_HOURLY = "pt_hourly"

    @property
    def is_hourly(self) -> bool:
        return self in (ModelKind.FAO_HOURLY, ModelKind.PT_HOURLY)

    @property
    def is_priestley_taylor(self) -> bool:
        return self in (ModelKind.PT_DAILY, ModelKind.PT_HOURLY)

    @property
    def driving_variable(self) -> str:
        """Variable whose station set determines which stations are processed."""
        if self is ModelKind.FAO_DAILY:
            return MAX_TEMP
        if self is ModelKind.FAO_HOURLY:
            return NET_RADIATION
        return TEMPERATURE

    @property
    def output_unit(self) -> str:
        return "mm hour-1" if self.is_hourly else "mm day-1"


class ResolvedValue(NamedTuple):
    """A resolved observation and whether it came from the configured default."""

    value: float
    is_default: bool


# Variable name -> resolved value, for one station
ResolvedInputs = Dict[str, ResolvedValue]


@dataclass(frozen=True)
class FaoDailyInputs:
    """Normalized inputs for the daily FAO Penman-Monteith equation."""

    net_radiation: float  # MJ m⁻² day⁻¹
    wind: float  # m/s
    max_temp: float  # °C
    min_temp: float  # °C
    relative_humidity: float  # %
    pressure: float  # kPa


@dataclass(frozen=True)
class FaoHourlyInputs:
    """Normalized inputs for the hourly FAO Penman-Monteith equation."""

    net_radiation: float  # MJ m⁻² hour⁻¹
    wind: float  # m/s
    temperature: float  # °C
    relative_humidity: float  # %
    pressure: float  # kPa


@dataclass(frozen=True)
class PriestleyTaylorInputs:
    """Normalized inputs for the Priestley-Taylor equation."""

    net_radiation: float  # MJ m⁻² per timestep
    temperature: float  # °C
    pressure: float  # kPa
    is_daylight: Optional[bool] = None  # only consulted at hourly cadence
