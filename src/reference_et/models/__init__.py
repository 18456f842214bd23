"""
Data models for the reference evapotranspiration system.

Contains model kinds, per-station input records and parameter records.
"""

from .inputs import (
    ModelKind,
    ResolvedValue,
    ResolvedInputs,
    VariableSeries,
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
    VARIABLES,
)
from .parameters import FaoDailyDefaults, FaoHourlyDefaults, PriestleyTaylorParameters

__all__ = [
    "ModelKind",
    "ResolvedValue",
    "ResolvedInputs",
    "VariableSeries",
    "FaoDailyInputs",
    "FaoHourlyInputs",
    "PriestleyTaylorInputs",
    "FaoDailyDefaults",
    "FaoHourlyDefaults",
    "PriestleyTaylorParameters",
    "NET_RADIATION",
    "WIND",
    "MAX_TEMP",
    "MIN_TEMP",
    "TEMPERATURE",
    "RELATIVE_HUMIDITY",
    "PRESSURE",
    "VARIABLES",
]
