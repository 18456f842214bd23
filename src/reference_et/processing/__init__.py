"""
Data processing module for the reference evapotranspiration system.

Provides input resolution, unit conversion and validation of station inputs.
"""

from .resolver import InputResolver, is_novalue
from .converter import UnitConverter
from .validator import DataValidator

__all__ = [
    "InputResolver",
    "is_novalue",
    "UnitConverter",
    "DataValidator",
]
