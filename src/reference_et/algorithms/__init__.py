"""
Calculation algorithms for reference evapotranspiration.

Provides the FAO Penman-Monteith and Priestley-Taylor model variants and the
shared psychrometric sub-expressions.
"""

from .base import EtpModel, EtpComponents
from .fao import FaoPenmanMonteithDaily, FaoPenmanMonteithHourly
from .priestley_taylor import PriestleyTaylorDaily, PriestleyTaylorHourly
from .calculator import EtpCalculator
from . import psychrometrics

__all__ = [
    "EtpModel",
    "EtpComponents",
    "FaoPenmanMonteithDaily",
    "FaoPenmanMonteithHourly",
    "PriestleyTaylorDaily",
    "PriestleyTaylorHourly",
    "EtpCalculator",
    "psychrometrics",
]
