"""
Reference Evapotranspiration Estimation

This package computes reference evapotranspiration for a set of stations at a
single timestep with the FAO Penman-Monteith or Priestley-Taylor equations.
"""

__version__ = "0.1.0"
__description__ = "Station reference evapotranspiration (FAO Penman-Monteith, Priestley-Taylor)"


def __getattr__(name):
    """Lazy import to avoid importing the CLI when not needed."""
    if name == "EtpApp":
        from .main import EtpApp
        return EtpApp
    if name == "EtpProcessor":
        from .processor import EtpProcessor
        return EtpProcessor
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "EtpApp",
    "EtpProcessor",
]
