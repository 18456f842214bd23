"""
Shared psychrometric sub-expressions.

Saturation vapor pressure, the slope of its curve, the psychrometric constant
and the latent heat of vaporization, shared by the FAO Penman-Monteith and
Priestley-Taylor models.

Division and exponentiation follow IEEE floating-point semantics: a zero
denominator yields ±inf or NaN and an overflowing exponent yields inf, the
same values a C or Java implementation would propagate.
"""

import math

from ..core import constants


def ieee_divide(numerator: float, denominator: float) -> float:
    """Divide, returning ±inf or NaN instead of raising on a zero denominator."""
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def ieee_exp(value: float) -> float:
    """Exponential, returning inf instead of raising on overflow."""
    try:
        return math.exp(value)
    except OverflowError:
        return math.inf


def saturation_vapor_pressure(temperature: float) -> float:
    """
    Calculate saturation vapor pressure using the Tetens formula.

    Args:
        temperature: Air temperature (°C)

    Returns:
        Saturation vapor pressure (kPa)
    """
    exponent = ieee_divide(constants.TETENS_B * temperature, temperature + constants.TETENS_C)
    return constants.TETENS_A * ieee_exp(exponent)


def slope_of_saturation_curve(temperature: float) -> float:
    """
    Calculate the slope of the saturation vapor pressure curve (Delta).

    Args:
        temperature: Air temperature (°C)

    Returns:
        Slope of vapor pressure curve (kPa/°C)
    """
    shifted = temperature + constants.TETENS_C
    return ieee_divide(
        constants.SLOPE_COEF * saturation_vapor_pressure(temperature),
        shifted * shifted
    )


def fao_psychrometric_constant(pressure: float) -> float:
    """
    Psychrometric constant as used by FAO Penman-Monteith.

    Args:
        pressure: Atmospheric pressure (kPa)

    Returns:
        Psychrometric constant (kPa/°C)
    """
    return constants.FAO_PSYCHROMETRIC_COEF * pressure


def latent_heat_of_vaporization(temperature: float) -> float:
    """
    Latent heat of vaporization.

    Args:
        temperature: Air temperature (°C)

    Returns:
        Latent heat (MJ/kg)
    """
    return constants.LATENT_HEAT_A - constants.LATENT_HEAT_B * temperature


def priestley_taylor_psychrometric_constant(pressure: float, latent_heat: float) -> float:
    """
    Psychrometric constant derived from pressure and latent heat.

    Args:
        pressure: Atmospheric pressure (kPa)
        latent_heat: Latent heat of vaporization (MJ/kg)

    Returns:
        Psychrometric constant (kPa/°C)
    """
    return ieee_divide(
        constants.SPECIFIC_HEAT_AIR * pressure,
        constants.MOLECULAR_WEIGHT_RATIO * latent_heat
    )
