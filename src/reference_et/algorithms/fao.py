"""
FAO Penman-Monteith reference evapotranspiration.

Implements the daily and hourly forms of the FAO-56 combination equation for
a grass reference surface.

Reference:
    Allen, R.G., Pereira, L.S., Raes, D., Smith, M. (1998). Crop
    evapotranspiration. FAO Irrigation and Drainage Paper 56, Rome.
"""

from ..core import constants
from ..models import ModelKind, FaoDailyInputs, FaoHourlyInputs
from .base import EtpModel, EtpComponents
from .psychrometrics import (
    ieee_divide,
    saturation_vapor_pressure,
    slope_of_saturation_curve,
    fao_psychrometric_constant,
)


class FaoPenmanMonteithDaily(EtpModel):
    """Daily FAO Penman-Monteith (mm/day)."""

    kind = ModelKind.FAO_DAILY

    def compute_with_components(self, inputs: FaoDailyInputs) -> EtpComponents:
        """
        Calculate daily ET with intermediate values.

        Args:
            inputs: Normalized daily inputs

        Returns:
            EtpComponents (soil heat flux is zero at daily cadence)
        """
        # SECTION 1: Slope at mean temperature
        t_mean = (inputs.max_temp + inputs.min_temp) / 2.0
        delta = slope_of_saturation_curve(t_mean)

        # SECTION 2: Psychrometric constant
        gamma = fao_psychrometric_constant(inputs.pressure)

        # SECTION 3: Vapor pressures from Tmax and Tmin
        es = (saturation_vapor_pressure(inputs.max_temp)
              + saturation_vapor_pressure(inputs.min_temp)) / 2.0
        ea = inputs.relative_humidity / 100.0 * es

        # SECTION 4: Combination equation
        radiation_term = constants.FAO_RADIATION_COEF * delta * inputs.net_radiation
        aerodynamic_term = (
            gamma * ieee_divide(constants.FAO_DAILY_AERODYNAMIC_COEF,
                                t_mean + constants.KELVIN_OFFSET)
            * inputs.wind * (es - ea)
        )
        denominator = delta + gamma * (1 + constants.FAO_WIND_COEF * inputs.wind)

        return EtpComponents(
            evapotranspiration=ieee_divide(radiation_term + aerodynamic_term, denominator),
            net_radiation=inputs.net_radiation,
            soil_heat_flux=0.0,
            temperature=t_mean,
            delta=delta,
            gamma=gamma,
            es=es,
            ea=ea,
        )


class FaoPenmanMonteithHourly(EtpModel):
    """
    Hourly FAO Penman-Monteith (mm/hour).

    The soil heat flux always uses the daytime coefficient (G = 0.1 Rn); the
    timestep is not classified as day or night.
    """

    kind = ModelKind.FAO_HOURLY

    def compute_with_components(self, inputs: FaoHourlyInputs) -> EtpComponents:
        """
        Calculate hourly ET with intermediate values.

        Args:
            inputs: Normalized hourly inputs

        Returns:
            EtpComponents
        """
        temperature = inputs.temperature
        delta = slope_of_saturation_curve(temperature)
        gamma = fao_psychrometric_constant(inputs.pressure)

        es = saturation_vapor_pressure(temperature)
        ea = es * inputs.relative_humidity / 100.0

        soil_heat_flux = constants.FAO_HOURLY_SOIL_HEAT_COEF * inputs.net_radiation

        radiation_term = constants.FAO_RADIATION_COEF * delta * (inputs.net_radiation - soil_heat_flux)
        aerodynamic_term = ieee_divide(
            constants.FAO_HOURLY_AERODYNAMIC_COEF * gamma * inputs.wind * (es - ea),
            temperature + constants.KELVIN_OFFSET
        )
        denominator = delta + gamma * (1 + constants.FAO_WIND_COEF * inputs.wind)

        return EtpComponents(
            evapotranspiration=ieee_divide(radiation_term + aerodynamic_term, denominator),
            net_radiation=inputs.net_radiation,
            soil_heat_flux=soil_heat_flux,
            temperature=temperature,
            delta=delta,
            gamma=gamma,
            es=es,
            ea=ea,
        )
