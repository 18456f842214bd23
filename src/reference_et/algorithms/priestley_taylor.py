"""
Priestley-Taylor evapotranspiration.

Radiation-driven estimate scaled by the empirical alpha coefficient. The
hourly form subtracts a soil heat flux whose coefficient depends on whether
the timestep is daylight; the daily form assumes negligible soil heat storage.

Reference:
    Priestley, C.H.B., Taylor, R.J. (1972). On the assessment of surface heat
    flux and evaporation using large-scale parameters. Monthly Weather Review,
    100(2), 81-92.
"""

from ..core.exceptions import PreconditionError
from ..models import ModelKind, PriestleyTaylorInputs
from .base import EtpModel, EtpComponents
from .psychrometrics import (
    ieee_divide,
    slope_of_saturation_curve,
    latent_heat_of_vaporization,
    priestley_taylor_psychrometric_constant,
)


class PriestleyTaylorDaily(EtpModel):
    """Daily Priestley-Taylor (mm/day)."""

    kind = ModelKind.PT_DAILY

    def __init__(self, alpha: float):
        self.alpha = alpha

    def _soil_heat_flux(self, inputs: PriestleyTaylorInputs) -> float:
        return 0.0

    def compute_with_components(self, inputs: PriestleyTaylorInputs) -> EtpComponents:
        """
        Calculate Priestley-Taylor ET with intermediate values.

        Args:
            inputs: Normalized inputs

        Returns:
            EtpComponents
        """
        temperature = inputs.temperature
        delta = slope_of_saturation_curve(temperature)
        latent_heat = latent_heat_of_vaporization(temperature)
        gamma = priestley_taylor_psychrometric_constant(inputs.pressure, latent_heat)

        soil_heat_flux = self._soil_heat_flux(inputs)

        et = ieee_divide(
            self.alpha * delta * (inputs.net_radiation - soil_heat_flux),
            (gamma + delta) * latent_heat
        )

        return EtpComponents(
            evapotranspiration=et,
            net_radiation=inputs.net_radiation,
            soil_heat_flux=soil_heat_flux,
            temperature=temperature,
            delta=delta,
            gamma=gamma,
            latent_heat=latent_heat,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(alpha={self.alpha})"


class PriestleyTaylorHourly(PriestleyTaylorDaily):
    """
    Hourly Priestley-Taylor (mm/hour).

    G = morning_coefficient * Rn during daylight (7 to 17 UTC) and
    night_coefficient * Rn otherwise.
    """

    kind = ModelKind.PT_HOURLY

    def __init__(self, alpha: float, morning_coefficient: float, night_coefficient: float):
        super().__init__(alpha)
        self.morning_coefficient = morning_coefficient
        self.night_coefficient = night_coefficient

    def _soil_heat_flux(self, inputs: PriestleyTaylorInputs) -> float:
        if inputs.is_daylight is None:
            raise PreconditionError("Hourly Priestley-Taylor requires a daylight flag")
        if inputs.is_daylight:
            coefficient = self.morning_coefficient
        else:
            coefficient = self.night_coefficient
        return coefficient * inputs.net_radiation

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(alpha={self.alpha}, "
            f"morning_coefficient={self.morning_coefficient}, "
            f"night_coefficient={self.night_coefficient})"
        )
