"""
Evapotranspiration calculator facade.

Builds the model variant for a ModelKind and runs it with logging, so callers
do not need to know which class implements which variant.
"""

import logging
from typing import Optional

from ..core.exceptions import ConfigurationError
from ..models import ModelKind, PriestleyTaylorParameters
from .base import EtpModel, EtpComponents
from .fao import FaoPenmanMonteithDaily, FaoPenmanMonteithHourly
from .priestley_taylor import PriestleyTaylorDaily, PriestleyTaylorHourly


class EtpCalculator:
    """
    High-level calculator for reference evapotranspiration.

    This class acts as a facade over the model variants.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize evapotranspiration calculator.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    @staticmethod
    def create_model(
        kind: ModelKind,
        parameters: Optional[PriestleyTaylorParameters] = None
    ) -> EtpModel:
        """
        Build the model variant for a kind.

        Args:
            kind: Model kind
            parameters: Priestley-Taylor coefficients (ignored by FAO kinds)

        Returns:
            EtpModel instance

        Raises:
            ConfigurationError: If the kind is not a ModelKind
        """
        if kind is ModelKind.FAO_DAILY:
            return FaoPenmanMonteithDaily()
        if kind is ModelKind.FAO_HOURLY:
            return FaoPenmanMonteithHourly()

        parameters = parameters or PriestleyTaylorParameters()
        if kind is ModelKind.PT_DAILY:
            return PriestleyTaylorDaily(alpha=parameters.alpha)
        if kind is ModelKind.PT_HOURLY:
            return PriestleyTaylorHourly(
                alpha=parameters.alpha,
                morning_coefficient=parameters.morning_coefficient,
                night_coefficient=parameters.night_coefficient,
            )

        raise ConfigurationError(f"Unknown model kind: {kind!r}")

    def calculate(self, model: EtpModel, inputs) -> float:
        """
        Calculate ET for one station.

        Args:
            model: Model variant
            inputs: Normalized inputs of the model family

        Returns:
            Evapotranspiration (mm per timestep)
        """
        try:
            return model.compute(inputs)
        except Exception as e:
            self.logger.error(f"Error calculating evapotranspiration with {model}: {e}", exc_info=True)
            raise

    def calculate_with_components(self, model: EtpModel, inputs) -> EtpComponents:
        """
        Calculate ET with detailed intermediate components.

        Args:
            model: Model variant
            inputs: Normalized inputs of the model family

        Returns:
            EtpComponents object containing all intermediate values
        """
        try:
            components = model.compute_with_components(inputs)
        except Exception as e:
            self.logger.error(f"Error calculating evapotranspiration components: {e}", exc_info=True)
            raise

        self.logger.debug(
            f"{model.kind.value}: ET={components.evapotranspiration:.4f} "
            f"(delta={components.delta:.4f}, gamma={components.gamma:.5f}, "
            f"Rn={components.net_radiation:.4f}, G={components.soil_heat_flux:.4f})"
        )

        return components
