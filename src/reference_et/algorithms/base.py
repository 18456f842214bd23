"""
Common shape of the evapotranspiration models.

Every model variant is identified by a ModelKind and turns one station's
normalized inputs into an ET value, optionally with its intermediate terms.
"""

from dataclasses import dataclass
from typing import Optional

from ..models import ModelKind


@dataclass
class EtpComponents:
    """Container for an ET result and its intermediate values."""

    # Final result
    evapotranspiration: float  # mm per timestep

    # Energy terms
    net_radiation: float  # MJ m⁻² per timestep
    soil_heat_flux: float  # MJ m⁻² per timestep

    # Psychrometric parameters
    temperature: float  # °C (mean temperature for daily FAO)
    delta: float  # Slope of vapor pressure curve (kPa/°C)
    gamma: float  # Psychrometric constant (kPa/°C)

    # Vapor pressure parameters (FAO only)
    es: Optional[float] = None  # Saturation vapor pressure (kPa)
    ea: Optional[float] = None  # Actual vapor pressure (kPa)

    # Latent heat of vaporization (Priestley-Taylor only)
    latent_heat: Optional[float] = None  # MJ/kg


class EtpModel:
    """Base class of the closed set of model variants."""

    kind: ModelKind

    def compute(self, inputs) -> float:
        """
        Compute ET for one station.

        Args:
            inputs: Normalized inputs of the model family

        Returns:
            Evapotranspiration (mm per timestep)
        """
        return self.compute_with_components(inputs).evapotranspiration

    def compute_with_components(self, inputs) -> EtpComponents:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value})"
