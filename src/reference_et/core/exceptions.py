"""
Custom exceptions for reference evapotranspiration estimation.

Missing observations are never errors (they fall back to defaults); these
exceptions cover the conditions that make a whole call invalid.
"""


class EtpError(Exception):
    """Base exception for evapotranspiration errors."""

    def __init__(self, message: str, details: dict = None, *args):
        super().__init__(message, *args)
        self.message = message
        self.details = details or {}

    def __str__(self):
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class PreconditionError(EtpError, ValueError):
    """
    Raised when a call cannot be computed at all.

    This includes:
    - Missing or empty driving series
    - Missing or unparseable timestamp when daylight is needed
    """


class ConfigurationError(EtpError, ValueError):
    """Raised for invalid configuration content or an unknown model kind."""
