"""
Configuration module for reference evapotranspiration estimation.

Loads configuration from an optional JSON file and environment variables.
"""

import json
import math
import os
from typing import Dict, Any, Optional
from pathlib import Path

from . import constants
from .exceptions import ConfigurationError

# Keys accepted in each models.<section> of the configuration file
MODEL_SECTION_KEYS = {
    "fao_daily": {
        "net_radiation", "wind", "max_temp", "min_temp", "relative_humidity", "pressure",
    },
    "fao_hourly": {
        "net_radiation", "wind", "temperature", "relative_humidity", "pressure",
    },
    "priestley_taylor": {
        "alpha", "morning_coefficient", "night_coefficient", "do_hourly",
        "default_daily_net_radiation", "default_hourly_net_radiation",
        "default_temperature", "default_pressure",
    },
}


class Config:
    """Configuration manager for the application."""

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration JSON file. If None, uses CONFIG_FILE env var;
                        without either, built-in defaults are used
        """
        self.config_file = config_file or os.getenv("CONFIG_FILE")
        self.config: Dict[str, Any] = {}
        self._load_config()
        self._override_from_env()
        self._validate_config()

    def _load_config(self) -> None:
        """Load configuration from JSON file."""
        if not self.config_file:
            return

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_file}")

        with open(config_path, "r", encoding="utf-8") as f:
            try:
                self.config = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigurationError(
                    f"Invalid JSON in configuration file: {self.config_file}",
                    {"reason": str(e)}
                ) from e

        if not isinstance(self.config, dict):
            raise ConfigurationError("Configuration root must be a JSON object")

    def _override_from_env(self) -> None:
        """Override configuration with environment variables."""
        # Logging
        if os.getenv("LOG_LEVEL"):
            self.config.setdefault("logging", {})["level"] = os.getenv("LOG_LEVEL")

        if os.getenv("LOG_FILE"):
            self.config.setdefault("logging", {})["file"] = os.getenv("LOG_FILE")

        # Missing data sentinel
        if os.getenv("ETP_NOVALUE"):
            try:
                self.config["novalue"] = float(os.getenv("ETP_NOVALUE"))
            except ValueError as e:
                raise ConfigurationError(
                    f"ETP_NOVALUE must be numeric, got {os.getenv('ETP_NOVALUE')!r}"
                ) from e

        if os.getenv("ETP_TIMESTAMP_FORMAT"):
            self.config["timestamp_format"] = os.getenv("ETP_TIMESTAMP_FORMAT")

    def _validate_config(self) -> None:
        """Validate model sections and scalar settings."""
        novalue = self.config.get("novalue", constants.NOVALUE)
        if isinstance(novalue, bool) or not isinstance(novalue, (int, float)):
            raise ConfigurationError(f"novalue must be numeric, got {novalue!r}")

        models = self.config.get("models", {})
        if not isinstance(models, dict):
            raise ConfigurationError("models must be a JSON object")

        unknown_sections = set(models) - set(MODEL_SECTION_KEYS)
        if unknown_sections:
            raise ConfigurationError(
                f"Unknown model sections: {', '.join(sorted(unknown_sections))}"
            )

        errors = []
        for section, values in models.items():
            if not isinstance(values, dict):
                errors.append(f"models.{section} must be a JSON object")
                continue

            for key, value in values.items():
                if key not in MODEL_SECTION_KEYS[section]:
                    errors.append(f"Unknown key: models.{section}.{key}")
                elif key == "do_hourly":
                    if not isinstance(value, bool):
                        errors.append(f"models.{section}.{key} must be a boolean")
                elif isinstance(value, bool) or not isinstance(value, (int, float)):
                    errors.append(f"models.{section}.{key} must be numeric")
                elif not math.isfinite(value):
                    errors.append(f"models.{section}.{key} must be finite")

        if errors:
            raise ConfigurationError(
                f"Invalid configuration: {'; '.join(errors)}"
            )

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key (supports dot notation).

        Args:
            key: Configuration key (e.g., 'models.fao_daily.wind')
            default: Default value if key not found

        Returns:
            Configuration value
        """
        keys = key.split(".")
        value = self.config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value

    @property
    def novalue(self) -> float:
        """Get the missing-data sentinel."""
        return float(self.get("novalue", constants.NOVALUE))

    @property
    def timestamp_format(self) -> str:
        """Get the strptime format of timestep timestamps."""
        return self.get("timestamp_format", constants.DEFAULT_TIMESTAMP_FORMAT)

    @property
    def log_level(self) -> str:
        """Get logging level."""
        return self.get("logging.level", "INFO")

    @property
    def log_file(self) -> Optional[str]:
        """Get log file path."""
        return self.get("logging.file")

    @property
    def fao_daily_defaults(self):
        """Get defaults for the daily FAO model."""
        from ..models import FaoDailyDefaults
        return FaoDailyDefaults(**self.get("models.fao_daily", {}))

    @property
    def fao_hourly_defaults(self):
        """Get defaults for the hourly FAO model."""
        from ..models import FaoHourlyDefaults
        return FaoHourlyDefaults(**self.get("models.fao_hourly", {}))

    @property
    def priestley_taylor_parameters(self):
        """Get coefficients and defaults for the Priestley-Taylor model."""
        from ..models import PriestleyTaylorParameters
        return PriestleyTaylorParameters(**self.get("models.priestley_taylor", {}))

    def __repr__(self) -> str:
        """String representation of config."""
        return f"Config(file={self.config_file}, novalue={self.novalue})"
