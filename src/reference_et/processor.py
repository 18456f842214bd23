"""
Station processing module.

Drives resolution, unit conversion, day/night classification and the model
formulas across every station of the driving series for one timestep.
"""

import logging
from dataclasses import replace
from typing import Dict, Mapping, Optional

from .core import Config, DateUtils, LoggerContext, constants
from .core.exceptions import ConfigurationError
from .models import (
    ModelKind,
    VariableSeries,
    FaoDailyDefaults,
    FaoHourlyDefaults,
    PriestleyTaylorParameters,
    NET_RADIATION,
    WIND,
    MAX_TEMP,
    MIN_TEMP,
    TEMPERATURE,
    RELATIVE_HUMIDITY,
    PRESSURE,
    VARIABLES,
)
from .processing import InputResolver, UnitConverter, DataValidator
from .algorithms import EtpCalculator


class EtpProcessor:
    """
    Compute reference evapotranspiration for all stations of a timestep.

    Each call is independent: the output dictionary is built from scratch and
    returned only once every station has been computed.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize processor.

        Args:
            config: Configuration supplying defaults, the no-value sentinel and
                    the timestamp format. Built-in defaults when None.
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.config = config

        novalue = config.novalue if config else constants.NOVALUE
        self.timestamp_format = (
            config.timestamp_format if config else constants.DEFAULT_TIMESTAMP_FORMAT
        )

        self.resolver = InputResolver(novalue=novalue, logger=self.logger)
        self.converter = UnitConverter(self.logger)
        self.validator = DataValidator(self.logger)
        self.date_utils = DateUtils(self.logger)
        self.calculator = EtpCalculator(self.logger)

    def _check_plausibility(self, station_id: int, inputs) -> None:
        is_valid, errors = self.validator.validate_inputs(inputs)
        if not is_valid:
            self.logger.warning(f"Station {station_id}: {'; '.join(errors)}")

    def process_fao_daily(
        self,
        max_temp: VariableSeries,
        min_temp: Optional[VariableSeries] = None,
        net_radiation: Optional[VariableSeries] = None,
        wind: Optional[VariableSeries] = None,
        relative_humidity: Optional[VariableSeries] = None,
        pressure: Optional[VariableSeries] = None,
        defaults: Optional[FaoDailyDefaults] = None
    ) -> Dict[int, float]:
        """
        Calculate daily FAO Penman-Monteith ET for every station in ``max_temp``.

        Args:
            max_temp: Maximum daily temperature (°C), the driving series
            min_temp: Minimum daily temperature (°C)
            net_radiation: Net radiation (W m⁻²)
            wind: Wind speed (m/s)
            relative_humidity: Relative humidity (%)
            pressure: Atmospheric pressure (hPa)
            defaults: Fallback values (post-conversion units)

        Returns:
            Station id -> ET (mm/day)
        """
        defaults = defaults or (self.config.fao_daily_defaults if self.config else FaoDailyDefaults())
        self.validator.require_driving_series(max_temp, MAX_TEMP)
        model = self.calculator.create_model(ModelKind.FAO_DAILY)

        sources = {
            MAX_TEMP: (max_temp, defaults.max_temp),
            MIN_TEMP: (min_temp, defaults.min_temp),
            NET_RADIATION: (net_radiation, defaults.net_radiation),
            WIND: (wind, defaults.wind),
            RELATIVE_HUMIDITY: (relative_humidity, defaults.relative_humidity),
            PRESSURE: (pressure, defaults.pressure),
        }

        results = {}
        with LoggerContext(self.logger, "daily FAO ET", results):
            for station_id in max_temp:
                resolved = self.resolver.resolve_station(station_id, sources)
                inputs = self.converter.normalize_fao_daily(resolved)
                self._check_plausibility(station_id, inputs)
                results[station_id] = self.calculator.calculate(model, inputs)

        return results

    def process_fao_hourly(
        self,
        net_radiation: VariableSeries,
        temperature: Optional[VariableSeries] = None,
        wind: Optional[VariableSeries] = None,
        relative_humidity: Optional[VariableSeries] = None,
        pressure: Optional[VariableSeries] = None,
        defaults: Optional[FaoHourlyDefaults] = None
    ) -> Dict[int, float]:
        """
        Calculate hourly FAO Penman-Monteith ET for every station in ``net_radiation``.

        Args:
            net_radiation: Net radiation (W m⁻²), the driving series
            temperature: Mean hourly temperature (°C)
            wind: Wind speed (m/s)
            relative_humidity: Relative humidity (%)
            pressure: Atmospheric pressure (hPa)
            defaults: Fallback values (post-conversion units)

        Returns:
            Station id -> ET (mm/hour)
        """
        defaults = defaults or (self.config.fao_hourly_defaults if self.config else FaoHourlyDefaults())
        self.validator.require_driving_series(net_radiation, NET_RADIATION)
        model = self.calculator.create_model(ModelKind.FAO_HOURLY)

        sources = {
            NET_RADIATION: (net_radiation, defaults.net_radiation),
            TEMPERATURE: (temperature, defaults.temperature),
            WIND: (wind, defaults.wind),
            RELATIVE_HUMIDITY: (relative_humidity, defaults.relative_humidity),
            PRESSURE: (pressure, defaults.pressure),
        }

        results = {}
        with LoggerContext(self.logger, "hourly FAO ET", results):
            for station_id in net_radiation:
                resolved = self.resolver.resolve_station(station_id, sources)
                inputs = self.converter.normalize_fao_hourly(resolved)
                self._check_plausibility(station_id, inputs)
                results[station_id] = self.calculator.calculate(model, inputs)

        return results

    def process_priestley_taylor(
        self,
        temperature: VariableSeries,
        net_radiation: Optional[VariableSeries] = None,
        pressure: Optional[VariableSeries] = None,
        parameters: Optional[PriestleyTaylorParameters] = None,
        timestamp: Optional[str] = None
    ) -> Dict[int, float]:
        """
        Calculate Priestley-Taylor ET for every station in ``temperature``.

        The cadence follows ``parameters.do_hourly``. At hourly cadence the
        timestamp is required to pick the day or night soil heat coefficient.

        Args:
            temperature: Air temperature (°C), the driving series
            net_radiation: Net radiation (W m⁻²)
            pressure: Atmospheric pressure (kPa)
            parameters: Coefficients and fallback values
            timestamp: Current timestep, e.g. '202406151300'

        Returns:
            Station id -> ET (mm per timestep)

        Raises:
            PreconditionError: If the driving series is missing or empty, or the
                timestamp is missing (hourly) or unparseable
        """
        parameters = parameters or (
            self.config.priestley_taylor_parameters if self.config else PriestleyTaylorParameters()
        )
        self.validator.require_driving_series(temperature, TEMPERATURE)

        hourly = parameters.do_hourly
        is_daylight = None
        if hourly or timestamp is not None:
            is_daylight = self.date_utils.classify(timestamp, self.timestamp_format)

        kind = ModelKind.PT_HOURLY if hourly else ModelKind.PT_DAILY
        model = self.calculator.create_model(kind, parameters)

        sources = {
            TEMPERATURE: (temperature, parameters.default_temperature),
            NET_RADIATION: (net_radiation, parameters.default_net_radiation),
            PRESSURE: (pressure, parameters.default_pressure),
        }

        results = {}
        with LoggerContext(self.logger, f"{kind.value} ET", results):
            for station_id in temperature:
                resolved = self.resolver.resolve_station(station_id, sources)
                inputs = self.converter.normalize_priestley_taylor(resolved, hourly, is_daylight)
                self._check_plausibility(station_id, inputs)
                results[station_id] = self.calculator.calculate(model, inputs)

        return results

    def process(
        self,
        kind: ModelKind,
        series: Mapping[str, Optional[VariableSeries]],
        timestamp: Optional[str] = None
    ) -> Dict[int, float]:
        """
        Calculate ET with the model selected by ``kind``.

        Args:
            kind: Model kind
            series: Variable name -> station series; absent names use defaults
            timestamp: Current timestep (required for pt_hourly)

        Returns:
            Station id -> ET (mm per timestep)

        Raises:
            ConfigurationError: If a series name is unknown or not used by the model
        """
        if not isinstance(kind, ModelKind):
            raise ConfigurationError(f"Unknown model kind: {kind!r}")

        unknown = set(series) - set(VARIABLES)
        if unknown:
            raise ConfigurationError(f"Unknown variables: {', '.join(sorted(unknown))}")

        if kind is ModelKind.FAO_DAILY:
            accepted = {MAX_TEMP, MIN_TEMP, NET_RADIATION, WIND, RELATIVE_HUMIDITY, PRESSURE}
        elif kind is ModelKind.FAO_HOURLY:
            accepted = {NET_RADIATION, TEMPERATURE, WIND, RELATIVE_HUMIDITY, PRESSURE}
        else:
            accepted = {TEMPERATURE, NET_RADIATION, PRESSURE}

        unused = set(series) - accepted
        if unused:
            raise ConfigurationError(
                f"Variables not used by {kind.value}: {', '.join(sorted(unused))}"
            )

        self.logger.info(f"Processing {kind.value} ({kind.output_unit})")

        optional = dict(series)
        driving = optional.pop(kind.driving_variable, None)

        if kind is ModelKind.FAO_DAILY:
            return self.process_fao_daily(driving, **optional)
        if kind is ModelKind.FAO_HOURLY:
            return self.process_fao_hourly(driving, **optional)

        parameters = self.config.priestley_taylor_parameters if self.config else PriestleyTaylorParameters()
        parameters = replace(parameters, do_hourly=kind.is_hourly)
        return self.process_priestley_taylor(
            driving, parameters=parameters, timestamp=timestamp, **optional
        )
