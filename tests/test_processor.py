"""
Tests for the station processor.

End-to-end behaviour of one timestep: station coverage, default substitution,
unit conversion rules and precondition failures.
"""

import math

import pytest

from src.reference_et.algorithms import FaoPenmanMonteithDaily, PriestleyTaylorHourly
from src.reference_et.core import Config
from src.reference_et.core.exceptions import ConfigurationError, PreconditionError
from src.reference_et.models import (
    ModelKind,
    FaoDailyDefaults,
    FaoDailyInputs,
    FaoHourlyDefaults,
    PriestleyTaylorInputs,
    PriestleyTaylorParameters,
)
from src.reference_et.processor import EtpProcessor


@pytest.fixture
def processor():
    """Create processor instance with built-in defaults."""
    return EtpProcessor()


class TestFaoDaily:
    """Test cases for the daily FAO station loop."""

    def test_example_with_defaults(self, processor):
        """Max/min temperatures only; everything else from defaults."""
        results = processor.process_fao_daily(
            max_temp={1: 20.0, 2: 25.0},
            min_temp={1: 10.0, 2: 15.0},
        )

        assert set(results) == {1, 2}
        assert all(math.isfinite(value) for value in results.values())

        model = FaoPenmanMonteithDaily()
        expected = model.compute(FaoDailyInputs(
            net_radiation=2.0, wind=2.0, max_temp=20.0, min_temp=10.0,
            relative_humidity=70.0, pressure=100.0,
        ))
        assert results[1] == expected
        assert 1.3 < results[1] < 1.5

    def test_one_output_per_driving_station(self, processor):
        """Stations only present in optional series are ignored."""
        results = processor.process_fao_daily(
            max_temp={1: 20.0, 2: 22.0, 3: 24.0},
            min_temp={1: 10.0, 4: 12.0},
            wind={5: 3.0},
        )

        assert set(results) == {1, 2, 3}

    def test_absent_series_equals_default(self, processor):
        defaults = FaoDailyDefaults(wind=3.0)
        absent = processor.process_fao_daily(
            max_temp={1: 20.0, 2: 25.0}, min_temp={1: 10.0, 2: 15.0}, defaults=defaults,
        )
        explicit = processor.process_fao_daily(
            max_temp={1: 20.0, 2: 25.0}, min_temp={1: 10.0, 2: 15.0},
            wind={1: 3.0, 2: 3.0}, defaults=defaults,
        )

        assert absent == explicit

    def test_sentinel_equals_default(self, processor):
        with_sentinel = processor.process_fao_daily(
            max_temp={1: 20.0, 2: 25.0},
            min_temp={1: -9999.0, 2: 15.0},
            relative_humidity={1: 50.0, 2: -9999.0},
        )
        with_defaults = processor.process_fao_daily(
            max_temp={1: 20.0, 2: 25.0},
            min_temp={1: 0.0, 2: 15.0},
            relative_humidity={1: 50.0, 2: 70.0},
        )

        assert with_sentinel == with_defaults

    def test_sentinel_in_driving_series(self, processor):
        results = processor.process_fao_daily(max_temp={1: -9999.0}, min_temp={1: 5.0})
        expected = processor.process_fao_daily(max_temp={1: 15.0}, min_temp={1: 5.0})

        assert results == expected

    def test_observed_radiation_and_pressure_are_converted(self, processor):
        results = processor.process_fao_daily(
            max_temp={1: 25.0}, min_temp={1: 15.0},
            net_radiation={1: 4166.0}, pressure={1: 1013.0},
        )
        expected = FaoPenmanMonteithDaily().compute(FaoDailyInputs(
            net_radiation=4166.0 * 3.6 / 1000.0, wind=2.0, max_temp=25.0, min_temp=15.0,
            relative_humidity=70.0, pressure=1013.0 / 10.0,
        ))

        assert results[1] == pytest.approx(expected, rel=1e-12)

    def test_explicit_default_radiation_is_converted(self, processor):
        """FAO defaults are post-conversion; the same number observed is W m⁻²."""
        absent = processor.process_fao_daily(max_temp={1: 25.0}, min_temp={1: 15.0})
        explicit = processor.process_fao_daily(
            max_temp={1: 25.0}, min_temp={1: 15.0}, net_radiation={1: 2.0},
        )
        scaled = processor.process_fao_daily(
            max_temp={1: 25.0}, min_temp={1: 15.0}, net_radiation={1: 2.0 * 1000.0 / 3.6},
        )

        assert explicit[1] != absent[1]
        assert scaled[1] == pytest.approx(absent[1], rel=1e-12)

    def test_plausible_band_for_typical_day(self, processor):
        results = processor.process_fao_daily(
            max_temp={1: 25.0}, min_temp={1: 15.0},
            net_radiation={1: 15.0 * 1000.0 / 3.6}, wind={1: 2.0},
            relative_humidity={1: 70.0}, pressure={1: 1000.0},
        )

        assert 0 < results[1] < 15

    def test_missing_driving_series(self, processor):
        with pytest.raises(PreconditionError):
            processor.process_fao_daily(max_temp=None, min_temp={1: 10.0})

    def test_empty_driving_series(self, processor):
        with pytest.raises(PreconditionError):
            processor.process_fao_daily(max_temp={})

    def test_idempotent(self, processor):
        kwargs = dict(max_temp={1: 20.0, 2: 25.0}, min_temp={1: 10.0, 2: 15.0}, wind={1: 1.5})

        first = processor.process_fao_daily(**kwargs)
        second = processor.process_fao_daily(**kwargs)

        assert first == second
        assert first is not second


class TestFaoHourly:
    """Test cases for the hourly FAO station loop."""

    def test_driven_by_net_radiation(self, processor):
        results = processor.process_fao_hourly(
            net_radiation={1: 400.0, 2: 0.0},
            temperature={1: 22.0, 3: 18.0},
        )

        assert set(results) == {1, 2}

    def test_temperature_comes_from_temperature_series(self, processor):
        warm = processor.process_fao_hourly(net_radiation={1: 400.0}, temperature={1: 30.0})
        cool = processor.process_fao_hourly(net_radiation={1: 400.0}, temperature={1: 5.0})

        assert warm[1] > cool[1]

    def test_sentinel_humidity_uses_default(self, processor):
        defaults = FaoHourlyDefaults(relative_humidity=40.0)
        with_sentinel = processor.process_fao_hourly(
            net_radiation={1: 400.0}, relative_humidity={1: -9999.0}, defaults=defaults,
        )
        with_default = processor.process_fao_hourly(
            net_radiation={1: 400.0}, relative_humidity={1: 40.0}, defaults=defaults,
        )

        assert with_sentinel == with_default

    def test_missing_driving_series(self, processor):
        with pytest.raises(PreconditionError):
            processor.process_fao_hourly(net_radiation=None, temperature={1: 20.0})


class TestPriestleyTaylor:
    """Test cases for the Priestley-Taylor station loop."""

    @pytest.fixture
    def hourly(self):
        return PriestleyTaylorParameters(
            alpha=1.26, morning_coefficient=0.1, night_coefficient=0.5, do_hourly=True,
        )

    def test_daily_without_timestamp(self, processor):
        results = processor.process_priestley_taylor(temperature={1: 20.0, 2: 15.0})

        assert set(results) == {1, 2}
        assert all(0 < value < 15 for value in results.values())

    def test_every_station_has_output_without_pressure(self, processor):
        results = processor.process_priestley_taylor(temperature={1: 20.0, 2: 21.0}, net_radiation={1: 250.0})
        assert set(results) == {1, 2}

    def test_hourly_requires_timestamp(self, processor, hourly):
        with pytest.raises(PreconditionError):
            processor.process_priestley_taylor(temperature={1: 20.0}, parameters=hourly)

    def test_invalid_timestamp(self, processor, hourly):
        with pytest.raises(PreconditionError):
            processor.process_priestley_taylor(
                temperature={1: 20.0}, parameters=hourly, timestamp="2024-06-15 12:00",
            )

    def test_invalid_timestamp_daily(self, processor):
        with pytest.raises(PreconditionError):
            processor.process_priestley_taylor(temperature={1: 20.0}, timestamp="noon")

    def test_truncated_timestamp_hourly(self, processor, hourly):
        with pytest.raises(PreconditionError):
            processor.process_priestley_taylor(
                temperature={1: 20.0}, parameters=hourly, timestamp="2024061513",
            )

    def test_missing_driving_series(self, processor):
        with pytest.raises(PreconditionError):
            processor.process_priestley_taylor(temperature={})

    def test_hourly_day_and_night(self, processor, hourly):
        series = dict(temperature={1: 20.0}, net_radiation={1: 400.0})

        day = processor.process_priestley_taylor(parameters=hourly, timestamp="202406151200", **series)
        night = processor.process_priestley_taylor(parameters=hourly, timestamp="202406151800", **series)

        model = PriestleyTaylorHourly(alpha=1.26, morning_coefficient=0.1, night_coefficient=0.5)
        rn = 400.0 * 0.0864 / 24.0
        expected_day = model.compute(
            PriestleyTaylorInputs(net_radiation=rn, temperature=20.0, pressure=100.0, is_daylight=True)
        )

        assert day[1] == pytest.approx(expected_day, rel=1e-12)
        assert night[1] == pytest.approx(day[1] * 0.5 / 0.9)

    def test_default_radiation_is_converted(self, processor):
        """PT defaults are raw W m⁻² and convert exactly like observations."""
        parameters = PriestleyTaylorParameters()
        absent = processor.process_priestley_taylor(temperature={1: 20.0}, parameters=parameters)
        explicit = processor.process_priestley_taylor(
            temperature={1: 20.0},
            net_radiation={1: parameters.default_daily_net_radiation},
            parameters=parameters,
        )

        assert explicit == absent

    def test_hourly_default_radiation(self, processor, hourly):
        results = processor.process_priestley_taylor(
            temperature={1: 20.0}, parameters=hourly, timestamp="202406151200",
        )
        model = PriestleyTaylorHourly(alpha=1.26, morning_coefficient=0.1, night_coefficient=0.5)
        expected = model.compute(PriestleyTaylorInputs(
            net_radiation=100.0 * 0.0864 / 24.0, temperature=20.0, pressure=100.0, is_daylight=True,
        ))

        assert results[1] == pytest.approx(expected, rel=1e-12)

    def test_pressure_not_converted(self, processor):
        kpa = processor.process_priestley_taylor(temperature={1: 20.0}, pressure={1: 100.0})
        default = processor.process_priestley_taylor(temperature={1: 20.0})

        assert kpa == default


class TestProcessDispatch:
    """Test cases for EtpProcessor.process."""

    def test_fao_daily(self, processor):
        series = {"max_temp": {1: 20.0}, "min_temp": {1: 10.0}}
        assert processor.process(ModelKind.FAO_DAILY, series) == processor.process_fao_daily(**series)

    def test_fao_hourly(self, processor):
        series = {"net_radiation": {1: 300.0}, "temperature": {1: 18.0}}
        assert processor.process(ModelKind.FAO_HOURLY, series) == processor.process_fao_hourly(**series)

    def test_pt_hourly_uses_kind_cadence(self, processor):
        series = {"temperature": {1: 20.0}}
        daily = processor.process(ModelKind.PT_DAILY, series)
        hourly = processor.process(ModelKind.PT_HOURLY, series, timestamp="202406151200")

        assert hourly[1] < daily[1]

    def test_missing_driving_series(self, processor):
        with pytest.raises(PreconditionError):
            processor.process(ModelKind.FAO_DAILY, {"min_temp": {1: 10.0}})

    def test_unknown_variable(self, processor):
        with pytest.raises(ConfigurationError, match="Unknown variables"):
            processor.process(ModelKind.FAO_DAILY, {"max_temp": {1: 20.0}, "snow": {1: 1.0}})

    def test_variable_not_used_by_model(self, processor):
        with pytest.raises(ConfigurationError, match="not used"):
            processor.process(ModelKind.PT_DAILY, {"temperature": {1: 20.0}, "wind": {1: 2.0}})

    def test_unknown_kind(self, processor):
        with pytest.raises(ConfigurationError):
            processor.process("fao_daily", {"max_temp": {1: 20.0}})

    def test_config_defaults_and_novalue(self, clean_env, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(
            '{"novalue": -1.0, "models": {"fao_daily": {"min_temp": 5.0}}}', encoding="utf-8"
        )
        processor = EtpProcessor(config=Config(str(path)))

        configured = processor.process(ModelKind.FAO_DAILY, {"max_temp": {1: 20.0}, "min_temp": {1: -1.0}})
        explicit = EtpProcessor().process_fao_daily(max_temp={1: 20.0}, min_temp={1: 5.0})

        assert configured == explicit
