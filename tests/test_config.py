"""
Tests for configuration loading.
"""

import json

import pytest

from src.reference_et.core import Config, constants
from src.reference_et.core.exceptions import ConfigurationError
from src.reference_et.models import FaoDailyDefaults, PriestleyTaylorParameters


@pytest.fixture
def write_config(tmp_path):
    """Write a configuration dictionary to a temporary JSON file."""
    def _write(content):
        path = tmp_path / "config.json"
        path.write_text(json.dumps(content), encoding="utf-8")
        return str(path)
    return _write


class TestConfig:
    """Test cases for Config."""

    def test_builtin_defaults(self, clean_env):
        config = Config()

        assert config.novalue == constants.NOVALUE
        assert config.timestamp_format == constants.DEFAULT_TIMESTAMP_FORMAT
        assert config.log_level == "INFO"
        assert config.log_file is None
        assert config.fao_daily_defaults == FaoDailyDefaults()
        assert config.priestley_taylor_parameters == PriestleyTaylorParameters()

    def test_missing_file(self, clean_env, tmp_path):
        with pytest.raises(FileNotFoundError):
            Config(str(tmp_path / "missing.json"))

    def test_invalid_json(self, clean_env, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            Config(str(path))

    def test_model_sections(self, clean_env, write_config):
        config = Config(write_config({
            "novalue": -999,
            "models": {
                "fao_daily": {"wind": 3.5, "relative_humidity": 55},
                "fao_hourly": {"temperature": 20.0},
                "priestley_taylor": {
                    "alpha": 1.3,
                    "morning_coefficient": 0.1,
                    "night_coefficient": 0.5,
                    "do_hourly": True,
                },
            },
        }))

        assert config.novalue == -999.0
        assert config.fao_daily_defaults.wind == 3.5
        assert config.fao_daily_defaults.relative_humidity == 55
        assert config.fao_daily_defaults.max_temp == constants.FAO_DAILY_DEFAULT_MAX_TEMP
        assert config.fao_hourly_defaults.temperature == 20.0

        parameters = config.priestley_taylor_parameters
        assert parameters.alpha == 1.3
        assert parameters.do_hourly is True
        assert parameters.default_net_radiation == constants.PT_DEFAULT_HOURLY_NET_RADIATION

    def test_zero_values_are_kept(self, clean_env, write_config):
        config = Config(write_config({"models": {"fao_daily": {"min_temp": 0, "wind": 0}}}))
        assert config.fao_daily_defaults.wind == 0

    def test_unknown_model_key(self, clean_env, write_config):
        with pytest.raises(ConfigurationError, match="models.fao_daily.temperature"):
            Config(write_config({"models": {"fao_daily": {"temperature": 10.0}}}))

    def test_unknown_model_section(self, clean_env, write_config):
        with pytest.raises(ConfigurationError, match="hargreaves"):
            Config(write_config({"models": {"hargreaves": {}}}))

    def test_non_numeric_value(self, clean_env, write_config):
        with pytest.raises(ConfigurationError, match="must be numeric"):
            Config(write_config({"models": {"fao_hourly": {"wind": "fast"}}}))

    def test_do_hourly_must_be_boolean(self, clean_env, write_config):
        with pytest.raises(ConfigurationError, match="boolean"):
            Config(write_config({"models": {"priestley_taylor": {"do_hourly": 1}}}))

    def test_env_overrides(self, clean_env, write_config):
        path = write_config({"logging": {"level": "INFO"}})
        clean_env.setenv("CONFIG_FILE", path)
        clean_env.setenv("LOG_LEVEL", "DEBUG")
        clean_env.setenv("ETP_NOVALUE", "-1")
        clean_env.setenv("ETP_TIMESTAMP_FORMAT", "%Y-%m-%d %H:%M")

        config = Config()

        assert config.config_file == path
        assert config.log_level == "DEBUG"
        assert config.novalue == -1.0
        assert config.timestamp_format == "%Y-%m-%d %H:%M"

    def test_invalid_env_novalue(self, clean_env):
        clean_env.setenv("ETP_NOVALUE", "none")
        with pytest.raises(ConfigurationError):
            Config()

    def test_get_dot_notation(self, clean_env, write_config):
        config = Config(write_config({"models": {"fao_daily": {"wind": 1.0}}}))

        assert config.get("models.fao_daily.wind") == 1.0
        assert config.get("models.fao_daily.pressure", 100.0) == 100.0
        assert config.get("models.fao_daily.wind.extra", "x") == "x"
