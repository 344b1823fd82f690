"""Unit tests for configuration loading."""

import json

import pytest
from config import (
    Config,
    LoggingConfig,
    RaceConfig,
    load_config,
)
from core.errors import ConfigError


class TestRaceConfig:
    """Tests for RaceConfig class."""

    def test_default_values(self):
        config = RaceConfig()
        assert config.racer_count == 10
        assert config.tick_delay == 50
        assert config.goal_line == 80
        assert config.seed is None

    def test_with_options(self):
        """start_race option names map onto config fields."""
        config = RaceConfig().with_options({"racers": 20, "goal": 10})
        assert config.racer_count == 20
        assert config.goal_line == 10
        assert config.tick_delay == 50

    def test_with_options_copies(self):
        base = RaceConfig()
        base.with_options({"delay": 0})
        assert base.tick_delay == 50

    def test_with_no_options(self):
        config = RaceConfig(racer_count=3).with_options(None)
        assert config.racer_count == 3

    def test_unknown_option(self):
        with pytest.raises(ConfigError) as info:
            RaceConfig().with_options({"laps": 3})
        assert info.value.context["option"] == "laps"

    def test_validate_returns_self(self):
        config = RaceConfig()
        assert config.validate() is config

    @pytest.mark.parametrize("options, option", [
        ({"racers": 0}, "racers"),
        ({"racers": -2}, "racers"),
        ({"racers": 2.5}, "racers"),
        ({"goal": 0}, "goal"),
        ({"delay": -1}, "delay"),
        ({"delay": "fast"}, "delay"),
        ({"seed": "abc"}, "seed"),
    ])
    def test_validate_rejects(self, options, option):
        with pytest.raises(ConfigError) as info:
            RaceConfig().with_options(options).validate()
        assert info.value.context["option"] == option

    def test_zero_delay_is_valid(self):
        RaceConfig(tick_delay=0).validate()


class TestLoggingConfig:

    def test_default_values(self):
        config = LoggingConfig()
        assert config.level == "INFO"
        assert config.file == "logs/race.log"
        assert config.crash_file == "logs/crash.log"


class TestConfig:

    def test_default_config(self):
        config = Config()
        assert isinstance(config.race, RaceConfig)
        assert isinstance(config.logging, LoggingConfig)

    def test_from_dict_partial(self):
        config = Config.from_dict({"race": {"goal_line": 30}, "logging": {"file": None}})
        assert config.race.goal_line == 30
        assert config.race.racer_count == 10
        assert config.logging.file is None


class TestLoadConfig:

    def test_load_config_reads_bundled_file(self):
        config = load_config()
        assert config.race.racer_count == 10
        assert config.race.tick_delay == 50
        assert config.race.goal_line == 80

    def test_load_config_reads_path(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"race": {"racer_count": 4}}))
        assert load_config(path).race.racer_count == 4

    def test_load_config_missing_file(self, tmp_path):
        config = load_config(tmp_path / "nonexistent.json")
        assert config.race.goal_line == 80

    def test_load_config_bad_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_load_config_unknown_key(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"race": {"laps": 2}}))
        with pytest.raises(ConfigError):
            load_config(path)
